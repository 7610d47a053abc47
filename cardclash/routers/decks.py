from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import PlainTextResponse, RedirectResponse
from loguru import logger

from ..deps import get_deck_store, get_templates, parse_id, require_teacher
from ..services.store import DeckStore
from ..services.validation import DeckValidationError, validate_deck_content
from ..services.views import UNTITLED_DECK

router = APIRouter(prefix="/deck", tags=["deck"], dependencies=[Depends(require_teacher)])

EMPTY_DECK_JSON = "{\n  \"questions\": []\n}"

@router.get("/new")
def new_deck(request: Request, templates=Depends(get_templates)):
    return templates.TemplateResponse(request, "deck.html", {
        "pageTitle": "Create Deck",
        "mode": "create",
        "deck": {"id": None, "title": "", "content_json": EMPTY_DECK_JSON},
    })

@router.get("/{deck_id}/edit")
def edit_deck(
    request: Request,
    deck_id: str,
    decks: DeckStore = Depends(get_deck_store),
    templates=Depends(get_templates),
):
    parsed_id = parse_id(deck_id)
    deck = decks.get_by_id(parsed_id) if parsed_id is not None else None
    if not deck:
        return PlainTextResponse("Deck not found.", status_code=404)

    return templates.TemplateResponse(request, "deck.html", {
        "pageTitle": "Edit Deck",
        "mode": "edit",
        "deck": deck,
    })

@router.post("")
def save_deck(
    deck_id: str = Form("", alias="id"),
    title: str = Form(""),
    content_json: str = Form("", alias="contentJson"),
    decks: DeckStore = Depends(get_deck_store),
):
    title = title.strip() or UNTITLED_DECK
    content_json = content_json.strip() or EMPTY_DECK_JSON

    # Reject the whole deck before anything touches the store.
    try:
        validated = validate_deck_content(content_json)
    except DeckValidationError as e:
        logger.warning(f"[deck] rejected: {e.message}")
        return PlainTextResponse(e.message, status_code=400)

    saved = decks.upsert(parse_id(deck_id), title, validated.raw)
    return RedirectResponse(f"/deck/{saved.id}/edit", status_code=303)
