from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse
from loguru import logger

from ..deps import (
    get_deck_store, get_session_store, get_settings, get_templates, parse_id, require_teacher,
)
from ..services.store import DeckStore, SessionStore
from ..services.views import build_dashboard, session_detail, summarize_session

router = APIRouter()

@router.get("/")
def index(request: Request, templates=Depends(get_templates)):
    return templates.TemplateResponse(request, "index.html", {"pageTitle": "Card Clash"})

@router.get("/join")
def join(request: Request, templates=Depends(get_templates), settings=Depends(get_settings)):
    # Students play without logging in.
    return templates.TemplateResponse(request, "student.html", {
        "pageTitle": "Join Game",
        "unityPath": settings.UNITY_PATH,
    })

@router.get("/game/play", dependencies=[Depends(require_teacher)])
def play(
    request: Request,
    deckID: Optional[str] = Query(None),
    decks: DeckStore = Depends(get_deck_store),
    templates=Depends(get_templates),
    settings=Depends(get_settings),
):
    deck_id = parse_id(deckID)
    deck = decks.get_by_id(deck_id) if deck_id is not None else None
    if not deck:
        deck = decks.first()
    if not deck:
        return PlainTextResponse("No decks available. Please create a deck first.", status_code=404)

    logger.info(f"[game] launching deck id={deck.id}")
    return templates.TemplateResponse(request, "game.html", {
        "pageTitle": "Launch Game",
        "deck": deck,
        "unityPath": settings.UNITY_PATH,
    })

@router.get("/dashboard", dependencies=[Depends(require_teacher)])
def dashboard(
    request: Request,
    decks: DeckStore = Depends(get_deck_store),
    sessions: SessionStore = Depends(get_session_store),
    templates=Depends(get_templates),
):
    view = build_dashboard(decks.list(), sessions.list())
    return templates.TemplateResponse(request, "dashboard.html", {
        "pageTitle": "Dashboard",
        "decks": view.decks,
        "sessions": view.sessions,
    })

@router.get("/sessions", dependencies=[Depends(require_teacher)])
def sessions_page(
    request: Request,
    sessions: SessionStore = Depends(get_session_store),
    templates=Depends(get_templates),
):
    return templates.TemplateResponse(request, "sessions.html", {
        "pageTitle": "Sessions",
        "sessions": [summarize_session(s) for s in sessions.list()],
    })

@router.get("/report/{report_id}", dependencies=[Depends(require_teacher)])
def report(
    request: Request,
    report_id: str,
    sessions: SessionStore = Depends(get_session_store),
    templates=Depends(get_templates),
):
    session_id = parse_id(report_id)
    session = sessions.get_by_id(session_id) if session_id is not None else None
    if not session:
        return PlainTextResponse("Report not found.", status_code=404)

    return templates.TemplateResponse(request, "report.html", {
        "pageTitle": "Session Report",
        "session": session_detail(session),
    })
