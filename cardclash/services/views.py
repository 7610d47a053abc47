import json
from typing import Iterable, Optional

from ..schemas import (
    DashboardView, Deck, DeckSummary, GameSession, SessionDetail, SessionMetrics, SessionSummary,
)

UNTITLED_DECK = "Untitled Deck"
UNKNOWN_DATE = "Unknown date"

def count_questions(content_json: str) -> int:
    """Read-time question count. Bad content counts as zero instead of raising."""
    try:
        parsed = json.loads(content_json)
    except Exception:
        return 0
    if isinstance(parsed, dict) and isinstance(parsed.get("questions"), list):
        return len(parsed["questions"])
    return 0

def format_session_date(raw_date: Optional[str]) -> str:
    # Passed through as-is for now; dates are display strings only.
    if not raw_date:
        return UNKNOWN_DATE
    return raw_date

def _metrics(session: GameSession) -> SessionMetrics:
    return session.metrics.model_copy() if session.metrics else SessionMetrics()

def _paragraphs(session: GameSession) -> list[str]:
    return list(session.summary_paragraphs) if isinstance(session.summary_paragraphs, list) else []

def summarize_deck(deck: Deck) -> DeckSummary:
    return DeckSummary(id=deck.id, title=deck.title, question_count=count_questions(deck.content_json))

def summarize_session(session: GameSession) -> SessionSummary:
    paragraphs = _paragraphs(session)
    return SessionSummary(
        id=session.id,
        deck_id=session.deck_id,
        deck_title=session.deck_title or UNTITLED_DECK,
        created_at=format_session_date(session.created_at),
        summary_preview=paragraphs[0] if paragraphs else None,
        metrics=_metrics(session),
    )

def session_detail(session: GameSession) -> SessionDetail:
    return SessionDetail(
        id=session.id,
        deck_title=session.deck_title or UNTITLED_DECK,
        created_at=format_session_date(session.created_at),
        summary_paragraphs=_paragraphs(session),
        metrics=_metrics(session),
    )

def join_summary(session: GameSession) -> str:
    return "\n\n".join(_paragraphs(session))

def build_dashboard(decks: Iterable[Deck], sessions: Iterable[GameSession]) -> DashboardView:
    return DashboardView(
        decks=[summarize_deck(d) for d in decks],
        sessions=[summarize_session(s) for s in sessions],
    )
