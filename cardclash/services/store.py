from __future__ import annotations

import threading
from typing import Iterable, List, Optional

from loguru import logger

from ..schemas import Deck, GameSession
from .seed import SEED_DECKS, SEED_SESSIONS

class DeckStore:
    """
    In-memory deck collection, insertion ordered.

    One lock per store: list/get/upsert are each atomic, so the max+1 id
    assignment cannot hand out the same id to two concurrent creates.
    """

    def __init__(self, decks: Iterable[dict | Deck] = ()):
        self._lock = threading.Lock()
        self._decks: List[Deck] = [Deck.model_validate(d) for d in decks]

    def list(self) -> List[Deck]:
        with self._lock:
            return [d.model_copy() for d in self._decks]

    def first(self) -> Optional[Deck]:
        with self._lock:
            return self._decks[0].model_copy() if self._decks else None

    def get_by_id(self, deck_id: int) -> Optional[Deck]:
        with self._lock:
            found = self._find(deck_id)
            return found.model_copy() if found else None

    def upsert(self, deck_id: Optional[int], title: str, content_json: str) -> Deck:
        """Caller validates content_json first; nothing here checks it."""
        with self._lock:
            if isinstance(deck_id, int) and deck_id > 0:
                existing = self._find(deck_id)
                if existing:
                    existing.title = title
                    existing.content_json = content_json
                    logger.info(f"[deck] updated id={existing.id}")
                    return existing.model_copy()

            deck = Deck(id=self._next_id(), title=title, content_json=content_json)
            self._decks.append(deck)
            logger.info(f"[deck] created id={deck.id}")
            return deck.model_copy()

    def __len__(self) -> int:
        with self._lock:
            return len(self._decks)

    # lock must be held by the caller
    def _find(self, deck_id: int) -> Optional[Deck]:
        for d in self._decks:
            if d.id == deck_id:
                return d
        return None

    def _next_id(self) -> int:
        return max((d.id for d in self._decks), default=0) + 1

class SessionStore:
    """Read-only collection of finished game sessions."""

    def __init__(self, sessions: Iterable[dict | GameSession] = ()):
        self._lock = threading.Lock()
        self._sessions: List[GameSession] = [GameSession.model_validate(s) for s in sessions]

    def list(self) -> List[GameSession]:
        with self._lock:
            return [s.model_copy(deep=True) for s in self._sessions]

    def get_by_id(self, session_id: int) -> Optional[GameSession]:
        with self._lock:
            for s in self._sessions:
                if s.id == session_id:
                    return s.model_copy(deep=True)
            return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

def seeded_deck_store() -> DeckStore:
    return DeckStore(SEED_DECKS)

def seeded_session_store() -> SessionStore:
    return SessionStore(SEED_SESSIONS)
