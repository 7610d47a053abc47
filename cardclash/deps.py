import re
from typing import Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from .services.auth import SESSION_COOKIE, CredentialVerifier, SessionManager
from .services.store import DeckStore, SessionStore
from .settings import Settings

_INT_RE = re.compile(r"-?[0-9]+")

class TeacherLoginRequired(Exception):
    """Raised by require_teacher; the app turns it into a redirect to /login."""

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_deck_store(request: Request) -> DeckStore:
    return request.app.state.deck_store

def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store

def get_session_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager

def get_verifier(request: Request) -> CredentialVerifier:
    return request.app.state.verifier

def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates

def session_token(request: Request) -> Optional[str]:
    return request.cookies.get(SESSION_COOKIE)

def require_teacher(request: Request) -> None:
    if not get_session_manager(request).is_authenticated(session_token(request)):
        raise TeacherLoginRequired()

def parse_id(raw) -> Optional[int]:
    """Integer id from a path/query/form value; None when it isn't one."""
    if raw is None:
        return None
    text = str(raw).strip()
    # ASCII digits only: no underscores, no leading '+', no other scripts' digits.
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)
