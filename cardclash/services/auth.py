# cardclash/services/auth.py
from __future__ import annotations

import secrets
import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional, Protocol

from jose import JWTError, jwt
from loguru import logger

from ..settings import Settings

SESSION_COOKIE = "cardclash_session"
ALGORITHM = "HS256"

class CredentialVerifier(Protocol):
    def verify(self, username: str, password: str) -> bool: ...

class SettingsCredentialVerifier:
    """
    Single admin login compared against ADMIN_USERNAME / ADMIN_PASSWORD.
    Replace with a hashed lookup against a users table once one exists.
    """

    def __init__(self, settings: Settings):
        self._username = settings.ADMIN_USERNAME
        self._password = settings.ADMIN_PASSWORD

    def verify(self, username: str, password: str) -> bool:
        # Both comparisons always run so timing doesn't reveal which field was wrong.
        user_ok = secrets.compare_digest((username or "").encode(), self._username.encode())
        pass_ok = secrets.compare_digest((password or "").encode(), self._password.encode())
        return user_ok and pass_ok

class SessionManager:
    """
    Server-side registry of authenticated sessions.

    The browser only holds a signed token carrying the session id (``sid``);
    whether that session is authenticated lives here, so logout revokes it
    even if the token is replayed.
    """

    def __init__(self, secret: str, ttl_minutes: int = 480, clock: Optional[Callable[[], datetime]] = None):
        self._secret = secret
        self._ttl = timedelta(minutes=ttl_minutes) if ttl_minutes > 0 else timedelta(days=1)
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._lock = threading.Lock()
        self._sessions: Dict[str, dict] = {}

    def issue(self, username: str) -> str:
        sid = uuid.uuid4().hex
        now = self._clock()
        expires_at = now + self._ttl
        with self._lock:
            self._purge_expired(now)
            self._sessions[sid] = {
                "authenticated": True,
                "username": username,
                "created_at": now,
                "expires_at": expires_at,
            }
        return jwt.encode({"sid": sid, "exp": expires_at}, self._secret, algorithm=ALGORITHM)

    # lock must be held by the caller
    def _purge_expired(self, now: datetime) -> None:
        expired = [sid for sid, record in self._sessions.items() if record["expires_at"] <= now]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.info(f"[auth] purged {len(expired)} expired session(s)")

    def _sid(self, token: Optional[str]) -> Optional[str]:
        if not token:
            return None
        try:
            payload = jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except JWTError as e:
            logger.warning(f"[auth] session token rejected: {e}")
            return None
        return payload.get("sid")

    def resolve(self, token: Optional[str]) -> Optional[dict]:
        sid = self._sid(token)
        if not sid:
            return None
        with self._lock:
            record = self._sessions.get(sid)
            if not record:
                return None
            if record["expires_at"] <= self._clock():
                del self._sessions[sid]
                return None
            return dict(record)

    def is_authenticated(self, token: Optional[str]) -> bool:
        record = self.resolve(token)
        return bool(record and record.get("authenticated"))

    def revoke(self, token: Optional[str]) -> bool:
        sid = self._sid(token)
        if not sid:
            return False
        with self._lock:
            return self._sessions.pop(sid, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
