from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from loguru import logger
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from .deps import TeacherLoginRequired
from .routers import ai, auth, decks, pages
from .services.auth import CredentialVerifier, SessionManager, SettingsCredentialVerifier
from .services.store import DeckStore, SessionStore, seeded_deck_store, seeded_session_store
from .settings import Settings, settings as default_settings

PACKAGE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

# Unity WebGL exports .br files; the browser only decodes them with these headers.
BROTLI_TYPES = {
    ".wasm.br": "application/wasm",
    ".js.br": "application/javascript",
    ".data.br": "application/octet-stream",
}

# ---------- logging ----------
def configure_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(
        lambda msg: print(msg, end=""),
        format="{time:YYYY-MM-DD HH:mm:ss} | {level:<8} | {message}",
        level=level.upper(),
    )

def check_startup(settings: Settings) -> None:
    if settings.is_production and not settings.SESSION_SECRET:
        logger.critical("FATAL: SESSION_SECRET environment variable is not set. Refusing to start in production.")
        sys.exit(1)

def create_app(
    settings: Optional[Settings] = None,
    *,
    deck_store: Optional[DeckStore] = None,
    session_store: Optional[SessionStore] = None,
    verifier: Optional[CredentialVerifier] = None,
) -> FastAPI:
    settings = settings or default_settings
    check_startup(settings)

    app = FastAPI(title="Card Clash", version="1.0.0")
    app.state.settings = settings
    app.state.deck_store = deck_store if deck_store is not None else seeded_deck_store()
    app.state.session_store = session_store if session_store is not None else seeded_session_store()
    app.state.verifier = verifier or SettingsCredentialVerifier(settings)
    app.state.session_manager = SessionManager(settings.session_secret, settings.SESSION_TTL_MINUTES)
    app.state.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

    # ---------- limiter ----------
    app.state.limiter = Limiter(key_func=get_remote_address, default_limits=[settings.RATE_LIMIT])
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # ---------- middleware ----------
    @app.middleware("http")
    async def attach_brotli_headers(request: Request, call_next):
        response = await call_next(request)
        path = request.url.path
        if not path.endswith(".br"):
            return response

        response.headers["Content-Encoding"] = "br"
        response.headers["Vary"] = "Accept-Encoding"
        for suffix, media_type in BROTLI_TYPES.items():
            if path.endswith(suffix):
                response.headers["Content-Type"] = media_type
                break
        return response

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.time()
        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                f"{request.method} {request.url.path} - Status: 500 - "
                f"Duration: {time.time() - start:.3f}s"
            )
            raise
        logger.info(
            f"{request.method} {request.url.path} - Status: {response.status_code} - "
            f"Duration: {time.time() - start:.3f}s"
        )
        return response

    # ---------- error handlers ----------
    @app.exception_handler(TeacherLoginRequired)
    async def redirect_to_login(request: Request, exc: TeacherLoginRequired):
        return RedirectResponse("/login", status_code=302)

    @app.exception_handler(Exception)
    async def internal_failure(request: Request, exc: Exception):
        logger.opt(exception=exc).error(f"Unhandled error on {request.method} {request.url.path}")
        if request.url.path.startswith("/api/"):
            return JSONResponse({"error": "Internal server error."}, status_code=500)
        return PlainTextResponse("Something went wrong. Please try again.", status_code=500)

    # ---------- health ----------
    @app.get("/health")
    def health():
        return {
            "ok": True,
            "decks": len(app.state.deck_store),
            "sessions": len(app.state.session_store),
            "https": settings.HTTPS_ENABLED,
        }

    # ---------- routers / static ----------
    app.include_router(pages.router, tags=["pages"])
    app.include_router(auth.router)
    app.include_router(decks.router)
    app.include_router(ai.router)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    return app

configure_logging(default_settings.LOG_LEVEL)
app = create_app()
