from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from loguru import logger

from ..deps import get_session_manager, get_settings, get_templates, get_verifier, session_token
from ..services.auth import SESSION_COOKIE, CredentialVerifier, SessionManager

router = APIRouter(tags=["auth"])

LOGIN_ERROR = "Invalid username or password."

def _login_page(request: Request, templates, error_message=None, status_code=200):
    return templates.TemplateResponse(
        request,
        "login.html",
        {"pageTitle": "Teacher Login", "errorMessage": error_message},
        status_code=status_code,
    )

@router.get("/login")
def login_form(request: Request, templates=Depends(get_templates)):
    return _login_page(request, templates)

@router.post("/login")
def login(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    verifier: CredentialVerifier = Depends(get_verifier),
    manager: SessionManager = Depends(get_session_manager),
    templates=Depends(get_templates),
    settings=Depends(get_settings),
):
    if not verifier.verify(username, password):
        logger.warning("[auth] login failed")
        return _login_page(request, templates, LOGIN_ERROR, status_code=401)

    # Drop any session the browser already had before issuing a new one.
    manager.revoke(session_token(request))
    token = manager.issue(username)
    logger.info(f"[auth] login ok user={username!r}")

    response = RedirectResponse("/dashboard", status_code=303)
    response.set_cookie(
        SESSION_COOKIE,
        token,
        max_age=settings.SESSION_TTL_MINUTES * 60,
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )
    return response

@router.post("/logout")
def logout(request: Request, manager: SessionManager = Depends(get_session_manager)):
    if manager.revoke(session_token(request)):
        logger.info("[auth] logout")
    response = RedirectResponse("/login", status_code=303)
    response.delete_cookie(SESSION_COOKIE)
    return response
