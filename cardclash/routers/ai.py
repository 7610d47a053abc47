from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..deps import get_session_store, parse_id, require_teacher
from ..services import llm
from ..services.store import SessionStore
from ..services.views import join_summary

router = APIRouter(prefix="/api/ai", tags=["ai"], dependencies=[Depends(require_teacher)])

async def _json_body(request: Request) -> dict:
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}

@router.post("/summarize")
async def summarize(request: Request):
    summary = await llm.summarize(await _json_body(request))
    return {"summary": summary}

@router.get("/report/{session_id}")
def get_report(session_id: str, sessions: SessionStore = Depends(get_session_store)):
    parsed_id = parse_id(session_id)
    session = sessions.get_by_id(parsed_id) if parsed_id is not None else None
    if not session:
        return JSONResponse({"error": "Session not found."}, status_code=404)
    return {"sessionID": parsed_id, "summary": join_summary(session)}

@router.post("/report/{session_id}")
async def save_report(session_id: str, request: Request):
    return await llm.save_report(session_id, await _json_body(request))
