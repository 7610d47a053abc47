"""
Placeholders for the local Ollama summarizer and the report save path.
Routers await these so a real client can replace them without route changes.
"""
from typing import Any, Dict, Optional

from loguru import logger

SUMMARY_STUB = "AI summary stub — Ollama not connected yet."
SAVE_STUB_NOTE = "Save stub — MySQL not connected yet."

async def summarize(payload: Optional[Dict[str, Any]] = None) -> str:
    logger.info(f"[ai] summarize stub called keys={sorted((payload or {}).keys())}")
    return SUMMARY_STUB

async def save_report(session_id: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    logger.info(f"[ai] save_report stub called session_id={session_id!r}")
    return {"ok": True, "note": SAVE_STUB_NOTE}
