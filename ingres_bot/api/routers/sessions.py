"""Conversation session endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ingres_bot.api.dependencies import get_engine
from ingres_bot.api.models import SessionResponse
from ingres_bot.orchestrator.engine import QueryEngine

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{session_id}", response_model=SessionResponse)
def get_session(session_id: str, engine: QueryEngine = Depends(get_engine)) -> SessionResponse:
    """Summarize a session's conversation context."""
    if engine.contexts.get(session_id) is None:
        raise HTTPException(status_code=404, detail="Session not found")
    with engine.contexts.session_guard(session_id):
        context = engine.contexts.get(session_id)
        if context is None:
            raise HTTPException(status_code=404, detail="Session not found")
        return SessionResponse(**context.to_summary())


@router.delete("/{session_id}")
def delete_session(session_id: str, engine: QueryEngine = Depends(get_engine)) -> dict[str, str]:
    """Destroy a session's conversation context."""
    if not engine.contexts.destroy(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"message": f"Session {session_id} destroyed", "status": "success"}
