"""Standardized response builder for ChatResponse."""

from typing import Any

from ingres_bot.api.models import ChatResponse
from ingres_bot.config.constants import INVALID_INPUT_PROMPT, QueryStatus
from ingres_bot.config.message import ERROR_MESSAGES
from ingres_bot.orchestrator.state import QueryResult
from ingres_bot.services.formatting.templates import RenderedAnswer, ResponseRenderer


def build_chat_response(result: QueryResult, renderer: ResponseRenderer) -> dict[str, Any]:
    """Build a ChatResponse-compatible dict with Pydantic validation."""
    if result.status is QueryStatus.REJECTED:
        answer = RenderedAnswer(INVALID_INPUT_PROMPT)
    elif result.status is QueryStatus.FAILED:
        answer = RenderedAnswer(ERROR_MESSAGES["failed"])
    else:
        answer = renderer.answer(result.intent, result.location, result.raw_input)

    fields: dict[str, Any] = {
        "message": answer.text,
        "intent": result.intent.value,
        "confidence": round(result.confidence, 4),
        "processing_time_ms": round(result.processing_time_ms, 3),
        "has_data": answer.has_data,
        "location": result.location,
        "requires_clarification": result.requires_clarification,
        "clarification_question": result.clarification_text,
        "from_cache": result.from_cache,
        "session_id": result.session_id,
        "status": result.status.value,
    }
    return ChatResponse(**fields).model_dump()
