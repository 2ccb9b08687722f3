"""Chat, health and capabilities endpoints."""

import logging
import time
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request

from ingres_bot.api.dependencies import get_engine, get_renderer, get_settings_dependency
from ingres_bot.api.models import CapabilitiesResponse, ChatRequest, ChatResponse, HealthResponse
from ingres_bot.api.response import build_chat_response
from ingres_bot.config.constants import Intent
from ingres_bot.config.intent_patterns import INTENT_PATTERNS
from ingres_bot.config.settings import Settings
from ingres_bot.orchestrator.engine import QueryEngine
from ingres_bot.services.formatting.templates import ResponseRenderer

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
def chat(
    request: ChatRequest,
    engine: QueryEngine = Depends(get_engine),
    renderer: ResponseRenderer = Depends(get_renderer),
) -> dict[str, Any]:
    """Classify a groundwater question and answer it from templates."""
    try:
        result = engine.process_query(request.message, request.session_id)
        return build_chat_response(result, renderer)
    except Exception as e:
        logger.error("Error processing chat request: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error") from e


@router.get("/health", response_model=HealthResponse)
def health(
    request: Request,
    engine: QueryEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings_dependency),
) -> HealthResponse:
    """Health check."""
    cache_stats = engine.cache.stats() if engine.cache is not None else None
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        uptime_seconds=round(time.monotonic() - request.app.state.started_at, 3),
        active_requests=engine.counter.active,
        cache_size=cache_stats.size if cache_stats else 0,
        cache_hit_rate=cache_stats.hit_rate if cache_stats else 0.0,
        intent_types=len(Intent),
        sessions=len(engine.contexts),
    )


CAPABILITIES = (
    "Location-based groundwater queries",
    "Critical and over-exploited area listings",
    "Historical trend analysis",
    "Multi-location comparisons",
    "Policy recommendations",
    "Conservation method suggestions",
    "Technical explanations",
    "Context-aware conversations",
    "Fuzzy matching of misspelled place names",
    "Confidence scoring with clarification prompts",
)


@router.get("/capabilities", response_model=CapabilitiesResponse)
def capabilities(renderer: ResponseRenderer = Depends(get_renderer)) -> CapabilitiesResponse:
    """List what the assistant can answer."""
    return CapabilitiesResponse(
        capabilities=list(CAPABILITIES),
        total_intents=len(Intent),
        pattern_count=len(INTENT_PATTERNS),
        states_with_data=len(renderer.repository.states()),
    )
