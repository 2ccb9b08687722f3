"""Cache management endpoints."""

import logging

from fastapi import APIRouter, Depends

from ingres_bot.api.dependencies import get_engine
from ingres_bot.api.models import CacheStatsResponse
from ingres_bot.orchestrator.engine import QueryEngine

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/stats", response_model=CacheStatsResponse)
def get_cache_stats(engine: QueryEngine = Depends(get_engine)) -> CacheStatsResponse:
    """Return response cache statistics."""
    if engine.cache is None:
        return CacheStatsResponse(enabled=False)
    return CacheStatsResponse(enabled=True, stats=engine.cache.get_stats())


@router.delete("")
def clear_cache(engine: QueryEngine = Depends(get_engine)) -> dict[str, str]:
    """Invalidate all cached responses."""
    if engine.cache is None:
        return {"message": "Cache is disabled", "status": "skipped"}
    logger.warning("Cache cleared via API request, affects all sessions")
    engine.cache.clear()
    return {"message": "Cache cleared successfully", "status": "success"}


@router.post("/sweep")
def sweep_cache(engine: QueryEngine = Depends(get_engine)) -> dict[str, int | str]:
    """Remove expired entries now instead of waiting for the scheduled sweep."""
    if engine.cache is None:
        return {"removed": 0, "status": "skipped"}
    return {"removed": engine.cache.sweep_expired(), "status": "success"}
