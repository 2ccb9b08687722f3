"""FastAPI application entry point."""

import asyncio
import contextlib
import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from ingres_bot.api.routers import api_router
from ingres_bot.config.settings import Settings, get_settings
from ingres_bot.infrastructure.logging.logger import setup_logging
from ingres_bot.orchestrator.engine import QueryEngine
from ingres_bot.services.formatting.templates import ResponseRenderer

logger = logging.getLogger(__name__)


async def _run_maintenance(engine: QueryEngine, settings: Settings) -> None:
    """Expire cache entries and idle sessions on a fixed interval."""
    while True:
        await asyncio.sleep(settings.cache_sweep_interval_seconds)
        try:
            if engine.cache is not None:
                engine.cache.sweep_expired()
            engine.contexts.cleanup_idle(settings.session_ttl_seconds)
        except Exception as e:
            logger.error("Maintenance sweep failed: %s", e, exc_info=True)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup and shutdown lifecycle."""
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.app_name} {settings.app_version}")

    app.state.engine = QueryEngine(settings)
    app.state.renderer = ResponseRenderer()
    app.state.started_at = time.monotonic()
    maintenance = asyncio.create_task(_run_maintenance(app.state.engine, settings))

    yield

    logger.info(f"Shutting down {settings.app_name}")
    maintenance.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await maintenance


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or get_settings()

    application = FastAPI(
        title=settings.app_name,
        description="Groundwater query understanding and session engine",
        version=settings.app_version,
        lifespan=lifespan,
    )
    application.state.settings = settings

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials="*" not in settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(ProxyHeadersMiddleware, trusted_hosts=["*"])

    application.include_router(api_router, prefix="/api")
    return application


_settings = get_settings()

setup_logging(
    level=_settings.log_level,
    json_output=_settings.json_logs,
    silence_noisy_loggers=True,
)

app = create_app(_settings)
