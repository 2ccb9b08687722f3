"""FastAPI dependencies."""

from fastapi import Request

from ingres_bot.config.settings import Settings
from ingres_bot.orchestrator.engine import QueryEngine
from ingres_bot.services.formatting.templates import ResponseRenderer


def get_settings_dependency(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_engine(request: Request) -> QueryEngine:
    """Engine built by the application lifespan."""
    return request.app.state.engine


def get_renderer(request: Request) -> ResponseRenderer:
    return request.app.state.renderer
