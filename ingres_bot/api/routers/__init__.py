"""API sub-routers assembled into a single api_router."""

from fastapi import APIRouter

from ingres_bot.api.routers.cache import router as cache_router
from ingres_bot.api.routers.chat import router as chat_router
from ingres_bot.api.routers.sessions import router as sessions_router

api_router = APIRouter()

api_router.include_router(chat_router, tags=["chat"])
api_router.include_router(cache_router, prefix="/cache", tags=["cache"])
api_router.include_router(sessions_router, prefix="/sessions", tags=["sessions"])
