"""Pytest configuration and fixtures."""

import pytest

from ingres_bot.config.settings import Settings
from ingres_bot.infrastructure.cache.bounded_cache import ResponseCache
from ingres_bot.orchestrator.engine import QueryEngine


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def settings():
    """Provide settings fixture."""
    return Settings()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def engine(settings, clock):
    """Engine whose cache runs on the fake clock."""
    cache = ResponseCache(
        max_size=settings.cache_max_size,
        ttl_seconds=settings.cache_ttl_seconds,
        clock=clock,
    )
    return QueryEngine(settings, cache=cache)
