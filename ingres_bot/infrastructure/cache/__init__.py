"""Cache infrastructure module."""

from ingres_bot.infrastructure.cache.bounded_cache import CacheEntry, CacheStats, ResponseCache

__all__ = [
    "CacheEntry",
    "CacheStats",
    "ResponseCache",
]
