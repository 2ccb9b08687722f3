"""Bounded response cache with TTL expiry and FIFO eviction."""

import copy
import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, NamedTuple, Protocol, TypeVar

logger = logging.getLogger(__name__)


class Cloneable(Protocol):
    def clone(self) -> Any: ...


T = TypeVar("T", bound=Cloneable)


@dataclass
class CacheEntry(Generic[T]):
    key: str
    value: T
    timestamp: float
    access_count: int = 1


class CacheStats(NamedTuple):
    hit_rate: float
    size: int


class ResponseCache(Generic[T]):
    """Thread-safe cache with max size and TTL.

    Eviction is FIFO on insertion order, not LRU: reads never move an entry.
    Values are copied on write and cloned on read so callers never share
    state with the cache.
    """

    def __init__(
        self,
        max_size: int = 100,
        ttl_seconds: float = 1800,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        self._max_size = max_size
        self._ttl = ttl_seconds
        self._clock = clock
        self._cache: OrderedDict[str, CacheEntry[T]] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def get(self, key: str) -> T | None:
        """Return a clone of the live value for key, or None on miss or expiry."""
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                logger.debug(f"Cache miss: {key}")
                return None
            if self._clock() - entry.timestamp >= self._ttl:
                del self._cache[key]
                logger.debug(f"Cache entry expired: {key}")
                return None
            entry.access_count += 1
            logger.debug(f"Cache hit: {key} (accesses={entry.access_count})")
            return entry.value.clone()

    def put(self, key: str, value: T) -> None:
        """Insert value under key, evicting the oldest entry when full.

        Re-inserting an existing key counts as a new insertion at the tail.
        """
        with self._lock:
            self._cache.pop(key, None)
            if len(self._cache) >= self._max_size:
                evicted, _ = self._cache.popitem(last=False)
                logger.debug(f"Cache full, evicted oldest entry: {evicted}")
            self._cache[key] = CacheEntry(
                key=key,
                value=copy.copy(value),
                timestamp=self._clock(),
            )

    def delete(self, key: str) -> bool:
        with self._lock:
            if key in self._cache:
                del self._cache[key]
                return True
            return False

    def sweep_expired(self) -> int:
        """Remove every expired entry. Returns how many were removed."""
        with self._lock:
            now = self._clock()
            expired = [
                key for key, entry in self._cache.items()
                if now - entry.timestamp >= self._ttl
            ]
            for key in expired:
                del self._cache[key]
        if expired:
            logger.info(f"Swept {len(expired)} expired cache entries")
        return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def stats(self) -> CacheStats:
        """Hit rate is repeat accesses over total accesses across live entries."""
        with self._lock:
            return CacheStats(hit_rate=self._hit_rate(), size=len(self._cache))

    def get_stats(self) -> dict[str, Any]:
        with self._lock:
            return {
                "size": len(self._cache),
                "hit_rate": round(self._hit_rate(), 4),
                "total_accesses": sum(e.access_count for e in self._cache.values()),
                "max_size": self._max_size,
                "ttl_seconds": self._ttl,
            }

    def _hit_rate(self) -> float:
        total = sum(entry.access_count for entry in self._cache.values())
        if total == 0:
            return 0.0
        repeats = sum(max(entry.access_count - 1, 0) for entry in self._cache.values())
        return repeats / total

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache
