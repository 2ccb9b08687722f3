"""Tests for the bounded response cache."""

import threading

import pytest

from ingres_bot.config.constants import Intent
from ingres_bot.infrastructure.cache.bounded_cache import CacheStats, ResponseCache
from ingres_bot.orchestrator.state import QueryResult


def _result(raw: str = "Hello", intent: Intent = Intent.GREETING) -> QueryResult:
    return QueryResult(raw_input=raw, intent=intent, confidence=0.9, locations_found=["punjab"])


def test_round_trip_returns_distinct_equal_object(clock):
    cache = ResponseCache(clock=clock)
    value = _result()
    cache.put("k", value)
    got = cache.get("k")
    assert got == value
    assert got is not value


def test_mutating_returned_value_does_not_touch_cache(clock):
    cache = ResponseCache(clock=clock)
    cache.put("k", _result())
    first = cache.get("k")
    first.locations_found.append("haryana")
    first.intent = Intent.HELP
    second = cache.get("k")
    assert second.locations_found == ["punjab"]
    assert second.intent is Intent.GREETING


def test_put_stores_a_copy(clock):
    cache = ResponseCache(clock=clock)
    value = _result()
    cache.put("k", value)
    value.intent = Intent.HELP
    assert cache.get("k").intent is Intent.GREETING


def test_miss_returns_none(clock):
    assert ResponseCache(clock=clock).get("missing") is None


def test_fifo_eviction_ignores_reads(clock):
    cache = ResponseCache(max_size=3, clock=clock)
    for key in ("a", "b", "c"):
        cache.put(key, _result(key))
    cache.get("a")
    cache.put("d", _result("d"))
    assert len(cache) == 3
    assert "a" not in cache
    assert all(key in cache for key in ("b", "c", "d"))


def test_reinsert_moves_key_to_tail(clock):
    cache = ResponseCache(max_size=3, clock=clock)
    for key in ("a", "b", "c"):
        cache.put(key, _result(key))
    cache.put("a", _result("a2"))
    cache.put("d", _result("d"))
    assert "b" not in cache
    assert cache.get("a").raw_input == "a2"
    assert len(cache) == 3


def test_entry_live_before_ttl(clock):
    cache = ResponseCache(ttl_seconds=100, clock=clock)
    cache.put("k", _result())
    clock.advance(99)
    assert cache.get("k") is not None


def test_entry_expires_after_ttl(clock):
    cache = ResponseCache(ttl_seconds=100, clock=clock)
    cache.put("k", _result())
    clock.advance(101)
    assert cache.get("k") is None
    assert "k" not in cache


def test_entry_expires_exactly_at_ttl(clock):
    cache = ResponseCache(ttl_seconds=100, clock=clock)
    cache.put("k", _result())
    clock.advance(100)
    assert cache.get("k") is None


def test_sweep_expired(clock):
    cache = ResponseCache(ttl_seconds=100, clock=clock)
    cache.put("old", _result())
    clock.advance(50)
    cache.put("new", _result())
    clock.advance(60)
    assert cache.sweep_expired() == 1
    assert "old" not in cache
    assert "new" in cache
    assert cache.sweep_expired() == 0


def test_stats_hit_rate(clock):
    cache = ResponseCache(clock=clock)
    assert cache.stats() == CacheStats(hit_rate=0.0, size=0)
    cache.put("a", _result())
    cache.get("a")
    cache.get("a")
    assert cache.stats().hit_rate == pytest.approx(2 / 3)
    cache.put("b", _result())
    assert cache.stats() == CacheStats(hit_rate=pytest.approx(0.5), size=2)


def test_get_stats(clock):
    cache = ResponseCache(max_size=5, ttl_seconds=60, clock=clock)
    cache.put("a", _result())
    cache.get("a")
    stats = cache.get_stats()
    assert stats["size"] == 1
    assert stats["total_accesses"] == 2
    assert stats["hit_rate"] == 0.5
    assert stats["max_size"] == 5
    assert stats["ttl_seconds"] == 60


def test_clear_and_delete(clock):
    cache = ResponseCache(clock=clock)
    cache.put("a", _result())
    cache.put("b", _result())
    assert cache.delete("a") is True
    assert cache.delete("a") is False
    cache.clear()
    assert len(cache) == 0


@pytest.mark.parametrize("kwargs", [{"max_size": 0}, {"ttl_seconds": 0}, {"max_size": -1}])
def test_rejects_non_positive_limits(kwargs):
    with pytest.raises(ValueError):
        ResponseCache(**kwargs)


def test_concurrent_puts_respect_capacity():
    cache = ResponseCache(max_size=10)

    def worker(prefix: str) -> None:
        for i in range(200):
            cache.put(f"{prefix}-{i}", _result(f"{prefix}-{i}"))
            cache.get(f"{prefix}-{i}")

    threads = [threading.Thread(target=worker, args=(str(n),)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(cache) == 10
