"""Tests for the background maintenance loop."""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from ingres_bot.app import _run_maintenance
from ingres_bot.config.constants import Intent
from ingres_bot.orchestrator.state import QueryResult


async def test_maintenance_sweeps_cache_and_sessions(engine, clock, settings):
    engine.cache.put("s1_Hello", QueryResult(raw_input="Hello", intent=Intent.GREETING, confidence=0.9))
    engine.contexts.get_or_create("idle").last_active -= settings.session_ttl_seconds + 1
    clock.advance(settings.cache_ttl_seconds + 1)

    sleep = AsyncMock(side_effect=[None, asyncio.CancelledError()])
    with patch("ingres_bot.app.asyncio.sleep", sleep):
        with pytest.raises(asyncio.CancelledError):
            await _run_maintenance(engine, settings)

    sleep.assert_awaited_with(settings.cache_sweep_interval_seconds)
    assert len(engine.cache) == 0
    assert engine.contexts.get("idle") is None


async def test_maintenance_survives_errors(engine, settings):
    sleep = AsyncMock(side_effect=[None, None, asyncio.CancelledError()])
    with patch("ingres_bot.app.asyncio.sleep", sleep), patch.object(
        engine.cache, "sweep_expired", side_effect=RuntimeError("boom")
    ) as sweep:
        with pytest.raises(asyncio.CancelledError):
            await _run_maintenance(engine, settings)

    assert sweep.call_count == 2
