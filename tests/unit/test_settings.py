"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from ingres_bot.config.settings import Settings, get_settings


def test_defaults():
    settings = Settings()
    assert settings.cache_enabled is True
    assert settings.cache_max_size == 100
    assert settings.cache_ttl_seconds == 1800
    assert settings.history_size == 10
    assert settings.clarification_threshold == 0.5
    assert settings.cache_write_threshold == 0.7


def test_log_level_is_normalized():
    assert Settings(log_level="debug").log_level == "DEBUG"


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        Settings(log_level="verbose")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"cache_max_size": 0},
        {"cache_ttl_seconds": -5},
        {"history_size": 0},
        {"clarification_threshold": 3.0},
        {"cache_write_threshold": -0.1},
    ],
)
def test_invalid_limits(kwargs):
    with pytest.raises(ValidationError):
        Settings(**kwargs)


def test_environment_override(monkeypatch):
    monkeypatch.setenv("CACHE_MAX_SIZE", "25")
    monkeypatch.setenv("CACHE_ENABLED", "false")
    settings = Settings()
    assert settings.cache_max_size == 25
    assert settings.cache_enabled is False


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
