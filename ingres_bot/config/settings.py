"""Application settings using Pydantic BaseSettings."""

import logging
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "INGRES Groundwater Assistant"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    json_logs: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_VALID_LOG_LEVELS}, got '{v}'")
        return upper

    @model_validator(mode="after")
    def validate_sizes_positive(self) -> "Settings":
        for field_name in (
            "cache_max_size",
            "cache_ttl_seconds",
            "cache_sweep_interval_seconds",
            "history_size",
            "session_ttl_seconds",
        ):
            value = getattr(self, field_name)
            if value <= 0:
                raise ValueError(f"{field_name} must be positive, got {value}")
        return self

    @model_validator(mode="after")
    def validate_thresholds(self) -> "Settings":
        for field_name in ("clarification_threshold", "cache_write_threshold"):
            value = getattr(self, field_name)
            if not 0.0 <= value <= 2.0:
                raise ValueError(f"{field_name} must be within [0, 2], got {value}")
        return self

    @model_validator(mode="after")
    def warn_wildcard_origins(self) -> "Settings":
        if self.allowed_origins == ["*"]:
            logging.getLogger(__name__).warning(
                "allowed_origins is set to ['*'], consider restricting in production"
            )
        return self

    # CORS
    allowed_origins: list[str] = ["*"]

    # Response cache
    cache_enabled: bool = True
    cache_max_size: int = 100
    cache_ttl_seconds: int = 1800
    cache_sweep_interval_seconds: int = 300

    # Conversation context
    history_size: int = 10
    session_ttl_seconds: int = 3600

    # Engine thresholds
    clarification_threshold: float = 0.5
    cache_write_threshold: float = 0.7


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
