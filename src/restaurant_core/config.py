"""Pydantic-based settings for restaurant-core.

Only the entrypoints read settings; the domain layer never does.
Values come from RESTAURANT_* environment variables.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Runtime settings for the exercise runner."""

    model_config = SettingsConfigDict(env_prefix="RESTAURANT_", extra="ignore")

    log_level: str = Field(default="INFO", description="Minimum level for emitted log events")
    log_format: Literal["console", "json"] = Field(
        default="console", description="Render logs for humans (console) or machines (json)"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {v!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide Settings, read once from the environment."""
    return Settings()
