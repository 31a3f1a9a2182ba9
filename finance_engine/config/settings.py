"""
Settings for the projection engine.

Loaded from environment variables prefixed with ``FINANCE_ENGINE_`` and an
optional ``.env`` file. The engine reads them once per process.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """Formatting and logging knobs shared by every calculator."""

    model_config = SettingsConfigDict(
        env_prefix="FINANCE_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Root log level")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Format string handed to logging.basicConfig",
    )

    money_places: int = Field(
        default=2,
        ge=0,
        le=6,
        description="Decimal places for every currency figure",
    )
    percentage_places: int = Field(
        default=1,
        ge=0,
        le=6,
        description="Decimal places for funding percentages",
    )
    default_category: str = Field(
        default="Other",
        min_length=1,
        description="Category assigned to net-worth items without one",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unknown log level {v!r}")
        return level


@lru_cache()
def get_settings() -> EngineSettings:
    """
    Get engine settings (cached).

    Call get_settings.cache_clear() to reload after changing the environment.
    """
    return EngineSettings()
