"""Environment-based configuration using pydantic-settings.

Example:
    >>> from option_extra.config import get_settings
    >>> settings = get_settings()
    >>> settings.repr_max_length
    200
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # OPTION_EXTRA_REPR_MAX_LENGTH=80
    # OPTION_EXTRA_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration for the ``option_extra`` logger hierarchy."""

    model_config = SettingsConfigDict(
        env_prefix="OPTION_EXTRA_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class OptionExtraSettings(BaseSettings):
    """Root settings, loaded from ``OPTION_EXTRA_*`` environment variables.

    Example environment variables:
        OPTION_EXTRA_DEBUG=true
        OPTION_EXTRA_REPR_MAX_LENGTH=80
        OPTION_EXTRA_INCLUDE_VALUES_IN_ERRORS=false
        OPTION_EXTRA_LOG_LEVEL=INFO
    """

    model_config = SettingsConfigDict(
        env_prefix="OPTION_EXTRA_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Force DEBUG logging for the library")
    repr_max_length: PositiveInt = Field(default=200, description="Max length of a value repr in panic messages")
    include_values_in_errors: bool = Field(default=True, description="Report offending values in panic messages")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> OptionExtraSettings:
    """Get the process-wide settings instance (cached)."""
    return OptionExtraSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
