"""Environment-based configuration using pydantic-settings.

Example:
    >>> from resultvalue.settings import get_settings
    >>> get_settings().unwrap_message
    'Cannot unwrap failure result'

    # Or with environment variables:
    # RESULTVALUE_UNWRAP_MESSAGE="unexpected failure"
    # RESULTVALUE_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, PositiveInt, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RESULTVALUE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "text"] = "text"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ResultSettings(BaseSettings):
    """Root settings for resultvalue.

    Loads configuration from environment variables with RESULTVALUE_ prefix.

    Example environment variables:
        RESULTVALUE_DEBUG=true
        RESULTVALUE_PAYLOAD_REPR_LIMIT=80
        RESULTVALUE_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="RESULTVALUE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Log at DEBUG unless a level is given explicitly")
    unwrap_message: str = Field(
        default="Cannot unwrap failure result",
        min_length=1,
        description="Message used by unwrap() when called on a failure",
    )
    payload_repr_limit: PositiveInt = Field(
        default=200,
        description="Max characters of a payload repr shown in panic messages",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> ResultSettings:
    """Get the global settings instance (cached)."""
    return ResultSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()


def setting(name: str) -> Any:
    """Read one root setting, falling back to its declared default if the environment does not validate.

    Used on panic paths, where a bad RESULTVALUE_* variable must not replace the panic being raised.
    """
    try:
        return getattr(get_settings(), name)
    except ValidationError:
        return ResultSettings.model_fields[name].default
