"""Configuration for permcore.

Pydantic-validated settings for the ambient parts of the library
(logging and typed-model strictness). The permission algebra takes no
configuration: it is a pure data transform.

Direct os.environ/os.getenv usage is confined to
:func:`load_config_from_env`.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigurationError

_TRUTHY = ("true", "1", "yes", "on")


class LogLevel(str, Enum):
    """Standard log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class PermcoreConfig(BaseModel):
    """Settings for logging and typed permission-set parsing."""

    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level for permcore loggers",
    )
    log_json: bool = Field(
        default=False,
        description="Use JSON log format (default: plain text)",
    )
    service_name: Optional[str] = Field(
        default=None,
        description="Host application name, attached to log records",
    )
    strict_models: bool = Field(
        default=False,
        description="Reject malformed input in PermissionSet.from_dict instead of dropping it",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Convert string to LogLevel enum."""
        if isinstance(v, LogLevel):
            return v
        if isinstance(v, str):
            try:
                return LogLevel[v.upper()]
            except KeyError:
                raise ValueError(f"Invalid log level: {v}. Must be one of {[e.value for e in LogLevel]}")
        raise ValueError(f"Log level must be string or LogLevel enum, got {type(v)}")

    model_config = {
        "use_enum_values": True,
        "extra": "forbid",
    }


def load_config_from_env() -> PermcoreConfig:
    """Load configuration from environment variables.

    Environment variables:
    - PERMCORE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - PERMCORE_LOG_JSON: Use JSON log format (true/false, default: false)
    - PERMCORE_SERVICE_NAME: Host application name
    - PERMCORE_STRICT_MODELS: Strict typed parsing (true/false, default: false)

    Raises:
        ConfigurationError: If a variable holds an invalid value.
    """
    import os

    try:
        return PermcoreConfig(
            log_level=os.getenv("PERMCORE_LOG_LEVEL", "INFO"),
            log_json=os.getenv("PERMCORE_LOG_JSON", "false").lower() in _TRUTHY,
            service_name=os.getenv("PERMCORE_SERVICE_NAME") or None,
            strict_models=os.getenv("PERMCORE_STRICT_MODELS", "false").lower() in _TRUTHY,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid permcore environment configuration: {e}", errors=e.errors()) from e


__all__ = [
    "LogLevel",
    "PermcoreConfig",
    "load_config_from_env",
]
