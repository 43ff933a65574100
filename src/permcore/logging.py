"""Logging utilities for permcore.

This module provides:
- Logging configuration from PermcoreConfig
- Safe, bounded previews of permission data for log messages
- A formatter for JSON or plain-text records
- A logger adapter carrying the consumer a permission set belongs to
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .config import LogLevel, PermcoreConfig

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_RECORD_ATTRS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "message", "pathname", "process", "processName", "relativeCreated",
        "thread", "threadName", "exc_info", "exc_text", "stack_info",
        "taskName", "consumer",
    }
)


def safe_preview(value: Any, limit: int = 240) -> str:
    """Create a length-bounded, single-line preview of a value for logging.

    Args:
        value: The value to preview (any type)
        limit: Maximum length of the preview (default: 240)

    Returns:
        A truncated string representation
    """
    if value is None:
        return ""

    if isinstance(value, str):
        s = value
    elif isinstance(value, (dict, list)):
        try:
            s = json.dumps(value, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            s = str(value)
    else:
        s = str(value)

    s = " ".join(s.split())

    if len(s) > limit:
        return s[: limit - 1] + "…"

    return s


class PermcoreFormatter(logging.Formatter):
    """Formatter emitting JSON (default) or plain-text lines.

    Includes the ``consumer`` attribute when a record carries one, plus
    previews of any extra fields.
    """

    def __init__(self, json_format: bool = True, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.json_format = json_format

    def format(self, record: logging.LogRecord) -> str:
        consumer = getattr(record, "consumer", None)

        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if consumer:
            log_data["consumer"] = str(consumer)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_ATTRS:
                log_data[key] = safe_preview(value)

        if self.json_format:
            return json.dumps(log_data, default=str, ensure_ascii=False)

        parts = [
            f"[{log_data['timestamp']}]",
            f"{log_data['level']}",
            f"{log_data['logger']}",
        ]
        if consumer:
            parts.append(f"consumer={log_data['consumer']}")
        parts.append(f": {log_data['message']}")
        return " ".join(parts)


class PermcoreLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds the consumer (user, role, ...) to records.

    Usage:
        logger = get_logger(__name__, consumer="role:editor")
        logger.info("Resolved actions")
    """

    def __init__(self, logger: logging.Logger, consumer: Optional[str] = None):
        super().__init__(logger, {})
        self.consumer = consumer

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        consumer = kwargs.pop("consumer", self.consumer)
        extra = kwargs.get("extra", {})
        if consumer:
            extra["consumer"] = consumer
        kwargs["extra"] = extra
        return msg, kwargs


def setup_logging(
    config: Optional[PermcoreConfig] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Configure the root logger for a host application using permcore.

    Args:
        config: PermcoreConfig instance (if None, loads from environment)
        json_format: Override ``config.log_json``
    """
    if config is None:
        from .config import load_config_from_env

        config = load_config_from_env()

    level_map = {
        LogLevel.DEBUG: logging.DEBUG,
        LogLevel.INFO: logging.INFO,
        LogLevel.WARNING: logging.WARNING,
        LogLevel.ERROR: logging.ERROR,
        LogLevel.CRITICAL: logging.CRITICAL,
    }
    log_level = level_map.get(LogLevel(config.log_level), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        PermcoreFormatter(json_format=config.log_json if json_format is None else json_format)
    )
    root_logger.addHandler(console_handler)

    logging.getLogger("permcore").setLevel(log_level)
    if config.service_name:
        logging.getLogger(config.service_name).setLevel(log_level)


def get_logger(name: str, consumer: Optional[str] = None) -> PermcoreLoggerAdapter:
    """Get a logger adapter that tags records with ``consumer``.

    Example:
        logger = get_logger(__name__, consumer="user:42")
        logger.info("Merged role permissions")
    """
    return PermcoreLoggerAdapter(logging.getLogger(name), consumer=consumer)


__all__ = [
    "safe_preview",
    "PermcoreFormatter",
    "PermcoreLoggerAdapter",
    "setup_logging",
    "get_logger",
]
