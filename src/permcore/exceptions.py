"""Exception hierarchy for permcore.

The permission algebra itself never raises on malformed data: it degrades
to empty action maps instead. Exceptions are reserved for explicit
constructors, strict parsing, and configuration loading.

Usage:
    from permcore.exceptions import (
        PermcoreError,
        InvalidScopeError,
        MalformedPermissionSetError,
    )
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "PermcoreError",
    "ConfigurationError",
    "InvalidScopeError",
    "MalformedPermissionSetError",
]


class PermcoreError(Exception):
    """Base exception for permcore.

    Attributes:
        code: Stable error code string (e.g. "INVALID_SCOPE").
        message: Human-readable error description.
        details: Additional context as keyword arguments.
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, code: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = kwargs
        super().__init__(self.message)


class ConfigurationError(PermcoreError):
    """Invalid configuration values."""

    code: str = "CONFIGURATION_ERROR"


class InvalidScopeError(PermcoreError, ValueError):
    """A scope was constructed with an empty or reserved identifier."""

    code: str = "INVALID_SCOPE"


class MalformedPermissionSetError(PermcoreError, ValueError):
    """Strict parsing found malformed levels in a permission set.

    Attributes:
        problems: One entry per offending path, e.g. ``"type1.2: not a mapping"``.
    """

    code: str = "MALFORMED_PERMISSION_SET"

    def __init__(self, problems: list[str], message: str | None = None) -> None:
        self.problems = list(problems)
        super().__init__(
            message or f"Malformed permission set ({len(self.problems)} problem(s)): " + "; ".join(self.problems),
            problems=self.problems,
        )
