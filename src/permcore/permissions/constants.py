"""Reserved keys of the permission-set dict layout."""

from __future__ import annotations

from typing import Any, Iterable

# Key of the action map that applies to a whole level (every type of a set,
# or every producer of a type). Never a type name or producer id.
GLOBAL_KEY = "_global"


def is_reserved(key: Any) -> bool:
    """Return True if ``key`` is the reserved global key."""
    return key == GLOBAL_KEY


def without_global(keys: Iterable[Any]) -> list[Any]:
    """Return ``keys`` in order, minus the reserved global key."""
    return [key for key in keys if key != GLOBAL_KEY]


__all__ = [
    "GLOBAL_KEY",
    "is_reserved",
    "without_global",
]
