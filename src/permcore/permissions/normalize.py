"""Boundary coercion for loosely shaped permission data.

Permission sets usually arrive from a database record or a config file,
so any level may be ``None`` or not a mapping at all. The helpers here
decide once how such a value is read: as an empty action map, an empty
type entry, or an empty permission set. The merge and lookup functions
call them on entry and then work with plain dicts only.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..logging import safe_preview
from .constants import GLOBAL_KEY, without_global

logger = logging.getLogger(__name__)


def as_action_map(value: Any) -> dict[str, Any]:
    """Return a shallow copy of ``value`` if it is a mapping, else ``{}``."""
    if isinstance(value, Mapping):
        return dict(value)
    if value is not None:
        logger.debug("Treating non-mapping action map as empty: %s", safe_preview(value, limit=80))
    return {}


def as_type_entry(value: Any) -> dict[str, dict[str, Any]]:
    """Return a normalized copy of a type entry.

    The copy always carries a ``_global`` action map; every producer
    entry is read through :func:`as_action_map`.
    """
    if not isinstance(value, Mapping):
        if value is not None:
            logger.debug("Treating non-mapping type entry as empty: %s", safe_preview(value, limit=80))
        return {GLOBAL_KEY: {}}

    entry = {GLOBAL_KEY: as_action_map(value.get(GLOBAL_KEY))}
    for producer in without_global(value.keys()):
        entry[producer] = as_action_map(value[producer])
    return entry


def as_permission_set(value: Any) -> dict[str, Any]:
    """Return a normalized copy of a permission set.

    Non-mappings become ``{"_global": {}}``; each type entry is read
    through :func:`as_type_entry`.
    """
    if not isinstance(value, Mapping):
        if value is not None:
            logger.debug("Treating non-mapping permission set as empty: %s", safe_preview(value, limit=80))
        return {GLOBAL_KEY: {}}

    result: dict[str, Any] = {GLOBAL_KEY: as_action_map(value.get(GLOBAL_KEY))}
    for type_key in without_global(value.keys()):
        result[type_key] = as_type_entry(value[type_key])
    return result


def strict_action_map(value: Any) -> dict[str, bool]:
    """Return only the explicit settings of an action map: string verbs with boolean values."""
    return {
        key: flag for key, flag in as_action_map(value).items() if isinstance(key, str) and isinstance(flag, bool)
    }


__all__ = [
    "as_action_map",
    "as_permission_set",
    "as_type_entry",
    "strict_action_map",
]
