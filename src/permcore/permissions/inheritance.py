"""Permission-set level merges.

Provides:
- ``inherit()`` — child set over a parent set; explicit child settings win.
- ``union()`` — OR of many sets; allowed if any contributing set allows.

Both walk the three levels (set ``_global``, type ``_global``, producer)
and build new dicts; inputs are never mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .constants import GLOBAL_KEY, without_global
from .hashes import inherit_hashes, union_hashes
from .normalize import as_permission_set, as_type_entry

logger = logging.getLogger(__name__)


def _merged_keys(first: Mapping, second: Mapping) -> list[Any]:
    keys = without_global(first.keys())
    keys.extend(key for key in without_global(second.keys()) if key not in first)
    return keys


def inherit(child_perms: Any, parent_perms: Any) -> dict[str, Any]:
    """Return the child set augmented by any parent permissions it leaves unset.

    Args:
        child_perms: The more specific permission set (e.g. a user's own).
        parent_perms: The set inherited from (e.g. the user's group).

    Returns:
        A new permission set. Types present on one side only are copied
        from that side; types on both sides are merged with
        :func:`inherit_hashes` at the type and producer level. A
        non-mapping set or type entry counts as absent.

    Example::

        inherit(
            {"_global": {}, "document": {"_global": {"delete": False}}},
            {"_global": {"read": True}, "document": {"_global": {"delete": True}}},
        )
        # {"_global": {"read": True}, "document": {"_global": {"delete": False}}}
    """
    child = child_perms if isinstance(child_perms, Mapping) else {}
    parent = parent_perms if isinstance(parent_perms, Mapping) else {}

    result: dict[str, Any] = {GLOBAL_KEY: inherit_hashes(child.get(GLOBAL_KEY), parent.get(GLOBAL_KEY))}

    for type_key in _merged_keys(child, parent):
        child_entry = child.get(type_key)
        parent_entry = parent.get(type_key)

        if not isinstance(child_entry, Mapping):
            result[type_key] = as_type_entry(parent_entry)
            continue
        if not isinstance(parent_entry, Mapping):
            result[type_key] = as_type_entry(child_entry)
            continue

        entry = {GLOBAL_KEY: inherit_hashes(child_entry.get(GLOBAL_KEY), parent_entry.get(GLOBAL_KEY))}
        for producer in _merged_keys(child_entry, parent_entry):
            entry[producer] = inherit_hashes(child_entry.get(producer), parent_entry.get(producer))
        result[type_key] = entry

    return result


def union(permission_sets: Any) -> Any:
    """Union all permission sets provided.

    This is an OR operation: if any contributing set allows a verb at a
    scope, the result allows it there.

    Args:
        permission_sets: A list or tuple of permission sets. Elements that
            are not mappings contribute nothing.

    Returns:
        A new permission set, or ``permission_sets`` itself when it is not
        a list or tuple.

    Example::

        union([
            {"_global": {"read": True}},
            {"_global": {"write": True}, "document": {"_global": {"delete": True}}},
        ])
        # {"_global": {"read": True, "write": True},
        #  "document": {"_global": {"delete": True}}}
    """
    if not isinstance(permission_sets, (list, tuple)):
        logger.debug("union() called with %s, returning it unchanged", type(permission_sets).__name__)
        return permission_sets

    result: dict[str, Any] = {GLOBAL_KEY: {}}

    for item in permission_sets:
        item = as_permission_set(item)
        result[GLOBAL_KEY] = union_hashes(result[GLOBAL_KEY], item[GLOBAL_KEY])

        for type_key in without_global(item.keys()):
            entry = result.setdefault(type_key, {GLOBAL_KEY: {}})
            item_entry = item[type_key]
            entry[GLOBAL_KEY] = union_hashes(entry[GLOBAL_KEY], item_entry[GLOBAL_KEY])

            for producer in without_global(item_entry.keys()):
                entry[producer] = union_hashes(entry.get(producer), item_entry[producer])

    return result


__all__ = [
    "inherit",
    "union",
]
