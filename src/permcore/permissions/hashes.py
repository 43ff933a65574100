"""Merges of two action maps.

An action map ("hash") maps a verb to allow/deny::

    {"read": True, "update": False}

Verbs that are absent are denied unless a less specific level grants
them. Two merges exist:

- :func:`union_hashes` — OR: allowed if either side allows. Used to
  combine sibling sets, e.g. the permissions of several roles.
- :func:`inherit_hashes` — most specific wins: an explicit child
  setting (``True`` or ``False``) overrides the parent; only an unset
  child verb falls through to the parent.
"""

from __future__ import annotations

from typing import Any

from .normalize import as_action_map


def union_hashes(first: Any, second: Any) -> dict[str, bool]:
    """Union two action maps.

    Non-mapping arguments are read as empty maps. Every verb of either
    map appears in the result, ``True`` if either side grants it.

    Example::

        union_hashes({"read": True}, {"write": True, "view": False})
        # {"read": True, "write": True, "view": False}
    """
    first = as_action_map(first)
    second = as_action_map(second)

    result: dict[str, bool] = {}
    for key in (*first, *(k for k in second if k not in first)):
        result[key] = bool(first.get(key) or second.get(key))
    return result


def inherit_hashes(child: Any, parent: Any) -> dict[str, Any]:
    """Return ``child`` after inheriting unset verbs from ``parent``.

    Only strict booleans count as explicit child settings. A child value
    of any other type is unset: the parent's value is used when the
    parent has the verb, otherwise the verb is left out.

    Example::

        inherit_hashes({"write": False}, {"write": True, "read": True})
        # {"read": True, "write": False}
    """
    child = as_action_map(child)
    parent = as_action_map(parent)

    result: dict[str, Any] = {key: value for key, value in parent.items() if key not in child}
    for key, value in child.items():
        if isinstance(value, bool):
            result[key] = value
        elif key in parent:
            result[key] = parent[key]
    return result


__all__ = [
    "inherit_hashes",
    "union_hashes",
]
