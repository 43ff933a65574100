"""Access checks against a permission set.

Provides runtime functions that resolve the effective actions of a
permission set at a scope and test them. Resolution walks from the
least to the most specific level::

    set _global  →  type _global  →  producer

each step inheriting over the previous one, so the most specific
explicit setting wins. Missing levels are skipped, which degrades a
query to the nearest existing ancestor.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import Any

from .constants import GLOBAL_KEY, without_global
from .hashes import inherit_hashes
from .normalize import as_action_map
from .scope import AnyScope, ProducerScope, Scope, TypeScope, parse_type

logger = logging.getLogger(__name__)


def find_actions(permission_set: Any, type: Any = None) -> dict[str, Any]:
    """Find the effective action map of ``permission_set`` at ``type``.

    Args:
        permission_set: A permission set in the ``_global`` dict layout.
        type: A scope, or a loose descriptor accepted by :func:`parse_type`.
            ``None`` queries the global level.

    Returns:
        A new action map. Malformed sets resolve to ``{}``.

    Example::

        perms = {
            "_global": {"read": True},
            "document": {"_global": {"comment": True}, "42": {"write": True}},
        }
        find_actions(perms, None)                      # {"read": True}
        find_actions(perms, "document")                # {"read": True, "comment": True}
        find_actions(perms, {"document": "42"})        # {"read": True, "comment": True, "write": True}
        find_actions(perms, {"document": "missing"})   # {"read": True, "comment": True}
    """
    scope = parse_type(type)

    if not isinstance(permission_set, Mapping):
        return {}

    actions = as_action_map(permission_set.get(GLOBAL_KEY))
    if scope.type is None:
        return actions

    entry = permission_set.get(scope.type)
    if not isinstance(entry, Mapping):
        return actions
    actions = inherit_hashes(entry.get(GLOBAL_KEY), actions)

    if scope.producer is not None and scope.producer in entry:
        actions = inherit_hashes(entry[scope.producer], actions)

    return actions


def _as_action_list(action: Any) -> list[Any]:
    if isinstance(action, (list, tuple, set, frozenset)):
        return list(action)
    return [action]


def _granted(granted: dict[str, Any], verb: Any) -> bool:
    return isinstance(verb, Hashable) and bool(granted.get(verb))


def has_action(permission_set: Any, type: Any, action: str | Iterable[str]) -> bool:
    """Check if ``permission_set`` allows *all* of ``action`` at ``type``.

    Args:
        permission_set: A permission set.
        type: Scope or loose descriptor; ``None`` for global.
        action: A verb, or a list, tuple or set of verbs. Any other value
            is a single verb, so ``None`` is simply not granted.

    Returns:
        True if every verb is granted. An empty list of verbs is never
        granted.

    Example::

        has_action(perms, {"document": "42"}, "write")            # True
        has_action(perms, "document", ["comment", "delete"])      # False
    """
    actions = _as_action_list(action)
    if not actions:
        return False

    granted = find_actions(permission_set, type)
    return all(_granted(granted, verb) for verb in actions)


def has_any_action(permission_set: Any, type: Any, action: str | Iterable[str]) -> bool:
    """Check if ``permission_set`` allows *any* of ``action`` at ``type``.

    An empty list of verbs is never granted.
    """
    actions = _as_action_list(action)
    if not actions:
        return False

    granted = find_actions(permission_set, type)
    return any(_granted(granted, verb) for verb in actions)


def find_types(permission_set: Any) -> Iterator[Scope]:
    """Yield every scope of ``permission_set`` that defines actions.

    Yields ``AnyScope()`` when the set-wide map is non-empty, a
    ``TypeScope`` for each type whose ``_global`` map is non-empty, and a
    ``ProducerScope`` for each non-empty producer map. A map counts as
    non-empty when it has any key, whatever the value.

    Identifiers that cannot form a scope (empty or non-string keys) are
    skipped.

    Callers that need the loose descriptors (``{}``, ``"type"``,
    ``{"type": "id"}``) map over ``to_descriptor()``::

        [scope.to_descriptor() for scope in find_types(perms)]
    """
    if not isinstance(permission_set, Mapping):
        return

    if as_action_map(permission_set.get(GLOBAL_KEY)):
        yield AnyScope()

    for type_key in without_global(permission_set.keys()):
        entry = permission_set[type_key]
        if not isinstance(entry, Mapping) or not _is_identifier(type_key):
            continue

        if as_action_map(entry.get(GLOBAL_KEY)):
            yield TypeScope(type_key)

        for producer in without_global(entry.keys()):
            if as_action_map(entry[producer]) and _is_identifier(producer):
                yield ProducerScope(type_key, producer)


def _is_identifier(key: Any) -> bool:
    if isinstance(key, str) and key:
        return True
    logger.debug("Skipping key that cannot name a scope: %r", key)
    return False


__all__ = [
    "find_actions",
    "find_types",
    "has_action",
    "has_any_action",
]
