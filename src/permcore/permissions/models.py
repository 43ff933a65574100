"""Typed permission-set models.

These are Pydantic models over the same data as the ``_global`` dict
layout. "Global" is a named field here, so a type or producer can never
collide with it, and action maps hold strict booleans only: an unset
verb is simply absent.

Example::

    perms = PermissionSet.from_dict(row["permissions"])
    if perms.allows(ProducerScope("document", doc_id), "write"):
        ...
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

from ..config import PermcoreConfig
from ..exceptions import MalformedPermissionSetError
from .access import find_actions, find_types, has_action, has_any_action
from .constants import GLOBAL_KEY, is_reserved, without_global
from .inheritance import inherit, union
from .normalize import strict_action_map
from .scope import Scope

ActionMap = dict[str, StrictBool]


def _check_identifiers(kind: str, keys: Iterable[str]) -> None:
    for key in keys:
        if not key:
            raise ValueError(f"{kind} id must be a non-empty string")
        if is_reserved(key):
            raise ValueError(f"{kind} id {key!r} is reserved for global actions")


class TypeEntry(BaseModel):
    """Actions for one resource type: type-wide plus per producer."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    global_actions: ActionMap = Field(default_factory=dict)
    producers: dict[str, ActionMap] = Field(default_factory=dict)

    @field_validator("producers")
    @classmethod
    def validate_producer_ids(cls, v: dict[str, ActionMap]) -> dict[str, ActionMap]:
        _check_identifiers("Producer", v)
        return v

    def to_dict(self) -> dict[str, dict[str, bool]]:
        entry = {GLOBAL_KEY: dict(self.global_actions)}
        for producer, actions in self.producers.items():
            entry[producer] = dict(actions)
        return entry


class PermissionSet(BaseModel):
    """A consumer's permissions: set-wide, per type, and per producer."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    global_actions: ActionMap = Field(default_factory=dict)
    types: dict[str, TypeEntry] = Field(default_factory=dict)

    @field_validator("types")
    @classmethod
    def validate_type_names(cls, v: dict[str, TypeEntry]) -> dict[str, TypeEntry]:
        _check_identifiers("Type", v)
        return v

    @classmethod
    def from_dict(
        cls,
        data: Any,
        strict: Optional[bool] = None,
        config: Optional[PermcoreConfig] = None,
    ) -> PermissionSet:
        """Build a typed set from the ``_global`` dict layout.

        Args:
            data: Permission set as loaded from storage.
            strict: Raise on malformed input instead of dropping it.
            config: Supplies the default for ``strict`` through
                ``PermcoreConfig.strict_models``; off when omitted.

        Raises:
            MalformedPermissionSetError: In strict mode, listing every
                non-mapping level, non-string key and non-boolean value.
        """
        if strict is None:
            strict = config.strict_models if config is not None else False

        problems: list[str] = []
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            problems.append(f"<root>: expected a mapping, got {type(data).__name__}")
            data = {}

        global_actions = _read_actions(data.get(GLOBAL_KEY), GLOBAL_KEY, problems)
        types: dict[str, TypeEntry] = {}
        for type_key in without_global(data.keys()):
            if not isinstance(type_key, str) or not type_key:
                problems.append(f"{type_key!r}: type name must be a non-empty string")
                continue
            entry = data[type_key]
            if not isinstance(entry, Mapping):
                problems.append(f"{type_key}: expected a mapping, got {type(entry).__name__}")
                continue

            producers: dict[str, dict[str, bool]] = {}
            for producer in without_global(entry.keys()):
                if not isinstance(producer, str) or not producer:
                    problems.append(f"{type_key}.{producer!r}: producer id must be a non-empty string")
                    continue
                producers[producer] = _read_actions(entry[producer], f"{type_key}.{producer}", problems)

            types[type_key] = TypeEntry(
                global_actions=_read_actions(entry.get(GLOBAL_KEY), f"{type_key}.{GLOBAL_KEY}", problems),
                producers=producers,
            )

        if strict and problems:
            raise MalformedPermissionSetError(problems)
        return cls(global_actions=global_actions, types=types)

    def to_dict(self) -> dict[str, Any]:
        """Return the ``_global`` dict layout."""
        result: dict[str, Any] = {GLOBAL_KEY: dict(self.global_actions)}
        for type_key, entry in self.types.items():
            result[type_key] = entry.to_dict()
        return result

    def actions_for(self, scope: Scope | Any = None) -> dict[str, bool]:
        """Effective action map at ``scope``."""
        return find_actions(self.to_dict(), scope)

    def allows(self, scope: Scope | Any, action: str | Iterable[str]) -> bool:
        """True if every verb in ``action`` is granted at ``scope``."""
        return has_action(self.to_dict(), scope, action)

    def allows_any(self, scope: Scope | Any, action: str | Iterable[str]) -> bool:
        """True if at least one verb in ``action`` is granted at ``scope``."""
        return has_any_action(self.to_dict(), scope, action)

    def inherit(self, parent: PermissionSet) -> PermissionSet:
        """This set with unset verbs inherited from ``parent``."""
        return PermissionSet.from_dict(inherit(self.to_dict(), parent.to_dict()))

    @classmethod
    def union(cls, permission_sets: Iterable[PermissionSet]) -> PermissionSet:
        """OR of all ``permission_sets``."""
        return cls.from_dict(union([perms.to_dict() for perms in permission_sets]))

    def scopes(self) -> Iterator[Scope]:
        """Scopes of this set that define at least one verb."""
        return find_types(self.to_dict())


def _read_actions(value: Any, path: str, problems: list[str]) -> dict[str, bool]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        problems.append(f"{path}: expected a mapping, got {type(value).__name__}")
        return {}

    actions = strict_action_map(value)
    for key, flag in value.items():
        if not isinstance(key, str):
            problems.append(f"{path}.{key!r}: verb must be a string")
        elif key not in actions:
            problems.append(f"{path}.{key}: expected a boolean, got {type(flag).__name__}")
    return actions


__all__ = [
    "ActionMap",
    "PermissionSet",
    "TypeEntry",
]
