"""Scopes: the specificity level a permission query is made at.

Three variants, from least to most specific:

- ``AnyScope()`` — the set-wide ``_global`` actions only.
- ``TypeScope("document")`` — actions for every producer of a type.
- ``ProducerScope("document", "42")`` — actions for one producer.

Callers should pass a variant. :func:`parse_type` also accepts the loose
descriptors stored by older callers (``None``, ``"document"``,
``{"document": "42"}`` or ``{"document": model}``) and turns them into a
variant.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from ..exceptions import InvalidScopeError
from ..logging import safe_preview
from .constants import is_reserved

logger = logging.getLogger(__name__)


def _check_identifier(kind: str, value: Any) -> None:
    if not isinstance(value, str) or not value:
        raise InvalidScopeError(f"{kind} must be a non-empty string, got {value!r}", field=kind)
    if is_reserved(value):
        raise InvalidScopeError(f"{kind} {value!r} is reserved for global actions", field=kind)


@dataclass(frozen=True)
class AnyScope:
    """Query the set-wide actions only."""

    @property
    def type(self) -> None:
        return None

    @property
    def producer(self) -> None:
        return None

    def to_descriptor(self) -> dict[str, str]:
        return {}


@dataclass(frozen=True)
class TypeScope:
    """Query the actions that apply to every producer of ``type``."""

    type: str

    def __post_init__(self) -> None:
        _check_identifier("type", self.type)

    @property
    def producer(self) -> None:
        return None

    def to_descriptor(self) -> str:
        return self.type


@dataclass(frozen=True)
class ProducerScope:
    """Query the actions for producer ``producer`` of ``type``."""

    type: str
    producer: str

    def __post_init__(self) -> None:
        _check_identifier("type", self.type)
        _check_identifier("producer", self.producer)

    def to_descriptor(self) -> dict[str, str]:
        return {self.type: self.producer}


Scope = Union[AnyScope, TypeScope, ProducerScope]


def _producer_id(value: Any) -> Any:
    """Unwrap a model-like producer into its id."""
    if isinstance(value, Mapping):
        return value.get("id")
    if isinstance(value, (str, int, float)) or value is None:
        return value
    return getattr(value, "id", None)


def parse_type(type: Any) -> Scope:
    """Parse a type descriptor into a scope.

    Args:
        type: A scope variant (returned unchanged), ``None`` for the
            global level, a type name, or a one-key mapping of type name
            to producer id. The producer may be a model or a mapping, in
            which case its ``id`` is used.

    Returns:
        The matching scope. Descriptors naming the reserved ``_global``
        key degrade to the next less specific scope.

    Example::

        parse_type(None)                    # AnyScope()
        parse_type("document")              # TypeScope(type="document")
        parse_type({"document": "42"})      # ProducerScope(type="document", producer="42")
        parse_type({"document": doc})       # ProducerScope(type="document", producer=str(doc.id))
    """
    if isinstance(type, (AnyScope, TypeScope, ProducerScope)):
        return type
    if not type:
        return AnyScope()

    if isinstance(type, Mapping):
        if len(type) > 1:
            logger.warning(
                "Type descriptor has %d keys, using the last one: %s",
                len(type),
                safe_preview(type, limit=120),
            )
        type_name, producer = list(type.items())[-1]
        producer = _producer_id(producer)
    else:
        type_name, producer = type, None

    type_name = str(type_name)
    if not type_name or is_reserved(type_name):
        logger.debug("Type descriptor names no type, querying global actions: %r", type_name)
        return AnyScope()

    if producer is None or producer == "":
        return TypeScope(type_name)

    producer = str(producer)
    if is_reserved(producer):
        logger.debug("Producer descriptor is reserved, querying type actions: %r", type_name)
        return TypeScope(type_name)
    return ProducerScope(type_name, producer)


__all__ = [
    "AnyScope",
    "ProducerScope",
    "Scope",
    "TypeScope",
    "parse_type",
]
