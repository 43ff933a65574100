"""Permission-set algebra for permcore.

A permission set is a three-level tree of action maps::

    {
        "_global": {"read": True},
        "document": {
            "_global": {"read": True, "comment": True},
            "42": {"write": True},
        },
    }

Defines:
- union_hashes() / inherit_hashes(): merge two action maps
- AnyScope / TypeScope / ProducerScope, parse_type(): query specificity
- find_actions(), has_action(), has_any_action(), find_types(): lookups
- inherit() / union(): merge whole permission sets
- PermissionSet / TypeEntry: strictly typed models over the same data
"""

from .access import find_actions, find_types, has_action, has_any_action
from .constants import GLOBAL_KEY
from .hashes import inherit_hashes, union_hashes
from .inheritance import inherit, union
from .models import ActionMap, PermissionSet, TypeEntry
from .normalize import as_action_map, as_permission_set, as_type_entry, strict_action_map
from .scope import AnyScope, ProducerScope, Scope, TypeScope, parse_type

__all__ = [
    "GLOBAL_KEY",
    "ActionMap",
    "AnyScope",
    "PermissionSet",
    "ProducerScope",
    "Scope",
    "TypeEntry",
    "TypeScope",
    "as_action_map",
    "as_permission_set",
    "as_type_entry",
    "find_actions",
    "find_types",
    "has_action",
    "has_any_action",
    "inherit",
    "inherit_hashes",
    "parse_type",
    "strict_action_map",
    "union",
    "union_hashes",
]
