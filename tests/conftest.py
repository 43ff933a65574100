"""Shared permission-set fixtures."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def perm_set_1() -> dict[str, Any]:
    return {
        "_global": {"read": True},
        "type1": {
            "_global": {"read": True, "activate": True},
            "1": {"write": True, "read": True},
        },
    }


@pytest.fixture
def perm_set_2() -> dict[str, Any]:
    return {
        "_global": {"write": True},
        "type1": {
            "_global": {"read": True, "activate": False},
            "1": {"write": True, "read": True},
            "2": {"read": True},
        },
        "type2": {
            "_global": {"read": True},
            "1": {"read": True},
            "2": {"read": False},
        },
    }


@pytest.fixture
def merged_sets() -> dict[str, Any]:
    """Expected union of perm_set_1 and perm_set_2."""
    return {
        "_global": {"write": True, "read": True},
        "type1": {
            "_global": {"read": True, "activate": True},
            "1": {"write": True, "read": True},
            "2": {"read": True},
        },
        "type2": {
            "_global": {"read": True},
            "1": {"read": True},
            "2": {"read": False},
        },
    }
