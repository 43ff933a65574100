"""Tests for action-map merges."""

from __future__ import annotations

from permcore import inherit_hashes, union_hashes


class TestUnionHashes:
    """Tests for union_hashes (OR merge)."""

    def test_ignores_boolean_arguments(self) -> None:
        """Non-mapping arguments are read as empty maps."""
        assert union_hashes(True, False) == {}

    def test_null_first_argument(self) -> None:
        """A None first map contributes nothing."""
        assert union_hashes(None, {"read": True}) == {"read": True}

    def test_null_second_argument(self) -> None:
        """A None second map contributes nothing."""
        assert union_hashes({"read": True}, None) == {"read": True}

    def test_unions_distinct_keys(self) -> None:
        """Every key of both maps appears, with boolean values."""
        result = union_hashes({"read": True}, {"write": True, "view": False})
        assert result == {"read": True, "write": True, "view": False}
        assert all(isinstance(v, bool) for v in result.values())

    def test_true_overrides_false(self) -> None:
        """True on either side wins."""
        assert union_hashes({"write": True}, {"write": False})["write"] is True
        assert union_hashes({"write": False}, {"write": True})["write"] is True

    def test_commutative(self) -> None:
        """Argument order does not matter."""
        a = {"read": True, "write": False, "delete": False}
        b = {"write": True, "share": False}
        assert union_hashes(a, b) == union_hashes(b, a)

    def test_union_with_empty_coerces_to_bool(self) -> None:
        """A union with an empty map is the other map with boolean values."""
        a = {"read": True, "write": False, "legacy": 1, "unset": None}
        expected = {"read": True, "write": False, "legacy": True, "unset": False}
        assert union_hashes(a, {}) == expected
        assert union_hashes({}, a) == expected

    def test_does_not_mutate_inputs(self) -> None:
        """Both inputs are left untouched."""
        first = {"read": True}
        second = {"write": True}
        union_hashes(first, second)
        assert first == {"read": True}
        assert second == {"write": True}


class TestInheritHashes:
    """Tests for inherit_hashes (most specific wins)."""

    def test_ignores_boolean_arguments(self) -> None:
        """Non-mapping arguments are read as empty maps."""
        assert inherit_hashes(True, False) == {}

    def test_null_first_argument(self) -> None:
        """A None child inherits everything."""
        assert inherit_hashes(None, {"read": True}) == {"read": True}

    def test_null_second_argument(self) -> None:
        """A None parent leaves the child as is."""
        assert inherit_hashes({"read": True}, None) == {"read": True}

    def test_unions_distinct_keys(self) -> None:
        """Keys of both maps appear in the result."""
        result = inherit_hashes({"read": True}, {"write": True, "view": False})
        assert result == {"read": True, "write": True, "view": False}

    def test_child_value_wins(self) -> None:
        """An explicit child setting beats the parent, true or false."""
        assert inherit_hashes({"write": True}, {"write": False})["write"] is True
        assert inherit_hashes({"write": False}, {"write": True})["write"] is False

    def test_non_boolean_child_falls_through(self) -> None:
        """A non-boolean child value is unset and uses the parent's value."""
        result = inherit_hashes({"write": "yes", "read": None}, {"write": False, "read": True})
        assert result == {"write": False, "read": True}

    def test_non_boolean_child_without_parent_is_absent(self) -> None:
        """An unset child verb the parent lacks is left out."""
        result = inherit_hashes({"write": 1, "read": True}, {})
        assert result == {"read": True}

    def test_parent_only_keys_copied(self) -> None:
        """Parent-only verbs keep the parent's value."""
        parent = {"share": True, "delete": False}
        result = inherit_hashes({"read": True}, parent)
        assert result["share"] is True
        assert result["delete"] is False

    def test_does_not_mutate_inputs(self) -> None:
        """Both inputs are left untouched."""
        child = {"write": False}
        parent = {"write": True, "read": True}
        inherit_hashes(child, parent)
        assert child == {"write": False}
        assert parent == {"write": True, "read": True}
