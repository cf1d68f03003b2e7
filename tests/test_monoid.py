"""Tests for Monoid and the predefined monoids."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from klaw_fx import Monoid, Nothing, Some
from klaw_fx.monoid import ALL, ANY, INT_ADD, INT_MUL, ORDERING, STRING, first_some, iterable


class TestPredefined:
    """Tests for the predefined monoids."""

    def test_int_monoids(self):
        """Addition and multiplication fold as expected."""
        assert INT_ADD.concat([1, 2, 3]) == 6
        assert INT_MUL.concat([2, 3, 4]) == 24
        assert INT_MUL.concat([]) == 1

    def test_string(self):
        """Strings concatenate."""
        assert STRING.concat(['a', 'b', 'c']) == 'abc'

    def test_bool_monoids(self):
        """ALL and ANY fold booleans."""
        assert ALL.concat([True, True]) is True
        assert ALL.concat([]) is True
        assert ANY.concat([False, True]) is True
        assert ANY.concat([]) is False

    def test_ordering(self):
        """The first non-zero comparison wins."""
        assert ORDERING.concat([0, 0, 1, -1]) == 1
        assert ORDERING.concat([0, 0]) == 0

    def test_iterable(self):
        """Iterables are chained lazily."""
        assert list(iterable().concat([[1], (2, 3), []])) == [1, 2, 3]

    def test_first_some(self):
        """The first Some wins, Nothing is the identity."""
        m = first_some()
        assert m.concat([Nothing, Some(1), Some(2)]) == Some(1)
        assert m.concat([]) == Nothing


class TestCustomMonoid:
    """Tests for user-defined monoids."""

    def test_custom(self):
        """A Monoid built from identity and combine folds from the left."""
        m = Monoid([], lambda xs, ys: xs + ys)
        assert m.concat([[1], [2, 3]]) == [1, 2, 3]

    def test_frozen(self):
        """Monoids are immutable."""
        with pytest.raises(AttributeError):
            INT_ADD.identity = 1  # type: ignore[misc]


class TestMonoidLaws:
    """Property-based tests for the monoid laws."""

    @given(st.integers(), st.integers(), st.integers())
    def test_int_add_associative(self, a, b, c):
        """combine is associative."""
        assert INT_ADD.combine(INT_ADD.combine(a, b), c) == INT_ADD.combine(a, INT_ADD.combine(b, c))

    @given(st.text())
    def test_string_identity(self, s):
        """identity is neutral on both sides."""
        assert STRING.combine(STRING.identity, s) == s
        assert STRING.combine(s, STRING.identity) == s

    @given(st.lists(st.sampled_from([-1, 0, 1])))
    def test_ordering_matches_first_nonzero(self, xs):
        """ORDERING picks the first non-zero comparison."""
        expected = next((x for x in xs if x != 0), 0)
        assert ORDERING.concat(xs) == expected
