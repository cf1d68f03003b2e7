"""Tests for conversions between Option/Either and plain values."""

from itertools import count

from hypothesis import given
from hypothesis import strategies as st
from klaw_fx import (
    Left,
    Nothing,
    Right,
    Some,
    cast,
    from_either,
    from_nullable,
    head,
    last,
    to_either,
    to_nullable,
)


class TestNullable:
    """Tests for from_nullable and to_nullable."""

    def test_from_nullable(self):
        """None becomes Nothing, anything else Some."""
        assert from_nullable(None) == Nothing
        assert from_nullable(0) == Some(0)
        assert from_nullable('') == Some('')

    def test_to_nullable(self):
        """to_nullable gives the payload or None."""
        assert to_nullable(Some(3)) == 3
        assert to_nullable(Nothing) is None

    @given(st.one_of(st.none(), st.integers()))
    def test_nullable_roundtrip(self, x):
        """to_nullable(from_nullable(x)) == x."""
        assert to_nullable(from_nullable(x)) == x


class TestHeadLast:
    """Tests for head and last."""

    def test_head(self):
        """head gives the first element or Nothing."""
        assert head([1, 2, 3]) == Some(1)
        assert head([]) == Nothing

    def test_head_of_none_is_nothing(self):
        """A None first element can not be held in a Some."""
        assert head([None, 1]) == Nothing

    def test_head_consumes_one_element(self):
        """head works on infinite iterators and consumes one element."""
        it = count()
        assert head(it) == Some(0)
        assert next(it) == 1

    def test_last(self):
        """last gives the final element or Nothing."""
        assert last([1, 2, 3]) == Some(3)
        assert last(iter([])) == Nothing
        assert last([1, None]) == Nothing


class TestCast:
    """Tests for cast."""

    def test_cast_match(self):
        """A matching type gives Some."""
        assert cast('foo', str) == Some('foo')
        assert cast(True, int) == Some(True)

    def test_cast_mismatch(self):
        """A mismatching type gives Nothing without raising."""
        assert cast('foo', int) == Nothing
        assert cast(None, object) == Nothing


class TestEitherConversions:
    """Tests for from_either and to_either."""

    def test_from_either(self):
        """Right keeps its payload, Left is dropped."""
        assert from_either(Right(1)) == Some(1)
        assert from_either(Left('e')) == Nothing

    def test_to_either(self):
        """Some becomes Right, Nothing becomes Left(left)."""
        assert to_either(Some(1), 'missing') == Right(1)
        assert to_either(Nothing, 'missing') == Left('missing')
