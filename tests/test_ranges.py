"""Tests for inclusive integer ranges."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from klaw_fx import InvalidRangeError, to


class TestTo:
    """Tests for to()."""

    def test_ascending(self):
        """Both ends are included."""
        assert list(to(1, 5)) == [1, 2, 3, 4, 5]

    def test_descending_inferred(self):
        """The direction is inferred without a step."""
        assert list(to(3, 1)) == [3, 2, 1]

    def test_single(self):
        """A range from n to n holds n."""
        assert list(to(4, 4)) == [4]

    def test_step(self):
        """An explicit step may skip the end value."""
        assert list(to(0, 10, 3)) == [0, 3, 6, 9]
        assert list(to(10, 0, -5)) == [10, 5, 0]

    def test_zero_step_raises(self):
        """A zero step is rejected."""
        with pytest.raises(InvalidRangeError, match='can not be 0'):
            to(1, 5, 0)

    def test_wrong_direction_raises(self):
        """A step pointing away from stop is rejected eagerly."""
        with pytest.raises(InvalidRangeError, match='never reaches'):
            to(1, 5, -1)
        with pytest.raises(ValueError):
            to(5, 1, 2)

    @given(st.integers(-50, 50), st.integers(-50, 50))
    def test_endpoints_included(self, start, stop):
        """The inferred range starts at start and ends at stop."""
        values = list(to(start, stop))
        assert values[0] == start
        assert values[-1] == stop
        assert len(values) == abs(stop - start) + 1
