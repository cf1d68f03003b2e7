"""Inclusive integer ranges."""

from __future__ import annotations

from collections.abc import Iterator

from klaw_fx.errors import InvalidRangeError

__all__ = ['to']


def to(start: int, stop: int, step: int | None = None) -> Iterator[int]:
    """Yield the integers from start to stop, both inclusive.

    Without a step the direction is inferred: ``to(1, 3)`` gives 1, 2, 3 and
    ``to(3, 1)`` gives 3, 2, 1.

    Args:
        start: First value.
        stop: Last value (included if the step lands on it).
        step: Distance between values.

    Raises:
        InvalidRangeError: If step is 0 or points away from stop. Raised when
            ``to`` is called, not when the range is consumed.
    """
    if step is None:
        step = -1 if start > stop else 1
    if step == 0 or (step > 0 and start > stop) or (step < 0 and start < stop):
        raise InvalidRangeError(start, stop, step)
    return iter(range(start, stop + (1 if step > 0 else -1), step))
