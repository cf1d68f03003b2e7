"""Monoids: an identity element plus an associative combine operation."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable
from functools import reduce

import msgspec

from klaw_fx.option import Nothing, NothingType, Option, Some

__all__ = [
    'ALL',
    'ANY',
    'INT_ADD',
    'INT_MUL',
    'ORDERING',
    'STRING',
    'Monoid',
    'first_some',
    'iterable',
]


class Monoid[T](msgspec.Struct, frozen=True, gc=False):
    """A monoid over T.

    Attributes:
        identity: Neutral element, ``combine(identity, x) == x``.
        combine: Associative binary operation.

    Examples:
        >>> INT_ADD.concat([1, 2, 3])
        6
        >>> ORDERING.concat([0, -1, 1])
        -1
    """

    identity: T
    combine: Callable[[T, T], T]

    def concat(self, xs: Iterable[T]) -> T:
        """Fold xs from the left, starting at identity."""
        return reduce(self.combine, xs, self.identity)


INT_ADD: Monoid[int] = Monoid(0, lambda x, y: x + y)
INT_MUL: Monoid[int] = Monoid(1, lambda x, y: x * y)
STRING: Monoid[str] = Monoid('', lambda x, y: x + y)
ALL: Monoid[bool] = Monoid(True, lambda x, y: x and y)
ANY: Monoid[bool] = Monoid(False, lambda x, y: x or y)
# Lexicographic tie-break for comparison results (-1, 0, 1): first non-zero wins.
ORDERING: Monoid[int] = Monoid(0, lambda x, y: x if x != 0 else y)


def iterable[T]() -> Monoid[Iterable[T]]:
    """Monoid of lazily chained iterables."""
    return Monoid((), lambda xs, ys: itertools.chain(xs, ys))


def _first_some[T](x: Some[T] | NothingType, y: Some[T] | NothingType) -> Some[T] | NothingType:
    return y if x.is_none() else x


def first_some[T]() -> Monoid[Option[T]]:
    """Monoid over Option where the first Some wins."""
    return Monoid(Nothing, _first_some)
