"""Traversals: turn an iterable of Options/Eithers into an Option/Either of a list.

Every reduction here is single-pass and stops consuming its input at the
first failure, so infinite or side-effecting iterables are safe as long as a
failure eventually shows up.

Examples:
    >>> sequence_either([Right(1), Right(2), Left('e1'), Right(4), Left('e2')])
    Left(value='e1')
    >>> list(select_valid([Left('a'), Right(1), Left('b'), Right(2)]))
    [1, 2]
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from functools import reduce
from itertools import chain
from typing import Any

from klaw_fx.either import Left, Right
from klaw_fx.monoid import Monoid
from klaw_fx.option import Nothing, NothingType, Option, Some

__all__ = [
    'partition_either',
    'select_valid',
    'sequence',
    'sequence_either',
    'sequence_option',
    'sequence_with_monoid',
    'traverse_either',
    'traverse_option',
    'where_either',
    'where_option',
]


def sequence_option[T](xs: Iterable[Some[T] | NothingType]) -> Option[list[T]]:
    """Collect the values of an iterable of Options, short-circuiting on Nothing.

    Args:
        xs: An iterable of Option values.

    Returns:
        Some(list of values) if every element is Some, otherwise Nothing.

    Raises:
        TypeError: If an element before the first Nothing is not an Option.
    """
    values: list[T] = []
    for m in xs:
        if isinstance(m, NothingType):
            return Nothing
        if not isinstance(m, Some):
            raise TypeError(f'sequence_option expects Option values, got {type(m).__name__}')
        values.append(m.value)
    return Some(values)


def sequence_either[L, R](xs: Iterable[Left[L] | Right[R]]) -> Left[L] | Right[list[R]]:
    """Collect the values of an iterable of Eithers, short-circuiting on Left.

    Args:
        xs: An iterable of Either values.

    Returns:
        Right(list of values) if every element is Right, otherwise the
        first Left in input order.

    Raises:
        TypeError: If an element before the first Left is not an Either.
    """
    values: list[R] = []
    for e in xs:
        if isinstance(e, Left):
            return e
        if not isinstance(e, Right):
            raise TypeError(f'sequence_either expects Either values, got {type(e).__name__}')
        values.append(e.value)
    return Right(values)


def sequence(xs: Iterable[Any]) -> Any:
    """Sequence an iterable of Options or Eithers.

    The first element decides which family is expected. An empty iterable
    gives ``Some([])``.

    Raises:
        TypeError: If an element does not belong to the family of the first one.
    """
    it = iter(xs)
    for first in it:
        rest = chain((first,), it)
        if isinstance(first, Some | NothingType):
            return sequence_option(rest)
        if isinstance(first, Left | Right):
            return sequence_either(rest)
        raise TypeError(f'expected an Option or Either, got {type(first).__name__}')
    return Some([])


def traverse_option[U, T](xs: Iterable[U], f: Callable[[U], Some[T] | NothingType]) -> Option[list[T]]:
    """Map f over xs and collect the results, short-circuiting on Nothing."""
    return sequence_option(f(x) for x in xs)


def traverse_either[U, L, R](xs: Iterable[U], f: Callable[[U], Left[L] | Right[R]]) -> Left[L] | Right[list[R]]:
    """Map f over xs and collect the results, short-circuiting on Left."""
    return sequence_either(f(x) for x in xs)


def sequence_with_monoid[T](xs: Iterable[T], monoid: Monoid[T]) -> T:
    """Fold xs with an injected monoid (identity plus combine)."""
    return reduce(monoid.combine, xs, monoid.identity)


def select_valid(xs: Iterable[Any], f: Callable[[Any], Any] | None = None) -> Iterator[Any]:
    """Yield the success payloads of a mixed iterable of Options and Eithers.

    Nothing and Left elements are dropped silently; Some and Right payloads
    are yielded in input order, transformed by f when given.
    """
    for x in xs:
        if isinstance(x, Some | Right):
            yield x.value if f is None else f(x.value)


def where_option[T](xs: Iterable[T], predicate: Callable[[T], Some[bool] | NothingType]) -> Option[list[T]]:
    """Filter xs with a predicate that may itself fail.

    Args:
        xs: Values to filter.
        predicate: Returns Some(keep) or Nothing for each element.

    Returns:
        Nothing as soon as the predicate gives Nothing, otherwise Some of
        the elements whose predicate was Some(True).
    """
    kept: list[T] = []
    for x in xs:
        decision = predicate(x)
        if isinstance(decision, NothingType):
            return Nothing
        if decision.value:
            kept.append(x)
    return Some(kept)


def where_either[T, L](xs: Iterable[T], predicate: Callable[[T], Left[L] | Right[bool]]) -> Left[L] | Right[list[T]]:
    """Filter xs with a predicate that may fail with a reason.

    Args:
        xs: Values to filter.
        predicate: Returns Right(keep) or Left(reason) for each element.

    Returns:
        The first Left produced by the predicate, otherwise Right of the
        elements whose predicate was Right(True).
    """
    kept: list[T] = []
    for x in xs:
        decision = predicate(x)
        if isinstance(decision, Left):
            return decision
        if decision.value:
            kept.append(x)
    return Right(kept)


def partition_either[L, R](xs: Iterable[Left[L] | Right[R]]) -> tuple[list[L], list[R]]:
    """Split an iterable of Eithers into (left payloads, right payloads)."""
    lefts: list[L] = []
    rights: list[R] = []
    for e in xs:
        if isinstance(e, Left):
            lefts.append(e.value)
        else:
            rights.append(e.value)
    return lefts, rights
