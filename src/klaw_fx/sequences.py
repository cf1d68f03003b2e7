"""Lazy sequence combinators in the style of Haskell's Data.List.

Functions returning iterators are lazy: nothing is evaluated until the
result is consumed, and ``iterate`` / ``cycle`` are infinite, so bound them
with ``itertools.islice``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from itertools import chain, dropwhile, filterfalse, islice, takewhile, tee
from typing import Any

__all__ = [
    'all_true',
    'any_true',
    'as_string',
    'break_',
    'contains_not',
    'cycle',
    'flatten',
    'for_each',
    'init',
    'intercalate',
    'intersperse',
    'is_empty',
    'iterate',
    'partition',
    'span',
    'split_at',
    'tail',
    'transpose',
    'zip_n',
]


def tail[T](xs: Iterable[T]) -> Iterator[T]:
    """Yield every element after the first."""
    return islice(xs, 1, None)


def init[T](xs: Iterable[T]) -> Iterator[T]:
    """Yield every element except the last."""
    it = iter(xs)
    for prev in it:
        for x in it:
            yield prev
            prev = x


def flatten[T](xss: Iterable[Iterable[T]]) -> Iterator[T]:
    """Concatenate an iterable of iterables."""
    return chain.from_iterable(xss)


def intersperse[T](xs: Iterable[T], element: T) -> Iterator[T]:
    """Yield the elements of xs with element between each pair.

    Examples:
        >>> list(intersperse([23, 42], -1))
        [23, -1, 42]
    """
    it = iter(xs)
    for x in it:
        yield x
        for x in it:
            yield element
            yield x


def intercalate[T](xss: Iterable[Iterable[T]], ys: Iterable[T]) -> Iterator[T]:
    """Insert ys between the iterables of xss and concatenate the result."""
    separator = list(ys)
    return flatten(intersperse(xss, separator))


def transpose[T](xss: Iterable[Iterable[T]]) -> Iterator[list[T]]:
    """Transpose rows and columns; shorter rows are skipped once exhausted.

    Examples:
        >>> list(transpose([[1, 2, 3], [4], [5, 6]]))
        [[1, 4, 5], [2, 6], [3]]
    """
    iterators = [iter(xs) for xs in xss]
    while True:
        column: list[T] = []
        for it in iterators:
            for x in it:
                column.append(x)
                break
        if not column:
            return
        yield column


def all_true(xs: Iterable[bool]) -> bool:
    """Conjunction of booleans; True for an empty iterable."""
    return all(xs)


def any_true(xs: Iterable[bool]) -> bool:
    """Disjunction of booleans; False for an empty iterable."""
    return any(xs)


def iterate[T](start: T, f: Callable[[T], T]) -> Iterator[T]:
    """Yield start, f(start), f(f(start)), ... forever."""
    value = start
    while True:
        yield value
        value = f(value)


def is_empty(xs: Iterable[Any]) -> bool:
    """Return True if xs has no elements.

    One element is consumed from one-shot iterators.
    """
    for _ in xs:
        return False
    return True


def cycle[T](xs: Iterable[T]) -> Iterator[T]:
    """Repeat the elements of xs forever; an empty input gives an empty output.

    Examples:
        >>> list(islice(cycle([23, 42]), 4))
        [23, 42, 23, 42]
        >>> list(cycle([]))
        []
    """
    seen: list[T] = []
    for x in xs:
        seen.append(x)
        yield x
    if not seen:
        return
    while True:
        yield from seen


def split_at[T](xs: Iterable[T], n: int) -> tuple[Iterator[T], Iterator[T]]:
    """Split xs lazily into its first n elements and the rest.

    Both halves read from one shared pass over xs.

    Examples:
        >>> front, back = split_at([1, 2, 3, 4], 1)
        >>> list(front), list(back)
        ([1], [2, 3, 4])
    """
    front, back = tee(xs)
    return islice(front, n), islice(back, n, None)


def span[T](xs: Iterable[T], predicate: Callable[[T], bool]) -> tuple[Iterator[T], Iterator[T]]:
    """Split xs lazily into its longest prefix satisfying predicate and the rest."""
    front, back = tee(xs)
    return takewhile(predicate, front), dropwhile(predicate, back)


def break_[T](xs: Iterable[T], predicate: Callable[[T], bool]) -> tuple[Iterator[T], Iterator[T]]:
    """Split xs lazily into its longest prefix not satisfying predicate and the rest."""
    return span(xs, lambda x: not predicate(x))


def contains_not[T](xs: Iterable[T], value: T) -> bool:
    """Return True if value is not in xs."""
    return value not in xs


def partition[T](xs: Iterable[T], predicate: Callable[[T], bool]) -> tuple[Iterator[T], Iterator[T]]:
    """Split xs lazily into the elements that do and do not satisfy predicate.

    The predicate runs once per element for each half that is consumed.
    """
    matching, rest = tee(xs)
    return filter(predicate, matching), filterfalse(predicate, rest)


def zip_n(*iterables: Iterable[Any]) -> Iterator[tuple[Any, ...]]:
    """Zip any number of iterables; stops at the shortest."""
    return zip(*iterables, strict=False)


def for_each[T](xs: Iterable[T], effect: Callable[[T], Any]) -> None:
    """Call effect on every element of xs."""
    for x in xs:
        effect(x)


def as_string(xs: Iterable[Any], prefix: str = '[', suffix: str = ']', separator: str = ', ') -> str:
    """Render xs as a string, e.g. ``[1, 2, 3]``."""
    return prefix + separator.join(str(x) for x in xs) + suffix

