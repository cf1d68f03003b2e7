"""Conversions between Option/Either and plain Python values."""

from __future__ import annotations

from collections.abc import Iterable

from klaw_fx.either import Left, Right
from klaw_fx.option import Nothing, NothingType, Option, Some

__all__ = [
    'cast',
    'from_either',
    'from_nullable',
    'head',
    'last',
    'to_either',
    'to_nullable',
]


def from_nullable[T](x: T | None) -> Option[T]:
    """Convert a nullable value to Option.

    Args:
        x: The value that may be None.

    Returns:
        Some(x) if x is not None, otherwise Nothing.
    """
    return Some(x) if x is not None else Nothing


def to_nullable[T](m: Option[T]) -> T | None:
    """Convert an Option to a nullable value: the payload, or None."""
    return m.to_nullable()


def head[T](xs: Iterable[T]) -> Option[T]:
    """Return the first element of an iterable as an Option.

    Consumes at most one element. An empty iterable, or a first element that
    is None, gives Nothing.
    """
    for x in xs:
        return from_nullable(x)
    return Nothing


def last[T](xs: Iterable[T]) -> Option[T]:
    """Return the last element of a finite iterable as an Option."""
    result: Option[T] = Nothing
    for x in xs:
        result = from_nullable(x)
    return result


def cast[T](value: object, type_: type[T]) -> Option[T]:
    """Return Some(value) if value is an instance of type_, else Nothing.

    Examples:
        >>> cast('foo', str)
        Some(value='foo')
        >>> cast('foo', int)
        NothingType()
    """
    if value is not None and isinstance(value, type_):
        return Some(value)
    return Nothing


def from_either[L, R](e: Left[L] | Right[R]) -> Option[R]:
    """Convert an Either to an Option, dropping the Left payload."""
    return e.to_option()


def to_either[T, L](m: Some[T] | NothingType, left: L) -> Left[L] | Right[T]:
    """Convert an Option to an Either, using left for Nothing."""
    return m.ok_or(left)
