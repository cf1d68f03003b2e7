"""Option type: Some[T] | Nothing for optional values.

A Some never wraps None; ``Some(None)`` raises ``InvalidConstructionError``
when it is built, so an Option can always be trusted to hold a real value
when ``is_some()`` is true.

Examples:
    >>> Some(21).map(lambda x: x * 2)
    Some(value=42)
    >>> Some(5).filter(lambda x: x < 0)
    NothingType()
    >>> Nothing.or_value(7)
    Some(value=7)
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from klaw_fx.errors import InvalidConstructionError, ValueAccessError, resolve_error

if TYPE_CHECKING:
    from klaw_fx.either import Left, Right

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'nothing', 'some']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.bind(lambda x: Some(str(x)))
        Some(value='42')
        >>> Some(None)
        Traceback (most recent call last):
        ...
        klaw_fx.errors.InvalidConstructionError: Some can not contain None
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidConstructionError()

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the fallback."""
        return self.value

    def unwrap_or_raise(self, error: BaseException | Callable[[], BaseException]) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the error."""
        return self.value

    def unwrap_or_default(self, factory: Callable[[], T] | None = None) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default factory."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def to_nullable(self) -> T | None:
        """Return the contained value."""
        return self.value

    def iter(self) -> Iterator[T]:
        """Iterate over the single contained value."""
        return iter(self)

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value. Returning None from it
                violates the Some invariant and raises.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Apply f to the contained value, ignoring the default."""
        return f(self.value)

    def map_or_else[U](self, default_fn: Callable[[], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Apply f to the contained value without calling default_fn."""
        return f(self.value)

    def bind[U, V](
        self,
        f: Callable[[T], Some[U] | NothingType],
        combine: Callable[[T, U], V] | None = None,
    ) -> Some[U] | Some[V] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or and_then. With ``combine`` the two steps are
        fused: the result is ``f(value).map(lambda u: combine(value, u))``,
        which keeps the first value in scope for the final projection.

        Args:
            f: Function that takes T and returns Option[U].
            combine: Optional projection of the original and the bound value.

        Returns:
            The Option returned by f, projected through combine if given.
        """
        bound = f(self.value)
        if combine is None:
            return bound
        value = self.value
        return bound.map(lambda u: combine(value, u))

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Alias for bind() without a combine step."""
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if the predicate holds for the value, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def or_(self, _other: Some[T] | NothingType) -> Some[T]:
        """Return self since this is Some."""
        return self

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self without calling the fallback."""
        return self

    def or_value(self, _default: T) -> Some[T]:
        """Return self, ignoring the default value."""
        return self

    def flatten[U](self: Some[Some[U] | NothingType]) -> Some[U] | NothingType:
        """Flatten a nested Option.

        Converts Option[Option[T]] into Option[T].

        Raises:
            TypeError: If the contained value is not an Option.
        """
        if not isinstance(self.value, Some | NothingType):
            raise TypeError(f'flatten expects a nested Option, got Some of {type(self.value).__name__}')
        return self.value

    def zip[U](self, other: Some[U] | NothingType) -> Some[tuple[T, U]] | NothingType:
        """Combine two Some values into a tuple, or Nothing if other is Nothing."""
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing

    def run(self, effect: Callable[[T], Any]) -> None:
        """Call effect with the contained value."""
        effect(self.value)

    def run_or_raise(
        self,
        effect: Callable[[T], Any],
        error: BaseException | Callable[[], BaseException] | None = None,  # noqa: ARG002
    ) -> None:
        """Call effect with the contained value; the error is not used."""
        effect(self.value)

    def run_when_true(self, effect: Callable[[], Any]) -> None:
        """Call effect if the contained value is True."""
        if self.value is True:
            effect()

    def ok_or[L](self, _left: L) -> Right[T]:
        """Convert to Either, returning Right(value)."""
        from klaw_fx.either import Right

        return Right(self.value)

    def ok_or_else[L](self, _f: Callable[[], L]) -> Right[T]:
        """Convert to Either, returning Right(value) without calling f."""
        from klaw_fx.either import Right

        return Right(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Use the ``Nothing`` constant rather than instantiating; every
    ``NothingType()`` compares and hashes equal to it anyway.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
        >>> Nothing.value
        Traceback (most recent call last):
        ...
        klaw_fx.errors.ValueAccessError: Nothing has no value
    """

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    @property
    def value(self) -> NoReturn:
        """Raise, since Nothing has no value. Do not catch this error."""
        raise ValueAccessError()

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise ValueAccessError since Nothing has no value."""
        raise ValueAccessError()

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return the default value."""
        return f()

    def unwrap_or_raise(self, error: BaseException | Callable[[], BaseException]) -> NoReturn:
        """Raise the given error, or the one built by the given factory."""
        raise resolve_error(error)

    def unwrap_or_default[T](self, factory: Callable[[], T] | None = None) -> T | None:
        """Return ``factory()``, or None when no factory is given."""
        if factory is None:
            return None
        return factory()

    def expect(self, msg: str) -> NoReturn:
        """Raise ValueAccessError with a custom message."""
        raise ValueAccessError(msg)

    def to_nullable(self) -> None:
        """Return None."""
        return None

    def iter(self) -> Iterator[Any]:
        """Return an empty iterator."""
        return iter(self)

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> U:
        """Return the default."""
        return default

    def map_or_else[T, U](self, default_fn: Callable[[], U], _f: Callable[[T], U]) -> U:
        """Return the result of default_fn."""
        return default_fn()

    def bind[T, U, V](
        self,
        _f: Callable[[T], Some[U] | NothingType],
        combine: Callable[[T, U], V] | None = None,  # noqa: ARG002
    ) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def or_[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other since self is Nothing."""
        return other

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Return the Option produced by f."""
        return f()

    def or_value[T](self, default: T) -> Some[T]:
        """Return Some(default)."""
        return Some(default)

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def zip[U](self, _other: Some[U] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def run[T](self, _effect: Callable[[T], Any]) -> None:
        """Do nothing."""
        return None

    def run_or_raise[T](
        self,
        _effect: Callable[[T], Any],
        error: BaseException | Callable[[], BaseException] | None = None,
    ) -> NoReturn:
        """Raise the given error, or InvalidOperationError if none is given."""
        raise resolve_error(error)

    def run_when_true(self, _effect: Callable[[], Any]) -> None:
        """Do nothing."""
        return None

    def ok_or[L](self, left: L) -> Left[L]:
        """Convert to Either, returning Left(left)."""
        from klaw_fx.either import Left

        return Left(left)

    def ok_or_else[L](self, f: Callable[[], L]) -> Left[L]:
        """Convert to Either, returning Left(f())."""
        from klaw_fx.either import Left

        return Left(f())


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def some[T](value: T) -> Option[T]:
    """Wrap a value in Some; raises InvalidConstructionError for None."""
    return Some(value)


def nothing() -> NothingType:
    """Return Nothing."""
    return Nothing
