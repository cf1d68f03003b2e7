"""Either type: Left[L] | Right[R] for computations with two outcomes.

By convention Left holds an error and Right holds a correct value (mnemonic:
"right" also means "correct"). All monadic operations - map, bind, filter -
act on the Right channel and pass a Left through unchanged.

Unlike Some, both variants accept any payload, None included.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from klaw_fx.errors import EitherAccessError, resolve_error

if TYPE_CHECKING:
    from klaw_fx.option import NothingType, Option

__all__ = ['Either', 'Left', 'Right', 'left', 'right']


class Left[L](msgspec.Struct, frozen=True, gc=False):
    """Left variant of Either, conventionally the failure.

    Examples:
        >>> err = Left('can not find key')
        >>> err.is_left()
        True
        >>> err.map(lambda x: x + 1)
        Left(value='can not find key')
        >>> err.right_or(0)
        0
    """

    value: L

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    @property
    def left(self) -> L:
        """The Left payload."""
        return self.value

    @property
    def right(self) -> NoReturn:
        """Raise, since this is a Left. Do not catch this error."""
        raise EitherAccessError('right')

    def is_left(self) -> TypeIs[Left[L]]:
        """Return True since this is Left."""
        return True

    def is_right(self) -> TypeIs[Right[object]]:
        """Return False since this is Left."""
        return False

    # --- Left channel accessors ---

    def left_or(self, _default: L) -> L:
        """Return the Left payload, ignoring the default."""
        return self.value

    def left_or_else(self, _f: Callable[[], L]) -> L:
        """Return the Left payload without calling the fallback."""
        return self.value

    def left_or_raise(self, _error: BaseException | Callable[[], BaseException]) -> L:
        """Return the Left payload, ignoring the error."""
        return self.value

    def left_or_default(self, _factory: Callable[[], L] | None = None) -> L:
        """Return the Left payload."""
        return self.value

    def left_iter(self) -> Iterator[L]:
        """Iterate over the Left payload."""
        yield self.value

    def left_to_nullable(self) -> L | None:
        """Return the Left payload."""
        return self.value

    def left_option(self) -> Option[L]:
        """Return the Left payload as an Option (Nothing if it is None)."""
        from klaw_fx.convert import from_nullable

        return from_nullable(self.value)

    # --- Right channel accessors ---

    def right_or[R](self, default: R) -> R:
        """Return the default."""
        return default

    def right_or_else[R](self, f: Callable[[], R]) -> R:
        """Return the result of f."""
        return f()

    def right_or_raise(self, error: BaseException | Callable[[], BaseException]) -> NoReturn:
        """Raise the given error, or the one built by the given factory."""
        raise resolve_error(error)

    def right_or_default[R](self, factory: Callable[[], R] | None = None) -> R | None:
        """Return ``factory()``, or None when no factory is given."""
        if factory is None:
            return None
        return factory()

    def right_iter(self) -> Iterator[Any]:
        """Return an empty iterator."""
        return iter(())

    def right_to_nullable(self) -> None:
        """Return None."""
        return None

    def to_option(self) -> NothingType:
        """Return Nothing since there is no Right value."""
        from klaw_fx.option import Nothing

        return Nothing

    # --- Combinators ---

    def map[R, U](self, _f: Callable[[R], U]) -> Left[L]:
        """Return self unchanged since this is Left."""
        return self

    def map_left[F](self, f: Callable[[L], F]) -> Left[F]:
        """Apply a function to the Left payload."""
        return Left(f(self.value))

    def bimap[F, R, U](self, left_fn: Callable[[L], F], _right_fn: Callable[[R], U]) -> Left[F]:
        """Apply left_fn to the Left payload."""
        return Left(left_fn(self.value))

    def map_or[R, U](self, default: U, _f: Callable[[R], U]) -> U:
        """Return the default since there is no Right value to map."""
        return default

    def map_or_else[R, U](self, default_fn: Callable[[], U], _f: Callable[[R], U]) -> U:
        """Return the result of default_fn."""
        return default_fn()

    def map_left_or[U](self, _default: U, f: Callable[[L], U]) -> U:
        """Apply f to the Left payload."""
        return f(self.value)

    def map_left_or_else[U](self, _default_fn: Callable[[], U], f: Callable[[L], U]) -> U:
        """Apply f to the Left payload without calling default_fn."""
        return f(self.value)

    def bind[R, U, V](
        self,
        _f: Callable[[R], Left[L] | Right[U]],
        combine: Callable[[R, U], V] | None = None,  # noqa: ARG002
    ) -> Left[L]:
        """Return self unchanged since this is Left."""
        return self

    def and_then[R, U](self, _f: Callable[[R], Left[L] | Right[U]]) -> Left[L]:
        """Return self unchanged since this is Left."""
        return self

    def filter[R](self, _predicate: Callable[[R], bool], default: L | None = None) -> Left[L]:  # noqa: ARG002
        """Return self unchanged since this is Left."""
        return self

    def or_[R](self, other: Left[L] | Right[R]) -> Left[L] | Right[R]:
        """Return other since this is Left."""
        return other

    def or_else[F, R](self, f: Callable[[L], Left[F] | Right[R]]) -> Left[F] | Right[R]:
        """Recover from the Left payload with f."""
        return f(self.value)

    def flatten(self) -> Left[L]:
        """Return self since there is nothing to flatten."""
        return self

    def swap(self) -> Right[L]:
        """Turn the Left into a Right with the same payload."""
        return Right(self.value)

    # --- Side effects ---

    def run[R](self, _effect: Callable[[R], Any]) -> None:
        """Do nothing."""
        return None

    def run_or_raise[R](
        self,
        _effect: Callable[[R], Any],
        error: BaseException | Callable[[], BaseException] | None = None,
    ) -> NoReturn:
        """Raise the given error, or InvalidOperationError if none is given."""
        raise resolve_error(error)

    def run_when_true(self, _effect: Callable[[], Any]) -> None:
        """Do nothing."""
        return None


class Right[R](msgspec.Struct, frozen=True, gc=False):
    """Right variant of Either, conventionally the success.

    Examples:
        >>> ok = Right(23)
        >>> ok.map(lambda x: x * 1000)
        Right(value=23000)
        >>> ok.bind(lambda x: Left('too small') if x < 42 else Right(x))
        Left(value='too small')
    """

    value: R

    def __iter__(self) -> Iterator[R]:
        yield self.value

    @property
    def left(self) -> NoReturn:
        """Raise, since this is a Right. Do not catch this error."""
        raise EitherAccessError('left')

    @property
    def right(self) -> R:
        """The Right payload."""
        return self.value

    def is_left(self) -> TypeIs[Left[object]]:
        """Return False since this is Right."""
        return False

    def is_right(self) -> TypeIs[Right[R]]:
        """Return True since this is Right."""
        return True

    # --- Left channel accessors ---

    def left_or[L](self, default: L) -> L:
        """Return the default."""
        return default

    def left_or_else[L](self, f: Callable[[], L]) -> L:
        """Return the result of f."""
        return f()

    def left_or_raise(self, error: BaseException | Callable[[], BaseException]) -> NoReturn:
        """Raise the given error, or the one built by the given factory."""
        raise resolve_error(error)

    def left_or_default[L](self, factory: Callable[[], L] | None = None) -> L | None:
        """Return ``factory()``, or None when no factory is given."""
        if factory is None:
            return None
        return factory()

    def left_iter(self) -> Iterator[Any]:
        """Return an empty iterator."""
        return iter(())

    def left_to_nullable(self) -> None:
        """Return None."""
        return None

    def left_option(self) -> NothingType:
        """Return Nothing since there is no Left value."""
        from klaw_fx.option import Nothing

        return Nothing

    # --- Right channel accessors ---

    def right_or(self, _default: R) -> R:
        """Return the Right payload, ignoring the default."""
        return self.value

    def right_or_else(self, _f: Callable[[], R]) -> R:
        """Return the Right payload without calling the fallback."""
        return self.value

    def right_or_raise(self, _error: BaseException | Callable[[], BaseException]) -> R:
        """Return the Right payload, ignoring the error."""
        return self.value

    def right_or_default(self, _factory: Callable[[], R] | None = None) -> R:
        """Return the Right payload."""
        return self.value

    def right_iter(self) -> Iterator[R]:
        """Iterate over the Right payload."""
        yield self.value

    def right_to_nullable(self) -> R | None:
        """Return the Right payload."""
        return self.value

    def to_option(self) -> Option[R]:
        """Return the Right payload as an Option (Nothing if it is None)."""
        from klaw_fx.convert import from_nullable

        return from_nullable(self.value)

    # --- Combinators ---

    def map[U](self, f: Callable[[R], U]) -> Right[U]:
        """Apply a function to the Right payload.

        Args:
            f: Function to apply to the Right value.

        Returns:
            Right containing the result of applying f to the value.
        """
        return Right(f(self.value))

    def map_left[F](self, _f: Callable[[Any], F]) -> Right[R]:
        """Return self unchanged since this is Right."""
        return self

    def bimap[F, U](self, _left_fn: Callable[[Any], F], right_fn: Callable[[R], U]) -> Right[U]:
        """Apply right_fn to the Right payload."""
        return Right(right_fn(self.value))

    def map_or[U](self, _default: U, f: Callable[[R], U]) -> U:
        """Apply f to the Right payload, ignoring the default."""
        return f(self.value)

    def map_or_else[U](self, _default_fn: Callable[[], U], f: Callable[[R], U]) -> U:
        """Apply f to the Right payload without calling default_fn."""
        return f(self.value)

    def map_left_or[L, U](self, default: U, _f: Callable[[L], U]) -> U:
        """Return the default since there is no Left value to map."""
        return default

    def map_left_or_else[L, U](self, default_fn: Callable[[], U], _f: Callable[[L], U]) -> U:
        """Return the result of default_fn."""
        return default_fn()

    def bind[L, U, V](
        self,
        f: Callable[[R], Left[L] | Right[U]],
        combine: Callable[[R, U], V] | None = None,
    ) -> Left[L] | Right[U] | Right[V]:
        """Apply a function that returns an Either to the Right payload.

        Also known as flatmap or and_then. With ``combine`` the result is
        ``f(value).map(lambda u: combine(value, u))``.

        Args:
            f: Function that takes R and returns Either[L, U].
            combine: Optional projection of the original and the bound value.

        Returns:
            The Either returned by f, projected through combine if given.
        """
        bound = f(self.value)
        if combine is None:
            return bound
        value = self.value
        return bound.map(lambda u: combine(value, u))

    def and_then[L, U](self, f: Callable[[R], Left[L] | Right[U]]) -> Left[L] | Right[U]:
        """Alias for bind() without a combine step."""
        return f(self.value)

    def filter[L](self, predicate: Callable[[R], bool], default: L | None = None) -> Right[R] | Left[L | None]:
        """Keep the Right if the predicate holds, else return Left(default).

        The Left carries ``default`` (None unless given), not the reason the
        predicate failed.
        """
        if predicate(self.value):
            return self
        return Left(default)

    def or_[L](self, _other: Left[L] | Right[R]) -> Right[R]:
        """Return self since this is Right."""
        return self

    def or_else[L, F](self, _f: Callable[[L], Left[F] | Right[R]]) -> Right[R]:
        """Return self without calling the recovery function."""
        return self

    def flatten[L, U](self: Right[Left[L] | Right[U]]) -> Left[L] | Right[U]:
        """Flatten a nested Either.

        Converts Either[L, Either[L, R]] into Either[L, R].

        Raises:
            TypeError: If the Right payload is not an Either.
        """
        if not isinstance(self.value, Left | Right):
            raise TypeError(f'flatten expects a nested Either, got Right of {type(self.value).__name__}')
        return self.value

    def swap(self) -> Left[R]:
        """Turn the Right into a Left with the same payload."""
        return Left(self.value)

    # --- Side effects ---

    def run(self, effect: Callable[[R], Any]) -> None:
        """Call effect with the Right payload."""
        effect(self.value)

    def run_or_raise(
        self,
        effect: Callable[[R], Any],
        error: BaseException | Callable[[], BaseException] | None = None,  # noqa: ARG002
    ) -> None:
        """Call effect with the Right payload; the error is not used."""
        effect(self.value)

    def run_when_true(self, effect: Callable[[], Any]) -> None:
        """Call effect if the Right payload is True."""
        if self.value is True:
            effect()


type Either[L, R] = Left[L] | Right[R]


def left[L](value: L) -> Left[L]:
    """Wrap a value in Left."""
    return Left(value)


def right[R](value: R) -> Right[R]:
    """Wrap a value in Right."""
    return Right(value)
