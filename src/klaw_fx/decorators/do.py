"""@do_option and @do_either decorators for generator-based do-notation.

Python has no query-comprehension syntax, so chains of binds read best as a
generator: each ``yield`` unwraps one Option/Either, and the first Nothing or
Left ends the computation.
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any, ParamSpec, TypeVar

import wrapt

from klaw_fx.either import Left, Right
from klaw_fx.option import Nothing, NothingType, Some

__all__ = ['do_either', 'do_option']

P = ParamSpec('P')
T = TypeVar('T')
L = TypeVar('L')


def do_option(
    func: Callable[P, Generator[Some[Any] | NothingType, Any, T]],
) -> Callable[P, Some[T] | NothingType]:
    """Decorator for generator-based do-notation with Option.

    Yield Option values to extract their Some values; if Nothing is yielded,
    the generator is closed and Nothing is returned. The generator's return
    value is wrapped in Some, so returning None raises
    ``InvalidConstructionError``.

    Args:
        func: A generator function that yields Options and returns T.

    Returns:
        A function that returns Option[T].

    Example:
        ```python
        @do_option
        def total(prices: dict[str, int]):
            a = yield from_nullable(prices.get('a'))
            b = yield from_nullable(prices.get('b'))
            return a + b
        total({'a': 1, 'b': 2})
        # Some(value=3)
        total({'a': 1})
        # NothingType()
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, Generator[Some[Any] | NothingType, Any, T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Some[T] | NothingType:
        gen = wrapped(*args, **kwargs)
        try:
            step = next(gen)
            while True:
                if isinstance(step, NothingType):
                    gen.close()
                    return Nothing
                if not isinstance(step, Some):
                    gen.close()
                    raise TypeError(f'do_option expects Option values, got {type(step).__name__}')
                step = gen.send(step.value)
        except StopIteration as e:
            return Some(e.value)

    return wrapper(func)  # type: ignore[return-value]


def do_either(
    func: Callable[P, Generator[Left[Any] | Right[Any], Any, T]],
) -> Callable[P, Left[Any] | Right[T]]:
    """Decorator for generator-based do-notation with Either.

    Yield Either values to extract their Right values; the first Left
    yielded closes the generator and is returned unchanged. The generator's
    return value is wrapped in Right.

    Args:
        func: A generator function that yields Eithers and returns T.

    Returns:
        A function that returns Either[L, T].

    Example:
        ```python
        @do_either
        def lookup_and_parse(d: dict[str, str], key: str):
            s = yield Right(d[key]) if key in d else Left('can not find key')
            i = yield try_catch(int, s).map_left(lambda _: 'can not parse integer')
            return i * 1000
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, Generator[Left[Any] | Right[Any], Any, T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Left[Any] | Right[T]:
        gen = wrapped(*args, **kwargs)
        try:
            step = next(gen)
            while True:
                if isinstance(step, Left):
                    gen.close()
                    return step
                if not isinstance(step, Right):
                    gen.close()
                    raise TypeError(f'do_either expects Either values, got {type(step).__name__}')
                step = gen.send(step.value)
        except StopIteration as e:
            return Right(e.value)

    return wrapper(func)  # type: ignore[return-value]
