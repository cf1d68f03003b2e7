"""Function combinators: constant, flip, curry, compose, arrows and try_catch."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from klaw_fx._logging import get_logger
from klaw_fx.either import Left, Right

__all__ = [
    'compose',
    'const',
    'curry',
    'fanout',
    'first',
    'flip',
    'product',
    'second',
    'try_catch',
]

logger = get_logger(__name__)


def const[T](value: T) -> Callable[[], T]:
    """Return a zero-argument function that always returns value."""
    return lambda: value


def flip[A, B, C](f: Callable[[A, B], C]) -> Callable[[B, A], C]:
    """Swap the two arguments of a binary function."""
    return lambda b, a: f(a, b)


def curry(f: Callable[..., Any], *args: Any) -> Callable[..., Any]:
    """Fix the first argument of f.

    With an argument, ``curry(f, a)`` returns ``lambda *rest: f(a, *rest)``.
    Without one, ``curry(f)`` returns a function that takes the first
    argument and then returns that partially applied function.

    Examples:
        >>> add = lambda x, y: x + y
        >>> curry(add)(1)(2)
        3
        >>> curry(add, 1)(2)
        3
    """
    if args:
        (first_arg,) = args
        return lambda *rest: f(first_arg, *rest)
    return lambda a: lambda *rest: f(a, *rest)


def compose[A, B, C](f: Callable[[B], C], g: Callable[[A], B]) -> Callable[[A], C]:
    """Return ``x -> f(g(x))``."""
    return lambda x: f(g(x))


def fanout[A, B, C](f: Callable[[A], B], g: Callable[[A], C]) -> Callable[[A], tuple[B, C]]:
    """Feed one input to both f and g and pair the results."""
    return lambda a: (f(a), g(a))


def product[A, B, C, D](f: Callable[[A], C], g: Callable[[B], D]) -> Callable[[tuple[A, B]], tuple[C, D]]:
    """Apply f and g to the two halves of a pair."""
    return lambda ab: (f(ab[0]), g(ab[1]))


def first[A, B, C](f: Callable[[A], B]) -> Callable[[tuple[A, C]], tuple[B, C]]:
    """Apply f to the first element of a pair."""
    return lambda ac: (f(ac[0]), ac[1])


def second[A, B, C](f: Callable[[A], B]) -> Callable[[tuple[C, A]], tuple[C, B]]:
    """Apply f to the second element of a pair."""
    return lambda ca: (ca[0], f(ca[1]))


def try_catch[R](f: Callable[..., R], *args: Any, **kwargs: Any) -> Left[Exception] | Right[R]:
    """Call f and capture its outcome as an Either.

    A normal return becomes Right(result); any raised Exception becomes
    Left(exception), whatever its type. BaseExceptions such as
    KeyboardInterrupt still propagate.

    Args:
        f: The function to call.
        *args: Positional arguments for f.
        **kwargs: Keyword arguments for f.

    Returns:
        Right(f(*args, **kwargs)) or Left(exception).

    Example:
        ```python
        try_catch(int, '23')
        # Right(value=23)
        try_catch(int, 'abcd')
        # Left(value=ValueError("invalid literal for int() with base 10: 'abcd'"))
        ```
    """
    try:
        return Right(f(*args, **kwargs))
    except Exception as e:
        logger.debug(
            'exception_captured',
            function=getattr(f, '__qualname__', repr(f)),
            exc_type=type(e).__name__,
        )
        return Left(e)
