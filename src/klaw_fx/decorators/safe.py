"""@safe decorator for turning raised exceptions into Left values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from klaw_fx._logging import get_logger
from klaw_fx.either import Left, Right

__all__ = ['safe']

P = ParamSpec('P')
T = TypeVar('T')
E = TypeVar('E', bound=BaseException)

logger = get_logger(__name__)


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Left[Exception] | Right[T]]: ...


@overload
def safe[E: BaseException](
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, T]], Callable[P, Left[E] | Right[T]]]: ...


@overload
def safe[E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Left[E] | Right[T]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Decorator version of ``try_catch``.

    Wraps a function so that it returns Right(value) on success and
    Left(exception) if an exception is raised.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to capture. Defaults to
            (Exception,); anything else propagates.

    Returns:
        A wrapped function that returns Either[E, T] instead of T.

    Example:
        ```python
        @safe
        def parse(s: str) -> int:
            return int(s)
        parse('23')
        # Right(value=23)
        parse('abcd')
        # Left(value=ValueError("invalid literal for int() with base 10: 'abcd'"))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Left[Any] | Right[T]:
        try:
            return Right(wrapped(*args, **kwargs))
        except catch as e:
            logger.debug(
                'exception_captured',
                function=wrapped.__qualname__,
                exc_type=type(e).__name__,
            )
            return Left(e)

    if func is not None:
        return wrapper(func)
    return wrapper
