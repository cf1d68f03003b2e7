"""Error types raised by Option, Either and the supporting utilities.

Construction and access errors signal a bug in the calling code: check
``is_some()`` / ``is_left()`` first or use a combinator instead of reading a
branch directly. They are never caught inside klaw-fx.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Literal

__all__ = [
    'AccessError',
    'EitherAccessError',
    'FxError',
    'InvalidConstructionError',
    'InvalidOperationError',
    'InvalidRangeError',
    'ValueAccessError',
    'resolve_error',
]


class FxError(Exception):
    """Base class for all klaw-fx errors."""


# --- Construction Errors ---


class InvalidConstructionError(FxError, ValueError):
    """A sum type was built in a way that violates its invariant.

    Raised by ``Some(None)``: a Some always carries a value.
    """

    def __init__(self, message: str = 'Some can not contain None') -> None:
        super().__init__(message)


# --- Access Errors ---


class AccessError(FxError, LookupError):
    """The inactive branch of a sum type was read."""


class ValueAccessError(AccessError):
    """Nothing has no value - raised by ``Nothing.value`` and ``unwrap()``."""

    def __init__(self, message: str = 'Nothing has no value') -> None:
        super().__init__(message)


class EitherAccessError(AccessError):
    """The wrong channel of an Either was read."""

    def __init__(self, channel: Literal['left', 'right']) -> None:
        self.channel = channel
        other = 'right' if channel == 'left' else 'left'
        super().__init__(f'Tried to get the {channel} value from a {other} either')


# --- Operation Errors ---


class InvalidOperationError(FxError, RuntimeError):
    """Default error of ``run_or_raise`` when no error was supplied."""

    def __init__(self, message: str = 'Operation is not valid for the current state') -> None:
        super().__init__(message)


def resolve_error(error: BaseException | Callable[[], BaseException] | None) -> BaseException:
    """Turn an error argument into an exception instance.

    Accepts an exception instance, a zero-argument factory (an exception class
    works too) or None, which yields the default ``InvalidOperationError``.
    """
    if error is None:
        return InvalidOperationError()
    if isinstance(error, BaseException):
        return error
    return error()


class InvalidRangeError(FxError, ValueError):
    """Range bounds and step do not describe a finite range."""

    def __init__(self, start: int, stop: int, step: int) -> None:
        self.start = start
        self.stop = stop
        self.step = step
        if step == 0:
            msg = 'Range step can not be 0'
        else:
            msg = f'Range step {step} never reaches {stop} from {start}'
        super().__init__(msg)
