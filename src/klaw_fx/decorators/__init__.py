"""Decorators: @safe, @do_option and @do_either."""

from klaw_fx.decorators.do import do_either, do_option
from klaw_fx.decorators.safe import safe

__all__ = [
    'do_either',
    'do_option',
    'safe',
]
