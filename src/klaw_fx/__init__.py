"""klaw-fx: Option and Either types with functional combinators for Python 3.13+.

Flat imports (preferred):
    from klaw_fx import Option, Some, Nothing, Either, Left, Right
    from klaw_fx import sequence_option, select_valid, try_catch, safe

Submodule imports (for organization):
    from klaw_fx.option import Some, Nothing, Option
    from klaw_fx.either import Left, Right, Either
    from klaw_fx.traverse import sequence_either, where_either
    from klaw_fx.sequences import cycle, iterate, transpose
    from klaw_fx.monoid import Monoid, INT_ADD
"""

# Configuration
from klaw_fx._config import FxConfig, get_config, init

# Logging
from klaw_fx._logging import configure_logging, get_logger

# Conversions
from klaw_fx.convert import cast, from_either, from_nullable, head, last, to_either, to_nullable

# Decorators
from klaw_fx.decorators import do_either, do_option, safe

# Types
from klaw_fx.either import Either, Left, Right, left, right

# Errors
from klaw_fx.errors import (
    AccessError,
    EitherAccessError,
    FxError,
    InvalidConstructionError,
    InvalidOperationError,
    InvalidRangeError,
    ValueAccessError,
)

# Function combinators
from klaw_fx.functions import compose, const, curry, flip, try_catch

# Monoids
from klaw_fx.monoid import Monoid
from klaw_fx.option import Nothing, NothingType, Option, Some, nothing, some

# Ranges
from klaw_fx.ranges import to

# Traversals
from klaw_fx.traverse import (
    partition_either,
    select_valid,
    sequence,
    sequence_either,
    sequence_option,
    sequence_with_monoid,
    traverse_either,
    traverse_option,
    where_either,
    where_option,
)

__all__ = [
    # Errors
    'AccessError',
    # Either types
    'Either',
    'EitherAccessError',
    # Configuration
    'FxConfig',
    'FxError',
    'InvalidConstructionError',
    'InvalidOperationError',
    'InvalidRangeError',
    'Left',
    # Monoids
    'Monoid',
    # Option types
    'Nothing',
    'NothingType',
    'Option',
    'Right',
    'Some',
    'ValueAccessError',
    # Conversions
    'cast',
    # Function combinators
    'compose',
    'configure_logging',
    'const',
    'curry',
    # Decorators
    'do_either',
    'do_option',
    'flip',
    'from_either',
    'from_nullable',
    'get_config',
    'get_logger',
    'head',
    'init',
    'last',
    'left',
    'nothing',
    # Traversals
    'partition_either',
    'right',
    'safe',
    'select_valid',
    'sequence',
    'sequence_either',
    'sequence_option',
    'sequence_with_monoid',
    'some',
    # Ranges
    'to',
    'to_either',
    'to_nullable',
    'traverse_either',
    'traverse_option',
    'try_catch',
    'where_either',
    'where_option',
]
