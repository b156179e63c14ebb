"""scipio: a Try type for Python 3.13+.

A Try is either Success(value) or Failure(error). Chain map, flat_map,
recover, peek and fold on it instead of writing try/except blocks.

Flat imports (preferred):
    from scipio import Try, Success, Failure, of, success, failure
    from scipio import Option, Some, Nothing, safe

Submodule imports (for organization):
    from scipio.types import Try, Option
    from scipio.decorators import safe
    from scipio.errors import InvalidArgumentError
"""

# Configuration
from scipio._config import TryConfig, get_config, init

# Decorators
from scipio.decorators import safe

# Errors
from scipio.errors import (
    FoldBothHandlersError,
    FoldError,
    FoldHandlerError,
    InvalidArgumentError,
)

# Types
from scipio.types import (
    Failure,
    Nothing,
    NothingType,
    Option,
    Some,
    Success,
    Try,
    collect,
    failure,
    of,
    success,
)

__all__ = [
    'Failure',
    'FoldBothHandlersError',
    'FoldError',
    'FoldHandlerError',
    'InvalidArgumentError',
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'Success',
    'Try',
    'TryConfig',
    'collect',
    'failure',
    'get_config',
    'init',
    'of',
    'safe',
    'success',
]
