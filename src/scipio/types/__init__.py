"""Core types: Try, Success, Failure, Option, Some, Nothing."""

from scipio.types.option import Nothing, NothingType, Option, Some
from scipio.types.try_ import Failure, Success, Try, collect, failure, of, success

__all__ = [
    'Failure',
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'Success',
    'Try',
    'collect',
    'failure',
    'of',
    'success',
]
