"""Argument guards and reporting for captured callback exceptions."""

from __future__ import annotations

from typing import Any

from scipio._config import get_config
from scipio._logging import get_logger
from scipio.errors import InvalidArgumentError

__all__ = ['note_captured', 'note_escalated', 'require_callable']


def require_callable(f: Any, name: str) -> None:
    """Raise InvalidArgumentError unless f is a callable.

    Called before any other work so a bad argument is reported the same way
    on both variants.
    """
    if f is None:
        raise InvalidArgumentError(name)
    if not callable(f):
        raise InvalidArgumentError(name, f'must be callable, got {type(f).__name__}')


def note_captured(operation: str, error: BaseException) -> None:
    """Log that a callback exception was turned into a Failure."""
    if not get_config().logging_enabled:
        return
    get_logger().debug('callback_captured', operation=operation, error=repr(error))


def note_escalated(operation: str, error: BaseException) -> None:
    """Log that a handler failure is about to be raised to the caller."""
    if not get_config().logging_enabled:
        return
    get_logger().error('fold_escalated', operation=operation, error=repr(error))
