"""Error types raised by scipio itself.

Exceptions raised by caller-supplied functions are never listed here: those
are captured into a Failure. The types below cover the two cases where the
library has to raise on its own account: a bad argument, and a fold whose
handlers gave up.
"""

from __future__ import annotations

__all__ = [
    'FoldBothHandlersError',
    'FoldError',
    'FoldHandlerError',
    'InvalidArgumentError',
]


class InvalidArgumentError(ValueError):
    """A required argument was None or of the wrong kind."""

    def __init__(self, name: str, reason: str = 'cannot be None') -> None:
        self.name = name
        self.reason = reason
        super().__init__(f'{name} {reason}')


# --- Fold escalation ---


class FoldError(RuntimeError):
    """fold() could not produce a value: its handlers raised.

    fold() returns a plain value, so a failing handler cannot be reported
    as a Failure. Catch this base class to handle both variants below.
    """


class FoldHandlerError(FoldError):
    """The failure handler raised while folding a Failure."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        super().__init__(f'Failure function raised an exception: {error!r}')


class FoldBothHandlersError(FoldError):
    """Both handlers raised while folding a Success.

    Attributes:
        success_error: What the success handler raised.
        failure_error: What the failure handler raised when given success_error.
    """

    def __init__(self, success_error: Exception, failure_error: Exception) -> None:
        self.success_error = success_error
        self.failure_error = failure_error
        super().__init__(
            f'Both success and failure functions raised exceptions: {success_error!r}, {failure_error!r}'
        )
