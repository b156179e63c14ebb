"""Try type: Success[T] | Failure[T] for computations that may raise.

A Try holds either the value a computation produced or the exception it
raised. Operations on a Try never raise on account of the functions passed
to them: an exception raised by a caller-supplied function becomes a
Failure. The exceptions are unwrap(), which re-raises the stored error,
fold(), which escalates when its handlers give up, and InvalidArgumentError
for arguments that are None or not callable.

Example:
    ```python
    from scipio import of, success

    success('42').flat_map(lambda s: of(lambda: int(s))).map(lambda n: n * 2)
    # Success(84)

    of(lambda: int('x')).recover(lambda e: -1).unwrap()
    # -1
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from scipio._internal.capture import note_captured, note_escalated, require_callable
from scipio.errors import FoldBothHandlersError, FoldHandlerError, InvalidArgumentError

if TYPE_CHECKING:
    from scipio.types.option import Option

__all__ = ['Failure', 'Success', 'Try', 'collect', 'failure', 'of', 'success']


def _captured[T](operation: str, error: Exception) -> Failure[T]:
    note_captured(operation, error)
    return Failure(error)


def _ensure_try[T](operation: str, returned: Any) -> Try[T]:
    if isinstance(returned, Success | Failure):
        return returned
    raise InvalidArgumentError(
        f'{operation} function result', f'must be a Success or Failure, got {type(returned).__name__}'
    )


class Success[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Try containing the produced value.

    Examples:
        >>> Success(42).map(lambda x: x * 2)
        Success(84)
        >>> Success(42).recover(lambda e: 0)
        Success(42)
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidArgumentError('value')

    def is_success(self) -> TypeIs[Success[T]]:
        """Return True since this is Success."""
        return True

    def is_failure(self) -> TypeIs[Failure[T]]:
        """Return False since this is Success."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def to_optional(self) -> Option[T]:
        """Convert to Option, returning Some(value)."""
        from scipio.types.option import Some

        return Some(self.value)

    def map[U](self, f: Callable[[T], U]) -> Try[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the value.

        Returns:
            Success of the function's result, or Failure of what it raised.
        """
        require_callable(f, 'f')
        try:
            return Success(f(self.value))
        except Exception as e:
            return _captured('map', e)

    def flat_map[U](self, f: Callable[[T], Try[U]]) -> Try[U]:
        """Apply a function that returns a Try to the contained value.

        Also known as bind or and_then.

        Args:
            f: Function that takes T and returns Try[U].

        Returns:
            The Try returned by f, or Failure of what it raised.
        """
        require_callable(f, 'f')
        try:
            return _ensure_try('flat_map', f(self.value))
        except Exception as e:
            return _captured('flat_map', e)

    def recover(self, f: Callable[[Exception], T]) -> Success[T]:
        """Return self unchanged since this is Success."""
        require_callable(f, 'f')
        return self

    def recover_with(self, f: Callable[[Exception], Try[T]]) -> Success[T]:
        """Return self unchanged since this is Success."""
        require_callable(f, 'f')
        return self

    def and_finally(self, action: Callable[[], object]) -> Try[T]:
        """Run an action for its side effects.

        Returns:
            self if the action completes, else Failure of what it raised.
        """
        require_callable(action, 'action')
        try:
            action()
        except Exception as e:
            return _captured('and_finally', e)
        return self

    def peek_success(self, f: Callable[[T], object]) -> Try[T]:
        """Call a function with the value for side effects.

        Returns:
            self if f completes, else Failure of what it raised.
        """
        require_callable(f, 'f')
        try:
            f(self.value)
        except Exception as e:
            return _captured('peek_success', e)
        return self

    def peek_failure(self, f: Callable[[Exception], object]) -> Success[T]:
        """Return self unchanged since this is Success."""
        require_callable(f, 'f')
        return self

    def peek(self, on_success: Callable[[T], object], on_failure: Callable[[Exception], object]) -> Try[T]:
        """Call on_success with the value; on_failure is not called."""
        require_callable(on_success, 'on_success')
        require_callable(on_failure, 'on_failure')
        return self.peek_success(on_success)

    def fold[R](self, on_success: Callable[[T], R], on_failure: Callable[[Exception], R]) -> R:
        """Reduce to a plain value with on_success.

        If on_success raises, its exception is handed to on_failure instead.

        Raises:
            FoldBothHandlersError: If on_failure raises as well.
        """
        require_callable(on_success, 'on_success')
        require_callable(on_failure, 'on_failure')
        try:
            return on_success(self.value)
        except Exception as e:
            success_error = e
        try:
            return on_failure(success_error)
        except Exception as e:
            note_escalated('fold', e)
            raise FoldBothHandlersError(success_error, e) from e

    def __repr__(self) -> str:
        return f'Success({self.value!r})'


# Not gc=False: the error's traceback can reference frames holding this instance.
class Failure[T](msgspec.Struct, frozen=True):
    """Failure variant of Try containing the raised exception.

    Examples:
        >>> Failure(ValueError('boom')).map(lambda x: x * 2)
        Failure(ValueError('boom'))
        >>> Failure(ValueError('boom')).recover(lambda e: 0)
        Success(0)
    """

    error: BaseException

    def __post_init__(self) -> None:
        if self.error is None:
            raise InvalidArgumentError('error')
        if not isinstance(self.error, BaseException):
            raise InvalidArgumentError('error', f'must be an exception, got {type(self.error).__name__}')

    def is_success(self) -> TypeIs[Success[T]]:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure[T]]:
        """Return True since this is Failure."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise the contained error.

        Raises:
            BaseException: The stored error itself.
        """
        raise self.error

    def to_optional(self) -> Option[T]:
        """Convert to Option, returning Nothing since this is Failure."""
        from scipio.types.option import Nothing

        return Nothing

    def map[U](self, f: Callable[[T], U]) -> Failure[U]:
        """Return self unchanged since this is Failure."""
        require_callable(f, 'f')
        return self  # type: ignore[return-value]

    def flat_map[U](self, f: Callable[[T], Try[U]]) -> Failure[U]:
        """Return self unchanged since this is Failure."""
        require_callable(f, 'f')
        return self  # type: ignore[return-value]

    def recover(self, f: Callable[[Exception], T]) -> Try[T]:
        """Compute a replacement value from the error.

        Returns:
            Success of the function's result, or Failure of what it raised.
        """
        require_callable(f, 'f')
        try:
            return Success(f(self.error))  # type: ignore[arg-type]
        except Exception as e:
            return _captured('recover', e)

    def recover_with(self, f: Callable[[Exception], Try[T]]) -> Try[T]:
        """Compute a replacement Try from the error.

        Returns:
            The Try returned by f, or Failure of what it raised.
        """
        require_callable(f, 'f')
        try:
            return _ensure_try('recover_with', f(self.error))  # type: ignore[arg-type]
        except Exception as e:
            return _captured('recover_with', e)

    def and_finally(self, action: Callable[[], object]) -> Try[T]:
        """Run an action for its side effects.

        Returns:
            self if the action completes, else a new Failure of what it raised.
        """
        require_callable(action, 'action')
        try:
            action()
        except Exception as e:
            return _captured('and_finally', e)
        return self

    def peek_success(self, f: Callable[[T], object]) -> Failure[T]:
        """Return self unchanged since this is Failure."""
        require_callable(f, 'f')
        return self

    def peek_failure(self, f: Callable[[Exception], object]) -> Failure[T]:
        """Call a function with the error for side effects.

        Returns:
            self if f completes, else a new Failure of what it raised.
        """
        require_callable(f, 'f')
        try:
            f(self.error)  # type: ignore[arg-type]
        except Exception as e:
            return _captured('peek_failure', e)
        return self

    def peek(self, on_success: Callable[[T], object], on_failure: Callable[[Exception], object]) -> Failure[T]:
        """Call on_failure with the error; on_success is not called."""
        require_callable(on_success, 'on_success')
        require_callable(on_failure, 'on_failure')
        return self.peek_failure(on_failure)

    def fold[R](self, on_success: Callable[[T], R], on_failure: Callable[[Exception], R]) -> R:
        """Reduce to a plain value with on_failure.

        Raises:
            FoldHandlerError: If on_failure raises.
        """
        require_callable(on_success, 'on_success')
        require_callable(on_failure, 'on_failure')
        try:
            return on_failure(self.error)  # type: ignore[arg-type]
        except Exception as e:
            note_escalated('fold', e)
            raise FoldHandlerError(e) from e

    def __repr__(self) -> str:
        return f'Failure({self.error!r})'


type Try[T] = Success[T] | Failure[T]


def of[T](supplier: Callable[[], T]) -> Try[T]:
    """Call supplier and capture the outcome.

    Args:
        supplier: Zero-argument function producing the value.

    Returns:
        Success(value) if supplier returns, Failure(exception) if it raises.

    Examples:
        >>> of(lambda: 1 / 2)
        Success(0.5)
        >>> of(lambda: 1 / 0)
        Failure(ZeroDivisionError('division by zero'))
    """
    require_callable(supplier, 'supplier')
    try:
        return Success(supplier())
    except Exception as e:
        return _captured('of', e)


def success[T](value: T) -> Success[T]:
    """Wrap a value in Success. None is rejected."""
    return Success(value)


def failure[T](error: BaseException) -> Failure[T]:
    """Wrap an exception in Failure. None is rejected."""
    return Failure(error)


def collect[T](tries: Iterable[Try[T]]) -> Try[list[T]]:
    """Collect an iterable of Try into a Try of list.

    Short-circuits on the first Failure encountered.

    Examples:
        >>> collect([Success(1), Success(2)])
        Success([1, 2])
        >>> collect([Success(1), Failure(ValueError('x')), Success(3)])
        Failure(ValueError('x'))
    """
    values: list[T] = []
    for t in tries:
        if isinstance(t, Failure):
            return t  # type: ignore[return-value]
        values.append(t.value)
    return Success(values)
