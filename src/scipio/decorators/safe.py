"""@safe decorator for turning raising functions into Try-returning ones."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from scipio._internal.capture import note_captured
from scipio.types.try_ import Failure, Success, Try

__all__ = ['safe']


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Try[T]]: ...


@overload
def safe[**P, T](
    func: None = None,
    *,
    exceptions: tuple[type[Exception], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Try[T]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[Exception], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Failure.

    Wraps a function so that it returns Success(value) on success and
    Failure(exception) if an exception is raised. Exceptions outside
    `exceptions` propagate. A function returning None yields
    Failure(InvalidArgumentError), as with of().

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Try[T] instead of T.

    Example:
        ```python
        @safe
        def parse(s: str) -> int:
            return int(s)
        parse('42')
        # Success(42)
        parse('x')
        # Failure(ValueError("invalid literal for int() with base 10: 'x'"))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Try[T]:
        try:
            result = wrapped(*args, **kwargs)
        except catch as e:
            note_captured('safe', e)
            return Failure(e)
        try:
            return Success(result)
        except Exception as e:
            note_captured('safe', e)
            return Failure(e)

    if func is not None:
        return wrapper(func)
    return wrapper
