"""Bridges from exception-raising code into Results.

    - from_async: await an awaitable, capture its exception as a failure
    - from_call: call a function, capture its exception as a failure
    - capture: decorator applying either of the above to a function

Only ``Exception`` is captured. Cancellation, KeyboardInterrupt and
SystemExit derive from BaseException and keep propagating.

Example:
    >>> async def fetch() -> int:
    ...     raise ConnectionError("boom")
    >>> result = await from_async(fetch())
    >>> result.is_failure(), result.error.args
    (True, ('boom',))
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar, overload

from .logging import get_logger
from .result import Result, failure, success

T = TypeVar("T")
P = ParamSpec("P")

logger = get_logger("interop")


async def from_async(operation: Awaitable[T] | Callable[[], Awaitable[T]]) -> Result[T, Exception]:
    """Await operation and wrap its outcome.

    Args:
        operation: An awaitable (coroutine, Task, Future) or a zero-argument
            callable returning one. The callable form defers creating the
            coroutine until from_async runs, so a failure while creating it
            is captured too. A factory that returns something not awaitable
            fails at the await, so it also comes back as failure(TypeError).

    Returns:
        success(value) if it completes, failure(exc) if it raises.
    """
    try:
        value = await (operation() if callable(operation) and not inspect.isawaitable(operation) else operation)
    except Exception as e:
        logger.debug("captured %s from awaitable: %s", type(e).__name__, e, exc_info=True)
        return failure(e)
    return success(value)


def from_call(fn: Callable[P, T], /, *args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
    """Call fn(*args, **kwargs) and wrap its outcome."""
    try:
        value = fn(*args, **kwargs)
    except Exception as e:
        logger.debug("captured %s from %s: %s", type(e).__name__, getattr(fn, "__qualname__", fn), e, exc_info=True)
        return failure(e)
    return success(value)


@overload
def capture(fn: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[Result[T, Exception]]]: ...
@overload
def capture(fn: Callable[P, T]) -> Callable[P, Result[T, Exception]]: ...
def capture(fn: Callable[P, object]) -> Callable[P, object]:
    """Decorator: exceptions raised by fn come back as failures instead.

    Coroutine functions stay coroutine functions.

    Example:
        >>> @capture
        ... def parse(s: str) -> int:
        ...     return int(s)
        >>> parse("12")
        success(12)
    """
    if inspect.iscoroutinefunction(fn):
        @functools.wraps(fn)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[object, Exception]:
            return await from_async(lambda: fn(*args, **kwargs))  # type: ignore[arg-type,return-value]
        return async_wrapper

    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[object, Exception]:
        return from_call(fn, *args, **kwargs)
    return wrapper
