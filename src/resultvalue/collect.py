"""Aggregation of many Results into one.

pack_results and traverse fail fast: the first failure is returned and the
input is not advanced past it, so lazily produced results after a failure
are never produced. collect_results consumes everything and keeps all errors.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from .result import Result, failure, success

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


def pack_results(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Iterable[Result[T, E]] -> Result[list[T], E]. First failure wins.

    Example:
        >>> pack_results([success(1), success(2)])
        success([1, 2])
        >>> pack_results([success(1), failure("a"), failure("b")])
        failure('a')
    """
    values: list[T] = []
    for r in results:
        if r.is_failure():
            return r  # type: ignore[return-value]
        values.append(r.value)
    return success(values)


def traverse(items: Iterable[T], fn: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map fn over items and pack the results. fn is not called after the first failure."""
    return pack_results(fn(item) for item in items)


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect all Results, accumulating ALL errors (not fail-fast)."""
    values: list[T] = []
    errors: list[E] = []
    for r in results:
        if r.is_success():
            values.append(r.value)
        else:
            errors.append(r.error)
    return failure(errors) if errors else success(values)
