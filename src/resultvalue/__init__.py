"""Results as values: success or failure, without exceptions for routine control flow.

Example:
    >>> from resultvalue import Result, success, failure, pack_results
    >>>
    >>> def divide(a: int, b: int) -> Result[float, str]:
    ...     return failure("division by zero") if b == 0 else success(a / b)
    >>>
    >>> divide(10, 2).map(lambda x: x * 2).unwrap()
    10.0
    >>> divide(1, 0).unwrap_or_else(lambda e: float("nan"))
    nan
    >>> pack_results([divide(4, 2), divide(1, 0)])
    failure('division by zero')
"""

from .collect import collect_results, pack_results, traverse
from .errors import PanicCode, PanicInfo, ResultPanic, UnreachableError, UnwrapError, VariantAccessError, unreachable
from .interop import capture, from_async, from_call
from .result import AsyncResult, Result, failure, success
from .types import AnyResult, Variant

__all__ = [
    # Core type
    "Result", "Variant", "success", "failure",
    # Type aliases
    "AnyResult", "AsyncResult",
    # Aggregation
    "pack_results", "traverse", "collect_results",
    # Exception bridges
    "from_async", "from_call", "capture",
    # Panics
    "PanicCode", "PanicInfo", "ResultPanic", "UnwrapError", "VariantAccessError", "UnreachableError", "unreachable",
]
