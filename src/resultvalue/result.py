"""Result type: the outcome of a fallible operation as a value.

A Result is exactly one of two variants:
- success, carrying a value of type T
- failure, carrying an error of type E

The variant is an explicit tag stored next to the payload, set once by
``success()`` or ``failure()`` and never changed. Every operation returns a
new Result; the receiver is never modified.

Examples:
    >>> success(21).map(lambda x: x * 2).unwrap()
    42
    >>> failure("no such user").map(lambda x: x * 2).unwrap_or_else(len)
    12
    >>> success(5).match(lambda v: f"got {v}", lambda e: f"failed: {e}")
    'got 5'

Narrowing is a runtime contract, not a static one: after ``is_success()``
returns True, ``.value`` is guaranteed to return the payload, and after
``is_failure()`` returns True, ``.error`` is. Reading the other accessor
raises VariantAccessError.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator
from typing import Generic, NoReturn, TypeAlias, TypeVar

from .errors import UnwrapError, VariantAccessError, unreachable
from .logging import get_logger
from .settings import setting
from .types import Variant

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped error type
R = TypeVar("R")  # Handler return type

logger = get_logger("result")

# Only holders of this key may call Result.__init__
_KEY = object()


class Result(Generic[T, E]):
    """Discriminated union representing success or failure.

    Do not instantiate directly; use success() or failure().

    Supports structural pattern matching on the tag:
        >>> match success(3):
        ...     case Result(Variant.SUCCESS, v): print(v)
        ...     case Result(Variant.FAILURE, e): print("error", e)
        3
    """

    __slots__ = ("_tag", "_payload")
    __match_args__ = ("tag", "payload")

    def __init__(self, tag: Variant, payload: T | E, key: object = None) -> None:
        if key is not _KEY:
            raise TypeError("Cannot instantiate Result directly. Use success() or failure().")
        if not isinstance(tag, Variant):
            unreachable(f"invalid result tag {tag!r}")
        object.__setattr__(self, "_tag", tag)
        object.__setattr__(self, "_payload", payload)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"Result is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"Result is immutable; cannot delete {name!r}")

    def _ok(self) -> bool:
        match self._tag:
            case Variant.SUCCESS:
                return True
            case Variant.FAILURE:
                return False
            case tag:
                unreachable(f"result tag {tag!r} is neither success nor failure")

    def _panic(self, message: str) -> NoReturn:
        logger.debug("unwrap on %s result: %s", self._tag, message)
        raise UnwrapError.create(message, self._tag, self._payload)

    # ─── Discrimination ──────────────────────────────────────────────

    @property
    def tag(self) -> Variant:
        """The variant of this result."""
        return self._tag

    @property
    def payload(self) -> T | E:
        """Raw payload of either variant. Read it together with tag, as pattern matching does."""
        return self._payload

    def is_success(self) -> bool:
        """True iff this is the success variant."""
        return self._ok()

    def is_failure(self) -> bool:
        """True iff this is the failure variant."""
        return not self._ok()

    @property
    def value(self) -> T:
        """Success payload. Raises VariantAccessError on a failure."""
        if self._ok():
            return self._payload  # type: ignore[return-value]
        raise VariantAccessError.create("value", self._tag)

    @property
    def error(self) -> E:
        """Failure payload. Raises VariantAccessError on a success."""
        if not self._ok():
            return self._payload  # type: ignore[return-value]
        raise VariantAccessError.create("error", self._tag)

    # ─── Transformation ──────────────────────────────────────────────

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Apply fn to the success value. A failure is carried over with the same error object.

        fn is called at most once, and never for a failure.
        """
        if self._ok():
            return Result(Variant.SUCCESS, fn(self._payload), _KEY)  # type: ignore[arg-type]
        return Result(Variant.FAILURE, self._payload, _KEY)

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        """Apply fn to the error. A success is carried over unchanged."""
        if self._ok():
            return Result(Variant.SUCCESS, self._payload, _KEY)
        return Result(Variant.FAILURE, fn(self._payload), _KEY)  # type: ignore[arg-type]

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain an operation that can fail. Failures short-circuit.

        Example:
            >>> parse = lambda s: success(int(s)) if s.isdigit() else failure(f"not a number: {s}")
            >>> success("42").and_then(parse)
            success(42)
        """
        return fn(self._payload) if self._ok() else Result(Variant.FAILURE, self._payload, _KEY)  # type: ignore[arg-type]

    def or_else(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Recover from a failure with fn. Successes pass through."""
        return Result(Variant.SUCCESS, self._payload, _KEY) if self._ok() else fn(self._payload)  # type: ignore[arg-type]

    # ─── Unwrapping ──────────────────────────────────────────────────

    def expect(self, message: str) -> T:
        """Success value, or raise UnwrapError carrying message.

        Only for failures that indicate a bug. Expected failures should go
        through match() or unwrap_or_else().
        """
        if self._ok():
            return self._payload  # type: ignore[return-value]
        self._panic(message)

    def unwrap(self) -> T:
        """Success value, or raise UnwrapError with the configured default message."""
        if self._ok():
            return self._payload  # type: ignore[return-value]
        self._panic(setting("unwrap_message"))

    def unwrap_or(self, default: T) -> T:
        return self._payload if self._ok() else default  # type: ignore[return-value]

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        """Success value, or fn(error). fn is not called for a success."""
        return self._payload if self._ok() else fn(self._payload)  # type: ignore[return-value,arg-type]

    def expect_err(self, message: str) -> E:
        """Failure error, or raise UnwrapError carrying message."""
        if not self._ok():
            return self._payload  # type: ignore[return-value]
        self._panic(message)

    def unwrap_err(self) -> E:
        if not self._ok():
            return self._payload  # type: ignore[return-value]
        self._panic("Cannot unwrap_err success result")

    def ok(self) -> T | None:
        """Success value or None."""
        return self._payload if self._ok() else None  # type: ignore[return-value]

    def err(self) -> E | None:
        """Failure error or None."""
        return None if self._ok() else self._payload  # type: ignore[return-value]

    # ─── Matching ────────────────────────────────────────────────────

    def match(self, on_success: Callable[[T], R], on_failure: Callable[[E], U]) -> R | U:
        """Run exactly one handler with the matching payload and return its result."""
        if self._ok():
            return on_success(self._payload)  # type: ignore[arg-type]
        return on_failure(self._payload)  # type: ignore[arg-type]

    def inspect(self, fn: Callable[[T], object]) -> Result[T, E]:
        """Call fn with the success value for side effects, return self."""
        if self._ok():
            fn(self._payload)  # type: ignore[arg-type]
        return self

    def inspect_err(self, fn: Callable[[E], object]) -> Result[T, E]:
        """Call fn with the error for side effects, return self."""
        if not self._ok():
            fn(self._payload)  # type: ignore[arg-type]
        return self

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __repr__(self) -> str:
        return f"{self._tag.value}({self._payload!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._tag is other._tag and self._payload == other._payload

    def __hash__(self) -> int:
        return hash((self._tag, self._payload))

    def __iter__(self) -> Iterator[T]:
        """Yields the value if success, nothing if failure."""
        if self._ok():
            yield self._payload  # type: ignore[misc]

    def __reduce__(self) -> tuple[object, ...]:
        # copy, deepcopy and pickle go through the constructor, not __setattr__
        return _restore, (self._tag, self._payload)


def _restore(tag: Variant, payload: object) -> Result[object, object]:
    return Result(tag, payload, _KEY)


AsyncResult: TypeAlias = Awaitable[Result[T, E]]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def success(value: T) -> Result[T, E]:
    """Construct the success variant."""
    return Result(Variant.SUCCESS, value, _KEY)


def failure(error: E) -> Result[T, E]:
    """Construct the failure variant."""
    return Result(Variant.FAILURE, error, _KEY)
