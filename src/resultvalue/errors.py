"""Panics raised when a Result is used against its contract.

Expected failures travel as Failure payloads and never raise. The
exceptions here cover the other two cases:

- Programmer misuse: unwrapping or reading the wrong variant
- Invariant violation: an instance that is neither variant
"""

from __future__ import annotations

from enum import StrEnum
from typing import NoReturn, Self

from pydantic import BaseModel

from .settings import setting
from .types import Variant


class PanicCode(StrEnum):
    """Kinds of contract violation."""
    UNWRAP_FAILED = "UNWRAP_FAILED"
    VARIANT_ACCESS = "VARIANT_ACCESS"
    UNREACHABLE = "UNREACHABLE"


def payload_repr(payload: object) -> str:
    """repr() of a payload, truncated to the configured limit. Never raises."""
    try:
        text = repr(payload)
    except Exception:
        text = f"<unrepresentable {type(payload).__name__}>"
    limit = setting("payload_repr_limit")
    return text if len(text) <= limit else f"{text[:limit]}..."


class PanicInfo(BaseModel):
    """Structured description of a panic."""

    model_config = {"frozen": True}

    code: PanicCode
    message: str
    variant: Variant | None = None
    payload_repr: str | None = None

    @classmethod
    def create(
        cls,
        code: PanicCode,
        message: str,
        *,
        variant: Variant | None = None,
        payload_repr: str | None = None,
    ) -> Self:
        """Factory method for construction."""
        return cls(code=code, message=message, variant=variant, payload_repr=payload_repr)

    def render(self) -> str:
        """Message shown to the developer, with the offending payload when known."""
        return f"{self.message}: {self.payload_repr}" if self.payload_repr is not None else self.message

    __str__ = render


class ResultPanic(RuntimeError):
    """Base for all non-recoverable Result errors. Never raised for expected failures."""

    __slots__ = ("info",)

    def __init__(self, info: PanicInfo) -> None:
        self.info = info
        super().__init__(info.render())

    @property
    def code(self) -> PanicCode:
        return self.info.code


class UnwrapError(ResultPanic):
    """expect()/unwrap() on a failure, or expect_err()/unwrap_err() on a success."""

    __slots__ = ("payload",)

    def __init__(self, info: PanicInfo, payload: object) -> None:
        super().__init__(info)
        self.payload = payload

    @classmethod
    def create(cls, message: str, variant: Variant, payload: object) -> Self:
        return cls(
            PanicInfo.create(PanicCode.UNWRAP_FAILED, message, variant=variant, payload_repr=payload_repr(payload)),
            payload,
        )


class VariantAccessError(ResultPanic):
    """.value read on a failure, or .error read on a success."""

    @classmethod
    def create(cls, accessor: str, variant: Variant) -> Self:
        return cls(PanicInfo.create(
            PanicCode.VARIANT_ACCESS,
            f"Result.{accessor} is not available on a {variant} result; check the variant first",
            variant=variant,
        ))


class UnreachableError(ResultPanic):
    """Invariant violation: a Result that is neither success nor failure."""

    @classmethod
    def create(cls, message: str | None = None) -> Self:
        return cls(PanicInfo.create(PanicCode.UNREACHABLE, f"Unreachable; {message}" if message else "Unreachable."))


def unreachable(message: str | None = None) -> NoReturn:
    """Raise UnreachableError. Used where dispatch falls through both variants."""
    raise UnreachableError.create(message)
