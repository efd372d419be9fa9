"""Tests for panic types and their diagnostics."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from resultvalue import (
    PanicCode,
    PanicInfo,
    ResultPanic,
    UnreachableError,
    UnwrapError,
    Variant,
    VariantAccessError,
    failure,
    success,
    unreachable,
)
from resultvalue.errors import payload_repr


def test_panic_info_render() -> None:
    bare = PanicInfo.create(PanicCode.UNREACHABLE, "Unreachable.")
    assert bare.render() == "Unreachable."
    assert str(bare) == "Unreachable."

    full = PanicInfo.create(PanicCode.UNWRAP_FAILED, "no user", variant=Variant.FAILURE, payload_repr="'bob'")
    assert full.render() == "no user: 'bob'"


def test_panic_info_is_frozen() -> None:
    info = PanicInfo.create(PanicCode.UNREACHABLE, "Unreachable.")
    with pytest.raises(ValidationError):
        info.message = "changed"  # type: ignore[misc]


def test_panic_hierarchy() -> None:
    for cls in (UnwrapError, VariantAccessError, UnreachableError):
        assert issubclass(cls, ResultPanic)
    assert issubclass(ResultPanic, RuntimeError)


def test_unreachable_messages() -> None:
    with pytest.raises(UnreachableError, match=r"^Unreachable\.$"):
        unreachable()

    with pytest.raises(UnreachableError) as exc_info:
        unreachable("tag was lost")
    assert str(exc_info.value) == "Unreachable; tag was lost"
    assert exc_info.value.info.code is PanicCode.UNREACHABLE


def test_unwrap_panic_on_success_side() -> None:
    with pytest.raises(UnwrapError) as exc_info:
        success(3).unwrap_err()

    assert exc_info.value.info.variant is Variant.SUCCESS
    assert exc_info.value.payload == 3
    assert exc_info.value.info.payload_repr == "3"


def test_payload_repr_truncated(monkeypatch: pytest.MonkeyPatch) -> None:
    from resultvalue.settings import clear_settings_cache

    monkeypatch.setenv("RESULTVALUE_PAYLOAD_REPR_LIMIT", "5")
    clear_settings_cache()

    assert payload_repr("abcdefghij") == "'abcd..."
    assert payload_repr("ab") == "'ab'"

    with pytest.raises(UnwrapError) as exc_info:
        failure("abcdefghij").unwrap()
    assert str(exc_info.value) == "Cannot unwrap failure result: 'abcd..."
    assert exc_info.value.payload == "abcdefghij"


class _ReprRaises:
    def __repr__(self) -> str:
        raise ValueError("repr exploded")


def test_unwrap_panics_even_when_repr_raises() -> None:
    payload = _ReprRaises()

    with pytest.raises(UnwrapError) as exc_info:
        failure(payload).expect("must be loaded")

    assert str(exc_info.value) == "must be loaded: <unrepresentable _ReprRaises>"
    assert exc_info.value.payload is payload


def test_unwrap_panics_even_with_invalid_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    from resultvalue.settings import clear_settings_cache

    monkeypatch.setenv("RESULTVALUE_PAYLOAD_REPR_LIMIT", "abc")
    clear_settings_cache()

    with pytest.raises(UnwrapError, match="^must be loaded: 1$"):
        failure(1).expect("must be loaded")
    with pytest.raises(UnwrapError, match="^Cannot unwrap failure result: 1$"):
        failure(1).unwrap()
