"""Discriminant and type aliases shared across the result modules."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from .result import Result


class Variant(StrEnum):
    """Tag of a Result. Exactly one per instance, fixed at construction."""
    SUCCESS = "success"
    FAILURE = "failure"


AnyResult: TypeAlias = "Result[Any, Any]"
