"""Explicit success/failure results for request validation.

Service calls that can be rejected on their inputs return ``Ok(value)`` or
``Err(error)`` instead of raising, so callers have to branch on the outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class InvalidDateRange:
    """The requested period starts after it ends."""
    start: date
    end: date

    @property
    def message(self) -> str:
        return f"Start date {self.start.isoformat()} must not be after end date {self.end.isoformat()}"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: InvalidDateRange

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]


def validate_date_range(start: date, end: date) -> Err | None:
    """Return an Err when ``start`` is after ``end``; equal dates are valid."""
    if start > end:
        return Err(InvalidDateRange(start=start, end=end))
    return None
