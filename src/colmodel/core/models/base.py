"""Base models and types used across all modules.

This module contains the fundamental types that don't belong to any specific
analysis module (typing, temporal, etc.).
"""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Result(BaseModel, Generic[T]):
    """Result type for operations that can fail.

    Use this instead of exceptions for expected failures.
    Exceptions are reserved for unexpected/programming errors.
    """

    success: bool
    value: T | None = None
    error: str | None = None

    @classmethod
    def ok(cls, value: T) -> Result[T]:
        """Create a successful result."""
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str) -> Result[T]:
        """Create a failed result."""
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        """Get the value or raise if failed."""
        if not self.success:
            raise ValueError(f"Result failed: {self.error}")
        assert self.value is not None
        return self.value


# === Enums ===


class VarType(str, Enum):
    """Semantic type of a column."""

    LON = "LON"  # Longitude coordinate
    LAT = "LAT"  # Latitude coordinate
    ALT = "ALT"  # Altitude, depth or height
    TIME = "TIME"  # Dates and date-times
    SCALAR = "SCALAR"  # Continuous numeric quantity
    ENUM = "ENUM"  # Discrete labels


class VarSubType(str, Enum):
    """Refinement of a column's semantic type."""

    YEAR = "YEAR"  # Bare integer years, eg. 2015


# Raw cell value as it arrives from a source
CellValue = int | float | str | None
