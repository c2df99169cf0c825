"""Column typing Pydantic models.

These models are used for computation and CLI output.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from colmodel.core.models.base import VarSubType, VarType


class NumericSummary(BaseModel):
    """Numeric view of a column's values.

    minimum and maximum are NaN when the column has no numeric value, or when
    any non-missing value is not numeric.
    """

    minimum: float
    maximum: float
    numeric_values: list[float] = Field(default_factory=list)
    text_count: int = 0  # Non-missing values that are not numeric


class ColumnSummary(BaseModel):
    """Flat description of a typed column."""

    name: str
    type: VarType
    subtype: VarSubType | None = None
    row_count: int
    minimum_value: float | None = None
    maximum_value: float | None = None
    numeric_count: int = 0
    unique_count: int | None = None
    is_visible: bool = True

    # Time columns only
    start_time: datetime | None = None
    stop_time: datetime | None = None
    clock_multiplier: int | None = None
