"""Value coercion and derived numeric views.

Coercion rules:
- None, float NaN and blank strings are missing
- bool is never numeric
- int and float are numeric
- a string is numeric iff it matches a strict decimal grammar, and only when
  string coercion is enabled (it is disabled for ENUM columns, whose strings
  are labels)
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence

from colmodel.analysis.typing.models import NumericSummary
from colmodel.core.models.base import CellValue

_DECIMAL_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
_LEADING_INTEGER_RE = re.compile(r"^\s*([+-]?\d+)")


def is_missing(value: CellValue) -> bool:
    """Check whether a cell holds no data."""
    if value is None:
        return True
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, str):
        return not value.strip()
    return False


def to_number(value: CellValue, coerce_strings: bool = True) -> float | None:
    """Convert a cell to a float, or None if it is not numeric.

    Args:
        value: Raw cell value
        coerce_strings: Whether strings matching the decimal grammar count as numbers

    Returns:
        The numeric value, or None for missing and non-numeric cells
    """
    if is_missing(value) or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value)
    if coerce_strings and isinstance(value, str):
        text = value.strip()
        if _DECIMAL_RE.match(text):
            return float(text)
    return None


def is_integer(value: CellValue) -> bool:
    """Check whether a cell is an integral number, eg. 2015, '2015' or 2015.0."""
    number = to_number(value)
    return number is not None and math.isfinite(number) and number.is_integer()


def leading_integer(value: CellValue) -> int | None:
    """Parse the leading integer of a cell, eg. '12-10' -> 12, 2.5 -> 2."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, int):
        return value
    match = _LEADING_INTEGER_RE.match(value)
    return int(match.group(1)) if match else None


def summarize_numeric(values: Sequence[CellValue], coerce_strings: bool = True) -> NumericSummary:
    """Compute minimum, maximum and the numeric subsequence of values.

    Args:
        values: Raw cell values
        coerce_strings: Whether numeric strings count as numbers

    Returns:
        NumericSummary; min/max are NaN if any non-missing value is not numeric
    """
    numeric_values: list[float] = []
    text_count = 0
    for value in values:
        if is_missing(value):
            continue
        number = to_number(value, coerce_strings)
        if number is None:
            text_count += 1
        else:
            numeric_values.append(number)

    if text_count or not numeric_values:
        minimum = maximum = math.nan
    else:
        minimum = min(numeric_values)
        maximum = max(numeric_values)

    return NumericSummary(
        minimum=minimum,
        maximum=maximum,
        numeric_values=numeric_values,
        text_count=text_count,
    )


def replace_null_tokens(
    values: Sequence[CellValue], null_tokens: Iterable[str]
) -> tuple[list[CellValue], int]:
    """Rewrite every cell equal to a null token as None.

    Args:
        values: Raw cell values
        null_tokens: Strings to treat as missing, eg. ['-', 'na', 'NA']

    Returns:
        Tuple of (revised values, number of cells replaced)
    """
    tokens = {token for token in null_tokens}
    revised: list[CellValue] = []
    replaced = 0
    for value in values:
        if isinstance(value, str) and value in tokens:
            revised.append(None)
            replaced += 1
        else:
            revised.append(value)
    return revised, replaced


def get_unique_values(values: Sequence[CellValue]) -> list[CellValue]:
    """Return the distinct values in order of first occurrence."""
    return list(dict.fromkeys(values))


def indices_into(values: Sequence[CellValue], unique_values: Sequence[CellValue]) -> list[int]:
    """Map each value to its position in unique_values."""
    positions = {value: index for index, value in enumerate(unique_values)}
    return [positions[value] for value in values]
