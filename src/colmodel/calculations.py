"""Row-wise calculations across columns.

Values are coerced with the numeric rules of colmodel.analysis.typing.values;
missing and non-numeric cells become NaN.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from colmodel.analysis.typing.values import to_number
from colmodel.column import Column
from colmodel.core.models.base import CellValue


def _as_array(values: Sequence[CellValue]) -> np.ndarray:
    numbers = [to_number(value) for value in values]
    return np.array([np.nan if n is None else n for n in numbers], dtype=float)


def _check_lengths(columns: Sequence[Column]) -> None:
    lengths = {len(column) for column in columns}
    if len(lengths) > 1:
        names = ", ".join(f"{column.name}={len(column)}" for column in columns)
        raise ValueError(f"Columns have different row counts: {names}")


def sum_values(*columns: Column | Sequence[Column]) -> list[float]:
    """Sum the values of several columns row by row.

    Accepts the columns either as separate arguments or as a single sequence.

    Args:
        columns: The columns to add up

    Returns:
        Per-row sums

    Raises:
        ValueError: If no columns are given or their row counts differ
        TypeError: If an argument is not a Column
    """
    if len(columns) == 1 and not isinstance(columns[0], Column):
        flat = list(columns[0])
    else:
        flat = list(columns)
    for column in flat:
        if not isinstance(column, Column):
            raise TypeError(f"sum_values expects Column arguments, got {type(column).__name__}")
    if not flat:
        raise ValueError("sum_values needs at least one column")
    _check_lengths(flat)

    stacked = np.vstack([_as_array(column.values) for column in flat])
    return stacked.sum(axis=0).tolist()


def divide_values(
    numerator: Column,
    denominator: Column,
    nan_replace: float | None = None,
) -> list[float]:
    """Divide one column's values by another's, row by row.

    Args:
        numerator: Column whose values form the numerator
        denominator: Column whose values form the denominator
        nan_replace: If given, the result for rows whose denominator is zero

    Returns:
        Per-row quotients; zero denominators give inf/NaN unless nan_replace is set

    Raises:
        ValueError: If the row counts differ
    """
    _check_lengths([numerator, denominator])
    top = _as_array(numerator.values)
    bottom = _as_array(denominator.values)

    with np.errstate(divide="ignore", invalid="ignore"):
        quotient = np.divide(top, bottom)
    if nan_replace is not None:
        quotient = np.where(bottom == 0, nan_replace, quotient)
    return quotient.tolist()
