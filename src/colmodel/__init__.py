"""colmodel - column typing and time intervals for raw tabular data.

Example:
    from colmodel import Column

    column = Column("Start date (AEST)", ["2015-01-01", "2015-01-02"])
    column.type          # VarType.TIME
    column.clock         # PlaybackClock spanning both days
"""

__version__ = "0.1.0"

from colmodel.calculations import divide_values, sum_values
from colmodel.column import Column, ColumnOptions, SelectionState
from colmodel.core.models.base import Result, VarSubType, VarType

__all__ = [
    "Column",
    "ColumnOptions",
    "Result",
    "SelectionState",
    "VarSubType",
    "VarType",
    "divide_values",
    "sum_values",
    "__version__",
]
