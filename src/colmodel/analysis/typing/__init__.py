"""Column type inference module.

This module provides:
- Name hints for guessing a column's type and subtype
- Value coercion and numeric views (min/max, numeric subset)
- Null-token repair and unique-value indexing for categorical columns

Usage:
    from colmodel.analysis.typing import get_hint_config, summarize_numeric
"""

from colmodel.analysis.typing.hints import (
    HintConfig,
    NameHint,
    NoSuitableTypeError,
    get_hint_config,
    load_hint_config,
)
from colmodel.analysis.typing.models import ColumnSummary, NumericSummary
from colmodel.analysis.typing.values import (
    get_unique_values,
    indices_into,
    replace_null_tokens,
    summarize_numeric,
    to_number,
)

__all__ = [
    # Hints
    "HintConfig",
    "NameHint",
    "NoSuitableTypeError",
    "get_hint_config",
    "load_hint_config",
    # Values
    "get_unique_values",
    "indices_into",
    "replace_null_tokens",
    "summarize_numeric",
    "to_number",
    # Models
    "ColumnSummary",
    "NumericSummary",
]
