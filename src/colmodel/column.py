"""Typed column built from raw tabular values.

A Column holds a single variable of a table. On construction it:
1. Guesses its type and subtype from its name (unless given explicitly)
2. Rewrites null tokens such as '-' or 'na' in otherwise numeric SCALAR columns
3. For TIME columns, parses the values into instants and derives per-row
   availability intervals and a playback clock (falling back to SCALAR if
   the values are not dates)
4. Demotes SCALAR columns without any numeric value to ENUM
5. Derives numeric and unique-value views for its type

Setting `type` afterwards re-derives the numeric and unique-value views.
Time-derived fields are only computed at construction.

Example:
    column = Column("Postcode", ["2000", "3000", "2000"])
    column.type                        # VarType.ENUM
    column.indices_into_unique_values  # [0, 1, 0]
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field

from colmodel.analysis.temporal.clock import create_clock
from colmodel.analysis.temporal.intervals import (
    calculate_availabilities,
    calculate_finish_instants,
)
from colmodel.analysis.temporal.models import PlaybackClock, TimeIntervalCollection
from colmodel.analysis.temporal.parsing import parse_instants
from colmodel.analysis.typing.hints import get_hint_config
from colmodel.analysis.typing.models import ColumnSummary, NumericSummary
from colmodel.analysis.typing.values import (
    get_unique_values,
    indices_into,
    replace_null_tokens,
    summarize_numeric,
)
from colmodel.core.config import get_settings
from colmodel.core.logging import get_logger, log_context
from colmodel.core.models.base import CellValue, VarSubType, VarType

logger = get_logger(__name__)


class SelectionParent(Protocol):
    """Container coordinating which of its columns are active."""

    allow_multiple: bool

    def toggle_active_item(self, item: Column) -> None: ...


@dataclass
class SelectionState:
    """Selection flags of a column, as shown by a presentation layer."""

    is_active: bool = False
    is_selected: bool = False


class ColumnOptions(BaseModel):
    """Construction options for a Column."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    parent: Any = None  # SelectionParent; opaque to the column
    active: bool = False
    type: VarType | None = None
    subtype: VarSubType | None = None
    excluded_types: list[VarType] = Field(
        default_factory=list,
        description="Types never guessed from the name",
    )
    display_types: list[VarType] | None = Field(
        default=None,
        description="If set, the column is only visible when its type is listed",
    )
    null_tokens: list[str] | None = Field(
        default=None,
        description="Tokens replaced with null in numeric SCALAR columns (defaults from settings)",
    )
    display_duration: float | None = Field(
        default=None,
        gt=0,
        description="Minutes each time row stays current, overriding computed finish instants",
    )


class Column:
    """A single typed variable (column) of a table."""

    def __init__(
        self,
        name: str,
        values: Iterable[CellValue] | None = None,
        options: ColumnOptions | None = None,
    ):
        self.options = options or ColumnOptions()
        settings = get_settings()

        self.name = name
        self.parent: SelectionParent | None = self.options.parent
        self.selection = SelectionState(is_active=self.options.active)
        self.is_visible = True
        self.display_duration = self.options.display_duration

        self._unallowed_types = list(self.options.excluded_types)
        self._type = self.options.type
        self._subtype = self.options.subtype

        self._values: list[CellValue] = list(values) if values is not None else []
        self._unique_values: list[CellValue] | None = None
        self._indices_into_unique_values: list[int] | None = None

        self._instants: list[datetime] | None = None
        self._finish_instants: list[datetime] | None = None
        self._availabilities: list[TimeIntervalCollection] | None = None
        self._clock: PlaybackClock | None = None

        with log_context(column=name):
            if self._type is None:
                self._set_type_and_subtype_from_name()
            assert self._type is not None

            self._numeric = self._summarize()
            null_tokens = self.options.null_tokens
            self._revise_for_bad_numbers(null_tokens if null_tokens is not None else settings.null_tokens)

            if self._type == VarType.TIME:
                self._build_time_fields()

            # Looked like a SCALAR but has no numeric values
            if math.isnan(self._numeric.minimum) and self._type == VarType.SCALAR:
                self._type = VarType.ENUM

            self._update_for_type()
            logger.debug(
                "column_typed",
                type=self._type.value,
                subtype=self._subtype.value if self._subtype else None,
                rows=len(self._values),
            )

    # -------------------------------------------------------------------------
    # Construction steps
    # -------------------------------------------------------------------------

    def _set_type_and_subtype_from_name(self) -> None:
        hints = get_hint_config()
        self._type = hints.guess_type(self.name, self._unallowed_types)
        if self._subtype is None:
            self._subtype = hints.guess_subtype(self.name)

    def _summarize(self) -> NumericSummary:
        return summarize_numeric(self._values, coerce_strings=self._type != VarType.ENUM)

    def _revise_for_bad_numbers(self, null_tokens: list[str]) -> None:
        # At least one number but no valid minimum: some "bad" values like
        # "-" or "na" are in the way.
        if (
            self._type == VarType.SCALAR
            and math.isnan(self._numeric.minimum)
            and self._numeric.numeric_values
        ):
            self._values, replaced = replace_null_tokens(self._values, null_tokens)
            self._numeric = self._summarize()
            if replaced:
                logger.warning("null_tokens_replaced", count=replaced, tokens=null_tokens)

    def _build_time_fields(self) -> None:
        settings = get_settings()
        result = parse_instants(self._values, self._subtype, settings)
        if not result.success or not result.instants:
            # Not dates after all
            logger.info("time_column_demoted", reason=result.error or "no values")
            self._type = VarType.SCALAR
            return

        self._subtype = result.subtype
        self._instants = result.instants
        self._finish_instants = calculate_finish_instants(self._instants, settings)
        self._availabilities = calculate_availabilities(
            self._instants, self._finish_instants, self.display_duration
        )
        self._clock = create_clock(self._availabilities, settings)

    def _update_for_type(self) -> None:
        # Changing the type to TIME does not build the time fields.
        self._numeric = self._summarize()
        self._unique_values = None
        self._indices_into_unique_values = None
        if self.uses_indices_into_unique_values:
            self._unique_values = get_unique_values(self._values)
            self._indices_into_unique_values = indices_into(self._values, self._unique_values)

        display_types = self.options.display_types
        if display_types is not None:
            self.is_visible = self._type in display_types

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def type(self) -> VarType:
        """The column's semantic type. Setting it re-derives numeric views."""
        assert self._type is not None
        return self._type

    @type.setter
    def type(self, value: VarType) -> None:
        self._type = VarType(value)
        self._update_for_type()

    @property
    def subtype(self) -> VarSubType | None:
        return self._subtype

    @subtype.setter
    def subtype(self, value: VarSubType | None) -> None:
        self._subtype = VarSubType(value) if value is not None else None

    @property
    def values(self) -> list[CellValue]:
        return self._values

    @property
    def minimum_value(self) -> float:
        """Smallest numeric value, or NaN if the column is not purely numeric."""
        return self._numeric.minimum

    @property
    def maximum_value(self) -> float:
        return self._numeric.maximum

    @property
    def numeric_values(self) -> list[float]:
        return self._numeric.numeric_values

    @property
    def uses_indices_into_unique_values(self) -> bool:
        """Whether this is a non-numeric ENUM column."""
        return math.isnan(self._numeric.minimum) and self._type == VarType.ENUM

    @property
    def unique_values(self) -> list[CellValue] | None:
        """Distinct values in order of first occurrence. Only for non-numeric ENUMs."""
        return self._unique_values

    @property
    def indices_into_unique_values(self) -> list[int] | None:
        return self._indices_into_unique_values

    @property
    def indices_or_numeric_values(self) -> list[int] | list[float]:
        """Indices into unique_values for non-numeric ENUMs, else the numeric values.

        This is the quantity used for coloring and legends.
        """
        if self._indices_into_unique_values is not None:
            return self._indices_into_unique_values
        return self._numeric.numeric_values

    @property
    def instants(self) -> list[datetime] | None:
        """Per-row UTC instants. Only for TIME columns."""
        return self._instants

    @property
    def finish_instants(self) -> list[datetime] | None:
        """Per-row instants at which each row stops being current. Only for TIME columns."""
        return self._finish_instants

    @property
    def availabilities(self) -> list[TimeIntervalCollection] | None:
        """When each row is current. Only for TIME columns."""
        return self._availabilities

    @property
    def clock(self) -> PlaybackClock | None:
        """Clock spanning every row's availability. Only for TIME columns."""
        return self._clock

    @property
    def is_active(self) -> bool:
        return self.selection.is_active

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def toggle_active(self) -> None:
        """Flip the active flag, letting a single-select parent deactivate siblings."""
        self.selection.is_active = not self.selection.is_active
        if (
            self.selection.is_active
            and self.parent is not None
            and not getattr(self.parent, "allow_multiple", False)
        ):
            self.parent.toggle_active_item(self)

    def to_array_with_name(self) -> list[Any]:
        """Return the column as a list with the name first, eg. ['x', 1, 3, 4]."""
        return [self.name, *self._values]

    def summary(self) -> ColumnSummary:
        """Describe the column's type and derived views."""
        return ColumnSummary(
            name=self.name,
            type=self.type,
            subtype=self._subtype,
            row_count=len(self._values),
            minimum_value=None if math.isnan(self.minimum_value) else self.minimum_value,
            maximum_value=None if math.isnan(self.maximum_value) else self.maximum_value,
            numeric_count=len(self.numeric_values),
            unique_count=len(self._unique_values) if self._unique_values is not None else None,
            is_visible=self.is_visible,
            start_time=self._clock.start_time if self._clock else None,
            stop_time=self._clock.stop_time if self._clock else None,
            clock_multiplier=self._clock.multiplier if self._clock else None,
        )

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Column(name={self.name!r}, type={self.type.value}, rows={len(self._values)})"
