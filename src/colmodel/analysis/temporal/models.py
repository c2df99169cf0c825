"""Temporal models.

Instants, availability intervals, the playback clock and date parse results.
All instants are timezone-aware UTC datetimes.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Iterator
from datetime import datetime, timedelta
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator

from colmodel.core.models.base import VarSubType

# =============================================================================
# Date Parsing Models
# =============================================================================


class DateFormat(str, Enum):
    """Column-wide date layout chosen by format detection."""

    YEAR = "year"  # Bare integer years, eg. 2015
    ISO8601 = "iso8601"  # yyyy-mm, yyyy-mm-dd or yyyy-mm-ddThh:mm:ss
    DAY_FIRST = "day_first"  # dd-mm-yyyy or dd/mm/yyyy
    MONTH_FIRST = "month_first"  # mm-dd-yyyy or mm/dd/yyyy


class DateParseResult(BaseModel):
    """Outcome of parsing a column's values as dates.

    Either every value parsed (instants has one entry per row), or parsing
    stopped at failed_value and instants is empty.
    """

    date_format: DateFormat
    subtype: VarSubType | None = None
    instants: list[datetime] = Field(default_factory=list)
    failed_value: Any = None
    failed_index: int | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


# =============================================================================
# Interval Models
# =============================================================================


class TimeInterval(BaseModel):
    """A closed interval [start, stop]."""

    model_config = {"frozen": True}

    start: datetime
    stop: datetime

    @model_validator(mode="after")
    def _check_order(self) -> TimeInterval:
        if self.stop < self.start:
            raise ValueError(f"Interval stop {self.stop} is before start {self.start}")
        return self

    @property
    def duration(self) -> timedelta:
        return self.stop - self.start

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant <= self.stop

    def overlaps(self, other: TimeInterval) -> bool:
        return self.start <= other.stop and other.start <= self.stop


class TimeIntervalCollection:
    """Ordered, non-overlapping collection of closed intervals.

    Adding an interval that overlaps existing ones merges them into a single
    interval spanning all of them.
    """

    def __init__(self, intervals: Iterable[TimeInterval] = ()):
        self._intervals: list[TimeInterval] = []
        # Parallel sorted keys for bisection
        self._starts: list[datetime] = []
        self._stops: list[datetime] = []
        for interval in intervals:
            self.add_interval(interval)

    def add_interval(self, interval: TimeInterval) -> None:
        """Insert an interval, merging any intervals it overlaps."""
        lo = bisect_left(self._stops, interval.start)
        hi = bisect_right(self._starts, interval.stop)
        merged = interval
        if lo < hi:
            merged = TimeInterval(
                start=min(self._starts[lo], interval.start),
                stop=max(self._stops[hi - 1], interval.stop),
            )
        self._intervals[lo:hi] = [merged]
        self._starts[lo:hi] = [merged.start]
        self._stops[lo:hi] = [merged.stop]

    def add_collection(self, other: TimeIntervalCollection) -> None:
        """Insert every interval of another collection."""
        for interval in other:
            self.add_interval(interval)

    @property
    def intervals(self) -> list[TimeInterval]:
        return list(self._intervals)

    @property
    def is_empty(self) -> bool:
        return not self._intervals

    @property
    def start(self) -> datetime | None:
        """Start of the first interval, or None when empty."""
        return self._intervals[0].start if self._intervals else None

    @property
    def stop(self) -> datetime | None:
        """Stop of the last interval, or None when empty."""
        return self._intervals[-1].stop if self._intervals else None

    def find_interval(self, instant: datetime) -> TimeInterval | None:
        """Return the interval containing instant, if any."""
        index = bisect_right(self._starts, instant) - 1
        if index >= 0 and self._intervals[index].contains(instant):
            return self._intervals[index]
        return None

    def contains(self, instant: datetime) -> bool:
        return self.find_interval(instant) is not None

    def __len__(self) -> int:
        return len(self._intervals)

    def __iter__(self) -> Iterator[TimeInterval]:
        return iter(self._intervals)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeIntervalCollection):
            return NotImplemented
        return self._intervals == other._intervals

    def __repr__(self) -> str:
        return f"TimeIntervalCollection({self._intervals!r})"


# =============================================================================
# Clock Models
# =============================================================================


class ClockRange(str, Enum):
    """Behavior of a clock when it reaches its start or stop time."""

    UNBOUNDED = "unbounded"  # Keep ticking past the stop time
    CLAMPED = "clamped"  # Stop at the stop time
    LOOP_STOP = "loop_stop"  # Wrap back to the start time


class ClockStep(str, Enum):
    """How a clock advances."""

    TICK_DEPENDENT = "tick_dependent"  # Fixed step per tick
    SYSTEM_CLOCK_MULTIPLIER = "system_clock_multiplier"  # Elapsed wall time times multiplier
    SYSTEM_CLOCK = "system_clock"  # Follows wall time


class PlaybackClock(BaseModel):
    """Start, stop, current time and speed for animating a time column."""

    start_time: datetime
    stop_time: datetime
    current_time: datetime
    multiplier: int
    clock_range: ClockRange = ClockRange.LOOP_STOP
    clock_step: ClockStep = ClockStep.SYSTEM_CLOCK_MULTIPLIER

    @property
    def duration(self) -> timedelta:
        return self.stop_time - self.start_time
