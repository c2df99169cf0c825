"""Temporal interval building for time columns.

Provides:
- Date format detection and parsing into UTC instants
- Per-row finish instants and availability intervals
- An aggregate playback clock

Example:
    from colmodel.analysis.temporal import calculate_finish_instants, parse_instants

    result = parse_instants(["2015-01-01", "2015-01-02"])
    if result.success:
        finishes = calculate_finish_instants(result.instants)
"""

from colmodel.analysis.temporal.clock import create_clock
from colmodel.analysis.temporal.intervals import (
    calculate_availabilities,
    calculate_availability,
    calculate_finish_instants,
    merge_availabilities,
)
from colmodel.analysis.temporal.models import (
    ClockRange,
    ClockStep,
    DateFormat,
    DateParseResult,
    PlaybackClock,
    TimeInterval,
    TimeIntervalCollection,
)
from colmodel.analysis.temporal.parsing import detect_date_format, parse_instants

__all__ = [
    # Functions
    "calculate_availabilities",
    "calculate_availability",
    "calculate_finish_instants",
    "create_clock",
    "detect_date_format",
    "merge_availabilities",
    "parse_instants",
    # Models
    "ClockRange",
    "ClockStep",
    "DateFormat",
    "DateParseResult",
    "PlaybackClock",
    "TimeInterval",
    "TimeIntervalCollection",
]
