"""Finish instants and per-row availability intervals.

Each row of a time column is "current" from its own instant until just
before the next distinct instant in the column. The last distinct instant
stays current for the average spacing of the distinct instants.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from datetime import datetime, timedelta

from colmodel.analysis.temporal.models import TimeInterval, TimeIntervalCollection
from colmodel.core.config import Settings, get_settings


def distinct_sorted(instants: Sequence[datetime]) -> list[datetime]:
    """Distinct instants in ascending order."""
    return sorted(set(instants))


def calculate_finish_instants(
    instants: Sequence[datetime],
    settings: Settings | None = None,
) -> list[datetime]:
    """For each instant, find when its row stops being current.

    A distinct instant finishes one second before the next distinct instant,
    or after dense_gap_fraction of the gap when the gap is shorter than
    dense_gap_seconds. The last distinct instant finishes after the average
    spacing, or after single_instant_span_seconds if it is the only one.
    Rows sharing an instant share its finish instant.

    Args:
        instants: Per-row instants, in row order
        settings: Settings (defaults to get_settings())

    Returns:
        Per-row finish instants, in row order
    """
    if not instants:
        return []
    settings = settings or get_settings()

    starts = distinct_sorted(instants)
    finishes: list[datetime] = []
    for start, next_start in zip(starts, starts[1:]):
        gap_seconds = (next_start - start).total_seconds()
        if gap_seconds < settings.dense_gap_seconds:
            finishes.append(start + timedelta(seconds=gap_seconds * settings.dense_gap_fraction))
        else:
            finishes.append(next_start - timedelta(seconds=1))

    n = len(starts)
    if n > 1:
        final_seconds = (starts[-1] - starts[0]).total_seconds() / (n - 1)
    else:
        final_seconds = settings.single_instant_span_seconds
    finishes.append(starts[-1] + timedelta(seconds=final_seconds))

    # First finish strictly after each row's instant
    return [finishes[bisect_right(finishes, instant)] for instant in instants]


def calculate_availability(
    instant: datetime,
    finish_instant: datetime,
    display_duration: float | None = None,
) -> TimeIntervalCollection:
    """Interval collection over which a single row is current.

    Args:
        instant: The row's instant
        finish_instant: The row's computed finish instant
        display_duration: Minutes the row stays current; overrides finish_instant

    Returns:
        Collection holding the single interval [instant, finish]
    """
    if display_duration is not None:
        finish_instant = instant + timedelta(minutes=display_duration)
    return TimeIntervalCollection([TimeInterval(start=instant, stop=finish_instant)])


def calculate_availabilities(
    instants: Sequence[datetime],
    finish_instants: Sequence[datetime],
    display_duration: float | None = None,
) -> list[TimeIntervalCollection]:
    """Per-row availability collections for a time column."""
    return [
        calculate_availability(instant, finish, display_duration)
        for instant, finish in zip(instants, finish_instants, strict=True)
    ]


def merge_availabilities(availabilities: Sequence[TimeIntervalCollection]) -> TimeIntervalCollection:
    """Merge per-row availabilities into a single collection."""
    merged = TimeIntervalCollection()
    for availability in availabilities:
        merged.add_collection(availability)
    return merged
