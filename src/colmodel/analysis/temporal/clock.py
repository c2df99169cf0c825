"""Playback clock for time columns."""

from __future__ import annotations

import math
from collections.abc import Sequence

from colmodel.analysis.temporal.intervals import merge_availabilities
from colmodel.analysis.temporal.models import (
    ClockRange,
    ClockStep,
    PlaybackClock,
    TimeIntervalCollection,
)
from colmodel.core.config import Settings, get_settings


def create_clock(
    availabilities: Sequence[TimeIntervalCollection],
    settings: Settings | None = None,
) -> PlaybackClock | None:
    """Build a clock spanning every row's availability.

    The multiplier is chosen so a full playback takes about
    playback_seconds of wall time, looping at the end. Halves round up.

    Args:
        availabilities: Per-row availability collections
        settings: Settings (defaults to get_settings())

    Returns:
        PlaybackClock, or None if there is no availability at all
    """
    settings = settings or get_settings()
    merged = merge_availabilities(availabilities)
    if merged.start is None or merged.stop is None:
        return None

    total_seconds = (merged.stop - merged.start).total_seconds()
    return PlaybackClock(
        start_time=merged.start,
        stop_time=merged.stop,
        current_time=merged.start,
        multiplier=math.floor(total_seconds / settings.playback_seconds + 0.5),
        clock_range=ClockRange.LOOP_STOP,
        clock_step=ClockStep.SYSTEM_CLOCK_MULTIPLIER,
    )
