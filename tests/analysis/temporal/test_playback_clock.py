"""Tests for the playback clock."""

from colmodel.analysis.temporal.clock import create_clock
from colmodel.analysis.temporal.intervals import (
    calculate_availabilities,
    calculate_finish_instants,
)
from colmodel.analysis.temporal.models import ClockRange, ClockStep


def _availabilities(instants, display_duration=None):
    return calculate_availabilities(
        instants, calculate_finish_instants(instants), display_duration
    )


class TestCreateClock:
    """Tests for create_clock."""

    def test_spans_all_availabilities(self, utc):
        """Test that the clock spans the merged availabilities."""
        clock = create_clock(_availabilities([utc(2015, 1, 1), utc(2015, 1, 2)]))

        assert clock is not None
        assert clock.start_time == utc(2015, 1, 1)
        assert clock.stop_time == utc(2015, 1, 3)
        assert clock.current_time == clock.start_time
        assert clock.duration.days == 2

    def test_multiplier_targets_playback_seconds(self, utc):
        """Test that two days play back in 120 seconds."""
        clock = create_clock(_availabilities([utc(2015, 1, 1), utc(2015, 1, 2)]))

        assert clock.multiplier == 1440

    def test_single_instant(self, utc):
        """Test the multiplier for a lone instant."""
        clock = create_clock(_availabilities([utc(2015, 1, 1)]))

        assert clock.multiplier == 720

    def test_multiplier_rounds_halves_up(self, utc):
        """Test that a 300 second span over 120 seconds gives 3."""
        clock = create_clock(_availabilities([utc(2015, 1, 1)], display_duration=5))

        assert clock.duration.total_seconds() == 300
        assert clock.multiplier == 3

    def test_loops_with_system_clock(self, utc):
        """Test the clock loops and follows the system clock."""
        clock = create_clock(_availabilities([utc(2015, 1, 1)]))

        assert clock.clock_range == ClockRange.LOOP_STOP
        assert clock.clock_step == ClockStep.SYSTEM_CLOCK_MULTIPLIER

    def test_no_availability(self):
        """Test that no availabilities give no clock."""
        assert create_clock([]) is None
