"""
Tests for the animation clock.

Covers per-tick advance, hard wrap at max_time, scrubber assignment and the
HH:MM display labels.
"""

import pytest

from simulation.config import AnimationConfig, DEFAULT_CONFIG
from simulation.time_controller import Clock, advance, format_display, set_time, zero_fill


class TestAdvance:
    """Tests for one-tick clock progression."""

    @pytest.mark.parametrize("t", [600, 600.5, 845.25, 1089.999, 1090])
    def test_in_range_adds_step(self, t):
        """Inside [min, max] the clock moves forward by exactly one step."""
        assert advance(t) == pytest.approx(t + 0.001)

    def test_default_step(self):
        """Default step is base increment times speed factor."""
        assert DEFAULT_CONFIG.step == pytest.approx(0.001)

    @pytest.mark.parametrize("eps", [1e-9, 0.001, 0.5, 400])
    def test_past_max_resets_to_min(self, eps):
        """Past max_time the clock resets to min_time, dropping the overshoot."""
        assert advance(1090 + eps) == 600

    def test_custom_config(self):
        """Range and step come from the config."""
        config = AnimationConfig(min_time=0, max_time=10, base_increment=1, speed_factor=2)
        assert advance(4, config) == 6
        assert advance(10.5, config) == 0

    def test_below_min_keeps_counting(self):
        """Values below min_time are never pulled up to min_time."""
        assert advance(100) == pytest.approx(100.001)


class TestSetTime:
    """Tests for direct scrubber assignment."""

    @pytest.mark.parametrize("value", [600, 1090, 2000, 5, -3])
    def test_no_clamping(self, value):
        """Any value is accepted as-is."""
        assert set_time(value) == value

    def test_over_max_corrected_on_next_advance(self):
        """An over-range value is only reset by the following advance."""
        clock = Clock()
        clock.set_time(1500)
        assert clock.time == 1500
        assert clock.tick() == 600


class TestFormatDisplay:
    """Tests for hour/minute labels."""

    @pytest.mark.parametrize("t,expected", [
        (600, ("10", "00")),
        (630, ("10", "30")),
        (0, ("00", "00")),
        (1089.6, ("18", "10")),
        (59.5, ("01", "00")),
        (1440, ("00", "00")),
        (65, ("01", "05")),
    ])
    def test_known_values(self, t, expected):
        """Known minute values render as zero-padded 24h labels."""
        assert format_display(t) == expected

    def test_half_rounds_up(self):
        """Halves round up rather than to even."""
        assert format_display(0.5) == ("00", "01")
        assert format_display(2.5) == ("00", "03")

    @pytest.mark.parametrize("t", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite(self, t):
        """Non-finite times still produce a label."""
        assert format_display(t) == ("00", "00")

    def test_zero_fill(self):
        """Single digits get a leading zero, longer values are unchanged."""
        assert zero_fill(7) == "07"
        assert zero_fill(12) == "12"


class TestClockLoop:
    """End-to-end behaviour of the looping clock."""

    def test_full_cycle_returns_to_start(self):
        """After about (max - min) / step ticks the clock wraps back to 10:00."""
        clock = Clock()
        expected = round((1090 - 600) / 0.001)
        ticks = 0
        while True:
            ticks += 1
            if clock.tick() == 600:
                break
            assert ticks < expected + 10
        assert abs(ticks - expected) <= 3
        assert clock.time == 600
        assert clock.display() == ("10", "00")

    def test_clock_starts_at_min(self):
        """A fresh clock starts at min_time."""
        assert Clock().time == 600
        assert Clock(AnimationConfig(min_time=30)).time == 30
