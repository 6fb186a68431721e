# simulation/time_controller.py
# Animation clock: advance, scrub and label the simulated time (minutes of day)
import math

from simulation.config import DEFAULT_CONFIG


def advance(current, config=DEFAULT_CONFIG):
    """
    Next clock value for one animation tick.
    Past max_time the clock resets to min_time and the overshoot is dropped,
    so the loop period is only approximately (max - min) / step ticks.
    """
    if current > config.max_time:
        return config.min_time
    return current + config.step


def set_time(value):
    """
    Direct assignment from the scrubber. No clamping: values above max_time are
    reset by the next advance, values below min_time are kept and simply count
    up from there.
    """
    return float(value)


def _round_half_up(value):
    return math.floor(value + 0.5)


def zero_fill(value):
    text = str(value)
    return "0" + text if len(text) < 2 else text


def format_display(time):
    if not math.isfinite(time):
        return "00", "00"
    minutes = _round_half_up(time)
    hour = minutes // 60 % 24
    minute = minutes % 60
    return zero_fill(hour), zero_fill(minute)


class Clock:
    """Holds the current simulated time and applies the pure functions above."""

    def __init__(self, config=DEFAULT_CONFIG, start=None):
        self.config = config
        self.time = config.min_time if start is None else float(start)

    def tick(self):
        self.time = advance(self.time, self.config)
        return self.time

    def set_time(self, value):
        self.time = set_time(value)
        return self.time

    def display(self):
        return format_display(self.time)
