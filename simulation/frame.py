# simulation/frame.py
# One tick's worth of renderer input
from dataclasses import dataclass
from typing import List

from simulation.config import DEFAULT_CONFIG
from simulation.records import StopRecord, TemporalRecord
from simulation.time_controller import advance, format_display
from simulation.trip_selection import active_at


@dataclass(frozen=True)
class FrameBundle:
    time: float
    hour: str
    minute: str
    car_trips: List[TemporalRecord]
    foot_trips: List[TemporalRecord]
    car_points: List[TemporalRecord]
    stops: List[StopRecord]
    trail_length: float

    @property
    def label(self):
        return f"TIME : {self.hour} : {self.minute}"


def build_frame(time, datasets, config=DEFAULT_CONFIG):
    """
    datasets is the dict returned by data_loader.load_all(). Trips and points
    are narrowed to the ones active at time; stops pass through untouched.
    """
    hour, minute = format_display(time)
    return FrameBundle(
        time=time,
        hour=hour,
        minute=minute,
        car_trips=active_at(datasets.get("trip_car", []), time),
        foot_trips=active_at(datasets.get("trip_foot", []), time),
        car_points=active_at(datasets.get("point_car", []), time),
        stops=list(datasets.get("stop", [])),
        trail_length=config.trail_length,
    )


def make_tick(datasets, render, config=DEFAULT_CONFIG):
    """Compose advance with frame building and a render callback for FrameScheduler.start."""
    def tick(state):
        state.current_time = advance(state.current_time, config)
        render(build_frame(state.current_time, datasets, config))
    return tick
