# simulation/config.py
import os
import logging
from dataclasses import dataclass, replace
from pathlib import Path

logger = logging.getLogger(__name__)

# Clock range (minutes of day)
MIN_TIME = 600
MAX_TIME = 1090

BASE_INCREMENT = 0.01
SPEED_FACTOR = 0.1
TRAIL_LENGTH = 0.5
FPS = 60

DATA_DIR = Path(os.environ.get("DATA_DIR", "data"))

# Map view
INITIAL_VIEW_STATE = {
    "longitude": 127.128846,
    "latitude": 37.450724,
    "zoom": 15,
    "pitch": 30,
    "bearing": 0,
}
MAP_STYLE = os.environ.get("MAP_STYLE", "carto-darkmatter")

# Layer colours (RGB)
LAYER_COLORS = {
    "stop": [255, 0, 0],
    "trip_car": [255, 255, 0],
    "trip_foot": [255, 0, 255],
    "point_car": [255, 255, 0],
}
TRIP_WIDTH_PX = 7
POINT_OPACITY = 0.5

_ENV_FIELDS = {
    "min_time": "TRIP_MIN_TIME",
    "max_time": "TRIP_MAX_TIME",
    "base_increment": "TRIP_BASE_INCREMENT",
    "speed_factor": "TRIP_SPEED_FACTOR",
    "trail_length": "TRIP_TRAIL_LENGTH",
    "fps": "TRIP_FPS",
}


@dataclass(frozen=True)
class AnimationConfig:
    """Settings shared by the clock, the selector and the frame loop."""
    min_time: float = MIN_TIME
    max_time: float = MAX_TIME
    base_increment: float = BASE_INCREMENT
    speed_factor: float = SPEED_FACTOR
    trail_length: float = TRAIL_LENGTH
    fps: float = FPS

    @property
    def step(self):
        return self.base_increment * self.speed_factor

    def with_overrides(self, **kwargs):
        return replace(self, **{k: v for k, v in kwargs.items() if v is not None})

    @classmethod
    def from_env(cls, environ=None):
        """
        Build a config from TRIP_* environment variables, falling back to the
        module defaults for anything unset.
        """
        environ = os.environ if environ is None else environ
        values = {}
        for field_name, var in _ENV_FIELDS.items():
            raw = environ.get(var)
            if raw is None or raw.strip() == "":
                continue
            try:
                values[field_name] = float(raw)
            except ValueError:
                raise ValueError(f"{var} must be a number, got {raw!r}") from None
        config = cls(**values)
        if config.max_time < config.min_time:
            raise ValueError(
                f"TRIP_MAX_TIME ({config.max_time}) must not be below TRIP_MIN_TIME ({config.min_time})"
            )
        if config.fps <= 0:
            raise ValueError(f"TRIP_FPS must be positive, got {config.fps}")
        if values:
            logger.info("Animation config overridden from environment: %s", sorted(values))
        return config


DEFAULT_CONFIG = AnimationConfig()
