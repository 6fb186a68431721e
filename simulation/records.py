# simulation/records.py
import numbers
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

Coordinate = Tuple[float, float]


@dataclass(frozen=True)
class TemporalRecord:
    """
    One trip (path + per-vertex timestamps) or one point entity
    (coordinates + [start, end] timestamps).
    """
    timestamps: Tuple[float, ...]
    path: Tuple[Coordinate, ...] = ()
    coordinates: Optional[Coordinate] = None
    attributes: dict = field(default_factory=dict, compare=False)

    @property
    def start_time(self):
        return self.timestamps[0]

    @property
    def end_time(self):
        return self.timestamps[-1]

    @property
    def duration(self):
        return self.end_time - self.start_time


@dataclass(frozen=True)
class StopRecord:
    coordinates: Coordinate
    attributes: dict = field(default_factory=dict, compare=False)


def _coord(value):
    return (float(value[0]), float(value[1]))


def _path(values):
    return tuple(_coord(v) for v in values or ())


def _timestamps(raw):
    if isinstance(raw, numbers.Real):
        return (float(raw),)
    return tuple(float(t) for t in raw)


def pick(row, *keys):
    """First non-None value among keys, or None."""
    for key in keys:
        if row.get(key) is not None:
            return row[key]
    return None


def record_from_dict(row):
    """
    Accepts both the on-disk keys (route / timestamp) and path / timestamps,
    also mixed within one file. Any remaining keys are kept as attributes.
    """
    known = ("route", "path", "timestamp", "timestamps", "coordinates")
    coords = row.get("coordinates")
    extra = {k: v for k, v in row.items() if k not in known}
    return TemporalRecord(
        timestamps=_timestamps(pick(row, "timestamp", "timestamps")),
        path=_path(pick(row, "route", "path")),
        coordinates=_coord(coords) if coords is not None else None,
        attributes=extra,
    )


def stop_from_dict(row):
    extra = {k: v for k, v in row.items() if k != "coordinates"}
    return StopRecord(coordinates=_coord(row["coordinates"]), attributes=extra)


def records_from_dicts(rows: Sequence[dict]) -> List[TemporalRecord]:
    return [record_from_dict(r) for r in rows]


def stops_from_dicts(rows: Sequence[dict]) -> List[StopRecord]:
    return [stop_from_dict(r) for r in rows]
