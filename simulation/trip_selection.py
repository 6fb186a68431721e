# simulation/trip_selection.py
# Picks the records active at the current simulated time and locates them on their paths
import numpy as np


def is_active(record, time):
    ts = record.timestamps
    if len(ts) == 0:
        return False
    return ts[0] <= time <= ts[-1]


def active_at(records, time):
    """Records whose [first, last] timestamp interval contains time, in input order."""
    return [r for r in records if is_active(r, time)]


def position_at(record, time):
    """
    Position along record.path at time, linearly interpolated between the
    two bracketing timestamps. None when time is outside the record's interval
    or the bracketing vertex is missing from the path.
    """
    if not is_active(record, time):
        return None
    path = record.path
    if not path:
        return record.coordinates

    ts = np.asarray(record.timestamps, dtype=float)
    hi = int(np.searchsorted(ts, time, side="right"))
    if hi == len(ts):
        # time sits exactly on the last timestamp
        last = len(ts) - 1
        return tuple(path[last]) if last < len(path) else None

    lo = hi - 1
    if hi >= len(path):
        return None
    (x1, y1), (x2, y2) = path[lo], path[hi]
    frac = (time - ts[lo]) / (ts[hi] - ts[lo])
    return (float(x1 + frac * (x2 - x1)), float(y1 + frac * (y2 - y1)))


def positions_at(records, time):
    out = []
    for r in active_at(records, time):
        pos = position_at(r, time)
        if pos is not None:
            out.append((r, pos))
    return out


def trail_at(record, time, trail_length):
    """
    Visible tail of a trip at time: path vertices from
    time - trail_length * duration up to the current position, both ends
    interpolated. Empty when the record is not active.
    """
    head = position_at(record, time)
    if head is None or not record.path:
        return []

    ts = np.asarray(record.timestamps[:len(record.path)], dtype=float)
    window_start = max(record.start_time, time - trail_length * record.duration)
    tail = position_at(record, window_start)

    # vertices stamped exactly at time belong to the trail
    inside = np.nonzero((ts > window_start) & (ts <= time))[0]
    trail = [] if tail is None else [tail]
    trail.extend(tuple(record.path[i]) for i in inside)
    if not trail or trail[-1] != head:
        trail.append(head)
    return trail
