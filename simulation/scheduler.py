# simulation/scheduler.py
import time
import logging
from dataclasses import dataclass
from typing import Optional

from simulation.time_controller import set_time

logger = logging.getLogger(__name__)


@dataclass
class AnimationState:
    """State owned by the frame loop; passed explicitly into every tick."""
    current_time: float
    frame_handle: Optional[int] = None


class FrameScheduler:
    """
    Cooperative, single-threaded frame loop.

    start(tick_fn, state) calls tick_fn(state) once per frame, paced to fps,
    until stop() is called (from inside a tick or a callback) or max_frames
    ticks have run. The caller's state keeps its last current_time after the
    loop ends.
    """

    def __init__(self, fps=60, sleep=time.sleep, clock=time.perf_counter):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.interval = 1.0 / fps
        self._sleep = sleep
        self._clock = clock
        self._next_handle = 0
        self._pending = None
        self.running = False

    def request_frame(self, state):
        self._next_handle += 1
        self._pending = self._next_handle
        state.frame_handle = self._pending
        return self._pending

    def cancel_frame(self, handle):
        if handle is not None and handle == self._pending:
            self._pending = None

    def stop(self):
        if self.running:
            logger.debug("Frame loop stop requested")
        self.running = False
        self._pending = None

    def start(self, tick_fn, state, max_frames=None):
        """Run frames until stopped. Returns the number of ticks executed."""
        self.running = True
        frames = 0
        logger.debug("Frame loop started at t=%s", state.current_time)
        self.request_frame(state)
        while self.running and self._pending is not None:
            if max_frames is not None and frames >= max_frames:
                break
            began = self._clock()
            self._pending = None
            tick_fn(state)
            frames += 1
            if not self.running:
                break
            self.request_frame(state)
            remaining = self.interval - (self._clock() - began)
            if remaining > 0:
                self._sleep(remaining)
        self.running = False
        self._pending = None
        logger.debug("Frame loop ended after %d frames at t=%s", frames, state.current_time)
        return frames


@dataclass
class Playback:
    """
    Play/pause flag that outlives a single frame loop. Starts playing; a scrub
    moves the clock without pausing, so the next loop resumes from there.
    """
    playing: bool = True

    def scrub(self, state, value):
        state.current_time = set_time(value)
        return state.current_time

    def pause(self, scheduler=None):
        self.playing = False
        if scheduler is not None:
            scheduler.stop()

    def resume(self):
        self.playing = True

    def run(self, scheduler, tick_fn, state, max_frames=None):
        if not self.playing:
            return 0
        return scheduler.start(tick_fn, state, max_frames=max_frames)
