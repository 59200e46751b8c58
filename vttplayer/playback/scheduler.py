"""
Tick scheduling for the playback engine.

The engine asks a scheduler to call it back once per frame and reschedules
itself after each tick. FrameScheduler is a cooperative, single-threaded loop:
it holds at most one pending callback, so ticks never overlap.
"""

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)

FrameCallback = Callable[[], None]


class Scheduler:
    """Base scheduler interface."""

    def schedule(self, callback: FrameCallback) -> None:
        raise NotImplementedError

    def cancel(self) -> None:
        raise NotImplementedError


class FrameScheduler(Scheduler):
    """
    Runs one pending callback per frame.

    Example:
        >>> scheduler = FrameScheduler(frame_rate=30)
        >>> engine = PlaybackEngine(cues, sink, scheduler=scheduler)
        >>> engine.play()
        >>> scheduler.run()  # returns once playback is paused
    """

    def __init__(self, frame_rate: float = 30.0, sleep: Callable[[float], None] = time.sleep):
        if frame_rate <= 0:
            raise ValueError(f"frame_rate must be positive, got {frame_rate}")
        self.frame_interval = 1.0 / frame_rate
        self._sleep = sleep
        self._pending: Optional[FrameCallback] = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def schedule(self, callback: FrameCallback) -> None:
        self._pending = callback

    def cancel(self) -> None:
        self._pending = None

    def run_once(self) -> bool:
        """Run the pending callback, if any. Returns whether one ran."""
        callback = self._pending
        if callback is None:
            return False
        # Cleared first so the callback may schedule the next frame.
        self._pending = None
        callback()
        return True

    def run(self, max_frames: Optional[int] = None) -> int:
        """
        Run frames until nothing is scheduled or max_frames is reached.

        Returns:
            Number of frames run
        """
        frames = 0
        while self._pending is not None:
            if max_frames is not None and frames >= max_frames:
                break
            self.run_once()
            frames += 1
            self._sleep(self.frame_interval)

        logger.debug(f"Frame loop stopped after {frames} frames")
        return frames
