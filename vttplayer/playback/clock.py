"""
Virtual playback clock.

The clock measures playback position in milliseconds. While running it is
derived from an anchor pair (virtual time, wall time) so positions never
drift with the polling rate; while paused the position is frozen.
"""

import time
from typing import Callable, Optional

WallClock = Callable[[], float]


def perf_counter_ms() -> float:
    """Monotonic wall clock in milliseconds."""
    return time.perf_counter() * 1000


class PlaybackClock:
    """Start/pause/seek clock over an injectable wall clock (milliseconds)."""

    def __init__(self, wall_clock: Optional[WallClock] = None):
        self._wall_clock = wall_clock or perf_counter_ms
        self._running = False
        self._virtual_time_ms = 0.0
        self._anchor_virtual_ms: Optional[float] = None
        self._anchor_wall_ms: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._running

    def now(self) -> float:
        """Current virtual time in milliseconds."""
        if not self._running:
            return self._virtual_time_ms
        return self._anchor_virtual_ms + (self._wall_clock() - self._anchor_wall_ms)

    def start(self) -> None:
        if self._running:
            return
        self._anchor(self._virtual_time_ms)
        self._running = True

    def pause(self) -> None:
        if not self._running:
            return
        self._virtual_time_ms = self.now()
        self._running = False
        self._anchor_virtual_ms = None
        self._anchor_wall_ms = None

    def seek_to(self, ms: float) -> None:
        """Jump to an absolute position; the running state is unchanged."""
        self._virtual_time_ms = max(0.0, float(ms))
        if self._running:
            self._anchor(self._virtual_time_ms)

    def _anchor(self, virtual_ms: float) -> None:
        self._anchor_virtual_ms = virtual_ms
        self._anchor_wall_ms = self._wall_clock()

    def __repr__(self) -> str:
        state = "running" if self._running else "paused"
        return f"PlaybackClock({state}, {self.now():.0f}ms)"
