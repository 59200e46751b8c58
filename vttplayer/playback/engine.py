"""
Playback engine for VTTPlayer.

Maps the virtual clock onto the cue sequence and emits show/hide/clock
signals to a presentation sink. The engine is synchronous: a scheduler calls
tick() once per frame while playing, and control intents (toggle, skip
next/previous, seek) are plain method calls.

Cues are visible on the half-open interval [start_time, end_time): a time
equal to end_time hides the cue, a time equal to start_time shows it. This
holds for ticks, skips, seeks and the initial load alike.
"""

import logging
import math
from typing import Iterable, Optional, Tuple

from ..models import Cue
from .clock import PlaybackClock
from .cursor import CueCursor
from .scheduler import FrameScheduler, Scheduler
from .sink import PresentationSink

logger = logging.getLogger(__name__)


class PlaybackEngine:
    """
    Play/pause/seek engine over a parsed cue sequence.

    Each engine owns its clock, cursor and display state, so independent
    sessions can run side by side.

    Example:
        >>> engine = PlaybackEngine(parse_cues(text), sink=LoggingSink())
        >>> engine.toggle()          # play
        >>> engine.scheduler.run()   # drive ticks until paused
    """

    def __init__(
        self,
        cues: Iterable[Cue] = (),
        sink: Optional[PresentationSink] = None,
        scheduler: Optional[Scheduler] = None,
        clock: Optional[PlaybackClock] = None,
    ):
        self.sink = sink or PresentationSink()
        self.scheduler = scheduler or FrameScheduler()
        self.clock = clock or PlaybackClock()

        self._cues: Tuple[Cue, ...] = ()
        self.cursor = CueCursor(self._cues)
        self._time_ms = self.clock.now()
        self._shown_index: Optional[int] = None
        self._displayed_second: Optional[int] = None

        self.load(cues)
        self.sink.update_play_state(self.is_playing)

    # ── state ──────────────────────────────────────────────────────────────
    @property
    def cues(self) -> Tuple[Cue, ...]:
        return self._cues

    @property
    def is_playing(self) -> bool:
        return self.clock.running

    @property
    def time_ms(self) -> float:
        """Virtual time as of the last tick or control action."""
        return self._time_ms

    @property
    def current_cue(self) -> Optional[Cue]:
        """Cue under the cursor, whether or not it has started yet."""
        return self.cursor.current()

    @property
    def displayed_cue(self) -> Optional[Cue]:
        """Cue currently shown by the sink, if any."""
        if self._shown_index is None:
            return None
        return self._cues[self._shown_index]

    # ── loading ────────────────────────────────────────────────────────────
    def load(self, cues: Iterable[Cue]) -> None:
        """Replace the cue sequence and show whatever is active right now."""
        self._hide()
        self._cues = tuple(cues)
        self.cursor = CueCursor(self._cues)
        self._time_ms = self.clock.now()
        self.cursor.seek(self._time_ms / 1000)
        logger.debug(f"Loaded {len(self._cues)} cues at {self._time_ms:.0f}ms")

        self._show_if_active(self._time_ms / 1000)
        self._update_clock_display()

    # ── control intents ────────────────────────────────────────────────────
    def toggle(self) -> None:
        if self.is_playing:
            self.pause()
        else:
            self.play()

    def play(self) -> None:
        if self.is_playing:
            return
        self.clock.start()
        logger.info(f"Playback started at {self.clock.now():.0f}ms")
        self.sink.update_play_state(True)
        self._on_frame()

    def pause(self) -> None:
        if not self.is_playing:
            return
        self.clock.pause()
        self.scheduler.cancel()
        self._time_ms = self.clock.now()
        logger.info(f"Playback paused at {self._time_ms:.0f}ms")
        self.sink.update_play_state(False)
        self._update_clock_display()

    def skip_to_next(self) -> None:
        if not self.cursor.has_next():
            logger.debug("No next cue to skip to")
            return

        cue = self.cursor.current()
        # Compared in ms: a previous skip left the clock at exactly start * 1000.
        if self.clock.now() >= cue.start_time * 1000:
            self.cursor.advance()
        self._jump_to_current()

    def skip_to_prev(self) -> None:
        if not self.cursor.has_prev():
            logger.debug("No previous cue to skip to")
            return

        self.cursor.retreat()
        self._jump_to_current()

    def seek(self, ms: float) -> None:
        """Jump to an absolute position, forward or backward."""
        self.clock.seek_to(ms)
        self._time_ms = self.clock.now()
        seconds = self._time_ms / 1000

        self.cursor.seek(seconds)
        if self._shown_index is not None and (
            self._shown_index != self.cursor.index or not self.cursor.is_active(seconds)
        ):
            self._hide()
        self._show_if_active(seconds)
        self._update_clock_display()

    # ── ticking ────────────────────────────────────────────────────────────
    def tick(self) -> None:
        """Advance display state to the clock's current time."""
        # A frame scheduled before a pause must not touch any state.
        if not self.clock.running:
            return

        new_ms = self.clock.now()
        seconds = new_ms / 1000

        cue = self.cursor.current()
        if cue is not None and seconds >= cue.end_time:
            self._hide()
            self.cursor.advance()
            # Long frames or idle periods may jump over several cues.
            self.cursor.advance_until(seconds)

        self._show_if_active(seconds)
        self._time_ms = new_ms
        self._update_clock_display()

    def _on_frame(self) -> None:
        self.tick()
        if self.clock.running:
            self.scheduler.schedule(self._on_frame)

    # ── internals ──────────────────────────────────────────────────────────
    def _jump_to_current(self) -> None:
        cue = self.cursor.current()
        self.clock.seek_to(cue.start_time * 1000)
        self._time_ms = self.clock.now()
        logger.debug(f"Skipped to cue {self.cursor.index}: {cue}")

        self._show(cue)
        self._update_clock_display()

    def _show_if_active(self, seconds: float) -> None:
        if self._shown_index == self.cursor.index:
            return
        cue = self.cursor.current()
        if cue is not None and cue.contains(seconds):
            self._show(cue)

    def _show(self, cue: Cue) -> None:
        self._shown_index = self.cursor.index
        self.sink.show_cue(cue)

    def _hide(self) -> None:
        if self._shown_index is None:
            return
        self._shown_index = None
        self.sink.hide_cue()

    def _update_clock_display(self) -> None:
        second = math.floor(self._time_ms / 1000)
        if second != self._displayed_second:
            self._displayed_second = second
            self.sink.update_clock_display(self._time_ms)
