"""Playback package: clock, cursor, engine, scheduling and presentation sinks."""

from typing import Optional

from ..models import PlaybackConfig
from ..parser import CueParser
from .clock import PlaybackClock, perf_counter_ms
from .cursor import CueCursor
from .engine import PlaybackEngine
from .scheduler import FrameScheduler, Scheduler
from .sink import LoggingSink, PresentationSink


def create_engine(
    text: str,
    sink: Optional[PresentationSink] = None,
    config: Optional[PlaybackConfig] = None,
    scheduler: Optional[Scheduler] = None,
    clock: Optional[PlaybackClock] = None,
) -> PlaybackEngine:
    """
    Parse caption text and build a playback engine for it.

    Args:
        text: SubRip or WebVTT caption text
        sink: Presentation sink receiving show/hide/clock signals
        config: PlaybackConfig (defaults apply when omitted)
        scheduler: Tick scheduler (default: FrameScheduler at config.frame_rate)
        clock: Playback clock (default: PlaybackClock over perf_counter)

    Returns:
        A stopped PlaybackEngine positioned at 0ms

    Raises:
        FormatError: If the caption text is malformed
        EmptyInputError: If no cue was found and config.require_cues is set
    """
    config = config or PlaybackConfig()
    cues = CueParser(require_cues=config.require_cues).parse_content(text)

    return PlaybackEngine(
        cues,
        sink=sink,
        scheduler=scheduler or FrameScheduler(frame_rate=config.frame_rate),
        clock=clock,
    )


__all__ = [
    "PlaybackClock",
    "perf_counter_ms",
    "CueCursor",
    "PlaybackEngine",
    "Scheduler",
    "FrameScheduler",
    "PresentationSink",
    "LoggingSink",
    "create_engine",
]
