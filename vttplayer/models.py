"""
Data models for VTTPlayer.

Defines the cue record produced by the parser and the configuration used to
build a playback session.
"""

from dataclasses import dataclass

from .utils import seconds_to_timestamp


@dataclass(frozen=True)
class Cue:
    """A timed caption entry, active for start_time <= t < end_time."""
    start_time: float  # seconds
    end_time: float    # seconds
    text: str          # payload lines joined by "\n", markup kept verbatim

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time

    def contains(self, seconds: float) -> bool:
        """Whether the cue is visible at the given time (half-open interval)."""
        return self.start_time <= seconds < self.end_time

    def __str__(self) -> str:
        return (
            f"{seconds_to_timestamp(self.start_time)} --> "
            f"{seconds_to_timestamp(self.end_time)} {self.text!r}"
        )


@dataclass
class PlaybackConfig:
    """Configuration for building a playback session."""
    frame_rate: float = 30.0    # ticks per second driven by FrameScheduler
    require_cues: bool = False  # raise EmptyInputError when no cue is found
