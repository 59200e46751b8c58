"""
Presentation sinks receive the engine's display signals.
"""

import logging
from typing import Optional

from ..models import Cue
from ..utils import milliseconds_to_text

logger = logging.getLogger(__name__)


class PresentationSink:
    """Base sink; every signal is a no-op. Subclass and override what you render."""

    def show_cue(self, cue: Cue) -> None:
        """Replace whatever is displayed with this cue."""

    def hide_cue(self) -> None:
        """Clear the displayed cue."""

    def update_clock_display(self, ms: float) -> None:
        """Redraw the elapsed time; called at most once per whole second."""

    def update_play_state(self, playing: bool) -> None:
        """Reflect play/pause state (e.g. a play/pause button label)."""


class LoggingSink(PresentationSink):
    """Writes every signal to a logger."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def show_cue(self, cue: Cue) -> None:
        self.log.info(f"show: {cue.text}")

    def hide_cue(self) -> None:
        self.log.info("hide")

    def update_clock_display(self, ms: float) -> None:
        self.log.info(f"time: {milliseconds_to_text(ms)}")

    def update_play_state(self, playing: bool) -> None:
        self.log.info("playing" if playing else "paused")
