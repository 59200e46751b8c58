"""
VTTPlayer - Caption Playback Toolkit

A small library for playing SubRip/WebVTT captions against a virtual
playback clock, without a media element.

Features:
- Parse SRT and WebVTT text into ordered cues (permissive, no conformance checks)
- Load captions from files, HTTP(S) URLs, or HTML-embedded <script> elements
- Play, pause, skip between cues, and seek on a drift-free virtual clock
- Emit show/hide/clock-display signals to a pluggable presentation sink

Example usage:
    >>> import logging
    >>> from vttplayer import create_engine, read_caption_text, LoggingSink
    >>>
    >>> logging.basicConfig(level=logging.INFO)
    >>> engine = create_engine(read_caption_text("episode1.srt"), sink=LoggingSink())
    >>> engine.toggle()             # play
    >>> engine.scheduler.run()      # tick at 30 fps until paused
"""

import logging

__version__ = "0.1.0"
__author__ = "VTTPlayer Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Errors
from .errors import FormatError, EmptyInputError

# Core utility functions
from .utils import parse_timestamp, seconds_to_timestamp, milliseconds_to_text

# Data models
from .models import Cue, PlaybackConfig

# Parsing
from .parser import parse_cues, CueParser

# Caption sources
from .source import read_caption_text, download_caption_text, extract_embedded_captions, is_url

# Playback
from .playback import (
    PlaybackClock,
    CueCursor,
    PlaybackEngine,
    Scheduler,
    FrameScheduler,
    PresentationSink,
    LoggingSink,
    create_engine,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Errors
    "FormatError",
    "EmptyInputError",

    # Core parsing functions
    "parse_timestamp",
    "seconds_to_timestamp",
    "milliseconds_to_text",
    "parse_cues",

    # Main classes
    "CueParser",
    "PlaybackClock",
    "CueCursor",
    "PlaybackEngine",
    "FrameScheduler",

    # Interfaces
    "Scheduler",
    "PresentationSink",
    "LoggingSink",

    # Caption sources
    "read_caption_text",
    "download_caption_text",
    "extract_embedded_captions",
    "is_url",

    # Models
    "Cue",
    "PlaybackConfig",

    # Session factory
    "create_engine",
]
