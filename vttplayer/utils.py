"""
Shared utility functions for VTTPlayer.

Provides timestamp parsing for SubRip/WebVTT cue timings and the formatting
helpers used for log output and the playback clock display.
"""

import math
import re

from .errors import FormatError

# Hours are optional and unbounded, minutes and seconds are 00-59. Only the
# start is anchored so cue settings after the end timestamp are ignored.
_TIMESTAMP_PATTERN = re.compile(
    r'^(?:(\d+):)?([0-5]\d):([0-5]\d)(?:[.,](\d{0,3}))?'
)


def parse_timestamp(text: str) -> float:
    """
    Convert a ``[H:]MM:SS[.mmm]`` timestamp to seconds.

    Both ``.`` (WebVTT) and ``,`` (SubRip) are accepted as the fractional
    separator, with zero to three fractional digits.

    Args:
        text: Timestamp text, optionally followed by cue settings

    Returns:
        Time in seconds as float, at millisecond precision

    Raises:
        FormatError: If the text does not start with a timestamp

    Example:
        >>> parse_timestamp("01:02:03.456")
        3723.456
        >>> parse_timestamp("02:03,456")
        123.456
    """
    match = _TIMESTAMP_PATTERN.match(text)
    if match is None:
        raise FormatError("Invalid timestamp format", text)

    hours, minutes, seconds, fraction = match.groups()
    total_seconds = int(hours or 0) * 3600 + int(minutes) * 60 + int(seconds)
    millis = int((fraction or "").ljust(3, "0"))
    return (total_seconds * 1000 + millis) / 1000


def seconds_to_timestamp(seconds: float, separator: str = ".") -> str:
    """
    Convert seconds to HH:MM:SS.mmm format.

    Args:
        seconds: Time in seconds as float
        separator: Fractional separator ("." for WebVTT, "," for SubRip)

    Returns:
        Timestamp string

    Example:
        >>> seconds_to_timestamp(90.5)
        '00:01:30.500'
    """
    millis = int(round(max(0.0, seconds) * 1000))
    hours = millis // 3_600_000
    minutes = (millis % 3_600_000) // 60_000
    secs = (millis % 60_000) // 1_000
    return f"{hours:02d}:{minutes:02d}:{secs:02d}{separator}{millis % 1_000:03d}"


def milliseconds_to_text(ms: float) -> str:
    """
    Format a playback position for the clock display as H:MM:SS.

    Seconds are rounded half up; hours are not padded.

    Example:
        >>> milliseconds_to_text(3723456)
        '1:02:03'
    """
    seconds = int(math.floor(ms / 1000 + 0.5))
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}"
