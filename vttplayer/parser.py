"""
SubRip/WebVTT cue parser for VTTPlayer.

A permissive parser that turns caption text into an ordered tuple of cues.
Only cue timing lines and payload text are recognised; WebVTT headers, cue
identifiers, NOTE blocks and SubRip sequence numbers are tolerated as stray
lines and dropped. Cue settings after the end timestamp are ignored.

For conforming parsers, see:
- https://w3c.github.io/webvtt/
- https://github.com/mozilla/vtt.js
"""

import logging
import re
from typing import List, Optional, Tuple

from .errors import EmptyInputError, FormatError
from .models import Cue
from .source import read_caption_text
from .utils import parse_timestamp

logger = logging.getLogger(__name__)

TIMING_DELIMITER = '-->'

_LINE_BREAK_PATTERN = re.compile(r'\r\n|\r|\n')
_TIMING_SPLIT_PATTERN = re.compile(r'[ \t]+-->[ \t]+')


def _parse_timing_line(line: str) -> Tuple[float, float]:
    """
    Split a cue timing line into start and end seconds.

    Raises:
        FormatError: If the line does not split into exactly two timestamps,
            either timestamp is malformed, or the cue does not end after it
            starts
    """
    fields = _TIMING_SPLIT_PATTERN.split(line)
    if len(fields) != 2:
        raise FormatError(f"Error when splitting {TIMING_DELIMITER!r}", line)

    start = parse_timestamp(fields[0])
    end = parse_timestamp(fields[1])
    if start >= end:
        raise FormatError("Cue must end after it starts", line)
    return start, end


class _PendingCue:
    """Accumulates the timing and payload of the cue being parsed."""

    def __init__(self):
        self.start: Optional[float] = None
        self.end: Optional[float] = None
        self.lines: List[str] = []

    @property
    def has_timing(self) -> bool:
        return self.start is not None and self.end is not None

    def set_timing(self, start: float, end: float) -> None:
        self.start = start
        self.end = end
        self.lines = []

    def flush(self, cues: List[Cue]) -> None:
        if self.has_timing:
            cues.append(Cue(self.start, self.end, '\n'.join(self.lines)))
        self.start = None
        self.end = None
        self.lines = []


def parse_cues(text: str) -> Tuple[Cue, ...]:
    """
    Parse SubRip or WebVTT text into cues.

    Cues are returned in the order they appear in the text, without sorting.
    A blank line ends a cue; the payload is every non-blank line between the
    timing line and that blank line, joined by newlines.

    Args:
        text: Caption text

    Returns:
        Tuple of Cue objects in source order (empty if none were found)

    Raises:
        FormatError: On the first malformed timing line; no partial result

    Example:
        >>> cues = parse_cues("1\\n00:00:01.000 --> 00:00:02.000\\nHello\\n")
        >>> cues[0].text
        'Hello'
    """
    lines = [line.strip() for line in _LINE_BREAK_PATTERN.split(text.strip())]

    cues: List[Cue] = []
    pending = _PendingCue()

    for line in lines:
        if TIMING_DELIMITER in line:
            start, end = _parse_timing_line(line)
            # A new timing line without a blank line in between still ends
            # the previous cue.
            pending.flush(cues)
            pending.set_timing(start, end)
        elif not line:
            pending.flush(cues)
        elif pending.has_timing:
            pending.lines.append(line)
        else:
            logger.debug(f"Ignoring line outside of a cue: {line!r}")

    pending.flush(cues)
    return tuple(cues)


class CueParser:
    """
    Parser for loading caption text into cue sequences.

    Wraps parse_cues with file/URL loading and the empty-input policy:
    - require_cues=False: empty input is logged and yields no cues
    - require_cues=True: empty input raises EmptyInputError
    """

    def __init__(self, require_cues: bool = False):
        """
        Initialize cue parser.

        Args:
            require_cues: Raise EmptyInputError when no cue is found
        """
        self.require_cues = require_cues

    def parse_content(self, text: str) -> Tuple[Cue, ...]:
        """
        Parse caption text (no I/O).

        Args:
            text: SubRip or WebVTT text

        Returns:
            Tuple of cues in source order

        Raises:
            FormatError: If a timing line is malformed
            EmptyInputError: If no cue was found and require_cues is set
        """
        cues = parse_cues(text)

        if not cues:
            if self.require_cues:
                raise EmptyInputError("No cues found in caption text")
            logger.warning("No cues found in caption text")
            return cues

        logger.info(
            f"Parsed {len(cues)} cues "
            f"({cues[0].start_time:.3f}s - {cues[-1].end_time:.3f}s)"
        )
        return cues

    def parse_file(self, path: str) -> Tuple[Cue, ...]:
        """
        Parse a UTF-8 caption file.

        Args:
            path: Path to a .srt or .vtt file

        Returns:
            Tuple of cues in source order
        """
        logger.info(f"Parsing caption file: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()

        return self.parse_content(text)

    def parse_source(self, location: str, timeout: int = 30) -> Tuple[Cue, ...]:
        """
        Parse captions from a file path or HTTP(S) URL.

        Args:
            location: Local file path or URL
            timeout: Request timeout in seconds for URLs

        Returns:
            Tuple of cues in source order
        """
        return self.parse_content(read_caption_text(location, timeout=timeout))
