"""
Exceptions raised by VTTPlayer.

Both errors derive from ValueError so callers that already guard caption
loading with ``except ValueError`` keep working.
"""


class FormatError(ValueError):
    """Raised when a timestamp or cue timing line is malformed."""

    def __init__(self, message: str, text: str):
        super().__init__(f"{message}: {text!r}")
        self.text = text


class EmptyInputError(ValueError):
    """Raised when caption text yields no cues and cues are required."""
