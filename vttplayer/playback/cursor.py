"""
Cursor over a cue sequence.

The cursor holds only a position; index == len(cues) means the playback
position is past the last cue.
"""

from typing import Optional, Sequence

from ..models import Cue


class CueCursor:
    """Position within a read-only cue sequence."""

    def __init__(self, cues: Sequence[Cue]):
        self._cues = cues
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    def __len__(self) -> int:
        return len(self._cues)

    def current(self) -> Optional[Cue]:
        if self._index < len(self._cues):
            return self._cues[self._index]
        return None

    def has_next(self) -> bool:
        return self._index < len(self._cues) - 1

    def has_prev(self) -> bool:
        return self._index > 0

    def advance(self) -> None:
        self._index = min(self._index + 1, len(self._cues))

    def retreat(self) -> None:
        self._index = max(self._index - 1, 0)

    def reset(self) -> None:
        self._index = 0

    def advance_until(self, seconds: float) -> None:
        """Skip forward past every cue that has ended by `seconds`."""
        while True:
            cue = self.current()
            if cue is None or seconds < cue.end_time:
                return
            self._index += 1

    def seek(self, seconds: float) -> None:
        """Position on the first cue (in source order) not ended by `seconds`."""
        self.reset()
        self.advance_until(seconds)

    def is_active(self, seconds: float) -> bool:
        cue = self.current()
        return cue is not None and cue.contains(seconds)

    def __repr__(self) -> str:
        return f"CueCursor(index={self._index}, cues={len(self._cues)})"
