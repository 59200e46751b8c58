import pytest

from vttplayer.models import Cue
from vttplayer.playback.clock import PlaybackClock
from vttplayer.playback.engine import PlaybackEngine
from vttplayer.playback.scheduler import FrameScheduler
from vttplayer.playback.sink import PresentationSink


class FakeWallClock:
    """Wall clock in milliseconds that only moves when told to."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


class RecordingSink(PresentationSink):
    def __init__(self):
        self.events = []
        self.visible = None

    def show_cue(self, cue):
        self.events.append(("show", cue.text))
        self.visible = cue

    def hide_cue(self):
        self.events.append(("hide",))
        self.visible = None

    def update_clock_display(self, ms):
        self.events.append(("clock", ms))

    def update_play_state(self, playing):
        self.events.append(("playing", playing))

    def cue_events(self):
        return [event for event in self.events if event[0] in ("show", "hide")]


@pytest.fixture
def wall():
    return FakeWallClock()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def scheduler():
    return FrameScheduler(frame_rate=30, sleep=lambda seconds: None)


@pytest.fixture
def cues():
    return (
        Cue(0.0, 1.0, "A"),
        Cue(1.0, 2.0, "B"),
        Cue(3.0, 4.0, "C"),
    )


@pytest.fixture
def make_engine(wall, sink, scheduler):
    def _make(cue_list):
        return PlaybackEngine(
            cue_list,
            sink=sink,
            scheduler=scheduler,
            clock=PlaybackClock(wall),
        )
    return _make
