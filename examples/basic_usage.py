"""
Basic VTTPlayer usage example.

Parses a caption file and plays it in real time, logging every cue as it is
shown or hidden.
"""

import logging
import sys

from vttplayer import CueParser, LoggingSink, PlaybackEngine, FrameScheduler

def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    # Parse captions from a file path or URL
    location = sys.argv[1] if len(sys.argv) > 1 else "subtitles.srt"
    cues = CueParser(require_cues=True).parse_source(location)
    print(f"Loaded {len(cues)} cues")

    # Build the engine and play until the last cue has ended
    scheduler = FrameScheduler(frame_rate=30)
    engine = PlaybackEngine(cues, sink=LoggingSink(), scheduler=scheduler)
    engine.toggle()

    while engine.is_playing:
        scheduler.run(max_frames=30)
        if engine.current_cue is None:
            engine.toggle()

    print("Playback finished")

if __name__ == "__main__":
    main()
