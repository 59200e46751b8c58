"""
Embedded captions example.

Reads captions bundled inside an HTML page (a <script id="inputfile"> element),
then skips through them cue by cue instead of playing in real time.
"""

import sys

from vttplayer import PresentationSink, create_engine, extract_embedded_captions, milliseconds_to_text


class PrintSink(PresentationSink):
    """Prints cues and the clock to stdout."""

    def show_cue(self, cue):
        print(f"  {cue.text}")

    def hide_cue(self):
        print("  ...")

    def update_clock_display(self, ms):
        print(f"[{milliseconds_to_text(ms)}]")

def main():
    path = sys.argv[1] if len(sys.argv) > 1 else "player.html"
    with open(path, 'r', encoding='utf-8') as f:
        page = f.read()

    engine = create_engine(extract_embedded_captions(page), sink=PrintSink())

    # Step forward through every cue, then back to the start
    for _ in engine.cues:
        engine.skip_to_next()
    for _ in engine.cues:
        engine.skip_to_prev()

if __name__ == "__main__":
    main()
