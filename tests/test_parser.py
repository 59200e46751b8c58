import pytest

from vttplayer.errors import EmptyInputError, FormatError
from vttplayer.models import Cue
from vttplayer.parser import CueParser, parse_cues

SRT_SAMPLE = (
    "1\n"
    "00:00:01.000 --> 00:00:02.000\n"
    "Hello\n"
    "\n"
    "2\n"
    "00:00:02.000 --> 00:00:03.000\n"
    "World\n"
)

VTT_SAMPLE = """WEBVTT
Kind: captions

NOTE this comment block is ignored

intro
00:00.000 --> 00:01.500 align:start position:10%
<i>Line one</i>
Line two

01:00:00.000 --> 01:00:02,250
Much later
"""


def test_parse_srt_drops_sequence_numbers():
    cues = parse_cues(SRT_SAMPLE)
    assert cues == (
        Cue(1.0, 2.0, "Hello"),
        Cue(2.0, 3.0, "World"),
    )


def test_parse_vtt_header_identifiers_and_settings():
    cues = parse_cues(VTT_SAMPLE)
    assert len(cues) == 2
    assert cues[0] == Cue(0.0, 1.5, "<i>Line one</i>\nLine two")
    assert cues[1].start_time == 3600.0
    assert cues[1].end_time == pytest.approx(3602.25)
    assert cues[1].text == "Much later"


def test_cue_starting_at_zero_is_kept():
    cues = parse_cues("00:00.000 --> 00:01.000\nZero\n")
    assert cues == (Cue(0.0, 1.0, "Zero"),)


def test_parsing_is_idempotent():
    assert parse_cues(VTT_SAMPLE) == parse_cues(VTT_SAMPLE)


def test_crlf_line_endings_and_padding():
    text = "\r\n  00:00:01.000 --> 00:00:02.000  \r\n  Hello  \r\n\r\n00:00:03,000 --> 00:00:04,000\rBye\r"
    assert parse_cues(text) == (
        Cue(1.0, 2.0, "Hello"),
        Cue(3.0, 4.0, "Bye"),
    )


def test_timing_line_without_blank_separator_starts_new_cue():
    text = "00:01.000 --> 00:02.000\nA\n00:03.000 --> 00:04.000\nB\n"
    assert parse_cues(text) == (
        Cue(1.0, 2.0, "A"),
        Cue(3.0, 4.0, "B"),
    )


def test_cue_without_payload_has_empty_text():
    cues = parse_cues("00:01.000 --> 00:02.000\n\n")
    assert cues == (Cue(1.0, 2.0, ""),)


def test_cues_keep_source_order():
    text = "00:05.000 --> 00:06.000\nLate\n\n00:01.000 --> 00:02.000\nEarly\n"
    assert [cue.text for cue in parse_cues(text)] == ["Late", "Early"]


def test_empty_and_cueless_text_yield_no_cues():
    assert parse_cues("") == ()
    assert parse_cues("WEBVTT\n\nNOTE nothing here\n") == ()


@pytest.mark.parametrize("line", [
    "00:00:01.000-->00:00:02.000",
    "00:00:01.000 --> 00:00:02.000 --> 00:00:03.000",
    "00:00:01.000 --> soon",
    "later --> 00:00:02.000",
])
def test_malformed_timing_line_aborts_parse(line):
    text = f"00:00.000 --> 00:01.000\nFine\n\n{line}\nBroken\n"
    with pytest.raises(FormatError):
        parse_cues(text)


def test_cue_ending_before_it_starts_is_rejected():
    with pytest.raises(FormatError) as exc_info:
        parse_cues("00:00:02.000 --> 00:00:02.000\nZero length\n")
    assert exc_info.value.text == "00:00:02.000 --> 00:00:02.000"


def test_cue_parser_empty_input_policy():
    assert CueParser().parse_content("WEBVTT\n") == ()
    with pytest.raises(EmptyInputError):
        CueParser(require_cues=True).parse_content("WEBVTT\n")


def test_cue_parser_parse_file(tmp_path):
    path = tmp_path / "sample.srt"
    path.write_text(SRT_SAMPLE, encoding="utf-8")

    cues = CueParser().parse_file(str(path))

    assert [cue.text for cue in cues] == ["Hello", "World"]


def test_cue_parser_parse_source_reads_files(tmp_path):
    path = tmp_path / "sample.vtt"
    path.write_text(VTT_SAMPLE, encoding="utf-8")

    assert CueParser().parse_source(str(path)) == parse_cues(VTT_SAMPLE)
