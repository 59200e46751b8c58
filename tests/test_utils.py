import pytest

from vttplayer.errors import FormatError
from vttplayer.utils import milliseconds_to_text, parse_timestamp, seconds_to_timestamp


def test_parse_timestamp_with_hours():
    assert parse_timestamp("01:02:03.456") == 3723.456


def test_parse_timestamp_srt_comma_without_hours():
    assert parse_timestamp("02:03,456") == 123.456


def test_parse_timestamp_unpadded_and_long_hours():
    assert parse_timestamp("1:00:00.000") == 3600.0
    assert parse_timestamp("100:00:00") == 360000.0


def test_parse_timestamp_short_fractions():
    assert parse_timestamp("00:05") == 5.0
    assert parse_timestamp("00:01.5") == 1.5
    assert parse_timestamp("00:01.05") == 1.05
    assert parse_timestamp("00:01.") == 1.0


def test_parse_timestamp_ignores_trailing_cue_settings():
    assert parse_timestamp("00:00:02.000 align:start position:10%") == 2.0


@pytest.mark.parametrize("text", ["not a time", "", "60:00", "00:61", "5", "-00:01"])
def test_parse_timestamp_rejects_malformed_text(text):
    with pytest.raises(FormatError) as exc_info:
        parse_timestamp(text)
    assert exc_info.value.text == text


def test_format_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_timestamp("nope")


def test_seconds_to_timestamp():
    assert seconds_to_timestamp(90.5) == "00:01:30.500"
    assert seconds_to_timestamp(3723.456, separator=",") == "01:02:03,456"


def test_milliseconds_to_text():
    assert milliseconds_to_text(0) == "0:00:00"
    assert milliseconds_to_text(3723456) == "1:02:03"
    assert milliseconds_to_text(59500) == "0:01:00"
    assert milliseconds_to_text(1499) == "0:00:01"
