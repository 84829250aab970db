"""Tests for timestamp parsing and formatting."""

import pytest

from vidtrim.timestamps import (
    InvalidFormatError,
    MinutesOutOfRangeError,
    SecondsOutOfRangeError,
    TimestampError,
    format_timestamp,
    parse_seconds,
)


class TestParseSeconds:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("00:00:45", 45),
            ("02:00", 120),
            ("09:05", 545),
            ("00:09:05", 545),
            ("1:15:00", 4500),
            ("01:15:00", 4500),
            ("0:0", 0),
            ("123:00:01", 442801),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_seconds(text) == expected

    def test_strips_whitespace(self):
        assert parse_seconds("  00:01:30\n") == 90

    def test_minutes_out_of_range(self):
        with pytest.raises(MinutesOutOfRangeError, match="Minutes must be below 60"):
            parse_seconds("00:60:00")

    def test_seconds_out_of_range(self):
        with pytest.raises(SecondsOutOfRangeError, match="Seconds must be below 60"):
            parse_seconds("00:00:60")

    def test_three_digit_seconds_out_of_range(self):
        with pytest.raises(SecondsOutOfRangeError):
            parse_seconds("00:123")

    def test_three_digit_minutes_out_of_range(self):
        with pytest.raises(MinutesOutOfRangeError):
            parse_seconds("12:345:00")

    @pytest.mark.parametrize("text", ["abc", "", "45", "1:2:3:4", "00:00:45x", "-1:00", "00:0a"])
    def test_invalid_format(self, text):
        with pytest.raises(InvalidFormatError, match="Format is hh:mm:ss"):
            parse_seconds(text)

    def test_errors_are_value_errors(self):
        assert issubclass(TimestampError, ValueError)
        for cls in (InvalidFormatError, SecondsOutOfRangeError, MinutesOutOfRangeError):
            assert issubclass(cls, TimestampError)


class TestFormatTimestamp:
    def test_seconds_only(self):
        assert format_timestamp(45) == "00:00:45"

    def test_hours_and_minutes(self):
        assert format_timestamp(4500) == "01:15:00"

    def test_zero(self):
        assert format_timestamp(0) == "00:00:00"

    def test_hours_not_truncated(self):
        assert format_timestamp(100 * 3600 + 61) == "100:01:01"

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            format_timestamp(-1)

    def test_round_trip(self):
        for s in range(0, 360000, 7):
            assert parse_seconds(format_timestamp(s)) == s
        assert parse_seconds(format_timestamp(359999)) == 359999
