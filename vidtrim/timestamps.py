"""hh:mm:ss parsing and formatting."""

import re

_TIMESTAMP_RE = re.compile(r"(\d+:)?\d{1,2}:\d{1,2}")


class TimestampError(ValueError):
    """Base class for user-entered timestamps that cannot be used."""


class InvalidFormatError(TimestampError):
    pass


class SecondsOutOfRangeError(TimestampError):
    pass


class MinutesOutOfRangeError(TimestampError):
    pass


def parse_seconds(text: str) -> int:
    """Parse ``[hh:]mm:ss`` into a number of seconds.

    The text must start with ``[h+:]m[m]:s[s]`` and split into two or three
    numeric fields; minutes and seconds must be below 60. Hours are unbounded.
    """
    text = text.strip()
    parts = text.split(":")
    if (
        _TIMESTAMP_RE.match(text) is None
        or len(parts) > 3
        or not all(p.isdigit() and p.isascii() for p in parts)
    ):
        raise InvalidFormatError("Invalid time: Format is hh:mm:ss")

    seconds, minutes, hours = (int(p) for p in [*reversed(parts), "0"][:3])

    if seconds >= 60:
        raise SecondsOutOfRangeError("Invalid time: Seconds must be below 60.")
    if minutes >= 60:
        raise MinutesOutOfRangeError("Invalid time: Minutes must be below 60.")

    return hours * 3600 + minutes * 60 + seconds


def format_timestamp(seconds: int) -> str:
    if seconds < 0:
        raise ValueError(f"Cannot format a negative time ({seconds}s)")
    h, rest = divmod(seconds, 3600)
    m, s = divmod(rest, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"
