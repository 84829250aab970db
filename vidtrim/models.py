"""Shared data types used across vidtrim."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class TimeRange:
    """A start/end time pair in whole seconds."""

    start: int
    end: int


@dataclass(frozen=True)
class ProcessResult:
    """Exit code and captured output of one tool invocation."""

    returncode: int
    stdout: str
    stderr: str


@dataclass
class TrimOutcome:
    """Result of a single trim attempt."""

    ok: bool
    output_path: Path
    stderr: str = ""
