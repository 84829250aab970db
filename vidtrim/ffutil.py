"""FFmpeg subprocess helpers."""

import logging
import re
import subprocess
from pathlib import Path

from vidtrim.models import ProcessResult, TrimOutcome
from vidtrim.timestamps import TimestampError, parse_seconds

logger = logging.getLogger(__name__)

_DURATION_RE = re.compile(r"Duration: (\d+:\d{1,2}:\d{1,2})")

# No console window when launched from a windowless (drag-and-drop) session.
_CREATION_FLAGS = getattr(subprocess, "CREATE_NO_WINDOW", 0)


class ToolLaunchError(RuntimeError):
    """Raised when the tool process cannot be started or does not finish."""


class ToolTimeoutError(ToolLaunchError):
    pass


def run_tool(
    tool_path: Path, args: list[str], timeout: float | None = None
) -> ProcessResult:
    """Run *tool_path* with *args* and capture both output streams.

    Blocks until the process exits. With ``timeout=None`` there is no upper
    bound on how long that takes.
    """
    cmd = [str(tool_path), *args]
    logger.debug("Running %s", cmd)
    try:
        result = subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            creationflags=_CREATION_FLAGS,
        )
    except subprocess.TimeoutExpired as exc:
        raise ToolTimeoutError(
            f"{tool_path.name} did not finish within {timeout}s"
        ) from exc
    except OSError as exc:
        raise ToolLaunchError(f"Could not start {tool_path}: {exc}") from exc

    logger.debug("%s exited with rc=%d", tool_path.name, result.returncode)
    return ProcessResult(
        returncode=result.returncode,
        stdout=result.stdout or "",
        stderr=result.stderr or "",
    )


def parse_duration(stderr: str) -> int | None:
    """Read the input duration from ffmpeg's diagnostic output.

    Returns whole seconds plus one, so the reported length is never shorter
    than the real one after ffmpeg truncates the fraction. A missing, unusable
    or zero duration yields None.
    """
    for line in stderr.splitlines():
        match = _DURATION_RE.search(line)
        if match is None:
            continue
        try:
            seconds = parse_seconds(match.group(1))
        except TimestampError:
            logger.debug("Unusable duration %r", match.group(1))
            return None
        return seconds + 1 if seconds else None
    return None


def probe_duration(
    tool_path: Path, input_path: Path, timeout: float | None = None
) -> int | None:
    """Return the duration of *input_path* in seconds, or None if unknown."""
    # Without an output file ffmpeg exits non-zero; the metadata is still printed.
    result = run_tool(tool_path, ["-i", str(input_path)], timeout=timeout)
    duration = parse_duration(result.stderr)
    if duration is None:
        logger.warning("Could not determine the duration of %s", input_path)
    return duration


def output_path_for(input_path: Path, marker: str = "TRIMMED") -> Path:
    """``movie.mp4`` -> ``movieTRIMMED.mp4`` in the same directory."""
    return input_path.with_stem(input_path.stem + marker)


def build_trim_args(
    input_path: Path, output_path: Path, start: str, end: str
) -> list[str]:
    return [
        "-y",
        "-loglevel", "error",
        "-stats",
        "-i", str(input_path),
        "-ss", start,
        "-to", end,
        "-codec", "copy",
        str(output_path),
    ]


def trim_video(
    tool_path: Path,
    input_path: Path,
    output_path: Path,
    start: str,
    end: str,
    timeout: float | None = None,
) -> TrimOutcome:
    """Stream-copy ``[start, end)`` of *input_path* into *output_path*.

    A single attempt; a non-zero exit is reported through the outcome along
    with ffmpeg's stderr, not raised.
    """
    result = run_tool(
        tool_path, build_trim_args(input_path, output_path, start, end), timeout=timeout
    )
    if result.returncode != 0:
        logger.debug("Trim failed (rc=%d)", result.returncode)
        return TrimOutcome(ok=False, output_path=output_path, stderr=result.stderr)
    return TrimOutcome(ok=True, output_path=output_path, stderr=result.stderr)
