"""Interactive trimming session — banner, prompts, and the ffmpeg calls."""

import shutil
from pathlib import Path
from typing import Callable

from prompt_toolkit import prompt

from vidtrim import ffutil
from vidtrim.config import TrimmerConfig
from vidtrim.models import TimeRange
from vidtrim.provision import provisioned_tool
from vidtrim.timestamps import TimestampError, format_timestamp, parse_seconds

TITLE = "V I D E O     T R I M M E R"

TIME_FORMAT_HELP = """
Time format: hh:mm:ss

Examples:
             45 seconds  00:00:45
              2 minutes  00:02:00
    9 minutes 5 seconds  00:09:05
      1 hour 15 minutes  01:15:00"""

Ask = Callable[[str], str]


def show_banner(title: str = TITLE) -> None:
    width = shutil.get_terminal_size(fallback=(80, 24)).columns
    border = "─" * max(width - 1, len(title))
    padding = " " * max((width - len(title)) // 2, 0)

    print()
    print(border)
    print()
    print(f"{padding}{title}")
    print()
    print(border)
    print()


def read_seconds(ask: Ask, message: str) -> int:
    """Prompt until the answer parses as a timestamp."""
    while True:
        try:
            return parse_seconds(ask(message))
        except TimestampError as exc:
            print(f"Error: {exc}")


def read_range(ask: Ask, duration: int | None = None) -> TimeRange:
    """Prompt for a start and an end time, re-asking until start < end.

    *duration* only feeds the hint shown in the prompts; it is not enforced.
    """
    bounds = f" [00:00:00 - {format_timestamp(duration)}]" if duration else ""

    print()
    start = read_seconds(ask, f"What time should the trimmed video start?{bounds} ")

    while True:
        print()
        end = read_seconds(ask, f"What time should the trimmed video end?{bounds} ")
        if start < end:
            break
        print(f"End time must be after start time ({format_timestamp(start)}).")

    if duration and end > duration:
        print(f"Note: the video is only {format_timestamp(duration)} long; "
              "the trimmed video stops at its end.")

    return TimeRange(start=start, end=end)


def run_session(
    paths: list[str],
    config: TrimmerConfig | None = None,
    ask: Ask | None = None,
) -> int:
    """Run one interactive trim and return the process exit status.

    Errors from provisioning or launching ffmpeg propagate to the caller after
    the extracted binary has been removed.
    """
    config = config or TrimmerConfig()
    ask = ask or prompt

    show_banner()

    if len(paths) != 1:
        print("Error: Drag a video file onto this program to run.")
        return 1

    input_path = Path(paths[0]).resolve()
    if not input_path.is_file():
        print(f"Error: File does not exist at {input_path}.")
        return 1

    output_path = ffutil.output_path_for(input_path)
    print(f'Trimming "{input_path.stem}"')
    print(TIME_FORMAT_HELP)

    with provisioned_tool(assets=config.asset_dir) as tool:
        duration = ffutil.probe_duration(tool, input_path, timeout=config.tool_timeout)
        if duration is not None:
            print(f"\nVideo length: {format_timestamp(duration)}")

        try:
            span = read_range(ask, duration)
        except (EOFError, KeyboardInterrupt):
            print("\nCancelled.")
            return 1

        print("\nTrimming video.")
        outcome = ffutil.trim_video(
            tool,
            input_path,
            output_path,
            format_timestamp(span.start),
            format_timestamp(span.end),
            timeout=config.tool_timeout,
        )

    if outcome.ok:
        print("Trimming complete.")
        print(f"Output: {outcome.output_path}")
    else:
        print(outcome.stderr)
        print("Trimming error. See output above.")
    return 0
