"""Thin CLI entry point — loads settings and runs the interactive session."""

import argparse
import logging
import sys

from dotenv import load_dotenv
from prompt_toolkit import prompt

from vidtrim.config import load_config
from vidtrim.ffutil import ToolLaunchError
from vidtrim.logging_config import setup_logging
from vidtrim.provision import ToolProvisionError
from vidtrim.session import run_session

logger = logging.getLogger(__name__)


def _wait_for_exit() -> None:
    try:
        prompt("\nPress Enter to exit.")
    except (EOFError, KeyboardInterrupt):
        pass


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="vidtrim",
        description="vidtrim — cut a video between two timestamps without re-encoding.",
    )
    parser.add_argument("video", nargs="*", help="Input video file (exactly one)")
    # Dash-prefixed names are still file paths; the session checks the count.
    args, extra = parser.parse_known_args(argv)
    paths = args.video + extra

    load_dotenv()
    try:
        config = load_config()
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1

    setup_logging(config.log_level)

    try:
        status = run_session(paths, config)
    except (ToolProvisionError, ToolLaunchError) as exc:
        logger.debug("Aborting run", exc_info=True)
        print(f"Fatal: {exc}")
        status = 1

    if config.pause_on_exit:
        _wait_for_exit()
    return status


def run() -> None:
    sys.exit(main())
