"""Extraction of the bundled ffmpeg binary to a temporary file."""

import gzip
import logging
import os
import shutil
import stat
import sys
import tempfile
import zlib
from contextlib import contextmanager
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "ffmpeg"


class ToolProvisionError(RuntimeError):
    """Raised when the bundled tool cannot be written to disk."""


class ToolNotFoundError(ToolProvisionError):
    pass


def bundled_assets() -> Traversable:
    """Return the asset directory shipped inside the vidtrim package."""
    return files("vidtrim").joinpath("assets")


def _find_payload(assets: Traversable, marker: str) -> Traversable:
    if not assets.is_dir():
        raise ToolNotFoundError(f"Asset directory {assets} does not exist")

    candidates = sorted(
        (entry for entry in assets.iterdir()
         if entry.is_file() and marker in entry.name and entry.name.endswith(".gz")),
        key=lambda entry: entry.name,
    )
    if not candidates:
        raise ToolNotFoundError(f"Could not extract {marker}: no bundled payload found")
    if len(candidates) > 1:
        names = ", ".join(entry.name for entry in candidates)
        raise ToolProvisionError(f"Expected one bundled {marker} payload, found: {names}")
    return candidates[0]


def extract_tool(
    destination: Path,
    assets: Traversable | Path | None = None,
    marker: str = DEFAULT_MARKER,
) -> Path:
    """Decompress the bundled payload to *destination* and make it executable.

    An existing file at *destination* is overwritten.
    """
    payload = _find_payload(assets if assets is not None else bundled_assets(), marker)
    logger.debug("Extracting %s to %s", payload.name, destination)

    try:
        with payload.open("rb") as raw, gzip.open(raw) as src, open(destination, "wb") as dst:
            shutil.copyfileobj(src, dst)
        mode = os.stat(destination).st_mode
        os.chmod(destination, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    except (OSError, EOFError, zlib.error) as exc:
        raise ToolProvisionError(f"Could not extract {marker} to {destination}: {exc}") from exc

    return destination


@contextmanager
def provisioned_tool(
    assets: Traversable | Path | None = None,
    marker: str = DEFAULT_MARKER,
) -> Iterator[Path]:
    """Yield the path of a freshly extracted tool; delete it on exit."""
    suffix = ".exe" if sys.platform == "win32" else ""
    fd, name = tempfile.mkstemp(prefix="vidtrim_", suffix=suffix)
    os.close(fd)
    tool_path = Path(name)
    try:
        extract_tool(tool_path, assets=assets, marker=marker)
        yield tool_path
    finally:
        tool_path.unlink(missing_ok=True)
        logger.debug("Removed %s", tool_path)
