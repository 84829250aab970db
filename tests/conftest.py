"""Shared test fixtures."""

import gzip
from pathlib import Path

import pytest

FAKE_TOOL = b"#!/bin/sh\necho fake ffmpeg\n"


@pytest.fixture
def fake_tool() -> bytes:
    return FAKE_TOOL


@pytest.fixture
def assets_dir(tmp_path) -> Path:
    """An asset directory holding a single gzip payload."""
    d = tmp_path / "assets"
    d.mkdir()
    (d / "ffmpeg.gz").write_bytes(gzip.compress(FAKE_TOOL))
    return d


@pytest.fixture
def video_file(tmp_path) -> Path:
    path = tmp_path / "movie.mp4"
    path.write_bytes(b"not really a video")
    return path
