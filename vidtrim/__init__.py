"""vidtrim — trim a video between two timestamps with a bundled ffmpeg."""

__version__ = "0.1.0"
