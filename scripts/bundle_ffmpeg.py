#!/usr/bin/env python3
"""Compress an ffmpeg binary into vidtrim/assets for bundling.

The package expects exactly one ``*ffmpeg*.gz`` file in its assets directory;
any previously bundled payload is replaced.

Usage: scripts/bundle_ffmpeg.py /path/to/ffmpeg[.exe]
"""

import gzip
import shutil
import sys
from pathlib import Path

ASSETS_DIR = Path(__file__).resolve().parent.parent / "vidtrim" / "assets"


def bundle_ffmpeg(binary: Path, assets_dir: Path = ASSETS_DIR) -> Path:
    if not binary.is_file():
        raise FileNotFoundError(f"No ffmpeg binary at {binary}")

    assets_dir.mkdir(parents=True, exist_ok=True)
    for old in assets_dir.glob("*ffmpeg*.gz"):
        old.unlink()

    target = assets_dir / f"{binary.name}.gz"
    with open(binary, "rb") as src, gzip.open(target, "wb", compresslevel=9) as dst:
        shutil.copyfileobj(src, dst)
    return target


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__.strip().splitlines()[-1], file=sys.stderr)
        sys.exit(1)
    out = bundle_ffmpeg(Path(sys.argv[1]))
    print(f"Bundled: {out} ({out.stat().st_size} bytes)")
