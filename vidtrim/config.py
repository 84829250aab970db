"""Runtime configuration read from the environment."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass
class TrimmerConfig:
    """Settings for one vidtrim run."""

    log_level: str = "WARNING"
    pause_on_exit: bool = False
    tool_timeout: float | None = None
    asset_dir: Path | None = None


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def load_config(environ: Mapping[str, str] | None = None) -> TrimmerConfig:
    """Build a TrimmerConfig from ``VIDTRIM_*`` variables."""
    env = os.environ if environ is None else environ
    cfg = TrimmerConfig()

    if "VIDTRIM_LOG_LEVEL" in env:
        cfg.log_level = env["VIDTRIM_LOG_LEVEL"].strip().upper()
        if cfg.log_level not in logging.getLevelNamesMapping():
            raise ValueError(f"VIDTRIM_LOG_LEVEL is not a logging level: {cfg.log_level!r}")

    if "VIDTRIM_PAUSE_ON_EXIT" in env:
        cfg.pause_on_exit = _parse_bool("VIDTRIM_PAUSE_ON_EXIT", env["VIDTRIM_PAUSE_ON_EXIT"])

    timeout = env.get("VIDTRIM_TOOL_TIMEOUT", "").strip()
    if timeout:
        try:
            cfg.tool_timeout = float(timeout)
        except ValueError:
            raise ValueError(f"VIDTRIM_TOOL_TIMEOUT must be a number, got {timeout!r}") from None
        if cfg.tool_timeout <= 0:
            raise ValueError("VIDTRIM_TOOL_TIMEOUT must be positive")

    asset_dir = env.get("VIDTRIM_ASSET_DIR", "").strip()
    if asset_dir:
        cfg.asset_dir = Path(asset_dir)

    return cfg
