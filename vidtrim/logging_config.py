"""Logging configuration for vidtrim."""

import logging
import sys

# ANSI SGR codes per level.
LEVEL_COLORS = {
    logging.DEBUG: "36",
    logging.INFO: "32",
    logging.WARNING: "33",
    logging.ERROR: "31",
    logging.CRITICAL: "1;31",
}


class LevelColorFormatter(logging.Formatter):
    """``LEVEL - logger: message`` with the level name coloured on a terminal."""

    def __init__(self, use_color: bool = True):
        super().__init__("%(levelname)s - %(name)s: %(message)s")
        self.use_color = use_color

    def formatMessage(self, record):
        text = super().formatMessage(record)
        code = LEVEL_COLORS.get(record.levelno)
        if not self.use_color or code is None:
            return text
        name = record.levelname
        return f"\x1b[{code}m{name}\x1b[0m{text[len(name):]}"


def setup_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a stderr handler to the ``vidtrim`` logger (once)."""
    log = logging.getLogger("vidtrim")
    log.setLevel(level)

    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(LevelColorFormatter(use_color=sys.stderr.isatty()))
        log.addHandler(handler)
    for handler in log.handlers:
        handler.setLevel(level)

    return log
