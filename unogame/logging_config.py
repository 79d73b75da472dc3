"""File logging for the game.

stdout belongs to the game itself, so log records only go to a rotating
file. UNO_LOG_LEVEL and UNO_LOG_FILE override the defaults.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

HANDLER_NAME = "unogame"
DEFAULT_LOG_FILE = Path("logs") / "unogame.log"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s | %(message)s"


def parse_level(level: str | int | None) -> int:
    """Turn ``"debug"``, ``"WARNING"`` or a number into a logging level; INFO if unknown."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName((level or "INFO").strip().upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(
    level: str | int | None = None,
    log_file: str | os.PathLike[str] | None = None,
) -> logging.Logger:
    """Attach the game's file handler to the root logger and return the root.

    Calling it again reconfigures the existing handler's level.
    """
    level = parse_level(level or os.environ.get("UNO_LOG_LEVEL"))
    path = Path(log_file or os.environ.get("UNO_LOG_FILE") or DEFAULT_LOG_FILE)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    handler = next((h for h in root.handlers if h.name == HANDLER_NAME), None)
    if handler is None:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(path, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8")
        handler.name = HANDLER_NAME
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    handler.setLevel(level)

    logging.getLogger(__name__).debug("Logging to %s at %s", path, logging.getLevelName(level))
    return root
