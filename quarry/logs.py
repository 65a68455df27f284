"""Logging setup for the ``quarry`` command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s | %(message)s"
_DATEFMT = "%H:%M:%S"


def setup_logging(level: str | int = "WARNING", log_file: str | Path | None = None) -> None:
    """Configure the root logger.

    Logs go to stderr so they never mix with ``--dump`` output.  When
    ``log_file`` is given the same records are also written there.

    Args:
        level: Level name or number for the ``quarry`` loggers.
        log_file: Optional path of a file to log into (overwritten).
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    logging.basicConfig(
        level=logging.WARNING,
        format=_FORMAT,
        datefmt=_DATEFMT,
        handlers=handlers,
        force=True,
    )
    logging.getLogger("quarry").setLevel(level)
