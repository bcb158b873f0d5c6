"""Logging setup for the CLI."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Route strongname log records to stderr at ``level``."""

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else logging.WARNING

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("strongname").setLevel(level)
