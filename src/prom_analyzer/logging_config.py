"""Logging setup for the command line tool."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Initialise the root logger and return the package logger.

    Unknown level names fall back to WARNING.
    """
    resolved = getattr(logging, level.upper(), logging.WARNING)
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    logging.basicConfig(level=resolved, format=LOG_FORMAT)

    logger = logging.getLogger("prom_analyzer")
    logger.setLevel(resolved)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(resolved, logging.WARNING))
    return logger


__all__ = ["LOG_FORMAT", "configure_logging"]
