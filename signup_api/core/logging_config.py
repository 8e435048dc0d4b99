"""Logging setup shared by the API and the CLI scripts."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str | int = "INFO") -> None:
    """Attach one stream handler to the package logger; later calls only adjust the level."""
    global _configured
    logger = logging.getLogger("signup_api")
    logger.setLevel(level)
    if _configured:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    _configured = True
