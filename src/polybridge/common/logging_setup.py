"""Debug logging for the ``polybridge`` logger tree."""
from __future__ import annotations
import logging
import sys
from typing import TextIO

LOGGER_NAME = "polybridge"
FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


class _BridgeHandler(logging.StreamHandler):
    """Marks the handler installed here so repeat calls replace it."""


def setup_logging(level: int = logging.DEBUG, stream: TextIO | None = None) -> logging.Logger:
    """
    Send ``polybridge.*`` records (request lines, status and parse failures) to a stream.

    Handlers owned by the application, including those on the root logger,
    are left alone; calling this again swaps the previously installed handler.

    Args:
        level: Level for the ``polybridge`` logger.
        stream: Destination, stdout by default.

    Returns:
        The configured ``polybridge`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for h in [h for h in logger.handlers if isinstance(h, _BridgeHandler)]:
        logger.removeHandler(h)

    handler = _BridgeHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
