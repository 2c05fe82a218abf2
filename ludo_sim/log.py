from __future__ import annotations

import sys

from loguru import logger


def configure_logging(level: str = "INFO", sink=sys.stderr) -> int:
    """Replace every loguru handler with a single ``sink`` at ``level``.

    Returns the handler id so callers can remove it again.
    """
    logger.remove()
    return logger.add(sink, level=level.upper())
