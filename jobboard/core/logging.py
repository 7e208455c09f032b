"""Logging setup for the job board."""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``jobboard`` logger hierarchy once.

    Args:
        level: Level name such as "INFO". Defaults to settings.LOG_LEVEL.

    Returns:
        The package root logger.
    """
    from jobboard.core.config import settings

    log = logging.getLogger("jobboard")
    log.setLevel((level or settings.LOG_LEVEL).upper())
    if log.handlers:
        return log

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    log.addHandler(handler)
    return log
