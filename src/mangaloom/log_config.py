# mangaloom/log_config.py
"""Loguru setup for mangaloom.

Every module logs through the `logger` re-exported here. Request lines are
logged at DEBUG, bodies and headers at TRACE, credential lifecycle events at
INFO and failures at ERROR. Token values are never logged.
"""

import sys

from loguru import logger

from .config import get_settings

__all__ = ["configure_logging", "logger"]

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str | None = None, sink=sys.stderr):
    """Replace all loguru handlers with a single mangaloom handler.

    Args:
        level: Minimum level, case-insensitive. Defaults to
            `ApiSettings.log_level` (`MANGALOOM_LOG_LEVEL`).
        sink: Where records go, e.g. `sys.stderr` or a file path. Only stderr
            is colorized.
    """
    level = (level or get_settings().log_level).upper()
    logger.remove()
    logger.add(
        sink,
        level=level,
        format=LOG_FORMAT,
        colorize=sink is sys.stderr,
        backtrace=True,
        diagnose=False,  # tracebacks may carry session tokens
    )
    logger.info(f"mangaloom logging at {level}")
