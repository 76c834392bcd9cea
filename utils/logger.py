"""
utils/logger.py
loguru based logging setup shared by the app and the demo script.
"""

import sys

from loguru import logger


def setup_logger(level: str = "INFO", logfile: str | None = None):
    """Replace loguru's default handler with a console sink and optional file sink."""
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> <level>[{level}]</level> <cyan>{name}</cyan>: <level>{message}</level>",
        level=level.upper(),
        colorize=True,
    )

    if logfile:
        logger.add(
            logfile,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} [{level}] {name}: {message}",
            level=level.upper(),
            rotation="10 MB",
            retention="7 days",
        )
