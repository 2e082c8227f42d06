"""
Logging setup.

Replaces loguru's default sink with a single stdout sink.
"""

import sys

from loguru import logger

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} | {message}"


def setup_logging(level: str = "INFO") -> None:
    """Configure the global loguru logger once at startup."""
    logger.remove()
    logger.add(sys.stdout, level=level.upper(), format=LOG_FORMAT, backtrace=False, diagnose=False)
