"""Logger configuration for the racegrid CLI."""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<level>{message}</level> <cyan>{extra}</cyan>"
)


def setup_logger(level: str = "INFO") -> None:
    """Configure loguru with a single stderr sink.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level,
        colorize=sys.stderr.isatty(),
    )
