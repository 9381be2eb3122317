"""Centralized Loguru configuration for gresql.

Results are written to stdout; every log record goes to stderr so output
stays pipeable.
"""

import sys

from loguru import logger

_CONCISE_FORMAT = "<level>gresql: {message}</level>"
_DETAILED_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level:<8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"

# Remove the default stderr sink so we can reconfigure it
logger.remove()

# Default sink: stderr with INFO level, colored, concise format
logger.add(sys.stderr, level="INFO", format=_CONCISE_FORMAT, colorize=True)


def configure_logger(level: str = "INFO", serialize: bool = False) -> None:
    """Reconfigure the global logger (called from CLI or config).

    DEBUG and TRACE switch to a detailed format with timestamps and call sites.

    Args:
        level: Minimum log level (TRACE, DEBUG, INFO, WARNING, ERROR).
        serialize: If True, output JSON lines instead of human-readable text.
    """
    level = level.upper()
    if serialize:
        log_format = "{message}"
    elif level in ("TRACE", "DEBUG"):
        log_format = _DETAILED_FORMAT
    else:
        log_format = _CONCISE_FORMAT

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=log_format,
        serialize=serialize,
        colorize=not serialize,
    )
