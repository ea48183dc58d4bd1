"""Logging configuration for OpenCitation."""
import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "opencitation"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: Union[int, str] = logging.INFO,
    format_string: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """Configure the ``opencitation`` logger.

    Safe to call repeatedly: handlers installed by an earlier call are
    replaced, so the latest level and destinations win. Records still
    propagate to the root logger.

    Args:
        level: Logging level (e.g., logging.INFO, "DEBUG")
        format_string: Custom format string for log messages
        log_file: Optional file path to write logs to

    Returns:
        The package logger
    """
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    # stderr keeps formatted citations on stdout clean
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in [h for h in logger.handlers if getattr(h, "_opencitation", False)]:
        logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._opencitation = True
        logger.addHandler(handler)

    logger.setLevel(_resolve_level(level))
    return logger
