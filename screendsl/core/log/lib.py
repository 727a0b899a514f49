"""Core logging implementation for screendsl."""

import logging
import sys
from typing import Optional

from screendsl.config import EnvVar, get_environment

__all__ = ["get_logger", "setup_logging", "DEFAULT_LOGGER_NAME"]

DEFAULT_LOGGER_NAME = "screendsl"


def _level_from_environment() -> int:
    """Translate SCREENDSL_LOG_LEVEL into a logging level (WARNING if unknown)."""
    name = str(get_environment(EnvVar.LOG_LEVEL)).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(level: Optional[int] = None, stream=sys.stderr) -> None:
    """Configure basic logging.

    Args:
        level: Logging level. Read from SCREENDSL_LOG_LEVEL when omitted.
        stream: Output stream.
    """
    logging.basicConfig(
        level=level if level is not None else _level_from_environment(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=stream,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name of the logger.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name or DEFAULT_LOGGER_NAME)
