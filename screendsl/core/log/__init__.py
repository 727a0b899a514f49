"""Logging micro API for screendsl."""

from .lib import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
