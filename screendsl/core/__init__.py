"""Core utilities shared by every screendsl module."""

from .log import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
