"""Centralized configuration management for screendsl.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from screendsl.config import EnvVar, get_environment
    >>>
    >>> size = get_environment(EnvVar.BASE_FONT_SIZE)  # Returns int: 16
    >>> size = get_environment(EnvVar.BASE_FONT_SIZE, override=14)
    >>>
    >>> for var in list_environment_variables("style"):
    ...     info = get_environment_info(var)
    ...     print(f"{info.name}: {info.description}")

Environment Variable Categories:
    logging: Log output configuration
    resolver: Schema value resolution limits
    style: Style compiler constants
    screen: Screen planning defaults
"""

from .lib import (
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    list_environment_variables,
)

__all__ = [
    "EnvConfig",
    "EnvVar",
    "get_environment",
    "get_environment_info",
    "list_environment_variables",
]
