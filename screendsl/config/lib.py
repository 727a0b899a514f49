"""Centralized environment configuration management for screendsl.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

The engine functions themselves never read the environment; these values
only reach them through explicit entry points such as
`StyleOptions.from_environment()`.

Example:
    >>> from screendsl.config import EnvVar, get_environment
    >>>
    >>> depth = get_environment(EnvVar.MAX_RESOLVE_DEPTH)  # Returns int: 32
    >>> depth = get_environment(EnvVar.MAX_RESOLVE_DEPTH, override=8)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "SCREENDSL_LOG_LEVEL").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, int, float or bool).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by screendsl.

    Categories:
        - logging: Log output configuration
        - resolver: Schema value resolution limits
        - style: Style compiler constants
        - screen: Screen planning defaults
    """

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    LOG_LEVEL = EnvConfig(
        name="SCREENDSL_LOG_LEVEL",
        default="WARNING",
        var_type=str,
        description="Log level used by setup_logging() when none is given",
        category="logging",
    )

    # -------------------------------------------------------------------------
    # Value Resolver
    # -------------------------------------------------------------------------
    MAX_RESOLVE_DEPTH = EnvConfig(
        name="SCREENDSL_MAX_RESOLVE_DEPTH",
        default=32,
        var_type=int,
        description="Maximum wrapper depth unwrapped before falling back",
        category="resolver",
    )

    # -------------------------------------------------------------------------
    # Style Compiler
    # -------------------------------------------------------------------------
    BASE_FONT_SIZE = EnvConfig(
        name="SCREENDSL_BASE_FONT_SIZE",
        default=16,
        var_type=int,
        description="Font size (px) assumed when converting em units",
        category="style",
    )
    FULL_RADIUS = EnvConfig(
        name="SCREENDSL_FULL_RADIUS",
        default=9999,
        var_type=int,
        description="Radius emitted for pill/circle borderRadius values",
        category="style",
    )
    SHADOW_OPACITY = EnvConfig(
        name="SCREENDSL_SHADOW_OPACITY",
        default=0.3,
        var_type=float,
        description="shadowOpacity emitted alongside a boxShadow colour",
        category="style",
    )

    # -------------------------------------------------------------------------
    # Screen Planning
    # -------------------------------------------------------------------------
    HOME_PAGE = EnvConfig(
        name="SCREENDSL_HOME_PAGE",
        default="home",
        var_type=str,
        description="Page name treated as the home page by the screen planner",
        category="screen",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _parse_bool(value: str) -> bool | None:
    """Parse string to boolean.

    Recognizes: true/false, 1/0, yes/no (case-insensitive).
    Returns None for unrecognized values.
    """
    normalized = value.lower().strip()
    if normalized in ("true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no"):
        return False
    return None


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target Python type.
        default: Default value if conversion fails or value is None.

    Returns:
        Converted value or default.
    """
    if value is None:
        return default

    if var_type is str:
        return value

    if var_type is int:
        try:
            return int(value)
        except ValueError:
            return default

    if var_type is float:
        try:
            return float(value)
        except ValueError:
            return default

    if var_type is bool:
        result = _parse_bool(value)
        return result if result is not None else default

    # Unknown type, return as-is
    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: float) -> float: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type.

    Example:
        >>> get_environment(EnvVar.BASE_FONT_SIZE)
        16
        >>> get_environment(EnvVar.BASE_FONT_SIZE, override=14)
        14
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable.

    Args:
        env_var: Environment variable enum member.

    Returns:
        EnvConfig with name, default, type, and description.
    """
    return env_var.value


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (logging, resolver, style, screen).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Introspection
    "list_environment_variables",
]
