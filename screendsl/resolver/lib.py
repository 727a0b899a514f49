"""Value Resolver for schema-shaped DSL values.

Server-authored layouts wrap the same datum in several ways: a raw primitive,
``{"value": x}``, ``{"const": x}`` or a ``{"properties": {...}}`` container.
Every renderer needs the primitive, so this module is the single place that
knows how to peel those wrappers and coerce the result.

Resolution rules:
    - ``None`` resolves to the caller's fallback.
    - Mappings are unwrapped in priority order ``value`` > ``const`` >
      ``properties``; a mapping with none of those keys is plain data and
      is returned unchanged.
    - Primitives and lists are returned as-is.
    - Wrapping deeper than ``max_depth`` (SCREENDSL_MAX_RESOLVE_DEPTH, default 32)
      resolves to the fallback, which also terminates self-referential structures.

None of the functions here raise on malformed input.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from screendsl.config import EnvVar, get_environment
from screendsl.core.log import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

MAX_DEPTH = 32

TRUTHY_STRINGS = frozenset({"true", "1", "yes", "y"})
FALSY_STRINGS = frozenset({"false", "0", "no", "n"})

# Leading numeric prefix ("12.5px" -> 12.5, "1e2" -> 100).
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_MISSING = object()


def get_max_depth() -> int:
    """Get the configured maximum unwrap depth (SCREENDSL_MAX_RESOLVE_DEPTH)."""
    return get_environment(EnvVar.MAX_RESOLVE_DEPTH)


# =============================================================================
# Unwrapping
# =============================================================================


def unwrap(value: Any, fallback: Any = None, *, max_depth: int | None = None) -> Any:
    """Peel schema wrappers off a value.

    Args:
        value: Any SchemaValue.
        fallback: Returned for None or when the depth bound is exceeded.
        max_depth: Maximum number of wrappers to unwrap. Defaults to
            SCREENDSL_MAX_RESOLVE_DEPTH (32).

    Returns:
        The unwrapped primitive, list or plain mapping.

    Example:
        >>> unwrap({"properties": {"value": {"const": 12}}})
        12
        >>> unwrap({"value": None}, "x")
        'x'
    """
    if max_depth is None:
        max_depth = get_max_depth()

    current = value
    for _ in range(max_depth + 1):
        if current is None:
            return fallback
        if not isinstance(current, Mapping):
            return current
        if "value" in current:
            current = current["value"]
        elif "const" in current:
            current = current["const"]
        elif "properties" in current:
            current = current["properties"]
        else:
            return current

    logger.debug(f"Wrapper depth exceeded {max_depth}; using fallback")
    return fallback


def resolve(value: Any, fallback: T = None) -> Any | T:
    """Resolve a SchemaValue to its primitive, or ``fallback``."""
    return unwrap(value, fallback)


def unwrap_tree(
    value: Any, *, max_depth: int | None = None, _depth: int = 0
) -> Any:
    """Recursively resolve every wrapper in a tree into plain data.

    Nesting beyond ``max_depth`` levels (default SCREENDSL_MAX_RESOLVE_DEPTH)
    resolves to None.
    """
    if max_depth is None:
        max_depth = get_max_depth()
    if _depth > max_depth:
        logger.debug(f"Tree depth exceeded {max_depth}; truncating")
        return None

    resolved = unwrap(value, None, max_depth=max_depth)
    if isinstance(resolved, Mapping):
        return {
            key: unwrap_tree(item, max_depth=max_depth, _depth=_depth + 1)
            for key, item in resolved.items()
        }
    if isinstance(resolved, list):
        return [
            unwrap_tree(item, max_depth=max_depth, _depth=_depth + 1)
            for item in resolved
        ]
    return resolved


# =============================================================================
# Number Helpers
# =============================================================================


def parse_float(text: str) -> float | None:
    """Parse the leading number of a string, ignoring any trailing text.

    Returns:
        The parsed float, or None when the string has no numeric prefix.

    Example:
        >>> parse_float("12.5px")
        12.5
        >>> parse_float("px") is None
        True
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    return float(match.group(1))


def normalize_number(number: float) -> int | float:
    """Collapse integral floats to int so 240.0 is emitted as 240."""
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number


def is_number(value: Any) -> bool:
    """Check for a real int/float (bools excluded, NaN excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


# =============================================================================
# Typed Coercions
# =============================================================================


def resolve_bool(value: Any, fallback: bool = False) -> bool:
    """Resolve a value into a boolean.

    Booleans pass through, numbers map to ``!= 0`` and strings are matched
    against the fixed truthy/falsy sets. Anything else yields ``fallback``.
    """
    resolved = unwrap(value, _MISSING)
    if isinstance(resolved, bool):
        return resolved
    if isinstance(resolved, (int, float)):
        return resolved != 0
    if isinstance(resolved, str):
        lowered = resolved.strip().lower()
        if lowered in TRUTHY_STRINGS:
            return True
        if lowered in FALSY_STRINGS:
            return False
    return fallback


def resolve_number(value: Any, fallback: T = None) -> int | float | T:
    """Resolve a value into a number.

    Strings are parsed by their leading number ("12px" -> 12). Empty
    strings, NaN, booleans and containers yield ``fallback``.
    """
    resolved = unwrap(value, _MISSING)
    if resolved is _MISSING or isinstance(resolved, bool):
        return fallback
    if isinstance(resolved, (int, float)):
        return resolved if is_number(resolved) else fallback
    if isinstance(resolved, str):
        if not resolved.strip():
            return fallback
        parsed = parse_float(resolved)
        return fallback if parsed is None else normalize_number(parsed)
    return fallback


def stringify(value: Any) -> str | None:
    """Stringify a primitive as JSON-authored values read (true, 12, 1.5).

    Returns None for containers, which have no meaningful string form.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return str(normalize_number(value))
    if isinstance(value, (str, int)):
        return str(value)
    return None


def resolve_string(value: Any, fallback: T = "") -> str | T:
    """Resolve a value into a non-empty string, or ``fallback``."""
    resolved = unwrap(value, _MISSING)
    if resolved is _MISSING:
        return fallback
    text = stringify(resolved)
    return text if text else fallback


def resolve_mapping(value: Any, fallback: T = None) -> Mapping[str, Any] | T:
    """Resolve a value that should be a plain object."""
    resolved = unwrap(value, _MISSING)
    return resolved if isinstance(resolved, Mapping) else fallback


def resolve_list(value: Any, fallback: T = None) -> list[Any] | T:
    """Resolve a value that should be an array."""
    resolved = unwrap(value, _MISSING)
    return resolved if isinstance(resolved, list) else fallback


# =============================================================================
# Lookup Helpers
# =============================================================================


def first_present(mapping: Any, keys: Iterable[str]) -> Any:
    """Return the value of the first alias key that is present and not None.

    Args:
        mapping: Container to search. Non-mappings yield None.
        keys: Alias keys in priority order.
    """
    if not isinstance(mapping, Mapping):
        return None
    for key in keys:
        candidate = mapping.get(key)
        if candidate is not None:
            return candidate
    return None


def _step(container: Any, key: str) -> Any:
    if not isinstance(container, Mapping):
        return _MISSING
    direct = container.get(key)
    if direct is not None:
        return direct
    nested = container.get("properties")
    if isinstance(nested, Mapping) and nested.get(key) is not None:
        return nested[key]
    return _MISSING


def lookup(value: Any, *path: str, fallback: Any = None) -> Any:
    """Walk a key path, entering ``properties`` containers transparently.

    The node found at the end of the path is returned without unwrapping so
    callers can pick the coercion they need.

    Example:
        >>> props = {"layout": {"properties": {"css": {"container": {}}}}}
        >>> lookup(props, "layout", "css", "container")
        {}
    """
    current = value
    for key in path:
        current = _step(current, key)
        if current is _MISSING:
            return fallback
    return current


__all__ = [
    "MAX_DEPTH",
    "TRUTHY_STRINGS",
    "FALSY_STRINGS",
    "get_max_depth",
    # Unwrapping
    "unwrap",
    "resolve",
    "unwrap_tree",
    # Numbers
    "parse_float",
    "normalize_number",
    "is_number",
    # Coercions
    "resolve_bool",
    "resolve_number",
    "resolve_string",
    "resolve_mapping",
    "resolve_list",
    "stringify",
    # Lookup
    "first_present",
    "lookup",
]
