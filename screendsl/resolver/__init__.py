"""Value Resolver - unwraps schema-shaped DSL values into typed primitives.

Example usage:
    >>> from screendsl.resolver import resolve_bool, resolve_number
    >>> resolve_bool({"value": "yes"})
    True
    >>> resolve_number({"const": "14px"}, 0)
    14
"""

from .lib import (
    FALSY_STRINGS,
    MAX_DEPTH,
    TRUTHY_STRINGS,
    first_present,
    get_max_depth,
    is_number,
    lookup,
    normalize_number,
    parse_float,
    resolve,
    resolve_bool,
    resolve_list,
    resolve_mapping,
    resolve_number,
    resolve_string,
    stringify,
    unwrap,
    unwrap_tree,
)

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
