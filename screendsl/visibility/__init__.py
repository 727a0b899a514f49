"""Visibility Resolver - per-section mobile render decision.

Example usage:
    >>> from screendsl.visibility import should_render
    >>> should_render({"visibility": {"properties": {"hideOnMobile": {"value": True}}}})
    False
"""

from .lib import (
    HIDE_KEYS,
    SHOW_KEYS,
    TARGET_KEYS,
    filter_sections,
    resolve_visibility,
    should_render,
)

__all__ = [
    "HIDE_KEYS",
    "SHOW_KEYS",
    "TARGET_KEYS",
    "resolve_visibility",
    "should_render",
    "filter_sections",
]
