"""Component Dispatcher - section to renderer lookup.

Example usage:
    >>> from screendsl.dispatch import ComponentKind, classify, resolve_renderer
    >>> resolve_renderer({"component": "Hero Banner"}).renderer
    'HeroBanner'
    >>> classify({"component": "totally_unknown_widget"})
    <ComponentKind.UNRECOGNIZED: 'unrecognized'>
"""

from .lib import (
    MOBILE_HINT_KEYS,
    RENDERER_REGISTRY,
    ComponentCategory,
    ComponentKind,
    RendererHandle,
    classify,
    component_identifier,
    get_handle,
    list_components,
    normalize_component_name,
    resolve_renderer,
)

__all__ = [
    "ComponentCategory",
    "ComponentKind",
    "RendererHandle",
    "RENDERER_REGISTRY",
    "MOBILE_HINT_KEYS",
    "normalize_component_name",
    "component_identifier",
    "resolve_renderer",
    "classify",
    "get_handle",
    "list_components",
]
