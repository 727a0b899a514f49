"""screendsl: Layout DSL normalization and style compilation for mobile screens."""

from screendsl.dispatch import ComponentKind, RendererHandle, classify, resolve_renderer
from screendsl.resolver import (
    resolve,
    resolve_bool,
    resolve_number,
    resolve_string,
    unwrap,
)
from screendsl.screen import PlannedSection, ScreenPlan, plan_screen
from screendsl.section import Section, load_sections, normalize_section
from screendsl.style import (
    GradientDescriptor,
    StyleInputError,
    StyleOptions,
    compile_style,
)
from screendsl.visibility import filter_sections, should_render

__all__ = [
    # Resolver
    "unwrap",
    "resolve",
    "resolve_bool",
    "resolve_number",
    "resolve_string",
    # Style
    "compile_style",
    "StyleOptions",
    "StyleInputError",
    "GradientDescriptor",
    # Visibility
    "should_render",
    "filter_sections",
    # Dispatch
    "ComponentKind",
    "RendererHandle",
    "resolve_renderer",
    "classify",
    # Sections
    "Section",
    "load_sections",
    "normalize_section",
    # Screen
    "PlannedSection",
    "ScreenPlan",
    "plan_screen",
]
