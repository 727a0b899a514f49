"""Style Compiler - turns CSS-like style dictionaries into canonical styles.

Example usage:
    >>> from screendsl.style import compile_style
    >>> compile_style({"padding": "8px", "borderRadius": "50%"})
    {'padding': 8, 'borderRadius': 9999}
"""

from .lib import (
    DROPPED_PROPERTIES,
    LENGTH_PROPERTIES,
    CompiledStyle,
    StyleInputError,
    apply_metrics_positioning,
    camelize,
    compile_style,
    expand_box,
    extract_gradient,
)
from .models import DEFAULT_OPTIONS, GradientDescriptor, StyleOptions
from .text import (
    FONT_WEIGHTS,
    build_text_style,
    resolve_font_weight,
    with_color_opacity,
)
from .tokens import (
    LENGTH_UNITS,
    first_color,
    has_unit,
    is_color_token,
    parse_gradient,
    parse_length,
    split_commas,
    split_tokens,
    to_length,
)

__all__ = [
    # Compiler
    "CompiledStyle",
    "StyleInputError",
    "compile_style",
    "extract_gradient",
    "apply_metrics_positioning",
    "camelize",
    "expand_box",
    "LENGTH_PROPERTIES",
    "DROPPED_PROPERTIES",
    # Models
    "GradientDescriptor",
    "StyleOptions",
    "DEFAULT_OPTIONS",
    # Text helpers
    "FONT_WEIGHTS",
    "build_text_style",
    "resolve_font_weight",
    "with_color_opacity",
    # Tokens
    "LENGTH_UNITS",
    "split_tokens",
    "split_commas",
    "parse_length",
    "has_unit",
    "to_length",
    "is_color_token",
    "first_color",
    "parse_gradient",
]
