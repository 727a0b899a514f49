"""Style Compiler: CSS-like style dictionaries to canonical styles.

Layout authors write styles the way they would for the web: shorthand
padding and borders, ``px`` units, gradients inside ``background``, kebab-case
property names. The mobile surface accepts none of that, so every style goes
through `compile_style` first.

Each key is compiled independently by the handler registered for it in
``_RULES``; keys without a handler fall back to unit stripping. A handler
that cannot make sense of its value drops the key and logs at debug level,
so malformed authoring never breaks a render.

Example:
    >>> compile_style({"padding": "4px 8px", "border": "1px solid #ccc"})
    {'paddingVertical': 4, 'paddingHorizontal': 8, 'borderWidth': 1, 'borderColor': '#ccc', 'borderStyle': 'solid'}
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from screendsl.core.log import get_logger
from screendsl.resolver import (
    is_number,
    normalize_number,
    parse_float,
    stringify,
    unwrap,
)

from .models import DEFAULT_OPTIONS, GradientDescriptor, StyleOptions
from .text import resolve_font_weight
from .tokens import (
    first_color,
    has_unit,
    is_color_token,
    parse_gradient,
    parse_length,
    split_tokens,
    to_length,
)

logger = get_logger(__name__)

CompiledStyle = dict[str, Any]
Handler = Callable[[str, Any, CompiledStyle, StyleOptions], None]


class StyleInputError(TypeError):
    """Raised when compile_style is handed something other than a mapping."""


# =============================================================================
# Property Tables
# =============================================================================

LENGTH_PROPERTIES = frozenset(
    {
        "width",
        "height",
        "minWidth",
        "minHeight",
        "maxWidth",
        "maxHeight",
        "top",
        "left",
        "right",
        "bottom",
        "borderWidth",
        "borderTopWidth",
        "borderRightWidth",
        "borderBottomWidth",
        "borderLeftWidth",
        "fontSize",
        "lineHeight",
    }
)

SIDE_SPACING_PROPERTIES = frozenset(
    f"{prefix}{side}"
    for prefix in ("padding", "margin")
    for side in (
        "Top",
        "Right",
        "Bottom",
        "Left",
        "Horizontal",
        "Vertical",
        "Start",
        "End",
    )
)

# Keyword properties passed through after trimming/lower-casing
KEYWORD_PROPERTIES = frozenset(
    {
        "textAlign",
        "flexDirection",
        "flexWrap",
        "position",
        "overflow",
        "textTransform",
        "writingDirection",
    }
)

FLEX_ALIGNMENT_PROPERTIES = frozenset(
    {"justifyContent", "alignItems", "alignSelf", "alignContent"}
)
FLEX_ALIGNMENT_ALIASES = {"start": "flex-start", "end": "flex-end"}

DROPPED_PROPERTIES = frozenset({"gap", "rowGap", "columnGap"})

BORDER_STYLES = frozenset({"solid", "dashed", "dotted"})
TEXT_DECORATIONS = frozenset({"underline", "line-through", "none"})
RESIZE_MODES = {"contain": "contain", "cover": "cover", "fill": "stretch"}
DISPLAY_VALUES = frozenset({"none", "flex"})
SINGLE_LINE_WHITE_SPACE = frozenset({"nowrap", "pre"})

FULL_RADIUS_VALUES = frozenset({"999px", "9999px", "50%"})

# Box shorthand arity -> target suffixes
_BOX_SIDES: dict[int, tuple[str, ...]] = {
    1: ("",),
    2: ("Vertical", "Horizontal"),
    3: ("Top", "Horizontal", "Bottom"),
    4: ("Top", "Right", "Bottom", "Left"),
}

# Logical axis shorthand -> (single-value suffix, start/end suffixes)
_AXIS_SIDES: dict[str, tuple[str, tuple[str, str]]] = {
    "Inline": ("Horizontal", ("Left", "Right")),
    "Block": ("Vertical", ("Top", "Bottom")),
}

_KEBAB = re.compile(r"-([a-z])")


class _Dropped(ValueError):
    """Internal signal that a handler rejected its value."""


# =============================================================================
# Helpers
# =============================================================================


def camelize(key: str) -> str:
    """Convert a kebab-case CSS name to camelCase (``font-size`` -> ``fontSize``)."""
    key = key.strip()
    if "-" not in key:
        return key
    return _KEBAB.sub(lambda match: match.group(1).upper(), key.lower())


def _text(value: Any) -> str:
    text = stringify(value)
    if text is None or not text.strip():
        raise _Dropped("expected a non-empty primitive")
    return text.strip()


def _is_box_part(part: Any) -> bool:
    return is_number(part) or part == "auto" or (
        isinstance(part, str) and part.endswith("%") and parse_float(part) is not None
    )


def _box_parts(value: Any) -> list[Any]:
    if is_number(value):
        return [value]
    parts = [to_length(token) for token in split_tokens(_text(value))]
    if not 1 <= len(parts) <= 4 or not all(_is_box_part(part) for part in parts):
        raise _Dropped(f"cannot expand {len(parts)}-part box shorthand")
    return parts


def expand_box(prefix: str, parts: list[Any]) -> CompiledStyle:
    """Expand 1-4 box shorthand parts into per-side keys.

    Example:
        >>> expand_box("margin", [1, 2, 3])
        {'marginTop': 1, 'marginHorizontal': 2, 'marginBottom': 3}
    """
    sides = _BOX_SIDES[len(parts)]
    return {f"{prefix}{side}": part for side, part in zip(sides, parts)}


def _round_half_up(number: float) -> int:
    return math.floor(number + 0.5)


# =============================================================================
# Rule Handlers
# =============================================================================


def _length(key: str, value: Any, out: CompiledStyle, options: StyleOptions) -> None:
    out[key] = to_length(value)


def _box(key: str, value: Any, out: CompiledStyle, options: StyleOptions) -> None:
    out.update(expand_box(key, _box_parts(value)))


def _axis(key: str, value: Any, out: CompiledStyle, options: StyleOptions) -> None:
    axis = "Inline" if key.endswith("Inline") else "Block"
    prefix = key[: -len(axis)]
    single, (start, end) = _AXIS_SIDES[axis]

    parts = _box_parts(value)
    if len(parts) == 1:
        out[f"{prefix}{single}"] = parts[0]
    elif len(parts) == 2:
        out[f"{prefix}{start}"] = parts[0]
        out[f"{prefix}{end}"] = parts[1]
    else:
        raise _Dropped(f"{axis.lower()} axis takes 1 or 2 parts, got {len(parts)}")


def _border(key: str, value: Any, out: CompiledStyle, options: StyleOptions) -> None:
    side = key[len("border") :]
    if is_number(value):
        out[f"border{side}Width"] = value
        return

    tokens = split_tokens(_text(value))
    width = next((parse_length(token) for token in tokens if has_unit(token)), None)
    if width is None:
        width = next(
            (parse_length(token) for token in tokens if parse_length(token) is not None),
            None,
        )
    if width is None and any(token.lower() == "none" for token in tokens):
        width = 0
    color = next((token for token in tokens if is_color_token(token)), None)
    style = next(
        (token.lower() for token in tokens if token.lower() in BORDER_STYLES), None
    )

    if width is None and color is None and (side or style is None):
        raise _Dropped("no width, colour or style in border shorthand")

    if width is not None:
        out[f"border{side}Width"] = width
    if color is not None:
        out[f"border{side}Color"] = color
    if style is not None and not side:
        out["borderStyle"] = style


def _background(key: str, value: Any, out: CompiledStyle, options: StyleOptions) -> None:
    if not isinstance(value, str):
        raise _Dropped("background must be a string")
    text = value.strip()
    if "linear-gradient" not in text.lower():
        if not text:
            raise _Dropped("empty background")
        out["backgroundColor"] = text
        return

    gradient = parse_gradient(text)
    color = first_color(text)
    if gradient is None and color is None:
        raise _Dropped("unparseable gradient")
    if gradient is not None:
        out["gradient"] = gradient.model_dump()
    if color is not None:
        out["backgroundColor"] = color


def _border_radius(
    key: str, value: Any, out: CompiledStyle, options: StyleOptions
) -> None:
    if is_number(value):
        out[key] = value
        return
    text = _text(value)
    if "%" in text or text in FULL_RADIUS_VALUES:
        out[key] = options.full_radius
        return
    if re.search(r"\s|/", text):
        raise _Dropped("multi-value radius")
    length = parse_length(text)
    if length is None:
        raise _Dropped("radius is not a length")
    out[key] = length


def _font_family(key: str, value: Any, out: CompiledStyle, options: StyleOptions) -> None:
    family = re.sub(r"['\"]", "", _text(value).split(",")[0]).strip()
    if not family:
        raise _Dropped("empty font family")
    out[key] = family


def _font_weight(key: str, value: Any, out: CompiledStyle, options: StyleOptions) -> None:
    weight = resolve_font_weight(value, None)
    if weight is None:
        raise _Dropped("unknown font weight")
    out[key] = weight


def _keyword(key: str, value: Any, out: CompiledStyle, options: StyleOptions) -> None:
    out[key] = _text(value).lower()


def _flex_alignment(
    key: str, value: Any, out: CompiledStyle, options: StyleOptions
) -> None:
    keyword = _text(value).lower()
    out[key] = FLEX_ALIGNMENT_ALIASES.get(keyword, keyword)


def _font_variant(key: str, value: Any, out: CompiledStyle, options: StyleOptions) -> None:
    if isinstance(value, list):
        out[key] = value
        return
    variants = _text(value).split()
    out[key] = variants


def _text_decoration(
    key: str, value: Any, out: CompiledStyle, options: StyleOptions
) -> None:
    decoration = value.strip().lower() if isinstance(value, str) else None
    out["textDecorationLine"] = decoration if decoration in TEXT_DECORATIONS else "none"


def _font_style(key: str, value: Any, out: CompiledStyle, options: StyleOptions) -> None:
    out[key] = "italic" if value == "italic" else "normal"


def _letter_spacing(
    key: str, value: Any, out: CompiledStyle, options: StyleOptions
) -> None:
    if is_number(value):
        out[key] = value
        return
    text = _text(value).lower()
    if text.endswith("em"):
        amount = parse_float(text)
        if amount is None:
            raise _Dropped("non-numeric em spacing")
        out[key] = normalize_number(amount * options.base_font_size)
        return
    length = parse_length(text)
    if length is None:
        raise _Dropped("non-numeric letter spacing")
    out[key] = length


def _opacity(key: str, value: Any, out: CompiledStyle, options: StyleOptions) -> None:
    if is_number(value):
        out[key] = value
        return
    text = _text(value)
    amount = parse_float(text)
    if amount is None:
        raise _Dropped("non-numeric opacity")
    out[key] = normalize_number(amount / 100 if text.endswith("%") else amount)


def _background_opacity(
    key: str, value: Any, out: CompiledStyle, options: StyleOptions
) -> None:
    amount = value if is_number(value) else parse_float(_text(value))
    if amount is None:
        raise _Dropped("non-numeric background opacity")
    out["opacity"] = normalize_number(amount / 100)


def _box_shadow(key: str, value: Any, out: CompiledStyle, options: StyleOptions) -> None:
    text = _text(value)
    if text.lower() == "none":
        raise _Dropped("shadow disabled")

    tokens = split_tokens(text)
    lengths = [length for length in map(parse_length, tokens) if length is not None]
    color = next((token for token in tokens if is_color_token(token)), None)
    if len(lengths) < 2 and color is None:
        raise _Dropped("no offsets or colour in box shadow")

    if len(lengths) >= 2:
        out["shadowOffset"] = {"width": lengths[0], "height": lengths[1]}
    if len(lengths) >= 3:
        out["shadowRadius"] = lengths[2]
        out["elevation"] = max(1, _round_half_up(lengths[2] / 2))
    if color is not None:
        out["shadowColor"] = color
        out["shadowOpacity"] = options.shadow_opacity


def _object_fit(key: str, value: Any, out: CompiledStyle, options: StyleOptions) -> None:
    fit = value.strip().lower() if isinstance(value, str) else None
    out["resizeMode"] = RESIZE_MODES.get(fit, "contain")


def _white_space(key: str, value: Any, out: CompiledStyle, options: StyleOptions) -> None:
    if isinstance(value, str) and value.strip().lower() in SINGLE_LINE_WHITE_SPACE:
        out["numberOfLines"] = 1


def _display(key: str, value: Any, out: CompiledStyle, options: StyleOptions) -> None:
    display = _text(value).lower()
    if display not in DISPLAY_VALUES:
        raise _Dropped(f"unsupported display {display!r}")
    out[key] = display


def _integer(key: str, value: Any, out: CompiledStyle, options: StyleOptions) -> None:
    number = value if is_number(value) else parse_float(_text(value))
    if number is None or math.isinf(number):
        raise _Dropped("not an integer")
    out[key] = int(number)


def _float(key: str, value: Any, out: CompiledStyle, options: StyleOptions) -> None:
    if is_number(value):
        out[key] = value
        return
    number = parse_float(_text(value))
    if number is None:
        raise _Dropped("not a number")
    out[key] = normalize_number(number)


def _drop(key: str, value: Any, out: CompiledStyle, options: StyleOptions) -> None:
    raise _Dropped("unsupported on mobile")


def _default(key: str, value: Any, out: CompiledStyle, options: StyleOptions) -> None:
    if isinstance(value, str) and has_unit(value):
        out[key] = parse_length(value)
    else:
        out[key] = value


_RULES: dict[str, Handler] = {
    **dict.fromkeys(LENGTH_PROPERTIES, _length),
    **dict.fromkeys(SIDE_SPACING_PROPERTIES, _length),
    **dict.fromkeys(("padding", "margin"), _box),
    **dict.fromkeys(
        ("paddingInline", "paddingBlock", "marginInline", "marginBlock"), _axis
    ),
    **dict.fromkeys(
        ("border", "borderTop", "borderRight", "borderBottom", "borderLeft"), _border
    ),
    **dict.fromkeys(("background", "backgroundColor"), _background),
    **dict.fromkeys(KEYWORD_PROPERTIES, _keyword),
    **dict.fromkeys(FLEX_ALIGNMENT_PROPERTIES, _flex_alignment),
    **dict.fromkeys(("textDecoration", "textDecorationLine"), _text_decoration),
    **dict.fromkeys(("zIndex", "elevation"), _integer),
    **dict.fromkeys(("flex", "flexGrow", "flexShrink"), _float),
    **dict.fromkeys(DROPPED_PROPERTIES, _drop),
    "borderRadius": _border_radius,
    "fontFamily": _font_family,
    "fontWeight": _font_weight,
    "fontVariant": _font_variant,
    "fontStyle": _font_style,
    "letterSpacing": _letter_spacing,
    "opacity": _opacity,
    "backgroundOpacity": _background_opacity,
    "boxShadow": _box_shadow,
    "objectFit": _object_fit,
    "whiteSpace": _white_space,
    "display": _display,
}


# =============================================================================
# Main Interface
# =============================================================================


def compile_style(style: Any, *, options: StyleOptions | None = None) -> CompiledStyle:
    """Compile a CSS-like style dictionary into a canonical style.

    Args:
        style: StyleDictionary, possibly schema-wrapped. None compiles to {}.
        options: Compiler constants. Defaults to the built-in values.

    Returns:
        New dict of canonical properties. The input is not modified.

    Raises:
        StyleInputError: If ``style`` does not resolve to a mapping.
    """
    resolved = unwrap(style, None)
    if resolved is None:
        return {}
    if not isinstance(resolved, Mapping):
        raise StyleInputError(
            f"compile_style expects a mapping, got {type(resolved).__name__}"
        )

    options = options or DEFAULT_OPTIONS
    out: CompiledStyle = {}
    for raw_key, raw_value in resolved.items():
        if not isinstance(raw_key, str):
            continue
        key = camelize(raw_key)
        value = unwrap(raw_value, None)
        if value is None:
            continue

        handler = _RULES.get(key, _default)
        try:
            handler(key, value, out, options)
        except (TypeError, ValueError, ArithmeticError) as e:
            logger.debug(f"Dropped style {key}={value!r}: {e}")

    return out


def extract_gradient(style: Any) -> GradientDescriptor | None:
    """Get the gradient carried by a compiled style, if any."""
    if not isinstance(style, Mapping) or style.get("gradient") is None:
        return None
    try:
        return GradientDescriptor.model_validate(style["gradient"])
    except ValidationError:
        return None


def apply_metrics_positioning(style: Mapping[str, Any], metrics: Any) -> CompiledStyle:
    """Position a style from a DSL metrics block.

    ``x``/``y``/``width``/``height`` map to ``left``/``top``/``width``/``height``;
    ``position: absolute`` is added when ``x`` or ``y`` is given.
    """
    positioned = dict(style)
    block = unwrap(metrics, None)
    if not isinstance(block, Mapping):
        return positioned

    for source, target in (("x", "left"), ("y", "top"), ("width", "width"), ("height", "height")):
        value = unwrap(block.get(source), None)
        if value is not None:
            positioned[target] = to_length(value)

    if unwrap(block.get("x"), None) is not None or unwrap(block.get("y"), None) is not None:
        positioned["position"] = "absolute"
    return positioned


__all__ = [
    "CompiledStyle",
    "StyleInputError",
    "LENGTH_PROPERTIES",
    "DROPPED_PROPERTIES",
    "camelize",
    "expand_box",
    "compile_style",
    "extract_gradient",
    "apply_metrics_positioning",
]
