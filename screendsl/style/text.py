"""Text attribute and colour helpers shared by text-bearing renderers."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, TypeVar

from screendsl.resolver import (
    normalize_number,
    resolve_bool,
    resolve_number,
    unwrap,
)

T = TypeVar("T")

# Named weights mapped to their numeric CSS equivalents
FONT_WEIGHTS: dict[str, str] = {
    "thin": "100",
    "hairline": "100",
    "extralight": "200",
    "extra light": "200",
    "ultralight": "200",
    "light": "300",
    "regular": "400",
    "normal": "400",
    "medium": "500",
    "semibold": "600",
    "semi bold": "600",
    "demibold": "600",
    "bold": "700",
    "extrabold": "800",
    "extra bold": "800",
    "ultrabold": "800",
    "black": "900",
    "heavy": "900",
}

_HEX = re.compile(r"^#(?:[0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)


def resolve_font_weight(value: Any, fallback: T = "400") -> str | T:
    """Resolve a font weight into a numeric weight string.

    Example:
        >>> resolve_font_weight("SemiBold")
        '600'
        >>> resolve_font_weight(700)
        '700'
    """
    resolved = unwrap(value, None)
    if isinstance(resolved, bool) or resolved is None:
        return fallback
    if isinstance(resolved, (int, float)):
        return str(normalize_number(float(resolved)))

    raw = str(resolved).strip().lower()
    if raw.isdigit():
        return raw
    return FONT_WEIGHTS.get(raw, fallback)


def with_color_opacity(color: Any, percent: Any = 100) -> Any:
    """Apply an opacity percentage to a 3 or 6 digit hex colour.

    Other colour formats are returned unchanged.

    Args:
        color: Colour value, typically ``"#RRGGBB"``.
        percent: Opacity from 0 to 100; clamped.

    Returns:
        ``"rgba(r, g, b, a)"`` for hex input, else ``color`` itself.
    """
    if not isinstance(color, str) or not _HEX.match(color.strip()):
        return color

    opacity = resolve_number(percent, 100)
    alpha = normalize_number(max(0.0, min(1.0, opacity / 100)))

    digits = color.strip()[1:]
    if len(digits) == 3:
        digits = "".join(char * 2 for char in digits)
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    return f"rgba({r}, {g}, {b}, {alpha})"


def build_text_style(attributes: Any) -> dict[str, Any] | None:
    """Build a text style from a DSL text attribute block.

    The block carries ``color``, ``fontFamily``, ``size``, ``weight`` and the
    boolean flags ``bold``, ``italic`` and ``underline``; every entry may be
    schema-wrapped. ``bold`` wins over ``weight``. Unset attributes are left
    out of the result.

    Returns:
        Style dict, or None when ``attributes`` is not a mapping.
    """
    block = unwrap(attributes, None)
    if not isinstance(block, Mapping):
        return None

    weight = (
        "700"
        if resolve_bool(block.get("bold"), False)
        else resolve_font_weight(block.get("weight"), None)
    )
    style = {
        "color": unwrap(block.get("color"), None),
        "fontFamily": unwrap(block.get("fontFamily"), None),
        "fontSize": resolve_number(block.get("size"), None),
        "fontWeight": weight,
        "fontStyle": "italic" if resolve_bool(block.get("italic"), False) else "normal",
        "textDecorationLine": (
            "underline" if resolve_bool(block.get("underline"), False) else "none"
        ),
    }
    return {key: value for key, value in style.items() if value is not None}


__all__ = [
    "FONT_WEIGHTS",
    "resolve_font_weight",
    "with_color_opacity",
    "build_text_style",
]
