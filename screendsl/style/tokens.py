"""Token-level parsing of CSS-like style values.

Shorthand values such as ``"1px solid rgba(0, 0, 0, 0.2)"`` are split at
whitespace or commas that sit outside parentheses, so colour functions
survive tokenisation intact.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from screendsl.resolver import is_number, normalize_number, parse_float

from .models import GradientDescriptor

LENGTH_UNITS = ("px", "pt", "dp")

_LENGTH = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+))(px|pt|dp)?$", re.IGNORECASE)
_COLOR = re.compile(r"^(?:#[0-9a-f]{3,8}|(?:rgba?|hsla?)\(.*\))$", re.IGNORECASE)
_LITERAL_COLOR = re.compile(r"#[0-9a-f]{3,8}|rgba?\([^)]*\)", re.IGNORECASE)

# "to <side>" gradient directions, keyed by the set of sides named.
_DIRECTION_ANGLES: dict[frozenset[str], int] = {
    frozenset({"top"}): 0,
    frozenset({"top", "right"}): 45,
    frozenset({"right"}): 90,
    frozenset({"bottom", "right"}): 135,
    frozenset({"bottom"}): 180,
    frozenset({"bottom", "left"}): 225,
    frozenset({"left"}): 270,
    frozenset({"top", "left"}): 315,
}


def _split_top_level(text: str, is_separator: Callable[[str], bool]) -> list[str]:
    tokens: list[str] = []
    buffer: list[str] = []
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")" and depth:
            depth -= 1
        if depth == 0 and is_separator(char):
            tokens.append("".join(buffer).strip())
            buffer = []
            continue
        buffer.append(char)
    tokens.append("".join(buffer).strip())
    return [token for token in tokens if token]


def split_tokens(text: str) -> list[str]:
    """Split on whitespace outside parentheses.

    Example:
        >>> split_tokens("1px solid rgba(0, 0, 0, 0.2)")
        ['1px', 'solid', 'rgba(0, 0, 0, 0.2)']
    """
    return _split_top_level(str(text), str.isspace)


def split_commas(text: str) -> list[str]:
    """Split on commas outside parentheses, trimming each part."""
    return _split_top_level(str(text), lambda char: char == ",")


def parse_length(token: str) -> int | float | None:
    """Parse a bare or unit-suffixed length token, or None."""
    match = _LENGTH.match(token.strip())
    if match is None:
        return None
    return normalize_number(float(match.group(1)))


def has_unit(token: str) -> bool:
    """Check whether a token is a number carrying a length unit suffix."""
    match = _LENGTH.match(token.strip())
    return match is not None and match.group(2) is not None


def to_length(value: Any) -> Any:
    """Convert a length value into a plain number where possible.

    Numbers pass through, ``"12px"`` and ``"12"`` become 12, anything else
    (``"auto"``, ``"50%"``) is returned unchanged.
    """
    if is_number(value):
        return value
    if isinstance(value, str):
        parsed = parse_length(value)
        if parsed is not None:
            return parsed
    return value


def is_color_token(token: str) -> bool:
    """Check for a hex, rgb(a) or hsl(a) colour literal."""
    return bool(_COLOR.match(token.strip()))


def first_color(text: str) -> str | None:
    """Find the first literal hex or rgb(a) colour inside a string."""
    match = _LITERAL_COLOR.search(text)
    return match.group(0) if match else None


def _call_arguments(text: str, name: str) -> str | None:
    """Return the argument text of ``name(...)``, honouring nested parens."""
    start = text.lower().find(f"{name}(")
    if start < 0:
        return None
    begin = start + len(name) + 1
    depth = 1
    for index in range(begin, len(text)):
        char = text[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return text[begin:index]
    return None


def _direction_angle(token: str) -> int | float | None:
    lowered = token.strip().lower()
    if lowered.endswith("deg"):
        angle = parse_float(lowered)
        return 0 if angle is None else normalize_number(angle)
    if lowered.startswith("to "):
        sides = frozenset(lowered[3:].split())
        return _DIRECTION_ANGLES.get(sides, 180)
    return None


def parse_gradient(text: str) -> GradientDescriptor | None:
    """Parse a ``linear-gradient(...)`` value.

    Args:
        text: Background value containing the gradient call.

    Returns:
        GradientDescriptor, or None when the call is unbalanced or empty.

    Example:
        >>> parse_gradient("linear-gradient(90deg, #111111, #222222)").colors
        ['#111111', '#222222']
    """
    arguments = _call_arguments(text, "linear-gradient")
    if arguments is None:
        return None

    parts = split_commas(arguments)
    if not parts:
        return None

    angle = _direction_angle(parts[0])
    if angle is None:
        angle = 0
    else:
        parts = parts[1:]

    # Drop colour-stop positions such as "#fff 40%"
    colors = [split_tokens(part)[0] for part in parts if split_tokens(part)]
    if not colors:
        return None
    return GradientDescriptor(angle=angle, colors=colors)


__all__ = [
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
