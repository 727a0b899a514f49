"""Visibility Resolver: decides whether a section renders on mobile.

Precedence, first match wins:
    1. No visibility block: render.
    2. Any hide-on-mobile flag resolving true: hide. Explicit hide flags are
       never overridden by a default-true show flag.
    3. A desktop/web device target: hide.
    4. Otherwise the show-on-mobile flag (default true) decides, whether or
       not a mobile/phone target is present.

Each flag has several historical spellings; the first one present is used.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from screendsl.core.log import get_logger
from screendsl.resolver import first_present, resolve_bool, stringify, unwrap
from screendsl.section import Section

logger = get_logger(__name__)

HIDE_KEYS = (
    "hideOnMobile",
    "hiddenOnMobile",
    "hide_on_mobile",
    "isMobileHidden",
    "mobileHidden",
)
SHOW_KEYS = (
    "showOnMobile",
    "show_in_mobile",
    "visibleOnMobile",
    "mobileVisible",
    "mobile",
    "isMobileVisible",
)
TARGET_KEYS = ("target", "device", "platform", "for", "audience")

DESKTOP_TARGETS = ("desktop", "web")


def _target_text(value: Any) -> str:
    resolved = unwrap(value, None)
    if isinstance(resolved, list):
        parts = (stringify(unwrap(item, None)) for item in resolved)
        return ",".join(part for part in parts if part).lower()
    return (stringify(resolved) or "").lower()


def resolve_visibility(block: Any) -> bool:
    """Decide mobile visibility from a visibility block alone.

    Args:
        block: Visibility SchemaValue. Only a mapping can hide a section;
            a missing or scalar block leaves it visible.

    Returns:
        True when the section should render on mobile.
    """
    resolved = unwrap(block, None)
    if not isinstance(resolved, Mapping):
        return True

    if resolve_bool(first_present(resolved, HIDE_KEYS), False):
        return False

    show = resolve_bool(first_present(resolved, SHOW_KEYS), True)

    target = _target_text(first_present(resolved, TARGET_KEYS))
    if any(name in target for name in DESKTOP_TARGETS):
        return False
    # mobile/phone targets defer to the show flag, as does no target
    return show


def should_render(section: Any) -> bool:
    """Decide whether a section renders on mobile.

    Args:
        section: Section or raw DSL mapping. Anything else never renders.
    """
    if not isinstance(section, (Section, Mapping)):
        return False
    return resolve_visibility(Section.from_dsl(section).visibility)


def filter_sections(sections: Iterable[Any]) -> list[Any]:
    """Keep the sections that render on mobile, in their original order."""
    visible = []
    for section in sections:
        if should_render(section):
            visible.append(section)
        else:
            logger.debug(f"Hiding section on mobile: {section!r:.80}")
    return visible


__all__ = [
    "HIDE_KEYS",
    "SHOW_KEYS",
    "TARGET_KEYS",
    "resolve_visibility",
    "should_render",
    "filter_sections",
]
