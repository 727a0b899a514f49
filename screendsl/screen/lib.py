"""Screen planner: one render pass over a page's section list.

Given the sections of a page, the planner decides what the screen actually
draws and in which slot:

- fallback chrome is merged in (home page headers on pages that author no
  header, a default bottom navigation when none is authored),
- sections hidden on mobile are filtered out,
- ``header_2`` is only kept on the home page,
- headers are moved to the top,
- side and bottom navigation are pulled out of the scrolling body,
- every body section is dispatched, and unknown components are skipped.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from screendsl.config import EnvVar, get_environment
from screendsl.core.log import get_logger
from screendsl.dispatch import RendererHandle, component_identifier, resolve_renderer
from screendsl.section import Section
from screendsl.visibility import filter_sections

logger = get_logger(__name__)

PRIMARY_HEADERS = frozenset({"header", "header_mobile"})
SECONDARY_HEADER = "header_2"
HEADER_COMPONENTS = PRIMARY_HEADERS | {SECONDARY_HEADER}
SIDE_NAVIGATION = "side_navigation"
BOTTOM_NAVIGATION = frozenset(
    {"bottom_navigation", "bottom_navigation_style_1", "bottom_navigation_style_2"}
)


@dataclass(frozen=True)
class PlannedSection:
    """A body section paired with the renderer that draws it."""

    section: Section
    handle: RendererHandle


@dataclass
class ScreenPlan:
    """Result of planning a screen.

    Attributes:
        page_name: Normalised page name the plan was built for.
        body: Scrolling body sections in render order.
        side_navigation: Side menu section, if any.
        bottom_navigation: Bottom tab bar section, if any.
        skipped: Number of body sections without a renderer.
    """

    page_name: str
    body: list[PlannedSection] = field(default_factory=list)
    side_navigation: PlannedSection | None = None
    bottom_navigation: PlannedSection | None = None
    skipped: int = 0

    @property
    def is_home(self) -> bool:
        """Whether the plan was built for the home page."""
        return self.page_name == normalize_page_name(get_environment(EnvVar.HOME_PAGE))

    @property
    def components(self) -> list[str]:
        """Kinds of the body sections, in render order."""
        return [planned.handle.kind.value for planned in self.body]


def normalize_page_name(page_name: Any) -> str:
    """Trim and lower-case a page name (None becomes empty)."""
    return "" if page_name is None else str(page_name).strip().lower()


def _header_rank(identifier: str) -> int:
    if identifier in PRIMARY_HEADERS:
        return 0
    if identifier == SECONDARY_HEADER:
        return 1
    return 2


def _read_sections(entries: Iterable[Any], source: str) -> list[Section]:
    sections: list[Section] = []
    for index, entry in enumerate(entries):
        try:
            sections.append(Section.from_dsl(entry))
        except (TypeError, ValidationError) as e:
            logger.warning(f"Skipping malformed {source} #{index}: {e}")
    return sections


def _with_fallbacks(
    sections: list[Section],
    fallback_headers: Iterable[Any],
    fallback_bottom_nav: Any,
) -> list[Section]:
    identifiers = [component_identifier(section) for section in sections]

    if not any(name in HEADER_COMPONENTS for name in identifiers):
        headers = [
            section
            for section in _read_sections(fallback_headers, "fallback header")
            if component_identifier(section) != SECONDARY_HEADER
        ]
        sections = headers + sections

    if fallback_bottom_nav is not None and not any(
        name in BOTTOM_NAVIGATION for name in identifiers
    ):
        sections = sections + _read_sections(
            [fallback_bottom_nav], "fallback bottom navigation"
        )

    return sections


def _dispatch(section: Section, plan: ScreenPlan) -> PlannedSection | None:
    handle = resolve_renderer(section)
    if handle is None:
        plan.skipped += 1
        return None
    return PlannedSection(section=section, handle=handle)


def plan_screen(
    sections: Sequence[Any],
    *,
    page_name: str | None = None,
    fallback_headers: Iterable[Any] = (),
    fallback_bottom_nav: Any = None,
) -> ScreenPlan:
    """Plan one render pass over a page.

    Args:
        sections: Sections or raw DSL mappings, in authoring order.
        page_name: Page being rendered. Defaults to the home page
            (SCREENDSL_HOME_PAGE).
        fallback_headers: Header sections to use when the page has none,
            normally the home page headers. ``header_2`` entries are ignored.
        fallback_bottom_nav: Bottom navigation section to use when the page
            has none.

    Returns:
        ScreenPlan with the body in render order and chrome slots filled.
        Entries that are not sections are skipped with a warning.
    """
    home = normalize_page_name(get_environment(EnvVar.HOME_PAGE))
    page = normalize_page_name(page_name) or home
    plan = ScreenPlan(page_name=page)

    candidates = _with_fallbacks(
        _read_sections(sections, "section"),
        fallback_headers,
        fallback_bottom_nav,
    )
    visible: list[Section] = filter_sections(candidates)

    if page != home:
        visible = [s for s in visible if component_identifier(s) != SECONDARY_HEADER]

    # sorted() is stable, so authoring order survives within each rank
    ordered = sorted(visible, key=lambda s: _header_rank(component_identifier(s)))

    for section in ordered:
        identifier = component_identifier(section)
        if identifier == SIDE_NAVIGATION:
            if plan.side_navigation is None:
                plan.side_navigation = _dispatch(section, plan)
            continue
        if identifier in BOTTOM_NAVIGATION:
            if plan.bottom_navigation is None:
                plan.bottom_navigation = _dispatch(section, plan)
            continue

        planned = _dispatch(section, plan)
        if planned is not None:
            plan.body.append(planned)

    logger.debug(
        f"Planned page {page!r}: {len(plan.body)} body sections, {plan.skipped} skipped"
    )
    return plan


__all__ = [
    "PlannedSection",
    "ScreenPlan",
    "normalize_page_name",
    "plan_screen",
]
