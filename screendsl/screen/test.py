"""Unit tests for the screen planner."""

import logging

import pytest

from screendsl.dispatch import ComponentKind
from screendsl.section import Section, load_sections

from .lib import PlannedSection, normalize_page_name, plan_screen


def _components(*names):
    return [{"component": name} for name in names]


class TestOrdering:
    """Tests for header ordering and header_2 handling."""

    @pytest.mark.unit
    def test_headers_first(self):
        """Headers move to the top, other sections keep their order."""
        sections = _components("text_block", "header_2", "product_grid", "header")
        plan = plan_screen(sections, page_name="home")
        assert plan.components == ["header", "header_2", "text_block", "product_grid"]

    @pytest.mark.unit
    def test_header_mobile_is_primary(self):
        """header_mobile ranks with header."""
        sections = _components("countdown", "header_mobile")
        assert plan_screen(sections).components == ["header_mobile", "countdown"]

    @pytest.mark.unit
    def test_header_2_dropped_off_home(self):
        """header_2 only renders on the home page."""
        sections = _components("text_block", "header_2", "header")
        plan = plan_screen(sections, page_name=" Product ")
        assert plan.page_name == "product"
        assert plan.components == ["header", "text_block"]


class TestFallbacks:
    """Tests for fallback chrome."""

    @pytest.mark.unit
    def test_fallback_headers_prepended(self):
        """Pages without headers borrow the fallback headers, minus header_2."""
        plan = plan_screen(
            _components("text_block"),
            page_name="cart",
            fallback_headers=_components("header", "header_2"),
        )
        assert plan.components == ["header", "text_block"]

    @pytest.mark.unit
    def test_authored_headers_kept(self):
        """Fallback headers are ignored when the page has a header."""
        plan = plan_screen(
            _components("header_mobile", "text_block"),
            page_name="cart",
            fallback_headers=_components("header"),
        )
        assert plan.components == ["header_mobile", "text_block"]

    @pytest.mark.unit
    def test_fallback_bottom_nav(self):
        """A default bottom navigation fills the empty slot."""
        plan = plan_screen(
            _components("text_block"),
            fallback_bottom_nav={"component": "bottom_navigation_style_1"},
        )
        assert plan.bottom_navigation.handle.kind is ComponentKind.BOTTOM_NAVIGATION_STYLE_1
        assert plan.components == ["text_block"]

    @pytest.mark.unit
    def test_authored_bottom_nav_wins(self):
        """The fallback is not used when the page authors one."""
        plan = plan_screen(
            _components("bottom_navigation_style_2"),
            fallback_bottom_nav={"component": "bottom_navigation_style_1"},
        )
        assert plan.bottom_navigation.handle.kind is ComponentKind.BOTTOM_NAVIGATION_STYLE_2

    @pytest.mark.unit
    def test_hidden_fallback(self):
        """Fallback sections go through the visibility filter too."""
        plan = plan_screen(
            _components("text_block"),
            fallback_bottom_nav={
                "component": "bottom_navigation",
                "visibility": {"hideOnMobile": True},
            },
        )
        assert plan.bottom_navigation is None


class TestSlots:
    """Tests for chrome slots and dispatch."""

    @pytest.mark.unit
    def test_navigation_slots(self):
        """Side and bottom navigation leave the body."""
        sections = _components("side_navigation", "text_block", "bottom_navigation")
        plan = plan_screen(sections)
        assert plan.components == ["text_block"]
        assert plan.side_navigation.handle.kind is ComponentKind.SIDE_NAVIGATION
        assert plan.bottom_navigation.handle.kind is ComponentKind.BOTTOM_NAVIGATION

    @pytest.mark.unit
    def test_hidden_sections_filtered(self):
        """Sections hidden on mobile are not planned."""
        sections = [
            {"component": "countdown", "visibility": {"target": "desktop"}},
            {"component": "text_block"},
        ]
        assert plan_screen(sections).components == ["text_block"]

    @pytest.mark.unit
    def test_unknown_components_skipped(self, caplog):
        """Unknown components are counted and logged once each."""
        with caplog.at_level(logging.WARNING):
            plan = plan_screen(_components("mystery_widget", "text_block"))
        assert plan.skipped == 1
        assert plan.components == ["text_block"]
        assert len(caplog.records) == 1

    @pytest.mark.unit
    def test_body_entries(self, schema_section):
        """Body entries pair the untouched section with its handle."""
        plan = plan_screen([schema_section])
        (planned,) = plan.body
        assert isinstance(planned, PlannedSection)
        assert isinstance(planned.section, Section)
        assert planned.section.props == schema_section["properties"]["props"]
        assert planned.handle.renderer == "HeroBanner"

    @pytest.mark.unit
    def test_document_sections(self, dsl_document):
        """Loaded documents plan end to end."""
        plan = plan_screen(load_sections(dsl_document))
        assert plan.components == ["header", "hero_banner"]
        assert plan.bottom_navigation is not None

    @pytest.mark.unit
    def test_malformed_sections_skipped(self, caplog):
        """Entries that are not mappings are skipped with a warning."""
        with caplog.at_level(logging.WARNING):
            plan = plan_screen([{"component": "text_block"}, None, "header"])
        assert plan.components == ["text_block"]
        assert plan.skipped == 0
        assert "Skipping malformed section #1" in caplog.text
        assert "Skipping malformed section #2" in caplog.text

    @pytest.mark.unit
    def test_malformed_fallbacks_skipped(self, caplog):
        """Malformed fallback chrome is skipped, valid fallbacks still apply."""
        with caplog.at_level(logging.WARNING):
            plan = plan_screen(
                _components("text_block"),
                fallback_headers=[None, {"component": "header"}],
                fallback_bottom_nav="bottom_navigation",
            )
        assert plan.components == ["header", "text_block"]
        assert plan.bottom_navigation is None
        assert "fallback header #0" in caplog.text
        assert "fallback bottom navigation #0" in caplog.text


class TestHomePage:
    """Tests for home page configuration."""

    @pytest.mark.unit
    def test_defaults_to_home(self):
        """Without a page name the home page is planned."""
        plan = plan_screen(_components("header_2"))
        assert plan.page_name == "home"
        assert plan.is_home
        assert plan.components == ["header_2"]

    @pytest.mark.unit
    def test_home_page_from_environment(self, monkeypatch):
        """SCREENDSL_HOME_PAGE renames the home page."""
        monkeypatch.setenv("SCREENDSL_HOME_PAGE", "Index")
        assert plan_screen(_components("header_2")).components == ["header_2"]
        assert plan_screen(_components("header_2"), page_name="home").components == []

    @pytest.mark.unit
    def test_normalize_page_name(self):
        """Page names are trimmed and lower-cased."""
        assert normalize_page_name("  Home ") == "home"
        assert normalize_page_name(None) == ""
