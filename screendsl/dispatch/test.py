"""Unit tests for the Component Dispatcher."""

import logging

import pytest

from screendsl.section import Section

from .lib import (
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


class TestRegistry:
    """Tests for the renderer registry table."""

    @pytest.mark.unit
    def test_every_kind_registered(self):
        """Every kind except UNRECOGNIZED has a handle."""
        for kind in ComponentKind:
            if kind is ComponentKind.UNRECOGNIZED:
                continue
            assert RENDERER_REGISTRY[kind.value].kind is kind

    @pytest.mark.unit
    def test_registry_is_read_only(self):
        """The registry cannot be modified at runtime."""
        with pytest.raises(TypeError):
            RENDERER_REGISTRY["new_widget"] = get_handle(ComponentKind.HEADER)

    @pytest.mark.unit
    def test_handles_are_frozen(self):
        """Handles are immutable."""
        handle = get_handle(ComponentKind.HEADER)
        with pytest.raises(AttributeError):
            handle.renderer = "Other"

    @pytest.mark.unit
    def test_shared_renderers(self):
        """Variants share their family's renderer."""
        assert RENDERER_REGISTRY["header_mobile"].renderer == "Header"
        assert RENDERER_REGISTRY["bottom_navigation_style_2"].renderer == "BottomNavigation"
        assert RENDERER_REGISTRY["tab_product_carousel"].renderer == "TabProductGrid"

    @pytest.mark.unit
    def test_handle_to_dict(self):
        """Handles convert to plain dictionaries."""
        data = get_handle(ComponentKind.SIGN_UP).to_dict()
        assert data["kind"] == "sign_up"
        assert data["category"] == "account"
        assert data["aliases"] == ["signup"]

    @pytest.mark.unit
    def test_get_handle_unrecognized(self):
        """UNRECOGNIZED has no handle."""
        with pytest.raises(KeyError, match="Available"):
            get_handle(ComponentKind.UNRECOGNIZED)

    @pytest.mark.unit
    def test_list_components(self):
        """Listing filters by category."""
        assert ComponentKind.UNRECOGNIZED not in list_components()
        assert len(list_components()) == len(ComponentKind) - 1
        account = list_components(ComponentCategory.ACCOUNT)
        assert set(account) == {
            ComponentKind.ACCOUNT_PROFILE,
            ComponentKind.ACCOUNT_MENU,
            ComponentKind.SIGN_UP,
        }


class TestNormalizeComponentName:
    """Tests for identifier normalisation."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("  Hero-Banner ", "hero_banner"),
            ("hero  banner", "hero_banner"),
            ("sign-up", "sign_up"),
            ({"const": "Product Grid"}, "product_grid"),
            (None, ""),
        ],
    )
    def test_normalize(self, value, expected):
        """Whitespace and hyphen runs become single underscores."""
        assert normalize_component_name(value) == expected


class TestResolveRenderer:
    """Tests for resolve_renderer."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "component,kind",
        [
            ("hero_banner", ComponentKind.HERO_BANNER),
            ("herobanner", ComponentKind.HERO_BANNER),
            ("hero-banner", ComponentKind.HERO_BANNER),
            ("hero banner", ComponentKind.HERO_BANNER),
            ("signup", ComponentKind.SIGN_UP),
            ("sign-up", ComponentKind.SIGN_UP),
            ("Sign_Up", ComponentKind.SIGN_UP),
            ("FAQ_NEW", ComponentKind.FAQ_NEW),
        ],
    )
    def test_aliases(self, component, kind):
        """Aliases and spellings resolve to the canonical kind."""
        assert resolve_renderer({"component": component}).kind is kind

    @pytest.mark.unit
    def test_schema_shape(self, schema_section):
        """Identifiers are read through the Value Resolver."""
        handle = resolve_renderer(schema_section)
        assert isinstance(handle, RendererHandle)
        assert handle.kind is ComponentKind.HERO_BANNER

    @pytest.mark.unit
    def test_unknown_component(self, caplog):
        """Unknown ids return None with exactly one warning."""
        with caplog.at_level(logging.DEBUG):
            assert resolve_renderer({"component": "totally_unknown_widget"}) is None
        warnings = [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert len(warnings) == 1
        assert "totally_unknown_widget" in warnings[0].getMessage()

    @pytest.mark.unit
    def test_missing_component(self, caplog):
        """Sections without a component and non-sections are unknown."""
        with caplog.at_level(logging.WARNING):
            assert resolve_renderer({}) is None
            assert resolve_renderer(None) is None
        assert len(caplog.records) == 2


class TestDeviceVariant:
    """Tests for mobile header inference."""

    @pytest.mark.unit
    def test_title_hint(self):
        """A header titled for mobile maps to header_mobile."""
        section = {"component": "header", "title": "Mobile Header"}
        assert resolve_renderer(section).kind is ComponentKind.HEADER_MOBILE

    @pytest.mark.unit
    def test_props_hint(self):
        """Hints inside props are considered, wrapped or not."""
        section = {
            "properties": {
                "component": {"const": "header"},
                "props": {"properties": {"variant": {"value": "MOBILE-compact"}}},
            }
        }
        assert component_identifier(section) == "header_mobile"

    @pytest.mark.unit
    def test_variant_extra(self):
        """A top-level variant field is considered."""
        section = Section.from_dsl({"component": "header", "variant": "mobile"})
        assert classify(section) is ComponentKind.HEADER_MOBILE

    @pytest.mark.unit
    def test_plain_header(self):
        """Headers without hints stay headers."""
        assert classify({"component": "Header", "title": "Store"}) is ComponentKind.HEADER

    @pytest.mark.unit
    def test_already_qualified(self):
        """header_mobile resolves directly."""
        assert classify({"component": "header_mobile"}) is ComponentKind.HEADER_MOBILE

    @pytest.mark.unit
    def test_other_families_ignore_hints(self):
        """Only the header family has a mobile variant."""
        section = {"component": "text_block", "title": "Mobile only text"}
        assert classify(section) is ComponentKind.TEXT_BLOCK


class TestClassify:
    """Tests for classify."""

    @pytest.mark.unit
    def test_unrecognized(self, caplog):
        """Unknown ids classify as UNRECOGNIZED without logging."""
        with caplog.at_level(logging.WARNING):
            assert classify({"component": "carousel_3d"}) is ComponentKind.UNRECOGNIZED
        assert caplog.records == []
