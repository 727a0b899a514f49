"""Unit tests for the Visibility Resolver."""

import pytest

from screendsl.section import Section

from .lib import filter_sections, resolve_visibility, should_render


def _schema_section(visibility=None):
    properties = {"component": {"const": "text_block"}}
    if visibility is not None:
        properties["visibility"] = visibility
    return {"properties": properties}


class TestShouldRender:
    """Tests for the mobile render decision."""

    @pytest.mark.unit
    def test_no_visibility_block(self):
        """Sections without visibility configuration render."""
        assert should_render(_schema_section()) is True
        assert should_render({"component": "header"}) is True

    @pytest.mark.unit
    def test_hide_flag(self):
        """Explicit hide flags hide the section."""
        section = _schema_section({"properties": {"hideOnMobile": {"value": True}}})
        assert should_render(section) is False

    @pytest.mark.unit
    def test_show_flag(self):
        """A false show flag hides the section."""
        section = _schema_section({"properties": {"mobileVisible": {"value": False}}})
        assert should_render(section) is False

    @pytest.mark.unit
    def test_desktop_target(self):
        """Desktop-only targets are skipped."""
        assert should_render(_schema_section({"properties": {"target": "desktop"}})) is False

    @pytest.mark.unit
    def test_mobile_target(self):
        """Mobile targets render by default."""
        assert should_render(_schema_section({"properties": {"target": "mobile"}})) is True

    @pytest.mark.unit
    def test_section_model(self):
        """Section instances are accepted."""
        section = Section(componentId="header", visibility={"hide_on_mobile": "yes"})
        assert should_render(section) is False

    @pytest.mark.unit
    @pytest.mark.parametrize("section", [None, "header", 42])
    def test_non_sections_never_render(self, section):
        """Anything that is not a section is filtered out."""
        assert should_render(section) is False


class TestResolveVisibility:
    """Tests for visibility block precedence."""

    @pytest.mark.unit
    def test_hide_beats_show(self):
        """Explicit hide wins over an explicit show."""
        assert resolve_visibility({"hideOnMobile": True, "showOnMobile": True}) is False

    @pytest.mark.unit
    def test_hide_beats_mobile_target(self):
        """Explicit hide wins over a mobile target."""
        assert resolve_visibility({"mobileHidden": "1", "device": "phone"}) is False

    @pytest.mark.unit
    def test_desktop_target_beats_show(self):
        """A web target hides even when the show flag is true."""
        assert resolve_visibility({"showOnMobile": True, "platform": "Web"}) is False

    @pytest.mark.unit
    @pytest.mark.parametrize("show,expected", [(True, True), (False, False)])
    def test_mobile_target_defers_to_show(self, show, expected):
        """Mobile targets return the show flag."""
        assert resolve_visibility({"target": "mobile", "showOnMobile": show}) is expected

    @pytest.mark.unit
    def test_first_present_alias_wins(self):
        """The first present hide alias is used, None values are skipped."""
        block = {"hideOnMobile": None, "hiddenOnMobile": False, "mobileHidden": True}
        assert resolve_visibility(block) is True

    @pytest.mark.unit
    def test_unrecognised_flags_use_defaults(self):
        """Unparseable flags fall back to their defaults."""
        assert resolve_visibility({"hideOnMobile": "maybe", "mobile": "sometimes"}) is True

    @pytest.mark.unit
    def test_wrapped_target(self):
        """Targets are resolved through wrappers and lists."""
        assert resolve_visibility({"audience": {"value": "Desktop"}}) is False
        assert resolve_visibility({"for": ["mobile", "web"]}) is False
        assert resolve_visibility({"for": ["phone"]}) is True

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "block",
        [False, "no", True, 0, {"value": 0}, {"value": False}, None],
    )
    def test_scalar_block_stays_visible(self, block):
        """A block without fields never hides a section."""
        assert resolve_visibility(block) is True


class TestFilterSections:
    """Tests for filter_sections."""

    @pytest.mark.unit
    def test_keeps_order(self):
        """Visible sections keep their authoring order."""
        first = {"component": "header"}
        hidden = {"component": "countdown", "visibility": {"hideOnMobile": True}}
        last = {"component": "text_block", "visibility": {"target": "mobile"}}
        assert filter_sections([first, hidden, last]) == [first, last]

    @pytest.mark.unit
    def test_empty(self):
        """Empty input yields an empty list."""
        assert filter_sections([]) == []
