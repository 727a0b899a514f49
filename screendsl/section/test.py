"""Unit tests for the Section model."""

import logging

import pytest
from pydantic import ValidationError

from .lib import Section, load_sections, normalize_section


class TestFromDsl:
    """Tests for Section.from_dsl."""

    @pytest.mark.unit
    def test_flat_shape(self):
        """Flat sections map fields directly."""
        section = Section.from_dsl(
            {
                "component": "hero_banner",
                "props": {"title": "Sale"},
                "visibility": {"hideOnMobile": False},
            }
        )
        assert section.component_name == "hero_banner"
        assert section.props == {"title": "Sale"}
        assert section.visibility == {"hideOnMobile": False}

    @pytest.mark.unit
    def test_schema_shape(self, schema_section):
        """JSON-schema sections are read from the properties container."""
        section = Section.from_dsl(schema_section)
        assert section.component_name == "hero_banner"
        assert section.props == schema_section["properties"]["props"]
        assert section.visibility is None

    @pytest.mark.unit
    def test_component_id_aliases(self):
        """componentId and wrapped identifiers are accepted."""
        assert Section.from_dsl({"componentId": "countdown"}).component_name == "countdown"
        assert (
            Section.from_dsl({"component": {"const": "media_grid"}}).component_name
            == "media_grid"
        )

    @pytest.mark.unit
    def test_title_and_extras(self):
        """Titles fall back to label; unknown keys are kept as extras."""
        section = Section.from_dsl(
            {"component": "header", "label": "Mobile Header", "id": "s-1"}
        )
        assert section.title == "Mobile Header"
        assert section.model_extra == {"id": "s-1"}

    @pytest.mark.unit
    def test_missing_component(self):
        """A section without a component has an empty name."""
        assert Section.from_dsl({}).component_name == ""

    @pytest.mark.unit
    def test_section_passthrough(self):
        """Existing Section instances are returned unchanged."""
        section = Section(componentId="text_block")
        assert Section.from_dsl(section) is section

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", [None, "header", 3, ["header"]])
    def test_non_mapping_raises(self, raw):
        """Non-mapping input is a contract violation."""
        with pytest.raises(TypeError):
            Section.from_dsl(raw)

    @pytest.mark.unit
    def test_frozen(self):
        """Sections cannot be mutated after construction."""
        section = Section.from_dsl({"component": "header"})
        with pytest.raises(ValidationError):
            section.title = "changed"


class TestLoadSections:
    """Tests for load_sections."""

    @pytest.mark.unit
    def test_document_sections(self, dsl_document):
        """Sections are read in authoring order."""
        sections = load_sections(dsl_document)
        assert [s.component_name for s in sections] == [
            "hero_banner",
            "header",
            "bottom_navigation_style_1",
        ]

    @pytest.mark.unit
    def test_bare_list(self):
        """A bare list is treated as the section list."""
        assert len(load_sections([{"component": "header"}])) == 1

    @pytest.mark.unit
    def test_malformed_entries_skipped(self, caplog):
        """Non-mapping entries are skipped with a warning."""
        with caplog.at_level(logging.WARNING):
            sections = load_sections({"sections": [{"component": "header"}, "oops", None]})
        assert len(sections) == 1
        assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 2

    @pytest.mark.unit
    def test_missing_sections(self):
        """Documents without sections yield an empty list."""
        assert load_sections({}) == []
        assert load_sections({"sections": {"value": "nope"}}) == []

    @pytest.mark.unit
    def test_non_document(self, caplog):
        """Scalars yield an empty list and a warning."""
        with caplog.at_level(logging.WARNING):
            assert load_sections("sections") == []
        assert caplog.records


class TestNormalizeSection:
    """Tests for normalize_section."""

    @pytest.mark.unit
    def test_schema_shape(self, schema_section):
        """Props are fully unwrapped."""
        assert normalize_section(schema_section) == {
            "component": "hero_banner",
            "props": {
                "title": "Summer Sale",
                "layout": {"css": {"container": {"padding": "8px 16px"}}},
            },
            "visibility": None,
        }

    @pytest.mark.unit
    def test_missing_props(self):
        """Sections without props normalise to empty props."""
        assert normalize_section({"component": "countdown"}) == {
            "component": "countdown",
            "props": {},
            "visibility": None,
        }

    @pytest.mark.unit
    def test_missing_component(self):
        """A missing component normalises to None."""
        assert normalize_section({"props": {"a": 1}})["component"] is None
