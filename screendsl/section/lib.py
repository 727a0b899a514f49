"""Section model for Layout DSL documents.

Sections arrive in two shapes. The flat shape carries the fields directly::

    {"component": "hero_banner", "props": {...}, "visibility": {...}}

The JSON-schema shape nests them under ``properties``::

    {"properties": {"component": {"const": "hero_banner"},
                    "props": {"properties": {...}},
                    "visibility": {"properties": {...}}}}

`Section.from_dsl` accepts either and keeps every field as the raw SchemaValue;
renderers resolve what they need themselves.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from screendsl.core.log import get_logger
from screendsl.resolver import first_present, resolve_list, resolve_string, unwrap_tree

logger = get_logger(__name__)

COMPONENT_KEYS = ("component", "componentId", "component_id")
TITLE_KEYS = ("title", "label", "name")

_CONSUMED_KEYS = frozenset(
    COMPONENT_KEYS + TITLE_KEYS + ("props", "visibility", "properties")
)


def _field(raw: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    """Read a field from the flat shape, then from the ``properties`` container."""
    value = first_present(raw, keys)
    if value is None:
        value = first_present(raw.get("properties"), keys)
    return value


class Section(BaseModel):
    """One DSL section, as authored.

    Attributes:
        component_id: Component identifier (SchemaValue).
        props: Raw props subtree (SchemaValue).
        visibility: Visibility block (SchemaValue), if any.
        title: Human-readable title or label, if any.
    """

    component_id: Any = Field(
        default=None, alias="componentId", description="Component identifier"
    )
    props: Any = Field(default=None, description="Raw props subtree")
    visibility: Any = Field(default=None, description="Visibility block")
    title: Any = Field(default=None, description="Human-readable title")

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    @property
    def component_name(self) -> str:
        """Resolved component identifier, or an empty string."""
        return resolve_string(self.component_id, "")

    @classmethod
    def from_dsl(cls, raw: Any) -> Section:
        """Build a Section from a raw DSL mapping.

        Args:
            raw: Flat or JSON-schema shaped section. Sections pass through.

        Returns:
            New Section. Unrecognised top-level keys are kept as extras.

        Raises:
            TypeError: If ``raw`` is not a mapping.
        """
        if isinstance(raw, Section):
            return raw
        if not isinstance(raw, Mapping):
            raise TypeError(f"Section must be a mapping, got {type(raw).__name__}")

        extras = {
            key: value
            for key, value in raw.items()
            if isinstance(key, str) and key not in _CONSUMED_KEYS
        }
        return cls.model_validate(
            {
                **extras,
                "componentId": _field(raw, COMPONENT_KEYS),
                "props": _field(raw, ("props",)),
                "visibility": _field(raw, ("visibility",)),
                "title": _field(raw, TITLE_KEYS),
            }
        )


def load_sections(document: Any) -> list[Section]:
    """Read the section list of a DSL document.

    Args:
        document: Mapping with a ``sections`` list, or the list itself.

    Returns:
        Sections in authoring order. Malformed entries are skipped with a
        warning.
    """
    if isinstance(document, Mapping):
        entries = resolve_list(document.get("sections"), [])
    elif isinstance(document, list):
        entries = document
    else:
        logger.warning(f"DSL document has no section list ({type(document).__name__})")
        return []

    sections: list[Section] = []
    for index, entry in enumerate(entries):
        try:
            sections.append(Section.from_dsl(entry))
        except (TypeError, ValidationError) as e:
            logger.warning(f"Skipping malformed section #{index}: {e}")
    return sections


def normalize_section(section: Any) -> dict[str, Any]:
    """Flatten a section into plain data.

    Returns:
        ``{"component", "props", "visibility"}`` with every wrapper resolved.
        ``component`` is None when the section names no component.
    """
    section = Section.from_dsl(section)
    props = unwrap_tree(section.props)
    return {
        "component": section.component_name or None,
        "props": props if isinstance(props, dict) else {},
        "visibility": unwrap_tree(section.visibility),
    }


__all__ = [
    "COMPONENT_KEYS",
    "TITLE_KEYS",
    "Section",
    "load_sections",
    "normalize_section",
]
