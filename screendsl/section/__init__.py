"""Section model - typed view of a DSL section in either authoring shape.

Example usage:
    >>> from screendsl.section import Section
    >>> Section.from_dsl({"properties": {"component": {"const": "countdown"}}}).component_name
    'countdown'
"""

from .lib import (
    COMPONENT_KEYS,
    TITLE_KEYS,
    Section,
    load_sections,
    normalize_section,
)

__all__ = [
    "COMPONENT_KEYS",
    "TITLE_KEYS",
    "Section",
    "load_sections",
    "normalize_section",
]
