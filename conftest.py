"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Isolation from SCREENDSL_* variables set in the developer's shell
- Shared DSL section fixtures
"""

from __future__ import annotations

from typing import Any

import pytest
from dotenv import load_dotenv

from screendsl.config import EnvVar

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test against the built-in configuration defaults."""
    for var in EnvVar:
        monkeypatch.delenv(var.value.name, raising=False)


# =============================================================================
# Common Test Fixtures
# =============================================================================


@pytest.fixture
def schema_section() -> dict[str, Any]:
    """Create a JSON-schema shaped hero banner section.

    Returns:
        Section whose component, props and nested css are all wrapped.
    """
    return {
        "type": "object",
        "properties": {
            "component": {"type": "string", "const": "hero_banner"},
            "props": {
                "type": "object",
                "properties": {
                    "title": {"value": "Summer Sale"},
                    "layout": {
                        "properties": {
                            "css": {
                                "properties": {
                                    "container": {"value": {"padding": "8px 16px"}}
                                }
                            }
                        }
                    },
                },
            },
        },
    }


@pytest.fixture
def dsl_document(schema_section: dict[str, Any]) -> dict[str, Any]:
    """Create a small page document mixing both section shapes.

    Returns:
        Document with a hero banner, a header and a bottom navigation.
    """
    return {
        "page": "home",
        "sections": [
            schema_section,
            {"component": "header", "title": "Top Header"},
            {"properties": {"component": {"const": "bottom_navigation_style_1"}}},
        ],
    }
