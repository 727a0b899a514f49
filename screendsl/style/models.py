"""Data models for the style compiler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, Field

from screendsl.config import EnvVar, get_environment


class GradientDescriptor(BaseModel):
    """Linear gradient detected in a ``background`` value.

    Carried in the compiled style under the ``gradient`` key so that
    gradient-capable surfaces can draw it while others fall back to the
    static ``backgroundColor``.

    Attributes:
        type: Gradient kind. Only linear gradients are recognised.
        angle: Direction in degrees (0 = towards the top).
        colors: Ordered colour stops, positions stripped.
    """

    type: Literal["linear"] = Field(default="linear", description="Gradient kind")
    angle: int | float = Field(default=0, description="Direction in degrees")
    colors: list[str] = Field(
        default_factory=list,
        min_length=1,
        description="Ordered colour stops",
    )

    model_config = {"frozen": True}


@dataclass(frozen=True)
class StyleOptions:
    """Constants used while compiling styles.

    Attributes:
        base_font_size: Font size (px) used to convert ``em`` values.
        full_radius: Radius emitted for pill/circle ``borderRadius`` values.
        shadow_opacity: ``shadowOpacity`` emitted with a ``boxShadow`` colour.
    """

    base_font_size: int | float = 16
    full_radius: int = 9999
    shadow_opacity: float = 0.3

    @classmethod
    def from_environment(cls) -> StyleOptions:
        """Build options from SCREENDSL_* environment variables."""
        return cls(
            base_font_size=get_environment(EnvVar.BASE_FONT_SIZE),
            full_radius=get_environment(EnvVar.FULL_RADIUS),
            shadow_opacity=get_environment(EnvVar.SHADOW_OPACITY),
        )


DEFAULT_OPTIONS = StyleOptions()

__all__ = ["GradientDescriptor", "StyleOptions", "DEFAULT_OPTIONS"]
