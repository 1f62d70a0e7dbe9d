"""
ThemeConfig IR types for declarative design-system configuration.

Defines the structure of themeconfig.yaml: two primary brand colors, an
accent, a neutral scale, three notification colors and a font pairing.
A ThemeConfig is the sole input to token derivation.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class ColorMode(StrEnum):
    """Theme mode a semantic binding applies to."""

    LIGHT = "light"
    DARK = "dark"


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_BRAND_STOPS: tuple[float, ...] = (0.98, 0.95, 0.9, 0.8, 0.7, 0.6, 0.5, 0.4, 0.3, 0.2)

DEFAULT_NEUTRAL_STOPS: tuple[float, ...] = (
    0.99,
    0.98,
    0.95,
    0.9,
    0.8,
    0.7,
    0.6,
    0.5,
    0.4,
    0.3,
    0.2,
    0.1,
)


def parse_stops(value: Any) -> Any:
    """Accept stops as a sequence or as comma-separated text ("0.98, 0.95, ...")."""
    if isinstance(value, str):
        parts = [part.strip() for part in value.split(",")]
        return tuple(float(part) for part in parts if part)
    if isinstance(value, list):
        return tuple(value)
    return value


def _check_stop_range(value: tuple[float, ...]) -> tuple[float, ...]:
    for stop in value:
        if not 0.0 <= stop <= 1.0:
            raise ValueError(f"lightness stop {stop} outside [0, 1]")
    return value


Stops = Annotated[
    tuple[float, ...],
    BeforeValidator(parse_stops),
    AfterValidator(_check_stop_range),
]


# =============================================================================
# Color groups
# =============================================================================


class ColorSpec(BaseModel):
    """Brand-like or notification color group driven by hue, chroma and stops."""

    model_config = ConfigDict(frozen=True)

    seed_hex: str = Field(default="#7B458F", description="Seed color the hue/chroma came from")
    hue: float = Field(default=320.0, ge=0.0, lt=360.0, description="OKLCH hue (0-360)")
    chroma: float = Field(default=0.15, ge=0.0, description="OKLCH chroma (>= 0)")
    stops: Stops = Field(
        default=DEFAULT_BRAND_STOPS,
        description="Ordered lightness stops, one per ladder weight",
    )
    use_gradient: bool = Field(default=False, description="Render the brand role as a gradient")
    gradient_end_seed_hex: str | None = Field(
        default=None, description="Seed color for the gradient end"
    )


class NeutralSpec(BaseModel):
    """Neutral color group (no seed, no gradient, 12-step ladder)."""

    model_config = ConfigDict(frozen=True)

    hue: float = Field(default=240.0, ge=0.0, lt=360.0, description="OKLCH hue (0-360)")
    chroma: float = Field(default=0.02, ge=0.0, description="OKLCH chroma (>= 0)")
    stops: Stops = Field(
        default=DEFAULT_NEUTRAL_STOPS,
        description="Ordered lightness stops, one per ladder weight",
    )


class NotificationSpecs(BaseModel):
    """Success, warning and danger color groups."""

    model_config = ConfigDict(frozen=True)

    success: ColorSpec = Field(
        default_factory=lambda: ColorSpec(seed_hex="#CBDB2A", hue=107.0, chroma=0.18)
    )
    warning: ColorSpec = Field(
        default_factory=lambda: ColorSpec(seed_hex="#F37327", hue=36.0, chroma=0.19)
    )
    danger: ColorSpec = Field(
        default_factory=lambda: ColorSpec(seed_hex="#EF426F", hue=2.0, chroma=0.18)
    )


# =============================================================================
# Typography
# =============================================================================


class FontSpec(BaseModel):
    """Font family names. Opaque strings; not validated."""

    model_config = ConfigDict(frozen=True)

    body_font_name: str = Field(default="Open Sans", description="Body/base font family")
    heading_font_name: str = Field(default="Montserrat", description="Heading font family")


# =============================================================================
# Root Model
# =============================================================================

# Group prefixes in derivation and serialization order.
GROUP_PREFIXES: tuple[str, ...] = (
    "p1",
    "p2",
    "accent",
    "neutral",
    "success",
    "warning",
    "danger",
)


class ThemeConfig(BaseModel):
    """Root theme configuration; the sole input to token derivation."""

    model_config = ConfigDict(frozen=True)

    primary1: ColorSpec = Field(
        default_factory=lambda: ColorSpec(
            seed_hex="#7B458F",
            hue=320.0,
            chroma=0.15,
            gradient_end_seed_hex="#2A7BDB",
        ),
        description="Primary brand color (p1)",
    )
    primary2: ColorSpec = Field(
        default_factory=lambda: ColorSpec(seed_hex="#004780", hue=230.0, chroma=0.2),
        description="Secondary brand color (p2)",
    )
    accent: ColorSpec = Field(
        default_factory=lambda: ColorSpec(seed_hex="#CBDB2A", hue=107.0, chroma=0.12),
        description="Accent color",
    )
    neutral: NeutralSpec = Field(default_factory=NeutralSpec, description="Neutral scale")
    notifications: NotificationSpecs = Field(
        default_factory=NotificationSpecs,
        description="Success, warning and danger colors",
    )
    fonts: FontSpec = Field(default_factory=FontSpec, description="Font pairing")

    def group(self, prefix: str) -> ColorSpec | NeutralSpec:
        """Get a color group by its token prefix (e.g. 'p1', 'neutral', 'danger')."""
        groups = dict(self.color_groups())
        if prefix not in groups:
            raise KeyError(f"Unknown color group: {prefix}")
        return groups[prefix]

    def color_groups(self) -> Iterator[tuple[str, ColorSpec | NeutralSpec]]:
        """Yield (prefix, spec) pairs in derivation order."""
        yield "p1", self.primary1
        yield "p2", self.primary2
        yield "accent", self.accent
        yield "neutral", self.neutral
        yield "success", self.notifications.success
        yield "warning", self.notifications.warning
        yield "danger", self.notifications.danger
