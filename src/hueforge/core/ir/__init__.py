"""
HUEFORGE Internal Representation (IR).

Configuration input (ThemeConfig and its sections) and the derived,
immutable token values (Token, Ramp, SemanticBinding).
"""

from .themeconfig import (
    DEFAULT_BRAND_STOPS,
    DEFAULT_NEUTRAL_STOPS,
    GROUP_PREFIXES,
    ColorMode,
    ColorSpec,
    FontSpec,
    NeutralSpec,
    NotificationSpecs,
    ThemeConfig,
    parse_stops,
)
from .tokens import (
    GradientBinding,
    Ramp,
    RoleBinding,
    SemanticBinding,
    SemanticRole,
    SolidBinding,
    Token,
    TokenRef,
)

__all__ = [
    # Config
    "DEFAULT_BRAND_STOPS",
    "DEFAULT_NEUTRAL_STOPS",
    "GROUP_PREFIXES",
    "ColorMode",
    "ColorSpec",
    "FontSpec",
    "NeutralSpec",
    "NotificationSpecs",
    "ThemeConfig",
    "parse_stops",
    # Tokens
    "GradientBinding",
    "Ramp",
    "RoleBinding",
    "SemanticBinding",
    "SemanticRole",
    "SolidBinding",
    "Token",
    "TokenRef",
]
