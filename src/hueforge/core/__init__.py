"""Core HUEFORGE functionality: IR, color conversion, ramps, semantic mapping, serializers."""

from . import ir
from .css_export import export_css_file, generate_full_css
from .derive import ThemeDerivation, derive_theme
from .errors import (
    GradientResolutionFailure,
    HueforgeError,
    InvalidColorFormat,
    StopLadderMismatch,
    ThemeConfigError,
)
from .figma_export import export_variables_file, generate_variables_document
from .oklch import hex_to_oklch, oklch_to_hex
from .ramps import BRAND_LADDER, NEUTRAL_LADDER, generate_ramp, generate_ramps
from .semantic import map_semantics
from .themeconfig_loader import load_themeconfig, save_themeconfig, validate_themeconfig

__all__ = [
    "ir",
    # Errors
    "HueforgeError",
    "InvalidColorFormat",
    "StopLadderMismatch",
    "GradientResolutionFailure",
    "ThemeConfigError",
    # Conversion
    "hex_to_oklch",
    "oklch_to_hex",
    # Derivation
    "BRAND_LADDER",
    "NEUTRAL_LADDER",
    "generate_ramp",
    "generate_ramps",
    "map_semantics",
    "ThemeDerivation",
    "derive_theme",
    # Serializers
    "generate_full_css",
    "export_css_file",
    "generate_variables_document",
    "export_variables_file",
    # Configuration
    "load_themeconfig",
    "save_themeconfig",
    "validate_themeconfig",
]
