"""
Fail-soft editing helpers for ThemeConfig.

Editing sessions make many small changes (a new seed color, retyped stops)
that should never leave the configuration in an invalid state. Each helper
returns a new frozen model; inputs are never mutated.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from .errors import HueforgeError, ThemeConfigError
from .ir import ColorSpec, NeutralSpec, ThemeConfig, parse_stops
from .oklch import hex_to_oklch

logger = logging.getLogger(__name__)

# ThemeConfig field holding each group prefix (notifications are nested).
_GROUP_FIELDS: dict[str, tuple[str, ...]] = {
    "p1": ("primary1",),
    "p2": ("primary2",),
    "accent": ("accent",),
    "neutral": ("neutral",),
    "success": ("notifications", "success"),
    "warning": ("notifications", "warning"),
    "danger": ("notifications", "danger"),
}


def apply_seed(spec: ColorSpec, seed_hex: str) -> ColorSpec:
    """Re-derive hue and chroma from a new seed color.

    Hue is rounded to whole degrees (0 for achromatic seeds) and chroma to
    three decimals. An invalid seed is logged and *spec* is returned as is.
    """
    try:
        _l, chroma, hue = hex_to_oklch(seed_hex)
    except HueforgeError as e:
        logger.warning(f"Ignoring seed {seed_hex!r}: {e}")
        return spec

    return spec.model_copy(
        update={
            "seed_hex": seed_hex.strip(),
            "hue": float(round(hue) % 360) if hue is not None else 0.0,
            "chroma": round(chroma, 3),
        }
    )


def set_stops(spec: ColorSpec | NeutralSpec, text: str) -> ColorSpec | NeutralSpec:
    """Replace a group's stops from comma-separated text.

    Raises:
        ThemeConfigError: If *text* is not a list of lightness values in [0, 1].
    """
    try:
        return type(spec).model_validate({**spec.model_dump(), "stops": parse_stops(text)})
    except (ValueError, ValidationError) as e:
        raise ThemeConfigError(f"Invalid stops {text!r}: {e}") from e


def update_group(
    config: ThemeConfig,
    prefix: str,
    spec: ColorSpec | NeutralSpec,
) -> ThemeConfig:
    """Return a copy of *config* with the group *prefix* replaced by *spec*.

    Raises:
        ThemeConfigError: If *prefix* is unknown or *spec* has the wrong type.
    """
    path = _GROUP_FIELDS.get(prefix)
    if path is None:
        raise ThemeConfigError(f"Unknown color group: {prefix}")

    expected = NeutralSpec if prefix == "neutral" else ColorSpec
    if not isinstance(spec, expected):
        raise ThemeConfigError(
            f"Group {prefix} expects {expected.__name__}, got {type(spec).__name__}"
        )

    if len(path) == 1:
        return config.model_copy(update={path[0]: spec})

    section, name = path
    nested = getattr(config, section).model_copy(update={name: spec})
    return config.model_copy(update={section: nested})
