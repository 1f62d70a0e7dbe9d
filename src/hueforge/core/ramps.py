"""
Lightness ramp generation.

Turns a color group (hue, chroma, ordered lightness stops) plus a naming
ladder into an ordered Ramp of named tokens. Each stop becomes one token;
the ladder supplies its weight suffix.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .errors import HueforgeError, StopLadderMismatch
from .ir import ColorSpec, NeutralSpec, Ramp, ThemeConfig, Token
from .oklch import oklch_to_hex

logger = logging.getLogger(__name__)

# Weight suffixes for brand, accent and notification groups.
BRAND_LADDER: tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)

# Weight suffixes for the neutral group.
NEUTRAL_LADDER: tuple[int, ...] = (25, 50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)


def ladder_for(prefix: str) -> tuple[int, ...]:
    """Get the naming ladder for a color group prefix."""
    return NEUTRAL_LADDER if prefix == "neutral" else BRAND_LADDER


def generate_ramp(
    prefix: str,
    spec: ColorSpec | NeutralSpec,
    ladder: Sequence[int] | None = None,
) -> Ramp:
    """Generate the ramp for one color group.

    Args:
        prefix: Token prefix, e.g. "p1" -> "--p1-50".
        spec: Color group providing hue, chroma and stops.
        ladder: Weight suffixes; defaults to the ladder for *prefix*.

    Returns:
        Ramp with one token per stop, in stop order.

    Raises:
        StopLadderMismatch: If the stop count differs from the ladder length.
    """
    weights = tuple(ladder) if ladder is not None else ladder_for(prefix)
    if len(spec.stops) != len(weights):
        raise StopLadderMismatch(prefix, spec.stops, weights)

    tokens = tuple(
        Token(
            name=f"--{prefix}-{weight}",
            group=prefix,
            weight=weight,
            hex=oklch_to_hex(lightness, spec.chroma, spec.hue),
            l=lightness,
            c=spec.chroma,
            h=spec.hue,
        )
        for weight, lightness in zip(weights, spec.stops, strict=True)
    )
    return Ramp(prefix=prefix, tokens=tokens)


@dataclass(frozen=True)
class RampSet:
    """Ramps for every color group of a ThemeConfig, in derivation order.

    Groups that failed to generate are absent from ``ramps`` and reported
    in ``errors``; the remaining groups are unaffected.
    """

    ramps: tuple[Ramp, ...] = ()
    errors: tuple[HueforgeError, ...] = ()

    def __getitem__(self, prefix: str) -> Ramp:
        for ramp in self.ramps:
            if ramp.prefix == prefix:
                return ramp
        raise KeyError(prefix)

    def __contains__(self, prefix: object) -> bool:
        return any(ramp.prefix == prefix for ramp in self.ramps)

    def get(self, prefix: str) -> Ramp | None:
        return self[prefix] if prefix in self else None

    @property
    def prefixes(self) -> tuple[str, ...]:
        return tuple(ramp.prefix for ramp in self.ramps)

    @property
    def is_complete(self) -> bool:
        return not self.errors

    def tokens(self) -> list[Token]:
        """All tokens across groups, in group then stop order."""
        return [token for ramp in self.ramps for token in ramp.tokens]


def generate_ramps(config: ThemeConfig) -> RampSet:
    """Generate ramps for all color groups in derivation order."""
    ramps: list[Ramp] = []
    errors: list[HueforgeError] = []

    for prefix, spec in config.color_groups():
        try:
            ramps.append(generate_ramp(prefix, spec))
        except StopLadderMismatch as e:
            logger.debug(f"Skipping ramp {prefix}: {e}")
            errors.append(e)

    return RampSet(ramps=tuple(ramps), errors=tuple(errors))
