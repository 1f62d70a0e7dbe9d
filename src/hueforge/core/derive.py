"""
Theme derivation pipeline.

ThemeConfig -> ramps -> semantic bindings, collected into one immutable
ThemeDerivation that both serializers consume.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import HueforgeError
from .ir import ColorMode, SemanticBinding, ThemeConfig
from .ramps import RampSet, generate_ramps
from .semantic import map_semantics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThemeDerivation:
    """Everything derived from one ThemeConfig.

    Attributes:
        config: The input configuration.
        ramps: Ramps per color group (failed groups omitted).
        bindings: Semantic bindings, one per theme mode, light first.
        errors: Configuration errors that prevented a group's ramp.
        warnings: Recovered conditions, e.g. a gradient falling back to solid.
    """

    config: ThemeConfig
    ramps: RampSet
    bindings: tuple[SemanticBinding, ...]
    errors: tuple[HueforgeError, ...] = ()
    warnings: tuple[HueforgeError, ...] = ()

    @property
    def is_complete(self) -> bool:
        return not self.errors

    def binding_for_mode(self, mode: ColorMode) -> SemanticBinding:
        """Get the semantic bindings for one theme mode.

        Raises:
            KeyError: If no bindings were derived for *mode*.
        """
        for binding in self.bindings:
            if binding.mode == mode:
                return binding
        raise KeyError(f"No semantic bindings for mode: {mode}")

    @property
    def light(self) -> SemanticBinding:
        return self.binding_for_mode(ColorMode.LIGHT)

    @property
    def dark(self) -> SemanticBinding:
        return self.binding_for_mode(ColorMode.DARK)

    def __repr__(self) -> str:
        return (
            f"ThemeDerivation(groups={len(self.ramps.ramps)}, "
            f"errors={len(self.errors)}, warnings={len(self.warnings)})"
        )


def derive_theme(config: ThemeConfig) -> ThemeDerivation:
    """Derive all tokens and semantic bindings for a configuration.

    Never raises for configuration problems: a group whose ramp cannot be
    generated is reported in ``errors`` and the other groups are still
    derived.
    """
    ramps = generate_ramps(config)
    warnings: list[HueforgeError] = []
    bindings = map_semantics(config, ramps, warnings)

    if ramps.errors:
        logger.warning(
            f"Derived {len(ramps.ramps)} of {len(ramps.ramps) + len(ramps.errors)} color groups"
        )

    return ThemeDerivation(
        config=config,
        ramps=ramps,
        bindings=tuple(bindings.values()),
        errors=ramps.errors,
        warnings=tuple(warnings),
    )
