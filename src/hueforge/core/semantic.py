"""
Semantic role mapping.

Binds design roles (surfaces, text, brand, borders, notifications) to
primitive ramp tokens for each theme mode. The table is constant; the one
dynamic case is the gradient primary brand.
"""

from __future__ import annotations

import logging

from .errors import GradientResolutionFailure, HueforgeError
from .ir import (
    ColorMode,
    ColorSpec,
    GradientBinding,
    Ramp,
    SemanticBinding,
    SemanticRole,
    SolidBinding,
    ThemeConfig,
    TokenRef,
)
from .oklch import hex_to_oklch, oklch_to_hex
from .ramps import RampSet

logger = logging.getLogger(__name__)

GRADIENT_ANGLE = 45

# role group, role name, light (group, weight), dark (group, weight)
_ROLE_TABLE: tuple[tuple[str, str, tuple[str, int], tuple[str, int]], ...] = (
    ("surface", "1", ("neutral", 50), ("neutral", 900)),
    ("surface", "2", ("neutral", 100), ("neutral", 800)),
    ("surface", "3", ("neutral", 200), ("neutral", 700)),
    ("text", "0", ("neutral", 950), ("neutral", 25)),
    ("text", "1", ("neutral", 900), ("neutral", 50)),
    ("text", "2", ("neutral", 700), ("neutral", 300)),
    ("text", "on-primary", ("neutral", 50), ("neutral", 950)),
    ("text", "on-secondary", ("neutral", 50), ("neutral", 950)),
    ("brand", "primary", ("p1", 600), ("p1", 500)),
    ("brand", "secondary", ("p2", 600), ("p2", 500)),
    ("brand", "accent", ("accent", 500), ("accent", 400)),
    ("border", "1", ("neutral", 300), ("neutral", 700)),
    ("notification", "success", ("success", 600), ("success", 500)),
    ("notification", "warning", ("warning", 600), ("warning", 500)),
    ("notification", "danger", ("danger", 600), ("danger", 500)),
)

SEMANTIC_ROLES: tuple[SemanticRole, ...] = tuple(
    SemanticRole(group=group, name=name) for group, name, _light, _dark in _ROLE_TABLE
)

PRIMARY_BRAND_ROLE = "brand-primary"
PRIMARY_GROUP = "p1"


def solid_reference(role_key: str, mode: ColorMode) -> TokenRef:
    """Look up the fixed primitive token a role binds to in *mode*.

    Raises:
        KeyError: If *role_key* is not a known role.
    """
    for group, name, light, dark in _ROLE_TABLE:
        if f"{group}-{name}" == role_key:
            ref_group, weight = light if mode == ColorMode.LIGHT else dark
            return TokenRef(group=ref_group, weight=weight)
    raise KeyError(f"Unknown semantic role: {role_key}")


def _gradient_binding(spec: ColorSpec, start: TokenRef, ramp: Ramp | None) -> GradientBinding:
    """Build the gradient for the primary brand starting at *start*.

    The end color takes the gradient end seed's chroma and hue at the
    lightness of the start token.

    Raises:
        GradientResolutionFailure: If the end seed or the start token is unusable.
    """
    try:
        _l, end_chroma, end_hue = hex_to_oklch(spec.gradient_end_seed_hex or "")
    except HueforgeError as e:
        raise GradientResolutionFailure(f"gradient end seed unusable: {e}") from e

    if ramp is None:
        raise GradientResolutionFailure(f"no {start.group} ramp to start the gradient from")
    try:
        lightness = ramp.token_for(start.weight).l
    except KeyError as e:
        raise GradientResolutionFailure(
            f"no token {start.css_var} in the {ramp.prefix} ramp"
        ) from e

    end_hex = oklch_to_hex(lightness, end_chroma, end_hue or 0.0)
    return GradientBinding(start=start, end_hex=end_hex, angle=GRADIENT_ANGLE)


def resolve_primary_brand(
    spec: ColorSpec,
    mode: ColorMode,
    ramp: Ramp | None,
    warnings: list[HueforgeError] | None = None,
) -> SolidBinding | GradientBinding:
    """Resolve the primary brand binding for one mode.

    A gradient is produced only when ``use_gradient`` is set, the end seed
    is a valid hex color and the primary ramp was derived; otherwise the
    solid binding is used.

    Args:
        spec: The primary1 color group.
        mode: Theme mode.
        ramp: The derived primary1 ramp, or None if it failed to derive.
        warnings: Optional list collecting recovered GradientResolutionFailures.
    """
    solid = solid_reference(PRIMARY_BRAND_ROLE, mode)
    if not spec.use_gradient or not spec.gradient_end_seed_hex:
        return SolidBinding(token=solid)

    try:
        return _gradient_binding(spec, solid, ramp)
    except GradientResolutionFailure as e:
        logger.warning(f"Falling back to solid {solid.css_var} for {mode} brand-primary: {e}")
        if warnings is not None:
            warnings.append(e)
        return SolidBinding(token=solid)


def map_semantics(
    config: ThemeConfig,
    ramps: RampSet,
    warnings: list[HueforgeError] | None = None,
) -> dict[ColorMode, SemanticBinding]:
    """Bind every semantic role for both theme modes.

    Args:
        config: Theme configuration.
        ramps: Ramps derived from *config*.
        warnings: Optional list collecting recovered failures.

    Returns:
        Dict of mode -> SemanticBinding, light first.
    """
    primary_ramp = ramps.get(PRIMARY_GROUP)
    bindings: dict[ColorMode, SemanticBinding] = {}
    for mode in (ColorMode.LIGHT, ColorMode.DARK):
        roles = []
        for role in SEMANTIC_ROLES:
            if role.key == PRIMARY_BRAND_ROLE:
                binding = resolve_primary_brand(config.primary1, mode, primary_ramp, warnings)
            else:
                binding = SolidBinding(token=solid_reference(role.key, mode))
            roles.append((role, binding))
        bindings[mode] = SemanticBinding(mode=mode, roles=tuple(roles))
    return bindings
