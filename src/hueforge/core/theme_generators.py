"""
Static token tables for spacing, typography, and shape.

These scales do not depend on the theme configuration.
All outputs are flat dicts of token name -> CSS value string.
"""

from __future__ import annotations

# =============================================================================
# Spacing
# =============================================================================

# 0.25rem grid: (token name, rem value, px comment)
_SPACING_STEPS: list[tuple[str, str, int]] = [
    ("space-1", "0.25rem", 4),
    ("space-2", "0.5rem", 8),
    ("space-3", "0.75rem", 12),
    ("space-4", "1rem", 16),
    ("space-5", "1.25rem", 20),
    ("space-6", "1.5rem", 24),
    ("space-7", "1.75rem", 28),
    ("space-8", "2rem", 32),
    ("space-9", "2.5rem", 40),
    ("space-10", "3rem", 48),
    ("space-11", "4rem", 64),
    ("space-12", "5rem", 80),
]


def generate_spacing_scale() -> dict[str, str]:
    """Generate the spacing scale.

    Returns:
        Dict of token names to CSS values (rem).
    """
    return {name: rem for name, rem, _px in _SPACING_STEPS}


def spacing_px(name: str) -> int:
    """Pixel equivalent of a spacing token at a 16px root size."""
    for step_name, _rem, px in _SPACING_STEPS:
        if step_name == name:
            return px
    raise KeyError(name)


# =============================================================================
# Typography
# =============================================================================

# Fluid type scale: step -> (min, preferred, max)
_TYPE_STEPS: list[tuple[str, tuple[str, str, str]]] = [
    ("step--2", ("0.78rem", "0.77rem + 0.03vw", "0.80rem")),
    ("step--1", ("0.94rem", "0.92rem + 0.11vw", "1.00rem")),
    ("step-0", ("1.13rem", "1.09rem + 0.19vw", "1.25rem")),
    ("step-1", ("1.35rem", "1.28rem + 0.35vw", "1.56rem")),
    ("step-2", ("1.62rem", "1.50rem + 0.59vw", "1.95rem")),
    ("step-3", ("1.94rem", "1.76rem + 0.93vw", "2.44rem")),
    ("step-4", ("2.33rem", "2.05rem + 1.40vw", "3.05rem")),
    ("step-5", ("2.80rem", "2.39rem + 2.04vw", "3.82rem")),
]

# Heading level -> type step
HEADING_STEPS: dict[str, str] = {
    "h1": "step-4",
    "h2": "step-3",
    "h3": "step-2",
    "h4": "step-1",
    "h5": "step-0",
}

BODY_STEP = "step-0"


def generate_type_scale() -> dict[str, str]:
    """Generate the fluid type scale.

    Returns:
        Dict of token names to CSS clamp() expressions.
    """
    return {
        name: f"clamp({low}, {preferred}, {high})" for name, (low, preferred, high) in _TYPE_STEPS
    }


# =============================================================================
# Shape
# =============================================================================

_RADII: dict[str, str] = {
    "radius-sm": "0.25rem",
    "radius-md": "0.5rem",
    "radius-lg": "1rem",
    "radius-full": "9999px",
}

# Shadow color as an HSL triple; dark mode drops lightness to 0%.
SHADOW_COLOR_LIGHT = "240 2% 50%"
SHADOW_COLOR_DARK = "240 2% 0%"


def _shadow(offset: str, alpha: str) -> str:
    return f"{offset} oklch(from var(--shadow-color) l c h / {alpha})"


_SHADOWS: dict[str, str] = {
    "shadow-1": _shadow("0 1px 2px 0", "0.05"),
    "shadow-2": ", ".join(
        [_shadow("0 1px 3px 0", "0.1"), _shadow("0 1px 2px -1px", "0.1")]
    ),
    "shadow-3": ", ".join(
        [_shadow("0 4px 6px -1px", "0.1"), _shadow("0 2px 4px -2px", "0.1")]
    ),
    "shadow-4": ", ".join(
        [_shadow("0 10px 15px -3px", "0.1"), _shadow("0 4px 6px -4px", "0.1")]
    ),
}

_BORDER_WIDTHS: dict[str, str] = {
    "border-width-1": "1px",
    "border-width-2": "2px",
}


def generate_radii() -> dict[str, str]:
    return dict(_RADII)


def generate_shadows() -> dict[str, str]:
    """Shadow tokens, including the light-mode ``shadow-color``."""
    tokens = {"shadow-color": SHADOW_COLOR_LIGHT}
    tokens.update(_SHADOWS)
    return tokens


def generate_border_widths() -> dict[str, str]:
    return dict(_BORDER_WIDTHS)
