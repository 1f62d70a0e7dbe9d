"""
Pure-Python sRGB <-> OKLCH conversion.

Forward path: hex -> sRGB -> linear sRGB -> XYZ (D65) -> LMS -> OKLab -> OKLCH.
The inverse path runs the same matrices backwards. Coefficients are the CSS
Color 4 OKLab constants, so both directions are exact inverses up to float
precision. No external color libraries required.
"""

from __future__ import annotations

import math
import re

from .errors import InvalidColorFormat

Matrix = tuple[
    tuple[float, float, float],
    tuple[float, float, float],
    tuple[float, float, float],
]

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")

# Chroma below this is treated as achromatic (hue undefined).
ACHROMATIC_CHROMA = 1e-4

_LINEAR_SRGB_TO_XYZ: Matrix = (
    (0.41239079926595934, 0.357584339383878, 0.1804807884018343),
    (0.21263900587151027, 0.715168678767756, 0.07219231536073371),
    (0.01933081871559182, 0.11919477979462598, 0.9505321522496607),
)

_XYZ_TO_LINEAR_SRGB: Matrix = (
    (3.2409699419045226, -1.537383177570094, -0.4986107602930034),
    (-0.9692436362808796, 1.8759675015077202, 0.04155505740717559),
    (0.05563007969699366, -0.20397695888897652, 1.0569715142428786),
)

_XYZ_TO_LMS: Matrix = (
    (0.819022437996703, 0.3619062600528904, -0.1288737815209879),
    (0.0329836539323885, 0.9292868615863434, 0.0361446663506424),
    (0.0481771893596242, 0.2642395317527308, 0.6335478284694309),
)

_LMS_TO_XYZ: Matrix = (
    (1.2268798758459243, -0.5578149944602171, 0.2813910456659647),
    (-0.0405757452148008, 1.112286803280317, -0.0717110580655164),
    (-0.0763729366746601, -0.4214933324022432, 1.5869240198367816),
)

_LMS_TO_OKLAB: Matrix = (
    (0.210454268309314, 0.7936177747023054, -0.0040720430116193),
    (1.9779985324311684, -2.42859224204858, 0.4505937096174110),
    (0.0259040424655478, 0.7827717124575296, -0.8086757549230774),
)

_OKLAB_TO_LMS: Matrix = (
    (1.0, 0.3963377773761749, 0.2158037573099136),
    (1.0, -0.1055613458156586, -0.0638541728258133),
    (1.0, -0.0894841775298119, -1.2914855480194092),
)


def _apply(matrix: Matrix, x: float, y: float, z: float) -> tuple[float, float, float]:
    r0, r1, r2 = matrix
    return (
        r0[0] * x + r0[1] * y + r0[2] * z,
        r1[0] * x + r1[1] * y + r1[2] * z,
        r2[0] * x + r2[1] * y + r2[2] * z,
    )


def _srgb_to_linear(v: float) -> float:
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def _linear_to_srgb(v: float) -> float:
    if v <= 0.0031308:
        return 12.92 * v
    return 1.055 * v ** (1 / 2.4) - 0.055


def _clamp_unit(v: float) -> float:
    return max(0.0, min(1.0, v))


def is_valid_hex(value: object) -> bool:
    """Return True if *value* is a 6-digit hex color, with or without '#'."""
    return isinstance(value, str) and _HEX_RE.match(value.strip()) is not None


def parse_hex(value: object) -> tuple[int, int, int]:
    """Decode a 6-digit hex color into 8-bit (r, g, b).

    Raises:
        InvalidColorFormat: If *value* is not a 6-digit hex string.
    """
    if not isinstance(value, str):
        raise InvalidColorFormat(value)
    match = _HEX_RE.match(value.strip())
    if match is None:
        raise InvalidColorFormat(value)
    digits = match.group(1)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def hex_to_oklch(value: str) -> tuple[float, float, float | None]:
    """Convert a hex color to OKLCH.

    Args:
        value: '#rrggbb' or 'rrggbb', either case.

    Returns:
        (L, C, H) with H in [0, 360), or None for H when the color is
        achromatic. Callers doing arithmetic on H must substitute a default.

    Raises:
        InvalidColorFormat: If *value* is malformed.
    """
    r8, g8, b8 = parse_hex(value)
    r = _srgb_to_linear(r8 / 255)
    g = _srgb_to_linear(g8 / 255)
    b = _srgb_to_linear(b8 / 255)

    x, y, z = _apply(_LINEAR_SRGB_TO_XYZ, r, g, b)
    lms = _apply(_XYZ_TO_LMS, x, y, z)
    L, a, b_ok = _apply(_LMS_TO_OKLAB, *(math.cbrt(v) for v in lms))

    C = math.hypot(a, b_ok)
    if C < ACHROMATIC_CHROMA:
        return L, C, None

    H = math.degrees(math.atan2(b_ok, a)) % 360.0
    return L, C, H


def oklch_to_hex(L: float, C: float, H: float) -> str:
    """Convert OKLCH to a lowercase '#rrggbb' string.

    Channels outside the sRGB gamut are clamped to [0, 1]; this never raises
    for numeric input.

    Args:
        L: Lightness (0-1).
        C: Chroma (>= 0).
        H: Hue in degrees.
    """
    h_rad = math.radians(H)
    a = C * math.cos(h_rad)
    b_ok = C * math.sin(h_rad)

    l_, m_, s_ = _apply(_OKLAB_TO_LMS, L, a, b_ok)
    x, y, z = _apply(_LMS_TO_XYZ, l_**3, m_**3, s_**3)
    linear = _apply(_XYZ_TO_LINEAR_SRGB, x, y, z)

    channels = (round(_clamp_unit(_linear_to_srgb(v)) * 255) for v in linear)
    return "#" + "".join(f"{c:02x}" for c in channels)


def oklch_to_css(L: float, C: float, H: float, alpha: float = 1.0) -> str:
    """Format an OKLCH color as a CSS string.

    Args:
        L: Lightness (0-1).
        C: Chroma (0-0.4).
        H: Hue (0-360).
        alpha: Opacity (0-1).

    Returns:
        CSS oklch() string.
    """
    L_fmt = f"{L:.3f}"
    C_fmt = f"{C:.4f}"
    H_fmt = f"{H:.1f}"
    if alpha < 1.0:
        return f"oklch({L_fmt} {C_fmt} {H_fmt} / {alpha:.2f})"
    return f"oklch({L_fmt} {C_fmt} {H_fmt})"


def hex_to_rgba(value: str) -> dict[str, float]:
    """Convert a hex color to normalised RGBA channels (alpha fixed at 1)."""
    r, g, b = parse_hex(value)
    return {"r": r / 255, "g": g / 255, "b": b / 255, "a": 1}
