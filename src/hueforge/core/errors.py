"""
Error types for HUEFORGE color conversion, ramp generation and configuration.
"""

from collections.abc import Sequence


class HueforgeError(Exception):
    """Base exception for all HUEFORGE errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidColorFormat(HueforgeError):
    """
    Raised when a color string is not a 6-digit hex value.

    Examples:
    - "#12345" (too short)
    - "#GGGGGG" (non-hex digits)
    - "" or None
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid hex color: {value!r} (expected '#rrggbb')")


class StopLadderMismatch(HueforgeError):
    """
    Raised when a color group's stop count differs from its naming ladder.

    A ramp is never truncated or padded to fit the ladder.
    """

    def __init__(self, prefix: str, stops: Sequence[float], ladder: Sequence[int]):
        self.prefix = prefix
        self.stop_count = len(stops)
        self.ladder_length = len(ladder)
        super().__init__(
            f"{prefix}: {self.stop_count} lightness stops given, "
            f"ladder expects {self.ladder_length} ({', '.join(str(w) for w in ladder)})"
        )


class GradientResolutionFailure(HueforgeError):
    """
    Raised when the gradient primary brand cannot be resolved.

    Recovered by the semantic mapper, which falls back to the solid binding.
    """

    pass


class ThemeConfigError(HueforgeError):
    """Error loading, parsing or editing a theme configuration."""

    pass
