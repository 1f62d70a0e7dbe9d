"""
HUEFORGE - OKLCH design-token generator.

Derives perceptual color ramps, light/dark semantic bindings, a complete
stylesheet and a design-tool variables document from one small theme
configuration.
"""

from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import (
    GradientResolutionFailure,
    HueforgeError,
    InvalidColorFormat,
    StopLadderMismatch,
    ThemeConfigError,
)


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    # In editable mode, read directly from pyproject.toml for live updates
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    try:
        return _metadata_version("hueforge")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "HueforgeError",
    "InvalidColorFormat",
    "StopLadderMismatch",
    "GradientResolutionFailure",
    "ThemeConfigError",
]
