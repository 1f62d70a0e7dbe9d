"""
ThemeConfig persistence layer.

Handles reading and writing ThemeConfig to themeconfig.yaml in a project
root, scaffolding a default file, and semantic validation beyond what the
pydantic models enforce.

Default location: {project_root}/themeconfig.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import ThemeConfigError
from .ir import ColorSpec, NeutralSpec, ThemeConfig
from .oklch import is_valid_hex
from .ramps import ladder_for

logger = logging.getLogger(__name__)

THEMECONFIG_FILE = "themeconfig.yaml"


# =============================================================================
# Path helpers
# =============================================================================


def get_themeconfig_path(project_root: Path) -> Path:
    """Get the themeconfig.yaml file path."""
    return project_root / THEMECONFIG_FILE


def themeconfig_exists(project_root: Path) -> bool:
    """Check if a themeconfig.yaml exists in the project."""
    return get_themeconfig_path(project_root).exists()


# =============================================================================
# Loading
# =============================================================================


def parse_themeconfig_data(data: dict[str, Any]) -> ThemeConfig:
    """Build a ThemeConfig from raw YAML data.

    Missing sections fall back to defaults.

    Raises:
        ThemeConfigError: If the data does not match the schema.
    """
    if not isinstance(data, dict):
        raise ThemeConfigError(f"Expected a mapping, got {type(data).__name__}")
    try:
        return ThemeConfig.model_validate(data)
    except ValidationError as e:
        raise ThemeConfigError(f"Invalid ThemeConfig: {e}") from e


def load_themeconfig(project_root: Path, *, use_defaults: bool = True) -> ThemeConfig:
    """Load ThemeConfig from themeconfig.yaml.

    Args:
        project_root: Directory containing themeconfig.yaml.
        use_defaults: If True, return the default ThemeConfig when the file
            doesn't exist or is empty.

    Returns:
        ThemeConfig instance.

    Raises:
        ThemeConfigError: If the file is missing (when use_defaults=False) or invalid.
    """
    themeconfig_path = get_themeconfig_path(project_root)

    if not themeconfig_path.exists():
        if use_defaults:
            logger.debug("No themeconfig.yaml found, using defaults")
            return create_default_themeconfig()
        raise ThemeConfigError(f"ThemeConfig not found: {themeconfig_path}")

    try:
        content = themeconfig_path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ThemeConfigError(f"Invalid YAML in {themeconfig_path}: {e}") from e

    if not data:
        if use_defaults:
            logger.warning(f"Empty themeconfig.yaml at {themeconfig_path}, using defaults")
            return create_default_themeconfig()
        raise ThemeConfigError(f"Empty or invalid YAML in {themeconfig_path}")

    try:
        return parse_themeconfig_data(data)
    except ThemeConfigError as e:
        raise ThemeConfigError(f"{themeconfig_path}: {e.message}") from e


def save_themeconfig(project_root: Path, config: ThemeConfig) -> Path:
    """Save ThemeConfig to themeconfig.yaml.

    Returns:
        Path to the saved file.
    """
    themeconfig_path = get_themeconfig_path(project_root)

    data = config.model_dump(mode="json")

    themeconfig_path.write_text(
        yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )

    logger.info(f"Saved ThemeConfig to {themeconfig_path}")
    return themeconfig_path


# =============================================================================
# Validation
# =============================================================================


class ThemeConfigValidationResult:
    """Result of ThemeConfig validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def __repr__(self) -> str:
        return (
            f"ThemeConfigValidationResult(errors={len(self.errors)}, "
            f"warnings={len(self.warnings)})"
        )


def _is_monotonic(stops: tuple[float, ...]) -> bool:
    ascending = all(a <= b for a, b in zip(stops, stops[1:]))
    descending = all(a >= b for a, b in zip(stops, stops[1:]))
    return ascending or descending


def validate_themeconfig(config: ThemeConfig) -> ThemeConfigValidationResult:
    """Validate a ThemeConfig for semantic correctness.

    Errors block derivation of a group; warnings flag settings that derive
    but are probably unintended.
    """
    result = ThemeConfigValidationResult()

    for prefix, spec in config.color_groups():
        ladder = ladder_for(prefix)
        if len(spec.stops) != len(ladder):
            result.add_error(
                f"{prefix}.stops has {len(spec.stops)} values, expected {len(ladder)}"
            )
        elif not _is_monotonic(spec.stops):
            result.add_warning(f"{prefix}.stops are not monotonic: tokens will not step evenly")

        if isinstance(spec, NeutralSpec):
            continue

        if not is_valid_hex(spec.seed_hex):
            result.add_warning(f"{prefix}.seed_hex '{spec.seed_hex}' is not a #rrggbb color")
        if spec.chroma == 0.0:
            result.add_warning(f"{prefix}.chroma is 0 - colors will be completely desaturated")
        if spec.use_gradient and not is_valid_hex(spec.gradient_end_seed_hex):
            result.add_warning(
                f"{prefix}.use_gradient is set but gradient_end_seed_hex "
                f"'{spec.gradient_end_seed_hex}' is not a #rrggbb color; "
                "the solid brand color will be used"
            )
        if spec.use_gradient and prefix != "p1":
            result.add_warning(f"{prefix}.use_gradient has no effect; only p1 supports gradients")

    return result


# =============================================================================
# Scaffolding
# =============================================================================


def create_default_themeconfig(
    primary_hue: float | None = None,
    primary_chroma: float | None = None,
) -> ThemeConfig:
    """Create a default ThemeConfig, optionally overriding the primary hue/chroma."""
    config = ThemeConfig()
    if primary_hue is None and primary_chroma is None:
        return config

    primary: ColorSpec = config.primary1.model_copy(
        update={
            "hue": config.primary1.hue if primary_hue is None else primary_hue,
            "chroma": config.primary1.chroma if primary_chroma is None else primary_chroma,
        }
    )
    # model_copy skips validation; round-trip through the model to enforce bounds
    return ThemeConfig.model_validate(
        {**config.model_dump(), "primary1": primary.model_dump()}
    )


def scaffold_themeconfig(
    project_root: Path,
    *,
    primary_hue: float | None = None,
    primary_chroma: float | None = None,
    overwrite: bool = False,
) -> Path | None:
    """Create a default themeconfig.yaml file.

    Args:
        project_root: Directory to create the file in.
        primary_hue: Optional primary brand hue.
        primary_chroma: Optional primary brand chroma.
        overwrite: If True, overwrite an existing file.

    Returns:
        Path to created file, or None if skipped.
    """
    themeconfig_path = get_themeconfig_path(project_root)

    if themeconfig_path.exists() and not overwrite:
        logger.debug(f"Skipping existing themeconfig: {themeconfig_path}")
        return None

    config = create_default_themeconfig(primary_hue, primary_chroma)
    project_root.mkdir(parents=True, exist_ok=True)
    return save_themeconfig(project_root, config)
