"""Shared pytest fixtures for HUEFORGE tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from hueforge.core.ir import ColorSpec, ThemeConfig

NINE_STOPS = (0.98, 0.95, 0.9, 0.8, 0.7, 0.6, 0.5, 0.4, 0.3)


@pytest.fixture
def default_config() -> ThemeConfig:
    """Return the default theme configuration."""
    return ThemeConfig()


@pytest.fixture
def gradient_config() -> ThemeConfig:
    """Return a configuration with the gradient primary brand enabled."""
    return ThemeConfig(
        primary1=ColorSpec(
            seed_hex="#7B458F",
            hue=320.0,
            chroma=0.15,
            use_gradient=True,
            gradient_end_seed_hex="#2A7BDB",
        )
    )


@pytest.fixture
def mismatched_config() -> ThemeConfig:
    """Return a configuration whose p2 group has one stop too few."""
    return ThemeConfig(
        primary2=ColorSpec(seed_hex="#004780", hue=230.0, chroma=0.2, stops=NINE_STOPS)
    )


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Return an empty project directory."""
    project = tmp_path / "project"
    project.mkdir()
    return project
