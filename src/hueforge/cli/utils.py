"""
HUEFORGE CLI Utilities.

Shared helpers used across CLI modules: version display, logging setup and
project loading.
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from hueforge.core.derive import ThemeDerivation, derive_theme
from hueforge.core.errors import ThemeConfigError
from hueforge.core.ir import ThemeConfig
from hueforge.core.themeconfig_loader import load_themeconfig

console = Console()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_version() -> str:
    """Get HUEFORGE version."""
    from hueforge import __version__

    return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"HUEFORGE {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Configure root logging once for the CLI process.

    Raises:
        typer.BadParameter: If *level* is not a logging level name.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise typer.BadParameter(f"Unknown log level: {level}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT)


def load_config_or_exit(project_dir: Path) -> ThemeConfig:
    """Load themeconfig.yaml from *project_dir*, falling back to defaults."""
    try:
        return load_themeconfig(project_dir)
    except ThemeConfigError as e:
        console.print(f"[red]Error loading theme config: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def derive_or_exit(project_dir: Path) -> ThemeDerivation:
    """Derive the project's theme; report warnings and exit 1 on errors."""
    derivation = derive_theme(load_config_or_exit(project_dir))

    for warning in derivation.warnings:
        console.print(f"[yellow]Warning: {escape(str(warning))}[/yellow]")

    if not derivation.is_complete:
        for error in derivation.errors:
            console.print(f"[red]Error: {escape(str(error))}[/red]")
        raise typer.Exit(code=1)

    return derivation
