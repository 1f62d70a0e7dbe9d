"""
HUEFORGE CLI Package.

- theme.py: Project commands (init, css, variables, ramps, validate, seed, fonts)
- color.py: Color conversion
- utils.py: Shared utilities
"""

from __future__ import annotations

import typer

from hueforge.cli.color import convert_command
from hueforge.cli.theme import (
    css_command,
    fonts_command,
    init_command,
    ramps_command,
    seed_command,
    validate_command,
    variables_command,
)
from hueforge.cli.utils import configure_logging, get_version, version_callback

# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="""HUEFORGE - OKLCH design-token generator

Command Types:
  • Project Setup: init, seed
    → Create or edit themeconfig.yaml

  • Outputs: css, variables, ramps, fonts
    → Derive tokens from themeconfig.yaml (defaults if absent)

  • Utilities: validate, convert
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="HUEFORGE_LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
) -> None:
    """HUEFORGE CLI main callback for global options."""
    configure_logging(log_level)


app.command(name="init")(init_command)
app.command(name="css")(css_command)
app.command(name="variables")(variables_command)
app.command(name="ramps")(ramps_command)
app.command(name="validate")(validate_command)
app.command(name="seed")(seed_command)
app.command(name="fonts")(fonts_command)
app.command(name="convert")(convert_command)


# =============================================================================
# Main Entry Point
# =============================================================================


def main() -> None:
    app(standalone_mode=True)


__all__ = [
    "app",
    "main",
    "get_version",
    "version_callback",
]
