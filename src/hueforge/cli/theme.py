"""
Theme commands for HUEFORGE CLI.

Commands operating on a project's themeconfig.yaml:
- init: Scaffold a default themeconfig.yaml
- css: Generate the stylesheet
- variables: Generate the design-tool variables document
- ramps: Show every derived token
- validate: Report configuration errors and warnings
- seed: Update one color group from a seed color
- fonts: Show the web font stylesheet URL
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from hueforge.core.css_export import export_css_file, generate_full_css
from hueforge.core.editor import apply_seed, update_group
from hueforge.core.figma_export import (
    export_variables_file,
    generate_variables_document,
    variables_to_json,
)
from hueforge.core.fonts import font_link_for
from hueforge.core.ir import ColorSpec
from hueforge.core.oklch import is_valid_hex
from hueforge.core.themeconfig_loader import (
    get_themeconfig_path,
    save_themeconfig,
    scaffold_themeconfig,
    validate_themeconfig,
)

from .utils import console, derive_or_exit, load_config_or_exit

PROJECT_OPTION_HELP = "Project directory (default: current directory)"


def init_command(
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help=PROJECT_OPTION_HELP,
    ),
    primary_hue: float | None = typer.Option(
        None,
        "--primary-hue",
        min=0.0,
        max=359.999,
        help="OKLCH hue for the primary brand color",
    ),
    primary_chroma: float | None = typer.Option(
        None,
        "--primary-chroma",
        min=0.0,
        help="OKLCH chroma for the primary brand color",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing themeconfig.yaml",
    ),
) -> None:
    """Create a default themeconfig.yaml."""
    path = scaffold_themeconfig(
        project_dir,
        primary_hue=primary_hue,
        primary_chroma=primary_chroma,
        overwrite=force,
    )
    if path is None:
        console.print(
            f"[yellow]{escape(str(get_themeconfig_path(project_dir)))} already exists "
            "(use --force to overwrite)[/yellow]"
        )
        return
    console.print(f"[green]Created {escape(str(path))}[/green]")


def css_command(
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help=PROJECT_OPTION_HELP,
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file (default: stdout)",
    ),
) -> None:
    """Generate the theme stylesheet."""
    derivation = derive_or_exit(project_dir)

    if output is None:
        typer.echo(generate_full_css(derivation), nl=False)
        return

    export_css_file(derivation, output)
    console.print(f"[green]Stylesheet written to {escape(str(output))}[/green]")


def variables_command(
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help=PROJECT_OPTION_HELP,
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file (default: stdout)",
    ),
) -> None:
    """Generate the design-tool variables document (JSON)."""
    derivation = derive_or_exit(project_dir)

    if output is None:
        typer.echo(variables_to_json(generate_variables_document(derivation)))
        return

    export_variables_file(derivation, output)
    console.print(f"[green]Variables document written to {escape(str(output))}[/green]")


def ramps_command(
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help=PROJECT_OPTION_HELP,
    ),
) -> None:
    """Show every derived color token."""
    derivation = derive_or_exit(project_dir)

    table = Table(title="Color Ramps")
    table.add_column("Token", style="cyan")
    table.add_column("Hex")
    table.add_column("L", justify="right")
    table.add_column("C", justify="right")
    table.add_column("H", justify="right")
    table.add_column("Swatch")

    for token in derivation.ramps.tokens():
        table.add_row(
            token.name,
            token.hex,
            f"{token.l:.3f}",
            f"{token.c:.3f}",
            f"{token.h:.1f}",
            f"[on {token.hex}]      [/]",
        )

    console.print(table)


def validate_command(
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help=PROJECT_OPTION_HELP,
    ),
) -> None:
    """Validate themeconfig.yaml."""
    config = load_config_or_exit(project_dir)
    result = validate_themeconfig(config)

    for error in result.errors:
        console.print(f"[red]Error: {escape(error)}[/red]")
    for warning in result.warnings:
        console.print(f"[yellow]Warning: {escape(warning)}[/yellow]")

    if not result.is_valid:
        console.print(f"[red]Theme config invalid ({len(result.errors)} error(s))[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]Theme config OK ({len(result.warnings)} warning(s))[/green]")


def seed_command(
    group: str = typer.Argument(..., help="Color group: p1, p2, accent, success, warning, danger"),
    seed_hex: str = typer.Argument(..., help="Seed color as #rrggbb"),
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help=PROJECT_OPTION_HELP,
    ),
) -> None:
    """Set a color group's hue and chroma from a seed color."""
    config = load_config_or_exit(project_dir)

    try:
        spec = config.group(group)
    except KeyError:
        console.print(f"[red]Unknown color group: {escape(group)}[/red]")
        raise typer.Exit(code=1)

    if not isinstance(spec, ColorSpec):
        console.print(f"[red]Group {escape(group)} has no seed color[/red]")
        raise typer.Exit(code=1)

    if not is_valid_hex(seed_hex):
        console.print(f"[red]Invalid hex color: {escape(seed_hex)} (expected #rrggbb)[/red]")
        raise typer.Exit(code=1)

    updated = apply_seed(spec, seed_hex)
    save_themeconfig(project_dir, update_group(config, group, updated))
    console.print(
        f"[green]{escape(group)}: hue {updated.hue:g}, chroma {updated.chroma:g} "
        f"(seed {escape(updated.seed_hex)})[/green]"
    )


def fonts_command(
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help=PROJECT_OPTION_HELP,
    ),
) -> None:
    """Show the web font stylesheet URL for the configured fonts."""
    config = load_config_or_exit(project_dir)
    typer.echo(font_link_for(config.fonts))
