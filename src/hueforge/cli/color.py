"""
Color conversion command for HUEFORGE CLI.

- convert '#7b458f'  -> oklch(...)
- convert 0.5 0.15 320 -> #rrggbb
"""

from __future__ import annotations

import typer
from rich.markup import escape

from hueforge.core.errors import InvalidColorFormat
from hueforge.core.oklch import hex_to_oklch, oklch_to_css, oklch_to_hex

from .utils import console


def convert_command(
    values: list[str] = typer.Argument(  # noqa: B008
        ...,
        help="A hex color, or OKLCH lightness, chroma and hue",
    ),
) -> None:
    """Convert between hex and OKLCH."""
    if len(values) == 1:
        try:
            lightness, chroma, hue = hex_to_oklch(values[0])
        except InvalidColorFormat as e:
            console.print(f"[red]{escape(e.message)}[/red]")
            raise typer.Exit(code=1)
        typer.echo(oklch_to_css(lightness, chroma, hue if hue is not None else 0.0))
        if hue is None:
            console.print("[dim]achromatic: hue undefined[/dim]")
        return

    if len(values) == 3:
        try:
            lightness, chroma, hue = (float(v) for v in values)
        except ValueError:
            console.print(f"[red]Expected numbers for L C H, got: {escape(' '.join(values))}[/red]")
            raise typer.Exit(code=1)
        typer.echo(oklch_to_hex(lightness, chroma, hue))
        return

    console.print("[red]Expected one hex color or three OKLCH values (L C H)[/red]")
    raise typer.Exit(code=1)
