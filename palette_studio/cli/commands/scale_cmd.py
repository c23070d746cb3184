"""Scale command for palette studio CLI.

Prints the 11-step scale derived from one base color.
"""

from __future__ import annotations

import json

import typer

from ...exceptions import InvalidColorError
from ...models import Palette
from ...utils import parse_hex_argument
from ..formatters.display_formatter import render_palette_table
from ..utils.output_utils import console

OUTPUT_FORMATS = ("table", "json")


def scale(
    color: str = typer.Argument(..., help="Base color, e.g. #3b82f6"),
    neutral: bool = typer.Option(
        False,
        "--neutral",
        "-n",
        help="Build the near-gray neutral scale instead of a color scale",
    ),
    output_format: str = typer.Option(
        "table",
        "--format",
        "-f",
        help="Output format: table or json",
    ),
) -> None:
    """Generate the 50-950 scale for a base color.

    Examples:
        palette scale #3b82f6
        palette scale 3b82f6 --neutral
        palette scale #22c55e --format json
    """
    output_format = output_format.strip().lower()
    if output_format not in OUTPUT_FORMATS:
        console.print_validation_error(
            f"Unknown format '{output_format}'. Valid formats: {', '.join(OUTPUT_FORMATS)}"
        )
        raise typer.Exit(code=1)

    try:
        base = parse_hex_argument(color, "Base color")
    except InvalidColorError as exc:
        console.print_validation_error(str(exc))
        raise typer.Exit(code=1) from exc

    name = "neutral" if neutral else "brand"
    palette = Palette.from_base(name, base, neutral=neutral)

    if output_format == "json":
        typer.echo(json.dumps(palette.scale.to_dict(), indent=2))
        return

    render_palette_table(console, palette)


def register_command(app: typer.Typer) -> None:
    """Register scale command with the main app."""
    app.command()(scale)
