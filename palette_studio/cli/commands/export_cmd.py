"""Export and preview commands for palette studio CLI.

Both commands assemble a :class:`PaletteState` from per-slot color options
(falling back to the configured defaults) and then either serialise it or
render the HTML preview page.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...config import Config
from ...constants import SUCCESS_MESSAGES
from ...exceptions import ExportError, PaletteError, ValidationError
from ...exporters import export_css_variables, export_json, export_tailwind, write_json_export
from ...palette_state import PaletteState
from ...reporter import PreviewReporter
from ...utils import parse_hex_argument
from ..utils.config_utils import load_config
from ..utils.output_utils import console, resolve_output_dir

EXPORT_FORMATS = ("json", "tailwind", "css")

PALETTE_OPTIONS = {
    "brand": (("--brand", "-b"), "Brand color (defaults to defaults.brand_color)"),
    "neutral": (("--neutral", "-n"), "Seed color for the neutral scale"),
    "success": (("--success",), "Success status color"),
    "warning": (("--warning",), "Warning status color"),
    "error": (("--error",), "Error status color"),
}


def _color_option(name: str):
    """Fresh Typer option for one palette slot."""
    flags, help_text = PALETTE_OPTIONS[name]
    return typer.Option(None, *flags, help=help_text)


def build_state(
    config: Config,
    brand: Optional[str] = None,
    neutral: Optional[str] = None,
    success: Optional[str] = None,
    warning: Optional[str] = None,
    error: Optional[str] = None,
) -> PaletteState:
    """Assemble the palette state from CLI options and configured defaults.

    Raises:
        InvalidColorError: If any given color is not a valid hex color
    """
    colors = {
        "brand": brand or config.defaults.brand_color,
        "neutral": neutral or config.defaults.neutral_color or None,
        "success": success,
        "warning": warning,
        "error": error,
    }
    parsed = {
        name: parse_hex_argument(value, f"{name.title()} color") if value else None
        for name, value in colors.items()
    }
    return PaletteState.from_colors(**parsed)


def export(
    brand: Optional[str] = _color_option("brand"),
    neutral: Optional[str] = _color_option("neutral"),
    success: Optional[str] = _color_option("success"),
    warning: Optional[str] = _color_option("warning"),
    error: Optional[str] = _color_option("error"),
    output_format: str = typer.Option(
        "json",
        "--format",
        "-f",
        help="Export format: json, tailwind or css",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write to this file instead of standard output",
    ),
) -> None:
    """Export the palettes as JSON, a Tailwind colors block or CSS variables.

    Examples:
        palette export --brand #3b82f6
        palette export --brand #3b82f6 --neutral #64748b --format tailwind
        palette export --format json --output palettes/
    """
    output_format = output_format.strip().lower()
    if output_format not in EXPORT_FORMATS:
        console.print_validation_error(
            f"Unknown format '{output_format}'. Valid formats: {', '.join(EXPORT_FORMATS)}"
        )
        raise typer.Exit(code=1)

    config = load_config()
    try:
        state = build_state(config, brand, neutral, success, warning, error)
    except ValidationError as exc:
        console.print_validation_error(str(exc))
        raise typer.Exit(code=1) from exc

    palettes = state.palettes()

    if output is not None and output_format == "json":
        try:
            path = write_json_export(palettes, resolve_output_dir(output), indent=config.export.indent)
        except ExportError as exc:
            console.print_error(exc)
            raise typer.Exit(code=1) from exc
        console.print_written(SUCCESS_MESSAGES['export_written'], path)
        return

    if output_format == "json":
        content = export_json(palettes, indent=config.export.indent)
    elif output_format == "tailwind":
        content = export_tailwind(palettes)
    else:
        content = export_css_variables(palettes)

    if output is None:
        typer.echo(content)
        return

    path = resolve_output_dir(output)
    if path.is_file():
        console.print_warning(f"Overwriting {path}")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content + "\n", encoding="utf-8")
    except OSError as exc:
        console.print_error(ExportError(f"Failed to write {path}: {exc}", str(path)))
        raise typer.Exit(code=1) from exc
    console.print_written(SUCCESS_MESSAGES['export_written'], path)


def preview(
    brand: Optional[str] = _color_option("brand"),
    neutral: Optional[str] = _color_option("neutral"),
    success: Optional[str] = _color_option("success"),
    warning: Optional[str] = _color_option("warning"),
    error: Optional[str] = _color_option("error"),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Directory for the preview page (defaults to export.output_dir)",
    ),
    with_json: bool = typer.Option(
        True,
        "--json/--no-json",
        help="Also write the JSON export next to the preview",
    ),
) -> None:
    """Render the HTML preview page for the palettes.

    Examples:
        palette preview --brand #3b82f6
        palette preview --brand #8b5cf6 --success #22c55e --output site/
    """
    config = load_config()
    try:
        state = build_state(config, brand, neutral, success, warning, error)
    except ValidationError as exc:
        console.print_validation_error(str(exc))
        raise typer.Exit(code=1) from exc

    reporter = PreviewReporter(
        output_dir=resolve_output_dir(output_dir if output_dir is not None else config.export.output_dir),
        html_filename=config.export.html_filename,
        json_filename=config.export.json_filename,
        json_indent=config.export.indent,
        chart_width=config.preview.chart_width,
        chart_height=config.preview.chart_height,
        swatch_size=config.preview.swatch_size,
    )

    try:
        html_path = reporter.generate_html(state)
        json_path = reporter.generate_json(state) if with_json else None
    except PaletteError as exc:
        console.print_error(exc, "Preview failed:")
        raise typer.Exit(code=1) from exc

    console.print_written(SUCCESS_MESSAGES['preview_written'], html_path)
    if json_path is not None:
        console.print_written(SUCCESS_MESSAGES['export_written'], json_path)


def register_commands(app: typer.Typer) -> None:
    """Register export and preview commands with the main app."""
    app.command()(export)
    app.command()(preview)
