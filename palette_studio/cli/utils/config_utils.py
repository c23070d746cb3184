"""Configuration utilities for CLI."""

import typer
from rich import box
from rich.table import Table

from ...config import Config, config_path
from ...constants import ERROR_MESSAGES
from .output_utils import console


def load_config() -> Config:
    """Load and validate configuration."""
    try:
        return Config.load()
    except ValueError as exc:
        console.print_error(exc, f"{ERROR_MESSAGES['config_invalid']}:")
        console.print()
        console.print(f"[info]Fix or remove [accent]{config_path()}[/] to continue")
        raise typer.Exit(code=1) from exc


def print_config_summary() -> None:
    """Render the current configuration as a table."""

    config = load_config()
    data = config.to_display_dict()

    table = Table(
        title="Palette Studio Configuration",
        box=box.ROUNDED,
        title_style="title",
        border_style="frame",
        expand=True,
        show_lines=True,
    )
    table.add_column("Section", style="label", no_wrap=True)
    table.add_column("Values", style="value")

    for section, values in data.items():
        rendered_values = "\n".join(f"[label]{k}[/]: [value]{v}[/]" for k, v in values.items())
        table.add_row(f"[accent]{section}[/]", rendered_values)

    console.print(table)
    console.print(f"[muted]Loaded from {config_path()}[/]")
