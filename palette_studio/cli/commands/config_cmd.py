"""Configuration commands for palette studio CLI.

This module contains commands for viewing and changing the
settings stored in the TOML configuration file.
"""

import typer

from ...config import Config
from ...constants import SUCCESS_MESSAGES
from ..utils.config_utils import print_config_summary
from ..utils.output_utils import console

# Create config sub-app
config_app = typer.Typer(help="Manage configuration settings")


@config_app.command("show")
def show_config() -> None:
    """Display current configuration settings."""

    print_config_summary()


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Configuration key in dot notation (e.g. defaults.brand_color)"),
    value: str = typer.Argument(..., help="Value to set"),
) -> None:
    """Set a configuration value.

    Examples:
        palette config set defaults.brand_color #8b5cf6
        palette config set defaults.harmony triadic
        palette config set preview.chart_width 400
    """
    try:
        config = Config.load()
        config.set_value(key, value)
        config.dump()
        console.print(f"[success]✓ {SUCCESS_MESSAGES['config_saved']}:[/] {key} = {config.get_value(key)}")
    except ValueError as exc:
        console.print_error(exc)
        raise typer.Exit(code=1) from exc
    except OSError as exc:
        console.print_error(exc, "Could not save configuration:")
        raise typer.Exit(code=1) from exc


@config_app.command("get")
def config_get(
    key: str = typer.Argument(..., help="Configuration key in dot notation (e.g. defaults.harmony)"),
) -> None:
    """Get a configuration value.

    Examples:
        palette config get defaults.brand_color
        palette config get export.output_dir
    """
    try:
        config = Config.load()
        value = config.get_value(key)
        console.print(f"{key} = {value}")
    except ValueError as exc:
        console.print_error(exc)
        raise typer.Exit(code=1) from exc


def register_commands(app: typer.Typer) -> None:
    """Register config commands with the main CLI app."""
    app.add_typer(config_app, name="config")
