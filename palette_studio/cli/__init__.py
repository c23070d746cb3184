"""Command line interface for palette studio.

This is the main CLI entry point that orchestrates all commands.
The implementation is split into modular components:
- commands/    - Command handlers
- formatters/  - Rich tables and swatches
- utils/       - Shared console, logging and configuration helpers
"""

from __future__ import annotations

import os

import typer

from .utils.config_utils import load_config, print_config_summary
from .utils.output_utils import configure_logging, console

__all__ = [
    "app",
    "console",
    "load_config",
    "print_config_summary",
]

# Initialize main CLI application
app = typer.Typer(
    help="Generate color scales, harmonies and design-system palettes.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output for debugging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-essential output",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """CLI entry-point callback for shared initialisation."""
    console.configure(verbose=verbose, quiet=quiet)

    if no_color:
        os.environ["NO_COLOR"] = "1"
        console.no_color = True

    configure_logging(verbose=verbose, quiet=quiet)


# Register all command modules
from .commands import color_cmd, config_cmd, export_cmd, harmony_cmd, scale_cmd  # noqa: E402

scale_cmd.register_command(app)
color_cmd.register_commands(app)
harmony_cmd.register_command(app)
export_cmd.register_commands(app)
config_cmd.register_commands(app)
