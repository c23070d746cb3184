"""Themed Rich console shared by the palette CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.theme import Theme

# Neutral chrome so printed swatches carry the only strong colors on screen
_palette_theme = Theme(
    {
        "accent": "bold rgb(99,102,241)",
        "muted": "dim",
        "info": "rgb(148,163,184)",
        "title": "bold rgb(226,232,240)",
        "label": "bold rgb(148,163,184)",
        "value": "rgb(241,245,249)",
        "success": "bold rgb(34,197,94)",
        "warning": "bold rgb(245,158,11)",
        "danger": "bold rgb(239,68,68)",
        "frame": "rgb(71,85,105)",
    }
)


class Console(RichConsole):
    """Rich console with the palette theme and quiet/verbose switches.

    Quiet mode drops regular output but never errors; verbose mode enables
    :meth:`log`.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("theme", _palette_theme)
        super().__init__(*args, **kwargs)
        self.verbose_mode = False
        self.quiet_mode = False

    def configure(self, *, verbose: bool = False, quiet: bool = False) -> None:
        """Apply the global ``--verbose``/``--quiet`` flags."""
        self.verbose_mode = verbose
        self.quiet_mode = quiet

    def print(self, *args: Any, **kwargs: Any) -> None:
        if not self.quiet_mode:
            super().print(*args, **kwargs)

    def log(self, *args: Any, **kwargs: Any) -> None:
        if self.verbose_mode and not self.quiet_mode:
            super().log(*args, **kwargs)

    def print_error(self, error: Exception | str, context: str = "") -> None:
        """Print an error, even in quiet mode.

        Args:
            error: Exception instance or error message string
            context: Optional prefix (e.g., "Preview failed:")
        """
        super().print(f"[danger]{context or 'Error:'}[/] {escape(str(error))}")

    def print_validation_error(self, message: str) -> None:
        """Print a rejected color, harmony or option value, even in quiet mode."""
        super().print(f"[danger]Validation error:[/] {escape(message)}")

    def print_success(self, message: str) -> None:
        self.print(f"[success]{escape(message)}[/]")

    def print_warning(self, message: str) -> None:
        self.print(f"[warning]{escape(message)}[/]")

    def print_written(self, what: str, path: Path | str) -> None:
        """Report a file written by an export or preview."""
        self.print_success(f"✓ {what}: {path}")


__all__ = ["Console"]
