"""Shared console, logging setup and path utilities for the CLI."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.logging import RichHandler

from ...console import Console

# Every command prints through this instance so the callback's
# --quiet/--verbose flags apply everywhere.
console = Console()


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route package logging through Rich at a level matching the CLI flags."""

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, rich_tracebacks=verbose)],
        force=True,
    )


def resolve_output_dir(value: Path | str | object) -> Path:
    """Normalise CLI path inputs for both Typer and direct function calls."""

    if isinstance(value, Path):
        return value.expanduser()

    default_candidate = getattr(value, "default", value)
    if isinstance(default_candidate, Path):
        return default_candidate.expanduser()

    return Path(str(default_candidate)).expanduser()
