"""Display formatting utilities for CLI output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from rich import box
from rich.table import Table
from rich.text import Text

from ...color_utils import get_contrast_color, hex_to_hsl
from ...constants import TABLE_CONFIG

if TYPE_CHECKING:
    from ...console import Console
    from ...models import Palette


def _swatch(color: str) -> Text:
    """Solid block of ``color`` labelled in its contrast color."""
    label = " " * TABLE_CONFIG['swatch_width']
    return Text(label, style=f"{get_contrast_color(color)} on {color}")


def _table(title: str) -> Table:
    return Table(
        title=title,
        box=getattr(box, TABLE_CONFIG['box_style']),
        title_style="title",
        border_style="frame",
        header_style=TABLE_CONFIG['header_style'],
    )


def render_palette_table(console: Console, palette: Palette) -> None:
    """Print one palette as a shade / swatch / hex / HSL table.

    Args:
        console: Console instance for output
        palette: Palette to display
    """
    kind = "neutral" if palette.neutral else "color"
    table = _table(f"{palette.name} ({kind} scale from {palette.base_color})")
    table.add_column("Shade", style=TABLE_CONFIG['shade_style'], justify="right")
    table.add_column("Swatch")
    table.add_column("Hex", style="value")
    table.add_column("HSL", style="muted")

    for shade, color in palette.scale.items():
        hsl = hex_to_hsl(color)
        table.add_row(str(shade.value), _swatch(color), color, f"{hsl.h}, {hsl.s}%, {hsl.l}%")

    console.print(table)


def render_color_list(
    console: Console,
    title: str,
    colors: Iterable[str],
    labels: Optional[Iterable[str]] = None,
) -> None:
    """Print a list of colors, optionally labelled, with swatches."""
    table = _table(title)
    table.add_column("#", style=TABLE_CONFIG['shade_style'], justify="right")
    table.add_column("Swatch")
    table.add_column("Hex", style="value")
    table.add_column("HSL", style="muted")

    names = list(labels) if labels is not None else None
    for idx, color in enumerate(colors):
        hsl = hex_to_hsl(color)
        label = names[idx] if names is not None else str(idx + 1)
        table.add_row(label, _swatch(color), color, f"{hsl.h}, {hsl.s}%, {hsl.l}%")

    console.print(table)


def render_conversion(console: Console, hex_color: str, h: float, s: float, l: float) -> None:  # noqa: E741
    """Print a single hex/HSL pair."""
    console.print(_swatch(hex_color), end=" ")
    console.print(f"[value]{hex_color}[/]  [muted]hsl({h:g}, {s:g}%, {l:g}%)[/]")


def render_contrast(console: Console, background: str, foreground: str) -> None:
    """Print the chosen text color on top of its background."""
    sample = Text(" Aa Sample ", style=f"{foreground} on {background}")
    console.print(sample, end=" ")
    console.print(f"[label]text on[/] [value]{background}[/]: [value]{foreground}[/]")
