"""Harmony command for palette studio CLI."""

from __future__ import annotations

from typing import Optional

import typer

from ...color_utils import generate_harmony_colors
from ...constants import HARMONY_HUE_OFFSETS
from ...exceptions import ValidationError
from ...models import HarmonyKind
from ...utils import parse_hex_argument
from ..formatters.display_formatter import render_color_list
from ..utils.config_utils import load_config
from ..utils.output_utils import console

MONOCHROMATIC_LABELS = ("desaturated", "darker", "base", "saturated", "lighter")


def harmony_labels(kind: HarmonyKind) -> list[str]:
    """Row labels naming how each harmony color relates to the base."""
    if kind is HarmonyKind.MONOCHROMATIC:
        return list(MONOCHROMATIC_LABELS)
    return ["base" if offset == 0 else f"{offset:+d}°" for offset in HARMONY_HUE_OFFSETS[kind.value]]


def harmony(
    color: str = typer.Argument(..., help="Base color, e.g. #3b82f6"),
    kind: Optional[str] = typer.Option(
        None,
        "--kind",
        "-k",
        help="complementary, analogous, triadic, split-complementary, tetradic or monochromatic "
        "(defaults to defaults.harmony)",
    ),
    show_all: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Show every harmony kind",
    ),
) -> None:
    """Derive colors that harmonise with a base color.

    Examples:
        palette harmony #3b82f6
        palette harmony #3b82f6 --kind triadic
        palette harmony #3b82f6 --all
    """
    try:
        base = parse_hex_argument(color, "Base color")
        if show_all:
            kinds = list(HarmonyKind)
        else:
            kinds = [HarmonyKind.parse(kind if kind is not None else load_config().defaults.harmony)]
    except ValidationError as exc:
        console.print_validation_error(str(exc))
        raise typer.Exit(code=1) from exc

    for harmony_kind in kinds:
        colors = generate_harmony_colors(base, harmony_kind)
        render_color_list(
            console,
            f"{harmony_kind.value.replace('-', ' ').title()} of {base}",
            colors,
            labels=harmony_labels(harmony_kind),
        )


def register_command(app: typer.Typer) -> None:
    """Register harmony command with the main app."""
    app.command()(harmony)
