"""Single-color commands: conversion, contrast and random sampling."""

from __future__ import annotations

import random
from typing import List, Optional

import typer

from ...color_utils import generate_random_color, get_contrast_color, hex_to_hsl, hsl_to_hex
from ...exceptions import InvalidColorError
from ...utils import parse_hex_argument, validate_hsl
from ..formatters.display_formatter import render_color_list, render_contrast, render_conversion
from ..utils.config_utils import load_config
from ..utils.output_utils import console


def _parse_hsl(values: List[str]) -> tuple[float, float, float]:
    try:
        h, s, l = (float(value.rstrip("%")) for value in values)  # noqa: E741
    except ValueError as exc:
        raise InvalidColorError(f"HSL values must be numbers, got: {' '.join(values)}") from exc
    return validate_hsl(h, s, l)


def convert(
    values: List[str] = typer.Argument(
        ...,
        help="A hex color (#3b82f6) or three HSL numbers (217 91 60)",
        metavar="HEX | H S L",
    ),
) -> None:
    """Convert between hex and HSL.

    Examples:
        palette convert #3b82f6
        palette convert 217 91 60
    """
    try:
        if len(values) == 1:
            hex_color = parse_hex_argument(values[0])
            hsl = hex_to_hsl(hex_color)
            render_conversion(console, hex_color, hsl.h, hsl.s, hsl.l)
        elif len(values) == 3:
            h, s, l = _parse_hsl(values)  # noqa: E741
            hex_color = hsl_to_hex(h, s, l)
            render_conversion(console, hex_color, h, s, l)
        else:
            console.print_validation_error(
                f"Expected one hex color or three HSL values, got {len(values)} values"
            )
            raise typer.Exit(code=1)
    except InvalidColorError as exc:
        console.print_validation_error(str(exc))
        raise typer.Exit(code=1) from exc


def contrast(
    color: str = typer.Argument(..., help="Background color, e.g. #3b82f6"),
) -> None:
    """Pick black or white text for a background color."""
    try:
        background = parse_hex_argument(color, "Background color")
    except InvalidColorError as exc:
        console.print_validation_error(str(exc))
        raise typer.Exit(code=1) from exc

    render_contrast(console, background, get_contrast_color(background))


def random_colors(
    count: Optional[int] = typer.Option(
        None,
        "--count",
        "-c",
        help="Number of colors to sample (defaults to defaults.random_count)",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed for reproducible sampling",
    ),
) -> None:
    """Sample vivid random colors.

    Examples:
        palette random
        palette random --count 3 --seed 42
    """
    if count is None:
        count = load_config().defaults.random_count
    if count <= 0:
        console.print_validation_error(f"--count must be positive, got {count}")
        raise typer.Exit(code=1)

    rng = random.Random(seed) if seed is not None else None
    colors = [generate_random_color(rng) for _ in range(count)]
    render_color_list(console, "Random colors", colors)


def register_commands(app: typer.Typer) -> None:
    """Register single-color commands with the main app."""
    app.command()(convert)
    app.command()(contrast)
    app.command(name="random")(random_colors)
