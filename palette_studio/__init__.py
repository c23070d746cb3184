"""Palette studio: color scales, harmonies and design-system palettes."""

from .color_utils import (
    generate_color_scale,
    generate_harmony_colors,
    generate_neutral_scale,
    generate_random_color,
    get_contrast_color,
    hex_to_hsl,
    hsl_to_hex,
)
from .exceptions import (
    ConfigurationError,
    ExportError,
    InvalidColorError,
    InvalidHarmonyError,
    InvalidScaleError,
    PaletteError,
    PaletteStateError,
    ValidationError,
)
from .models import ColorScale, HarmonyKind, HSLColor, Palette, PaletteName, Shade
from .palette_state import PaletteState

__version__ = "0.1.0"

__all__ = [
    "ColorScale",
    "ConfigurationError",
    "ExportError",
    "HSLColor",
    "HarmonyKind",
    "InvalidColorError",
    "InvalidHarmonyError",
    "InvalidScaleError",
    "Palette",
    "PaletteError",
    "PaletteName",
    "PaletteState",
    "PaletteStateError",
    "Shade",
    "ValidationError",
    "generate_color_scale",
    "generate_harmony_colors",
    "generate_neutral_scale",
    "generate_random_color",
    "get_contrast_color",
    "hex_to_hsl",
    "hsl_to_hex",
]
