"""Constants and configuration values for palette studio.

- scale_curves: lightness ladders, saturation damping, sampling ranges
- ui_styles: table config, preview chrome and sample data
- messages: user-facing messages
"""

from __future__ import annotations

from palette_studio.constants.messages import ERROR_MESSAGES, SUCCESS_MESSAGES
from palette_studio.constants.scale_curves import (
    COLOR_SCALE_LIGHTNESS,
    CONTRAST_DARK,
    CONTRAST_LIGHT,
    CONTRAST_THRESHOLD,
    HARMONY_HUE_OFFSETS,
    LUMA_WEIGHTS,
    MONOCHROMATIC_LIGHTNESS_BOUNDS,
    MONOCHROMATIC_OFFSETS,
    NEUTRAL_SATURATION_CAP,
    NEUTRAL_SATURATION_FACTOR,
    NEUTRAL_SCALE_LIGHTNESS,
    RANDOM_COLOR_RANGES,
    SATURATION_DAMPING,
    SHADE_STEPS,
)
from palette_studio.constants.ui_styles import (
    PREVIEW_CHROME,
    SAMPLE_DATA,
    STATUS_FALLBACKS,
    TABLE_CONFIG,
)

__all__ = [
    "COLOR_SCALE_LIGHTNESS",
    "CONTRAST_DARK",
    "CONTRAST_LIGHT",
    "CONTRAST_THRESHOLD",
    "ERROR_MESSAGES",
    "HARMONY_HUE_OFFSETS",
    "LUMA_WEIGHTS",
    "MONOCHROMATIC_LIGHTNESS_BOUNDS",
    "MONOCHROMATIC_OFFSETS",
    "NEUTRAL_SATURATION_CAP",
    "NEUTRAL_SATURATION_FACTOR",
    "NEUTRAL_SCALE_LIGHTNESS",
    "PREVIEW_CHROME",
    "RANDOM_COLOR_RANGES",
    "SAMPLE_DATA",
    "SATURATION_DAMPING",
    "SHADE_STEPS",
    "STATUS_FALLBACKS",
    "SUCCESS_MESSAGES",
    "TABLE_CONFIG",
]
