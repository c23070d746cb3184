"""Color-space conversion and palette generation.

Every function here is a pure function of its arguments except
:func:`generate_random_color`. Inputs are trusted: hex strings are expected
to be validated at the boundary (see :mod:`palette_studio.utils`) and
malformed values produce garbage rather than an error.
"""

from __future__ import annotations

import logging
import math
import random
from typing import List, Optional, Sequence, Tuple, Union

from .constants import (
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
)
from .models import ColorScale, HarmonyKind, HSLColor, Shade

logger = logging.getLogger(__name__)

__all__ = [
    "damp_saturation",
    "generate_color_scale",
    "generate_harmony_colors",
    "generate_neutral_scale",
    "generate_random_color",
    "get_contrast_color",
    "hex_to_hsl",
    "hex_to_rgb",
    "hsl_to_hex",
    "neutral_saturation",
    "relative_luma",
]


def _round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Split ``#rrggbb`` into three 8-bit channel values."""
    return (
        int(hex_color[1:3], 16),
        int(hex_color[3:5], 16),
        int(hex_color[5:7], 16),
    )


def hex_to_hsl(hex_color: str) -> HSLColor:
    """Convert a hex color to integer HSL.

    Args:
        hex_color: Color in ``#rrggbb`` form (either case)

    Returns:
        HSLColor with hue in [0, 360), saturation and lightness in [0, 100]
    """
    r, g, b = (channel / 255 for channel in hex_to_rgb(hex_color))

    high = max(r, g, b)
    low = min(r, g, b)
    h = 0.0
    s = 0.0
    lightness = (high + low) / 2

    if high != low:
        d = high - low
        s = d / (2 - high - low) if lightness > 0.5 else d / (high + low)
        if high == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif high == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return HSLColor(
        h=_round_half_up(h * 360) % 360,
        s=_round_half_up(s * 100),
        l=_round_half_up(lightness * 100),
    )


def hsl_to_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    """Convert HSL to a lowercase ``#rrggbb`` string.

    Args:
        h: Hue in degrees
        s: Saturation in percent
        l: Lightness in percent

    Returns:
        Hex color string
    """
    s /= 100
    l /= 100
    a = s * min(l, 1 - l)

    def channel(n: int) -> str:
        k = (n + h / 30) % 12
        value = l - a * max(-1, min(k - 3, 9 - k, 1))
        return f"{min(255, max(0, _round_half_up(255 * value))):02x}"

    # f(8) lands on green and f(4) on blue
    return f"#{channel(0)}{channel(8)}{channel(4)}"


def damp_saturation(saturation: float, lightness: float) -> float:
    """Reduce saturation toward the light and dark ends of a scale."""
    for bound, factor, floor in SATURATION_DAMPING:
        if bound is None or lightness > bound:
            break
    return max(saturation * factor, floor)


def neutral_saturation(saturation: float) -> float:
    """Collapse a seed saturation into the single neutral saturation."""
    return min(saturation * NEUTRAL_SATURATION_FACTOR, NEUTRAL_SATURATION_CAP)


def _build_scale(hue: int, steps: Sequence[Tuple[float, float]]) -> ColorScale:
    return ColorScale(
        {shade: hsl_to_hex(hue, sat, light) for shade, (sat, light) in zip(Shade, steps)}
    )


def generate_color_scale(base_color: str) -> ColorScale:
    """Derive the 11-step scale for a brand or status color.

    Only hue and saturation of ``base_color`` carry over; each step gets its
    lightness from the fixed ladder and a damped saturation.
    """
    hsl = hex_to_hsl(base_color)
    steps = [(damp_saturation(hsl.s, light), light) for light in COLOR_SCALE_LIGHTNESS]
    return _build_scale(hsl.h, steps)


def generate_neutral_scale(base_color: str) -> ColorScale:
    """Derive a near-gray scale tinted with the hue of ``base_color``."""
    hsl = hex_to_hsl(base_color)
    saturation = neutral_saturation(hsl.s)
    steps = [(saturation, light) for light in NEUTRAL_SCALE_LIGHTNESS]
    return _build_scale(hsl.h, steps)


def generate_random_color(rng: Optional[random.Random] = None) -> str:
    """Sample a clearly chromatic color.

    Saturation and lightness are drawn from narrowed ranges so the result is
    never close to white, black or gray.

    Args:
        rng: Optional random source; the ``random`` module is used otherwise

    Returns:
        Hex color string
    """
    source = rng if rng is not None else random
    h = source.randint(*RANDOM_COLOR_RANGES['hue'])
    s = source.randint(*RANDOM_COLOR_RANGES['saturation'])
    l = source.randint(*RANDOM_COLOR_RANGES['lightness'])  # noqa: E741
    return hsl_to_hex(h, s, l)


def relative_luma(hex_color: str) -> float:
    """BT.601 luma in [0, 1]. Not WCAG relative luminance."""
    r, g, b = hex_to_rgb(hex_color)
    wr, wg, wb = LUMA_WEIGHTS
    return (wr * r + wg * g + wb * b) / 255


def get_contrast_color(hex_color: str) -> str:
    """Pick black or white text for a background color."""
    return CONTRAST_DARK if relative_luma(hex_color) > CONTRAST_THRESHOLD else CONTRAST_LIGHT


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def generate_harmony_colors(
    base_color: str,
    harmony: Union[HarmonyKind, str],
) -> List[str]:
    """Derive colors related to ``base_color`` by a harmony scheme.

    Saturation and lightness stay at the base color's own values for the
    hue rotations. An unrecognised harmony returns ``[base_color]``.

    Args:
        base_color: Seed color in hex form
        harmony: A :class:`HarmonyKind` or its string value

    Returns:
        Ordered list of hex colors
    """
    hsl = hex_to_hsl(base_color)
    h, s, l = hsl.as_tuple()  # noqa: E741
    kind = harmony.value if isinstance(harmony, HarmonyKind) else harmony

    if kind == HarmonyKind.MONOCHROMATIC.value:
        low, high = MONOCHROMATIC_LIGHTNESS_BOUNDS
        colors = []
        for ds, dl in MONOCHROMATIC_OFFSETS:
            if ds == 0 and dl == 0:
                colors.append(base_color)
            else:
                # only a shifted lightness is bounded
                light = _clamp(l + dl, low, high) if dl else l
                colors.append(hsl_to_hex(h, _clamp(s + ds, 0, 100), light))
        return colors

    offsets = HARMONY_HUE_OFFSETS.get(kind)
    if offsets is None:
        # TODO: surface unknown kinds as InvalidHarmonyError once callers stop relying on the fallback
        logger.debug("Unknown harmony %r, returning base color only", harmony)
        return [base_color]

    colors = []
    for offset in offsets:
        if offset == 0 and kind != HarmonyKind.ANALOGOUS.value:
            colors.append(base_color)
        else:
            colors.append(hsl_to_hex((h + offset) % 360, s, l))
    return colors
