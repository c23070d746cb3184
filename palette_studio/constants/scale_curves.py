"""Fixed curves and ranges used by the color scale generators."""

from __future__ import annotations

# =============================================================================
# Scale Steps
# =============================================================================

SHADE_STEPS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

# Lightness ladder for brand and status scales (one entry per shade step)
COLOR_SCALE_LIGHTNESS = (97, 93, 85, 75, 65, 55, 45, 35, 25, 17, 10)

# Neutral ladder is compressed toward the light end for text and surfaces
NEUTRAL_SCALE_LIGHTNESS = (98, 96, 90, 82, 70, 58, 46, 36, 26, 18, 10)

# =============================================================================
# Saturation Damping
# =============================================================================

# (lightness lower bound, saturation factor, saturation floor), checked in
# order with a strict ``l > bound`` comparison. The last row catches the rest.
SATURATION_DAMPING = (
    (90, 0.3, 5),
    (80, 0.5, 10),
    (70, 0.7, 15),
    (60, 0.85, 20),
    (40, 1.0, 0),
    (30, 0.9, 20),
    (20, 0.8, 15),
    (None, 0.7, 10),
)

NEUTRAL_SATURATION_FACTOR = 0.15
NEUTRAL_SATURATION_CAP = 8

# =============================================================================
# Random Sampling
# =============================================================================

# Inclusive integer bounds
RANDOM_COLOR_RANGES = {
    'hue': (0, 359),
    'saturation': (50, 89),
    'lightness': (40, 69),
}

# =============================================================================
# Contrast
# =============================================================================

# ITU-R BT.601 luma weights
LUMA_WEIGHTS = (0.299, 0.587, 0.114)
CONTRAST_THRESHOLD = 0.5
CONTRAST_DARK = "#000000"
CONTRAST_LIGHT = "#ffffff"

# =============================================================================
# Harmonies
# =============================================================================

HARMONY_HUE_OFFSETS = {
    'complementary': (0, 180),
    'analogous': (-30, 0, 30),
    'triadic': (0, 120, 240),
    'split-complementary': (0, 150, 210),
    'tetradic': (0, 90, 180, 270),
}

# (saturation delta, lightness delta) around the base color
MONOCHROMATIC_OFFSETS = ((-30, 0), (0, -20), (0, 0), (20, 0), (0, 20))
MONOCHROMATIC_LIGHTNESS_BOUNDS = (10, 90)
