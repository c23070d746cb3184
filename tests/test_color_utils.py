"""Tests for color conversion and palette generation."""

from __future__ import annotations

import random

import pytest

from palette_studio.color_utils import (
    damp_saturation,
    generate_color_scale,
    generate_harmony_colors,
    generate_neutral_scale,
    generate_random_color,
    get_contrast_color,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    neutral_saturation,
)
from palette_studio.models import ColorScale, HarmonyKind, HSLColor, Shade
from palette_studio.utils import HEX_COLOR_PATTERN


def _hue_distance(a: int, b: int) -> int:
    diff = abs(a - b) % 360
    return min(diff, 360 - diff)


def test_hex_to_hsl_known_value():
    assert hex_to_hsl("#3b82f6") == HSLColor(217, 91, 60)


def test_hex_to_hsl_accepts_uppercase():
    assert hex_to_hsl("#3B82F6") == hex_to_hsl("#3b82f6")


@pytest.mark.parametrize(
    "hex_color, expected",
    [
        ("#000000", (0, 0, 0)),
        ("#ffffff", (0, 0, 100)),
        ("#808080", (0, 0, 50)),
        ("#ff0000", (0, 100, 50)),
        ("#00ff00", (120, 100, 50)),
        ("#0000ff", (240, 100, 50)),
    ],
)
def test_hex_to_hsl_reference_colors(hex_color, expected):
    assert hex_to_hsl(hex_color).as_tuple() == expected


def test_hsl_to_hex_known_value():
    assert hsl_to_hex(217, 91, 55) == "#2474f5"


def test_hsl_to_hex_wraps_hue():
    assert hsl_to_hex(360, 100, 50) == "#ff0000"


def test_hsl_to_hex_clamps_channels():
    color = hsl_to_hex(0, 150, 50)
    assert HEX_COLOR_PATTERN.fullmatch(color)
    assert color == "#ff0000"


@pytest.mark.parametrize(
    "hex_color",
    ["#000000", "#ffffff", "#808080", "#ff0000", "#00ff00", "#0000ff", "#ffff00", "#00ffff", "#ff00ff"],
)
def test_round_trip_is_exact_for_reference_colors(hex_color):
    hsl = hex_to_hsl(hex_color)
    assert hsl_to_hex(hsl.h, hsl.s, hsl.l) == hex_color


@pytest.mark.parametrize("hex_color", ["#3b82f6", "#123456", "#abcdef", "#7f7f7f", "#010203", "#fefdfc"])
def test_round_trip_stays_close(hex_color):
    """Integer HSL loses precision, but never more than a few channel steps."""

    hsl = hex_to_hsl(hex_color)
    restored = hex_to_rgb(hsl_to_hex(hsl.h, hsl.s, hsl.l))
    for original, channel in zip(hex_to_rgb(hex_color), restored):
        assert abs(original - channel) <= 6


def test_color_scale_has_every_shade():
    scale = generate_color_scale("#3b82f6")

    assert isinstance(scale, ColorScale)
    assert list(scale) == list(Shade)
    assert all(HEX_COLOR_PATTERN.fullmatch(color) for color in scale.values())


def test_color_scale_500_uses_base_saturation():
    scale = generate_color_scale("#3b82f6")
    assert scale[500] == hsl_to_hex(217, 91, 55)
    assert scale[Shade.S500] == "#2474f5"


def test_color_scale_lightness_decreases():
    scale = generate_color_scale("#3b82f6")
    lightness = [hex_to_hsl(color).l for color in scale.values()]
    assert lightness == sorted(lightness, reverse=True)
    assert lightness[0] > 90
    assert lightness[-1] < 15


def test_color_scale_preserves_hue_in_mid_range():
    scale = generate_color_scale("#3b82f6")
    for shade in (200, 300, 400, 500, 600, 700, 800, 900):
        assert _hue_distance(hex_to_hsl(scale[shade]).h, 217) <= 2


def test_color_scale_ignores_base_lightness():
    assert generate_color_scale("#3b82f6") == generate_color_scale(hsl_to_hex(217, 91, 30))


def test_damp_saturation_by_band():
    assert damp_saturation(80, 97) == pytest.approx(24)
    assert damp_saturation(10, 97) == 5
    assert damp_saturation(80, 55) == 80
    assert damp_saturation(80, 10) == pytest.approx(56)
    assert damp_saturation(5, 0) == 10


def test_neutral_scale_is_desaturated():
    for saturation in range(0, 101):
        assert neutral_saturation(saturation) <= 8

    scale = generate_neutral_scale("#3b82f6")
    assert scale[500] == hsl_to_hex(217, 8, 58)
    assert hex_to_hsl(scale[500]).s <= 8


def test_neutral_scale_of_gray_is_gray():
    scale = generate_neutral_scale("#808080")
    for color in scale.values():
        r, g, b = hex_to_rgb(color)
        assert r == g == b


def test_random_color_stays_in_vivid_range():
    rng = random.Random(1234)
    for _ in range(10_000):
        color = generate_random_color(rng)
        assert HEX_COLOR_PATTERN.fullmatch(color)
        hsl = hex_to_hsl(color)
        assert 50 <= hsl.s <= 90
        assert 40 <= hsl.l <= 70


def test_random_color_is_reproducible_with_seed():
    first = [generate_random_color(random.Random(7)) for _ in range(3)]
    second = [generate_random_color(random.Random(7)) for _ in range(3)]
    assert first == second


def test_random_color_without_rng_uses_module_random():
    assert HEX_COLOR_PATTERN.fullmatch(generate_random_color())


@pytest.mark.parametrize(
    "background, expected",
    [
        ("#ffffff", "#000000"),
        ("#000000", "#ffffff"),
        ("#808080", "#000000"),
        ("#ffff00", "#000000"),
        ("#3b82f6", "#ffffff"),
        ("#000080", "#ffffff"),
    ],
)
def test_contrast_color(background, expected):
    assert get_contrast_color(background) == expected


def test_complementary_harmony():
    assert generate_harmony_colors("#ff0000", HarmonyKind.COMPLEMENTARY) == ["#ff0000", "#00ffff"]


def test_triadic_harmony_accepts_string_kind():
    assert generate_harmony_colors("#ff0000", "triadic") == ["#ff0000", "#00ff00", "#0000ff"]


def test_analogous_harmony_surrounds_base():
    assert generate_harmony_colors("#ff0000", "analogous") == ["#ff0080", "#ff0000", "#ff8000"]


def test_harmony_sizes():
    expected = {
        HarmonyKind.COMPLEMENTARY: 2,
        HarmonyKind.ANALOGOUS: 3,
        HarmonyKind.TRIADIC: 3,
        HarmonyKind.SPLIT_COMPLEMENTARY: 3,
        HarmonyKind.TETRADIC: 4,
        HarmonyKind.MONOCHROMATIC: 5,
    }
    for kind, size in expected.items():
        assert len(generate_harmony_colors("#3b82f6", kind)) == size


def test_harmony_keeps_base_color_verbatim():
    for kind in ("complementary", "triadic", "split-complementary", "tetradic", "monochromatic"):
        colors = generate_harmony_colors("#3B82F6", kind)
        assert "#3B82F6" in colors


def test_monochromatic_harmony_varies_saturation_and_lightness():
    assert generate_harmony_colors("#ff0000", HarmonyKind.MONOCHROMATIC) == [
        "#d92626",
        "#990000",
        "#ff0000",
        "#ff0000",
        "#ff6666",
    ]


def test_rotated_harmonies_keep_saturation_and_lightness():
    base = hex_to_hsl("#3b82f6")
    for color in generate_harmony_colors("#3b82f6", "tetradic")[1:]:
        hsl = hex_to_hsl(color)
        assert abs(hsl.s - base.s) <= 2
        assert abs(hsl.l - base.l) <= 1


def test_unknown_harmony_returns_base_only():
    """Unknown kinds fall back to the base color instead of raising.

    This silent fallback is deliberate for now; whether it should raise
    InvalidHarmonyError is an open design question.
    """

    assert generate_harmony_colors("#3b82f6", "pentadic") == ["#3b82f6"]


@pytest.mark.parametrize(
    "base, desaturated, saturated",
    [
        ("#ffe6e6", "#fbe9e9", "#ffe6e6"),
        ("#1a0000", "#160404", "#1a0000"),
    ],
)
def test_monochromatic_keeps_base_lightness_for_saturation_variants(base, desaturated, saturated):
    colors = generate_harmony_colors(base, HarmonyKind.MONOCHROMATIC)

    assert colors[0] == desaturated
    assert colors[3] == saturated
    assert hex_to_hsl(colors[0]).l == hex_to_hsl(base).l


def test_monochromatic_bounds_shifted_lightness():
    light = generate_harmony_colors("#ffe6e6", "monochromatic")
    dark = generate_harmony_colors("#1a0000", "monochromatic")

    assert hex_to_hsl(light[4]).l == 90
    assert hex_to_hsl(dark[1]).l == 10


HARMONY_SEEDS = ["#3b82f6", "#22c55e", "#f59e0b", "#8b5cf6", "#ec4899", "#14b8a6", "#b45309", "#4f46e5"]


@pytest.mark.parametrize("seed", HARMONY_SEEDS + [generate_random_color(random.Random(n)) for n in range(25)])
@pytest.mark.parametrize(
    "kind, offsets",
    [
        ("complementary", (0, 180)),
        ("triadic", (0, 120, 240)),
        ("split-complementary", (0, 150, 210)),
        ("tetradic", (0, 90, 180, 270)),
    ],
)
def test_rotated_harmony_hues_sit_at_fixed_offsets(seed, kind, offsets):
    base_hue = hex_to_hsl(seed).h
    colors = generate_harmony_colors(seed, kind)

    assert len(colors) == len(offsets)
    for color, offset in zip(colors, offsets):
        assert _hue_distance(hex_to_hsl(color).h, (base_hue + offset) % 360) <= 1
