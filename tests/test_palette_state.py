"""Tests for the palette slot state."""

from __future__ import annotations

import random

import pytest

from palette_studio.color_utils import generate_color_scale, generate_neutral_scale
from palette_studio.constants import STATUS_FALLBACKS
from palette_studio.exceptions import InvalidColorError, PaletteStateError
from palette_studio.models import PaletteName
from palette_studio.palette_state import DEFAULT_BRAND_COLOR, PaletteState


def test_default_state_has_only_brand():
    state = PaletteState()

    assert state.brand_color == DEFAULT_BRAND_COLOR
    assert [palette.name for palette in state.palettes()] == ["brand"]
    assert state.brand.scale == generate_color_scale(DEFAULT_BRAND_COLOR)
    assert state.get("neutral") is None


def test_brand_color_is_normalized():
    state = PaletteState(brand_color="#3B82F6")
    assert state.brand.base_color == "#3b82f6"


def test_invalid_brand_color_is_rejected():
    with pytest.raises(InvalidColorError):
        PaletteState(brand_color="blue")


def test_set_color_rebuilds_brand_scale():
    state = PaletteState()
    palette = state.set_color(PaletteName.BRAND, "#EF4444")

    assert palette.base_color == "#ef4444"
    assert state.brand_color == "#ef4444"
    assert state.brand.scale == generate_color_scale("#ef4444")


def test_neutral_slot_uses_neutral_scale():
    state = PaletteState()
    palette = state.set_color("neutral", "#64748b")

    assert palette.neutral is True
    assert palette.scale == generate_neutral_scale("#64748b")


def test_palettes_follow_slot_order():
    state = PaletteState()
    state.set_color("error", "#ef4444")
    state.set_color("neutral", "#64748b")
    state.set_color("success", "#22c55e")

    assert [palette.name for palette in state.palettes()] == ["brand", "neutral", "success", "error"]


def test_clear_removes_optional_slot():
    state = PaletteState()
    state.set_color("warning", "#f59e0b")
    state.clear("warning")

    assert state.get("warning") is None
    # Clearing an empty slot is a no-op
    state.clear("warning")


def test_brand_cannot_be_cleared():
    with pytest.raises(PaletteStateError):
        PaletteState().clear("brand")


def test_unknown_slot_is_rejected():
    with pytest.raises(PaletteStateError, match="Valid palettes"):
        PaletteState().set_color("accent", "#3b82f6")


def test_invalid_color_leaves_slot_untouched():
    state = PaletteState()
    state.set_color("success", "#22c55e")

    with pytest.raises(InvalidColorError):
        state.set_color("success", "#22c55")

    assert state.get("success").base_color == "#22c55e"


def test_status_color_falls_back_to_stock_colors():
    state = PaletteState()

    assert state.status_color("success", 500) == STATUS_FALLBACKS["success"][500]
    assert state.status_color(PaletteName.ERROR, 800) == STATUS_FALLBACKS["error"][800]


def test_status_color_uses_picked_palette():
    state = PaletteState()
    state.set_color("success", "#10b981")

    assert state.status_color("success", 500) == generate_color_scale("#10b981")[500]
    # Shades without a stock fallback are available once a color is picked
    assert state.status_color("success", 50) == generate_color_scale("#10b981")[50]


def test_status_color_rejects_non_status_and_missing_fallback():
    state = PaletteState()

    with pytest.raises(PaletteStateError):
        state.status_color("brand", 500)
    with pytest.raises(PaletteStateError):
        state.status_color("warning", 50)


def test_add_random_is_reproducible():
    first = PaletteState().add_random("success", random.Random(3))
    second = PaletteState().add_random("success", random.Random(3))

    assert first.base_color == second.base_color


def test_randomize_respects_toggles():
    state = PaletteState(show_status=True)
    state.randomize(random.Random(11))

    assert [palette.name for palette in state.palettes()] == ["brand", "success", "warning", "error"]

    state.show_neutral = True
    state.randomize(random.Random(11))
    assert state.get("neutral") is not None
    assert state.get("neutral").neutral is True


def test_from_colors_sets_toggles():
    state = PaletteState.from_colors(brand="#8b5cf6", neutral="#64748b", warning="#f59e0b")

    assert state.brand_color == "#8b5cf6"
    assert state.show_neutral is True
    assert state.show_status is True
    assert [palette.name for palette in state.palettes()] == ["brand", "neutral", "warning"]


def test_from_colors_defaults_brand():
    state = PaletteState.from_colors()

    assert state.brand_color == DEFAULT_BRAND_COLOR
    assert state.show_neutral is False
    assert state.show_status is False
