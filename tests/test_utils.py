from __future__ import annotations

import pytest

from palette_studio.exceptions import InvalidColorError
from palette_studio.utils import normalize_hex, parse_hex_argument, validate_hex_color, validate_hsl


@pytest.mark.parametrize("value", ["#3b82f6", "#3B82F6", "#000000", "#ffffff"])
def test_validate_hex_color_accepts_six_digit_hex(value):
    validate_hex_color(value)


@pytest.mark.parametrize("value", ["3b82f6", "#3b82f", "#3b82f6a", "#3b82g6", "#fff", "#3b82f6\n", " #3b82f6"])
def test_validate_hex_color_rejects_malformed(value):
    with pytest.raises(InvalidColorError) as exc_info:
        validate_hex_color(value, "Brand color")

    assert exc_info.value.value == value
    assert "Brand color" in str(exc_info.value)


def test_validate_hex_color_rejects_empty():
    with pytest.raises(InvalidColorError, match="cannot be empty"):
        validate_hex_color("")


def test_normalize_hex_lowercases():
    assert normalize_hex("#3B82F6") == "#3b82f6"


@pytest.mark.parametrize("value", ["3B82F6", " #3b82f6 ", "#3b82F6"])
def test_parse_hex_argument_is_forgiving(value):
    assert parse_hex_argument(value) == "#3b82f6"


def test_parse_hex_argument_still_validates():
    with pytest.raises(InvalidColorError):
        parse_hex_argument("blue")


def test_validate_hsl_bounds():
    assert validate_hsl(360, 100, 0) == (360, 100, 0)

    with pytest.raises(InvalidColorError, match="Hue"):
        validate_hsl(361, 50, 50)
    with pytest.raises(InvalidColorError, match="Saturation"):
        validate_hsl(0, -1, 50)
    with pytest.raises(InvalidColorError, match="Lightness"):
        validate_hsl(0, 50, 101)
