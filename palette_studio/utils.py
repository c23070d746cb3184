"""Input validation helpers used at the edges of palette studio."""

from __future__ import annotations

import re
from typing import Tuple

from .constants import ERROR_MESSAGES
from .exceptions import InvalidColorError

__all__ = [
    "HEX_COLOR_PATTERN",
    "normalize_hex",
    "parse_hex_argument",
    "validate_hex_color",
    "validate_hsl",
]

HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


def validate_hex_color(value: str, name: str = "Color") -> None:
    """Validate a ``#RRGGBB`` color string.

    Args:
        value: The color to validate.
        name: Name of the field for error messages.

    Raises:
        InvalidColorError: If the value is not exactly ``#`` plus 6 hex digits.
    """
    if not value or not value.strip():
        raise InvalidColorError(f"{name} cannot be empty", value)

    if not HEX_COLOR_PATTERN.fullmatch(value):
        raise InvalidColorError(f"{name} '{value}' is invalid. {ERROR_MESSAGES['invalid_hex']}", value)


def normalize_hex(value: str) -> str:
    """Validate ``value`` and return its lowercase canonical form."""
    validate_hex_color(value)
    return value.lower()


def parse_hex_argument(value: str, name: str = "Color") -> str:
    """Normalize a hex color typed on the command line.

    Surrounding whitespace is stripped and a missing leading ``#`` is added,
    so ``3B82F6`` and ``#3b82f6`` are both accepted.

    Raises:
        InvalidColorError: If the value is still not a valid hex color.
    """
    value = (value or "").strip()
    if value and not value.startswith("#"):
        value = f"#{value}"
    validate_hex_color(value, name)
    return value.lower()


def validate_hsl(h: float, s: float, l: float) -> Tuple[float, float, float]:  # noqa: E741
    """Validate HSL components against the picker's slider ranges.

    Raises:
        InvalidColorError: If any component is outside its range.
    """
    if not 0 <= h <= 360:
        raise InvalidColorError(f"Hue {h} out of range. {ERROR_MESSAGES['invalid_hsl']}")
    if not 0 <= s <= 100:
        raise InvalidColorError(f"Saturation {s} out of range. {ERROR_MESSAGES['invalid_hsl']}")
    if not 0 <= l <= 100:
        raise InvalidColorError(f"Lightness {l} out of range. {ERROR_MESSAGES['invalid_hsl']}")
    return h, s, l
