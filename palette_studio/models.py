"""Domain models shared across palette studio."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, Iterator, Union

from .constants import ERROR_MESSAGES
from .exceptions import InvalidHarmonyError, InvalidScaleError


class Shade(IntEnum):
    """The fixed scale positions, lower is lighter."""

    S50 = 50
    S100 = 100
    S200 = 200
    S300 = 300
    S400 = 400
    S500 = 500
    S600 = 600
    S700 = 700
    S800 = 800
    S900 = 900
    S950 = 950


class HarmonyKind(str, Enum):
    """Hue-rotation schemes relating several colors to one base."""

    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    SPLIT_COMPLEMENTARY = "split-complementary"
    TETRADIC = "tetradic"
    MONOCHROMATIC = "monochromatic"

    @classmethod
    def parse(cls, value: Union[str, "HarmonyKind"]) -> "HarmonyKind":
        """Resolve a user-supplied harmony name.

        Raises:
            InvalidHarmonyError: If ``value`` is not a known harmony.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            valid = ", ".join(kind.value for kind in cls)
            raise InvalidHarmonyError(
                f"{ERROR_MESSAGES['invalid_harmony']} '{value}'. Valid kinds: {valid}"
            ) from exc


class PaletteName(str, Enum):
    """Named palette slots of the design system."""

    BRAND = "brand"
    NEUTRAL = "neutral"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


STATUS_NAMES = (PaletteName.SUCCESS, PaletteName.WARNING, PaletteName.ERROR)


@dataclass(frozen=True, slots=True)
class HSLColor:
    """Hue in degrees, saturation and lightness in percent."""

    h: int
    s: int
    l: int  # noqa: E741 - conventional HSL component name

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.h, self.s, self.l)

    def to_dict(self) -> Dict[str, int]:
        """Serialise the color for JSON output."""

        return {"h": self.h, "s": self.s, "l": self.l}


ShadeKey = Union[Shade, int]


class ColorScale(Mapping):
    """Closed mapping from every :class:`Shade` to a hex color.

    The key set is fixed: construction fails unless exactly the 11 shade
    steps are supplied. Lookups accept either a ``Shade`` or its int value.
    """

    __slots__ = ("_colors",)

    def __init__(self, colors: Mapping[ShadeKey, str]) -> None:
        resolved: Dict[Shade, str] = {}
        for key, value in colors.items():
            try:
                shade = Shade(int(key))
            except (TypeError, ValueError) as exc:
                raise InvalidScaleError(f"'{key}' is not a scale step") from exc
            resolved[shade] = value

        missing = [shade.value for shade in Shade if shade not in resolved]
        if missing:
            raise InvalidScaleError(f"Color scale is missing steps: {missing}")

        self._colors = {shade: resolved[shade] for shade in Shade}

    def __getitem__(self, key: ShadeKey) -> str:
        try:
            return self._colors[Shade(int(key))]
        except (TypeError, ValueError) as exc:
            raise KeyError(key) from exc

    def __iter__(self) -> Iterator[Shade]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __repr__(self) -> str:
        body = ", ".join(f"{shade.value}: {color!r}" for shade, color in self._colors.items())
        return f"ColorScale({{{body}}})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorScale):
            return self._colors == other._colors
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._colors.items()))

    def to_dict(self) -> Dict[str, str]:
        """Return the scale with string keys, in shade order."""

        return {str(shade.value): color for shade, color in self._colors.items()}


@dataclass(frozen=True, slots=True)
class Palette:
    """A named base color and the scale derived from it.

    Build palettes with :meth:`from_base`; the scale is never set on its own.
    """

    name: str
    base_color: str
    scale: ColorScale = field(compare=False)
    neutral: bool = False

    @classmethod
    def from_base(cls, name: str, base_color: str, neutral: bool = False) -> "Palette":
        from .color_utils import generate_color_scale, generate_neutral_scale

        generator = generate_neutral_scale if neutral else generate_color_scale
        return cls(name=name, base_color=base_color, scale=generator(base_color), neutral=neutral)

    def with_base(self, base_color: str) -> "Palette":
        """Return a new palette for ``base_color`` with a freshly derived scale."""

        return Palette.from_base(self.name, base_color, neutral=self.neutral)

    def to_dict(self) -> Dict[str, object]:
        return {"name": self.name, "base_color": self.base_color, "scale": self.scale.to_dict()}


__all__ = [
    "ColorScale",
    "HSLColor",
    "HarmonyKind",
    "Palette",
    "PaletteName",
    "STATUS_NAMES",
    "Shade",
]
