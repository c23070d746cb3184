"""Palette slots of a design system: brand plus optional companions."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from .color_utils import generate_random_color
from .constants import STATUS_FALLBACKS
from .exceptions import PaletteStateError
from .models import STATUS_NAMES, Palette, PaletteName, ShadeKey
from .utils import normalize_hex

logger = logging.getLogger(__name__)

DEFAULT_BRAND_COLOR = "#3b82f6"

SlotName = Union[PaletteName, str]


def _slot(name: SlotName) -> PaletteName:
    try:
        return PaletteName(name)
    except ValueError as exc:
        valid = ", ".join(slot.value for slot in PaletteName)
        raise PaletteStateError(f"Unknown palette '{name}'. Valid palettes: {valid}") from exc


@dataclass(slots=True)
class PaletteState:
    """Holds the brand palette and the optional neutral and status palettes.

    Each slot stores a :class:`Palette` whose scale was derived from its base
    color. Changing a color replaces the whole palette, so a scale never
    drifts from its base.
    """

    brand_color: str = DEFAULT_BRAND_COLOR
    show_neutral: bool = False
    show_status: bool = False
    _slots: Dict[PaletteName, Palette] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self.brand_color = normalize_hex(self.brand_color)
        self._slots[PaletteName.BRAND] = Palette.from_base(PaletteName.BRAND.value, self.brand_color)

    @property
    def brand(self) -> Palette:
        return self._slots[PaletteName.BRAND]

    def get(self, name: SlotName) -> Optional[Palette]:
        """Return the palette in a slot, or None if the slot is empty."""
        return self._slots.get(_slot(name))

    def set_color(self, name: SlotName, color: str) -> Palette:
        """Pick a new base color for a slot.

        Args:
            name: Slot to update
            color: Hex color; validated and lowercased

        Returns:
            The newly derived palette

        Raises:
            InvalidColorError: If ``color`` is not a valid hex color
            PaletteStateError: If ``name`` is not a known slot
        """
        slot = _slot(name)
        color = normalize_hex(color)
        palette = Palette.from_base(slot.value, color, neutral=slot is PaletteName.NEUTRAL)
        self._slots[slot] = palette
        if slot is PaletteName.BRAND:
            self.brand_color = color
        logger.debug("Set %s palette to %s", slot.value, color)
        return palette

    def clear(self, name: SlotName) -> None:
        """Empty an optional slot. The brand slot cannot be cleared."""
        slot = _slot(name)
        if slot is PaletteName.BRAND:
            raise PaletteStateError("The brand palette cannot be removed")
        self._slots.pop(slot, None)
        logger.debug("Cleared %s palette", slot.value)

    def add_random(self, name: SlotName, rng: Optional[random.Random] = None) -> Palette:
        """Fill a slot with a randomly sampled base color."""
        return self.set_color(name, generate_random_color(rng))

    def randomize(self, rng: Optional[random.Random] = None) -> None:
        """Re-roll the brand color and every companion that is switched on."""
        self.add_random(PaletteName.BRAND, rng)
        if self.show_neutral:
            self.add_random(PaletteName.NEUTRAL, rng)
        if self.show_status:
            for status in STATUS_NAMES:
                self.add_random(status, rng)

    def palettes(self) -> List[Palette]:
        """Active palettes in display order (brand first)."""
        return [self._slots[slot] for slot in PaletteName if slot in self._slots]

    def status_color(self, name: SlotName, shade: ShadeKey) -> str:
        """Shade of a status palette, or the stock color when the slot is empty.

        Raises:
            PaletteStateError: If ``name`` is not a status slot or has no
                fallback for ``shade``
        """
        slot = _slot(name)
        if slot not in STATUS_NAMES:
            raise PaletteStateError(f"'{slot.value}' is not a status palette")

        palette = self._slots.get(slot)
        if palette is not None:
            return palette.scale[shade]

        fallbacks = STATUS_FALLBACKS[slot.value]
        if int(shade) not in fallbacks:
            raise PaletteStateError(f"No fallback {slot.value} color for shade {int(shade)}")
        return fallbacks[int(shade)]

    @classmethod
    def from_colors(
        cls,
        brand: Optional[str] = None,
        neutral: Optional[str] = None,
        success: Optional[str] = None,
        warning: Optional[str] = None,
        error: Optional[str] = None,
    ) -> "PaletteState":
        """Build a state from optional per-slot colors (CLI convenience)."""
        state = cls(brand_color=brand or DEFAULT_BRAND_COLOR)
        companions = {
            PaletteName.NEUTRAL: neutral,
            PaletteName.SUCCESS: success,
            PaletteName.WARNING: warning,
            PaletteName.ERROR: error,
        }
        for slot, color in companions.items():
            if color:
                state.set_color(slot, color)
        state.show_neutral = bool(neutral)
        state.show_status = any(companions[status] for status in STATUS_NAMES)
        return state


__all__ = ["DEFAULT_BRAND_COLOR", "PaletteState"]
