"""Color scale swatch rendering."""
from __future__ import annotations

from typing import Iterable, List

from ..color_utils import get_contrast_color
from ..constants import PREVIEW_CHROME
from ..models import ColorScale, Palette
from .base import RendererBase


class ScaleRenderer:
    """Renders scales as rows of labelled swatches."""

    @staticmethod
    def render_scale(scale: ColorScale, name: str, swatch_size: int = 48) -> List[str]:
        """Render one 11-step scale.

        Each swatch shows its shade number and hex value in the contrast
        color picked for its background.

        Args:
            scale: Scale to render
            name: Palette name shown above the row (escaped)
            swatch_size: Swatch height in pixels

        Returns:
            HTML lines
        """
        lines = [
            '<div style="margin: 12px 0;">',
            f'  <h3 style="margin: 0 0 8px 0; font-size: 0.95em; text-transform: capitalize; '
            f'color: {PREVIEW_CHROME["foreground"]};">{RendererBase.esc(name)}</h3>',
            '  <div style="display: grid; grid-template-columns: repeat(11, 1fr); gap: 4px;">',
        ]

        for shade, color in scale.items():
            text_color = get_contrast_color(color)
            lines.append(
                f'    <div title="{color}" style="background: {color}; color: {text_color}; '
                f'height: {swatch_size}px; border-radius: 6px; display: flex; flex-direction: column; '
                'align-items: center; justify-content: center; font-size: 10px; font-family: monospace;">'
            )
            lines.append(f'      <span style="font-weight: 600;">{shade.value}</span>')
            lines.append(f'      <span>{color}</span>')
            lines.append('    </div>')

        lines.append('  </div>')
        lines.append('</div>')
        return lines

    @staticmethod
    def render_palettes(palettes: Iterable[Palette], swatch_size: int = 48) -> List[str]:
        """Render every palette's scale inside one card."""
        lines = RendererBase.open_card("Color Scales", "Generated color palette")
        for palette in palettes:
            lines.extend(ScaleRenderer.render_scale(palette.scale, palette.name, swatch_size))
        lines.extend(RendererBase.close_card())
        return lines


__all__ = ["ScaleRenderer"]
