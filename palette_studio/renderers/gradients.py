"""Gradient swatch rendering."""
from __future__ import annotations

from typing import List, Sequence, Tuple

from ..constants import PREVIEW_CHROME
from ..models import ColorScale
from .base import RendererBase

# (from shade, to shade, label)
GRADIENT_PAIRS: Tuple[Tuple[int, int, str], ...] = (
    (500, 700, "Primary Deep"),
    (400, 600, "Primary Medium"),
    (300, 500, "Primary Light"),
    (600, 800, "Primary Dark"),
    (400, 800, "Primary Long"),
)

MULTI_STOP_GRADIENTS: Tuple[Tuple[Tuple[int, ...], str], ...] = (
    ((300, 500, 700), "Three Stop"),
    ((200, 400, 600, 800), "Four Stop"),
    ((100, 300, 500, 700, 900), "Five Stop"),
)

GRADIENT_DIRECTIONS: Tuple[Tuple[str, str], ...] = (
    ("135deg", "Diagonal"),
    ("to right", "Horizontal"),
    ("to bottom", "Vertical"),
    ("45deg", "Reverse Diagonal"),
)


class GradientRenderer:
    """Renders linear and radial gradients built from one scale."""

    @staticmethod
    def _swatch(background: str, height: int, caption: Sequence[str] = ()) -> List[str]:
        lines = [f'  <div style="height: {height}px; border-radius: 8px; background: {background};"></div>']
        if caption:
            spans = "".join(f"<span>{RendererBase.esc(text)}</span>" for text in caption)
            lines.append(
                f'  <div style="display: flex; justify-content: space-between; margin-top: 6px; '
                f'font-size: 0.75em; color: {PREVIEW_CHROME["muted"]};">{spans}</div>'
            )
        return lines

    @staticmethod
    def render_gradient_pairs(scale: ColorScale) -> List[str]:
        """Render the two-stop diagonal gradients."""
        lines = ['<div style="display: grid; grid-template-columns: repeat(auto-fill, minmax(220px, 1fr)); gap: 16px;">']
        for start, end, label in GRADIENT_PAIRS:
            lines.extend(RendererBase.open_card(label))
            lines.extend(GradientRenderer._swatch(
                f"linear-gradient(135deg, {scale[start]}, {scale[end]})",
                96,
                (scale[start], scale[end]),
            ))
            lines.extend(RendererBase.close_card())
        lines.append('</div>')
        return lines

    @staticmethod
    def render_multi_stop(scale: ColorScale) -> List[str]:
        """Render horizontal gradients with three to five stops."""
        lines = RendererBase.open_card("Multi-Stop Gradients")
        for shades, label in MULTI_STOP_GRADIENTS:
            colors = [scale[shade] for shade in shades]
            lines.append(f'  <p style="margin: 12px 0 6px 0; font-size: 0.9em; font-weight: 500;">{label}</p>')
            lines.extend(GradientRenderer._swatch(f"linear-gradient(to right, {', '.join(colors)})", 64, colors))
        lines.extend(RendererBase.close_card())
        return lines

    @staticmethod
    def render_directions(scale: ColorScale) -> List[str]:
        """Render the 400→700 gradient in each direction."""
        lines = RendererBase.open_card("Gradient Directions")
        lines.append('  <div style="display: grid; grid-template-columns: repeat(4, 1fr); gap: 16px;">')
        for angle, label in GRADIENT_DIRECTIONS:
            lines.append('  <div>')
            lines.append(f'  <p style="margin: 0 0 6px 0; text-align: center; font-size: 0.9em;">{label}</p>')
            lines.extend(GradientRenderer._swatch(f"linear-gradient({angle}, {scale[400]}, {scale[700]})", 80))
            lines.append('  </div>')
        lines.append('  </div>')
        lines.extend(RendererBase.close_card())
        return lines

    @staticmethod
    def render_radial(scale: ColorScale) -> List[str]:
        """Render circle, ellipse and closest-corner radial gradients."""
        radials = (
            ("Circle", f"radial-gradient(circle, {scale[300]}, {scale[600]})"),
            ("Ellipse", f"radial-gradient(ellipse at top, {scale[400]}, {scale[700]})"),
            (
                "Closest Corner",
                f"radial-gradient(circle closest-corner at 30% 30%, {scale[300]}, {scale[500]}, {scale[800]})",
            ),
        )
        lines = RendererBase.open_card("Radial Gradients")
        lines.append('  <div style="display: grid; grid-template-columns: repeat(3, 1fr); gap: 16px;">')
        for label, background in radials:
            lines.append('  <div>')
            lines.append(f'  <p style="margin: 0 0 6px 0; font-size: 0.9em; font-weight: 500;">{label}</p>')
            lines.extend(GradientRenderer._swatch(background, 128))
            lines.append('  </div>')
        lines.append('  </div>')
        lines.extend(RendererBase.close_card())
        return lines

    @staticmethod
    def render_all(scale: ColorScale) -> List[str]:
        lines: List[str] = []
        lines.extend(GradientRenderer.render_gradient_pairs(scale))
        lines.extend(GradientRenderer.render_multi_stop(scale))
        lines.extend(GradientRenderer.render_directions(scale))
        lines.extend(GradientRenderer.render_radial(scale))
        return lines


__all__ = ["GradientRenderer", "GRADIENT_PAIRS", "MULTI_STOP_GRADIENTS", "GRADIENT_DIRECTIONS"]
