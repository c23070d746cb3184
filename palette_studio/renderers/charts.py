"""Chart preview rendering (bars, lines, donut) in palette colors."""
from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from ..constants import PREVIEW_CHROME, SAMPLE_DATA
from ..models import PaletteName
from ..palette_state import PaletteState
from .base import RendererBase


class ChartRenderer:
    """Renders sample charts so a palette can be judged on data views."""

    @staticmethod
    def chart_colors(state: PaletteState) -> List[str]:
        """Series colors: five brand shades, then success, warning, error."""
        brand = state.brand.scale
        return [
            brand[500],
            brand[400],
            brand[600],
            brand[300],
            brand[700],
            state.status_color(PaletteName.SUCCESS, 500),
            state.status_color(PaletteName.WARNING, 500),
            state.status_color(PaletteName.ERROR, 500),
        ]

    @staticmethod
    def render_bar_chart(colors: Sequence[str], values: Sequence[int] = SAMPLE_DATA['bars']) -> List[str]:
        """Vertical bars labelled A, B, C, ... (values are percentages)."""
        lines = RendererBase.open_card("Bar Chart", "Vertical bar chart visualization")
        lines.append('  <div style="display: flex; align-items: flex-end; justify-content: space-between; gap: 8px; height: 256px;">')
        for idx, value in enumerate(values):
            color = colors[idx % len(colors)]
            lines.append('    <div style="flex: 1; display: flex; flex-direction: column; align-items: center; justify-content: flex-end; gap: 4px; height: 100%;">')
            lines.append(f'      <div style="width: 100%; height: {value}%; background: {color}; border-radius: 6px 6px 0 0;"></div>')
            lines.append(f'      <span style="font-size: 0.75em; color: {PREVIEW_CHROME["muted"]};">{chr(65 + idx)}</span>')
            lines.append('    </div>')
        lines.append('  </div>')
        lines.extend(RendererBase.close_card())
        return lines

    @staticmethod
    def render_horizontal_bars(colors: Sequence[str], values: Sequence[int] = SAMPLE_DATA['bars'][:6]) -> List[str]:
        """Horizontal progress-style bars with percentage labels."""
        lines = RendererBase.open_card("Horizontal Bar Chart", "Side-to-side comparison")
        for idx, value in enumerate(values):
            color = colors[idx % len(colors)]
            lines.append('  <div style="display: flex; align-items: center; gap: 8px; margin: 10px 0;">')
            lines.append(f'    <span style="width: 48px; font-size: 0.75em; color: {PREVIEW_CHROME["muted"]};">Item {idx + 1}</span>')
            lines.append(f'    <div style="flex: 1; height: 28px; background: {PREVIEW_CHROME["muted_surface"]}; border-radius: 9999px; overflow: hidden;">')
            lines.append(f'      <div style="width: {value}%; height: 100%; background: {color}; border-radius: 9999px;"></div>')
            lines.append('    </div>')
            lines.append(f'    <span style="width: 36px; text-align: right; font-size: 0.75em; font-weight: 500;">{value}%</span>')
            lines.append('  </div>')
        lines.extend(RendererBase.close_card())
        return lines

    @staticmethod
    def _line_points(values: Sequence[float], width: int, height: int) -> List[Tuple[float, float]]:
        if len(values) < 2:
            return [(0.0, height - value) for value in values]
        step = width / (len(values) - 1)
        return [(round(idx * step, 2), round(height - value, 2)) for idx, value in enumerate(values)]

    @staticmethod
    def _path(points: Sequence[Tuple[float, float]]) -> str:
        return "M " + " L ".join(f"{x} {y}" for x, y in points)

    @staticmethod
    def render_line_chart(
        color: str,
        values: Sequence[int] = SAMPLE_DATA['line'],
        width: int = 300,
        height: int = 150,
    ) -> List[str]:
        """SVG line with a fading area fill and point markers."""
        if not values:
            return []

        points = ChartRenderer._line_points(values, width, height)
        path_d = ChartRenderer._path(points)
        area_d = f"{path_d} L {width} {height} L 0 {height} Z"

        lines = RendererBase.open_card("Line Chart", "Trend visualization over time")
        lines.append(f'  <svg width="100%" height="256" viewBox="0 0 {width} {height}" preserveAspectRatio="none">')
        lines.append('    <defs>')
        lines.append('      <linearGradient id="lineGradient" x1="0%" y1="0%" x2="0%" y2="100%">')
        lines.append(f'        <stop offset="0%" stop-color="{color}" stop-opacity="0.3" />')
        lines.append(f'        <stop offset="100%" stop-color="{color}" stop-opacity="0" />')
        lines.append('      </linearGradient>')
        lines.append('    </defs>')
        lines.append(f'    <path d="{area_d}" fill="url(#lineGradient)"/>')
        lines.append(f'    <path d="{path_d}" fill="none" stroke="{color}" stroke-width="2"/>')
        for x, y in points:
            lines.append(f'    <circle cx="{x}" cy="{y}" r="4" fill="{color}"/>')
        lines.append('  </svg>')
        lines.extend(RendererBase.close_card())
        return lines

    @staticmethod
    def render_multi_line_chart(
        series: Sequence[Tuple[str, str]],
        values: Sequence[int] = SAMPLE_DATA['line'],
        width: int = 300,
        height: int = 150,
    ) -> List[str]:
        """Three scaled copies of the sample series, one per color.

        Args:
            series: ``(label, color)`` pairs; the n-th series is scaled by
                1.0, 0.7, 0.5 for the first three and 0.5 after that
            values: Base data series
        """
        factors = (1.0, 0.7, 0.5)
        lines = RendererBase.open_card("Multi-Line Chart", "Multiple data series comparison")
        lines.append(f'  <svg width="100%" height="220" viewBox="0 0 {width} {height}" preserveAspectRatio="none">')
        for idx, (_, color) in enumerate(series):
            factor = factors[min(idx, len(factors) - 1)]
            points = ChartRenderer._line_points([value * factor for value in values], width, height)
            lines.append(f'    <path d="{ChartRenderer._path(points)}" fill="none" stroke="{color}" stroke-width="2"/>')
        lines.append('  </svg>')

        lines.append('  <div style="display: flex; gap: 16px; justify-content: center; margin-top: 8px;">')
        for label, color in series:
            lines.append(
                f'    <span style="display: inline-flex; align-items: center; gap: 6px; font-size: 0.8em;">'
                f'<span style="width: 12px; height: 12px; border-radius: 9999px; background: {color};"></span>'
                f'{RendererBase.esc(label)}</span>'
            )
        lines.append('  </div>')
        lines.extend(RendererBase.close_card())
        return lines

    @staticmethod
    def render_donut_chart(colors: Sequence[str], values: Sequence[int] = SAMPLE_DATA['pie']) -> List[str]:
        """Donut chart of the sample share data."""
        total = sum(values)
        if total == 0:
            return []

        size = 200
        center = size / 2
        radius = 80
        inner_radius = 50

        lines = RendererBase.open_card("Donut Chart", "Proportional distribution")
        lines.append('  <div style="display: flex; align-items: center; justify-content: space-around; flex-wrap: wrap;">')
        lines.append(f'    <svg width="{size}" height="{size}" viewBox="0 0 {size} {size}">')

        # Start at 12 o'clock
        current_angle = -90.0
        for idx, value in enumerate(values):
            angle = value / total * 360
            color = colors[idx % len(colors)]
            start = math.radians(current_angle)
            end = math.radians(current_angle + angle)

            x1 = round(center + radius * math.cos(start), 2)
            y1 = round(center + radius * math.sin(start), 2)
            x2 = round(center + radius * math.cos(end), 2)
            y2 = round(center + radius * math.sin(end), 2)
            x3 = round(center + inner_radius * math.cos(end), 2)
            y3 = round(center + inner_radius * math.sin(end), 2)
            x4 = round(center + inner_radius * math.cos(start), 2)
            y4 = round(center + inner_radius * math.sin(start), 2)
            large_arc = 1 if angle > 180 else 0

            path_d = (
                f"M {x1},{y1} A {radius},{radius} 0 {large_arc},1 {x2},{y2} "
                f"L {x3},{y3} A {inner_radius},{inner_radius} 0 {large_arc},0 {x4},{y4} Z"
            )
            lines.append(f'      <path d="{path_d}" fill="{color}" stroke="white" stroke-width="2">')
            lines.append(f'        <title>{value}%</title>')
            lines.append('      </path>')
            current_angle += angle

        lines.append('    </svg>')

        lines.append('    <div style="display: flex; flex-direction: column; gap: 8px;">')
        for idx, value in enumerate(values):
            color = colors[idx % len(colors)]
            lines.append(
                f'      <div style="display: flex; align-items: center; gap: 8px; font-size: 0.85em;">'
                f'<span style="width: 12px; height: 12px; border-radius: 3px; background: {color};"></span>'
                f'Segment {idx + 1}: {value}%</div>'
            )
        lines.append('    </div>')
        lines.append('  </div>')
        lines.extend(RendererBase.close_card())
        return lines

    @staticmethod
    def render_color_legend(colors: Sequence[str]) -> List[str]:
        """Swatch strip of the chart series colors."""
        lines = RendererBase.open_card("Chart Color Palette", "Colors used across the charts above")
        lines.append('  <div style="display: flex; flex-wrap: wrap; gap: 12px;">')
        for color in colors:
            lines.append(
                '    <div style="display: flex; flex-direction: column; align-items: center; gap: 4px;">'
                f'<div style="width: 48px; height: 48px; border-radius: 8px; background: {color};"></div>'
                f'<span style="font-size: 0.7em; font-family: monospace;">{color}</span></div>'
            )
        lines.append('  </div>')
        lines.extend(RendererBase.close_card())
        return lines

    @staticmethod
    def render_all(state: PaletteState, width: int = 300, height: int = 150) -> List[str]:
        colors = ChartRenderer.chart_colors(state)
        series = [
            ("Primary", colors[0]),
            ("Success", colors[5]),
            ("Warning", colors[6]),
        ]
        lines: List[str] = []
        lines.extend(ChartRenderer.render_bar_chart(colors))
        lines.extend(ChartRenderer.render_horizontal_bars(colors))
        lines.extend(ChartRenderer.render_line_chart(colors[0], width=width, height=height))
        lines.extend(ChartRenderer.render_multi_line_chart(series, width=width, height=height))
        lines.extend(ChartRenderer.render_donut_chart(colors))
        lines.extend(ChartRenderer.render_color_legend(colors))
        return lines


__all__ = ["ChartRenderer"]
