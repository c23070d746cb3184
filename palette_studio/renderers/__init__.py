"""Preview renderer integration module."""
from __future__ import annotations

from .base import RendererBase
from .charts import ChartRenderer
from .components import ComponentRenderer
from .gradients import GradientRenderer
from .scales import ScaleRenderer


class PreviewRenderer:
    """Palette preview renderer (aggregates every rendering method)."""

    # ===== Base utility methods =====
    esc = staticmethod(RendererBase.esc)
    open_card = staticmethod(RendererBase.open_card)
    close_card = staticmethod(RendererBase.close_card)
    render_section_heading = staticmethod(RendererBase.render_section_heading)

    # ===== Scale rendering methods =====
    render_scale = staticmethod(ScaleRenderer.render_scale)
    render_palettes = staticmethod(ScaleRenderer.render_palettes)

    # ===== Gradient rendering methods =====
    render_gradient_pairs = staticmethod(GradientRenderer.render_gradient_pairs)
    render_multi_stop = staticmethod(GradientRenderer.render_multi_stop)
    render_directions = staticmethod(GradientRenderer.render_directions)
    render_radial = staticmethod(GradientRenderer.render_radial)
    render_gradients = staticmethod(GradientRenderer.render_all)

    # ===== Chart rendering methods =====
    chart_colors = staticmethod(ChartRenderer.chart_colors)
    render_bar_chart = staticmethod(ChartRenderer.render_bar_chart)
    render_horizontal_bars = staticmethod(ChartRenderer.render_horizontal_bars)
    render_line_chart = staticmethod(ChartRenderer.render_line_chart)
    render_multi_line_chart = staticmethod(ChartRenderer.render_multi_line_chart)
    render_donut_chart = staticmethod(ChartRenderer.render_donut_chart)
    render_color_legend = staticmethod(ChartRenderer.render_color_legend)
    render_charts = staticmethod(ChartRenderer.render_all)

    # ===== Component methods =====
    render_hero = staticmethod(ComponentRenderer.render_hero)
    render_stat_cards = staticmethod(ComponentRenderer.render_stat_cards)
    render_buttons = staticmethod(ComponentRenderer.render_buttons)
    render_badges = staticmethod(ComponentRenderer.render_badges)
    render_alerts = staticmethod(ComponentRenderer.render_alerts)
    render_components = staticmethod(ComponentRenderer.render_all)


__all__ = [
    "PreviewRenderer",
    "RendererBase",
    "ScaleRenderer",
    "GradientRenderer",
    "ChartRenderer",
    "ComponentRenderer",
]
