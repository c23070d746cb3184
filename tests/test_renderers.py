"""Tests for the HTML preview renderers."""

from __future__ import annotations

from palette_studio.color_utils import generate_color_scale
from palette_studio.constants import STATUS_FALLBACKS
from palette_studio.palette_state import PaletteState
from palette_studio.renderers import (
    ChartRenderer,
    ComponentRenderer,
    GradientRenderer,
    PreviewRenderer,
    RendererBase,
    ScaleRenderer,
)


def test_esc_escapes_markup_and_quotes():
    assert RendererBase.esc('<b>"x"</b>') == "&lt;b&gt;&quot;x&quot;&lt;/b&gt;"
    assert RendererBase.esc(None) == ""


def test_open_card_escapes_title():
    lines = RendererBase.open_card("<script>", "a & b")
    html = "\n".join(lines)

    assert "&lt;script&gt;" in html
    assert "a &amp; b" in html
    assert RendererBase.close_card()[0] == "</div>"


def test_render_scale_lists_every_shade():
    scale = generate_color_scale("#3b82f6")
    html = "\n".join(ScaleRenderer.render_scale(scale, "brand", swatch_size=32))

    for shade, color in scale.items():
        assert f">{shade.value}</span>" in html
        assert f"<span>{color}</span>" in html
    assert "height: 32px" in html
    # Light shades carry dark text and dark shades light text
    assert f"background: {scale[50]}; color: #000000;" in html
    assert f"background: {scale[900]}; color: #ffffff;" in html


def test_render_palettes_includes_each_palette():
    state = PaletteState()
    state.set_color("neutral", "#64748b")
    html = "\n".join(ScaleRenderer.render_palettes(state.palettes()))

    assert "Color Scales" in html
    assert ">brand</h3>" in html
    assert ">neutral</h3>" in html


def test_gradients_use_scale_stops():
    scale = generate_color_scale("#3b82f6")
    html = "\n".join(GradientRenderer.render_all(scale))

    assert f"linear-gradient(135deg, {scale[500]}, {scale[700]})" in html
    assert "Primary Deep" in html
    assert "radial-gradient" in html
    assert "to right" in html


def test_chart_colors_fall_back_to_stock_status_colors():
    colors = ChartRenderer.chart_colors(PaletteState())

    assert len(colors) == 8
    assert colors[5:] == [
        STATUS_FALLBACKS["success"][500],
        STATUS_FALLBACKS["warning"][500],
        STATUS_FALLBACKS["error"][500],
    ]


def test_bar_chart_labels_bars():
    html = "\n".join(ChartRenderer.render_bar_chart(["#111111", "#222222"], values=(10, 20, 30)))

    assert ">A</span>" in html and ">C</span>" in html
    assert "height: 30%; background: #111111" in html


def test_line_chart_handles_empty_series():
    assert ChartRenderer.render_line_chart("#3b82f6", values=()) == []

    html = "\n".join(ChartRenderer.render_line_chart("#3b82f6", values=(10, 20), width=100, height=50))
    assert 'viewBox="0 0 100 50"' in html
    assert "lineGradient" in html


def test_donut_chart_skips_zero_total():
    assert ChartRenderer.render_donut_chart(["#3b82f6"], values=(0, 0)) == []


def test_components_use_picked_status_colors():
    state = PaletteState()
    state.set_color("success", "#10b981")
    html = "\n".join(ComponentRenderer.render_all(state))

    assert generate_color_scale("#10b981")[500] in html
    assert STATUS_FALLBACKS["warning"][500] in html
    assert "Status Indicators" in html
    assert "Beautiful Design System" in html


def test_preview_renderer_aggregates_helpers():
    state = PaletteState()

    assert PreviewRenderer.render_charts(state) == ChartRenderer.render_all(state)
    assert PreviewRenderer.render_components(state) == ComponentRenderer.render_all(state)
    assert PreviewRenderer.esc("&") == "&amp;"
