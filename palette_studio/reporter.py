"""Preview page and export file generation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from .constants import ERROR_MESSAGES, PREVIEW_CHROME
from .exceptions import ExportError
from .exporters import DEFAULT_JSON_FILENAME, export_tailwind, write_json_export
from .palette_state import PaletteState
from .renderers import PreviewRenderer

logger = logging.getLogger(__name__)

DEFAULT_HTML_FILENAME = "palette-preview.html"


@dataclass(slots=True)
class PreviewReporter:
    """Write preview and export artefacts for a palette state."""

    output_dir: Path = Path("palettes")
    html_filename: str = DEFAULT_HTML_FILENAME
    json_filename: str = DEFAULT_JSON_FILENAME
    json_indent: int = 2
    chart_width: int = 300
    chart_height: int = 150
    swatch_size: int = 48

    def ensure_structure(self) -> None:
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ExportError(f"Cannot create output directory {self.output_dir}: {exc}", str(self.output_dir)) from exc

    def build_html(self, state: PaletteState) -> str:
        """Assemble the full preview document.

        Page order:
        1. Color scales for every active palette
        2. Component mockups
        3. Gradients from the brand scale
        4. Charts
        5. Tailwind config snippet
        """
        brand = state.brand.scale
        tailwind = PreviewRenderer.esc(export_tailwind(state.palettes()))

        head = [
            '<!DOCTYPE html>',
            '<html lang="en">',
            '<head>',
            '  <meta charset="utf-8">',
            '  <title>Color Palette Preview</title>',
            '  <style>',
            '    * { box-sizing: border-box; }',
            f'    body {{ margin: 0; padding: 32px; background: {PREVIEW_CHROME["background"]}; '
            f'color: {PREVIEW_CHROME["foreground"]}; font-family: -apple-system, BlinkMacSystemFont, '
            '"Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif; }',
            '    main { max-width: 1200px; margin: 0 auto; }',
            '  </style>',
            '</head>',
            '<body>',
            '<main>',
            '<header style="display: flex; align-items: center; gap: 12px; margin-bottom: 24px;">',
            f'  <div style="width: 40px; height: 40px; border-radius: 12px; color: #ffffff; font-weight: 700; '
            'display: flex; align-items: center; justify-content: center; '
            f'background: linear-gradient(135deg, {brand[500]}, {brand[700]});">C</div>',
            '  <div>',
            '    <h1 style="margin: 0; font-size: 1.4em;">Color Generator</h1>',
            f'    <p style="margin: 0; color: {PREVIEW_CHROME["muted"]};">Base color {state.brand.base_color}</p>',
            '  </div>',
            '</header>',
        ]

        sections: List[List[str]] = [
            PreviewRenderer.render_palettes(state.palettes(), self.swatch_size),
            PreviewRenderer.render_section_heading("Components"),
            PreviewRenderer.render_components(state),
            PreviewRenderer.render_section_heading("Gradients"),
            PreviewRenderer.render_gradients(brand),
            PreviewRenderer.render_section_heading("Charts"),
            PreviewRenderer.render_charts(state, self.chart_width, self.chart_height),
            PreviewRenderer.render_section_heading("Tailwind CSS Config"),
            [
                f'<pre style="background: {PREVIEW_CHROME["muted_surface"]}; padding: 16px; border-radius: 8px; '
                f'overflow-x: auto; font-size: 0.85em;">{tailwind}</pre>',
            ],
        ]

        all_lines = list(head)
        for section in sections:
            all_lines.extend(section)
        all_lines.extend(['</main>', '</body>', '</html>'])
        return "\n".join(all_lines)

    def generate_html(self, state: PaletteState) -> Path:
        """Write the preview page and return its path."""
        self.ensure_structure()
        report_path = self.output_dir / self.html_filename

        logger.debug("Rendering preview for %d palettes", len(state.palettes()))
        content = self.build_html(state)

        try:
            report_path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ExportError(f"{ERROR_MESSAGES['write_failed']} {report_path}: {exc}", str(report_path)) from exc

        logger.debug("Preview written to %s", report_path)
        return report_path

    def generate_json(self, state: PaletteState) -> Path:
        """Write the JSON export next to the preview page."""
        self.ensure_structure()
        return write_json_export(state.palettes(), self.output_dir / self.json_filename, indent=self.json_indent)


__all__ = ["DEFAULT_HTML_FILENAME", "PreviewReporter"]
