"""Shared helpers for the HTML preview renderers."""
from __future__ import annotations

import html
from typing import Any, List

from ..constants import PREVIEW_CHROME


class RendererBase:
    """Utility methods shared by the preview renderers."""

    @staticmethod
    def esc(value: Any) -> str:
        """HTML-escape a user-supplied value for text or attribute use."""
        if value is None:
            return ""
        return html.escape(str(value), quote=True)

    @staticmethod
    def open_card(title: str = "", description: str = "") -> List[str]:
        """Start a bordered card, optionally with a heading.

        Args:
            title: Card title (escaped)
            description: Secondary text under the title (escaped)

        Returns:
            HTML lines; close the card with :meth:`close_card`
        """
        lines = [
            f'<div style="border: 1px solid {PREVIEW_CHROME["border"]}; border-radius: 12px; '
            f'padding: 20px; margin: 16px 0; background: {PREVIEW_CHROME["surface"]}; '
            'box-shadow: 0 1px 3px rgba(0,0,0,0.08);">'
        ]
        if title:
            lines.append(
                f'  <h4 style="margin: 0 0 4px 0; color: {PREVIEW_CHROME["foreground"]}; font-size: 1.1em;">'
                f'{RendererBase.esc(title)}</h4>'
            )
        if description:
            lines.append(
                f'  <p style="margin: 0 0 16px 0; color: {PREVIEW_CHROME["muted"]}; font-size: 0.9em;">'
                f'{RendererBase.esc(description)}</p>'
            )
        return lines

    @staticmethod
    def close_card() -> List[str]:
        return ['</div>', '']

    @staticmethod
    def render_section_heading(title: str) -> List[str]:
        return [
            f'<h2 style="margin: 32px 0 8px 0; color: {PREVIEW_CHROME["foreground"]}; font-size: 1.4em;">'
            f'{RendererBase.esc(title)}</h2>'
        ]


__all__ = ["RendererBase"]
