"""UI component mockups rendered in palette colors."""
from __future__ import annotations

from typing import List

from ..color_utils import get_contrast_color
from ..constants import PREVIEW_CHROME
from ..models import PaletteName
from ..palette_state import PaletteState
from .base import RendererBase


class ComponentRenderer:
    """Renders a small design-system sampler: hero, cards, buttons, badges."""

    @staticmethod
    def render_hero(state: PaletteState) -> List[str]:
        brand = state.brand.scale
        return [
            f'<div style="border-radius: 16px; padding: 32px; color: #ffffff; '
            f'background: linear-gradient(135deg, {brand[600]} 0%, {brand[800]} 100%);">',
            '  <h2 style="margin: 0 0 8px 0; font-size: 1.8em;">Beautiful Design System</h2>',
            '  <p style="margin: 0 0 24px 0; opacity: 0.9; max-width: 560px;">Create stunning user interfaces '
            'with a comprehensive color palette and component library.</p>',
            '  <div style="display: flex; gap: 12px;">',
            f'    <span style="padding: 8px 16px; border-radius: 8px; background: #ffffff; color: {PREVIEW_CHROME["foreground"]};">Get Started</span>',
            '    <span style="padding: 8px 16px; border-radius: 8px; border: 1px solid rgba(255,255,255,0.3);">Learn More</span>',
            '  </div>',
            '</div>',
            '',
        ]

    @staticmethod
    def _stat_card(title: str, value: str, icon_bg: str, icon_fg: str, bar_color: str, fill: int) -> List[str]:
        lines = RendererBase.open_card()
        lines.append(
            f'  <div style="width: 40px; height: 40px; border-radius: 8px; background: {icon_bg}; color: {icon_fg}; '
            'display: flex; align-items: center; justify-content: center; font-weight: 700;">&#9679;</div>'
        )
        lines.append(f'  <p style="margin: 12px 0 4px 0; color: {PREVIEW_CHROME["muted"]}; font-size: 0.9em;">{title}</p>')
        lines.append(f'  <p style="margin: 0; font-size: 1.8em; font-weight: 700;">{value}</p>')
        lines.append(f'  <div style="margin-top: 8px; height: 8px; border-radius: 9999px; background: {PREVIEW_CHROME["muted_surface"]}; overflow: hidden;">')
        lines.append(f'    <div style="width: {fill}%; height: 100%; background: {bar_color};"></div>')
        lines.append('  </div>')
        lines.extend(RendererBase.close_card())
        return lines

    @staticmethod
    def render_stat_cards(state: PaletteState) -> List[str]:
        brand = state.brand.scale
        success = PaletteName.SUCCESS
        warning = PaletteName.WARNING
        lines = ['<div style="display: grid; grid-template-columns: repeat(3, 1fr); gap: 16px;">']
        lines.extend(ComponentRenderer._stat_card("Team Members", "24", brand[100], brand[600], brand[500], 60))
        lines.extend(ComponentRenderer._stat_card(
            "Uptime", "94%",
            state.status_color(success, 100), state.status_color(success, 600), state.status_color(success, 500), 94,
        ))
        lines.extend(ComponentRenderer._stat_card(
            "Pending Tasks", "3",
            state.status_color(warning, 100), state.status_color(warning, 600), state.status_color(warning, 500), 30,
        ))
        lines.append('</div>')
        return lines

    @staticmethod
    def render_buttons(state: PaletteState) -> List[str]:
        """Primary, secondary, outline and ghost buttons."""
        brand = state.brand.scale
        variants = (
            ("Primary", brand[600], get_contrast_color(brand[600]), brand[600]),
            ("Secondary", brand[100], brand[700], brand[100]),
            ("Outline", "transparent", brand[700], brand[500]),
            ("Ghost", "transparent", brand[600], "transparent"),
        )
        lines = RendererBase.open_card("Buttons", "Brand-colored button variants")
        lines.append('  <div style="display: flex; flex-wrap: wrap; gap: 12px;">')
        for label, background, foreground, border in variants:
            lines.append(
                f'    <span style="padding: 8px 16px; border-radius: 8px; font-weight: 500; '
                f'background: {background}; color: {foreground}; border: 1px solid {border};">{label}</span>'
            )
        lines.append('  </div>')
        lines.extend(RendererBase.close_card())
        return lines

    @staticmethod
    def render_badges(state: PaletteState) -> List[str]:
        """Solid status badges and soft status pills."""
        brand = state.brand.scale
        statuses = (
            (PaletteName.SUCCESS, "Active", "Completed"),
            (PaletteName.WARNING, "Pending", "In Review"),
            (PaletteName.ERROR, "Error", "Failed"),
        )
        lines = RendererBase.render_section_heading("Status Indicators")
        lines.append('<div style="display: flex; flex-wrap: wrap; gap: 8px; margin-bottom: 12px;">')
        for name, badge, _ in statuses:
            solid = state.status_color(name, 500)
            lines.append(
                f'  <span style="padding: 2px 10px; border-radius: 9999px; font-size: 0.8em; font-weight: 600; '
                f'background: {solid}; color: {get_contrast_color(solid)};">{badge}</span>'
            )
        lines.append(
            f'  <span style="padding: 2px 10px; border-radius: 9999px; font-size: 0.8em; font-weight: 600; '
            f'border: 1px solid {brand[500]}; color: {brand[700]};">Brand</span>'
        )
        lines.append('</div>')

        lines.append('<div style="display: flex; flex-wrap: wrap; gap: 16px;">')
        for name, _, pill in statuses:
            lines.append(
                f'  <span style="padding: 8px 16px; border-radius: 9999px; font-size: 0.85em; font-weight: 500; '
                f'background: {state.status_color(name, 100)}; color: {state.status_color(name, 800)};">'
                f'<span style="color: {state.status_color(name, 600)};">&#9679;</span> {pill}</span>'
            )
        lines.append('</div>')
        lines.append('')
        return lines

    @staticmethod
    def render_alerts(state: PaletteState) -> List[str]:
        """Tinted alert boxes for brand and each status."""
        brand = state.brand.scale
        alerts = [
            ("Heads up!", "You can customize every color of this design system.", brand[50], brand[300], brand[800]),
        ]
        messages = {
            PaletteName.SUCCESS: ("Success", "Your changes have been saved."),
            PaletteName.WARNING: ("Warning", "Your trial ends in 3 days."),
            PaletteName.ERROR: ("Error", "Something went wrong. Please try again."),
        }
        for name, (title, text) in messages.items():
            alerts.append((
                title, text,
                state.status_color(name, 100), state.status_color(name, 500), state.status_color(name, 800),
            ))

        lines = RendererBase.render_section_heading("Alerts")
        for title, text, background, border, foreground in alerts:
            lines.append(
                f'<div style="padding: 12px 16px; margin: 8px 0; border-radius: 8px; border-left: 4px solid {border}; '
                f'background: {background}; color: {foreground};"><strong>{title}</strong> {text}</div>'
            )
        lines.append('')
        return lines

    @staticmethod
    def render_all(state: PaletteState) -> List[str]:
        lines: List[str] = []
        lines.extend(ComponentRenderer.render_hero(state))
        lines.extend(ComponentRenderer.render_stat_cards(state))
        lines.extend(ComponentRenderer.render_buttons(state))
        lines.extend(ComponentRenderer.render_badges(state))
        lines.extend(ComponentRenderer.render_alerts(state))
        return lines


__all__ = ["ComponentRenderer"]
