from __future__ import annotations

import io

from palette_studio.cli.commands.harmony_cmd import harmony_labels
from palette_studio.cli.formatters.display_formatter import render_color_list
from palette_studio.console import Console
from palette_studio.models import HarmonyKind


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=120, color_system=None), buffer


def test_color_list_numbers_rows_without_labels():
    console, buffer = _console()
    render_color_list(console, "Random colors", ["#ff0000", "#00ff00"])

    rows = [line for line in buffer.getvalue().splitlines() if "#ff0000" in line or "#00ff00" in line]
    assert rows[0].split("│")[1].strip() == "1"
    assert rows[1].split("│")[1].strip() == "2"


def test_color_list_uses_given_labels():
    console, buffer = _console()
    render_color_list(console, "Complementary", ["#ff0000", "#00ffff"], labels=["base", "+180°"])

    output = buffer.getvalue()
    assert "base" in output
    assert "+180°" in output


def test_harmony_labels_match_color_count():
    assert harmony_labels(HarmonyKind.COMPLEMENTARY) == ["base", "+180°"]
    assert harmony_labels(HarmonyKind.ANALOGOUS) == ["-30°", "base", "+30°"]
    assert harmony_labels(HarmonyKind.MONOCHROMATIC)[2] == "base"
    for kind in HarmonyKind:
        assert harmony_labels(kind)
