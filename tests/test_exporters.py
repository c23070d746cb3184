from __future__ import annotations

import json

import pytest

from palette_studio.exceptions import ExportError
from palette_studio.exporters import (
    DEFAULT_JSON_FILENAME,
    build_export_payload,
    export_css_variables,
    export_json,
    export_tailwind,
    write_json_export,
)
from palette_studio.models import Palette
from palette_studio.palette_state import PaletteState


@pytest.fixture
def palettes() -> list[Palette]:
    state = PaletteState()
    state.set_color("neutral", "#64748b")
    return state.palettes()


def test_payload_maps_names_to_scales(palettes):
    payload = build_export_payload(palettes)

    assert list(payload) == ["brand", "neutral"]
    assert list(payload["brand"]) == ["50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950"]
    assert payload["brand"]["500"] == "#2474f5"


def test_export_json_round_trips(palettes):
    data = json.loads(export_json(palettes))
    assert data == build_export_payload(palettes)


def test_export_json_respects_indent(palettes):
    assert export_json(palettes, indent=4).splitlines()[1].startswith('    "brand"')


def test_export_tailwind_block(palettes):
    lines = export_tailwind(palettes).splitlines()

    assert lines[0] == "colors: {"
    assert lines[-1] == "}"
    assert "  brand: {" in lines
    assert "  neutral: {" in lines
    assert "    500: '#2474f5'," in lines
    assert lines.count("  },") == 2


def test_export_tailwind_quotes_non_identifier_names():
    palette = Palette.from_base("accent-2", "#3b82f6")
    assert '  "accent-2": {' in export_tailwind([palette]).splitlines()


def test_export_css_variables(palettes):
    css = export_css_variables(palettes)
    lines = css.splitlines()

    assert lines[0] == ":root {"
    assert lines[-1] == "}"
    assert "  --brand-500: #2474f5;" in lines
    assert sum(1 for line in lines if line.startswith("  --neutral-")) == 11


def test_export_css_variables_custom_selector():
    palette = Palette.from_base("Brand Primary", "#3b82f6")
    css = export_css_variables([palette], selector=".theme-dark")

    assert css.startswith(".theme-dark {")
    assert "--brand-primary-50:" in css


def test_write_json_export_into_directory(tmp_path, palettes):
    path = write_json_export(palettes, tmp_path)

    assert path == tmp_path / DEFAULT_JSON_FILENAME
    assert json.loads(path.read_text(encoding="utf-8"))["brand"]["500"] == "#2474f5"


def test_write_json_export_creates_parents(tmp_path, palettes):
    target = tmp_path / "nested" / "out" / "colors.json"
    path = write_json_export(palettes, target, indent=0)

    assert path == target
    assert path.exists()


def test_write_json_export_failure_raises_export_error(tmp_path, palettes):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(ExportError) as exc_info:
        write_json_export(palettes, blocker / "colors.json")

    assert exc_info.value.path == str(blocker / "colors.json")
