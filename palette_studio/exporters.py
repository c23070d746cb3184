"""Serialise palettes to JSON and framework config snippets."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List

from .constants import ERROR_MESSAGES
from .exceptions import ExportError
from .models import Palette

logger = logging.getLogger(__name__)

DEFAULT_JSON_FILENAME = "color-palette.json"

__all__ = [
    "DEFAULT_JSON_FILENAME",
    "build_export_payload",
    "export_css_variables",
    "export_json",
    "export_tailwind",
    "write_json_export",
]


def build_export_payload(palettes: Iterable[Palette]) -> Dict[str, Dict[str, str]]:
    """Map each palette name to its scale with string shade keys."""
    return {palette.name: palette.scale.to_dict() for palette in palettes}


def export_json(palettes: Iterable[Palette], indent: int = 2) -> str:
    """Render the export document as a JSON string."""
    return json.dumps(build_export_payload(palettes), indent=indent)


def write_json_export(
    palettes: Iterable[Palette],
    path: Path,
    indent: int = 2,
) -> Path:
    """Write the JSON export to ``path``.

    If ``path`` is an existing directory the default file name is used.

    Raises:
        ExportError: If the file cannot be written.
    """
    path = Path(path)
    if path.is_dir():
        path = path / DEFAULT_JSON_FILENAME

    content = export_json(palettes, indent=indent)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content + "\n", encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"{ERROR_MESSAGES['write_failed']} {path}: {exc}", str(path)) from exc

    logger.debug("Wrote JSON export to %s", path)
    return path


def export_tailwind(palettes: Iterable[Palette]) -> str:
    """Render a ``colors`` block for ``tailwind.config.js``."""
    lines: List[str] = ["colors: {"]
    for palette in palettes:
        lines.append(f"  {_js_key(palette.name)}: {{")
        for shade, color in palette.scale.items():
            lines.append(f"    {shade.value}: '{color}',")
        lines.append("  },")
    lines.append("}")
    return "\n".join(lines)


def export_css_variables(palettes: Iterable[Palette], selector: str = ":root") -> str:
    """Render CSS custom properties such as ``--brand-500``."""
    lines: List[str] = [f"{selector} {{"]
    for palette in palettes:
        slug = _css_slug(palette.name)
        for shade, color in palette.scale.items():
            lines.append(f"  --{slug}-{shade.value}: {color};")
    lines.append("}")
    return "\n".join(lines)


def _js_key(name: str) -> str:
    if name.isidentifier():
        return name
    return json.dumps(name)


def _css_slug(name: str) -> str:
    slug = "".join(ch if ch.isalnum() else "-" for ch in name.strip().lower())
    return slug.strip("-") or "palette"
