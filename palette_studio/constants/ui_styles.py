"""UI styles and display configuration constants."""

from __future__ import annotations

# =============================================================================
# Console Tables
# =============================================================================

TABLE_CONFIG = {
    'box_style': 'ROUNDED',
    'header_style': 'bold cyan',
    'shade_style': 'label',
    'swatch_width': 6,
}

# =============================================================================
# Preview Chrome
# =============================================================================

# Colors used by the preview page itself (never by generated palettes)
PREVIEW_CHROME = {
    "background": "#f5f5f8",
    "surface": "#ffffff",
    "foreground": "#111827",
    "border": "#e5e7eb",
    "muted": "#6b7280",
    "muted_surface": "#f3f4f6",
}

# Fallback shades for status slots that have not been picked yet
STATUS_FALLBACKS = {
    'success': {100: "#dcfce7", 500: "#22c55e", 600: "#16a34a", 800: "#166534"},
    'warning': {100: "#fef3c7", 500: "#f59e0b", 600: "#d97706", 800: "#92400e"},
    'error': {100: "#fee2e2", 500: "#ef4444", 600: "#dc2626", 800: "#991b1b"},
}

# =============================================================================
# Preview Sample Data
# =============================================================================

SAMPLE_DATA = {
    'bars': (65, 45, 80, 55, 70, 40, 90, 60),
    'pie': (35, 25, 20, 15, 5),
    'line': (30, 45, 35, 55, 48, 65, 58, 75, 70, 85, 80, 95),
}
