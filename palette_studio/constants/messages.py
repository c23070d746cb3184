"""User-facing messages."""

from __future__ import annotations

# =============================================================================
# Error Messages
# =============================================================================

ERROR_MESSAGES = {
    'invalid_hex': 'Color must be a hex value like #3b82f6',
    'invalid_hsl': 'HSL values must be hue 0-360, saturation 0-100, lightness 0-100',
    'invalid_harmony': 'Unknown harmony kind',
    'config_invalid': 'Configuration error',
    'write_failed': 'Failed to write',
}

# =============================================================================
# Success Messages
# =============================================================================

SUCCESS_MESSAGES = {
    'config_saved': 'Configuration updated',
    'export_written': 'Palette exported',
    'preview_written': 'Preview generated',
}
