"""Custom exceptions for the palette studio toolkit."""

from __future__ import annotations


class PaletteError(Exception):
    """Base exception for all palette studio errors."""
    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(PaletteError, ValueError):
    """Raised when there's a configuration problem."""
    pass


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(PaletteError, ValueError):
    """Base exception for validation errors."""
    pass


class InvalidColorError(ValidationError):
    """Raised when a color value does not match the expected format."""

    def __init__(self, message: str, value: str | None = None):
        """Initialize invalid color error.

        Args:
            message: Error message
            value: The rejected input, if available
        """
        super().__init__(message)
        self.value = value


class InvalidHarmonyError(ValidationError):
    """Raised when a harmony name is not one of the known kinds."""
    pass


class InvalidScaleError(ValidationError):
    """Raised when a color scale does not have exactly the 11 shade keys."""
    pass


# =============================================================================
# Palette State Errors
# =============================================================================


class PaletteStateError(PaletteError):
    """Raised when a palette slot operation is not allowed."""
    pass


# =============================================================================
# Export Errors
# =============================================================================


class ExportError(PaletteError):
    """Raised when an export or preview file cannot be written."""

    def __init__(self, message: str, path: str | None = None):
        """Initialize export error.

        Args:
            message: Error message
            path: Destination path of the failed write
        """
        super().__init__(message)
        self.path = path
