"""Formatters for the palette studio CLI."""
