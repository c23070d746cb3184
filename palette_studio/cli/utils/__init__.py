"""Utils for the palette studio CLI."""
