"""Commands for the palette studio CLI."""
