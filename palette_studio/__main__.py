"""Allow ``python -m palette_studio``."""

from .cli import app

if __name__ == "__main__":
    app()
