from __future__ import annotations

from pathlib import Path

import pytest

from palette_studio.config import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configuration file at a per-test location."""

    path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    return path
