"""Fixtures for CLI integration tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep commands away from the real config file and NITRAPI_* variables."""
    config_path = tmp_path / "config.toml"
    monkeypatch.setattr("nitrapi_cli.config.manager.CONFIG_FILE", config_path)
    for var in ("NITRAPI_URL", "NITRAPI_TOKEN", "NITRAPI_PROFILE"):
        monkeypatch.delenv(var, raising=False)
    return config_path
