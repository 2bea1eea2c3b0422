"""Shared fixtures: isolated global config directory."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def clean_config(monkeypatch, tmp_path: Path) -> Path:
    """Redirect global config dir to a temp directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setattr("mdvars.utils.config.global_config_dir", lambda: config_dir)
    return config_dir
