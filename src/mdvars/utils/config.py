"""Global configuration (~/.config/mdvars/config.json)."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from mdvars.core.schema import RenderConfig


class ConfigError(Exception):
    pass


def global_config_dir() -> Path:
    config = Path.home() / ".config" / "mdvars"
    config.mkdir(parents=True, exist_ok=True)
    return config


def load_global_config() -> dict:
    path = global_config_dir() / "config.json"
    if path.exists():
        return json.loads(path.read_text())
    return {}


def save_global_config(config: dict) -> None:
    path = global_config_dir() / "config.json"
    path.write_text(json.dumps(config, indent=2))


def read_global_config() -> dict:
    """load_global_config, raising ConfigError when the file is unreadable or not JSON."""
    try:
        return load_global_config()
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config: {e}") from e


def load_render_config() -> RenderConfig:
    """Load the global config as a RenderConfig.

    Raises ConfigError if the stored file is unreadable or holds invalid values.
    """
    raw = read_global_config()
    try:
        return RenderConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config: {e}") from e
