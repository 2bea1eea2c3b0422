"""Config subcommands: get, set, list for global mdvars settings."""

from __future__ import annotations

from typing import Optional

import typer
from pydantic import ValidationError

from mdvars.cli._shared import FORMAT_OPTION, get_global_config
from mdvars.core.schema import RenderConfig
from mdvars.utils.config import save_global_config
from mdvars.utils.output import error, info, output, success

config_app = typer.Typer(no_args_is_help=True)

_VALID_KEYS = set(RenderConfig.model_fields)


@config_app.command("get")
def config_get(
    key: str = typer.Argument(..., help="Configuration key"),
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Get a configuration value."""
    if key not in _VALID_KEYS:
        error(f"Unknown key: {key}. Valid keys: {', '.join(sorted(_VALID_KEYS))}")
        raise typer.Exit(1)

    config = get_global_config()
    value = config.get(key)
    if value is None:
        if fmt == "json":
            output({"key": key, "value": None}, fmt="json")
        else:
            info(f"{key}: (not set)")
    else:
        if fmt == "json":
            output({"key": key, "value": value}, fmt="json")
        else:
            info(f"{key}: {value}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Configuration key"),
    value: str = typer.Argument(..., help="Value to set"),
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Set a configuration value."""
    if key not in _VALID_KEYS:
        error(f"Unknown key: {key}. Valid keys: {', '.join(sorted(_VALID_KEYS))}")
        raise typer.Exit(1)

    config = get_global_config()
    try:
        validated = RenderConfig.model_validate({**config, key: value})
    except ValidationError:
        error(f"Invalid value for {key}: {value}")
        raise typer.Exit(1)

    config[key] = getattr(validated, key)
    save_global_config(config)

    if fmt == "json":
        output({"key": key, "value": config[key]}, fmt="json")
    else:
        success(f"{key} = {config[key]}")


@config_app.command("unset")
def config_unset(
    key: str = typer.Argument(..., help="Configuration key"),
) -> None:
    """Remove a configuration value, restoring its default."""
    if key not in _VALID_KEYS:
        error(f"Unknown key: {key}. Valid keys: {', '.join(sorted(_VALID_KEYS))}")
        raise typer.Exit(1)

    config = get_global_config()
    if config.pop(key, None) is None:
        info(f"{key}: (not set)")
        return
    save_global_config(config)
    success(f"Unset {key}")


@config_app.command("list")
def config_list(
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """List all configuration values."""
    config = get_global_config()
    if fmt == "json":
        output(config, fmt="json")
    elif config:
        for k, v in sorted(config.items()):
            info(f"{k}: {v}")
    else:
        info("No configuration set")
