"""Shared CLI utilities to avoid circular imports."""

from __future__ import annotations

import typer

from mdvars.core.document import DocumentError, read_document
from mdvars.core.schema import RenderConfig
from mdvars.utils.config import ConfigError, load_render_config, read_global_config
from mdvars.utils.output import error

FORMAT_OPTION = typer.Option(None, "--format", "-F", help="Output format: json or text")


def get_document(source: str) -> bytes:
    """Read the document at source or exit with an error."""
    try:
        return read_document(source)
    except DocumentError as e:
        error(str(e))
        raise typer.Exit(1)


def get_render_config() -> RenderConfig:
    """Load the global render config or exit with an error."""
    try:
        return load_render_config()
    except ConfigError as e:
        error(str(e))
        raise typer.Exit(1)


def get_global_config() -> dict:
    """Load the raw global config dict or exit with an error."""
    try:
        return read_global_config()
    except ConfigError as e:
        error(str(e))
        raise typer.Exit(1)
