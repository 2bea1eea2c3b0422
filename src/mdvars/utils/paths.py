"""Path and filename helpers."""

from __future__ import annotations

import os
from pathlib import Path

MARKDOWN_EXTENSIONS = (".md", ".mdown", ".mkdn", ".mkd", ".markdown")


def expand_path(path: str) -> str:
    """Expand a leading ``~`` and all environment variables in path."""
    return os.path.expandvars(os.path.expanduser(path))


def is_markdown_file(filename: str) -> bool:
    """Return whether filename has a markdown extension.

    Files without an extension are assumed to be markdown; any other
    extension is treated as source code.
    """
    ext = Path(filename).suffix
    if not ext:
        return True
    return ext.lower() in MARKDOWN_EXTENSIONS


def code_language(filename: str) -> str:
    """Fence language for a code file, taken from its extension (``main.py`` -> ``py``)."""
    return Path(filename).suffix.lstrip(".").lower()


def wrap_code_block(s: str, language: str) -> str:
    return f"```{language}\n{s}```"
