"""Loading documents from disk or stdin."""

from __future__ import annotations

import sys
from pathlib import Path

from mdvars.utils.paths import expand_path


class DocumentError(Exception):
    pass


def read_document(source: str) -> bytes:
    """Read a document as raw bytes. ``-`` reads stdin.

    The path is expanded (``~`` and environment variables) before reading.
    """
    if source == "-":
        return sys.stdin.buffer.read()

    path = Path(expand_path(source))
    if not path.exists():
        raise DocumentError(f"File not found: {path}")
    if path.is_dir():
        raise DocumentError(f"Is a directory: {path}")
    try:
        return path.read_bytes()
    except OSError as e:
        raise DocumentError(f"Failed to read {path}: {e}") from e
