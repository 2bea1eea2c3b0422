"""Document preprocessing: strip frontmatter and expand ``{{variables}}``.

Both entry points accept either ``str`` or ``bytes`` and return the same type.
Bytes are decoded as UTF-8 with ``surrogateescape`` so documents that are not
valid UTF-8 pass through unchanged.
"""

from __future__ import annotations

from datetime import datetime
from typing import TypeVar

from mdvars.core.builtins import builtin_variables, merge_variables
from mdvars.core.flatten import extract_frontmatter_vars
from mdvars.core.frontmatter import strip_frontmatter
from mdvars.core.substitute import substitute_variables

Document = TypeVar("Document", str, bytes)

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _decode(document: str | bytes) -> str:
    if isinstance(document, bytes):
        return document.decode(_ENCODING, _ERRORS)
    return document


def _encode_like(original: str | bytes, text: str) -> str | bytes:
    if isinstance(original, bytes):
        return text.encode(_ENCODING, _ERRORS)
    return text


def remove_frontmatter(document: Document) -> Document:
    """Remove the frontmatter header of a markdown document."""
    text = _decode(document)
    body = strip_frontmatter(text)
    if body is text:
        return document
    return _encode_like(document, body)


def build_variables(
    document: str | bytes,
    now: datetime | None = None,
    cwd: str | None = None,
) -> dict[str, str]:
    """Return the final variable table for a document: frontmatter values overlaid with built-ins."""
    user_vars, _ = extract_frontmatter_vars(_decode(document))
    return merge_variables(user_vars, builtin_variables(now=now, cwd=cwd, user_vars=user_vars))


def preprocess_dynamic_text(
    document: Document,
    now: datetime | None = None,
    cwd: str | None = None,
) -> Document:
    """Strip the frontmatter and substitute every known ``{{key}}`` placeholder.

    ``now`` and ``cwd`` override the clock and working directory used for
    built-in variables.
    """
    text = _decode(document)
    variables = build_variables(text, now=now, cwd=cwd)
    body = strip_frontmatter(text)
    return _encode_like(document, substitute_variables(body, variables))
