"""YAML frontmatter detection and stripping for markdown documents.

A frontmatter block is a `---`-delimited YAML header that must be the very
first content of the document. Anything else (a block preceded by blank
lines, a single delimiter, no delimiter at all) is treated as plain text.
"""

from __future__ import annotations

import re
from typing import NamedTuple

_DELIMITER = re.compile(r"^---\r?\n(\s*\r?\n)?", re.MULTILINE | re.ASCII)


class FrontmatterSpan(NamedTuple):
    """Half-open `[start, end)` range of the frontmatter block, delimiters included."""

    start: int
    end: int

    @property
    def present(self) -> bool:
        return self.start == 0 and self.end > self.start


FrontmatterSpan.ABSENT = FrontmatterSpan(-1, -1)


def detect_frontmatter(text: str) -> FrontmatterSpan:
    """Locate the frontmatter block.

    Returns the span from the first delimiter line to the end of the second.
    If there are fewer than two delimiter lines, returns ``FrontmatterSpan.ABSENT``.
    """
    matches = []
    for match in _DELIMITER.finditer(text):
        matches.append(match)
        if len(matches) == 2:
            break
    if len(matches) < 2:
        return FrontmatterSpan.ABSENT

    span = FrontmatterSpan(matches[0].start(), matches[1].end())
    if not span.present:
        return FrontmatterSpan.ABSENT
    return span


def split_frontmatter(text: str) -> tuple[str, str]:
    """Split a document into (metadata_text, body).

    metadata_text is the YAML strictly between the two delimiters, trimmed.
    If no frontmatter is present, returns ("", original_text).
    """
    span = detect_frontmatter(text)
    if not span.present:
        return "", text

    block = text[span.start : span.end]
    block = block.removeprefix("---").rstrip()
    block = block.removesuffix("---")
    return block.strip(), text[span.end :]


def strip_frontmatter(text: str) -> str:
    """Return the document without its frontmatter block (unchanged if absent)."""
    span = detect_frontmatter(text)
    if span.present:
        return text[span.end :]
    return text
