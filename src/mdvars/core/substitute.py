"""``{{key}}`` placeholder substitution."""

from __future__ import annotations

import re

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([^{}]*?)\s*\}\}")


def substitute_variables(text: str, variables: dict[str, str]) -> str:
    """Replace every ``{{ key }}`` with ``variables[key]``.

    Keys are matched literally after trimming surrounding whitespace.
    Placeholders for unknown keys are left untouched, and substituted values
    are never scanned again.
    """

    def replacer(match: re.Match[str]) -> str:
        key = match.group(1)
        if key in variables:
            return variables[key]
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replacer, text)


def find_placeholders(text: str) -> list[str]:
    """Return the distinct placeholder keys referenced in text, in order of first use."""
    seen: dict[str, None] = {}
    for match in PLACEHOLDER_PATTERN.finditer(text):
        seen.setdefault(match.group(1))
    return list(seen)
