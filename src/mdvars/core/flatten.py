"""Flatten decoded YAML frontmatter into a dotted-key string table."""

from __future__ import annotations

import logging
from typing import Any

import yaml

from mdvars.core.frontmatter import FrontmatterSpan, detect_frontmatter, split_frontmatter

logger = logging.getLogger(__name__)


def scalar_to_string(value: Any) -> str:
    """Render a decoded YAML value as the string substituted into documents.

    Never raises: values that cannot be dumped back to YAML fall back to str().
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)

    try:
        dumped = yaml.safe_dump(value, default_flow_style=False, sort_keys=False, allow_unicode=True)
    except (yaml.YAMLError, RecursionError):
        return str(value)
    dumped = dumped.strip()
    # safe_dump terminates bare scalars with an explicit document end marker
    if dumped.endswith("\n..."):
        dumped = dumped[: -len("\n...")].rstrip()
    return dumped


def flatten_metadata(
    data: Any, prefix: str = "", out: dict[str, str] | None = None
) -> dict[str, str]:
    """Flatten a decoded YAML tree into ``out``.

    Nested mappings become dotted keys (``author.name``). Sequences are not
    indexed: their items are stringified and joined with ", " under the
    sequence's own key.
    """
    if out is None:
        out = {}

    if isinstance(data, dict):
        for key, value in data.items():
            key = scalar_to_string(key)
            flatten_metadata(value, f"{prefix}.{key}" if prefix else key, out)
    elif isinstance(data, list):
        out[prefix] = ", ".join(scalar_to_string(item) for item in data)
    else:
        out[prefix] = scalar_to_string(data)
    return out


def parse_metadata(metadata_text: str) -> dict[str, str]:
    """Decode a YAML frontmatter body and flatten it.

    Invalid YAML, or a document whose root is not a mapping, yields {}.
    """
    if not metadata_text:
        return {}
    try:
        raw = yaml.safe_load(metadata_text)
    except yaml.YAMLError as e:
        logger.debug("Ignoring undecodable frontmatter: %s", e)
        return {}
    if not isinstance(raw, dict):
        logger.debug("Ignoring frontmatter with non-mapping root (%s)", type(raw).__name__)
        return {}
    try:
        return flatten_metadata(raw)
    except RecursionError:
        logger.debug("Ignoring frontmatter with a self-referencing alias")
        return {}


def extract_frontmatter_vars(text: str) -> tuple[dict[str, str], FrontmatterSpan]:
    """Read the frontmatter (if any) and return its flattened variables plus its span."""
    span = detect_frontmatter(text)
    if not span.present:
        return {}, span
    metadata_text, _ = split_frontmatter(text)
    return parse_metadata(metadata_text), span
