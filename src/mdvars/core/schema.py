"""Pydantic v2 models for persisted settings."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_STYLE = "auto"

# Preset style name -> Pygments theme used for fenced code blocks.
STYLE_THEMES = {
    "auto": "monokai",
    "dark": "monokai",
    "light": "friendly",
    "dracula": "dracula",
    "tokyo-night": "github-dark",
    "notty": "bw",
}


class RenderConfig(BaseModel):
    style: str = DEFAULT_STYLE
    width: int | None = Field(default=None, gt=0)
