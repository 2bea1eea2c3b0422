"""Tests for the persisted render config and style resolution."""

from io import StringIO

import pytest
from rich.console import Console

from mdvars.core.schema import DEFAULT_STYLE, RenderConfig
from mdvars.utils import config as config_mod
from mdvars.utils.config import ConfigError, load_render_config
from mdvars.utils.output import render_markdown, resolve_code_theme


class TestLoadRenderConfig:
    def test_defaults_without_file(self, clean_config):
        config = load_render_config()
        assert config == RenderConfig()
        assert config.style == DEFAULT_STYLE
        assert config.width is None

    def test_round_trip(self, clean_config):
        config_mod.save_global_config({"style": "dracula", "width": 72})
        config = load_render_config()
        assert config.style == "dracula"
        assert config.width == 72

    def test_invalid_value(self, clean_config):
        config_mod.save_global_config({"width": -3})
        with pytest.raises(ConfigError):
            load_render_config()

    def test_corrupt_file(self, clean_config):
        (clean_config / "config.json").write_text("{not json")
        with pytest.raises(ConfigError):
            load_render_config()


class TestResolveCodeTheme:
    def test_presets(self):
        assert resolve_code_theme("dark") == "monokai"
        assert resolve_code_theme("light") == "friendly"
        assert resolve_code_theme("auto") == "monokai"

    def test_unknown_passes_through(self):
        assert resolve_code_theme("solarized-dark") == "solarized-dark"


class TestRenderMarkdown:
    def test_renders_to_console(self):
        buf = StringIO()
        target = Console(file=buf, width=60, color_system=None)
        render_markdown("# Heading\n\nSome *text*.", style="light", target=target)
        rendered = buf.getvalue()
        assert "Heading" in rendered
        assert "Some text." in rendered
        assert "#" not in rendered
