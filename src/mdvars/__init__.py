"""mdvars: YAML frontmatter variables for markdown documents."""

from mdvars.core.pipeline import build_variables, preprocess_dynamic_text, remove_frontmatter

__version__ = "0.1.0"

__all__ = ["build_variables", "preprocess_dynamic_text", "remove_frontmatter", "__version__"]
