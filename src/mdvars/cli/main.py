"""Typer app: render, strip, vars, and the config command group."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.logging import RichHandler

from mdvars.cli._shared import FORMAT_OPTION, get_document, get_render_config
from mdvars.core.pipeline import build_variables, preprocess_dynamic_text, remove_frontmatter
from mdvars.core.substitute import find_placeholders
from mdvars.utils.output import error_console, output, output_table, render_markdown
from mdvars.utils.paths import code_language, is_markdown_file, wrap_code_block

app = typer.Typer(
    name="mdvars",
    help="mdvars: YAML frontmatter variables for markdown rendered in the terminal.",
    no_args_is_help=True,
)

SOURCE_ARGUMENT = typer.Argument(..., help="Markdown or code file to read ('-' for stdin)")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=error_console, show_path=False)],
            force=True,
        )


def _decode(document: bytes) -> str:
    return document.decode("utf-8", "surrogateescape")


@app.command()
def render(
    source: str = SOURCE_ARGUMENT,
    style: Optional[str] = typer.Option(None, "--style", "-s", help="Style name or Pygments theme"),
    width: Optional[int] = typer.Option(None, "--width", "-w", min=1, help="Word-wrap width"),
    raw: bool = typer.Option(False, "--raw", help="Print the processed text without rendering"),
) -> None:
    """Expand frontmatter variables and render the document."""
    document = get_document(source)
    config = get_render_config()

    if source == "-" or is_markdown_file(source):
        text = _decode(preprocess_dynamic_text(document))
    else:
        text = wrap_code_block(_decode(document), code_language(source))

    if raw:
        typer.echo(text.encode("utf-8", "surrogateescape"), nl=False)
        return
    render_markdown(text, style=style or config.style, width=width or config.width)


@app.command()
def strip(source: str = SOURCE_ARGUMENT) -> None:
    """Print the document with its frontmatter removed."""
    document = get_document(source)
    typer.echo(remove_frontmatter(document), nl=False)


@app.command("vars")
def show_vars(
    source: str = SOURCE_ARGUMENT,
    fmt: Optional[str] = FORMAT_OPTION,
    unresolved: bool = typer.Option(
        False, "--unresolved", "-u", help="List placeholders with no matching variable"
    ),
) -> None:
    """Show the variables available to a document (frontmatter plus built-ins)."""
    document = get_document(source)
    variables = build_variables(document)

    if unresolved:
        body = _decode(remove_frontmatter(document))
        missing = [key for key in find_placeholders(body) if key not in variables]
        output(missing, fmt=fmt)
        return

    if fmt == "json":
        output(variables, fmt="json")
    else:
        rows = [{"key": k, "value": v} for k, v in sorted(variables.items())]
        output_table(rows, ["key", "value"], fmt=fmt)


# Register subcommand groups
from mdvars.cli.config_cmd import config_app

app.add_typer(config_app, name="config", help="Manage global configuration")
