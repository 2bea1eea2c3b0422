"""Output formatting utilities: text vs JSON, rich markdown rendering."""

from __future__ import annotations

import json
import sys
from typing import Any

from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from mdvars.core.schema import STYLE_THEMES

console = Console()
error_console = Console(stderr=True)


def is_piped() -> bool:
    return not sys.stdout.isatty()


def output(data: Any, fmt: str | None = None) -> None:
    """Output data in the requested format.

    If fmt is None, auto-detect: json when piped, text for TTY.
    """
    if fmt is None:
        fmt = "json" if is_piped() else "text"

    if fmt == "json":
        if isinstance(data, (dict, list)):
            print(json.dumps(data, indent=2, default=str))
        else:
            print(json.dumps({"value": str(data)}, default=str))
    else:
        if isinstance(data, (dict, list)):
            console.print_json(json.dumps(data, default=str))
        else:
            console.print(str(data))


def output_table(rows: list[dict[str, str]], columns: list[str], fmt: str | None = None) -> None:
    if fmt is None:
        fmt = "json" if is_piped() else "text"

    if fmt == "json":
        print(json.dumps(rows, indent=2, default=str))
    else:
        table = Table()
        for col in columns:
            table.add_column(col.title())
        for row in rows:
            table.add_row(*[str(row.get(col, "")) for col in columns])
        console.print(table)


def error(msg: str) -> None:
    error_console.print(f"[red]Error:[/red] {msg}")


def success(msg: str) -> None:
    console.print(f"[green]{msg}[/green]")


def info(msg: str) -> None:
    console.print(f"[dim]{msg}[/dim]")


def resolve_code_theme(style: str) -> str:
    """Map a style name to a Pygments theme. Unknown names are used as Pygments styles directly."""
    return STYLE_THEMES.get(style, style)


def render_markdown(
    text: str,
    style: str = "auto",
    width: int | None = None,
    target: Console | None = None,
) -> None:
    """Render markdown to the terminal."""
    if target is None:
        target = Console(width=width, no_color=style == "notty") if width or style == "notty" else console
    target.print(Markdown(text, code_theme=resolve_code_theme(style)))
