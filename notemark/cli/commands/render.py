"""Render command: show note markup styled, or export it as HTML."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from notemark.cli.utils.io import read_markup
from notemark.rendering.exporter import render_note_page, to_html, to_rich_text
from notemark.rendering.renderer import render_text

app = typer.Typer(help="Render note markup")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    path: Optional[Path] = typer.Argument(
        None, help="File with note text (stdin when omitted)"
    ),
    as_html: bool = typer.Option(False, "--html", help="Print an HTML fragment"),
    full_page: bool = typer.Option(
        False, "--full-page", help="Wrap the HTML in a standalone page"
    ),
    title: str = typer.Option("Note", "--title", help="Page title for --full-page"),
):
    """Render markup to the terminal or to HTML."""
    tree = render_text(read_markup(path))
    if full_page:
        page = render_note_page(title, to_html(tree))
        console.print(page, markup=False, highlight=False, soft_wrap=True)
    elif as_html:
        console.print(to_html(tree), markup=False, highlight=False, soft_wrap=True)
    else:
        console.print(to_rich_text(tree), soft_wrap=True)
