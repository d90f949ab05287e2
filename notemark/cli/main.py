#!/usr/bin/env python
"""Command line interface for notemark."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from notemark.cli.commands import plain, render, search

app = typer.Typer(help="Render, strip and search note markup")
console = Console()

# Add command groups
app.add_typer(render.app, name="render")
app.add_typer(plain.app, name="plain")
app.add_typer(search.app, name="search")


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging"
    ),
):
    """Work with notes written in the inline markup (**bold**, _italic_, ~strike~, #r(color))."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
