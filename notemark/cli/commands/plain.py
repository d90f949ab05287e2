"""Plain command: print the unstyled projection used for search."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from notemark.cli.utils.io import read_markup
from notemark.projection import project

app = typer.Typer(help="Strip note markup")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    path: Optional[Path] = typer.Argument(
        None, help="File with note text (stdin when omitted)"
    ),
):
    """Print the text with all marker syntax removed."""
    console.print(project(read_markup(path)), markup=False, highlight=False, soft_wrap=True)
