"""Input helpers shared by the CLI commands."""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

console = Console(stderr=True)


def read_markup(path: Optional[Path]) -> str:
    """Read note text from ``path``, or from stdin when no path (or "-") is given."""
    if path is None or str(path) == "-":
        return sys.stdin.read()
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"[bold red]Error:[/bold red] cannot read {path}: {e.strerror}")
        raise typer.Exit(1)
