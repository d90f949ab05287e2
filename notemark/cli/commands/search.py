"""Search command: list notes matching a query with highlighted previews."""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from notemark.exceptions import NotemarkException
from notemark.models import NotePreview
from notemark.rendering.exporter import to_rich_text
from notemark.rendering.options import RenderConfig
from notemark.rendering.renderer import render_highlight
from notemark.service import NotesIndex, load_notes

app = typer.Typer(help="Search notes")
console = Console()


def _tags_cell(preview: NotePreview, config: RenderConfig) -> Text:
    cell = Text()
    for i, spans in enumerate(preview.tags):
        if i:
            cell.append(" ")
        cell.append("#")
        cell.append_text(to_rich_text(render_highlight(spans), config))
    if preview.hidden_tags:
        cell.append(f" +{preview.hidden_tags}", style="dim")
    return cell


@app.callback(invoke_without_command=True)
def main(
    notes_file: Path = typer.Argument(..., help="JSON file with note records"),
    query: str = typer.Argument("", help="Text to look for (case-insensitive)"),
    limit: int = typer.Option(0, "--limit", "-n", help="Show at most N notes (0 = all)"),
    preview_chars: int = typer.Option(
        120,
        "--preview-chars",
        min=0,
        help="Cut content previews to N characters (0 = no cut)",
    ),
):
    """List notes whose title, content or tags contain QUERY."""
    config = RenderConfig(preview_chars=preview_chars or None)
    try:
        index = NotesIndex(load_notes(notes_file), config=config)
    except NotemarkException as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    previews = index.previews(query)
    if not previews:
        console.print("No notes found" if query else "No notes yet")
        return
    if limit > 0:
        previews = previews[:limit]

    table = Table("Title", "Preview", "Tags", "Updated")
    for p in previews:
        table.add_row(
            to_rich_text(render_highlight(p.title), config),
            to_rich_text(render_highlight(p.content), config),
            _tags_cell(p, config),
            p.updated_at.strftime("%d %b %Y") if p.updated_at else "",
        )
    console.print(table)
