"""
Note search over projected markup.

``NotesIndex`` holds the notes supplied by the note store and answers list
queries: which notes match a query and how their list rows are highlighted.
Matching always runs against the plain projection of title, content and tags,
so a query finds what the user sees rather than the marker syntax.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional, Union

from pydantic import ValidationError

from .exceptions import NoteFileError
from .models import NotePreview, NoteRecord
from .projection import project
from .rendering.options import RenderConfig
from .rendering.renderer import render_text
from .rendering.tree import Fragment
from .search import contains, highlight

LOGGER = logging.getLogger(__name__)


class NotesIndex:
    """In-memory search over a list of notes."""

    def __init__(
        self,
        notes: Optional[Iterable[NoteRecord]] = None,
        config: Optional[RenderConfig] = None,
    ):
        self.config = config or RenderConfig()
        self._notes: List[NoteRecord] = list(notes or [])

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[NoteRecord]:
        return iter(self._notes)

    def add(self, note: NoteRecord) -> None:
        self._notes.append(note)

    @staticmethod
    def matches(note: NoteRecord, query: Optional[str]) -> bool:
        """True when the projected title, content or any tag contains ``query``."""
        if not query:
            return True
        if contains(project(note.title), query):
            return True
        if note.content and contains(project(note.content), query):
            return True
        return any(contains(project(tag), query) for tag in note.tags)

    def search(self, query: Optional[str]) -> List[NoteRecord]:
        """Notes matching ``query``, in their original order."""
        hits = [n for n in self._notes if self.matches(n, query)]
        LOGGER.debug(
            "notemark.service.search query_len=%d notes=%d hits=%d",
            len(query or ""),
            len(self._notes),
            len(hits),
        )
        return hits

    def preview(self, note: NoteRecord, query: Optional[str] = "") -> NotePreview:
        content = project(note.content)
        limit = self.config.preview_chars
        if limit is not None and len(content) > limit:
            content = content[:limit]
        tag_limit = max(0, self.config.preview_tag_limit)
        shown = note.tags[:tag_limit]
        return NotePreview(
            note_id=note.id,
            title=highlight(project(note.title), query),
            content=highlight(content, query),
            tags=[highlight(project(tag), query) for tag in shown],
            hidden_tags=len(note.tags) - len(shown),
            updated_at=note.updated_at,
        )

    def previews(self, query: Optional[str] = "") -> List[NotePreview]:
        return [self.preview(n, query) for n in self.search(query)]

    def render(self, note: NoteRecord) -> Fragment:
        """Display tree of the note body."""
        return render_text(note.content)


def _records_from_payload(payload: Any) -> List[Any]:
    if isinstance(payload, dict) and "notes" in payload:
        payload = payload["notes"]
    if not isinstance(payload, list):
        raise TypeError("expected a JSON array of notes or an object with 'notes'")
    return payload


def load_notes(path: Union[str, Path]) -> List[NoteRecord]:
    """Read note records from a JSON file."""
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError as e:
        raise NoteFileError(p, "file not found") from e
    except (OSError, ValueError) as e:
        raise NoteFileError(p, f"cannot read JSON ({e})") from e

    try:
        raw = _records_from_payload(payload)
        notes = [NoteRecord.model_validate(item) for item in raw]
    except TypeError as e:
        raise NoteFileError(p, str(e)) from e
    except ValidationError as e:
        raise NoteFileError(p, f"invalid note record ({e.error_count()} errors)") from e
    LOGGER.debug("notemark.service.load path=%s notes=%d", p, len(notes))
    return notes
