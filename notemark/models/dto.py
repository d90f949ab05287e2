"""Note records and list previews."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from ..domain import MatchSpan
from ._base import NoteModel


class NoteRecord(NoteModel):
    """A note as stored remotely: markup is kept as plain text with inline markers."""

    id: str
    title: str = ""
    content: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, v):
        # Stores hand out numeric ids as well as uuids
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("title", mode="before")
    @classmethod
    def _none_title(cls, v):
        return "" if v is None else v

    @field_validator("tags", mode="before")
    @classmethod
    def _none_tags(cls, v):
        return [] if v is None else v


@dataclass(frozen=True)
class NotePreview:
    """Highlighted fields of one note for a list row."""

    note_id: str
    title: List[MatchSpan]
    content: List[MatchSpan]
    tags: List[List[MatchSpan]] = field(default_factory=list)
    hidden_tags: int = 0
    updated_at: Optional[datetime] = None

    @property
    def has_content(self) -> bool:
        return any(span.text for span in self.content)
