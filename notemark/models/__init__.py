"""Public exports for note data models."""

from __future__ import annotations

from .dto import NotePreview, NoteRecord

__all__ = [
    "NotePreview",
    "NoteRecord",
]
