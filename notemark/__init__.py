"""Inline note markup: tokenizer, plain projection, renderer and search highlighting."""

from .domain import ColorVariant, MatchSpan, Segment, SegmentKind, Style, StyleKind
from .projection import project
from .rendering import render, render_highlight, render_lines, render_text
from .search import highlight
from .service import NotesIndex, load_notes
from .tokenizer import tokenize, tokenize_lines

__all__ = [
    "ColorVariant",
    "MatchSpan",
    "Segment",
    "SegmentKind",
    "Style",
    "StyleKind",
    "tokenize",
    "tokenize_lines",
    "project",
    "render",
    "render_lines",
    "render_text",
    "render_highlight",
    "highlight",
    "NotesIndex",
    "load_notes",
]
