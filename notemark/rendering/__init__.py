"""Rendering support for note markup, transport-agnostic.

Contains:
- tree: display tree node types
- renderer: pure mapping from segments / match spans to a display tree
- exporter: HTML fragment + page, rich Text and plain-text output
- options: render configuration
"""

from .renderer import render, render_highlight, render_lines, render_text
from .tree import Fragment, LineBreak, NodeKind, StyleNode, TextNode

__all__ = [
    "render",
    "render_lines",
    "render_text",
    "render_highlight",
    "Fragment",
    "LineBreak",
    "NodeKind",
    "StyleNode",
    "TextNode",
]
