"""
Pure renderer for note markup.

Maps segments (or search match spans) to a display tree. No I/O.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from ..domain import MatchSpan, Segment, StyleKind
from ..tokenizer import tokenize_lines
from .tree import Fragment, LineBreak, Node, NodeKind, StyleNode, TextNode

_NODE_KIND = {
    StyleKind.BOLD: NodeKind.BOLD,
    StyleKind.ITALIC: NodeKind.ITALIC,
    StyleKind.STRIKE: NodeKind.STRIKE,
    StyleKind.COLOR: NodeKind.COLOR,
}


def _segment_node(seg: Segment) -> Optional[Node]:
    # Empty runs (e.g. "**" or "#r()") must not leave empty elements behind
    if not seg.text:
        return None
    if seg.is_plain or seg.style is None:
        return TextNode(seg.text)
    return StyleNode(
        kind=_NODE_KIND[seg.style.kind],
        text=seg.text,
        color=seg.style.color_hex,
    )


def _line_nodes(segments: Iterable[Segment]) -> List[Node]:
    out: List[Node] = []
    for seg in segments:
        node = _segment_node(seg)
        if node is not None:
            out.append(node)
    return out


def render(segments: Iterable[Segment]) -> Fragment:
    """Render one line's segments."""
    return Fragment(_line_nodes(segments))


def render_lines(lines: Sequence[Iterable[Segment]]) -> Fragment:
    """Render each line and join them with explicit line breaks."""
    children: List[Node] = []
    for i, segs in enumerate(lines):
        if i:
            children.append(LineBreak())
        children.extend(_line_nodes(segs))
    return Fragment(children)


def render_text(text: Optional[str]) -> Fragment:
    """Tokenize and render raw note text, one line at a time."""
    return render_lines(tokenize_lines(text))


def render_highlight(spans: Iterable[MatchSpan]) -> Fragment:
    """Render highlighter output; matched spans become HIGHLIGHT nodes."""
    children: List[Node] = []
    for span in spans:
        # projected text keeps its newlines; they become line breaks here too
        for i, part in enumerate(span.text.split("\n")):
            if i:
                children.append(LineBreak())
            if not part:
                continue
            if span.matched:
                children.append(StyleNode(kind=NodeKind.HIGHLIGHT, text=part))
            else:
                children.append(TextNode(part))
    return Fragment(children)
