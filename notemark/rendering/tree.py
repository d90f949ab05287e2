"""
Display tree produced by the renderer.

The tree is deliberately flat: a ``Fragment`` root holding text, styled and
line-break nodes in document order. Styles never nest, so a styled node only
carries text. UI layers walk ``Fragment.children``; the exporter module turns
the tree into HTML, rich Text or plain text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class NodeKind(str, Enum):
    BOLD = "bold"
    ITALIC = "italic"
    STRIKE = "strike"
    COLOR = "color"
    HIGHLIGHT = "highlight"


@dataclass(frozen=True)
class TextNode:
    text: str


@dataclass(frozen=True)
class StyleNode:
    kind: NodeKind
    text: str
    color: Optional[str] = None  # hex, COLOR only


@dataclass(frozen=True)
class LineBreak:
    pass


Node = Union[TextNode, StyleNode, LineBreak]


@dataclass
class Fragment:
    children: List[Node] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self):
        return iter(self.children)

    @property
    def line_count(self) -> int:
        if not self.children:
            return 0
        return 1 + sum(1 for c in self.children if isinstance(c, LineBreak))
