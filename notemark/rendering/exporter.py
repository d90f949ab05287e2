"""
Exporters for the note display tree.

Turn a ``Fragment`` into an HTML fragment, a standalone HTML page, a
``rich.text.Text`` for terminal output, or plain text. All functions are pure.
"""

from __future__ import annotations

import html
import logging
from typing import List, Optional

from rich.style import Style
from rich.text import Text

from .options import RenderConfig
from .tree import Fragment, LineBreak, NodeKind, StyleNode, TextNode

LOGGER = logging.getLogger(__name__)

_HTML_TAGS = {
    NodeKind.BOLD: "strong",
    NodeKind.ITALIC: "em",
    NodeKind.STRIKE: "s",
}

_RICH_STYLES = {
    NodeKind.BOLD: Style(bold=True),
    NodeKind.ITALIC: Style(italic=True),
    NodeKind.STRIKE: Style(strike=True),
}


def _node_html(node: StyleNode, config: RenderConfig) -> str:
    body = html.escape(node.text)
    tag = _HTML_TAGS.get(node.kind)
    if tag:
        return f"<{tag}>{body}</{tag}>"
    if node.kind == NodeKind.COLOR:
        if not node.color:
            return body
        return f'<span style="color:{html.escape(node.color)}">{body}</span>'
    # HIGHLIGHT
    cls = config.highlight_class
    cls_attr = f' class="{html.escape(cls)}"' if cls else ""
    return f"<mark{cls_attr}>{body}</mark>"


def to_html(tree: Fragment, config: Optional[RenderConfig] = None) -> str:
    """Serialize the tree to an HTML fragment (escaped text, ``<br>`` between lines)."""
    config = config or RenderConfig()
    fragments: List[str] = []
    for node in tree.children:
        if isinstance(node, LineBreak):
            fragments.append("<br>")
        elif isinstance(node, StyleNode):
            fragments.append(_node_html(node, config))
        else:
            fragments.append(html.escape(node.text))
    if config.debug:
        LOGGER.debug(
            "notemark.exporter.html nodes=%d chars=%d",
            len(tree.children),
            sum(len(f) for f in fragments),
        )
    return "".join(fragments)


def render_note_page(
    title: str,
    html_fragment: str,
    config: Optional[RenderConfig] = None,
    extra_css: str = "",
) -> str:
    config = config or RenderConfig()
    mark_sel = f"mark.{config.highlight_class}" if config.highlight_class else "mark"
    return (
        f'<!doctype html><html lang="{html.escape(config.page_lang)}">'
        '<meta charset="utf-8">'
        '<meta name="color-scheme" content="light dark">'
        f"<title>{html.escape(title)}</title>"
        "<style>"
        "body{font-family:-apple-system,BlinkMacSystemFont,Segoe UI,Roboto,Helvetica,Arial,sans-serif;line-height:1.5;background:#fff;color:#000}"
        ".note-content{white-space:normal;overflow-wrap:anywhere}"
        f"{mark_sel}{{background:#FDE04799;color:inherit;border-radius:2px;padding:0 .1em}}"
        "@media (prefers-color-scheme: dark){"
        "body{background:#111;color:#eee}"
        f"{mark_sel}{{background:#CA8A0499}}"
        "}"
        f'{extra_css}</style><div class="note-content">{html_fragment}</div></html>'
    )


def to_rich_text(tree: Fragment, config: Optional[RenderConfig] = None) -> Text:
    """Build a ``rich.text.Text`` with the same styles, for console output."""
    config = config or RenderConfig()
    out = Text()
    for node in tree.children:
        if isinstance(node, LineBreak):
            out.append("\n")
        elif isinstance(node, StyleNode):
            if node.kind == NodeKind.COLOR:
                style = Style(color=node.color) if node.color else None
                out.append(node.text, style=style)
            elif node.kind == NodeKind.HIGHLIGHT:
                out.append(node.text, style=config.rich_highlight_style)
            else:
                out.append(node.text, style=_RICH_STYLES[node.kind])
        else:
            out.append(node.text)
    return out


def to_plain(tree: Fragment) -> str:
    """Text content of the tree; line breaks become ``\\n``."""
    parts: List[str] = []
    for node in tree.children:
        if isinstance(node, LineBreak):
            parts.append("\n")
        elif isinstance(node, (TextNode, StyleNode)):
            parts.append(node.text)
    return "".join(parts)
