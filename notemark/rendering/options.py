"""
Render configuration for note markup output.

Centralizes behavior flags so callers can tune defaults without touching
core logic. The color palette is not part of it: marker colors are fixed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RenderConfig:
    # Logging/debug
    debug: bool = False

    # CSS class put on <mark> elements for search hits
    highlight_class: str = "search-hit"

    # Note list previews: how many tags to show before "+N"
    preview_tag_limit: int = 2
    # Cut preview content to this many characters (None keeps all of it)
    preview_chars: Optional[int] = None

    # <html lang="..."> for full pages
    page_lang: str = "en"

    # rich style used for search hits in the terminal
    rich_highlight_style: str = "black on yellow"
