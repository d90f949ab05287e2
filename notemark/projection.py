"""Plain-text projection of note markup, used as the search key."""

from __future__ import annotations

from typing import List, Optional

from .tokenizer import iter_markers


def project(text: Optional[str]) -> str:
    """Strip marker syntax from ``text`` and keep the marked content verbatim.

    Shares the tokenizer's rule matcher, so the result always equals the
    concatenated segment texts of ``tokenize(text)``.
    """
    if not text:
        return ""
    parts: List[str] = []
    for idx, line in enumerate(text.split("\n")):
        if idx:
            parts.append("\n")
        last = 0
        for m in iter_markers(line):
            parts.append(line[last : m.start])
            parts.append(m.content)
            last = m.end
        parts.append(line[last:])
    return "".join(parts)


def project_fields(*values: Optional[str]) -> List[str]:
    """Project several raw fields (title, content, tags) in one go."""
    return [project(v) for v in values]
