"""
Case-insensitive substring highlighting over projected note text.

Matches are leftmost-first and non-overlapping: after a hit the scan resumes
at the end of the matched run. Folding is per character and only applied when
it keeps the string length, so every span offset refers to the original text.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .domain import MatchSpan

LOGGER = logging.getLogger(__name__)


def _fold(text: str) -> str:
    # One character at a time: whole-string lower() maps a word-final "Σ" to
    # "ς", and "İ".lower() is two code points (those are kept as-is)
    out = []
    for ch in text:
        low = ch.lower()
        out.append(low if len(low) == 1 else ch)
    return "".join(out)


def contains(text: Optional[str], query: Optional[str]) -> bool:
    """True when ``query`` occurs in ``text`` ignoring case; empty query always matches."""
    if not query:
        return True
    if not text:
        return False
    return _fold(query) in _fold(text)


def highlight(plain_text: Optional[str], query: Optional[str]) -> List[MatchSpan]:
    """Split ``plain_text`` into alternating unmatched/matched spans for ``query``."""
    text = plain_text or ""
    if not query or not text:
        return [MatchSpan(text, False)]

    haystack = _fold(text)
    needle = _fold(query)
    spans: List[MatchSpan] = []
    pos = 0
    while True:
        hit = haystack.find(needle, pos)
        if hit < 0:
            break
        if hit > pos:
            spans.append(MatchSpan(text[pos:hit], False))
        end = hit + len(needle)
        spans.append(MatchSpan(text[hit:end], True))
        pos = end
    if pos < len(text):
        spans.append(MatchSpan(text[pos:], False))
    LOGGER.debug(
        "notemark.search.highlight len=%d query_len=%d hits=%d",
        len(text),
        len(query),
        sum(1 for s in spans if s.matched),
    )
    return spans
