"""
Inline markup tokenizer for note text.

Recognized markers, tried in this order at every cursor position:

  1. ``#r(...)``, ``#b(...)``, ``#g(...)``, ``#y(...)``  colored span
  2. ``**...**``                                         bold
  3. ``*...*``                                           bold
  4. ``_..._``                                           italic (word-boundary guarded)
  5. ``~...~``                                           strikethrough

The first rule that matches wins and scanning resumes after the match. Content
is the shortest run up to the closing marker and never crosses a newline. The
closing positions are precomputed per line, so a scan is linear in the input
length even for long runs of unmatched markers.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

from .domain import BOLD, ITALIC, STRIKE, ColorVariant, Segment, Style, color

LOGGER = logging.getLogger(__name__)

# ASCII word characters, as in a regex \w without unicode support
_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")

_MARKER_CHARS = frozenset("#*_~")


@dataclass(frozen=True)
class MarkerMatch:
    """One marker occurrence within a line: ``line[start:end]`` is the syntax."""

    start: int
    end: int
    style: Style
    content: str


def _next_index(line: str, pred: Callable[[int], bool]) -> List[int]:
    # out[k] = smallest j >= k with pred(j), or -1; out[len(line)] == -1
    out = [-1] * (len(line) + 1)
    nxt = -1
    for k in range(len(line) - 1, -1, -1):
        if pred(k):
            nxt = k
        out[k] = nxt
    return out


class _LineScanner:
    def __init__(self, line: str):
        self.line = line
        n = len(line)
        none = [-1] * (n + 1)
        self._close_paren = (
            _next_index(line, lambda k: line[k] == ")") if "#" in line else none
        )
        if "*" in line:
            self._star = _next_index(line, lambda k: line[k] == "*")
            self._double_star = _next_index(
                line, lambda k: line[k] == "*" and k + 1 < n and line[k + 1] == "*"
            )
        else:
            self._star = self._double_star = none
        self._italic_close = (
            _next_index(
                line,
                lambda k: line[k] == "_"
                and (k + 1 >= n or line[k + 1] not in _WORD_CHARS),
            )
            if "_" in line
            else none
        )
        self._tilde = (
            _next_index(line, lambda k: line[k] == "~") if "~" in line else none
        )

    def match_at(self, i: int) -> Optional[MarkerMatch]:
        line = self.line
        ch = line[i]
        if ch == "#":
            if i + 2 < len(line) and line[i + 2] == "(":
                variant = ColorVariant.from_letter(line[i + 1])
                if variant is not None:
                    j = self._close_paren[i + 3]
                    if j >= 0:
                        return MarkerMatch(i, j + 1, color(variant), line[i + 3 : j])
            return None
        if ch == "*":
            if i + 1 < len(line) and line[i + 1] == "*":
                j = self._double_star[i + 2]
                if j >= 0:
                    return MarkerMatch(i, j + 2, BOLD, line[i + 2 : j])
            j = self._star[i + 1]
            if j >= 0:
                return MarkerMatch(i, j + 1, BOLD, line[i + 1 : j])
            return None
        if ch == "_":
            if i > 0 and line[i - 1] in _WORD_CHARS:
                return None
            j = self._italic_close[i + 1]
            if j >= 0:
                return MarkerMatch(i, j + 1, ITALIC, line[i + 1 : j])
            return None
        if ch == "~":
            j = self._tilde[i + 1]
            if j >= 0:
                return MarkerMatch(i, j + 1, STRIKE, line[i + 1 : j])
        return None


def iter_markers(line: str) -> Iterator[MarkerMatch]:
    """Yield the non-overlapping marker matches of a single line, left to right."""
    if not line or _MARKER_CHARS.isdisjoint(line):
        return
    scanner = _LineScanner(line)
    i = 0
    n = len(line)
    while i < n:
        if line[i] in _MARKER_CHARS:
            m = scanner.match_at(i)
            if m is not None:
                yield m
                i = m.end
                continue
        i += 1


def _tokenize_line(line: str) -> List[Segment]:
    out: List[Segment] = []
    last = 0
    for m in iter_markers(line):
        if m.start > last:
            out.append(Segment.plain(line[last : m.start]))
        out.append(Segment.styled(m.style, m.content))
        last = m.end
    if last < len(line):
        out.append(Segment.plain(line[last:]))
    return out


def tokenize(text: Optional[str]) -> List[Segment]:
    """Split ``text`` into plain and styled segments.

    Each newline is a plain segment of its own, so no segment spans two lines
    and joining the segment texts gives exactly the plain projection of ``text``.
    """
    if not text:
        return []
    out: List[Segment] = []
    for idx, line in enumerate(text.split("\n")):
        if idx:
            out.append(Segment.plain("\n"))
        out.extend(_tokenize_line(line))
    LOGGER.debug("notemark.tokenizer.tokenize len=%d segments=%d", len(text), len(out))
    return out


def tokenize_lines(text: Optional[str]) -> List[List[Segment]]:
    """Tokenize each ``\\n``-separated line on its own."""
    if not text:
        return []
    lines = [_tokenize_line(line) for line in text.split("\n")]
    LOGGER.debug("notemark.tokenizer.lines count=%d", len(lines))
    return lines
