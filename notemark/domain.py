# notemark/domain.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SegmentKind(str, Enum):
    PLAIN = "plain"
    STYLED = "styled"


class StyleKind(str, Enum):
    BOLD = "bold"
    ITALIC = "italic"
    STRIKE = "strike"
    COLOR = "color"


class ColorVariant(str, Enum):
    """Marker letter -> display color. The palette is fixed."""

    RED = "r"
    BLUE = "b"
    GREEN = "g"
    YELLOW = "y"

    @property
    def hex(self) -> str:
        return _PALETTE[self]

    @classmethod
    def from_letter(cls, letter: Optional[str]) -> Optional["ColorVariant"]:
        if not letter:
            return None
        try:
            return cls(letter.lower())
        except ValueError:
            return None


_PALETTE = {
    ColorVariant.RED: "#EF4444",
    ColorVariant.BLUE: "#3B82F6",
    ColorVariant.GREEN: "#22C55E",
    ColorVariant.YELLOW: "#EAB308",
}


@dataclass(frozen=True)
class Style:
    kind: StyleKind
    variant: Optional[ColorVariant] = None  # only for COLOR

    @property
    def color_hex(self) -> Optional[str]:
        return self.variant.hex if self.variant is not None else None


BOLD = Style(StyleKind.BOLD)
ITALIC = Style(StyleKind.ITALIC)
STRIKE = Style(StyleKind.STRIKE)


def color(variant: ColorVariant) -> Style:
    return Style(StyleKind.COLOR, variant)


@dataclass(frozen=True)
class Segment:
    """A contiguous run of note text, plain or carrying one style."""

    kind: SegmentKind
    text: str
    style: Optional[Style] = None

    @staticmethod
    def plain(text: str) -> "Segment":
        return Segment(SegmentKind.PLAIN, text)

    @staticmethod
    def styled(style: Style, text: str) -> "Segment":
        return Segment(SegmentKind.STYLED, text, style)

    @property
    def is_plain(self) -> bool:
        return self.kind is SegmentKind.PLAIN


@dataclass(frozen=True)
class MatchSpan:
    text: str
    matched: bool
