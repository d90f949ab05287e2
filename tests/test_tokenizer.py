"""Tests for the markup tokenizer."""

import unittest

from notemark.domain import ColorVariant, Segment, SegmentKind, Style, StyleKind
from notemark.tokenizer import iter_markers, tokenize, tokenize_lines

BOLD = Style(StyleKind.BOLD)
ITALIC = Style(StyleKind.ITALIC)
STRIKE = Style(StyleKind.STRIKE)


def red():
    return Style(StyleKind.COLOR, ColorVariant.RED)


class TokenizeTest(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize(None), [])

    def test_plain_only(self):
        self.assertEqual(tokenize("just text"), [Segment.plain("just text")])

    def test_double_bold_before_single_bold(self):
        self.assertEqual(
            tokenize("**bold** and *also bold*"),
            [
                Segment.styled(BOLD, "bold"),
                Segment.plain(" and "),
                Segment.styled(BOLD, "also bold"),
            ],
        )

    def test_triple_star_is_double_bold_first(self):
        self.assertEqual(
            tokenize("***bold***"),
            [Segment.styled(BOLD, "*bold"), Segment.plain("*")],
        )

    def test_adjacent_single_bold_quirk(self):
        self.assertEqual(
            tokenize("*a**b*"),
            [Segment.styled(BOLD, "a"), Segment.styled(BOLD, "b")],
        )

    def test_color_span(self):
        self.assertEqual(
            tokenize("#r(urgent) task"),
            [Segment.styled(red(), "urgent"), Segment.plain(" task")],
        )

    def test_color_letter_is_case_insensitive(self):
        segs = tokenize("#B(calm)")
        self.assertEqual(len(segs), 1)
        self.assertEqual(segs[0].style.variant, ColorVariant.BLUE)
        self.assertEqual(segs[0].style.color_hex, "#3B82F6")

    def test_unknown_color_letter_is_plain(self):
        self.assertEqual(tokenize("#x(nope)"), [Segment.plain("#x(nope)")])

    def test_color_content_stops_at_first_paren(self):
        self.assertEqual(
            tokenize("#y(a (b) c)"),
            [
                Segment.styled(Style(StyleKind.COLOR, ColorVariant.YELLOW), "a (b"),
                Segment.plain(" c)"),
            ],
        )

    def test_color_wins_over_inner_markers(self):
        self.assertEqual(
            tokenize("#g(*x*)"),
            [Segment.styled(Style(StyleKind.COLOR, ColorVariant.GREEN), "*x*")],
        )

    def test_italic_word_boundary(self):
        self.assertEqual(tokenize("a_b_c"), [Segment.plain("a_b_c")])
        self.assertEqual(
            tokenize("hello _world_ today"),
            [
                Segment.plain("hello "),
                Segment.styled(ITALIC, "world"),
                Segment.plain(" today"),
            ],
        )

    def test_snake_case_next_to_italic(self):
        self.assertEqual(
            tokenize("snake_case_name and _real_"),
            [Segment.plain("snake_case_name and "), Segment.styled(ITALIC, "real")],
        )

    def test_italic_closer_skips_word_followed_underscore(self):
        self.assertEqual(tokenize("_a_b_"), [Segment.styled(ITALIC, "a_b")])

    def test_strikethrough(self):
        self.assertEqual(
            tokenize("~gone~ now"),
            [Segment.styled(STRIKE, "gone"), Segment.plain(" now")],
        )

    def test_unterminated_marker_is_literal(self):
        self.assertEqual(tokenize("price is *5"), [Segment.plain("price is *5")])
        self.assertEqual(tokenize("#r(open"), [Segment.plain("#r(open")])

    def test_empty_content_is_a_match(self):
        self.assertEqual(tokenize("**"), [Segment.styled(BOLD, "")])
        self.assertEqual(tokenize("#r()"), [Segment.styled(red(), "")])

    def test_markers_do_not_span_lines(self):
        self.assertEqual(
            tokenize("*open\nclose*"),
            [Segment.plain("*open"), Segment.plain("\n"), Segment.plain("close*")],
        )
        self.assertEqual(
            tokenize("#r(a\nb)"),
            [Segment.plain("#r(a"), Segment.plain("\n"), Segment.plain("b)")],
        )

    def test_plain_lines_are_not_merged(self):
        self.assertEqual(
            tokenize("a\nb"),
            [Segment.plain("a"), Segment.plain("\n"), Segment.plain("b")],
        )
        self.assertEqual(
            tokenize("a\n\nb"),
            [
                Segment.plain("a"),
                Segment.plain("\n"),
                Segment.plain("\n"),
                Segment.plain("b"),
            ],
        )
        for seg in tokenize("one *two*\nthree\n_four_ five"):
            self.assertTrue(seg.text == "\n" or "\n" not in seg.text)

    def test_newlines_kept_in_plain_segments(self):
        self.assertEqual(
            tokenize("**hi**\n_yo_"),
            [
                Segment.styled(BOLD, "hi"),
                Segment.plain("\n"),
                Segment.styled(ITALIC, "yo"),
            ],
        )

    def test_segment_kinds(self):
        segs = tokenize("a *b* c")
        self.assertEqual(
            [s.kind for s in segs],
            [SegmentKind.PLAIN, SegmentKind.STYLED, SegmentKind.PLAIN],
        )
        self.assertIsNone(segs[0].style)

    def test_long_unmatched_runs(self):
        text = "_a" * 50000 + " " + "~" + "b" * 50000
        self.assertEqual(tokenize(text), [Segment.plain(text)])
        stars = "*" * 100001
        segs = tokenize(stars)
        self.assertEqual(segs[-1], Segment.plain("*"))
        self.assertEqual(len(segs), 25001)


class TokenizeLinesTest(unittest.TestCase):
    def test_lines_are_independent(self):
        self.assertEqual(
            tokenize_lines("**hi**\n_yo_"),
            [[Segment.styled(BOLD, "hi")], [Segment.styled(ITALIC, "yo")]],
        )

    def test_blank_lines(self):
        self.assertEqual(
            tokenize_lines("a\n\nb"),
            [[Segment.plain("a")], [], [Segment.plain("b")]],
        )

    def test_empty_text(self):
        self.assertEqual(tokenize_lines(""), [])


class IterMarkersTest(unittest.TestCase):
    def test_offsets(self):
        ms = list(iter_markers("x **b** ~s~"))
        self.assertEqual([(m.start, m.end, m.content) for m in ms], [(2, 7, "b"), (8, 11, "s")])

    def test_no_marker_characters(self):
        self.assertEqual(list(iter_markers("nothing here")), [])


if __name__ == "__main__":
    unittest.main()
