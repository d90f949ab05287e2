"""Tests for the plain-text projection."""

import unittest

from notemark.projection import project, project_fields
from notemark.tokenizer import tokenize

SAMPLES = [
    "",
    "plain",
    "**bold** and *also bold*",
    "#r(urgent) task",
    "#x(not a color)",
    "a_b_c and _it_",
    "price is *5",
    "**hi**\n_yo_\n~gone~",
    "*a**b*",
    "#y(a (b) c)",
    "**",
    "#r()",
    "mixed #b(blue) *b* _i_ ~s~ **bb** end",
    "*open\nclose*",
    "tab\there_x_ _y_z",
]


class ProjectTest(unittest.TestCase):
    def test_color_span(self):
        self.assertEqual(project("#r(urgent) task"), "urgent task")

    def test_strips_every_marker_kind(self):
        self.assertEqual(
            project("mixed #b(blue) *b* _i_ ~s~ **bb** end"),
            "mixed blue b i s bb end",
        )

    def test_unmatched_markers_stay(self):
        self.assertEqual(project("price is *5"), "price is *5")
        self.assertEqual(project("a_b_c"), "a_b_c")
        self.assertEqual(project("#x(y)"), "#x(y)")

    def test_keeps_newlines(self):
        self.assertEqual(project("**hi**\n_yo_"), "hi\nyo")

    def test_empty_and_none(self):
        self.assertEqual(project(""), "")
        self.assertEqual(project(None), "")

    def test_agrees_with_tokenizer(self):
        for text in SAMPLES:
            with self.subTest(text=text):
                self.assertEqual("".join(s.text for s in tokenize(text)), project(text))

    def test_idempotent_on_flat_markup(self):
        for text in SAMPLES:
            once = project(text)
            with self.subTest(text=text):
                self.assertEqual(project(once), once)

    def test_marked_content_holding_markers_strips_one_level_per_pass(self):
        self.assertEqual(project("***bold***"), "*bold*")
        self.assertEqual(project(project("***bold***")), "bold")
        self.assertEqual("".join(s.text for s in tokenize("***bold***")), "*bold*")
        self.assertEqual(project("#g(*x*)"), "*x*")
        self.assertEqual(project(project("#g(*x*)")), "x")

    def test_project_fields(self):
        self.assertEqual(
            project_fields("*T*", None, "_tag_"),
            ["T", "", "tag"],
        )


if __name__ == "__main__":
    unittest.main()
