# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import unittest

from swissqr.render.text import (
    ELLIPSIS,
    PT_PER_CM,
    glyph_width,
    reflow_at_char,
    reflow_at_space,
    relative_width,
    shorten_to_width,
    string_width,
)
from test_support import LOREM_LINES

# 5 cm of 10 pt text.
FIVE_CM_AT_10PT = 5.0 * 28.35 / 10.0

# Exact binary widths so that sums land on the limit without rounding.
UNIT_WIDTHS = {"a": 1.0, " ": 0.5}


class TestWidths(unittest.TestCase):
    def test_glyph_widths(self) -> None:
        self.assertAlmostEqual(glyph_width(" "), 0.278)
        self.assertAlmostEqual(glyph_width("a"), 0.556)
        self.assertAlmostEqual(glyph_width(ELLIPSIS), 1.0)
        # Unknown glyphs count as one em.
        self.assertAlmostEqual(glyph_width("一"), 1.0)

    def test_string_width(self) -> None:
        self.assertEqual(string_width(""), 0)
        self.assertAlmostEqual(string_width("aa a"), 0.556 * 3 + 0.278)

    def test_relative_width(self) -> None:
        self.assertEqual(PT_PER_CM, 28.35)
        self.assertAlmostEqual(relative_width(5.0, 10.0), FIVE_CM_AT_10PT)


class TestReflow(unittest.TestCase):
    def test_reflow_at_char(self) -> None:
        self.assertEqual(
            reflow_at_char(LOREM_LINES, FIVE_CM_AT_10PT),
            [
                "Lorem ipsum dolor sit amet, co",
                "nsectetur adipiscing elit,",
                "sed do eiusmod tempor incididu",
                "nt ut labore et dolore magna ali",
                "qua.",
            ],
        )

    def test_reflow_at_space(self) -> None:
        self.assertEqual(
            reflow_at_space(LOREM_LINES, FIVE_CM_AT_10PT),
            [
                "Lorem ipsum dolor sit amet,",
                "consectetur adipiscing elit,",
                "sed do eiusmod tempor",
                "incididunt ut labore et dolore",
                "magna aliqua.",
            ],
        )

    def test_reflow_at_space_with_long_word(self) -> None:
        lines = (
            "Lorem ipsum dolor sit amet, consectetur adipiscing elit,",
            "sed do eiusmodtemporincididuntutlaboreetdoloremagna aliqua.",
        )
        self.assertEqual(
            reflow_at_space(lines, FIVE_CM_AT_10PT),
            [
                "Lorem ipsum dolor sit amet,",
                "consectetur adipiscing elit,",
                "sed do eiusmodtemporincididun",
                "tutlaboreetdoloremagna aliqua.",
            ],
        )

    def test_reflow_at_space_with_only_long_word(self) -> None:
        self.assertEqual(
            reflow_at_space(("Eiusmodtemporincididuntutlaboreetdoloremagna.",), FIVE_CM_AT_10PT),
            ["Eiusmodtemporincididuntutlabo", "reetdoloremagna."],
        )

    def test_short_lines_are_kept(self) -> None:
        lines = ("Robert Schneider AG", "", "2501 Biel")
        for reflow in (reflow_at_char, reflow_at_space):
            with self.subTest(reflow=reflow.__name__):
                self.assertEqual(reflow(lines, FIVE_CM_AT_10PT), list(lines))

    def test_reflow_reproduces_input(self) -> None:
        for line in LOREM_LINES:
            with self.subTest(line=line):
                self.assertEqual(" ".join(reflow_at_space((line,), FIVE_CM_AT_10PT)), line)
                self.assertEqual("".join(reflow_at_char((line,), FIVE_CM_AT_10PT)), line)

    def test_reflowed_lines_fit(self) -> None:
        for reflow in (reflow_at_char, reflow_at_space):
            with self.subTest(reflow=reflow.__name__):
                for line in reflow(LOREM_LINES, FIVE_CM_AT_10PT):
                    self.assertLessEqual(string_width(line), FIVE_CM_AT_10PT)

    def test_exact_width_is_accepted(self) -> None:
        self.assertEqual(reflow_at_space(("aa aa",), 4.5, UNIT_WIDTHS), ["aa aa"])
        self.assertEqual(reflow_at_space(("aa aa",), 4.25, UNIT_WIDTHS), ["aa", "aa"])
        self.assertEqual(reflow_at_char(("aaaa",), 4.0, UNIT_WIDTHS), ["aaaa"])
        self.assertEqual(reflow_at_char(("aaaa",), 2.0, UNIT_WIDTHS), ["aa", "aa"])
        self.assertEqual(reflow_at_char(("aaaa",), 1.5, UNIT_WIDTHS), ["a", "a", "a", "a"])


class TestShortenToWidth(unittest.TestCase):
    def test_line_that_fits_is_unchanged(self) -> None:
        self.assertEqual(shorten_to_width("aaaa", 3.0), "aaaa")

    def test_long_line_gets_ellipsis(self) -> None:
        self.assertEqual(shorten_to_width("a" * 10, 3.0), "aaa" + ELLIPSIS)

    def test_result_never_exceeds_width(self) -> None:
        line = "UV;UltraPay005;12345 " * 10
        for width in (2.0, 5.0, 12.5):
            with self.subTest(width=width):
                shortened = shorten_to_width(line, width)
                self.assertTrue(shortened.endswith(ELLIPSIS))
                self.assertLessEqual(string_width(shortened), width)

    def test_exact_width_with_ellipsis(self) -> None:
        shortened = shorten_to_width("aaaa", 3.0, UNIT_WIDTHS)
        self.assertEqual(shortened, "aa" + ELLIPSIS)
        self.assertEqual(string_width(shortened, UNIT_WIDTHS), 3.0)

    def test_width_below_ellipsis(self) -> None:
        self.assertEqual(shorten_to_width("a" * 10, 0.5), "")
        self.assertEqual(shorten_to_width("aaaa", 0.75, UNIT_WIDTHS), "")


if __name__ == "__main__":
    unittest.main()
