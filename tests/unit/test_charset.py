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

from swissqr.core.charset import validate_character_set
from swissqr.core.errors import CharacterSetError, PayloadError


class TestCharacterSet(unittest.TestCase):
    def test_allowed_text(self) -> None:
        for text in (
            "",
            "Pia Rutschmann",
            "Grossmünster [#5]",
            "Señor",
            "Fußschweiß",
            "peter@muster.ch",
            "Rue du Lac 1268, 2501 Biel",
        ):
            with self.subTest(text=text):
                validate_character_set(text)

    def test_rejected_characters_are_named(self) -> None:
        cases = (
            ("sær", "U+00E6 'æ'"),
            ("øl", "U+00F8 'ø'"),
            ("Григорий", "U+0413 'Г'"),
            ("Næjm", "U+00E6 'æ'"),
        )
        for text, expected in cases:
            with self.subTest(text=text):
                with self.assertRaises(CharacterSetError) as ctx:
                    validate_character_set(text)
                self.assertIn(expected, str(ctx.exception))
                self.assertEqual(ctx.exception.text, text)

    def test_first_offending_character_is_reported(self) -> None:
        with self.assertRaises(CharacterSetError) as ctx:
            validate_character_set("ok ø then æ")
        self.assertEqual(ctx.exception.character, "ø")

    def test_error_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            validate_character_set("sær")
        self.assertTrue(issubclass(CharacterSetError, PayloadError))


if __name__ == "__main__":
    unittest.main()
