#!/usr/bin/env python3
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

"""Width-aware line reflow and truncation.

Widths are relative to the font size: a maximum width of ``5 * 28.35 / 10``
is 5 cm of 10 pt text.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .metrics import DEFAULT_GLYPH_WIDTH, HELVETICA

ELLIPSIS = "…"
PT_PER_CM = 28.35


def glyph_width(char: str, widths: Mapping[str, float] = HELVETICA) -> float:
    return widths.get(char, DEFAULT_GLYPH_WIDTH)


def string_width(text: str, widths: Mapping[str, float] = HELVETICA) -> float:
    return sum(glyph_width(char, widths) for char in text)


def relative_width(width_cm: float, font_size_pt: float) -> float:
    return width_cm * PT_PER_CM / font_size_pt


def reflow_at_char(
    lines: Sequence[str],
    max_width: float,
    widths: Mapping[str, float] = HELVETICA,
) -> list[str]:
    """Break lines wider than max_width at arbitrary characters."""
    reflowed: list[str] = []
    for line in lines:
        if string_width(line, widths) < max_width:
            reflowed.append(line)
            continue
        current = ""
        current_width = 0.0
        for char in line:
            width = glyph_width(char, widths)
            if current_width + width > max_width:
                reflowed.append(current)
                current = ""
                current_width = 0.0
            current_width += width
            current += char
        reflowed.append(current)
    return reflowed


def reflow_at_space(
    lines: Sequence[str],
    max_width: float,
    widths: Mapping[str, float] = HELVETICA,
) -> list[str]:
    """Greedily pack words into lines no wider than max_width.

    A word that is wider than max_width on its own is continued on the
    current line and broken between characters.
    """
    reflowed: list[str] = []
    space_width = glyph_width(" ", widths)
    for line in lines:
        if string_width(line, widths) < max_width:
            reflowed.append(line)
            continue
        current = ""
        current_width = 0.0
        for word in line.split():
            word_width = string_width(word, widths)
            if word_width > max_width:
                if current:
                    current += " "
                    current_width += space_width
                for char in word:
                    width = glyph_width(char, widths)
                    if current_width + width > max_width:
                        reflowed.append(current)
                        current = ""
                        current_width = 0.0
                    current_width += width
                    current += char
                continue
            if current:
                if current_width + space_width + word_width > max_width:
                    reflowed.append(current)
                    current = ""
                    current_width = 0.0
                else:
                    current += " "
                    current_width += space_width
            current += word
            current_width += word_width
        reflowed.append(current)
    return reflowed


def shorten_to_width(
    line: str,
    max_width: float,
    widths: Mapping[str, float] = HELVETICA,
) -> str:
    """Cut line so that it fits max_width including a trailing ellipsis.

    Returns an empty string when not even the ellipsis fits.
    """
    if string_width(line, widths) <= max_width:
        return line
    suffix_width = string_width(ELLIPSIS, widths)
    if suffix_width > max_width:
        return ""
    shortened = ""
    current_width = 0.0
    for char in line:
        width = glyph_width(char, widths)
        if current_width + suffix_width + width > max_width:
            return shortened + ELLIPSIS
        current_width += width
        shortened += char
    return shortened + ELLIPSIS


__all__ = [
    "ELLIPSIS",
    "PT_PER_CM",
    "glyph_width",
    "reflow_at_char",
    "reflow_at_space",
    "relative_width",
    "shorten_to_width",
    "string_width",
]
