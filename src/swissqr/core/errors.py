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

"""Failure reasons reported by validation and layout."""

from __future__ import annotations


class PayloadError(ValueError):
    """Base class for every reportable QR-bill failure."""


class CharacterSetError(PayloadError):
    """A text field contains a character outside the allowed set."""

    def __init__(self, character: str, text: str) -> None:
        self.character = character
        self.text = text
        super().__init__(
            f"character U+{ord(character):04X} {character!r} not allowed in string: {text!r}"
        )


class FieldError(PayloadError):
    """A single field is missing, too long, negative or out of order."""


class AccountError(FieldError):
    """The account number is missing or malformed."""


class UnsupportedAddressError(FieldError):
    """An entity carries an address that is neither combined nor structured."""


class CrossFieldError(PayloadError):
    """Fields are individually valid but inconsistent with each other."""


class UnsupportedReferenceError(CrossFieldError):
    """The payment reference is of an unknown kind."""


class UnsupportedLanguageError(PayloadError):
    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f"unsupported language: {language}")


class LayoutOverflowError(PayloadError):
    """Laid-out text does not fit the box it is drawn into."""

    def __init__(self, height: float, max_height: float) -> None:
        self.height = height
        self.max_height = max_height
        super().__init__(f"text height {height:.1f} exceeds available height {max_height:.1f}")


__all__ = [
    "AccountError",
    "CharacterSetError",
    "CrossFieldError",
    "FieldError",
    "LayoutOverflowError",
    "PayloadError",
    "UnsupportedAddressError",
    "UnsupportedLanguageError",
    "UnsupportedReferenceError",
]
