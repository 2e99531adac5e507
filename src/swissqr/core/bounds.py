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

from __future__ import annotations

# Name of a creditor or debtor.
MAX_NAME_CHARS = 70

# Combined address lines 1 and 2.
MAX_ADDRESS_LINE_CHARS = 70

# Structured address fields.
MAX_STREET_CHARS = 70
MAX_BUILDING_NUMBER_CHARS = 16
MAX_POST_CODE_CHARS = 16
MAX_TOWN_CHARS = 35

# Amount rendered with two decimals, e.g. "999999999.99".
MAX_AMOUNT_CHARS = 12

# Unstructured message plus encoded bill information.
MAX_INFORMATION_CHARS = 140

# Alternative procedure parameters.
MAX_ALTERNATIVE_PROCEDURES = 2
MAX_PROCEDURE_CHARS = 100

# First two BBAN digits (IID 30000-31999) mark a QR-IBAN.
QR_IBAN_PREFIXES = frozenset({"30", "31"})

# Account countries accepted on a QR-bill.
ACCOUNT_COUNTRIES = frozenset({"CH", "LI"})

CHF = "CHF"
EUR = "EUR"
CURRENCIES = frozenset({CHF, EUR})


__all__ = [
    "ACCOUNT_COUNTRIES",
    "CHF",
    "CURRENCIES",
    "EUR",
    "MAX_ADDRESS_LINE_CHARS",
    "MAX_ALTERNATIVE_PROCEDURES",
    "MAX_AMOUNT_CHARS",
    "MAX_BUILDING_NUMBER_CHARS",
    "MAX_INFORMATION_CHARS",
    "MAX_NAME_CHARS",
    "MAX_POST_CODE_CHARS",
    "MAX_PROCEDURE_CHARS",
    "MAX_STREET_CHARS",
    "MAX_TOWN_CHARS",
    "QR_IBAN_PREFIXES",
]
