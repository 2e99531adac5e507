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

"""Localized headings of the QR-bill (Annex D of the Swiss QR standard)."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from ..core.errors import UnsupportedLanguageError

SUPPORTED_LANGUAGES = ("de", "fr", "it", "en")


class Heading(str, Enum):
    PAYMENT_PART = "payment_part"
    ACCOUNT_PAYABLE_TO = "account_payable_to"
    REFERENCE = "reference"
    ADDITIONAL_INFORMATION = "additional_information"
    CURRENCY = "currency"
    AMOUNT = "amount"
    RECEIPT = "receipt"
    ACCEPTANCE_POINT = "acceptance_point"
    PLEASE_SEPARATE = "please_separate"
    PAYABLE_BY = "payable_by"
    PAYABLE_BY_NAME_ADDRESS = "payable_by_name_address"
    IN_FAVOUR_OF = "in_favour_of"


def _table(de: str, fr: str, it: str, en: str) -> Mapping[str, str]:
    return MappingProxyType({"de": de, "fr": fr, "it": it, "en": en})


HEADINGS: Mapping[Heading, Mapping[str, str]] = MappingProxyType(
    {
        Heading.PAYMENT_PART: _table(
            "Zahlteil", "Section paiement", "Sezione pagamento", "Payment part"
        ),
        Heading.ACCOUNT_PAYABLE_TO: _table(
            "Konto / Zahlbar an",
            "Compte / Payable à",
            "Conto / Pagabile a",
            "Account / Payable to",
        ),
        Heading.REFERENCE: _table("Referenz", "Référence", "Riferimento", "Reference"),
        Heading.ADDITIONAL_INFORMATION: _table(
            "Zusätzliche Informationen",
            "Informations supplémentaires",
            "Informazioni supplementari",
            "Additional information",
        ),
        Heading.CURRENCY: _table("Währung", "Monnaie", "Valuta", "Currency"),
        Heading.AMOUNT: _table("Betrag", "Montant", "Importo", "Amount"),
        Heading.RECEIPT: _table("Empfangsschein", "Récépissé", "Ricevuta", "Receipt"),
        Heading.ACCEPTANCE_POINT: _table(
            "Annahmestelle", "Point de dépôt", "Punto di accettazione", "Acceptance point"
        ),
        Heading.PLEASE_SEPARATE: _table(
            "Vor der Einzahlung abzutrennen",
            "A détacher avant le versement",
            "Da staccare prima del versamento",
            "Separate before paying in",
        ),
        Heading.PAYABLE_BY: _table("Zahlbar durch", "Payable par", "Pagabile da", "Payable by"),
        Heading.PAYABLE_BY_NAME_ADDRESS: _table(
            "Zahlbar durch (Name/Adresse)",
            "Payable par (nom/adresse)",
            "Pagabile da (nome/indirizzo)",
            "Payable by (name/address)",
        ),
        Heading.IN_FAVOUR_OF: _table("Zugunsten", "En faveur de", "A favore di", "In favour of"),
    }
)


def check_language(language: str) -> None:
    if language not in SUPPORTED_LANGUAGES:
        raise UnsupportedLanguageError(language)


def heading(key: Heading, language: str) -> str:
    check_language(language)
    return HEADINGS[key][language]


def border_text(language: str) -> str:
    """Caption printed above the bill when it is framed by a border."""
    return heading(Heading.PLEASE_SEPARATE, language)


__all__ = [
    "HEADINGS",
    "Heading",
    "SUPPORTED_LANGUAGES",
    "border_text",
    "check_language",
    "heading",
]
