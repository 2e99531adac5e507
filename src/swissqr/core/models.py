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

"""Data model of a Swiss QR-bill.

Instances are plain frozen values. Nothing here enforces the QR-bill rules
beyond the syntax of account numbers and references; run
:func:`swissqr.core.validation.validate_payment` before encoding or laying
out a record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from stdnum import iban, iso11649
from stdnum.ch import esr
from stdnum.exceptions import ValidationError

from .bounds import QR_IBAN_PREFIXES
from .errors import AccountError, FieldError


@dataclass(frozen=True)
class AccountNumber:
    """IBAN or QR-IBAN of the creditor in compact form (ISO 13616)."""

    code: str

    @classmethod
    def parse(cls, text: str) -> AccountNumber:
        try:
            return cls(iban.validate(text))
        except ValidationError as exc:
            raise AccountError(f"invalid account number {text!r}: {exc}") from exc

    @property
    def country_code(self) -> str:
        return self.code[:2]

    @property
    def bban(self) -> str:
        return self.code[4:]

    @property
    def print_code(self) -> str:
        return iban.format(self.code)

    @property
    def is_qr_iban(self) -> bool:
        return self.bban[:2] in QR_IBAN_PREFIXES


def account_or_die(text: str) -> AccountNumber:
    """Build an AccountNumber from a literal known to be valid.

    Meant for constants and tests. Run-time input goes through
    AccountNumber.parse, which reports a recoverable AccountError instead.
    """
    try:
        return AccountNumber.parse(text)
    except AccountError as exc:
        raise RuntimeError(str(exc)) from exc


@dataclass(frozen=True)
class CombinedAddress:
    # Street and building number or P.O. box (optional), post code and town.
    line1: str = ""
    line2: str = ""


@dataclass(frozen=True)
class StructuredAddress:
    street: str = ""
    building_number: str = ""
    post_code: str = ""
    town: str = ""


Address = CombinedAddress | StructuredAddress


@dataclass(frozen=True)
class Entity:
    """A creditor or debtor. Either entirely empty or fully populated."""

    name: str = ""
    address: Address | None = None
    country_code: str = ""

    def is_empty(self) -> bool:
        return not self.name and self.address is None and not self.country_code


@dataclass(frozen=True)
class PaymentAmount:
    currency: str
    # None leaves the amount blank for the payer to fill in.
    amount: float | None = None


@dataclass(frozen=True)
class QRReference:
    """27-digit QR reference (modulo 10 recursive check digit)."""

    number: str

    @classmethod
    def parse(cls, text: str) -> QRReference:
        try:
            compact = esr.validate(text)
        except ValidationError as exc:
            raise FieldError(f"invalid QR reference {text!r}: {exc}") from exc
        return cls(esr.format(compact).replace(" ", ""))

    @property
    def digital_format(self) -> str:
        return self.number

    @property
    def print_format(self) -> str:
        return esr.format(self.number)


@dataclass(frozen=True)
class CreditorReference:
    """Structured creditor reference according to ISO 11649 (RF...)."""

    number: str

    @classmethod
    def parse(cls, text: str) -> CreditorReference:
        try:
            return cls(iso11649.validate(text))
        except ValidationError as exc:
            raise FieldError(f"invalid creditor reference {text!r}: {exc}") from exc

    @property
    def digital_format(self) -> str:
        return self.number

    @property
    def print_format(self) -> str:
        return iso11649.format(self.number)


Reference = QRReference | CreditorReference | None


def qr_reference_or_die(text: str) -> QRReference:
    try:
        return QRReference.parse(text)
    except FieldError as exc:
        raise RuntimeError(str(exc)) from exc


def creditor_reference_or_die(text: str) -> CreditorReference:
    try:
        return CreditorReference.parse(text)
    except FieldError as exc:
        raise RuntimeError(str(exc)) from exc


@dataclass(frozen=True)
class Dates:
    """A single date, or a start date with an end date."""

    start: date
    end: date | None = None


def one_date(year: int, month: int, day: int) -> Dates:
    return Dates(date(year, month, day))


def date_range(
    start_year: int,
    start_month: int,
    start_day: int,
    end_year: int,
    end_month: int,
    end_day: int,
) -> Dates:
    return Dates(date(start_year, start_month, start_day), date(end_year, end_month, end_day))


@dataclass(frozen=True)
class TaxRate:
    # An amount of zero applies the rate to the entire invoice amount.
    rate_percent: float
    amount: float = 0.0


@dataclass(frozen=True)
class PaymentCondition:
    # discount_percent = 0 expresses "payable within n days".
    discount_percent: float
    days: int


@dataclass(frozen=True)
class BillInformation:
    """Structured bill information (S1 syntax). All fields are optional."""

    invoice_number: str = ""
    invoice_date: Dates | None = None
    customer_reference: str = ""
    # UID digits without the CHE prefix, separators or VAT suffix.
    vat_number: str = ""
    vat_dates: Dates | None = None
    vat_rates: tuple[TaxRate, ...] = ()
    import_tax_rates: tuple[TaxRate, ...] = ()
    conditions: tuple[PaymentCondition, ...] = ()


@dataclass(frozen=True)
class PaymentInformation:
    unstructured_message: str = ""
    bill_information: BillInformation = field(default_factory=BillInformation)


@dataclass(frozen=True)
class AlternativeProcedure:
    # The label is printed in bold on the payment part.
    label: str
    procedure: str


@dataclass(frozen=True)
class PaymentRecord:
    """Everything that can be encoded in a Swiss QR Code for invoices."""

    account: AccountNumber
    creditor: Entity
    amount: PaymentAmount
    # Reserved for future use; must stay empty.
    ultimate_creditor: Entity = field(default_factory=Entity)
    ultimate_debtor: Entity = field(default_factory=Entity)
    reference: Reference = None
    information: PaymentInformation = field(default_factory=PaymentInformation)
    alternative_procedures: tuple[AlternativeProcedure, ...] = ()


__all__ = [
    "AccountNumber",
    "Address",
    "AlternativeProcedure",
    "BillInformation",
    "CombinedAddress",
    "CreditorReference",
    "Dates",
    "Entity",
    "PaymentAmount",
    "PaymentCondition",
    "PaymentInformation",
    "PaymentRecord",
    "QRReference",
    "Reference",
    "StructuredAddress",
    "TaxRate",
    "account_or_die",
    "creditor_reference_or_die",
    "date_range",
    "one_date",
    "qr_reference_or_die",
]
