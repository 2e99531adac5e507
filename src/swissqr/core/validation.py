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

import math
import re
from collections.abc import Sequence

from ..encoding.structured import bill_information_text
from .bounds import (
    ACCOUNT_COUNTRIES,
    CURRENCIES,
    MAX_ADDRESS_LINE_CHARS,
    MAX_ALTERNATIVE_PROCEDURES,
    MAX_AMOUNT_CHARS,
    MAX_BUILDING_NUMBER_CHARS,
    MAX_INFORMATION_CHARS,
    MAX_NAME_CHARS,
    MAX_POST_CODE_CHARS,
    MAX_PROCEDURE_CHARS,
    MAX_STREET_CHARS,
    MAX_TOWN_CHARS,
)
from .charset import validate_character_set
from .countries import is_country_code
from .errors import (
    AccountError,
    CrossFieldError,
    FieldError,
    PayloadError,
    UnsupportedAddressError,
    UnsupportedReferenceError,
)
from .models import (
    AccountNumber,
    AlternativeProcedure,
    BillInformation,
    CombinedAddress,
    CreditorReference,
    Entity,
    PaymentAmount,
    PaymentInformation,
    PaymentRecord,
    QRReference,
    StructuredAddress,
    TaxRate,
)

_DIGITS_RE = re.compile(r"^[0-9]*$")


def validate_payment(record: PaymentRecord) -> None:
    """Validate a payment record, raising the first PayloadError found."""
    validate_account(record.account)
    validate_entity(record.creditor)
    validate_entity(record.ultimate_creditor)
    validate_amount(record.amount)
    validate_entity(record.ultimate_debtor)
    validate_reference(record.reference)
    validate_information(record.information)
    validate_alternative_procedures(record.alternative_procedures)
    # Entity validation accepts empty records, the creditor must not be one.
    if not record.creditor.name:
        raise FieldError("no creditor name specified")
    if record.ultimate_creditor.name:
        raise CrossFieldError("ultimate creditor is currently not supported")
    _validate_reference_for_account(record.account, record.reference)


def is_valid_payment(record: PaymentRecord) -> bool:
    try:
        validate_payment(record)
    except PayloadError:
        return False
    return True


def validate_account(account: object) -> None:
    if not isinstance(account, AccountNumber):
        raise AccountError("no account specified")
    if account.country_code not in ACCOUNT_COUNTRIES:
        raise AccountError(f"only CH and LI accounts allowed: {account.print_code}")


def validate_entity(entity: Entity) -> None:
    if entity.is_empty():
        return

    if not entity.name:
        raise FieldError("name must be specified")
    _require_max_chars(entity.name, MAX_NAME_CHARS, label="name")
    validate_character_set(entity.name)

    if not entity.country_code:
        raise FieldError(f"country code must be specified for name: {entity.name}")
    if len(entity.country_code) > 2:
        raise FieldError(f"country should be given as two-letter code: {entity.country_code}")
    if not is_country_code(entity.country_code):
        raise FieldError(f"invalid country code: {entity.country_code}")

    address = entity.address
    if isinstance(address, CombinedAddress):
        validate_combined_address(address)
    elif isinstance(address, StructuredAddress):
        validate_structured_address(address)
    else:
        raise UnsupportedAddressError(f"unsupported address type: {type(address).__name__}")


def validate_combined_address(address: CombinedAddress) -> None:
    if not address.line2:
        raise FieldError(f"address line 2 must be set for address: {address}")
    validate_character_set(address.line1)
    validate_character_set(address.line2)
    _require_max_chars(address.line1, MAX_ADDRESS_LINE_CHARS, label="address line")
    _require_max_chars(address.line2, MAX_ADDRESS_LINE_CHARS, label="address line")


def validate_structured_address(address: StructuredAddress) -> None:
    if not address.post_code or not address.town:
        raise FieldError(f"must specify post code and town in address: {address}")
    validate_character_set(address.street)
    validate_character_set(address.building_number)
    validate_character_set(address.post_code)
    validate_character_set(address.town)
    _require_max_chars(address.street, MAX_STREET_CHARS, label="street name")
    _require_max_chars(address.building_number, MAX_BUILDING_NUMBER_CHARS, label="building number")
    _require_max_chars(address.post_code, MAX_POST_CODE_CHARS, label="post code")
    _require_max_chars(address.town, MAX_TOWN_CHARS, label="town name")


def validate_amount(amount: PaymentAmount) -> None:
    if amount.currency not in CURRENCIES:
        raise FieldError(f"currency must be CHF or EUR: {amount.currency}")
    if amount.amount is None:
        return
    if not math.isfinite(amount.amount):
        raise FieldError(f"amount must be a finite number: {amount.amount}")
    if amount.amount < 0:
        raise FieldError(f"amount cannot be negative: {amount.amount}")
    if len(f"{amount.amount:.2f}") > MAX_AMOUNT_CHARS:
        raise FieldError(f"amount too large: {amount.amount}")


def validate_reference(reference: object) -> None:
    if reference is None or isinstance(reference, (QRReference, CreditorReference)):
        return
    raise UnsupportedReferenceError(f"unknown reference type: {type(reference).__name__}")


def validate_information(information: PaymentInformation) -> None:
    validate_character_set(information.unstructured_message)
    validate_bill_information(information.bill_information)
    combined = information.unstructured_message + bill_information_text(
        information.bill_information
    )
    if len(combined) > MAX_INFORMATION_CHARS:
        raise FieldError(f"maximum combined length is {MAX_INFORMATION_CHARS}: {combined}")


def validate_bill_information(info: BillInformation) -> None:
    validate_character_set(info.invoice_number)
    if info.invoice_date is not None and info.invoice_date.end is not None:
        raise FieldError(f"invoice date may not have an end date: {info.invoice_date.end}")
    validate_character_set(info.customer_reference)
    if not _DIGITS_RE.match(info.vat_number):
        raise FieldError(f"VAT number may only contain digits 0-9: {info.vat_number}")
    vat_dates = info.vat_dates
    if vat_dates is not None and vat_dates.end is not None and vat_dates.end <= vat_dates.start:
        raise FieldError(
            f"end date must come after start date: {vat_dates.start} versus {vat_dates.end}"
        )
    _validate_tax_rates(info.vat_rates, label="VAT")
    _validate_tax_rates(info.import_tax_rates, label="import tax")
    for condition in info.conditions:
        if not math.isfinite(condition.discount_percent):
            raise FieldError(f"discount must be a finite number: {condition}")
        if condition.discount_percent < 0:
            raise FieldError(f"discount may not be negative: {condition}")
        if condition.days < 0:
            raise FieldError(f"number of days may not be negative: {condition}")


def validate_alternative_procedures(procedures: Sequence[AlternativeProcedure]) -> None:
    if len(procedures) > MAX_ALTERNATIVE_PROCEDURES:
        raise CrossFieldError(
            f"maximum {MAX_ALTERNATIVE_PROCEDURES} alternative procedures allowed: {procedures}"
        )
    for procedure in procedures:
        validate_character_set(procedure.label)
        validate_character_set(procedure.procedure)
        if not procedure.label:
            raise FieldError(f"no label specified: {procedure}")
        if not procedure.procedure:
            raise FieldError(f"no procedure specified: {procedure}")
        _require_max_chars(procedure.procedure, MAX_PROCEDURE_CHARS, label="procedure")


def _validate_reference_for_account(account: AccountNumber, reference: object) -> None:
    # A QR-IBAN (IID 30000-31999) requires a QR reference; any other IBAN
    # takes a creditor reference or none at all.
    if account.is_qr_iban:
        if not isinstance(reference, QRReference):
            raise CrossFieldError(
                f"QR reference number required for QR-IBAN: {account.print_code}"
            )
    elif isinstance(reference, QRReference):
        raise CrossFieldError(f"QR reference not allowed for IBAN: {account.print_code}")


def _validate_tax_rates(rates: Sequence[TaxRate], *, label: str) -> None:
    for rate in rates:
        if not (math.isfinite(rate.amount) and math.isfinite(rate.rate_percent)):
            raise FieldError(f"{label} rate and amount must be finite numbers: {rate}")
        if rate.amount < 0:
            raise FieldError(f"{label} amount may not be negative: {rate}")
        if rate.rate_percent < 0:
            raise FieldError(f"{label} rate may not be negative: {rate}")


def _require_max_chars(value: str, limit: int, *, label: str) -> None:
    if len(value) > limit:
        raise FieldError(f"maximum {label} length is {limit} characters: {value}")


__all__ = [
    "is_valid_payment",
    "validate_account",
    "validate_alternative_procedures",
    "validate_amount",
    "validate_bill_information",
    "validate_combined_address",
    "validate_entity",
    "validate_information",
    "validate_payment",
    "validate_reference",
    "validate_structured_address",
]
