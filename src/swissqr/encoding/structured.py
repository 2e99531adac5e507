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

"""Swico S1 syntax for structured bill information.

The result is a single inline string such as
``//S1/10/10201409/11/190512/30/106017086`` which is embedded in the
additional information field of the QR payload.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..core.models import BillInformation, Dates, PaymentCondition, TaxRate

S1_PREFIX = "//S1"

TAG_INVOICE_NUMBER = "10"
TAG_INVOICE_DATE = "11"
TAG_CUSTOMER_REFERENCE = "20"
TAG_VAT_NUMBER = "30"
TAG_VAT_DATES = "31"
TAG_VAT_RATES = "32"
TAG_IMPORT_TAX_RATES = "33"
TAG_CONDITIONS = "40"

_DATE_FORMAT = "%y%m%d"


def bill_information_text(info: BillInformation) -> str:
    """Encode bill information, assuming it has been validated.

    Returns an empty string when no field is set.
    """
    segments = (
        (TAG_INVOICE_NUMBER, info.invoice_number),
        (TAG_INVOICE_DATE, dates_text(info.invoice_date)),
        (TAG_CUSTOMER_REFERENCE, info.customer_reference),
        (TAG_VAT_NUMBER, info.vat_number),
        (TAG_VAT_DATES, dates_text(info.vat_dates)),
        (TAG_VAT_RATES, tax_rates_text(info.vat_rates)),
        (TAG_IMPORT_TAX_RATES, tax_rates_text(info.import_tax_rates)),
        (TAG_CONDITIONS, conditions_text(info.conditions)),
    )
    result = "".join(f"/{tag}/{value}" for tag, value in segments if value)
    if not result:
        return ""
    return S1_PREFIX + result


def dates_text(dates: Dates | None) -> str:
    if dates is None:
        return ""
    if dates.end is None:
        return dates.start.strftime(_DATE_FORMAT)
    return dates.start.strftime(_DATE_FORMAT) + dates.end.strftime(_DATE_FORMAT)


def tax_rates_text(rates: Iterable[TaxRate]) -> str:
    fields = []
    for rate in rates:
        if rate.amount > 0:
            fields.append(f"{format_number(rate.rate_percent)}:{format_number(rate.amount)}")
        else:
            fields.append(format_number(rate.rate_percent))
    return ";".join(fields)


def conditions_text(conditions: Iterable[PaymentCondition]) -> str:
    return ";".join(
        f"{format_number(condition.discount_percent)}:{condition.days}" for condition in conditions
    )


def format_number(value: float) -> str:
    """Shortest round-trip decimal form without padding: 2, 7.7, 0.25."""
    number = float(value)
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    return repr(number)


__all__ = [
    "S1_PREFIX",
    "bill_information_text",
    "conditions_text",
    "dates_text",
    "format_number",
    "tax_rates_text",
]
