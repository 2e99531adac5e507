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

"""Invoice files: TOML documents describing one payment record.

Example::

    account = "CH44 3199 9123 0008 8901 2"
    reference = "21 00000 00003 13947 14300 09017"

    [creditor]
    name = "Robert Schneider AG"
    street = "Rue du Lac"
    building_number = "1268"
    post_code = "2501"
    town = "Biel"
    country = "CH"

    [amount]
    currency = "CHF"
    value = 1949.75

Addresses use either ``street``/``building_number``/``post_code``/``town``
or ``address_line1``/``address_line2``.
"""

from __future__ import annotations

import datetime
import tomllib
from collections.abc import Callable
from pathlib import Path

from ...core.models import (
    AccountNumber,
    AlternativeProcedure,
    BillInformation,
    CombinedAddress,
    CreditorReference,
    Dates,
    Entity,
    PaymentAmount,
    PaymentCondition,
    PaymentInformation,
    PaymentRecord,
    QRReference,
    Reference,
    StructuredAddress,
    TaxRate,
)

_TOP_LEVEL_KEYS = frozenset(
    {
        "account",
        "reference",
        "creditor",
        "debtor",
        "amount",
        "information",
        "alternative_procedures",
    }
)
_ENTITY_KEYS = frozenset(
    {
        "name",
        "country",
        "street",
        "building_number",
        "post_code",
        "town",
        "address_line1",
        "address_line2",
    }
)
_STRUCTURED_KEYS = ("street", "building_number", "post_code", "town")
_COMBINED_KEYS = ("address_line1", "address_line2")

UnknownKeyCallback = Callable[[str], None]


def load_payload(
    path: str | Path,
    *,
    on_unknown_key: UnknownKeyCallback | None = None,
) -> PaymentRecord:
    with Path(path).open("rb") as handle:
        data = tomllib.load(handle)
    return parse_payload(data, on_unknown_key=on_unknown_key)


def parse_payload(
    data: dict[str, object],
    *,
    on_unknown_key: UnknownKeyCallback | None = None,
) -> PaymentRecord:
    _report_unknown(data, _TOP_LEVEL_KEYS, prefix="", callback=on_unknown_key)
    account = _require_str(data.get("account"), field="account")
    return PaymentRecord(
        account=AccountNumber.parse(account),
        creditor=_parse_entity(data.get("creditor"), field="creditor", callback=on_unknown_key),
        amount=_parse_amount(data.get("amount")),
        ultimate_debtor=_parse_entity(data.get("debtor"), field="debtor", callback=on_unknown_key),
        reference=_parse_reference(data.get("reference")),
        information=_parse_information(data.get("information")),
        alternative_procedures=_parse_alternative_procedures(data.get("alternative_procedures")),
    )


def _parse_entity(
    value: object,
    *,
    field: str,
    callback: UnknownKeyCallback | None,
) -> Entity:
    if value is None:
        return Entity()
    cfg = _require_table(value, field=field)
    _report_unknown(cfg, _ENTITY_KEYS, prefix=f"{field}.", callback=callback)
    structured = any(key in cfg for key in _STRUCTURED_KEYS)
    combined = any(key in cfg for key in _COMBINED_KEYS)
    if structured and combined:
        raise ValueError(f"{field} must use either structured or combined address keys, not both")
    address: CombinedAddress | StructuredAddress
    if combined:
        address = CombinedAddress(
            line1=_optional_str(cfg.get("address_line1"), field=f"{field}.address_line1"),
            line2=_optional_str(cfg.get("address_line2"), field=f"{field}.address_line2"),
        )
    else:
        address = StructuredAddress(
            street=_optional_str(cfg.get("street"), field=f"{field}.street"),
            building_number=_optional_str(
                cfg.get("building_number"), field=f"{field}.building_number"
            ),
            post_code=_optional_str(cfg.get("post_code"), field=f"{field}.post_code"),
            town=_optional_str(cfg.get("town"), field=f"{field}.town"),
        )
    return Entity(
        name=_optional_str(cfg.get("name"), field=f"{field}.name"),
        address=address,
        country_code=_optional_str(cfg.get("country"), field=f"{field}.country").upper(),
    )


def _parse_amount(value: object) -> PaymentAmount:
    cfg = _require_table(value, field="amount")
    currency = _require_str(cfg.get("currency"), field="amount.currency").upper()
    amount = cfg.get("value")
    if amount is None:
        return PaymentAmount(currency=currency)
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise ValueError("amount.value must be a number")
    return PaymentAmount(currency=currency, amount=float(amount))


def _parse_reference(value: object) -> Reference:
    if value is None:
        return None
    text = _require_str(value, field="reference")
    if text.upper().startswith("RF"):
        return CreditorReference.parse(text)
    return QRReference.parse(text)


def _parse_information(value: object) -> PaymentInformation:
    if value is None:
        return PaymentInformation()
    cfg = _require_table(value, field="information")
    bill = cfg.get("bill")
    return PaymentInformation(
        unstructured_message=_optional_str(cfg.get("message"), field="information.message"),
        bill_information=BillInformation() if bill is None else _parse_bill_information(bill),
    )


def _parse_bill_information(value: object) -> BillInformation:
    field = "information.bill"
    cfg = _require_table(value, field=field)
    invoice_date = cfg.get("invoice_date")
    return BillInformation(
        invoice_number=_optional_str(cfg.get("invoice_number"), field=f"{field}.invoice_number"),
        invoice_date=(
            None
            if invoice_date is None
            else Dates(_require_date(invoice_date, field=f"{field}.invoice_date"))
        ),
        customer_reference=_optional_str(
            cfg.get("customer_reference"), field=f"{field}.customer_reference"
        ),
        vat_number=_optional_str(cfg.get("vat_number"), field=f"{field}.vat_number"),
        vat_dates=_parse_vat_dates(cfg, field=field),
        vat_rates=_parse_tax_rates(cfg.get("vat_rates"), field=f"{field}.vat_rates"),
        import_tax_rates=_parse_tax_rates(
            cfg.get("import_tax_rates"), field=f"{field}.import_tax_rates"
        ),
        conditions=_parse_conditions(cfg.get("conditions"), field=f"{field}.conditions"),
    )


def _parse_vat_dates(cfg: dict[str, object], *, field: str) -> Dates | None:
    start = cfg.get("vat_start_date")
    end = cfg.get("vat_end_date")
    if start is None:
        if end is not None:
            raise ValueError(f"{field}.vat_end_date requires {field}.vat_start_date")
        return None
    return Dates(
        _require_date(start, field=f"{field}.vat_start_date"),
        None if end is None else _require_date(end, field=f"{field}.vat_end_date"),
    )


def _parse_tax_rates(value: object, *, field: str) -> tuple[TaxRate, ...]:
    rates = []
    for idx, entry in enumerate(_require_list(value, field=field)):
        cfg = _require_table(entry, field=f"{field}[{idx}]")
        rates.append(
            TaxRate(
                rate_percent=_require_number(cfg.get("rate"), field=f"{field}[{idx}].rate"),
                amount=_optional_number(cfg.get("amount"), field=f"{field}[{idx}].amount"),
            )
        )
    return tuple(rates)


def _parse_conditions(value: object, *, field: str) -> tuple[PaymentCondition, ...]:
    conditions = []
    for idx, entry in enumerate(_require_list(value, field=field)):
        cfg = _require_table(entry, field=f"{field}[{idx}]")
        days = cfg.get("days")
        if isinstance(days, bool) or not isinstance(days, int):
            raise ValueError(f"{field}[{idx}].days must be an integer")
        conditions.append(
            PaymentCondition(
                discount_percent=_optional_number(
                    cfg.get("discount"), field=f"{field}[{idx}].discount"
                ),
                days=days,
            )
        )
    return tuple(conditions)


def _parse_alternative_procedures(value: object) -> tuple[AlternativeProcedure, ...]:
    field = "alternative_procedures"
    procedures = []
    for idx, entry in enumerate(_require_list(value, field=field)):
        cfg = _require_table(entry, field=f"{field}[{idx}]")
        procedures.append(
            AlternativeProcedure(
                label=_require_str(cfg.get("label"), field=f"{field}[{idx}].label"),
                procedure=_require_str(cfg.get("procedure"), field=f"{field}[{idx}].procedure"),
            )
        )
    return tuple(procedures)


def _report_unknown(
    cfg: dict[str, object],
    known: frozenset[str],
    *,
    prefix: str,
    callback: UnknownKeyCallback | None,
) -> None:
    if callback is None:
        return
    for key in sorted(set(cfg) - known):
        callback(f"{prefix}{key}")


def _require_table(value: object, *, field: str) -> dict[str, object]:
    if not isinstance(value, dict):
        raise ValueError(f"{field} must be a table")
    return value


def _require_list(value: object, *, field: str) -> list[object]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{field} must be an array")
    return value


def _require_str(value: object, *, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{field} must be a non-empty string")
    return value.strip()


def _optional_str(value: object, *, field: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    return value.strip()


def _require_number(value: object, *, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field} must be a number")
    return float(value)


def _optional_number(value: object, *, field: str) -> float:
    if value is None:
        return 0.0
    return _require_number(value, field=field)


def _require_date(value: object, *, field: str) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        try:
            return datetime.date.fromisoformat(value.strip())
        except ValueError as exc:
            raise ValueError(f"{field} must be a date (YYYY-MM-DD)") from exc
    raise ValueError(f"{field} must be a date (YYYY-MM-DD)")
