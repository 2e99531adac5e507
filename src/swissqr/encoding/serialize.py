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

"""SPC payload: the CRLF-delimited text embedded in the Swiss QR Code.

The writers in this module assume a validated record and perform no checks
of their own.
"""

from __future__ import annotations

import io
from collections.abc import Sequence
from typing import Protocol

from ..core.models import (
    AlternativeProcedure,
    CombinedAddress,
    CreditorReference,
    Entity,
    PaymentAmount,
    PaymentInformation,
    PaymentRecord,
    QRReference,
    Reference,
    StructuredAddress,
)
from ..core.validation import validate_payment
from .structured import bill_information_text

CRLF = "\r\n"

HEADER_QR_TYPE = "SPC"
HEADER_VERSION = "0200"
HEADER_CODING_TYPE = "1"

ADDRESS_TYPE_COMBINED = "K"
ADDRESS_TYPE_STRUCTURED = "S"

REFERENCE_TYPE_QR = "QRR"
REFERENCE_TYPE_CREDITOR = "SCOR"
REFERENCE_TYPE_NONE = "NON"

TRAILER_EPD = "EPD"

_EMPTY_ENTITY = CRLF * 6


class TextSink(Protocol):
    def write(self, text: str, /) -> object: ...


def serialize_payment(record: PaymentRecord, sink: TextSink) -> None:
    """Write the SPC payload of a validated record to sink."""
    sink.write(CRLF.join((HEADER_QR_TYPE, HEADER_VERSION, HEADER_CODING_TYPE)) + CRLF)
    sink.write(record.account.code)
    sink.write(CRLF)
    sink.write(entity_text(record.creditor))
    sink.write(CRLF)
    sink.write(entity_text(record.ultimate_creditor))
    sink.write(CRLF)
    sink.write(amount_text(record.amount))
    sink.write(CRLF)
    sink.write(entity_text(record.ultimate_debtor))
    sink.write(CRLF)
    sink.write(reference_text(record.reference))
    sink.write(CRLF)
    sink.write(information_text(record.information))
    sink.write(CRLF)
    sink.write(alternative_procedures_text(record.alternative_procedures))


def payment_text(record: PaymentRecord) -> str:
    """Validate record and return its SPC payload."""
    validate_payment(record)
    buf = io.StringIO()
    serialize_payment(record, buf)
    return buf.getvalue()


def entity_text(entity: Entity) -> str:
    if not entity.name:
        return _EMPTY_ENTITY
    address = entity.address
    if isinstance(address, CombinedAddress):
        fields = [ADDRESS_TYPE_COMBINED, entity.name, address.line1, address.line2, "", ""]
    elif isinstance(address, StructuredAddress):
        fields = [
            ADDRESS_TYPE_STRUCTURED,
            entity.name,
            address.street,
            address.building_number,
            address.post_code,
            address.town,
        ]
    else:
        raise TypeError(f"unsupported address type: {type(address).__name__}")
    fields.append(entity.country_code)
    return CRLF.join(fields)


def amount_text(amount: PaymentAmount) -> str:
    value = "" if amount.amount is None else f"{amount.amount:.2f}"
    return value + CRLF + amount.currency


def reference_text(reference: Reference) -> str:
    if isinstance(reference, QRReference):
        return REFERENCE_TYPE_QR + CRLF + reference.digital_format
    if isinstance(reference, CreditorReference):
        return REFERENCE_TYPE_CREDITOR + CRLF + reference.digital_format
    return REFERENCE_TYPE_NONE + CRLF


def information_text(information: PaymentInformation) -> str:
    return CRLF.join(
        (
            information.unstructured_message,
            TRAILER_EPD,
            bill_information_text(information.bill_information),
        )
    )


def alternative_procedures_text(procedures: Sequence[AlternativeProcedure]) -> str:
    # Always two slots, missing entries stay empty.
    slots = ["", ""]
    for idx, procedure in enumerate(procedures[: len(slots)]):
        slots[idx] = procedure.procedure
    return CRLF.join(slots)


__all__ = [
    "CRLF",
    "TextSink",
    "alternative_procedures_text",
    "amount_text",
    "entity_text",
    "information_text",
    "payment_text",
    "reference_text",
    "serialize_payment",
]
