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

"""Text content of the receipt and payment parts, independent of drawing.

Every entry point validates the record and the language before producing
anything, so a drawing backend only ever sees consistent, localized text.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from ..core.errors import LayoutOverflowError
from ..core.models import CombinedAddress, Entity, PaymentRecord, StructuredAddress
from ..core.validation import validate_payment
from ..encoding.structured import bill_information_text
from .headings import Heading, check_language, heading
from .text import PT_PER_CM, reflow_at_space

PARAGRAPH_GAP_PT = 3.0


class InformationPart(str, Enum):
    PAYMENT = "payment"
    RECEIPT = "receipt"


@dataclass(frozen=True)
class TitleSection:
    payment_part: str
    receipt: str


@dataclass(frozen=True)
class AmountSection:
    currency_heading: str
    currency_value: str
    amount_heading: str
    # Empty when the payer fills in the amount.
    amount_value: str


@dataclass(frozen=True)
class Paragraph:
    """A heading followed by text lines. No lines means "draw a blank box"."""

    heading: str
    lines: tuple[str, ...] = ()


@dataclass(frozen=True)
class LayoutOptions:
    """Typography and extent of one block of the bill, in points."""

    header_size: float
    text_size: float
    leading: float
    left: float
    top: float
    max_height: float
    max_width: float = 0.0
    box_width: float = 0.0
    box_height: float = 0.0


RECEIPT_INFORMATION_LAYOUT = LayoutOptions(
    header_size=6,
    text_size=8,
    leading=9,
    left=0.5 * PT_PER_CM,
    top=9.3 * PT_PER_CM,
    max_height=5.6 * PT_PER_CM,
    max_width=5.2 * PT_PER_CM,
    box_width=5.2 * PT_PER_CM,
    box_height=2.0 * PT_PER_CM,
)
PAYMENT_INFORMATION_LAYOUT = LayoutOptions(
    header_size=8,
    text_size=10,
    leading=11,
    left=11.9 * PT_PER_CM,
    top=10.0 * PT_PER_CM,
    max_height=8.5 * PT_PER_CM,
    max_width=8.5 * PT_PER_CM,
    box_width=6.5 * PT_PER_CM,
    box_height=2.5 * PT_PER_CM,
)
RECEIPT_AMOUNT_LAYOUT = LayoutOptions(
    header_size=6,
    text_size=8,
    leading=9,
    left=0.5 * PT_PER_CM,
    top=3.7 * PT_PER_CM,
    max_height=1.4 * PT_PER_CM,
    max_width=5.2 * PT_PER_CM,
    box_width=3.0 * PT_PER_CM,
    box_height=1.0 * PT_PER_CM,
)
PAYMENT_AMOUNT_LAYOUT = LayoutOptions(
    header_size=8,
    text_size=10,
    leading=11,
    left=6.7 * PT_PER_CM,
    top=3.7 * PT_PER_CM,
    max_height=2.2 * PT_PER_CM,
    max_width=5.1 * PT_PER_CM,
    box_width=4.0 * PT_PER_CM,
    box_height=1.5 * PT_PER_CM,
)


def _prepare(record: PaymentRecord, language: str) -> None:
    validate_payment(record)
    check_language(language)


def title_section(record: PaymentRecord, language: str) -> TitleSection:
    _prepare(record, language)
    return TitleSection(
        payment_part=heading(Heading.PAYMENT_PART, language),
        receipt=heading(Heading.RECEIPT, language),
    )


def amount_section(record: PaymentRecord, language: str) -> AmountSection:
    _prepare(record, language)
    amount = record.amount.amount
    return AmountSection(
        currency_heading=heading(Heading.CURRENCY, language),
        currency_value=record.amount.currency,
        amount_heading=heading(Heading.AMOUNT, language),
        amount_value="" if amount is None else format_amount(amount),
    )


def format_amount(amount: float) -> str:
    """Two decimals with spaces between groups of thousands: ``3 949.75``."""
    return f"{amount:,.2f}".replace(",", " ")


def information_section(
    record: PaymentRecord,
    language: str,
    max_width: float,
    part: InformationPart,
) -> list[Paragraph]:
    """Paragraphs of the information block, reflowed to max_width.

    The additional information paragraph only appears on the payment part.
    An empty debtor yields a paragraph without lines, which the drawing
    backend renders as a box for handwritten details.
    """
    _prepare(record, language)
    part = InformationPart(part)

    def reflowed(lines: Sequence[str]) -> tuple[str, ...]:
        return tuple(reflow_at_space(lines, max_width))

    paragraphs = [
        Paragraph(
            heading(Heading.ACCOUNT_PAYABLE_TO, language),
            reflowed([record.account.print_code, *entity_lines(record.creditor)]),
        )
    ]
    if record.reference is not None:
        paragraphs.append(
            Paragraph(
                heading(Heading.REFERENCE, language),
                reflowed([record.reference.print_format]),
            )
        )
    if part is InformationPart.PAYMENT:
        info = record.information
        lines = [
            text
            for text in (info.unstructured_message, bill_information_text(info.bill_information))
            if text
        ]
        if lines:
            paragraphs.append(
                Paragraph(heading(Heading.ADDITIONAL_INFORMATION, language), reflowed(lines))
            )
    debtor = entity_lines(record.ultimate_debtor)
    if debtor:
        paragraphs.append(Paragraph(heading(Heading.PAYABLE_BY, language), reflowed(debtor)))
    else:
        paragraphs.append(Paragraph(heading(Heading.PAYABLE_BY_NAME_ADDRESS, language)))
    return paragraphs


def entity_lines(entity: Entity) -> list[str]:
    """Display lines of a validated entity; empty for an empty entity."""
    if not entity.name:
        return []
    lines = [entity.name]
    address = entity.address
    if isinstance(address, CombinedAddress):
        if address.line1:
            lines.append(address.line1)
        lines.append(address.line2)
    elif isinstance(address, StructuredAddress):
        if address.street:
            street = address.street
            if address.building_number:
                street = f"{street} {address.building_number}"
            lines.append(street)
        lines.append(f"{address.post_code} {address.town}")
    return lines


def paragraphs_height(paragraphs: Sequence[Paragraph], options: LayoutOptions) -> float:
    """Height in points from the first heading baseline to the last baseline."""
    height = 0.0
    for idx, paragraph in enumerate(paragraphs):
        if idx:
            height += options.leading + PARAGRAPH_GAP_PT
        if paragraph.lines:
            height += options.leading * len(paragraph.lines)
        else:
            height += options.box_height + PARAGRAPH_GAP_PT
    return height


def check_paragraphs_fit(paragraphs: Sequence[Paragraph], options: LayoutOptions) -> float:
    height = paragraphs_height(paragraphs, options)
    if height > options.max_height:
        raise LayoutOverflowError(height, options.max_height)
    return height


__all__ = [
    "AmountSection",
    "InformationPart",
    "LayoutOptions",
    "PAYMENT_AMOUNT_LAYOUT",
    "PAYMENT_INFORMATION_LAYOUT",
    "Paragraph",
    "RECEIPT_AMOUNT_LAYOUT",
    "RECEIPT_INFORMATION_LAYOUT",
    "TitleSection",
    "amount_section",
    "check_paragraphs_fit",
    "entity_lines",
    "format_amount",
    "information_section",
    "paragraphs_height",
    "title_section",
]
