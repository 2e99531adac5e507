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

"""Draw a QR-bill (210 x 105 mm) with fpdf2.

Layout values come in points measured from the lower left corner of the
bill, following the Swiss style guide. They are converted to the page's
millimetre coordinates with the origin in the upper left corner.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from fpdf import FPDF

from ..core.models import PaymentRecord
from ..qr.codec import QrConfig, qr_image
from .headings import Heading, border_text, heading
from .metrics import HELVETICA, HELVETICA_BOLD
from .sections import (
    PARAGRAPH_GAP_PT,
    PAYMENT_AMOUNT_LAYOUT,
    PAYMENT_INFORMATION_LAYOUT,
    RECEIPT_AMOUNT_LAYOUT,
    RECEIPT_INFORMATION_LAYOUT,
    AmountSection,
    InformationPart,
    LayoutOptions,
    Paragraph,
    amount_section,
    check_paragraphs_fit,
    information_section,
    title_section,
)
from .text import PT_PER_CM, shorten_to_width, string_width

MM_PER_PT = 25.4 / 72.0

BILL_WIDTH_MM = 210.0
BILL_HEIGHT_MM = 105.0
RECEIPT_WIDTH_PT = 6.2 * PT_PER_CM

SEPARATOR_NONE = "none"
SEPARATOR_BORDER = "border"
SEPARATOR_SCISSORS = "scissors"
SEPARATORS = (SEPARATOR_NONE, SEPARATOR_BORDER, SEPARATOR_SCISSORS)

TEXT_FONT = "helvetica"
TITLE_SIZE_PT = 11.0
LINE_WIDTH_PT = 0.75
SEPARATOR_LINE_WIDTH_PT = 1.0
CORNER_MARK_PT = 0.3 * PT_PER_CM

# ZapfDingbats encodes the black scissors symbol as a double quote.
_SCISSORS_GLYPH = '"'


@dataclass(frozen=True)
class BillPlacement:
    """Lower left corner of the bill on the page, in millimetres."""

    left_mm: float
    bottom_mm: float

    def x(self, x_pt: float) -> float:
        return self.left_mm + x_pt * MM_PER_PT

    def y(self, y_pt: float) -> float:
        return self.bottom_mm - y_pt * MM_PER_PT


def render_bill_pdf(
    record: PaymentRecord,
    language: str,
    output: str | Path,
    *,
    separator: str = SEPARATOR_NONE,
    qr_config: QrConfig | None = None,
) -> None:
    """Write an A4 page with the bill at the bottom edge."""
    pdf = FPDF(unit="mm", format="A4")
    pdf.set_auto_page_break(False)
    pdf.core_fonts_encoding = "windows-1252"
    pdf.add_page()
    draw_bill(
        pdf,
        record,
        language,
        BillPlacement(left_mm=0.0, bottom_mm=pdf.h),
        separator=separator,
        qr_config=qr_config,
    )
    pdf.output(str(output))


def draw_bill(
    pdf: FPDF,
    record: PaymentRecord,
    language: str,
    placement: BillPlacement,
    *,
    separator: str = SEPARATOR_NONE,
    qr_config: QrConfig | None = None,
) -> None:
    """Draw the receipt and payment parts on the current page of pdf.

    The bill area is expected to be blank.
    """
    if separator not in SEPARATORS:
        raise ValueError(f"separator must be one of: {', '.join(SEPARATORS)}")
    # Validates the record and the language for every later step.
    titles = title_section(record, language)
    pdf.set_draw_color(0, 0, 0)
    pdf.set_text_color(0, 0, 0)
    pdf.set_line_width(LINE_WIDTH_PT * MM_PER_PT)
    amount = amount_section(record, language)

    _draw_title(pdf, placement, 0.5 * PT_PER_CM, titles.receipt)
    _draw_amount(pdf, placement, amount, RECEIPT_AMOUNT_LAYOUT)
    _draw_information(pdf, placement, record, language, InformationPart.RECEIPT)
    _draw_acceptance_point(pdf, placement, language)

    _draw_title(pdf, placement, 6.7 * PT_PER_CM, titles.payment_part)
    _draw_amount(pdf, placement, amount, PAYMENT_AMOUNT_LAYOUT)
    _draw_qr(pdf, placement, record, qr_config)
    _draw_information(pdf, placement, record, language, InformationPart.PAYMENT)
    _draw_alternative_procedures(pdf, placement, record)

    if separator == SEPARATOR_BORDER:
        _draw_border_with_text(pdf, placement, language)
    elif separator == SEPARATOR_SCISSORS:
        _draw_separator_with_scissors(pdf, placement)


def _draw_text(
    pdf: FPDF,
    placement: BillPlacement,
    x_pt: float,
    baseline_pt: float,
    text: str,
    *,
    style: str = "",
    size: float,
) -> None:
    pdf.set_font(TEXT_FONT, style=style, size=size)
    pdf.text(placement.x(x_pt), placement.y(baseline_pt), text)


def _draw_title(pdf: FPDF, placement: BillPlacement, x_pt: float, title: str) -> None:
    _draw_text(
        pdf,
        placement,
        x_pt,
        10.0 * PT_PER_CM - TITLE_SIZE_PT,
        title,
        style="B",
        size=TITLE_SIZE_PT,
    )


def _text_width_pt(text: str, size: float, *, bold: bool = False) -> float:
    return string_width(text, HELVETICA_BOLD if bold else HELVETICA) * size


def _draw_information(
    pdf: FPDF,
    placement: BillPlacement,
    record: PaymentRecord,
    language: str,
    part: InformationPart,
) -> None:
    if part is InformationPart.RECEIPT:
        options = RECEIPT_INFORMATION_LAYOUT
    else:
        options = PAYMENT_INFORMATION_LAYOUT
    max_width = options.max_width / options.text_size
    paragraphs = information_section(record, language, max_width, part)
    draw_paragraphs(pdf, placement, paragraphs, options)


def draw_paragraphs(
    pdf: FPDF,
    placement: BillPlacement,
    paragraphs: Sequence[Paragraph],
    options: LayoutOptions,
) -> None:
    """Draw headed paragraphs downwards from options.top.

    A paragraph without lines is drawn as an empty box with corner marks.
    """
    check_paragraphs_fit(paragraphs, options)
    origin = options.top - options.header_size
    offset = 0.0
    for idx, paragraph in enumerate(paragraphs):
        if idx:
            offset += options.leading + PARAGRAPH_GAP_PT
        _draw_text(
            pdf,
            placement,
            options.left,
            origin - offset,
            paragraph.heading,
            style="B",
            size=options.header_size,
        )
        if not paragraph.lines:
            box_top = origin - offset - 5.0
            _draw_corners(
                pdf,
                placement,
                options.left,
                box_top - options.box_height,
                options.left + options.box_width,
                box_top,
            )
            offset += options.box_height + PARAGRAPH_GAP_PT
            continue
        for line in paragraph.lines:
            offset += options.leading
            _draw_text(pdf, placement, options.left, origin - offset, line, size=options.text_size)


def _draw_amount(
    pdf: FPDF,
    placement: BillPlacement,
    amount: AmountSection,
    options: LayoutOptions,
) -> None:
    header = options.header_size
    origin = options.top - header
    column = _text_width_pt(amount.currency_heading, header, bold=True) + header
    header_width = column + _text_width_pt(amount.amount_heading, header, bold=True)

    value_baseline = origin - options.leading
    _draw_text(
        pdf, placement, options.left, origin, amount.currency_heading, style="B", size=header
    )
    _draw_text(
        pdf, placement, options.left + column, origin, amount.amount_heading, style="B", size=header
    )
    _draw_text(
        pdf, placement, options.left, value_baseline, amount.currency_value, size=options.text_size
    )
    if amount.amount_value:
        _draw_text(
            pdf,
            placement,
            options.left + column,
            value_baseline,
            amount.amount_value,
            size=options.text_size,
        )
        return

    # Blank amount: a box for the payer, moved below the headings when
    # they would overlap it.
    box_top = origin + options.header_size
    if header_width + options.box_width > options.max_width:
        box_top = origin - 5.0
    box_left = options.left + options.max_width - options.box_width
    _draw_corners(
        pdf,
        placement,
        box_left,
        box_top - options.box_height,
        box_left + options.box_width,
        box_top,
    )


def _draw_acceptance_point(pdf: FPDF, placement: BillPlacement, language: str) -> None:
    size = 6.0
    text = heading(Heading.ACCEPTANCE_POINT, language)
    x_pt = 5.7 * PT_PER_CM - _text_width_pt(text, size, bold=True)
    _draw_text(pdf, placement, x_pt, 2.3 * PT_PER_CM - size, text, style="B", size=size)


def _draw_qr(
    pdf: FPDF,
    placement: BillPlacement,
    record: PaymentRecord,
    qr_config: QrConfig | None,
) -> None:
    side_mm = 46.0
    pdf.image(
        qr_image(record, qr_config),
        x=placement.x(6.7 * PT_PER_CM),
        y=placement.y(8.9 * PT_PER_CM),
        w=side_mm,
        h=side_mm,
    )


def _draw_alternative_procedures(
    pdf: FPDF,
    placement: BillPlacement,
    record: PaymentRecord,
) -> None:
    size = 7.0
    leading = 8.0
    left = 6.7 * PT_PER_CM
    baseline = 1.5 * PT_PER_CM - leading
    total_width = 13.8 * PT_PER_CM
    for procedure in record.alternative_procedures:
        label = procedure.label + ": "
        _draw_text(pdf, placement, left, baseline, label, style="B", size=size)
        label_width = _text_width_pt(label, size, bold=True)
        remaining = (total_width - label_width) / size
        shortened = shorten_to_width(procedure.procedure, remaining)
        _draw_text(pdf, placement, left + label_width, baseline, shortened, size=size)
        baseline -= leading


def _draw_corners(
    pdf: FPDF,
    placement: BillPlacement,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
) -> None:
    """Corner marks of the box spanning (x0, y0) to (x1, y1), in points."""
    size = CORNER_MARK_PT
    corners = (
        ((x0 + size, y0), (x0, y0), (x0, y0 + size)),
        ((x0, y1 - size), (x0, y1), (x0 + size, y1)),
        ((x1 - size, y1), (x1, y1), (x1, y1 - size)),
        ((x1, y0 + size), (x1, y0), (x1 - size, y0)),
    )
    for start, corner, end in corners:
        _draw_line(pdf, placement, start, corner)
        _draw_line(pdf, placement, corner, end)


def _draw_line(
    pdf: FPDF,
    placement: BillPlacement,
    start: tuple[float, float],
    end: tuple[float, float],
) -> None:
    pdf.line(placement.x(start[0]), placement.y(start[1]), placement.x(end[0]), placement.y(end[1]))


def _draw_border_with_text(pdf: FPDF, placement: BillPlacement, language: str) -> None:
    top = BILL_HEIGHT_MM / MM_PER_PT
    width = BILL_WIDTH_MM / MM_PER_PT
    pdf.set_line_width(SEPARATOR_LINE_WIDTH_PT * MM_PER_PT)
    _draw_line(pdf, placement, (0.0, top), (width, top))
    _draw_line(pdf, placement, (RECEIPT_WIDTH_PT, 0.0), (RECEIPT_WIDTH_PT, top))
    size = 6.0
    text = border_text(language)
    x_pt = width / 2.0 - _text_width_pt(text, size) / 2.0
    _draw_text(pdf, placement, x_pt, top + 3.0, text, size=size)


def _draw_separator_with_scissors(pdf: FPDF, placement: BillPlacement) -> None:
    top = BILL_HEIGHT_MM / MM_PER_PT
    pdf.set_line_width(SEPARATOR_LINE_WIDTH_PT * MM_PER_PT)
    _draw_line(pdf, placement, (RECEIPT_WIDTH_PT, 0.0), (RECEIPT_WIDTH_PT, top))
    x = placement.x(RECEIPT_WIDTH_PT)
    y = placement.y(5.0 * PT_PER_CM)
    pdf.set_font("zapfdingbats", size=20)
    with pdf.rotation(90, x=x, y=y):
        pdf.text(x, y, _SCISSORS_GLYPH)


__all__ = [
    "BILL_HEIGHT_MM",
    "BILL_WIDTH_MM",
    "BillPlacement",
    "SEPARATORS",
    "SEPARATOR_BORDER",
    "SEPARATOR_NONE",
    "SEPARATOR_SCISSORS",
    "draw_bill",
    "draw_paragraphs",
    "render_bill_pdf",
]
