#!/usr/bin/env python3
"""Swiss QR Code symbols: the SPC payload with the Swiss cross on top."""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import segno
from PIL import Image, ImageDraw

from ..core.models import PaymentRecord
from ..encoding.serialize import payment_text

# 46 x 46 mm at 600 dpi.
DEFAULT_SIZE_PX = 1086

# Swiss cross rectangles in the coordinates of a DEFAULT_SIZE_PX image,
# drawn in order: white frame, black square, white bars.
_SWISS_CROSS = (
    ((460, 460, 626, 626), 255),
    ((472, 472, 614, 614), 0),
    ((496, 526, 590, 554), 255),
    ((528, 494, 558, 586), 255),
)


@dataclass(frozen=True)
class QrConfig:
    size_px: int = DEFAULT_SIZE_PX
    error: str = "M"
    border: int = 0
    boost_error: bool = False


def make_qr(
    data: str,
    *,
    error: str = "M",
    boost_error: bool = False,
) -> Any:
    return segno.make(
        data,
        error=error,
        encoding="utf-8",
        micro=False,
        boost_error=boost_error,
    )


def qr_image(record: PaymentRecord, config: QrConfig | None = None) -> Image.Image:
    """Validate record and draw its Swiss QR Code as a square grayscale image."""
    cfg = config or QrConfig()
    if cfg.size_px <= 0:
        raise ValueError("size_px must be a positive integer")
    qr = make_qr(payment_text(record), error=cfg.error, boost_error=cfg.boost_error)
    width, _height = qr.symbol_size(scale=1, border=cfg.border)
    scale = cfg.size_px // width
    if scale < 1:
        raise ValueError(f"size_px must be at least {width} for this payload")

    image = Image.new("L", (cfg.size_px, cfg.size_px), 255)
    draw = ImageDraw.Draw(image)
    offset = (cfg.size_px - width * scale) // 2
    for row_idx, row in enumerate(qr.matrix_iter(scale=1, border=cfg.border)):
        for col_idx, is_dark in enumerate(row):
            if not is_dark:
                continue
            x = offset + col_idx * scale
            y = offset + row_idx * scale
            draw.rectangle((x, y, x + scale - 1, y + scale - 1), fill=0)
    _draw_swiss_cross(draw, cfg.size_px)
    return image


def _draw_swiss_cross(draw: ImageDraw.ImageDraw, size_px: int) -> None:
    ratio = size_px / DEFAULT_SIZE_PX
    for (x0, y0, x1, y1), fill in _SWISS_CROSS:
        box = (
            round(x0 * ratio),
            round(y0 * ratio),
            round(x1 * ratio) - 1,
            round(y1 * ratio) - 1,
        )
        draw.rectangle(box, fill=fill)


def qr_png_bytes(record: PaymentRecord, config: QrConfig | None = None) -> bytes:
    buf = io.BytesIO()
    qr_image(record, config).save(buf, format="PNG")
    return buf.getvalue()


def save_qr(path: str | Path, record: PaymentRecord, config: QrConfig | None = None) -> None:
    png = qr_png_bytes(record, config)
    with open(path, "wb") as handle:
        handle.write(png)


__all__ = [
    "DEFAULT_SIZE_PX",
    "QrConfig",
    "make_qr",
    "qr_image",
    "qr_png_bytes",
    "save_qr",
]
