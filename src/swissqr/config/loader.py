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

import tomllib
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from ..qr.codec import DEFAULT_SIZE_PX, QrConfig
from ..render.headings import SUPPORTED_LANGUAGES
from ..render.pdf_render import SEPARATOR_NONE, SEPARATORS
from .installer import resolve_config_path

DEFAULT_LANGUAGE = "de"
# Swiss QR Codes always use error correction level M.
QR_ERROR_LEVELS = ("M",)


@dataclass(frozen=True)
class BillDefaults:
    language: str = DEFAULT_LANGUAGE
    separator: str = SEPARATOR_NONE


@dataclass(frozen=True)
class AppConfig:
    config_path: Path
    bill: BillDefaults = field(default_factory=BillDefaults)
    qr_config: QrConfig = field(default_factory=QrConfig)


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path)
    return AppConfig(
        config_path=config_path,
        bill=_parse_bill_defaults(_get_dict(data, "bill")),
        qr_config=build_qr_config(_get_dict(data, "qr")),
    )


def build_qr_config(cfg: dict[str, object] | None = None) -> QrConfig:
    cfg = cfg or {}
    size_px = _parse_positive_int(cfg.get("size_px"), field="qr.size_px", default=DEFAULT_SIZE_PX)
    error = _parse_choice(
        cfg.get("error"),
        field="qr.error",
        choices=QR_ERROR_LEVELS,
        default="M",
        normalize=str.upper,
    )
    return QrConfig(size_px=size_px, error=error)


def _parse_bill_defaults(cfg: dict[str, object]) -> BillDefaults:
    return BillDefaults(
        language=parse_language(cfg.get("language"), field="bill.language"),
        separator=parse_separator(cfg.get("separator"), field="bill.separator"),
    )


def parse_language(value: object, *, field: str, default: str = DEFAULT_LANGUAGE) -> str:
    return _parse_choice(
        value,
        field=field,
        choices=SUPPORTED_LANGUAGES,
        default=default,
        normalize=str.lower,
    )


def parse_separator(value: object, *, field: str, default: str = SEPARATOR_NONE) -> str:
    return _parse_choice(
        value,
        field=field,
        choices=SEPARATORS,
        default=default,
        normalize=str.lower,
    )


def _parse_choice(
    value: object,
    *,
    field: str,
    choices: tuple[str, ...],
    default: str,
    normalize: Callable[[str], str],
) -> str:
    if value is None:
        return default
    expected = ", ".join(choices)
    if not isinstance(value, str):
        raise ValueError(f"{field} must be one of: {expected}")
    normalized = normalize(value.strip())
    if not normalized:
        return default
    if normalized not in choices:
        raise ValueError(f"{field} must be one of: {expected}")
    return normalized


def _parse_positive_int(value: object, *, field: str, default: int) -> int:
    if value is None:
        return default
    parsed = _parse_int_strict(value, field=field)
    if parsed <= 0:
        raise ValueError(f"{field} must be a positive integer")
    return parsed


def _parse_int_strict(value: object, *, field: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError(f"{field} must be an integer")
        try:
            return int(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be an integer") from exc
    raise ValueError(f"{field} must be an integer")


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}
