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

from pathlib import Path

import typer

from ...config import parse_language, parse_separator
from ...render.pdf_render import render_bill_pdf
from ..core.common import _ctx_value, _load_config, _run_cli
from ..core.log import _warn
from ..io.invoice_file import load_payload
from ..ui import console

_RENDER_HELP = (
    "Render an invoice as a QR-bill at the bottom of an A4 PDF page.\n\n"
    "Examples:\n"
    "  swissqr render invoice.toml -o invoice.pdf\n"
    "  swissqr render invoice.toml -o invoice.pdf --language fr --separator scissors\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_RENDER_HELP)(render)


def render(
    ctx: typer.Context,
    invoice: Path = typer.Argument(..., help="Invoice TOML file."),
    output: Path = typer.Option(
        ...,
        "--output",
        "-o",
        help="PDF output path.",
        rich_help_panel="Outputs",
    ),
    language: str | None = typer.Option(
        None,
        "--language",
        "-l",
        help="Heading language: de, fr, it or en (defaults to the config).",
        rich_help_panel="Layout",
    ),
    separator: str | None = typer.Option(
        None,
        "--separator",
        help="Separator between the parts: none, border or scissors (defaults to the config).",
        rich_help_panel="Layout",
    ),
) -> None:
    quiet_value = bool(_ctx_value(ctx, "quiet"))
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        config = _load_config(ctx)
        language_value = parse_language(
            language, field="--language", default=config.bill.language
        )
        separator_value = parse_separator(
            separator, field="--separator", default=config.bill.separator
        )
        record = load_payload(
            invoice,
            on_unknown_key=lambda key: _warn(f"ignoring unknown key: {key}", quiet=quiet_value),
        )
        render_bill_pdf(
            record,
            language_value,
            output,
            separator=separator_value,
            qr_config=config.qr_config,
        )
        if not quiet_value:
            console.print(str(output))

    _run_cli(_run, debug=debug_value)
