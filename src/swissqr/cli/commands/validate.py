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

from ...core.validation import validate_payment
from ..core.common import _ctx_value, _run_cli
from ..core.log import _warn
from ..io.invoice_file import load_payload
from ..ui import console

_VALIDATE_HELP = (
    "Check an invoice file against the QR-bill rules.\n\n"
    "Examples:\n"
    "  swissqr validate invoice.toml\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_VALIDATE_HELP)(validate)


def validate(
    ctx: typer.Context,
    invoice: Path = typer.Argument(..., help="Invoice TOML file."),
) -> None:
    quiet_value = bool(_ctx_value(ctx, "quiet"))
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        record = load_payload(
            invoice,
            on_unknown_key=lambda key: _warn(f"ignoring unknown key: {key}", quiet=quiet_value),
        )
        validate_payment(record)
        if not quiet_value:
            console.print("[success]OK[/success]")

    _run_cli(_run, debug=debug_value)
