#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    payload as payload_command,
    qr as qr_command,
    render as render_command,
    validate as validate_command,
)


def register(app: typer.Typer) -> None:
    validate_command.register(app)
    payload_command.register(app)
    qr_command.register(app)
    render_command.register(app)
