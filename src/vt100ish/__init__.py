# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Switch console log flattening: VT100 subset to plain text."""

from __future__ import annotations

from vt100ish.errors import GridConfigError, StreamReadError, Vt100ishError
from vt100ish.terminal import CommandKind, ConsoleEmulator, ConsoleGrid, Token

__all__ = [
    "CommandKind",
    "ConsoleEmulator",
    "ConsoleGrid",
    "GridConfigError",
    "StreamReadError",
    "Token",
    "Vt100ishError",
]
