# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Console emulation layer."""

from __future__ import annotations

from vt100ish.terminal.console import ConsoleGrid
from vt100ish.terminal.emulator import ConsoleEmulator
from vt100ish.terminal.grammar import CommandKind, classify
from vt100ish.terminal.renderer import render
from vt100ish.terminal.tokenizer import Token, tokenize

__all__ = [
    "CommandKind",
    "ConsoleEmulator",
    "ConsoleGrid",
    "Token",
    "classify",
    "render",
    "tokenize",
]
