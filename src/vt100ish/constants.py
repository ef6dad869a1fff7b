# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared constants for vt100ish."""

from __future__ import annotations

# Character encoding used by the switch consoles (one character per byte)
CP437 = "cp437"

ESC = 0x1B
SENTINEL = b"\x00"

# Default console geometry
DEFAULT_COLS = 80
DEFAULT_ROWS = 24

FILL_CHAR = " "
DEBUG_FILL_CHAR = "~"

UNINITIALIZED_TEXT = "Console uninitialized.\n"

DUMP_PREFIX = "vt100ish-"
DUMP_SUFFIX = ".dump"

DEFAULT_LIVE_DELAY_S = 0.1
