# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Recognised escape-sequence shapes and span classification.

Only the subset emitted by the switch consoles is recognised. Every shape is
matched as a prefix of an escape-delimited span: whatever follows the command
inside the span is literal text, which the tokenizer splits off later.

References:
    http://vt100.net/docs/vt102-ug/chapter5.html
    http://ascii-table.com/ansi-escape-sequences-vt-100.php
"""

from __future__ import annotations

import re
from enum import StrEnum

from vt100ish.constants import ESC


class CommandKind(StrEnum):
    """Closed set of token kinds."""

    CURSOR_HOME = "CURSOR_HOME"
    ERASE_IN_DISPLAY = "ERASE_IN_DISPLAY"
    ERASE_IN_LINE = "ERASE_IN_LINE"
    SELECT_GRAPHIC_RENDITION = "SELECT_GRAPHIC_RENDITION"
    SAVE_CURSOR_ATTRIBS = "SAVE_CURSOR_ATTRIBS"
    RESTORE_CURSOR_ATTRIBS = "RESTORE_CURSOR_ATTRIBS"
    MOVE_CURSOR = "MOVE_CURSOR"
    CURSOR_UP = "CURSOR_UP"
    CURSOR_DOWN = "CURSOR_DOWN"
    CURSOR_RIGHT = "CURSOR_RIGHT"
    CURSOR_LEFT = "CURSOR_LEFT"
    DATA = "DATA"
    IGNORE = "IGNORE"


# ESC [ Pn ; Pn H -- coordinates are not always zero padded to three digits
_SHAPES: dict[CommandKind, re.Pattern[bytes]] = {
    CommandKind.CURSOR_HOME: re.compile(rb"\x1b\[H"),
    CommandKind.MOVE_CURSOR: re.compile(rb"\x1b\[(?P<row>[0-9]+);(?P<col>[0-9]+)H"),
    CommandKind.CURSOR_DOWN: re.compile(rb"\x1b\[(?P<n>[0-9]*)B"),
    CommandKind.CURSOR_UP: re.compile(rb"\x1b\[(?P<n>[0-9]*)A"),
    CommandKind.CURSOR_RIGHT: re.compile(rb"\x1b\[(?P<n>[0-9]*)C"),
    CommandKind.CURSOR_LEFT: re.compile(rb"\x1b\[(?P<n>[0-9]*)D"),
    CommandKind.SAVE_CURSOR_ATTRIBS: re.compile(rb"\x1b7"),
    CommandKind.RESTORE_CURSOR_ATTRIBS: re.compile(rb"\x1b8"),
    CommandKind.SELECT_GRAPHIC_RENDITION: re.compile(rb"\x1b\[(?:[0-9]*;*){0,3}m"),
    CommandKind.ERASE_IN_DISPLAY: re.compile(rb"\x1b\[(?P<n>[0-2]?)J"),
    CommandKind.ERASE_IN_LINE: re.compile(rb"\x1b\[(?P<n>[0-2]?)K"),
}

# First match wins
CLASSIFICATION_ORDER: tuple[CommandKind, ...] = (
    CommandKind.CURSOR_HOME,
    CommandKind.MOVE_CURSOR,
    CommandKind.CURSOR_DOWN,
    CommandKind.CURSOR_UP,
    CommandKind.CURSOR_RIGHT,
    CommandKind.CURSOR_LEFT,
    CommandKind.SAVE_CURSOR_ATTRIBS,
    CommandKind.RESTORE_CURSOR_ATTRIBS,
    CommandKind.SELECT_GRAPHIC_RENDITION,
    CommandKind.ERASE_IN_DISPLAY,
    CommandKind.ERASE_IN_LINE,
)

_MALFORMED_WINDOW = b"[00"


def classify(span: bytes) -> CommandKind:
    """Classify a byte span.

    Args:
        span: Bytes of one escape-delimited span

    Returns:
        The first matching command kind, IGNORE for an unrecognised escape
        sequence, or DATA for a span that does not start with ESC
    """
    if not span or span[0] != ESC:
        return CommandKind.DATA
    for kind in CLASSIFICATION_ORDER:
        if _SHAPES[kind].match(span):
            return kind
    return CommandKind.IGNORE


def match_command(kind: CommandKind, span: bytes) -> re.Match[bytes] | None:
    """Match the shape of ``kind`` at the start of ``span``."""
    shape = _SHAPES.get(kind)
    if shape is None:
        return None
    return shape.match(span)


def command_length(kind: CommandKind, span: bytes) -> int | None:
    """Length of the command prefix of ``span``, or None if it does not match."""
    m = match_command(kind, span)
    if m is None:
        return None
    return m.end()


def int_param(m: re.Match[bytes], name: str, default: int) -> int:
    """Read a numeric parameter group, falling back to ``default`` when empty."""
    raw = m.group(name)
    if not raw:
        return default
    return int(raw)


def is_malformed_introducer(window: bytes, byte: int) -> bool:
    """Check for the stray byte some switches emit inside a padded coordinate.

    Seen as ``ESC[00*,000H`` where ``*`` is one of ``'-/`` and friends. Such
    sequences are discarded, not corrected.

    Args:
        window: The three bytes consumed before ``byte``
        byte: Current byte value
    """
    return window == _MALFORMED_WINDOW and 0x1F < byte < 0x30
