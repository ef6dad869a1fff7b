# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Split a console capture into command and data tokens.

Tokens are first cut on ESC boundaries. A span that starts with a recognised
command usually carries literal text after it (``ESC[5;10HHello``), so a
second pass splits such spans into a command token followed by a DATA token.

The input must not contain CR or LF, and command sequences are assumed to
contain no whitespace. Whitespace inside data is kept as is.
"""

from __future__ import annotations

from dataclasses import dataclass

from vt100ish.constants import ESC, SENTINEL
from vt100ish.logging import get_logger
from vt100ish.terminal.grammar import CommandKind, classify, command_length, is_malformed_introducer

logger = get_logger(__name__)

_DEGENERATE = b"\x00"


@dataclass
class Token:
    """Classified span ``[start, end]`` (inclusive) of a parse buffer."""

    start: int
    end: int
    kind: CommandKind = CommandKind.DATA

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def extract(self, buffer: bytes) -> bytes:
        """Return the bytes this token covers.

        The trailing sentinel byte is never part of the result. An inverted or
        out-of-range span yields a single zero byte instead of failing.
        """
        if self.start < 0 or self.start > self.end or self.end >= len(buffer):
            return _DEGENERATE
        return buffer[self.start : min(self.end + 1, len(buffer) - 1)]

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}, {self.length}, {self.kind}]"


def _scan_boundaries(buffer: bytes) -> tuple[list[int], set[int]]:
    """Find token start offsets and the tokens forced to IGNORE.

    The stray byte is only looked for where the third digit of the first
    padded coordinate belongs, right after ``ESC[00``.
    """
    starts: list[int] = []
    forced: set[int] = set()
    window = b""
    for offset, byte in enumerate(buffer):
        if offset == 0 or byte == ESC:
            starts.append(offset)
        elif offset == starts[-1] + 4 and buffer[starts[-1]] == ESC and is_malformed_introducer(window, byte):
            forced.add(starts[-1])
        window = (window + bytes((byte,)))[-3:]
    return starts, forced


def _split(buffer: bytes, token: Token) -> list[Token]:
    """Split a command token carrying trailing literal text."""
    if token.kind in (CommandKind.IGNORE, CommandKind.DATA):
        return [token]
    span = token.extract(buffer)
    size = command_length(token.kind, span)
    if size is None or size >= len(span):
        return [token]
    command = Token(token.start, token.start + size - 1, token.kind)
    data = Token(command.end + 1, token.end, CommandKind.DATA)
    return [command, data]


def tokenize(data: bytes) -> tuple[bytes, list[Token]]:
    """Tokenize a console capture.

    Args:
        data: Raw capture bytes (no CR/LF)

    Returns:
        Tuple of (sentinel-terminated buffer, ordered tokens). Token spans are
        contiguous and cover every offset of the buffer exactly once.
    """
    buffer = bytes(data) + SENTINEL
    starts, forced = _scan_boundaries(buffer)

    tokens: list[Token] = []
    for index, start in enumerate(starts):
        end = starts[index + 1] - 1 if index + 1 < len(starts) else len(buffer) - 1
        token = Token(start, end)
        if start in forced:
            token.kind = CommandKind.IGNORE
        else:
            token.kind = classify(token.extract(buffer))
        tokens.append(token)

    result: list[Token] = []
    for token in tokens:
        result.extend(_split(buffer, token))

    logger.debug(
        "tokenized",
        size=len(buffer),
        boundaries=len(starts),
        tokens=len(result),
        forced_ignore=len(forced),
    )
    return buffer, result
