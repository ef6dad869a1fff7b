# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Replay classified tokens against a console grid.

The grid's cursor and saved cursor are the only machine state. Effects are
applied strictly in token order and compose with whatever the grid already
holds, so replaying onto a rendered grid does not reset it.
"""

from __future__ import annotations

from collections.abc import Iterable

from vt100ish.constants import CP437
from vt100ish.logging import get_logger
from vt100ish.terminal.console import ConsoleGrid
from vt100ish.terminal.grammar import CommandKind, int_param, match_command
from vt100ish.terminal.tokenizer import Token

logger = get_logger(__name__)

_DEGENERATE = b"\x00"


def _erase_in_line(grid: ConsoleGrid, param: int) -> None:
    match param:
        case 0:
            # From cursor to end of line
            grid.write(" " * max(grid.cols - grid.cursor_x, 0))
        case 1:
            # From beginning of line to cursor
            grid.write_at(0, grid.cursor_y, " " * min(max(grid.cursor_x, 0), grid.cols))
        case 2:
            grid.write_at(0, grid.cursor_y, " " * grid.cols)


def _move_cursor(grid: ConsoleGrid, row: int, col: int) -> None:
    # 1-based on the wire, a zero coordinate is taken as already 0-based
    grid.cursor_y = row - 1 if row > 0 else row
    grid.cursor_x = col - 1 if col > 0 else col


def render(
    tokens: Iterable[Token],
    buffer: bytes,
    grid: ConsoleGrid,
    *,
    encoding: str = CP437,
) -> None:
    """Apply every token's effect to ``grid``.

    Args:
        tokens: Tokens produced by ``tokenize``
        buffer: The buffer the tokens index into
        grid: Grid to draw into
        encoding: Single-byte encoding used to turn data bytes into characters
    """
    for token in tokens:
        span = token.extract(buffer)
        match token.kind:
            case CommandKind.CURSOR_HOME:
                grid.cursor_x = 0
                grid.cursor_y = 0
            case CommandKind.MOVE_CURSOR:
                m = match_command(token.kind, span)
                if m is not None:
                    _move_cursor(grid, int(m.group("row")), int(m.group("col")))
            case CommandKind.CURSOR_UP:
                m = match_command(token.kind, span)
                grid.cursor_y -= int_param(m, "n", 1) if m is not None else 1
            case CommandKind.CURSOR_DOWN:
                m = match_command(token.kind, span)
                grid.cursor_y += int_param(m, "n", 1) if m is not None else 1
            case CommandKind.ERASE_IN_LINE:
                m = match_command(token.kind, span)
                if m is not None:
                    _erase_in_line(grid, int_param(m, "n", 0))
            case CommandKind.SAVE_CURSOR_ATTRIBS:
                grid.save_cursor()
            case CommandKind.RESTORE_CURSOR_ATTRIBS:
                grid.restore_cursor()
            case CommandKind.DATA:
                if span and span != _DEGENERATE:
                    grid.write(span.decode(encoding, errors="replace"))
            case (
                CommandKind.CURSOR_LEFT
                | CommandKind.CURSOR_RIGHT
                | CommandKind.ERASE_IN_DISPLAY
                | CommandKind.SELECT_GRAPHIC_RENDITION
                | CommandKind.IGNORE
            ):
                # Recognised, no visible effect
                pass

    logger.debug("rendered", cursor_x=grid.cursor_x, cursor_y=grid.cursor_y)
