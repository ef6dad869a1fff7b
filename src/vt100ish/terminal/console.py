# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Fixed-size character grid with a cursor and one saved cursor slot."""

from __future__ import annotations

from collections.abc import Callable

from vt100ish.constants import DEFAULT_COLS, DEFAULT_ROWS, FILL_CHAR
from vt100ish.errors import GridConfigError


class ConsoleGrid:
    """Virtual console the renderer draws into."""

    def __init__(
        self,
        cols: int = DEFAULT_COLS,
        rows: int = DEFAULT_ROWS,
        wrap: bool = False,
        *,
        fill: str = FILL_CHAR,
        on_write: Callable[[ConsoleGrid], None] | None = None,
    ) -> None:
        """Create a cleared grid.

        Args:
            cols: Width in columns
            rows: Height in rows
            wrap: Line wrap flag (kept for geometry only, writes never wrap)
            fill: Character used for empty cells
            on_write: Called with the grid after every write
        """
        if cols <= 0 or rows <= 0:
            raise GridConfigError(f"invalid console geometry {cols}x{rows}")
        if len(fill) != 1:
            raise GridConfigError(f"fill must be a single character, got {fill!r}")
        self.cols = cols
        self.rows = rows
        self.wrap = wrap
        self.fill = fill
        self.on_write = on_write
        self.cursor_x = 0
        self.cursor_y = 0
        self.saved_x = 0
        self.saved_y = 0
        self._lines: list[list[str]] = []
        self.clear()

    def clear(self) -> None:
        """Fill every cell and home the cursor."""
        self._lines = [[self.fill] * self.cols for _ in range(self.rows)]
        self.cursor_x = 0
        self.cursor_y = 0

    def write_at(self, x: int, y: int, text: str) -> None:
        """Write ``text`` starting at column ``x`` of row ``y``.

        The cursor follows the written characters. Output is truncated at the
        right edge; rows outside the grid receive nothing.
        """
        self.cursor_x = x
        self.cursor_y = y
        line = self._lines[y] if 0 <= y < self.rows else None
        for char in text:
            if self.cursor_x >= self.cols:
                break
            if line is not None and self.cursor_x >= 0:
                line[self.cursor_x] = char
            self.cursor_x += 1
        if self.on_write is not None:
            self.on_write(self)

    def write(self, text: str) -> None:
        """Write ``text`` at the current cursor."""
        self.write_at(self.cursor_x, self.cursor_y, text)

    def save_cursor(self) -> None:
        self.saved_x = self.cursor_x
        self.saved_y = self.cursor_y

    def restore_cursor(self) -> None:
        self.cursor_x = self.saved_x
        self.cursor_y = self.saved_y

    def cell(self, x: int, y: int) -> str:
        """Character at column ``x``, row ``y``."""
        return self._lines[y][x]

    def lines(self) -> list[str]:
        """Grid rows as strings, top first."""
        return ["".join(line) for line in self._lines]

    def serialize(self) -> str:
        """Grid text, one newline-terminated line per row."""
        return "".join(f"{line}\n" for line in self.lines())

    def __str__(self) -> str:
        return self.serialize()
