# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parse session: capture buffer, tokens and console grid."""

from __future__ import annotations

import hashlib
import time
from collections.abc import Callable
from typing import Any, BinaryIO

from vt100ish.constants import DEBUG_FILL_CHAR, FILL_CHAR, UNINITIALIZED_TEXT
from vt100ish.dump import dump_buffer
from vt100ish.errors import StreamReadError
from vt100ish.logging import get_logger
from vt100ish.settings import Settings
from vt100ish.terminal.console import ConsoleGrid
from vt100ish.terminal.renderer import render
from vt100ish.terminal.tokenizer import Token, tokenize

logger = get_logger(__name__)

_READ_CHUNK = 1024


class ConsoleEmulator:
    """Switch console emulation over a captured byte stream.

    Workflow: ``parse()`` a stream, ``render()`` it, then read the result with
    ``serialize()``. One session holds one stream at a time; parsing again
    replaces buffer and tokens and starts a fresh grid with the same geometry.

    Not thread safe: parse and render mutate the grid in place.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        on_write: Callable[[ConsoleGrid], None] | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            settings: Settings instance (will be created if None)
            on_write: Observer attached to every grid this session creates
        """
        self.settings = settings or Settings()
        self.on_write = on_write
        self._buffer: bytes = b""
        self._tokens: list[Token] = []
        self._grid: ConsoleGrid | None = None

    @property
    def buffer(self) -> bytes:
        return self._buffer

    @property
    def tokens(self) -> list[Token]:
        return self._tokens

    @property
    def grid(self) -> ConsoleGrid | None:
        return self._grid

    def _new_grid(self, cols: int | None = None, rows: int | None = None, wrap: bool | None = None) -> ConsoleGrid:
        return ConsoleGrid(
            cols if cols is not None else self.settings.cols,
            rows if rows is not None else self.settings.rows,
            wrap if wrap is not None else self.settings.wrap,
            fill=DEBUG_FILL_CHAR if self.settings.debug_fill else FILL_CHAR,
            on_write=self.on_write,
        )

    def _ensure_grid(self) -> ConsoleGrid:
        if self._grid is None:
            self._grid = self._new_grid()
        return self._grid

    @staticmethod
    def _read(stream: BinaryIO | bytes | bytearray | memoryview) -> bytes:
        if isinstance(stream, bytes | bytearray | memoryview):
            return bytes(stream)
        out = bytearray()
        try:
            while chunk := stream.read(_READ_CHUNK):
                out.extend(chunk)
        except OSError as e:
            raise StreamReadError(f"failed to read console stream: {e}") from e
        return bytes(out)

    def parse(self, stream: BinaryIO | bytes | bytearray | memoryview) -> None:
        """Read and tokenize a console capture.

        The stream must contain no CR or LF bytes. No rendering is applied.

        Args:
            stream: Binary file object, or the capture bytes themselves

        Raises:
            StreamReadError: If the stream cannot be read
        """
        data = self._read(stream)
        self._buffer, self._tokens = tokenize(data)

        if self._grid is None:
            self._grid = self._new_grid()
        else:
            self._grid = self._new_grid(self._grid.cols, self._grid.rows, self._grid.wrap)

        if self.settings.dump_enabled:
            self._dump()

        logger.debug("parsed", size=len(data), tokens=len(self._tokens))

    def _dump(self) -> None:
        try:
            path = dump_buffer(self._buffer, self.settings.dump_dir)
        except OSError as e:
            logger.warning("dump_failed", dump_dir=str(self.settings.dump_dir), error=str(e))
            return
        logger.info("dump_written", path=str(path), size=len(self._buffer))

    def render(self) -> None:
        """Replay the held tokens onto the grid.

        Does nothing only when no tokens are held; a capture without any
        escape byte is a single DATA token and is still written.
        """
        grid = self._ensure_grid()
        if not self._tokens:
            return
        render(self._tokens, self._buffer, grid, encoding=self.settings.encoding)

    def configure_grid(self, cols: int, rows: int, wrap: bool = False) -> None:
        """Replace the grid with a cleared one of the given geometry."""
        self._grid = self._new_grid(cols, rows, wrap)

    def clear(self) -> None:
        """Make sure a grid exists."""
        self._ensure_grid()

    def write(self, text: str) -> None:
        """Write text at the grid cursor, outside the parse/render pipeline."""
        self._ensure_grid().write(text)

    def write_at(self, x: int, y: int, text: str) -> None:
        """Write text at column ``x`` of row ``y``."""
        self._ensure_grid().write_at(x, y, text)

    def serialize(self) -> str:
        """Rendered console text, or a notice when no grid exists yet."""
        if self._grid is None:
            return UNINITIALIZED_TEXT
        return self._grid.serialize()

    def display(self) -> None:
        if self._grid is None:
            return
        print(self._grid.serialize(), end="")

    def get_snapshot(self) -> dict[str, Any]:
        """Get current console state snapshot.

        Returns:
            Dictionary containing console state:
                - screen: Console text
                - screen_hash: SHA256 hash of console text
                - cursor: Cursor position {x, y}
                - cols: Console columns
                - rows: Console rows
                - tokens: Number of tokens held
                - captured_at: Unix timestamp when snapshot was captured
        """
        screen_text = self.serialize()
        grid = self._grid
        return {
            "screen": screen_text,
            "screen_hash": hashlib.sha256(screen_text.encode("utf-8")).hexdigest(),
            "cursor": {"x": grid.cursor_x, "y": grid.cursor_y} if grid else None,
            "cols": grid.cols if grid else None,
            "rows": grid.rows if grid else None,
            "tokens": len(self._tokens),
            "captured_at": time.time(),
        }

    def __str__(self) -> str:
        return self.serialize()
