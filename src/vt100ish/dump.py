# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Persist parse buffers for offline diagnosis."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from vt100ish.constants import DUMP_PREFIX, DUMP_SUFFIX
from vt100ish.paths import ensure_dump_dir


def dump_name(captured_at: datetime) -> str:
    """File name for a dump captured at ``captured_at`` (rendered in UTC)."""
    stamp = captured_at.astimezone(UTC)
    millis = stamp.microsecond // 1000
    return f"{DUMP_PREFIX}{stamp:%Y-%m-%d_%H-%M-%S}-{millis:03d}{DUMP_SUFFIX}"


def dump_buffer(buffer: bytes, dump_dir: str | Path, *, captured_at: datetime | None = None) -> Path:
    """Write ``buffer`` verbatim into ``dump_dir``.

    Returns:
        Path of the written dump
    """
    dump_dir = ensure_dump_dir(Path(dump_dir))
    out_path = dump_dir / dump_name(captured_at or datetime.now(UTC))
    out_path.write_bytes(buffer)
    return out_path
