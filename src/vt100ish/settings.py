# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Application settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from vt100ish.constants import CP437, DEFAULT_COLS, DEFAULT_LIVE_DELAY_S, DEFAULT_ROWS
from vt100ish.paths import default_dump_dir


class Settings(BaseSettings):
    log_level: str = "WARNING"
    cols: int = Field(default=DEFAULT_COLS, gt=0)
    rows: int = Field(default=DEFAULT_ROWS, gt=0)
    wrap: bool = False
    encoding: str = CP437
    dump_enabled: bool = False
    dump_dir: Path = Field(default_factory=default_dump_dir)
    debug_fill: bool = False
    live_delay: float = Field(default=DEFAULT_LIVE_DELAY_S, ge=0.0)

    model_config = SettingsConfigDict(
        env_prefix="VT100ISH_",
        extra="ignore",
    )
