# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Filesystem paths for debug dumps."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_cache_dir

ENV_DUMP_DIR = "VT100ISH_DUMP_DIR"


def default_dump_dir() -> Path:
    """Get the default directory for input dumps."""
    env_root = os.getenv(ENV_DUMP_DIR)
    if env_root:
        return Path(env_root)
    return Path(user_cache_dir("vt100ish", "vt100ish")) / "dumps"


def ensure_dump_dir(dump_dir: Path) -> Path:
    """Create the dump directory if needed."""
    dump_dir.mkdir(parents=True, exist_ok=True)
    return dump_dir
