# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pyte
import pytest

from vt100ish.settings import Settings
from vt100ish.terminal.emulator import ConsoleEmulator

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host VT100ISH_* variables out of the tests."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"VT100ISH_{name.upper()}", raising=False)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Default settings with dumps routed to a temp directory."""
    return Settings(dump_dir=tmp_path / "dumps")


@pytest.fixture
def emulator(settings: Settings) -> ConsoleEmulator:
    return ConsoleEmulator(settings)


@pytest.fixture
def rendered(settings: Settings) -> Callable[[bytes], ConsoleEmulator]:
    """Parse and render a capture, returning the session."""

    def _rendered(data: bytes) -> ConsoleEmulator:
        session = ConsoleEmulator(settings)
        session.parse(data)
        session.render()
        return session

    return _rendered


@pytest.fixture
def pyte_screen() -> pyte.Screen:
    """Reference screen with the default console geometry."""
    return pyte.Screen(80, 24)


@pytest.fixture
def pyte_stream(pyte_screen: pyte.Screen) -> pyte.Stream:
    return pyte.Stream(pyte_screen)
