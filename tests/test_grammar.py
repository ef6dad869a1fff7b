# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for escape sequence classification."""

from __future__ import annotations

import pytest

from vt100ish.terminal.grammar import (
    CommandKind,
    classify,
    command_length,
    int_param,
    is_malformed_introducer,
    match_command,
)


@pytest.mark.parametrize(
    ("span", "kind"),
    [
        (b"\x1b[H", CommandKind.CURSOR_HOME),
        (b"\x1b[HHello", CommandKind.CURSOR_HOME),
        (b"\x1b[5;10H", CommandKind.MOVE_CURSOR),
        (b"\x1b[005;010H", CommandKind.MOVE_CURSOR),
        (b"\x1b[5;10HText", CommandKind.MOVE_CURSOR),
        (b"\x1b[3B", CommandKind.CURSOR_DOWN),
        (b"\x1b[A", CommandKind.CURSOR_UP),
        (b"\x1b[2C", CommandKind.CURSOR_RIGHT),
        (b"\x1b[D", CommandKind.CURSOR_LEFT),
        (b"\x1b7", CommandKind.SAVE_CURSOR_ATTRIBS),
        (b"\x1b8", CommandKind.RESTORE_CURSOR_ATTRIBS),
        (b"\x1b[m", CommandKind.SELECT_GRAPHIC_RENDITION),
        (b"\x1b[0m", CommandKind.SELECT_GRAPHIC_RENDITION),
        (b"\x1b[1;31mAlarm", CommandKind.SELECT_GRAPHIC_RENDITION),
        (b"\x1b[0;1;31m", CommandKind.SELECT_GRAPHIC_RENDITION),
        (b"\x1b[J", CommandKind.ERASE_IN_DISPLAY),
        (b"\x1b[2J", CommandKind.ERASE_IN_DISPLAY),
        (b"\x1b[K", CommandKind.ERASE_IN_LINE),
        (b"\x1b[1K", CommandKind.ERASE_IN_LINE),
    ],
)
def test_classify_recognised_commands(span: bytes, kind: CommandKind) -> None:
    assert classify(span) is kind


@pytest.mark.parametrize(
    "span",
    [
        b"\x1b",
        b"\x1b[?25h",
        b"\x1b[3J",
        b"\x1b[22K",
        b"\x1b[1;2;3;4m",
        b"\x1b[5;H",
        b"\x1b(B",
    ],
)
def test_classify_unrecognised_escape_is_ignore(span: bytes) -> None:
    assert classify(span) is CommandKind.IGNORE


def test_classify_plain_text_is_data() -> None:
    assert classify(b"SWITCH> ") is CommandKind.DATA
    assert classify(b"") is CommandKind.DATA


def test_classify_is_stable() -> None:
    span = b"\x1b[12;40HCI:"
    assert classify(span) is classify(span) is CommandKind.MOVE_CURSOR


def test_command_length_excludes_trailing_text() -> None:
    assert command_length(CommandKind.MOVE_CURSOR, b"\x1b[5;10HX") == 7
    assert command_length(CommandKind.SELECT_GRAPHIC_RENDITION, b"\x1b[1;31mAlarm") == 7
    assert command_length(CommandKind.CURSOR_HOME, b"\x1b[2J") is None


def test_command_length_for_data_is_none() -> None:
    assert command_length(CommandKind.DATA, b"text") is None


def test_int_param_defaults_when_absent() -> None:
    m = match_command(CommandKind.CURSOR_UP, b"\x1b[A")
    assert m is not None
    assert int_param(m, "n", 1) == 1

    m = match_command(CommandKind.CURSOR_UP, b"\x1b[12A")
    assert m is not None
    assert int_param(m, "n", 1) == 12


def test_move_cursor_parameters_are_not_padded() -> None:
    m = match_command(CommandKind.MOVE_CURSOR, b"\x1b[7;123H")
    assert m is not None
    assert (int(m.group("row")), int(m.group("col"))) == (7, 123)


@pytest.mark.parametrize("byte", [0x20, ord("'"), ord("-"), ord("/")])
def test_malformed_introducer_fires_on_low_range_byte(byte: int) -> None:
    assert is_malformed_introducer(b"[00", byte)


@pytest.mark.parametrize(
    ("window", "byte"),
    [
        (b"[00", 0x1F),
        (b"[00", ord("0")),
        (b"[00", ord(";")),
        (b"[01", ord("-")),
        (b"00", ord("-")),
    ],
)
def test_malformed_introducer_is_narrow(window: bytes, byte: int) -> None:
    assert not is_malformed_introducer(window, byte)
