"""Hypothesis-based property tests for the tokenizer and renderer.

Captures are built from a small alphabet of escape fragments so that the
generated streams hit real command shapes, malformed variants and plain text.
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from vt100ish.terminal.console import ConsoleGrid
from vt100ish.terminal.grammar import CommandKind, classify
from vt100ish.terminal.renderer import render
from vt100ish.terminal.tokenizer import tokenize

FRAGMENTS = [
    b"\x1b",
    b"\x1b[",
    b"[",
    b"0",
    b"5",
    b"12",
    b";",
    b"H",
    b"A",
    b"B",
    b"C",
    b"D",
    b"J",
    b"K",
    b"m",
    b"7",
    b"8",
    b"-",
    b"!",
    b" ",
    b"CI:",
    b"\xc4",
]

captures = st.lists(st.sampled_from(FRAGMENTS), max_size=120).map(b"".join)


@given(captures)
@settings(max_examples=300)
def test_tokens_cover_every_offset_once(data: bytes) -> None:
    buffer, tokens = tokenize(data)
    assert buffer == data + b"\x00"
    assert tokens
    assert tokens[0].start == 0
    assert tokens[-1].end == len(buffer) - 1
    for prev, cur in zip(tokens, tokens[1:], strict=False):
        assert cur.start == prev.end + 1
    assert all(t.end >= t.start for t in tokens)


@given(captures)
def test_no_data_token_starts_with_escape(data: bytes) -> None:
    buffer, tokens = tokenize(data)
    for token in tokens:
        if token.kind is CommandKind.DATA:
            assert not token.extract(buffer).startswith(b"\x1b")


@given(st.binary(max_size=40))
def test_classification_is_idempotent(span: bytes) -> None:
    assert classify(span) is classify(span)


@given(captures)
@settings(max_examples=300)
def test_render_never_fails(data: bytes) -> None:
    buffer, tokens = tokenize(data)
    grid = ConsoleGrid()
    render(tokens, buffer, grid)
    lines = grid.lines()
    assert len(lines) == 24
    assert all(len(line) == 80 for line in lines)
