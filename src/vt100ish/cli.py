from __future__ import annotations

import json
import time
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from vt100ish.errors import Vt100ishError
from vt100ish.logging import configure_logging
from vt100ish.settings import Settings
from vt100ish.terminal.console import ConsoleGrid
from vt100ish.terminal.emulator import ConsoleEmulator
from vt100ish.terminal.grammar import CommandKind, match_command
from vt100ish.terminal.tokenizer import Token

console = Console()

# Cursor to top left before repainting a live frame
_REPAINT = "\x1b[0;0f"


def _load(emulator: ConsoleEmulator, path: Path) -> None:
    try:
        with path.open("rb") as stream:
            emulator.parse(stream)
    except (OSError, Vt100ishError) as e:
        raise click.ClickException(f"cannot read {path}: {e}") from e


def _live_printer(delay: float):
    def _print_frame(grid: ConsoleGrid) -> None:
        click.echo(_REPAINT + grid.serialize(), nl=False, color=True)
        time.sleep(delay)

    return _print_frame


def token_detail(token: Token, buffer: bytes, encoding: str) -> str:
    """Human readable payload of a token for traces."""
    span = token.extract(buffer)
    if token.kind is CommandKind.DATA:
        return repr(span.decode(encoding, errors="replace"))
    if token.kind is CommandKind.MOVE_CURSOR:
        m = match_command(token.kind, span)
        if m is not None:
            return f"{int(m.group('row'))};{int(m.group('col'))}"
    return ""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def cli() -> None:
    """vt100ish command line interface."""


@cli.command("render")
@click.argument("file", type=click.Path(path_type=Path, dir_okay=False))
@click.option("--cols", type=click.IntRange(min=1), default=None, help="Console width (default from settings).")
@click.option("--rows", type=click.IntRange(min=1), default=None, help="Console height (default from settings).")
@click.option("--wrap/--no-wrap", default=None)
@click.option("--dump/--no-dump", default=None, help="Save the consumed buffer for diagnosis.")
@click.option("--dump-dir", type=click.Path(path_type=Path, file_okay=False), default=None)
@click.option("--debug-fill", is_flag=True, help="Show empty cells as '~'.")
@click.option("--live", is_flag=True, help="Repaint the console after every write.")
@click.option("--delay", type=float, default=None, help="Pause between live frames in seconds.")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON snapshot instead of text.")
def render_cmd(
    file: Path,
    cols: int | None,
    rows: int | None,
    wrap: bool | None,
    dump: bool | None,
    dump_dir: Path | None,
    debug_fill: bool,
    live: bool,
    delay: float | None,
    as_json: bool,
) -> None:
    """Render a console capture FILE to plain text."""
    overrides: dict[str, object] = {}
    if cols is not None:
        overrides["cols"] = cols
    if rows is not None:
        overrides["rows"] = rows
    if wrap is not None:
        overrides["wrap"] = wrap
    if dump is not None:
        overrides["dump_enabled"] = dump
    if dump_dir is not None:
        overrides["dump_dir"] = dump_dir
    if debug_fill:
        overrides["debug_fill"] = True
    if delay is not None:
        overrides["live_delay"] = delay
    settings = Settings(**overrides)
    configure_logging(settings)

    on_write = _live_printer(settings.live_delay) if live else None
    emulator = ConsoleEmulator(settings, on_write=on_write)
    _load(emulator, file)
    emulator.render()

    if as_json:
        click.echo(json.dumps(emulator.get_snapshot(), indent=2))
    else:
        click.echo(emulator.serialize(), nl=False)


@cli.command("tokens")
@click.argument("file", type=click.Path(path_type=Path, dir_okay=False))
def tokens_cmd(file: Path) -> None:
    """List the tokens of a console capture FILE."""
    settings = Settings()
    configure_logging(settings)
    emulator = ConsoleEmulator(settings)
    _load(emulator, file)

    table = Table(title=str(file))
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Len", justify="right")
    table.add_column("Kind")
    table.add_column("Detail", overflow="fold")
    for token in emulator.tokens:
        table.add_row(
            str(token.start),
            str(token.end),
            str(token.length),
            str(token.kind),
            escape(token_detail(token, emulator.buffer, settings.encoding)),
        )
    console.print(table)


def main() -> None:
    cli.main()


if __name__ == "__main__":
    main()
