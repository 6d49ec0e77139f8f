"""Command line front end for puzsolve.

Example::

    puzsolve clock 12 1 3
    puzsolve chess chess-4.txt
    puzsolve play hoppers hoppers-4.txt
    puzsolve bench chess

Board files that do not exist relative to the working directory are looked up
among the bundled puzzles.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from puzsolve.benchmark import ChessBenchmark, HoppersBenchmark, run_benchmark
from puzsolve.benchmark.puzzle_files import bundled_path
from puzsolve.core.configuration import Configuration
from puzsolve.core.grid import BoardFormatError
from puzsolve.core.search_result import SearchResult
from puzsolve.core.solver import solve
from puzsolve.models import ChessModel, HoppersModel, ModelUpdate
from puzsolve.puzzles import ChessConfig, ClockConfig, HoppersConfig, StringsConfig
from puzsolve.puzzles.board import BoardConfig
from puzsolve.utils.logging import configure_logging
from puzsolve.utils.util import coloring_str, render_table

BOARD_PUZZLES = {"chess": ChessConfig, "hoppers": HoppersConfig}
MODELS = {"chess": ChessModel, "hoppers": HoppersModel}
BENCHMARKS = {"chess": ChessBenchmark, "hoppers": HoppersBenchmark}

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

OK_COLOR = (120, 220, 120)
FAIL_COLOR = (230, 90, 90)

PLAY_HELP = "\n".join(
    [
        "h(int)              -- hint next move",
        "l(oad) filename     -- load new puzzle file",
        "s(elect) r c        -- select cell at r, c",
        "q(uit)              -- quit the game",
        "r(eset)             -- reset the current game",
    ]
)


def resolve_board_path(puzzle: str, filename: str) -> Path:
    path = Path(filename)
    if path.exists():
        return path
    bundled = bundled_path(puzzle, path.name)
    return bundled if bundled.is_file() else path


def load_board(puzzle: str, filename: str) -> BoardConfig:
    try:
        return BOARD_PUZZLES[puzzle].from_file(resolve_board_path(puzzle, filename))
    except (FileNotFoundError, BoardFormatError) as exc:
        raise click.ClickException(str(exc)) from exc


def echo_result(result: SearchResult[Configuration], multiline: bool = False) -> None:
    click.echo(f"Total configs: {result.total_generated}")
    click.echo(f"Unique configs: {result.unique_discovered}")
    if result.path is None:
        click.echo("No solution")
        return
    for step, config in enumerate(result.path):
        if multiline:
            click.echo(f"Step {step}:")
            click.echo(f"{config}\n")
        else:
            click.echo(f"Step {step}: {config}")


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
)
@click.option("--log-file", type=click.Path(dir_okay=False), default=None)
def cli(log_level: str, log_file: Optional[str]):
    """Solve puzzles with breadth-first search."""
    configure_logging(log_level, log_file)


@cli.command()
@click.argument("hours", type=int)
@click.argument("start", type=int)
@click.argument("end", type=int)
def clock(hours: int, start: int, end: int):
    """Move a clock hand from START to END on a clock with HOURS hours."""
    try:
        config = ClockConfig(hours, start, end)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    click.echo(f"Hours: {hours}, Start: {start}, End: {end}")
    echo_result(solve(config))


@cli.command()
@click.argument("start")
@click.argument("finish")
def strings(start: str, finish: str):
    """Step the letters of START until it reads FINISH."""
    try:
        config = StringsConfig(start, finish)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    click.echo(f"Start: {start}, End: {finish}")
    echo_result(solve(config))


def _board_command(puzzle: str, filename: str) -> None:
    config = load_board(puzzle, filename)
    click.echo(f"File: {filename}")
    click.echo(f"{config}")
    echo_result(solve(config), multiline=True)


@cli.command()
@click.argument("filename")
def chess(filename: str):
    """Solve a capture-chess board file."""
    _board_command("chess", filename)


@cli.command()
@click.argument("filename")
def hoppers(filename: str):
    """Solve a hoppers board file."""
    _board_command("hoppers", filename)


def _show(update: ModelUpdate, board: str, use_color: bool) -> None:
    message = update.message
    if use_color:
        message = coloring_str(message, OK_COLOR if update.ok else FAIL_COLOR)
    click.echo(message)
    click.echo(board)


@cli.command()
@click.argument("puzzle", type=click.Choice(sorted(MODELS)))
@click.argument("filename")
@click.option("--color/--no-color", "use_color", default=True, show_default=True)
def play(puzzle: str, filename: str, use_color: bool):
    """Play a board puzzle interactively, asking for hints when stuck."""
    try:
        model = MODELS[puzzle](resolve_board_path(puzzle, filename))
    except (FileNotFoundError, BoardFormatError) as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Loaded: {model.path.name}")
    click.echo(model.render(use_color))
    click.echo(PLAY_HELP)

    stdin = click.get_text_stream("stdin")
    while True:
        click.echo("> ", nl=False)
        line = stdin.readline()
        if not line:
            break
        words = line.split()
        if not words:
            continue
        command = words[0].lower()
        if command.startswith("q"):
            break
        elif command.startswith("h"):
            update = model.hint()
        elif command.startswith("l"):
            if len(words) < 2:
                click.echo("No file chosen!")
                continue
            update = model.load(resolve_board_path(puzzle, words[1]))
        elif command.startswith("s"):
            if len(words) != 3 or not all(word.lstrip("-").isdigit() for word in words[1:]):
                click.echo("Incomplete selection! Use: s(elect) r c")
                continue
            update = model.select(int(words[1]), int(words[2]))
        elif command.startswith("r"):
            update = model.reset()
        else:
            click.echo(PLAY_HELP)
            continue
        _show(update, model.render(use_color), use_color)


@cli.command()
@click.argument("puzzle", type=click.Choice(sorted(BENCHMARKS)))
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory of board files; defaults to the bundled puzzles.",
)
@click.option("--progress/--no-progress", default=True, show_default=True)
@click.pass_context
def bench(ctx: click.Context, puzzle: str, data_dir: Optional[str], progress: bool):
    """Solve every board file of a collection and tabulate the results."""
    benchmark = BENCHMARKS[puzzle](data_dir)
    try:
        records = run_benchmark(benchmark, progress=progress)
    except (FileNotFoundError, BoardFormatError) as exc:
        raise click.ClickException(str(exc)) from exc

    rows = [
        [
            record.name,
            "yes" if record.solved else "no",
            "-" if record.steps is None else record.steps,
            record.total_generated,
            record.unique_discovered,
            f"{record.seconds:.3f}",
            "yes" if record.verified else "NO",
        ]
        for record in records
    ]
    click.echo(
        render_table(
            rows, ["Puzzle", "Solved", "Steps", "Total", "Unique", "Seconds", "Verified"]
        )
    )
    if not all(record.verified for record in records):
        ctx.exit(1)


if __name__ == "__main__":
    cli()
