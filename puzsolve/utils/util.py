from collections.abc import Mapping, Sequence
from typing import Optional

from tabulate import tabulate
from termcolor import colored

from puzsolve.core.grid import Grid


def coloring_str(string: str, color: tuple[int, int, int]) -> str:
    r, g, b = color
    return f"\x1b[38;2;{r};{g};{b}m{string}\x1b[0m"


def render_board(
    grid: Grid,
    palette: Optional[Mapping[str, str]] = None,
    use_color: bool = True,
) -> str:
    """
    Render ``grid`` with row and column indices, as the play loop shows it.

    ``palette`` maps cell symbols to termcolor colour names; symbols missing from
    it are printed as-is.
    """
    palette = palette or {}

    def to_char(symbol: str) -> str:
        color = palette.get(symbol)
        if use_color and color is not None:
            return colored(symbol, color)
        return symbol

    rows = [[to_char(symbol) for symbol in row] for row in grid.cells.tolist()]
    return tabulate(
        rows,
        headers=[str(col) for col in range(grid.cols)],
        showindex=[f"{row}|" for row in range(grid.rows)],
        tablefmt="plain",
        stralign="center",
    )


def render_table(rows: Sequence[Sequence[object]], headers: Sequence[str]) -> str:
    """Summary table used by the benchmark command."""
    return tabulate(rows, headers=headers, tablefmt="simple_outline")
