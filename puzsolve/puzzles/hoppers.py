"""
Hoppers: frogs jump over green frogs until only red frogs remain.

Board files look like::

    5 5
    G * G * R
    * G * . *
    . * G * G
    * . * G *
    . * . * G

``G`` green frog, ``R`` red frog, ``.`` lily pad, ``*`` water.
"""

from __future__ import annotations

from collections.abc import Iterator

from puzsolve.core.configuration import config_dataclass
from puzsolve.core.grid import Coordinates
from puzsolve.puzzles.board import BoardConfig, Move

LILY_PAD = "."
WATER = "*"
GREEN_FROG = "G"
RED_FROG = "R"

FROGS = GREEN_FROG + RED_FROG

# (jumped-over offset, landing offset)
DIAGONAL_JUMPS = (
    ((-1, -1), (-2, -2)),
    ((-1, 1), (-2, 2)),
    ((1, 1), (2, 2)),
    ((1, -1), (2, -2)),
)
ORTHOGONAL_JUMPS = (
    ((-2, 0), (-4, 0)),  # up
    ((2, 0), (4, 0)),  # down
    ((0, 2), (0, 4)),  # right
    ((0, -2), (0, -4)),  # left
)


def jump_offsets(origin: Coordinates) -> tuple:
    """Frogs on odd/odd cells only jump diagonally; all others may also jump straight."""
    row, col = origin
    if row % 2 == 1 and col % 2 == 1:
        return DIAGONAL_JUMPS
    return DIAGONAL_JUMPS + ORTHOGONAL_JUMPS


@config_dataclass
class HoppersConfig(BoardConfig):
    """A hoppers board; see the module docstring for the symbols."""

    symbols = LILY_PAD + WATER + FROGS

    @property
    def green_frogs(self) -> int:
        return self.grid.count(GREEN_FROG)

    def is_goal(self) -> bool:
        return self.green_frogs == 0

    def legal_moves(self) -> Iterator[Move]:
        """Frogs in row-major order, then diagonal jumps and (where allowed) straight jumps."""
        grid = self.grid
        for origin in grid.find(FROGS):
            row, col = origin
            for (over_row, over_col), (land_row, land_col) in jump_offsets(origin):
                over = (row + over_row, col + over_col)
                landing = (row + land_row, col + land_col)
                if not (grid.in_bounds(*over) and grid.in_bounds(*landing)):
                    continue
                if grid[over] == GREEN_FROG and grid[landing] == LILY_PAD:
                    yield origin, landing

    def _apply(self, origin: Coordinates, destination: Coordinates) -> "HoppersConfig":
        over = ((origin[0] + destination[0]) // 2, (origin[1] + destination[1]) // 2)
        return HoppersConfig(
            self.grid.replace(
                {origin: LILY_PAD, over: LILY_PAD, destination: self.grid[origin]}
            )
        )
