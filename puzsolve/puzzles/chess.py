"""
Capture-only chess solitaire.

Every move captures: a piece moves onto an occupied cell following its own
movement rule and the cell it left becomes empty.  The puzzle is solved when a
single piece remains.  Board files look like::

    4 4
    B . P K
    N . . P
    . . P Q
    R . . P
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from functools import partial

from puzsolve.core.configuration import config_dataclass
from puzsolve.core.grid import Coordinates, Grid
from puzsolve.puzzles.board import BoardConfig, Move

EMPTY = "."


class Piece(enum.Enum):
    BISHOP = "B"
    KING = "K"
    KNIGHT = "N"
    PAWN = "P"
    QUEEN = "Q"
    ROOK = "R"

    @property
    def symbol(self) -> str:
        return self.value


PIECE_SYMBOLS = "".join(piece.symbol for piece in Piece)

# Rays stop at the first occupied cell, which is the capture target.
ROOK_RAYS = ((0, 1), (0, -1), (1, 0), (-1, 0))  # right, left, down, up
BISHOP_RAYS = ((-1, -1), (1, 1), (-1, 1), (1, -1))
QUEEN_RAYS = ROOK_RAYS + BISHOP_RAYS

KING_STEPS = tuple(
    (d_row, d_col) for d_row in (-1, 0, 1) for d_col in (-1, 0, 1) if (d_row, d_col) != (0, 0)
)
KNIGHT_STEPS = ((-1, -2), (1, -2), (1, 2), (-1, 2), (-2, 1), (2, 1), (2, -1), (-2, -1))
PAWN_STEPS = ((-1, -1), (-1, 1))  # pawns capture diagonally towards row 0


def _step_targets(
    steps: tuple[tuple[int, int], ...], grid: Grid, origin: Coordinates
) -> list[Coordinates]:
    row, col = origin
    targets = []
    for d_row, d_col in steps:
        target = (row + d_row, col + d_col)
        if grid.in_bounds(*target) and grid[target] != EMPTY:
            targets.append(target)
    return targets


def _ray_targets(
    rays: tuple[tuple[int, int], ...], grid: Grid, origin: Coordinates
) -> list[Coordinates]:
    targets = []
    for d_row, d_col in rays:
        row, col = origin[0] + d_row, origin[1] + d_col
        while grid.in_bounds(row, col):
            if grid[row, col] != EMPTY:
                targets.append((row, col))
                break
            row, col = row + d_row, col + d_col
    return targets


CAPTURE_RULES: dict[Piece, Callable[[Grid, Coordinates], list[Coordinates]]] = {
    Piece.BISHOP: partial(_ray_targets, BISHOP_RAYS),
    Piece.KING: partial(_step_targets, KING_STEPS),
    Piece.KNIGHT: partial(_step_targets, KNIGHT_STEPS),
    Piece.PAWN: partial(_step_targets, PAWN_STEPS),
    Piece.QUEEN: partial(_ray_targets, QUEEN_RAYS),
    Piece.ROOK: partial(_ray_targets, ROOK_RAYS),
}


def capture_targets(grid: Grid, origin: Coordinates) -> list[Coordinates]:
    """Cells the piece at ``origin`` can capture, in that piece's direction order."""
    symbol = grid[origin]
    if symbol == EMPTY:
        return []
    return CAPTURE_RULES[Piece(symbol)](grid, origin)


@config_dataclass
class ChessConfig(BoardConfig):
    """A capture-chess board; see the module docstring for the rules."""

    symbols = EMPTY + PIECE_SYMBOLS

    @property
    def pieces_left(self) -> int:
        return self.grid.count(PIECE_SYMBOLS)

    def piece_at(self, position: Coordinates) -> Piece | None:
        symbol = self.grid[position]
        return None if symbol == EMPTY else Piece(symbol)

    def is_goal(self) -> bool:
        return self.pieces_left == 1

    def legal_moves(self) -> Iterator[Move]:
        """Pieces in row-major order, then each piece's targets in direction order."""
        for origin in self.grid.find(PIECE_SYMBOLS):
            for target in capture_targets(self.grid, origin):
                yield origin, target

    def _apply(self, origin: Coordinates, destination: Coordinates) -> "ChessConfig":
        return ChessConfig(self.grid.replace({origin: EMPTY, destination: self.grid[origin]}))
