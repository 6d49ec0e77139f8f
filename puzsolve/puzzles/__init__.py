"""
Puzzle implementations for puzsolve.

Every puzzle is a :class:`~puzsolve.core.configuration.Configuration`; the same
breadth-first solver handles all of them.
"""

from puzsolve.puzzles.board import BoardConfig
from puzsolve.puzzles.chess import ChessConfig, Piece
from puzsolve.puzzles.clock import ClockConfig
from puzsolve.puzzles.hoppers import HoppersConfig
from puzsolve.puzzles.strings import StringsConfig

__all__ = [
    "BoardConfig",
    "ChessConfig",
    "ClockConfig",
    "HoppersConfig",
    "Piece",
    "StringsConfig",
]
