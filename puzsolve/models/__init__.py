"""
Interactive puzzle sessions.

Models keep the current board and answer every operation with a
:class:`ModelUpdate` value that front ends display.
"""

from puzsolve.models.base import BoardModel, ModelUpdate, UpdateKind
from puzsolve.models.chess import ChessModel
from puzsolve.models.hoppers import HoppersModel

__all__ = ["BoardModel", "ChessModel", "HoppersModel", "ModelUpdate", "UpdateKind"]
