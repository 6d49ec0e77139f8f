from puzsolve.models.base import BoardModel
from puzsolve.puzzles.chess import PIECE_SYMBOLS, ChessConfig


class ChessModel(BoardModel):
    """Play capture chess: select a piece, then the piece it captures."""

    config_cls = ChessConfig
    movable = PIECE_SYMBOLS
    moved_verb = "Captured"
    blocked_verb = "Can't capture"
    invalid_selection = "Invalid selection"
    palette = {symbol: "light_yellow" for symbol in PIECE_SYMBOLS}
