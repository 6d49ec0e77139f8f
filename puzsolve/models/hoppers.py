from puzsolve.models.base import BoardModel
from puzsolve.puzzles.hoppers import FROGS, GREEN_FROG, RED_FROG, WATER, HoppersConfig


class HoppersModel(BoardModel):
    """Play hoppers: select a frog, then the lily pad it lands on."""

    config_cls = HoppersConfig
    movable = FROGS
    moved_verb = "Jumped"
    blocked_verb = "Can't jump"
    invalid_selection = "No frog at"
    palette = {GREEN_FROG: "green", RED_FROG: "red", WATER: "blue"}
