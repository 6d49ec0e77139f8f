from __future__ import annotations

import enum
from abc import ABC
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Optional

from puzsolve.core.grid import BoardFormatError, Coordinates
from puzsolve.core.solver import Solver
from puzsolve.puzzles.board import BoardConfig
from puzsolve.utils.logging import get_logger
from puzsolve.utils.util import render_board

logger = get_logger(__name__)


class UpdateKind(enum.Enum):
    LOADED = "loaded"
    LOAD_FAILED = "load_failed"
    RESET = "reset"
    HINT = "hint"
    ALREADY_SOLVED = "already_solved"
    NO_SOLUTION = "no_solution"
    SELECTED = "selected"
    INVALID_SELECTION = "invalid_selection"
    MOVED = "moved"
    INVALID_MOVE = "invalid_move"


FAILED_UPDATES = frozenset(
    {
        UpdateKind.LOAD_FAILED,
        UpdateKind.NO_SOLUTION,
        UpdateKind.INVALID_SELECTION,
        UpdateKind.INVALID_MOVE,
    }
)


@dataclass(frozen=True)
class ModelUpdate:
    """What a model operation did, plus the configuration it left the model in."""

    kind: UpdateKind
    message: str
    config: BoardConfig

    @property
    def ok(self) -> bool:
        return self.kind not in FAILED_UPDATES


def _fmt(position: Coordinates) -> str:
    return f"({position[0]}, {position[1]})"


class BoardModel(ABC):
    """Interactive session over a board puzzle.

    The model owns the current configuration and returns a :class:`ModelUpdate`
    from every operation; front ends render whatever they receive.

    Subclasses set:
        config_cls: The :class:`BoardConfig` subclass to load.
        movable: Symbols that may be picked up by the first selection.
        moved_verb / blocked_verb: Wording for successful and refused moves.
        invalid_selection: Wording for a first selection without a piece.
        palette: termcolor colours used by :meth:`render`.
    """

    config_cls: ClassVar[type[BoardConfig]]
    movable: ClassVar[str]
    moved_verb: ClassVar[str] = "Moved"
    blocked_verb: ClassVar[str] = "Can't move"
    invalid_selection: ClassVar[str] = "Invalid selection"
    palette: ClassVar[dict[str, str]] = {}

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._config = self.config_cls.from_file(self._path)
        self._selected: Optional[Coordinates] = None

    @property
    def config(self) -> BoardConfig:
        return self._config

    @property
    def path(self) -> Path:
        return self._path

    @property
    def selected(self) -> Optional[Coordinates]:
        return self._selected

    def _update(self, kind: UpdateKind, message: str) -> ModelUpdate:
        logger.debug("%s: %s", kind.value, message)
        return ModelUpdate(kind=kind, message=message, config=self._config)

    def load(self, path: str | Path) -> ModelUpdate:
        """Load a new puzzle file; on failure the current puzzle stays loaded."""
        path = Path(path)
        try:
            config = self.config_cls.from_file(path)
        except (FileNotFoundError, BoardFormatError) as exc:
            logger.info("Could not load %s: %s", path, exc)
            return self._update(UpdateKind.LOAD_FAILED, f"Failed to load: {path.name}")
        self._config = config
        self._path = path
        self._selected = None
        return self._update(UpdateKind.LOADED, f"Loaded: {path.name}")

    def reset(self) -> ModelUpdate:
        """Reload the last loaded file."""
        update = self.load(self._path)
        if not update.ok:
            return update
        return self._update(UpdateKind.RESET, "Puzzle reset!")

    def hint(self) -> ModelUpdate:
        """Advance one step along a shortest solution, if there is one."""
        self._selected = None
        if self._config.is_goal():
            return self._update(UpdateKind.ALREADY_SOLVED, "Already solved!")
        path = Solver(self._config).solve()
        if path is None:
            return self._update(UpdateKind.NO_SOLUTION, "No solution!")
        self._config = path[1]
        return self._update(UpdateKind.HINT, "Next step!")

    def select(self, row: int, col: int) -> ModelUpdate:
        """First call picks a piece, the second moves it; selection then resets."""
        if self._selected is None:
            return self._select_origin((row, col))
        return self._select_destination((row, col))

    def _select_origin(self, position: Coordinates) -> ModelUpdate:
        grid = self._config.grid
        if not grid.in_bounds(*position) or grid[position] not in self.movable:
            return self._update(
                UpdateKind.INVALID_SELECTION, f"{self.invalid_selection} {_fmt(position)}"
            )
        self._selected = position
        return self._update(UpdateKind.SELECTED, f"Selected {_fmt(position)}")

    def _select_destination(self, position: Coordinates) -> ModelUpdate:
        origin, self._selected = self._selected, None
        if position not in self._config.destinations(origin):
            return self._update(
                UpdateKind.INVALID_MOVE,
                f"{self.blocked_verb} from {_fmt(origin)} to {_fmt(position)}",
            )
        self._config = self._config.move(origin, position)
        return self._update(
            UpdateKind.MOVED, f"{self.moved_verb} from {_fmt(origin)} to {_fmt(position)}"
        )

    def render(self, use_color: bool = True) -> str:
        return render_board(self._config.grid, self.palette, use_color=use_color)
