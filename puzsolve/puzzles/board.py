from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterator
from pathlib import Path
from typing import ClassVar, TypeVar

from puzsolve.core.configuration import Configuration, config_dataclass
from puzsolve.core.grid import BoardFormatError, Coordinates, Grid, read_grid

Move = tuple[Coordinates, Coordinates]

B = TypeVar("B", bound="BoardConfig")


@config_dataclass
class BoardConfig(Configuration):
    """Base class for puzzles played on a :class:`Grid`.

    Subclasses set ``symbols`` to the characters their boards may contain and
    implement :meth:`legal_moves` and :meth:`_apply`.  Successors follow the
    order of :meth:`legal_moves`.

    Attributes:
        grid: The board; equality and hashing of the configuration follow it.
        symbols: Every character a board of this puzzle may hold.
    """

    grid: Grid

    symbols: ClassVar[str] = ""

    def __post_init__(self):
        if not isinstance(self.grid, Grid):
            raise TypeError(f"{type(self).__name__} needs a Grid, got {type(self.grid).__name__}")
        unknown = sorted({str(cell) for cell in self.grid.cells.flat} - set(self.symbols))
        if unknown:
            raise BoardFormatError(
                f"{type(self).__name__} boards may only contain {' '.join(self.symbols)}; "
                f"found {' '.join(unknown)}"
            )

    @abstractmethod
    def legal_moves(self) -> Iterator[Move]:
        """Yield ``(origin, destination)`` pairs in successor order."""
        pass

    @abstractmethod
    def _apply(self: B, origin: Coordinates, destination: Coordinates) -> B:
        """Build the configuration reached by a move already known to be legal."""
        pass

    def successors(self: B) -> tuple[B, ...]:
        return tuple(self._apply(origin, destination) for origin, destination in self.legal_moves())

    def destinations(self, origin: Coordinates) -> list[Coordinates]:
        """Legal destinations for the piece at ``origin``, in successor order."""
        return [destination for start, destination in self.legal_moves() if start == origin]

    def move(self: B, origin: Coordinates, destination: Coordinates) -> B:
        """Return the configuration after moving ``origin`` to ``destination``.

        Raises:
            ValueError: If the move is not one of :meth:`legal_moves`.
        """
        origin, destination = tuple(origin), tuple(destination)
        if destination not in self.destinations(origin):
            raise ValueError(f"Illegal move from {origin} to {destination}")
        return self._apply(origin, destination)

    @classmethod
    def from_text(cls: type[B], text: str) -> B:
        return cls(Grid.from_text(text))

    @classmethod
    def from_file(cls: type[B], path: str | Path) -> B:
        return cls(read_grid(path))

    def __str__(self) -> str:
        return str(self.grid)
