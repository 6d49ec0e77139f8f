"""
Immutable rectangular boards for the grid-based puzzles.

A :class:`Grid` owns its dimensions and its cells; every edit goes through
:meth:`Grid.replace`, which returns a new grid.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

import numpy as np

Coordinates = tuple[int, int]

CELL_DTYPE = np.dtype("<U1")


class BoardFormatError(ValueError):
    """Raised when board text does not follow the ``rows cols`` + cell rows format."""


class Grid:
    """A read-only ``rows x cols`` board of single-character cells."""

    __slots__ = ("_cells", "_hash")

    def __init__(self, cells: Iterable[Iterable[str]] | np.ndarray):
        array = np.array(
            [list(row) for row in cells] if not isinstance(cells, np.ndarray) else cells
        )
        if array.ndim != 2 or array.shape[0] == 0 or array.shape[1] == 0:
            raise ValueError(f"Grid needs a non-empty 2D layout, got shape {array.shape}")
        if array.dtype.kind != "U" or not (np.char.str_len(array) == 1).all():
            raise ValueError("Cells hold exactly one character")
        array = array.astype(CELL_DTYPE)
        array.flags.writeable = False
        self._cells = array
        self._hash = hash((array.shape, array.tobytes()))

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        return self._cells.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._cells.shape

    @property
    def cells(self) -> np.ndarray:
        """The underlying read-only cell array."""
        return self._cells

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def __getitem__(self, position: Coordinates) -> str:
        row, col = position
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is outside a {self.rows}x{self.cols} grid")
        return str(self._cells[row, col])

    def positions(self) -> Iterator[Coordinates]:
        """Yield every coordinate in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    def find(self, symbols: str) -> Iterator[Coordinates]:
        """Yield coordinates holding one of ``symbols``, in row-major order."""
        for row, col in self.positions():
            if self._cells[row, col] in symbols:
                yield row, col

    def count(self, symbols: str) -> int:
        return int(np.isin(self._cells, list(symbols)).sum())

    def replace(self, updates: Mapping[Coordinates, str]) -> "Grid":
        """Return a copy of this grid with ``updates`` applied."""
        array = self._cells.copy()
        for (row, col), symbol in updates.items():
            if not self.in_bounds(row, col):
                raise IndexError(f"({row}, {col}) is outside a {self.rows}x{self.cols} grid")
            if len(symbol) != 1:
                raise ValueError(f"Cells hold exactly one character, got {symbol!r}")
            array[row, col] = symbol
        return Grid(array)

    def to_lines(self) -> list[str]:
        return [" ".join(row) for row in self._cells.tolist()]

    def to_text(self) -> str:
        """Render the grid in the board-file format read by :meth:`from_text`."""
        return "\n".join([f"{self.rows} {self.cols}", *self.to_lines()]) + "\n"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._hash == other._hash and np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return self._hash

    def __str__(self) -> str:
        return "\n".join(self.to_lines())

    def __repr__(self) -> str:
        return f"Grid({self.to_lines()!r})"

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        """
        Parse board text.

        The first line holds ``rows cols``; it is followed by ``rows`` lines of
        cells, either space separated (``B . P K``) or contiguous (``B.PK``).
        ``#`` starts a comment and blank lines are skipped.
        """
        lines = []
        for raw in text.splitlines():
            line = raw.split("#", 1)[0].strip()
            if line:
                lines.append(line)
        if not lines:
            raise BoardFormatError("Board text is empty")

        header = lines[0].split()
        if len(header) != 2 or not all(part.isascii() and part.isdigit() for part in header):
            raise BoardFormatError(f"Expected 'rows cols' header, got {lines[0]!r}")
        rows, cols = int(header[0]), int(header[1])
        if rows == 0 or cols == 0:
            raise BoardFormatError(f"Board dimensions must be positive, got {rows}x{cols}")

        body = lines[1:]
        if len(body) != rows:
            raise BoardFormatError(f"Expected {rows} board rows, found {len(body)}")

        cells = []
        for index, line in enumerate(body):
            row = "".join(line.split())
            if len(row) != cols:
                raise BoardFormatError(
                    f"Row {index} has {len(row)} cells, expected {cols}: {line!r}"
                )
            cells.append(list(row))
        return cls(cells)


def read_grid(path: str | Path) -> Grid:
    """Read a board file; raises ``FileNotFoundError`` or :class:`BoardFormatError`."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Board file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise BoardFormatError(f"Board file {path} is not UTF-8 text") from exc
    return Grid.from_text(text)
