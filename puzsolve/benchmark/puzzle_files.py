from __future__ import annotations

import re
from importlib.resources import files
from pathlib import Path
from typing import ClassVar, Hashable, Iterable, Optional

from puzsolve.benchmark.benchmark import Benchmark, BenchmarkSample
from puzsolve.puzzles.board import BoardConfig
from puzsolve.puzzles.chess import ChessConfig
from puzsolve.puzzles.hoppers import HoppersConfig

DATA_RELATIVE_PATH = Path("data")
FILE_SUFFIX = ".txt"

OPTIMAL_PATTERN = re.compile(r"^\s*#\s*optimal\s*[:=]\s*(\d+)\s*$", re.MULTILINE)


def read_optimal_length(text: str) -> Optional[int]:
    """Return the ``# optimal: N`` annotation of a board file, if present."""
    match = OPTIMAL_PATTERN.search(text)
    return int(match.group(1)) if match else None


def bundled_path(data_name: str, filename: str) -> Path:
    """Location of a board file shipped in ``puzsolve/data/<data_name>``."""
    return Path(__file__).resolve().parents[1] / DATA_RELATIVE_PATH / data_name / filename


class PuzzleFileBenchmark(Benchmark):
    """Benchmark over a directory of board files.

    Without ``data_dir`` the files bundled in ``puzsolve/data/<data_name>`` are used.
    """

    config_cls: ClassVar[type[BoardConfig]]
    data_name: ClassVar[str]

    def __init__(self, data_dir: str | Path | None = None) -> None:
        super().__init__()
        self._data_dir = Path(data_dir).expanduser().resolve() if data_dir else None

    def load_dataset(self) -> dict[str, str]:
        if self._data_dir is not None:
            if not self._data_dir.is_dir():
                raise FileNotFoundError(f"Puzzle directory not found at {self._data_dir}")
            return self._read_directory(self._data_dir)

        try:
            resource = files(f"puzsolve.data.{self.data_name}")
            return {
                entry.name: entry.read_text(encoding="utf-8")
                for entry in sorted(resource.iterdir(), key=lambda entry: entry.name)
                if entry.name.endswith(FILE_SUFFIX)
            }
        except (ModuleNotFoundError, FileNotFoundError):
            pass

        fallback = Path(__file__).resolve().parents[1] / DATA_RELATIVE_PATH / self.data_name
        if not fallback.is_dir():
            raise FileNotFoundError(
                f"Unable to locate {self.data_name} puzzles under package resources or at {fallback}"
            )
        return self._read_directory(fallback)

    @staticmethod
    def _read_directory(directory: Path) -> dict[str, str]:
        return {
            path.name: path.read_text(encoding="utf-8")
            for path in sorted(directory.glob(f"*{FILE_SUFFIX}"))
        }

    def sample_ids(self) -> Iterable[Hashable]:
        return list(self.dataset)

    def get_sample(self, sample_id: Hashable) -> BenchmarkSample:
        try:
            text = self.dataset[sample_id]
        except KeyError as exc:
            raise KeyError(f"Unknown {self.data_name} puzzle '{sample_id}'") from exc
        return BenchmarkSample(
            name=str(sample_id),
            config=self.config_cls.from_text(text),
            optimal_length=read_optimal_length(text),
        )


class ChessBenchmark(PuzzleFileBenchmark):
    """Capture-chess boards shipped with puzsolve."""

    config_cls = ChessConfig
    data_name = "chess"


class HoppersBenchmark(PuzzleFileBenchmark):
    """Hoppers boards shipped with puzsolve."""

    config_cls = HoppersConfig
    data_name = "hoppers"


__all__ = [
    "ChessBenchmark",
    "HoppersBenchmark",
    "PuzzleFileBenchmark",
    "bundled_path",
    "read_optimal_length",
]
