from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Hashable, Iterable, Optional, Sequence, TypeVar

from tqdm import tqdm

from puzsolve.core.configuration import Configuration
from puzsolve.core.solver import Solver
from puzsolve.utils.logging import get_logger

__all__ = ["BenchmarkSample", "Benchmark", "BenchmarkRecord", "run_benchmark"]

ConfigT = TypeVar("ConfigT", bound=Configuration)

logger = get_logger(__name__)


@dataclass(frozen=True)
class BenchmarkSample(Generic[ConfigT]):
    """Container for a benchmark instance."""

    name: str
    config: ConfigT
    optimal_length: Optional[int] = None


class Benchmark(ABC, Generic[ConfigT]):
    """Abstract base class describing a collection of puzzle instances."""

    def __init__(self) -> None:
        self._dataset: Any = None

    @property
    def dataset(self) -> Any:
        """Load the dataset on demand and cache the result."""
        if self._dataset is None:
            self._dataset = self.load_dataset()
        return self._dataset

    @abstractmethod
    def load_dataset(self) -> Any:
        """Return the raw dataset object backing the benchmark."""

    @abstractmethod
    def sample_ids(self) -> Iterable[Hashable]:
        """Return iterable sample identifiers available in the dataset."""

    @abstractmethod
    def get_sample(self, sample_id: Hashable) -> BenchmarkSample[ConfigT]:
        """Fetch the start configuration and known optimum for a sample."""

    def verify_solution(
        self,
        sample: BenchmarkSample[ConfigT],
        path: Sequence[ConfigT] | None,
    ) -> bool:
        """
        Verify that a path is a valid, and where known optimal, solution.

        Checks:
        1. The path starts at the sample configuration.
        2. Every configuration is a successor of the one before it.
        3. The last configuration is a goal.
        4. If ``sample.optimal_length`` is known, the path has no more moves than it.
        """
        if not path:
            return False
        if path[0] != sample.config:
            return False
        for previous, current in zip(path, path[1:]):
            if current not in previous.successors():
                return False
        if not path[-1].is_goal():
            return False
        if sample.optimal_length is not None and len(path) - 1 > sample.optimal_length:
            return False
        return True


@dataclass(frozen=True)
class BenchmarkRecord:
    """Outcome of solving one benchmark sample."""

    name: str
    solved: bool
    steps: Optional[int]
    total_generated: int
    unique_discovered: int
    seconds: float
    verified: bool


def run_benchmark(benchmark: Benchmark, progress: bool = True) -> list[BenchmarkRecord]:
    """Solve every sample of ``benchmark`` and check each returned path."""
    records = []
    sample_ids = list(benchmark.sample_ids())
    for sample_id in tqdm(sample_ids, desc=type(benchmark).__name__, disable=not progress):
        sample = benchmark.get_sample(sample_id)
        solver = Solver(sample.config)
        started = time.perf_counter()
        path = solver.solve()
        elapsed = time.perf_counter() - started
        result = solver.result
        # An exhausted search is only "verified" when no optimum claims a solution exists.
        verified = (
            benchmark.verify_solution(sample, path)
            if path is not None
            else sample.optimal_length is None
        )
        if not verified:
            logger.warning("Sample %s failed verification", sample.name)
        records.append(
            BenchmarkRecord(
                name=sample.name,
                solved=result.solved,
                steps=result.num_steps,
                total_generated=result.total_generated,
                unique_discovered=result.unique_discovered,
                seconds=elapsed,
                verified=verified,
            )
        )
    return records
