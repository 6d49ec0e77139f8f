from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from puzsolve.core.configuration import Configuration

C = TypeVar("C", bound=Configuration)


class SolverStatus(enum.Enum):
    """Lifecycle of one search: ``IDLE -> RUNNING -> {SOLVED, EXHAUSTED}``."""

    IDLE = "idle"
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"

    @property
    def finished(self) -> bool:
        return self in (SolverStatus.SOLVED, SolverStatus.EXHAUSTED)


@dataclass(frozen=True)
class SearchResult(Generic[C]):
    """
    Outcome of one breadth-first search.

    ``path`` runs from the start configuration to the first goal dequeued, both
    included, or is ``None`` when no goal is reachable.
    """

    path: Optional[tuple[C, ...]]
    total_generated: int
    unique_discovered: int
    status: SolverStatus

    @property
    def solved(self) -> bool:
        return self.path is not None

    @property
    def num_steps(self) -> Optional[int]:
        """Number of moves on the path (``len(path) - 1``), ``None`` without a solution."""
        if self.path is None:
            return None
        return len(self.path) - 1
