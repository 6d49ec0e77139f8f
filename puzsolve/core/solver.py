"""
Breadth-first search over the implicit graph of a :class:`Configuration`.

The solver only relies on the configuration contract: goal test, successor
generation, equality and hashing.  It terminates whenever the set of
configurations reachable from the start is finite.
"""

from __future__ import annotations

from collections import deque
from types import MappingProxyType
from typing import Generic, Mapping, Optional, TypeVar

from puzsolve.core.configuration import Configuration
from puzsolve.core.search_result import SearchResult, SolverStatus
from puzsolve.utils.logging import get_logger

C = TypeVar("C", bound=Configuration)

logger = get_logger(__name__)


class SolverStateError(RuntimeError):
    """Raised when a solver is re-run or its counters are read before it finished."""


class Solver(Generic[C]):
    """Find one shortest path from ``start`` to a goal configuration.

    A solver instance runs exactly one search.  The frontier, the predecessor
    map and the counters belong to the instance; build a new solver for every
    search.

    Example::

        solver = Solver(ClockConfig(hours=12, hour=1, end=3))
        path = solver.solve()          # (1, 2, 3)
        solver.total_generated         # 9
        solver.unique_discovered       # 6
    """

    def __init__(self, start: C):
        if not isinstance(start, Configuration):
            raise TypeError(
                f"Solver needs a Configuration start, got {type(start).__name__}"
            )
        self._start = start
        self._frontier: deque[C] = deque()
        self._predecessors: dict[C, Optional[C]] = {}
        self._total_generated = 0
        self._path: Optional[tuple[C, ...]] = None
        self._status = SolverStatus.IDLE

    @property
    def start(self) -> C:
        return self._start

    @property
    def status(self) -> SolverStatus:
        return self._status

    def solve(self) -> Optional[tuple[C, ...]]:
        """Run the search to completion.

        Returns:
            The configurations from start to goal (both included), or ``None``
            when every reachable configuration was expanded without meeting a goal.

        Raises:
            SolverStateError: If this solver already ran.
        """
        if self._status is not SolverStatus.IDLE:
            raise SolverStateError(
                f"Solver already {self._status.value}; create a new Solver for another search"
            )
        self._status = SolverStatus.RUNNING
        logger.debug("Search started from %r", self._start)

        self._frontier.append(self._start)
        self._predecessors[self._start] = None
        self._total_generated = 1

        while self._frontier:
            current = self._frontier.popleft()
            if current.is_goal():
                self._path = self._construct_path(current)
                self._status = SolverStatus.SOLVED
                break
            for successor in current.successors():
                self._total_generated += 1
                # First discovery wins; later sightings are only counted.
                if successor not in self._predecessors:
                    self._predecessors[successor] = current
                    self._frontier.append(successor)
        else:
            self._status = SolverStatus.EXHAUSTED

        logger.debug(
            "Search %s: total=%d unique=%d steps=%s",
            self._status.value,
            self._total_generated,
            len(self._predecessors),
            None if self._path is None else len(self._path) - 1,
        )
        return self._path

    def _construct_path(self, end: C) -> tuple[C, ...]:
        path = []
        node: Optional[C] = end
        while node is not None:
            path.append(node)
            node = self._predecessors[node]
        path.reverse()
        return tuple(path)

    def _require_finished(self) -> None:
        if not self._status.finished:
            raise SolverStateError(
                f"Search statistics are only available after solve() (status: {self._status.value})"
            )

    @property
    def total_generated(self) -> int:
        """Configurations produced: the start plus every successor of every expansion."""
        self._require_finished()
        return self._total_generated

    @property
    def unique_discovered(self) -> int:
        """Distinct configurations recorded in the predecessor map."""
        self._require_finished()
        return len(self._predecessors)

    @property
    def predecessors(self) -> Mapping[C, Optional[C]]:
        """Read-only view of the predecessor map, in discovery order."""
        self._require_finished()
        return MappingProxyType(self._predecessors)

    @property
    def result(self) -> SearchResult[C]:
        self._require_finished()
        return SearchResult(
            path=self._path,
            total_generated=self._total_generated,
            unique_discovered=len(self._predecessors),
            status=self._status,
        )


def solve(start: C) -> SearchResult[C]:
    """Search from ``start`` with a fresh :class:`Solver` and return its result."""
    solver = Solver(start)
    solver.solve()
    return solver.result
