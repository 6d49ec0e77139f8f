from puzsolve.core.configuration import Configuration, config_dataclass
from puzsolve.core.grid import BoardFormatError, Coordinates, Grid, read_grid
from puzsolve.core.search_result import SearchResult, SolverStatus
from puzsolve.core.solver import Solver, SolverStateError, solve

__all__ = [
    "BoardFormatError",
    "Configuration",
    "Coordinates",
    "Grid",
    "SearchResult",
    "Solver",
    "SolverStateError",
    "SolverStatus",
    "config_dataclass",
    "read_grid",
    "solve",
]
