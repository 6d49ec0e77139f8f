"""
puzsolve: breadth-first puzzle solving

A small library that finds shortest solutions to puzzles by breadth-first
search.  Any puzzle that implements the Configuration contract (goal test,
successor generation, equality and hashing) can be handed to the solver.
"""

# Core framework
from puzsolve.core import Configuration, Grid, SearchResult, Solver, config_dataclass, solve
from puzsolve.benchmark import Benchmark, BenchmarkSample

# All puzzle implementations
from puzsolve.puzzles import (
    ChessConfig,
    ClockConfig,
    HoppersConfig,
    Piece,
    StringsConfig,
)

__version__ = "0.1.0"

__all__ = [
    "Benchmark",
    "BenchmarkSample",
    "ChessConfig",
    "ClockConfig",
    "Configuration",
    "Grid",
    "HoppersConfig",
    "Piece",
    "SearchResult",
    "Solver",
    "StringsConfig",
    "config_dataclass",
    "solve",
]
