from .benchmark import Benchmark, BenchmarkRecord, BenchmarkSample, run_benchmark
from .puzzle_files import ChessBenchmark, HoppersBenchmark, PuzzleFileBenchmark

# All benchmark implementations
__all__ = [
    "Benchmark",
    "BenchmarkRecord",
    "BenchmarkSample",
    "ChessBenchmark",
    "HoppersBenchmark",
    "PuzzleFileBenchmark",
    "run_benchmark",
]
