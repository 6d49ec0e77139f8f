import pytest

from puzsolve.core.solver import Solver
from puzsolve.puzzles.strings import StringsConfig, shift_letter


def test_shift_letter_wraps():
    assert shift_letter("A", -1) == "Z"
    assert shift_letter("Z", 1) == "A"
    assert shift_letter("M", 1) == "N"


def test_successor_order():
    config = StringsConfig("AA", "AC")
    assert [str(s) for s in config.successors()] == ["ZA", "BA", "AZ", "AB"]


def test_shortest_path():
    path = Solver(StringsConfig("AA", "AC")).solve()
    assert [str(config) for config in path] == ["AA", "AB", "AC"]


def test_wraps_backwards():
    path = Solver(StringsConfig("A", "Y")).solve()
    assert [str(config) for config in path] == ["A", "Z", "Y"]


def test_several_positions():
    path = Solver(StringsConfig("AZ", "BA")).solve()
    assert len(path) - 1 == 2
    assert str(path[-1]) == "BA"


def test_start_is_finish():
    solver = Solver(StringsConfig("HELLO", "HELLO"))
    assert len(solver.solve()) == 1
    assert solver.total_generated == 1


def test_finish_is_kept():
    assert all(s.finish == "AC" for s in StringsConfig("AA", "AC").successors())


@pytest.mark.parametrize("args", [("aa", "AC"), ("AA", "A1"), ("A B", "ABC")])
def test_rejects_non_letters(args):
    with pytest.raises(ValueError):
        StringsConfig(*args)
