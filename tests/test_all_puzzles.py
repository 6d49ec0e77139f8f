"""Contract checks run against every puzzle shipped with puzsolve."""

import pytest

from puzsolve.core.configuration import Configuration
from puzsolve.puzzles import ChessConfig, ClockConfig, HoppersConfig, StringsConfig

CHESS_BOARD = "4 4\nB . P K\nN . . P\n. . P Q\nR . . P\n"
HOPPERS_BOARD = "5 5\nG * G * R\n* G * . *\n. * G * G\n* . * G *\n. * . * G\n"

BUILDERS = {
    "clock": lambda: ClockConfig(12, 1, 3),
    "strings": lambda: StringsConfig("CAT", "DOG"),
    "chess": lambda: ChessConfig.from_text(CHESS_BOARD),
    "hoppers": lambda: HoppersConfig.from_text(HOPPERS_BOARD),
}


@pytest.fixture(params=sorted(BUILDERS))
def build(request):
    return BUILDERS[request.param]


def test_is_configuration(build):
    assert isinstance(build(), Configuration)


def test_equal_values_hash_equal(build):
    first, second = build(), build()
    assert first is not second
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_successors_are_deterministic(build):
    config = build()
    first, second = config.successors(), config.successors()
    assert isinstance(first, tuple)
    assert first == second
    assert [hash(s) for s in first] == [hash(s) for s in second]


def test_successors_share_the_type(build):
    config = build()
    successors = config.successors()
    assert successors
    assert all(type(successor) is type(config) for successor in successors)
    assert all(successor is not config for successor in successors)


def test_successors_differ_from_their_source(build):
    config = build()
    assert all(successor != config for successor in config.successors())


def test_start_is_not_solved(build):
    assert not build().is_goal()


def test_str_is_stable(build):
    assert str(build()) == str(build())
