import pytest
from click.testing import CliRunner

from puzsolve.cli import cli

HOPPERS_SMALL = "3 3\nR * .\n* G *\n. * .\n"


@pytest.fixture
def runner():
    return CliRunner()


class TestSolveCommands:
    def test_clock(self, runner):
        result = runner.invoke(cli, ["clock", "12", "1", "3"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "Hours: 12, Start: 1, End: 3",
            "Total configs: 9",
            "Unique configs: 6",
            "Step 0: 1",
            "Step 1: 2",
            "Step 2: 3",
        ]

    def test_strings(self, runner):
        result = runner.invoke(cli, ["strings", "AA", "AC"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "Start: AA, End: AC",
            "Total configs: 49",
            "Unique configs: 24",
            "Step 0: AA",
            "Step 1: AB",
            "Step 2: AC",
        ]

    @pytest.mark.parametrize(
        "args", [["clock", "12", "0", "3"], ["clock", "0", "1", "1"], ["strings", "ab", "AC"]]
    )
    def test_bad_arguments_are_usage_errors(self, runner, args):
        result = runner.invoke(cli, args)
        assert result.exit_code == 2

    def test_non_integer_hours(self, runner):
        assert runner.invoke(cli, ["clock", "twelve", "1", "3"]).exit_code == 2

    def test_bundled_chess_board(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["chess", "chess-1.txt"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[:5] == [
            "File: chess-1.txt",
            "R N",
            ". .",
            "Total configs: 2",
            "Unique configs: 2",
        ]
        assert "Step 0:" in lines
        assert "Step 1:" in lines
        assert ". R" in lines

    def test_board_from_path(self, runner, write_board):
        path = write_board("frogs.txt", HOPPERS_SMALL)
        result = runner.invoke(cli, ["hoppers", str(path)])
        assert result.exit_code == 0
        assert "Step 1:" in result.output
        assert ". * R" in result.output

    def test_no_solution(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["hoppers", "hoppers-stuck.txt"])
        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == "No solution"

    def test_missing_file(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["chess", "missing.txt"])
        assert result.exit_code == 1
        assert "Board file not found" in result.output

    def test_malformed_file(self, runner, write_board):
        path = write_board("bad.txt", "2 2\nR N\n")
        result = runner.invoke(cli, ["chess", str(path)])
        assert result.exit_code == 1
        assert "Expected 2 board rows" in result.output

    def test_binary_file(self, runner, tmp_path):
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfe\x00garbage")
        result = runner.invoke(cli, ["chess", str(path)])
        assert result.exit_code == 1
        assert "not UTF-8 text" in result.output

    def test_non_ascii_header(self, runner, write_board):
        path = write_board("super.txt", "\u00b2 2\nR N\n")
        result = runner.invoke(cli, ["chess", str(path)])
        assert result.exit_code == 1
        assert "Expected 'rows cols' header" in result.output

    def test_debug_logging(self, runner):
        result = runner.invoke(cli, ["--log-level", "debug", "clock", "12", "1", "3"])
        assert result.exit_code == 0
        assert "Total configs: 9" in result.output


class TestPlay:
    def test_select_and_jump(self, runner, write_board):
        path = write_board("frogs.txt", HOPPERS_SMALL)
        result = runner.invoke(
            cli, ["play", "hoppers", str(path), "--no-color"], input="s 0 0\ns 2 2\nq\n"
        )
        assert result.exit_code == 0
        assert "Loaded: frogs.txt" in result.output
        assert "Selected (0, 0)" in result.output
        assert "Jumped from (0, 0) to (2, 2)" in result.output

    def test_hint_and_reset(self, runner, write_board):
        path = write_board("frogs.txt", HOPPERS_SMALL)
        result = runner.invoke(
            cli, ["play", "hoppers", str(path), "--no-color"], input="h\nh\nr\nq\n"
        )
        assert "Next step!" in result.output
        assert "Already solved!" in result.output
        assert "Puzzle reset!" in result.output

    def test_bad_input(self, runner, write_board):
        path = write_board("frogs.txt", HOPPERS_SMALL)
        result = runner.invoke(
            cli, ["play", "hoppers", str(path), "--no-color"], input="s 1\nl\nx\n\nq\n"
        )
        assert result.exit_code == 0
        assert "Incomplete selection!" in result.output
        assert "No file chosen!" in result.output
        assert result.output.count("s(elect) r c") >= 2

    def test_load_failure(self, runner, write_board):
        path = write_board("frogs.txt", HOPPERS_SMALL)
        result = runner.invoke(
            cli, ["play", "hoppers", str(path), "--no-color"], input="l nowhere.txt\n"
        )
        assert result.exit_code == 0
        assert "Failed to load: nowhere.txt" in result.output

    def test_colored_messages(self, runner, write_board):
        path = write_board("frogs.txt", HOPPERS_SMALL)
        result = runner.invoke(
            cli, ["play", "hoppers", str(path), "--color"], input="s 0 1\nq\n", color=True
        )
        assert "\x1b[38;2;" in result.output
        assert "No frog at (0, 1)" in result.output

    def test_missing_board(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["play", "chess", "missing.txt"])
        assert result.exit_code == 1

    def test_unknown_puzzle(self, runner):
        assert runner.invoke(cli, ["play", "clock", "x.txt"]).exit_code == 2


class TestBench:
    def test_bundled(self, runner):
        result = runner.invoke(cli, ["bench", "chess", "--no-progress"])
        assert result.exit_code == 0
        for name in ("chess-1.txt", "chess-2.txt", "chess-4.txt", "chess-stuck.txt"):
            assert name in result.output
        assert "Verified" in result.output

    def test_failed_verification_exits_nonzero(self, runner, write_board, tmp_path):
        write_board("stuck.txt", "# optimal: 1\n1 3\nR . G\n")
        result = runner.invoke(
            cli, ["bench", "hoppers", "--data-dir", str(tmp_path), "--no-progress"]
        )
        assert result.exit_code == 1
        assert "NO" in result.output

    def test_missing_directory(self, runner, tmp_path):
        result = runner.invoke(
            cli, ["bench", "chess", "--data-dir", str(tmp_path / "nowhere"), "--no-progress"]
        )
        assert result.exit_code == 1
