"""
Unit tests for mazeframe/cli.py

Tests the click command group including:
- generate / solve / algorithms subcommands
- Config file loading and saving
- Error exits for invalid configurations
"""

import pytest
from click.testing import CliRunner

from mazeframe import __version__
from mazeframe.cli import main
from mazeframe.config import MazeConfig, load_maze_config, save_maze_config
from mazeframe.generation import MazeAlgorithm
from mazeframe.utils.maze_logging import configure_logging


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def rebind_log_handlers():
    """Commands bind log handlers to the runner's captured stdout; point them back afterwards."""
    yield
    configure_logging(level="WARNING")


# ===================================================================
# Test Group
# ===================================================================


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_lists_commands(runner):
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    for command in ("generate", "solve", "algorithms"):
        assert command in result.output


# ===================================================================
# Test generate
# ===================================================================


def test_generate_square(runner):
    result = runner.invoke(main, ["generate", "-a", "kruskals", "-r", "4", "-k", "6", "-s", "1"])

    assert result.exit_code == 0, result.output
    lines = result.output.strip().split("\n")
    assert len(lines) == 2 * 4 + 1
    assert " E " in result.output
    assert " X " in result.output


def test_generate_is_reproducible(runner):
    args = ["generate", "-a", "wilsons", "-r", "5", "-k", "5", "--seed", "7"]
    assert runner.invoke(main, args).output == runner.invoke(main, args).output


@pytest.mark.parametrize(
    "args",
    [
        ["-f", "polygon", "--sides", "6", "-r", "12", "-k", "12"],
        ["-f", "circular", "-r", "10", "-k", "8"],
        ["-f", "text", "-t", "HI", "-r", "20"],
        ["--symmetry", "both", "-r", "6", "-k", "6"],
        ["--entrance", "north", "--exit", "farthest"],
    ],
)
def test_generate_frames(runner, args):
    result = runner.invoke(main, ["generate", "--seed", "3", *args])
    assert result.exit_code == 0, result.output
    assert "+" in result.output


def test_generate_invalid_rows(runner):
    result = runner.invoke(main, ["generate", "-r", "0"])
    assert result.exit_code == 2
    assert "invalid configuration" in result.output


def test_generate_unknown_algorithm(runner):
    result = runner.invoke(main, ["generate", "-a", "growing-tree"])
    assert result.exit_code != 0


def test_generate_from_config(runner, tmp_path):
    config_path = tmp_path / "maze.yaml"
    save_maze_config(MazeConfig(algorithm="prims", seed=5), config_path)

    result = runner.invoke(main, ["generate", "-c", str(config_path), "-r", "3", "-k", "3"])

    assert result.exit_code == 0, result.output
    assert len(result.output.strip().split("\n")) == 7


def test_generate_save_config(runner, tmp_path):
    out = tmp_path / "resolved.yaml"
    result = runner.invoke(main, ["generate", "-a", "ellers", "-r", "4", "-s", "2", "--save-config", str(out)])

    assert result.exit_code == 0, result.output
    assert "Saved configuration" in result.output
    saved = load_maze_config(out)
    assert saved.algorithm is MazeAlgorithm.ELLERS
    assert saved.frame.rows == 4
    assert saved.seed == 2


# ===================================================================
# Test solve
# ===================================================================


def test_solve_instant(runner):
    result = runner.invoke(main, ["solve", "-a", "kruskals", "-r", "5", "-k", "5", "-s", "4"])

    assert result.exit_code == 0, result.output
    assert " * " in result.output
    assert "Solution length:" in result.output


def test_solve_animated(runner):
    result = runner.invoke(main, ["solve", "--animate", "--speed", "100", "-a", "prims", "-r", "4", "-k", "4", "-s", "8"])

    assert result.exit_code == 0, result.output
    assert "Animated search reported" in result.output
    assert "Solution length:" in result.output


def test_solve_speed_range(runner):
    result = runner.invoke(main, ["solve", "--animate", "--speed", "0"])
    assert result.exit_code == 2


# ===================================================================
# Test algorithms
# ===================================================================


def test_algorithms_lists_all(runner):
    result = runner.invoke(main, ["algorithms"])

    assert result.exit_code == 0
    for algorithm in MazeAlgorithm:
        assert algorithm.value in result.output
    assert "Affected by:" in result.output
