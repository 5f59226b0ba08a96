#!/usr/bin/env python3
"""
Unit tests for mazegen/cli.py

Tests the click command line interface:
- Successful generation output layout
- Reproducibility with --seed
- Rejection of invalid dimensions and algorithm names
"""

import pytest
from click.testing import CliRunner

from mazegen import __version__
from mazegen.cli import main


@pytest.fixture
def runner():
    return CliRunner()


def _generate(runner, *args):
    return runner.invoke(main, ["generate", *args])


# ===================================================================
# Test Successful Runs
# ===================================================================


@pytest.mark.unit
@pytest.mark.parametrize("algorithm", ["kruskal", "prim", "dfs"])
def test_generate_prints_maze_and_metrics(runner, algorithm):
    result = _generate(runner, "-w", "4", "-g", "3", "-a", algorithm, "-s", "1")

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == f"Maze generated using {algorithm} algorithm:"
    # two lines per maze row plus the closing border
    maze_lines = lines[1:8]
    assert maze_lines[0] == "+---+---+---+---+"
    assert maze_lines[-1] == "+---+---+---+---+"
    assert lines[8].startswith("Time taken: ")
    assert lines[8].endswith("s")
    assert lines[9] == ""
    assert lines[10] == "Maze Quality Metrics:"
    assert lines[11].startswith("Dead ends: ")
    assert lines[12].startswith("Longest path: ")
    assert lines[13].startswith("Average path length: ")
    assert lines[14] == "Branching factor: 1.83"
    assert lines[15].startswith("Quality Index: ")


@pytest.mark.unit
def test_generate_two_by_one_metrics(runner):
    result = _generate(runner, "--width", "2", "--height", "1", "--algorithm", "prim")

    assert result.exit_code == 0, result.output
    assert "|       |" in result.output
    assert "Dead ends: 2" in result.output
    assert "Longest path: 1" in result.output
    assert "Average path length: 1.00" in result.output
    assert "Branching factor: 1.00" in result.output
    assert "Quality Index: 0.4750" in result.output


@pytest.mark.unit
def test_generate_with_seed_is_reproducible(runner):
    args = ("-w", "6", "-g", "5", "-a", "kruskal", "-s", "99")
    first = _generate(runner, *args)
    second = _generate(runner, *args)

    def without_timing(output):
        return [line for line in output.splitlines() if not line.startswith("Time taken")]

    assert first.exit_code == second.exit_code == 0
    assert without_timing(first.output) == without_timing(second.output)


@pytest.mark.unit
def test_version_option(runner):
    result = runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


# ===================================================================
# Test Configuration Errors
# ===================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "args",
    [
        ("-w", "4", "-g", "3", "-a", "wilsons"),
        ("-w", "0", "-g", "3", "-a", "dfs"),
        ("-w", "4", "-g", "-1", "-a", "dfs"),
        ("-w", "four", "-g", "3", "-a", "dfs"),
        ("-g", "3", "-a", "dfs"),
        ("-w", "4", "-g", "3"),
    ],
)
def test_invalid_configuration_rejected(runner, args):
    result = _generate(runner, *args)

    assert result.exit_code != 0
    assert "Maze generated" not in result.output
    assert "Quality Index" not in result.output
