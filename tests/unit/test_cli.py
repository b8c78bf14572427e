#!/usr/bin/env python3
"""
Unit tests for perfect_maze/cli.py

Tests the click command group:
- generate (stdout, file output, config files, verification)
- verify (saved files, broken mazes, bad paths)
- algorithms
- level
"""

import json

import pytest
from click.testing import CliRunner

import numpy as np

from perfect_maze import MazeAlgorithm, generate, save_maze
from perfect_maze.cli import main
from perfect_maze.export import load_maze


@pytest.fixture
def runner():
    return CliRunner()


# ===================================================================
# generate
# ===================================================================


@pytest.mark.unit
def test_generate_prints_ascii(runner):
    """Test generate prints one line per grid row."""
    result = runner.invoke(main, ["generate", "-W", "11", "-H", "7", "-s", "3", "-a", "prim"])

    assert result.exit_code == 0, result.output
    lines = result.output.rstrip("\n").split("\n")
    assert len(lines) == 7
    assert lines[0] == "#" * 11
    assert lines[1][1] == "S"


@pytest.mark.unit
def test_generate_with_verify(runner):
    """Test generate --verify prints a passing summary."""
    result = runner.invoke(main, ["generate", "-W", "15", "-H", "15", "-s", "1", "-a", "wilson", "--verify"])

    assert result.exit_code == 0, result.output
    assert "Verification: PERFECT" in result.output
    assert "Carved edges:    48 (expected 48)" in result.output


@pytest.mark.unit
def test_generate_to_file(runner, tmp_path):
    """Test generate -o saves a loadable maze matching the library output."""
    output = tmp_path / "maze.npy"
    result = runner.invoke(
        main, ["generate", "-W", "21", "-H", "11", "-s", "42", "-a", "kruskal", "-o", str(output)]
    )

    assert result.exit_code == 0, result.output
    assert "Saved 21x11 maze" in result.output
    np.testing.assert_array_equal(load_maze(output), generate(21, 11, 42, MazeAlgorithm.KRUSKAL))


@pytest.mark.unit
def test_generate_from_config_with_override(runner, tmp_path):
    """Test that options override values read from --config."""
    config_path = tmp_path / "maze.json"
    config_path.write_text(json.dumps({"width": 9, "height": 9, "seed": 4, "algorithm": "eller"}))
    output = tmp_path / "maze.json.npy"

    result = runner.invoke(main, ["generate", "-c", str(config_path), "-H", "13", "-o", str(output)])

    assert result.exit_code == 0, result.output
    np.testing.assert_array_equal(load_maze(output), generate(9, 13, 4, MazeAlgorithm.ELLER))


@pytest.mark.unit
@pytest.mark.parametrize("args", [["-W", "10"], ["-H", "4"], ["-W", "0"]])
def test_generate_invalid_dimensions(runner, args):
    """Test that malformed dimensions exit with status 1."""
    result = runner.invoke(main, ["generate", *args])

    assert result.exit_code == 1
    assert "Error" in result.output


@pytest.mark.unit
def test_generate_unknown_algorithm(runner):
    """Test that click rejects unknown algorithm names."""
    result = runner.invoke(main, ["generate", "-a", "labyrinth"])

    assert result.exit_code != 0


@pytest.mark.unit
def test_generate_missing_config(runner, tmp_path):
    """Test that a missing config file exits with status 1."""
    result = runner.invoke(main, ["generate", "-c", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 1
    assert "not found" in result.output


# ===================================================================
# verify
# ===================================================================


@pytest.mark.unit
def test_verify_saved_maze(runner, tmp_path):
    """Test verify accepts a perfect maze file."""
    path = save_maze(generate(13, 13, seed=6, algorithm=MazeAlgorithm.ALDOUS_BRODER), tmp_path / "maze.txt")

    result = runner.invoke(main, ["verify", str(path)])

    assert result.exit_code == 0, result.output
    assert "(13x13)" in result.output
    assert "Verification: PERFECT" in result.output


@pytest.mark.unit
def test_verify_broken_maze(runner, tmp_path):
    """Test verify exits 1 for a maze with a loop."""
    grid = generate(13, 13, seed=6, algorithm=MazeAlgorithm.BACKTRACKER)
    grid[2:-1:2, 1::2] = False
    path = save_maze(grid, tmp_path / "broken.npy")

    result = runner.invoke(main, ["verify", str(path)])

    assert result.exit_code == 1
    assert "NOT PERFECT" in result.output


@pytest.mark.unit
@pytest.mark.parametrize("shape", [(0, 5), (5, 0)])
def test_verify_empty_grid(runner, tmp_path, shape):
    """Test verify reports an empty saved grid as an error, not a traceback."""
    path = tmp_path / "empty.npy"
    np.save(path, np.ones(shape, dtype=bool))

    result = runner.invoke(main, ["verify", str(path)])

    assert result.exit_code == 1
    assert "Error" in result.output
    assert not isinstance(result.exception, IndexError)


@pytest.mark.unit
def test_verify_json_without_size(runner, tmp_path):
    """Test verify reports a JSON maze missing its size fields."""
    path = tmp_path / "maze.json"
    path.write_text(json.dumps({"cells": [[1, 1, 1]]}))

    result = runner.invoke(main, ["verify", str(path)])

    assert result.exit_code == 1
    assert "must contain" in result.output


@pytest.mark.unit
def test_verify_missing_file(runner, tmp_path):
    """Test verify reports a missing file."""
    result = runner.invoke(main, ["verify", str(tmp_path / "missing.npy")])

    assert result.exit_code == 1
    assert "Error" in result.output


# ===================================================================
# algorithms / level / version
# ===================================================================


@pytest.mark.unit
def test_algorithms_lists_all(runner):
    """Test algorithms prints every algorithm value."""
    result = runner.invoke(main, ["algorithms"])

    assert result.exit_code == 0
    assert result.output.split() == [algorithm.value for algorithm in MazeAlgorithm]


@pytest.mark.unit
def test_level_command(runner):
    """Test level prints the level plan followed by the maze."""
    result = runner.invoke(main, ["level", "2", "-s", "5"])

    assert result.exit_code == 0, result.output
    lines = result.output.rstrip("\n").split("\n")
    assert lines[0] == "Level 2: 13x13, algorithm: wilson"
    assert len(lines) == 1 + 13


@pytest.mark.unit
def test_level_invalid(runner):
    """Test that level 0 is rejected."""
    result = runner.invoke(main, ["level", "0"])

    assert result.exit_code == 1
    assert "level must be" in result.output


@pytest.mark.unit
def test_version(runner):
    """Test --version output."""
    result = runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert "perfect-maze" in result.output
