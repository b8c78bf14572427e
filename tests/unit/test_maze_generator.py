"""
Unit tests for perfect maze generation.

Tests maze generation algorithms for correctness, reproducibility,
and perfect maze properties (connectivity, acyclicity).
"""

import pytest

import numpy as np

from perfect_maze import (
    InvalidDimensions,
    MazeAlgorithm,
    MazeConfig,
    count_carved_edges,
    generate,
    generate_from_config,
    verify_perfect_maze,
)
from perfect_maze.grid import lattice_shape
from perfect_maze.verification import open_cells


class TestPerfectMazeGenerator:
    """Test perfect maze generation across all algorithms."""

    def test_maze_is_perfect(self, algorithm):
        """Test that generated mazes are perfect (connected, no loops)."""
        grid = generate(21, 21, seed=42, algorithm=algorithm)

        verification = verify_perfect_maze(grid)

        assert verification["is_perfect"], f"Maze is not perfect: {verification}"
        assert verification["is_connected"], "Maze is not fully connected"
        assert verification["is_no_loops"], "Maze has loops"

    def test_maze_reproducibility(self, algorithm):
        """Test that same seed produces same maze."""
        maze1 = generate(25, 17, seed=1234, algorithm=algorithm)
        maze2 = generate(25, 17, seed=1234, algorithm=algorithm)

        np.testing.assert_array_equal(maze1, maze2)

    def test_maze_dimensions(self, algorithm):
        """Test that maze has (width, height) shape and boolean cells."""
        grid = generate(31, 15, seed=42, algorithm=algorithm)

        assert grid.shape == (31, 15)
        assert grid.dtype == bool

    @pytest.mark.parametrize(("width", "height"), [(3, 3), (5, 3), (3, 9), (5, 5), (11, 21), (41, 7), (23, 23)])
    @pytest.mark.parametrize("seed", [1, 7, 99])
    def test_passage_count(self, algorithm, width, height, seed):
        """Test that perfect maze has exactly (n-1) passages for n cells."""
        grid = generate(width, height, seed=seed, algorithm=algorithm)
        cols, rows = lattice_shape(width, height)

        assert count_carved_edges(grid) == cols * rows - 1

    @pytest.mark.parametrize(("width", "height"), [(9, 9), (15, 31), (3, 41)])
    def test_connectivity(self, algorithm, width, height):
        """Test that all cells are reachable from the entrance."""
        grid = generate(width, height, seed=5, algorithm=algorithm)
        cols, rows = lattice_shape(width, height)

        verification = verify_perfect_maze(grid)

        assert verification["visited_cells"] == verification["total_cells"] == cols * rows
        assert len(open_cells(grid)) == cols * rows

    def test_entrance_and_exit_open(self, algorithm):
        """Test that entrance (1,1) and exit (w-2,h-2) are passage."""
        grid = generate(19, 13, seed=3, algorithm=algorithm)

        assert not grid[1, 1]
        assert not grid[17, 11]

    def test_outer_wall_intact(self, algorithm):
        """Test that no algorithm carves the outer ring."""
        grid = generate(17, 11, seed=8, algorithm=algorithm)

        assert grid[0, :].all() and grid[-1, :].all()
        assert grid[:, 0].all() and grid[:, -1].all()

    def test_wall_posts_never_carved(self, algorithm):
        """Test that (even, even) coordinates stay walls."""
        grid = generate(15, 15, seed=11, algorithm=algorithm)

        assert grid[::2, ::2].all()

    def test_unseeded_generation_is_perfect(self, algorithm):
        """Test that seed=0 and seed=None draw fresh entropy and still yield perfect mazes."""
        for seed in (0, None):
            grid = generate(15, 15, seed=seed, algorithm=algorithm)
            assert verify_perfect_maze(grid)["is_perfect"]

    def test_large_maze_is_perfect(self, algorithm):
        """Test a larger lattice for every algorithm."""
        grid = generate(61, 61, seed=2024, algorithm=algorithm)

        assert verify_perfect_maze(grid)["is_perfect"]


class TestDegenerateSizes:
    """Test single-cell and zero-cell lattices."""

    @pytest.mark.parametrize(("width", "height"), [(1, 1), (1, 5), (7, 1)])
    def test_zero_cell_lattice_is_all_walls(self, algorithm, width, height):
        """Test that width or height of 1 short-circuits to all walls."""
        grid = generate(width, height, seed=1, algorithm=algorithm)

        assert grid.shape == (width, height)
        assert grid.all()

    def test_single_cell_lattice(self, algorithm):
        """Test that a 3x3 grid opens only the shared entrance/exit cell."""
        grid = generate(3, 3, seed=7, algorithm=algorithm)

        assert not grid[1, 1]
        assert np.count_nonzero(~grid) == 1
        assert count_carved_edges(grid) == 0

    def test_wilson_single_cell_scenario(self):
        """Test generate(3, 3, 7, WILSON): zero carved edges, entrance equals exit."""
        grid = generate(3, 3, 7, MazeAlgorithm.WILSON)

        verification = verify_perfect_maze(grid)

        assert verification["passage_count"] == 0
        assert verification["total_cells"] == 1
        assert verification["entrance_open"] and verification["exit_open"]


class TestKruskalScenario:
    """Test the 2x2 lattice Kruskal scenario."""

    def test_kruskal_five_by_five(self):
        """Test generate(5, 5, 42, KRUSKAL) carves a 3-edge tree over 4 cells."""
        grid = generate(5, 5, 42, MazeAlgorithm.KRUSKAL)

        for cell in [(1, 1), (3, 1), (1, 3), (3, 3)]:
            assert not grid[cell]

        midpoints = [(2, 1), (1, 2), (3, 2), (2, 3)]
        assert sum(not grid[m] for m in midpoints) == 3
        assert count_carved_edges(grid) == 3

        np.testing.assert_array_equal(grid, generate(5, 5, 42, MazeAlgorithm.KRUSKAL))


class TestDimensionValidation:
    """Test rejection of malformed dimensions."""

    def test_even_width(self):
        """Test that even width raises InvalidDimensions."""
        with pytest.raises(InvalidDimensions):
            generate(10, 11, 1, MazeAlgorithm.BACKTRACKER)

    def test_even_height(self):
        """Test that even height raises InvalidDimensions."""
        with pytest.raises(InvalidDimensions):
            generate(11, 10, 1, MazeAlgorithm.BACKTRACKER)

    @pytest.mark.parametrize(("width", "height"), [(0, 5), (5, -1), (-7, -7)])
    def test_non_positive(self, algorithm, width, height):
        """Test that non-positive dimensions raise for every algorithm."""
        with pytest.raises(InvalidDimensions):
            generate(width, height, 1, algorithm)

    def test_invalid_dimensions_is_value_error(self):
        """Test that InvalidDimensions can be caught as ValueError."""
        with pytest.raises(ValueError):
            generate(4, 4)


class TestAlgorithmSelection:
    """Test algorithm parsing and the high-level entry points."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("kruskal", MazeAlgorithm.KRUSKAL),
            ("ALDOUS_BRODER", MazeAlgorithm.ALDOUS_BRODER),
            ("aldous-broder", MazeAlgorithm.ALDOUS_BRODER),
            (" Eller ", MazeAlgorithm.ELLER),
            (MazeAlgorithm.PRIM, MazeAlgorithm.PRIM),
        ],
    )
    def test_parse(self, name, expected):
        """Test that algorithms resolve from members, values and names."""
        assert MazeAlgorithm.parse(name) is expected

    def test_generate_accepts_string_algorithm(self):
        """Test that generate resolves algorithm names."""
        by_name = generate(15, 15, seed=3, algorithm="wilson")
        by_member = generate(15, 15, seed=3, algorithm=MazeAlgorithm.WILSON)

        np.testing.assert_array_equal(by_name, by_member)

    def test_generate_invalid_algorithm(self):
        """Test that invalid algorithm raises error."""
        with pytest.raises(ValueError, match="Unknown maze algorithm"):
            generate(11, 11, algorithm="invalid_algorithm")

    def test_default_algorithm_is_backtracker(self):
        """Test that the default algorithm is the backtracker."""
        default = generate(15, 15, 9)
        backtracker = generate(15, 15, 9, MazeAlgorithm.BACKTRACKER)

        np.testing.assert_array_equal(default, backtracker)

    def test_generate_from_config(self):
        """Test generation from a MazeConfig."""
        config = MazeConfig(width=13, height=9, seed=21, algorithm="prim")

        np.testing.assert_array_equal(generate_from_config(config), generate(13, 9, 21, MazeAlgorithm.PRIM))


class TestMazeAlgorithmComparison:
    """Test differences between maze generation algorithms."""

    def test_algorithms_produce_different_mazes(self):
        """Test that different algorithms produce different mazes (with same seed)."""
        mazes = [generate(41, 41, seed=42, algorithm=algorithm) for algorithm in MazeAlgorithm]

        for i in range(len(mazes)):
            for j in range(i + 1, len(mazes)):
                assert not np.array_equal(mazes[i], mazes[j])

    def test_different_seeds_produce_different_mazes(self, algorithm):
        """Test that two seeds give two different mazes."""
        assert not np.array_equal(
            generate(41, 41, seed=1, algorithm=algorithm),
            generate(41, 41, seed=2, algorithm=algorithm),
        )

    def test_generation_does_not_touch_global_random_state(self):
        """Test that seeded generation leaves the module-level random state alone."""
        import random

        random.seed(123)
        expected = random.random()

        random.seed(123)
        generate(21, 21, seed=5, algorithm=MazeAlgorithm.WILSON)
        assert random.random() == expected

    def test_concurrent_generation_is_reproducible(self, algorithm):
        """Test that seeded calls running in parallel threads give identical grids."""
        import threading

        results = [None] * 8

        def worker(index):
            results[index] = generate(31, 31, seed=77, algorithm=algorithm)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(len(results))]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        expected = generate(31, 31, seed=77, algorithm=algorithm)
        for grid in results:
            np.testing.assert_array_equal(grid, expected)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
