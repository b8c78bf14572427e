"""
Perfect maze generation entry point.

Dispatches one of six interchangeable algorithms over a freshly allocated
all-walls grid and forces the entrance and exit cells open.

Examples:
    >>> from perfect_maze import MazeAlgorithm, generate
    >>> grid = generate(21, 21, seed=42, algorithm=MazeAlgorithm.WILSON)
    >>> grid.shape
    (21, 21)
    >>> bool(grid[1, 1]), bool(grid[19, 19])
    (False, False)
"""

from __future__ import annotations

import random
from enum import Enum
from typing import TYPE_CHECKING, Callable

from perfect_maze import algorithms
from perfect_maze.grid import allocate, entrance, exit_cell, lattice_shape, open_cell, validate_dimensions
from perfect_maze.utils.maze_logging import get_logger, log_generation

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import NDArray

    from perfect_maze.config import MazeConfig

logger = get_logger(__name__)


class MazeAlgorithm(Enum):
    """Available perfect maze generation algorithms."""

    BACKTRACKER = "backtracker"
    PRIM = "prim"
    KRUSKAL = "kruskal"
    ALDOUS_BRODER = "aldous_broder"
    WILSON = "wilson"
    ELLER = "eller"

    @classmethod
    def parse(cls, value: MazeAlgorithm | str) -> MazeAlgorithm:
        """
        Resolve an algorithm from a member, its value or its name.

        Raises:
            ValueError: If ``value`` names no algorithm
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", "_")
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown maze algorithm: {value!r} (expected one of: {valid})")


_GENERATORS: dict[MazeAlgorithm, Callable[[NDArray[np.bool_], random.Random], None]] = {
    MazeAlgorithm.BACKTRACKER: algorithms.backtracker,
    MazeAlgorithm.PRIM: algorithms.prim,
    MazeAlgorithm.KRUSKAL: algorithms.kruskal,
    MazeAlgorithm.ALDOUS_BRODER: algorithms.aldous_broder,
    MazeAlgorithm.WILSON: algorithms.wilson,
    MazeAlgorithm.ELLER: algorithms.eller,
}


def make_rng(seed: int | None) -> random.Random:
    """Call-scoped generator: seeded when ``seed`` is non-zero, fresh entropy otherwise."""
    if seed:
        return random.Random(seed)
    return random.Random()


def generate(
    width: int,
    height: int,
    seed: int | None = 0,
    algorithm: MazeAlgorithm | str = MazeAlgorithm.BACKTRACKER,
) -> NDArray[np.bool_]:
    """
    Generate a perfect maze.

    Args:
        width: Grid width, odd and >= 1
        height: Grid height, odd and >= 1
        seed: Non-zero for reproducible output; 0 or None draws fresh entropy
        algorithm: Algorithm member, or its name/value

    Returns:
        Boolean array of shape (width, height), ``True`` = wall, indexed
        ``grid[x, y]``. Entrance (1, 1) and exit (width-2, height-2) are open.

    Raises:
        InvalidDimensions: If width or height is even or non-positive
        ValueError: If the algorithm is unknown
    """
    validate_dimensions(width, height)
    algorithm = MazeAlgorithm.parse(algorithm)

    grid = allocate(width, height)
    cols, rows = lattice_shape(width, height)
    if cols == 0 or rows == 0:
        logger.debug(f"Degenerate {width}x{height} lattice, returning all walls")
        return grid

    _GENERATORS[algorithm](grid, make_rng(seed))

    open_cell(grid, exit_cell(width, height))
    open_cell(grid, entrance(width, height))

    log_generation(logger, algorithm.value, width, height, seed, {"cells": cols * rows})
    return grid


def generate_from_config(config: MazeConfig) -> NDArray[np.bool_]:
    """Generate a maze from a validated ``MazeConfig``."""
    return generate(config.width, config.height, seed=config.seed, algorithm=config.algorithm)
