"""
Level progression for games built on the maze generator.

Level ``n`` is a square maze of ``4 + 2 * (n - 1)`` cells per side, and the
algorithm rotates through all six generators so consecutive levels have
visibly different textures.
"""

from __future__ import annotations

from perfect_maze.config import MazeConfig
from perfect_maze.maze_generator import MazeAlgorithm

LEVEL_ALGORITHM_ORDER: tuple[MazeAlgorithm, ...] = (
    MazeAlgorithm.BACKTRACKER,
    MazeAlgorithm.WILSON,
    MazeAlgorithm.KRUSKAL,
    MazeAlgorithm.PRIM,
    MazeAlgorithm.ALDOUS_BRODER,
    MazeAlgorithm.ELLER,
)

BASE_BLOCKS = 4
BLOCKS_PER_LEVEL = 2


def _check_level(level: int) -> None:
    if isinstance(level, bool) or not isinstance(level, int) or level < 1:
        raise ValueError(f"level must be an integer >= 1, got {level!r}")


def level_blocks(level: int) -> int:
    """Lattice cells per side for ``level``."""
    _check_level(level)
    return BASE_BLOCKS + BLOCKS_PER_LEVEL * (level - 1)


def level_dimensions(level: int) -> tuple[int, int]:
    """Grid ``(width, height)`` for ``level``; level 1 is 9x9."""
    side = 2 * level_blocks(level) + 1
    return side, side


def level_algorithm(level: int) -> MazeAlgorithm:
    """Algorithm used for ``level``."""
    _check_level(level)
    return LEVEL_ALGORITHM_ORDER[(level - 1) % len(LEVEL_ALGORITHM_ORDER)]


def level_config(level: int, seed: int = 0) -> MazeConfig:
    """Complete generation config for ``level``."""
    width, height = level_dimensions(level)
    return MazeConfig(width=width, height=height, seed=seed, algorithm=level_algorithm(level))
