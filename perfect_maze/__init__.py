"""
perfect_maze: perfect maze generation on odd-sized boolean grids.

Six interchangeable algorithms (backtracker, Prim, Kruskal, Aldous-Broder,
Wilson, Eller) carve a spanning tree of passages into an all-walls grid.

Examples:
    >>> from perfect_maze import generate, verify_perfect_maze
    >>> grid = generate(21, 21, seed=42, algorithm="kruskal")
    >>> verify_perfect_maze(grid)["is_perfect"]
    True
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("perfect-maze")
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-dev"

from .config import MazeConfig, load_config_file, save_config_file  # noqa: E402
from .exceptions import InvalidDimensions, MazeError  # noqa: E402
from .export import load_maze, save_maze, to_ascii, to_numpy_array  # noqa: E402
from .grid import allocate, carve, entrance, exit_cell, lattice_neighbors, lattice_shape  # noqa: E402
from .levels import level_algorithm, level_config, level_dimensions  # noqa: E402
from .maze_generator import MazeAlgorithm, generate, generate_from_config  # noqa: E402
from .verification import count_carved_edges, verify_perfect_maze  # noqa: E402

__all__ = [
    "InvalidDimensions",
    "MazeAlgorithm",
    "MazeConfig",
    "MazeError",
    "__version__",
    "allocate",
    "carve",
    "count_carved_edges",
    "entrance",
    "exit_cell",
    "generate",
    "generate_from_config",
    "lattice_neighbors",
    "lattice_shape",
    "level_algorithm",
    "level_config",
    "level_dimensions",
    "load_config_file",
    "load_maze",
    "save_config_file",
    "save_maze",
    "to_ascii",
    "to_numpy_array",
    "verify_perfect_maze",
]
