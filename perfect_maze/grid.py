"""
Grid model shared by all maze generation algorithms.

A maze grid is a boolean numpy array of shape ``(width, height)`` indexed as
``grid[x, y]`` where ``True`` is wall and ``False`` is passage. Both
dimensions are odd. Logical maze rooms ("lattice cells") sit at coordinates
where both ``x`` and ``y`` are odd; every other coordinate is either wall or
the carved midpoint between two adjacent cells:

    # # # # #
    # c . c #      c = cell (odd, odd)
    # . # . #      . = midpoint between two cells
    # c . c #      # = wall post (even, even) / outer ring
    # # # # #

The lattice has ``cols = (width - 1) // 2`` columns and
``rows = (height - 1) // 2`` rows. Cell ``(col, row)`` lives at grid
coordinate ``(2 * col + 1, 2 * row + 1)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from perfect_maze.exceptions import InvalidDimensions

if TYPE_CHECKING:
    from numpy.typing import NDArray

Cell = tuple[int, int]

# West, east, north, south in grid units
_STEPS: tuple[Cell, ...] = ((-2, 0), (2, 0), (0, -2), (0, 2))


def validate_dimensions(width: int, height: int) -> None:
    """
    Check that width and height are positive odd integers.

    Raises:
        InvalidDimensions: If either dimension is not an int, is even, or is < 1
    """
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidDimensions(width, height)
        if value < 1 or value % 2 == 0:
            raise InvalidDimensions(width, height)


def allocate(width: int, height: int) -> NDArray[np.bool_]:
    """
    Allocate an all-walls grid.

    Args:
        width: Grid width (odd, >= 1)
        height: Grid height (odd, >= 1)

    Returns:
        Boolean array of shape (width, height) filled with True

    Raises:
        InvalidDimensions: If either dimension is even or less than 1
    """
    validate_dimensions(width, height)
    return np.ones((int(width), int(height)), dtype=bool)


def lattice_shape(width: int, height: int) -> tuple[int, int]:
    """Return ``(cols, rows)`` of the cell lattice for a grid size."""
    return (width - 1) // 2, (height - 1) // 2


def grid_lattice_shape(grid: NDArray[np.bool_]) -> tuple[int, int]:
    """Return ``(cols, rows)`` of the cell lattice for an allocated grid."""
    width, height = grid.shape
    return lattice_shape(width, height)


def cell_at(col: int, row: int) -> Cell:
    """Map a lattice address to grid coordinates."""
    return 2 * col + 1, 2 * row + 1


def lattice_address(cell: Cell) -> tuple[int, int]:
    """Map grid coordinates of a cell back to its ``(col, row)`` lattice address."""
    x, y = cell
    return (x - 1) // 2, (y - 1) // 2


def cell_id(cell: Cell, cols: int) -> int:
    """Stable integer identifier of a cell: ``row * cols + col``."""
    col, row = lattice_address(cell)
    return row * cols + col


def is_lattice_cell(cell: Cell, cols: int, rows: int) -> bool:
    """True if ``cell`` is an interior cell coordinate of the lattice."""
    x, y = cell
    return x % 2 == 1 and y % 2 == 1 and 0 < x < 2 * cols and 0 < y < 2 * rows


def lattice_cells(cols: int, rows: int) -> list[Cell]:
    """All lattice cells in row-major order."""
    return [cell_at(col, row) for row in range(rows) for col in range(cols)]


def lattice_neighbors(cell: Cell, cols: int, rows: int) -> list[Cell]:
    """
    Lattice cells adjacent to ``cell``.

    Returns up to four cells (west, east, north, south order) that lie
    strictly inside the lattice, never on the outer boundary ring.
    """
    x, y = cell
    max_x = 2 * cols - 1
    max_y = 2 * rows - 1
    neighbors = []
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if 1 <= nx <= max_x and 1 <= ny <= max_y:
            neighbors.append((nx, ny))
    return neighbors


def are_adjacent(a: Cell, b: Cell) -> bool:
    """True if two cells differ by exactly one lattice step along one axis."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return (dx == 2 and dy == 0) or (dx == 0 and dy == 2)


def midpoint(a: Cell, b: Cell) -> Cell:
    """Grid coordinate of the wall between two adjacent cells."""
    return (a[0] + b[0]) // 2, (a[1] + b[1]) // 2


def carve(grid: NDArray[np.bool_], a: Cell, b: Cell) -> None:
    """
    Open the passage between two adjacent cells.

    Sets both cell coordinates and their midpoint to passage. Carving an
    already-open edge is a no-op.

    Raises:
        ValueError: If ``a`` and ``b`` are not lattice-adjacent
    """
    if not are_adjacent(a, b):
        raise ValueError(f"Cells {a} and {b} are not lattice-adjacent")
    grid[a] = False
    grid[midpoint(a, b)] = False
    grid[b] = False


def open_cell(grid: NDArray[np.bool_], cell: Cell) -> None:
    """Mark a single grid coordinate as passage."""
    grid[cell] = False


def entrance(width: int, height: int) -> Cell:
    """Entrance cell of a ``width`` x ``height`` maze."""
    return 1, 1


def exit_cell(width: int, height: int) -> Cell:
    """Exit cell of a ``width`` x ``height`` maze."""
    return width - 2, height - 2
