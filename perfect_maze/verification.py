"""
Perfect maze verification.

A perfect maze is a spanning tree over the cell lattice:
- Connectivity: every cell reachable from the entrance
- Acyclicity: exactly ``n - 1`` carved edges for ``n`` cells

Both together imply there is exactly one path between any two cells.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any

import numpy as np

from perfect_maze.grid import cell_at, grid_lattice_shape, lattice_cells, lattice_neighbors, midpoint

if TYPE_CHECKING:
    from numpy.typing import NDArray


def count_carved_edges(grid: NDArray[np.bool_]) -> int:
    """
    Count carved cell-to-cell edges.

    An edge counts as carved when its midpoint coordinate is passage.
    """
    cols, rows = grid_lattice_shape(grid)
    if cols <= 0 or rows <= 0:
        return 0
    # Midpoints of east edges sit at (even x, odd y), south edges at (odd x, even y)
    east = ~grid[2 : 2 * cols - 1 : 2, 1 : 2 * rows : 2]
    south = ~grid[1 : 2 * cols : 2, 2 : 2 * rows - 1 : 2]
    return int(east.sum() + south.sum())


def reachable_cells(grid: NDArray[np.bool_]) -> int:
    """Number of lattice cells reachable from the entrance through open passages."""
    cols, rows = grid_lattice_shape(grid)
    if cols <= 0 or rows <= 0:
        return 0

    start = cell_at(0, 0)
    if grid[start]:
        return 0

    seen = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbor in lattice_neighbors(current, cols, rows):
            if neighbor in seen or grid[neighbor] or grid[midpoint(current, neighbor)]:
                continue
            seen.add(neighbor)
            queue.append(neighbor)

    return len(seen)


def _boundary_closed(grid: NDArray[np.bool_]) -> bool:
    return bool(grid[0, :].all() and grid[-1, :].all() and grid[:, 0].all() and grid[:, -1].all())


def verify_perfect_maze(grid: NDArray[np.bool_]) -> dict[str, Any]:
    """
    Verify that a maze grid is perfect (fully connected, no loops).

    Args:
        grid: Boolean grid of shape (width, height), ``True`` = wall

    Returns:
        Dictionary with verification results including:
        - is_perfect: Overall validity
        - is_connected: Connectivity check
        - is_no_loops: Acyclicity check
        - visited_cells: Number of cells reachable from the entrance
        - total_cells: Total number of lattice cells
        - passage_count: Number of carved edges
        - expected_passages: Edge count of a spanning tree
        - entrance_open / exit_open: Entrance and exit are passage
        - boundary_closed: Outer wall ring is intact

    Raises:
        ValueError: If the grid is not a non-empty 2D array
    """
    grid = np.asarray(grid, dtype=bool)
    if grid.ndim != 2 or grid.size == 0:
        raise ValueError(f"Expected a non-empty 2D maze grid, got shape {grid.shape}")
    width, height = grid.shape
    cols, rows = grid_lattice_shape(grid)
    total_cells = cols * rows

    visited_cells = reachable_cells(grid)
    passage_count = count_carved_edges(grid)
    expected_passages = max(0, total_cells - 1)

    is_connected = visited_cells == total_cells
    is_no_loops = passage_count == expected_passages

    if total_cells == 0:
        entrance_open = exit_open = True
    else:
        entrance_open = not grid[1, 1]
        exit_open = not grid[width - 2, height - 2]

    boundary_closed = _boundary_closed(grid)

    return {
        "is_perfect": is_connected and is_no_loops and entrance_open and exit_open and boundary_closed,
        "is_connected": is_connected,
        "is_no_loops": is_no_loops,
        "visited_cells": visited_cells,
        "total_cells": total_cells,
        "passage_count": passage_count,
        "expected_passages": expected_passages,
        "entrance_open": bool(entrance_open),
        "exit_open": bool(exit_open),
        "boundary_closed": boundary_closed,
    }


def open_cells(grid: NDArray[np.bool_]) -> list[tuple[int, int]]:
    """Lattice cells that are passage."""
    cols, rows = grid_lattice_shape(grid)
    return [cell for cell in lattice_cells(cols, rows) if not grid[cell]]
