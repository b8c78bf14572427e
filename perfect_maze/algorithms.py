"""
Perfect maze generation algorithms.

Every function here takes an all-walls grid (see ``perfect_maze.grid``) and
a call-scoped ``random.Random`` and carves a spanning tree over the cell
lattice in place. The algorithms share nothing except the grid primitives.

All algorithms produce perfect mazes:
1. Fully Connected: a path exists between any two cells
2. No Loops: exactly ``cols * rows - 1`` carved edges

Implemented Algorithms:
- Recursive Backtracking (DFS): long winding corridors
- Prim's: frontier growth, many short dead ends
- Kruskal's: shuffled edges joined through union-find
- Aldous-Broder: uniform spanning tree, slow cover time
- Wilson's: uniform spanning tree via loop-erased random walks
- Eller's: row-by-row generation, O(cols) bookkeeping

Reference: Jamis Buck, "Mazes for Programmers" (2015)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from perfect_maze.disjoint_set import DisjointSet
from perfect_maze.grid import (
    Cell,
    carve,
    cell_at,
    cell_id,
    grid_lattice_shape,
    lattice_neighbors,
    open_cell,
)

if TYPE_CHECKING:
    import random

    from numpy.typing import NDArray


def _random_cell(cols: int, rows: int, rng: random.Random) -> Cell:
    return cell_at(rng.randrange(cols), rng.randrange(rows))


def backtracker(grid: NDArray[np.bool_], rng: random.Random) -> None:
    """
    Recursive Backtracking (randomized depth-first search).

    Algorithm:
    1. Open the entrance cell and push it on an explicit stack
    2. While the stack is not empty:
       - Collect neighbors of the top cell that are still walls
       - If any, carve to a random one and push it
       - Otherwise pop (backtrack)

    Characteristics:
    - O(n) where n = number of cells
    - Biased toward long corridors, few dead ends
    - Explicit stack, so no recursion limit on large mazes
    """
    cols, rows = grid_lattice_shape(grid)
    if cols == 0 or rows == 0:
        return

    start = cell_at(0, 0)
    open_cell(grid, start)
    stack = [start]

    while stack:
        current = stack[-1]
        candidates = [n for n in lattice_neighbors(current, cols, rows) if grid[n]]

        if candidates:
            neighbor = rng.choice(candidates)
            carve(grid, current, neighbor)
            stack.append(neighbor)
        else:
            stack.pop()


def prim(grid: NDArray[np.bool_], rng: random.Random) -> None:
    """
    Randomized Prim's algorithm (frontier growth).

    Algorithm:
    1. Mark a random cell in-maze, its neighbors become the frontier
    2. While the frontier is not empty:
       - Remove a random frontier cell
       - Carve to a random in-maze neighbor of it
       - Mark it in-maze, add its new neighbors to the frontier

    Frontier membership is tracked in a marker grid, so adding a cell
    never scans the frontier list.

    Characteristics:
    - Radial texture, many short dead ends
    - Low exploration difficulty compared to backtracking
    """
    cols, rows = grid_lattice_shape(grid)
    if cols == 0 or rows == 0:
        return

    in_maze = np.zeros(grid.shape, dtype=bool)
    in_frontier = np.zeros(grid.shape, dtype=bool)

    start = _random_cell(cols, rows, rng)
    open_cell(grid, start)
    in_maze[start] = True

    frontier: list[Cell] = []
    for neighbor in lattice_neighbors(start, cols, rows):
        frontier.append(neighbor)
        in_frontier[neighbor] = True

    while frontier:
        # Swap-remove keeps removal O(1); order inside the frontier is irrelevant
        index = rng.randrange(len(frontier))
        frontier[index], frontier[-1] = frontier[-1], frontier[index]
        cell = frontier.pop()
        in_frontier[cell] = False

        neighbors = lattice_neighbors(cell, cols, rows)
        attached = [n for n in neighbors if in_maze[n]]
        carve(grid, rng.choice(attached), cell)
        in_maze[cell] = True

        for neighbor in neighbors:
            if not in_maze[neighbor] and not in_frontier[neighbor]:
                frontier.append(neighbor)
                in_frontier[neighbor] = True


def kruskal(grid: NDArray[np.bool_], rng: random.Random) -> None:
    """
    Randomized Kruskal's algorithm.

    Algorithm:
    1. List every east and south edge of the lattice once
    2. Shuffle the edge list
    3. For each edge, carve it if its endpoints are in different sets
       and union the sets; otherwise skip it (it would close a loop)

    Characteristics:
    - Single pass over all edges
    - Near-linear with path compression and union by rank
    - Many short dead ends, little directional bias
    """
    cols, rows = grid_lattice_shape(grid)
    if cols == 0 or rows == 0:
        return

    edges: list[tuple[Cell, Cell]] = []
    for row in range(rows):
        for col in range(cols):
            cell = cell_at(col, row)
            if col + 1 < cols:
                edges.append((cell, cell_at(col + 1, row)))
            if row + 1 < rows:
                edges.append((cell, cell_at(col, row + 1)))

    rng.shuffle(edges)

    sets = DisjointSet(cols * rows)
    for a, b in edges:
        if sets.union(cell_id(a, cols), cell_id(b, cols)):
            carve(grid, a, b)


def aldous_broder(grid: NDArray[np.bool_], rng: random.Random) -> None:
    """
    Aldous-Broder algorithm (unbiased random walk).

    Algorithm:
    1. Mark a random cell visited
    2. Step to a uniformly random neighbor
       - If it was unvisited, carve the edge and mark it visited
       - Move there either way
    3. Stop once every cell is visited

    Characteristics:
    - Uniform spanning tree: every maze equally likely
    - Expected runtime is the cover time of the grid graph, which
      grows faster than the cell count; there is no step bound
    """
    cols, rows = grid_lattice_shape(grid)
    total = cols * rows
    if total == 0:
        return

    visited = np.zeros(grid.shape, dtype=bool)
    current = _random_cell(cols, rows, rng)
    open_cell(grid, current)
    visited[current] = True
    visited_count = 1

    while visited_count < total:
        neighbor = rng.choice(lattice_neighbors(current, cols, rows))
        if not visited[neighbor]:
            carve(grid, current, neighbor)
            visited[neighbor] = True
            visited_count += 1
        current = neighbor


def wilson(grid: NDArray[np.bool_], rng: random.Random) -> None:
    """
    Wilson's algorithm using loop-erased random walks.

    Produces uniform spanning trees like Aldous-Broder, but each walk only
    has to reach the growing tree instead of covering the whole lattice.

    Algorithm:
    1. Add one random cell to the tree
    2. While cells remain outside the tree:
       - Start a walk at a random cell outside the tree
       - Walk randomly; when the walk hits its own path, erase the loop
       - When the walk hits the tree, carve the loop-erased path into it

    The walk path is a list paired with a dict from cell id to list index.
    Loop erasure truncates both together.
    """
    cols, rows = grid_lattice_shape(grid)
    total = cols * rows
    if total == 0:
        return

    in_tree = np.zeros(grid.shape, dtype=bool)
    seed_cell = _random_cell(cols, rows, rng)
    open_cell(grid, seed_cell)
    in_tree[seed_cell] = True
    tree_size = 1

    while tree_size < total:
        start = _random_cell(cols, rows, rng)
        while in_tree[start]:
            start = _random_cell(cols, rows, rng)

        path = [start]
        index_by_id = {cell_id(start, cols): 0}
        current = start

        while not in_tree[current]:
            neighbor = rng.choice(lattice_neighbors(current, cols, rows))
            neighbor_id = cell_id(neighbor, cols)
            existing = index_by_id.get(neighbor_id)

            if existing is not None:
                for erased in path[existing + 1 :]:
                    del index_by_id[cell_id(erased, cols)]
                del path[existing + 1 :]
            else:
                index_by_id[neighbor_id] = len(path)
                path.append(neighbor)

            current = path[-1]

        for a, b in zip(path, path[1:]):
            carve(grid, a, b)
            if not in_tree[a]:
                in_tree[a] = True
                tree_size += 1


def eller(grid: NDArray[np.bool_], rng: random.Random) -> None:
    """
    Eller's algorithm for row-by-row maze generation.

    Only the set identifiers of the current and the next row are kept.

    Algorithm:
    1. Give every cell of the first row its own set
    2. For each row:
       - Randomly join adjacent cells of different sets (merge sets);
         on the last row join every differing pair
       - Unless last row: every set carves at least one passage down;
         cells below a passage inherit the set, the rest get new sets

    Vertical carves need no cycle check: each cell of the next row is
    reached by at most one vertical passage, and horizontal joins only
    ever connect different sets.

    Reference: Eller (1982), "An Efficient Method for Generating Mazes"
    """
    cols, rows = grid_lattice_shape(grid)
    if cols == 0 or rows == 0:
        return

    row_sets = list(range(1, cols + 1))
    next_set_id = cols + 1

    for row in range(rows):
        last_row = row == rows - 1

        for col in range(cols):
            open_cell(grid, cell_at(col, row))

        for col in range(cols - 1):
            if row_sets[col] != row_sets[col + 1] and (last_row or rng.random() < 0.5):
                carve(grid, cell_at(col, row), cell_at(col + 1, row))
                absorbed = row_sets[col + 1]
                survivor = row_sets[col]
                row_sets = [survivor if s == absorbed else s for s in row_sets]

        if last_row:
            break

        members_by_set: dict[int, list[int]] = {}
        for col, set_id in enumerate(row_sets):
            members_by_set.setdefault(set_id, []).append(col)

        carved_down = [False] * cols
        for members in members_by_set.values():
            count_down = 1 + rng.randrange(len(members))
            rng.shuffle(members)
            for i, col in enumerate(members):
                if i < count_down or rng.random() < 0.5:
                    carve(grid, cell_at(col, row), cell_at(col, row + 1))
                    carved_down[col] = True

        next_row_sets = []
        for col in range(cols):
            if carved_down[col]:
                next_row_sets.append(row_sets[col])
            else:
                next_row_sets.append(next_set_id)
                next_set_id += 1
        row_sets = next_row_sets
