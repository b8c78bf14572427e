"""
Conversion and persistence helpers for maze grids.

Grids are stored internally as ``grid[x, y]``. Exported image-style arrays
and text use row-major orientation (one row per ``y``).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

from perfect_maze.grid import entrance, exit_cell, grid_lattice_shape

if TYPE_CHECKING:
    from numpy.typing import NDArray

SUPPORTED_SUFFIXES = (".npy", ".json", ".txt")


def to_numpy_array(grid: NDArray[np.bool_]) -> NDArray[np.int32]:
    """
    Convert a grid to an image-oriented integer array.

    Returns:
        Array of shape (height, width) where 1 = wall, 0 = passage
    """
    return np.asarray(grid, dtype=bool).T.astype(np.int32)


def from_numpy_array(maze: NDArray) -> NDArray[np.bool_]:
    """Inverse of ``to_numpy_array``: (height, width) 1/0 array to ``grid[x, y]``."""
    return np.ascontiguousarray(np.asarray(maze).T != 0)


def to_ascii(
    grid: NDArray[np.bool_],
    wall: str = "#",
    passage: str = " ",
    mark_endpoints: bool = True,
) -> str:
    """
    Render a grid as text, one line per grid row.

    Args:
        grid: Boolean grid, ``True`` = wall
        wall: Character for walls
        passage: Character for passages
        mark_endpoints: Draw the entrance as ``S`` and the exit as ``E``

    Returns:
        Multi-line string without trailing newline
    """
    width, height = grid.shape
    chars = np.where(grid.T, wall, passage).astype(object)

    cols, rows = grid_lattice_shape(grid)
    if mark_endpoints and cols > 0 and rows > 0:
        ex, ey = exit_cell(width, height)
        sx, sy = entrance(width, height)
        chars[ey, ex] = "E"
        chars[sy, sx] = "S"

    return "\n".join("".join(row) for row in chars)


def from_ascii(text: str, wall: str = "#") -> NDArray[np.bool_]:
    """
    Parse a grid rendered by ``to_ascii``.

    Any character other than ``wall`` is read as passage.

    Raises:
        ValueError: If the text is empty or its lines differ in length
    """
    lines = [line for line in text.splitlines() if line]
    if not lines:
        raise ValueError("Cannot parse an empty maze")
    width = len(lines[0])
    if any(len(line) != width for line in lines):
        raise ValueError("All maze lines must have the same length")
    rows = [[char == wall for char in line] for line in lines]
    return np.ascontiguousarray(np.array(rows, dtype=bool).T)


def save_maze(grid: NDArray[np.bool_], path: str | Path) -> Path:
    """
    Save a grid to ``.npy``, ``.json`` or ``.txt``.

    Returns:
        The path written

    Raises:
        ValueError: If the file suffix is unsupported
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported maze file format: {suffix} (expected one of {', '.join(SUPPORTED_SUFFIXES)})")

    path.parent.mkdir(parents=True, exist_ok=True)
    grid = np.asarray(grid, dtype=bool)

    if suffix == ".npy":
        np.save(path, grid)
    elif suffix == ".json":
        width, height = grid.shape
        payload = {
            "width": int(width),
            "height": int(height),
            "cells": to_numpy_array(grid).tolist(),
        }
        with open(path, "w") as f:
            json.dump(payload, f)
    else:
        path.write_text(to_ascii(grid, mark_endpoints=False) + "\n")

    return path


def load_maze(path: str | Path) -> NDArray[np.bool_]:
    """
    Load a grid saved by ``save_maze``.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file suffix is unsupported or the content is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Maze file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".npy":
        grid = _checked_grid(np.load(path), path)
        return grid.astype(bool)
    if suffix == ".json":
        with open(path) as f:
            payload = json.load(f)
        try:
            cells, width, height = payload["cells"], payload["width"], payload["height"]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Maze file {path} must contain 'width', 'height' and 'cells'") from e
        grid = from_numpy_array(_checked_grid(np.array(cells, dtype=np.int32), path))
        if grid.shape != (width, height):
            raise ValueError(f"Maze size in {path} does not match its cells")
        return grid
    if suffix == ".txt":
        return from_ascii(path.read_text())

    raise ValueError(f"Unsupported maze file format: {suffix} (expected one of {', '.join(SUPPORTED_SUFFIXES)})")


def _checked_grid(array: np.ndarray, path: Path) -> np.ndarray:
    if array.ndim != 2 or array.size == 0:
        raise ValueError(f"Expected a non-empty 2D maze array in {path}, got shape {array.shape}")
    return array
