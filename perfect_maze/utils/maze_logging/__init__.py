"""
Logging utilities for perfect_maze.

Usage:
    >>> from perfect_maze.utils.maze_logging import get_logger, configure_logging
    >>> logger = get_logger(__name__)
    >>> configure_logging(level="DEBUG")
    >>> logger.debug("Carving...")
"""

from __future__ import annotations

from .logger import (
    LoggedOperation,
    MazeFormatter,
    MazeLogger,
    configure_logging,
    get_logger,
    log_generation,
)

__all__ = [
    "LoggedOperation",
    "MazeFormatter",
    "MazeLogger",
    "configure_logging",
    "get_logger",
    "log_generation",
]
