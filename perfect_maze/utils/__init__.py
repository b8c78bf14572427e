"""Utility modules for perfect_maze."""

from __future__ import annotations

from .maze_logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
