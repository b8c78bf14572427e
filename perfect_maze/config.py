"""
Maze generation configuration.

``MazeConfig`` captures the four inputs of a generation call and validates
them with pydantic, so configs loaded from JSON or YAML files are rejected
before any maze is generated.

Examples:
    >>> config = MazeConfig(width=31, height=21, seed=7, algorithm="wilson")
    >>> config.algorithm
    <MazeAlgorithm.WILSON: 'wilson'>
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from perfect_maze.grid import validate_dimensions
from perfect_maze.maze_generator import MazeAlgorithm


class MazeConfig(BaseModel):
    """
    Configuration for a single maze generation.

    Attributes
    ----------
    width : int
        Grid width, odd and >= 1 (default: 21)
    height : int
        Grid height, odd and >= 1 (default: 21)
    seed : int
        Random seed; 0 draws fresh entropy (default: 0)
    algorithm : MazeAlgorithm
        Generation algorithm (default: BACKTRACKER)
    """

    width: int = Field(default=21, description="Grid width (odd, >= 1)")
    height: int = Field(default=21, description="Grid height (odd, >= 1)")
    seed: int = Field(default=0, description="Random seed, 0 for non-deterministic output")
    algorithm: MazeAlgorithm = Field(default=MazeAlgorithm.BACKTRACKER, description="Generation algorithm")

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("width", "height", mode="before")
    @classmethod
    def validate_odd_dimension(cls, v: Any) -> int:
        """Validate that a dimension is a positive odd integer (bools rejected)."""
        validate_dimensions(v, 1)
        return int(v)

    @field_validator("algorithm", mode="before")
    @classmethod
    def parse_algorithm(cls, v: Any) -> MazeAlgorithm:
        """Accept algorithm members, values or names."""
        return MazeAlgorithm.parse(v)

    @property
    def lattice_shape(self) -> tuple[int, int]:
        """``(cols, rows)`` of the cell lattice."""
        return (self.width - 1) // 2, (self.height - 1) // 2

    def to_dict(self) -> dict[str, Any]:
        """Plain dictionary suitable for JSON/YAML files."""
        return self.model_dump(mode="json")

    @classmethod
    def from_file(cls, path: str | Path) -> MazeConfig:
        """Load and validate a configuration file."""
        return cls(**load_config_file(path))


def load_config_file(config_path: str | Path) -> dict[str, Any]:
    """
    Load configuration from JSON or YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Dictionary with configuration parameters

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file format is unsupported or unreadable
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    suffix = config_path.suffix.lower()
    if suffix not in (".json", ".yaml", ".yml"):
        raise ValueError(f"Unsupported config file format: {suffix}")

    try:
        with open(config_path) as f:
            data = json.load(f) if suffix == ".json" else yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Error loading config file {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")
    return data


def save_config_file(config: MazeConfig | dict[str, Any], output_path: str | Path) -> None:
    """
    Save configuration to JSON or YAML file.

    Raises:
        ValueError: If the output file format is unsupported
    """
    output_path = Path(output_path)
    data = config.to_dict() if isinstance(config, MazeConfig) else dict(config)

    suffix = output_path.suffix.lower()
    if suffix not in (".json", ".yaml", ".yml"):
        raise ValueError(f"Unsupported config file format: {suffix}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        if suffix == ".json":
            json.dump(data, f, indent=2)
        else:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
