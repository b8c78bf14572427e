"""
Command-line interface for perfect_maze.

Generates, verifies and exports perfect mazes.
"""

import sys

import click

from perfect_maze import __version__
from perfect_maze.config import MazeConfig
from perfect_maze.exceptions import MazeError
from perfect_maze.export import load_maze, save_maze, to_ascii
from perfect_maze.levels import level_config
from perfect_maze.maze_generator import MazeAlgorithm, generate_from_config
from perfect_maze.utils.maze_logging import LoggedOperation, configure_logging, get_logger
from perfect_maze.verification import verify_perfect_maze

ALGORITHM_NAMES = [algorithm.value for algorithm in MazeAlgorithm]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

logger = get_logger("perfect_maze.cli")


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _print_verification(report: dict) -> None:
    status = "PERFECT" if report["is_perfect"] else "NOT PERFECT"
    click.echo(f"Verification: {status}")
    click.echo(f"  Cells reachable: {report['visited_cells']}/{report['total_cells']}")
    click.echo(f"  Carved edges:    {report['passage_count']} (expected {report['expected_passages']})")
    click.echo(f"  Entrance open:   {report['entrance_open']}")
    click.echo(f"  Exit open:       {report['exit_open']}")
    click.echo(f"  Outer wall:      {'closed' if report['boundary_closed'] else 'broken'}")


def _emit(config: MazeConfig, output, verify: bool) -> None:
    """Generate from ``config`` and print or save the result."""
    with LoggedOperation(logger, f"{config.algorithm.value} {config.width}x{config.height}"):
        grid = generate_from_config(config)

    if output:
        path = save_maze(grid, output)
        click.echo(f"Saved {config.width}x{config.height} maze to: {path}")
    else:
        click.echo(to_ascii(grid))

    if verify:
        report = verify_perfect_maze(grid)
        _print_verification(report)
        if not report["is_perfect"]:
            sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="perfect-maze")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level",
)
def main(log_level):
    """
    perfect-maze: perfect maze generator

    Carves spanning-tree mazes into odd-sized wall grids with one of six
    algorithms.
    """
    configure_logging(level=log_level.upper())


@main.command(name="generate")
@click.option("--width", "-W", type=int, default=None, help="Grid width (odd)  [default: 21]")
@click.option("--height", "-H", type=int, default=None, help="Grid height (odd)  [default: 21]")
@click.option("--seed", "-s", type=int, default=None, help="Random seed, 0 for non-deterministic  [default: 0]")
@click.option(
    "--algorithm",
    "-a",
    type=click.Choice(ALGORITHM_NAMES, case_sensitive=False),
    default=None,
    help="Generation algorithm  [default: backtracker]",
)
@click.option("--config", "-c", "config_path", type=click.Path(), default=None, help="JSON/YAML config file")
@click.option("--output", "-o", type=click.Path(), default=None, help="Output file (.npy, .json, .txt)")
@click.option("--verify", is_flag=True, help="Verify the maze is perfect and print a summary")
def generate_command(width, height, seed, algorithm, config_path, output, verify):
    """
    Generate a maze and print it or save it.

    Command-line options override values from --config.

    Examples:
        perfect-maze generate -W 31 -H 21 -a wilson -s 42
        perfect-maze generate -c maze.yaml -o maze.npy --verify
    """
    try:
        config = MazeConfig.from_file(config_path) if config_path else MazeConfig()
        overrides = {
            key: value
            for key, value in {"width": width, "height": height, "seed": seed, "algorithm": algorithm}.items()
            if value is not None
        }
        if overrides:
            config = MazeConfig(**{**config.to_dict(), **overrides})
        _emit(config, output, verify)
    except (MazeError, ValueError, OSError) as e:
        _fail(str(e))


@main.command()
@click.argument("path", type=click.Path())
def verify(path):
    """
    Verify a saved maze file is a perfect maze.

    Exits with status 1 when it is not.
    """
    try:
        grid = load_maze(path)
        report = verify_perfect_maze(grid)
    except (ValueError, OSError) as e:
        _fail(str(e))

    width, height = grid.shape
    click.echo(f"Maze: {path} ({width}x{height})")
    _print_verification(report)
    if not report["is_perfect"]:
        sys.exit(1)


@main.command()
def algorithms():
    """List available generation algorithms."""
    for algorithm in MazeAlgorithm:
        click.echo(algorithm.value)


@main.command()
@click.argument("number", type=int)
@click.option("--seed", "-s", type=int, default=0, show_default=True, help="Random seed, 0 for non-deterministic")
@click.option("--output", "-o", type=click.Path(), default=None, help="Output file (.npy, .json, .txt)")
def level(number, seed, output):
    """Generate the maze for level NUMBER (size grows, algorithm rotates)."""
    try:
        config = level_config(number, seed=seed)
    except ValueError as e:
        _fail(str(e))

    click.echo(f"Level {number}: {config.width}x{config.height}, algorithm: {config.algorithm.value}")
    try:
        _emit(config, output, verify=False)
    except (MazeError, ValueError, OSError) as e:
        _fail(str(e))


if __name__ == "__main__":
    main()
