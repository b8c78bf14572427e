"""
Pytest configuration and shared fixtures for the perfect_maze test suite.
"""

import pytest

from perfect_maze import MazeAlgorithm, generate
from perfect_maze.utils.maze_logging import configure_logging

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test paths and names."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


# =============================================================================
# Maze Fixtures
# =============================================================================


ALL_ALGORITHMS = list(MazeAlgorithm)


@pytest.fixture(params=ALL_ALGORITHMS, ids=lambda algorithm: algorithm.value)
def algorithm(request):
    """Parametrized fixture over all six generation algorithms."""
    return request.param


@pytest.fixture
def small_maze():
    """Reproducible 11x11 backtracker maze."""
    return generate(11, 11, seed=42, algorithm=MazeAlgorithm.BACKTRACKER)


@pytest.fixture
def medium_maze():
    """Reproducible 21x21 Kruskal maze."""
    return generate(21, 21, seed=42, algorithm=MazeAlgorithm.KRUSKAL)


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore default logging configuration after each test."""
    yield
    configure_logging(level="INFO")
