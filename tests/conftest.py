"""
Pytest configuration and shared fixtures for the mazeframe test suite.

This module provides common fixtures, test configuration, and utilities
used across the entire test suite.
"""

import random

import pytest

from mazeframe.config import FrameSettings, MazeConfig, MazeSettings
from mazeframe.core.grid import Grid, Position
from mazeframe.generation import MazeAlgorithm, kruskals
from mazeframe.postprocessing import place_entrance_exit

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (slower, cross-component)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)

        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


# =============================================================================
# Random Source Fixtures
# =============================================================================


@pytest.fixture
def rng():
    """Seeded random source for reproducible tests."""
    return random.Random(42)


@pytest.fixture(params=[0, 1, 7, 2024])
def seeded_rng(request):
    """Parametrized random source for property-style checks over several seeds."""
    return random.Random(request.param)


# =============================================================================
# Grid Fixtures
# =============================================================================


@pytest.fixture
def open_corridor():
    """1x4 grid with every interior wall cleared and entrance/exit at the ends."""
    grid = Grid(1, 4)
    for col in range(3):
        grid.clear_wall_between(Position(0, col), Position(0, col + 1))
    grid[Position(0, 0)].is_entrance = True
    grid[Position(0, 3)].is_exit = True
    return grid


@pytest.fixture
def single_path_grid():
    """
    3x3 maze with exactly one entrance-to-exit route (a serpentine).

    Entrance at (0, 0), exit at (2, 2)::

        E > > v
        v < < <
        > > > X
    """
    grid = Grid(3, 3)
    route = [
        Position(0, 0),
        Position(0, 1),
        Position(0, 2),
        Position(1, 2),
        Position(1, 1),
        Position(1, 0),
        Position(2, 0),
        Position(2, 1),
        Position(2, 2),
    ]
    for a, b in zip(route, route[1:]):
        grid.clear_wall_between(a, b)
    grid[route[0]].is_entrance = True
    grid[route[0]].west_wall = False
    grid[route[-1]].is_exit = True
    grid[route[-1]].east_wall = False
    return grid


@pytest.fixture
def small_maze(rng):
    """10x10 Kruskal's maze with west entrance and east exit."""
    grid = kruskals(10, 10, rng=rng)
    place_entrance_exit(grid, "west", "east", rng)
    return grid


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def square_config():
    """Small seeded square-frame request."""
    return MazeConfig(
        algorithm=MazeAlgorithm.KRUSKALS,
        frame=FrameSettings(rows=8, columns=8),
        seed=11,
    )


@pytest.fixture
def spanning_settings():
    """Settings under which every spanning-tree algorithm yields a perfect maze."""
    return MazeSettings(horizontal_bias=50, branching_probability=100, dead_end_density=100)
