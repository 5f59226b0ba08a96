"""
Pytest configuration and shared fixtures for the mazegen test suite.

This module provides common fixtures, test configuration, and utilities
used across the entire test suite.
"""

import random

import pytest

from mazegen.geometry import MazeGrid
from mazegen.mazes import MazeAlgorithm, PerfectMazeGenerator

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
# Maze Fixtures
# =============================================================================


@pytest.fixture(params=list(MazeAlgorithm), ids=lambda alg: alg.value)
def algorithm(request):
    """Parametrized fixture over every generation algorithm."""
    return request.param


@pytest.fixture
def seeded_rng():
    """Deterministic random source for reproducible mazes."""
    return random.Random(42)


@pytest.fixture
def small_maze(algorithm, seeded_rng):
    """6x4 maze generated with each algorithm."""
    return PerfectMazeGenerator(6, 4, algorithm, rng=seeded_rng).generate()


@pytest.fixture
def corridor_grid():
    """Hand-carved 2x2 maze forming a single corridor (0,1)-(0,0)-(1,0)-(1,1)."""
    grid = MazeGrid(2, 2)
    grid.remove_wall(0, 0, 1, 0)
    grid.remove_wall(0, 0, 0, 1)
    grid.remove_wall(1, 0, 1, 1)
    return grid


@pytest.fixture
def loop_grid():
    """Hand-carved 2x2 grid with every internal wall removed (one cycle)."""
    grid = MazeGrid(2, 2)
    grid.remove_wall(0, 0, 1, 0)
    grid.remove_wall(0, 0, 0, 1)
    grid.remove_wall(1, 0, 1, 1)
    grid.remove_wall(0, 1, 1, 1)
    return grid
