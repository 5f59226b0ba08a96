"""
Perfect Maze Generation

Implements three classic randomized algorithms that carve a fully walled
rectangular grid into a perfect maze:
- Kruskal: shuffled internal edges joined through a union-find forest
- Prim: random-order expansion of a frontier of visited cells
- DFS: iterative randomized depth-first backtracker

Perfect mazes are spanning trees on the grid graph:
- Connectivity: every cell reachable from every other cell
- Acyclicity: |V| cells joined by exactly |V|-1 passages

Randomness comes from an injectable ``random.Random``, so a fixed seed
reproduces the same maze.
"""

from __future__ import annotations

import random
from collections import deque
from enum import Enum
from typing import Any

from mazegen.geometry.grid import Direction, MazeGrid
from mazegen.geometry.union_find import UnionFind
from mazegen.utils.exceptions import ConfigurationError, MazeGenerationError
from mazegen.utils.maze_logging import get_logger

logger = get_logger(__name__)


class MazeAlgorithm(Enum):
    """Available perfect maze generation algorithms."""

    KRUSKAL = "kruskal"
    PRIM = "prim"
    DFS = "dfs"

    @classmethod
    def from_name(cls, name: str | MazeAlgorithm) -> MazeAlgorithm:
        """Look up an algorithm by its (case-insensitive) name."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise ConfigurationError(
                parameter_name="algorithm",
                provided_value=name,
                valid_values=[alg.value for alg in cls],
                component="PerfectMazeGenerator",
            ) from None


class PerfectMazeGenerator:
    """
    Perfect maze generator using classic algorithms.

    Each generate() call carves a fresh MazeGrid; the generator is the only
    code that removes its walls.
    """

    def __init__(
        self,
        width: int,
        height: int,
        algorithm: MazeAlgorithm | str = MazeAlgorithm.DFS,
        rng: random.Random | None = None,
    ):
        """
        Initialize maze generator.

        Args:
            width: Number of columns in maze
            height: Number of rows in maze
            algorithm: Algorithm (or algorithm name) to use for generation
            rng: Random source; a new unseeded ``random.Random`` by default
        """
        self.algorithm = MazeAlgorithm.from_name(algorithm)
        self.grid = MazeGrid(width, height)
        self.width = self.grid.width
        self.height = self.grid.height
        self.rng = rng if rng is not None else random.Random()

    def generate(self, seed: int | None = None) -> MazeGrid:
        """
        Carve the grid into a perfect maze.

        Args:
            seed: Reseeds the random source for reproducibility

        Returns:
            The generated maze grid
        """
        if seed is not None:
            self.rng.seed(seed)

        self.grid = MazeGrid(self.width, self.height)
        logger.debug(f"Generating {self.width}x{self.height} maze with {self.algorithm.value}")

        if self.algorithm == MazeAlgorithm.KRUSKAL:
            self._kruskal()
        elif self.algorithm == MazeAlgorithm.PRIM:
            self._prim()
        elif self.algorithm == MazeAlgorithm.DFS:
            self._dfs()

        logger.debug(f"Removed {self.grid.removed_wall_count()} walls")
        return self.grid

    def _kruskal(self):
        """
        Randomized Kruskal's algorithm.

        Every internal edge (east and south neighbour of each cell) is listed
        once and shuffled. An edge is carved when its endpoints are still in
        different sets, which can never close a loop.
        """
        grid = self.grid
        edges = []
        for y in range(self.height):
            for x in range(self.width):
                if x < self.width - 1:
                    edges.append((x, y, x + 1, y))
                if y < self.height - 1:
                    edges.append((x, y, x, y + 1))

        self.rng.shuffle(edges)

        sets = UnionFind(grid.size)
        for x1, y1, x2, y2 in edges:
            if sets.union(grid.index_of(x1, y1), grid.index_of(x2, y2)):
                grid.remove_wall(x1, y1, x2, y2)

    def _prim(self):
        """
        Randomized Prim-style frontier expansion.

        A random frontier cell is taken out and all of its unvisited
        neighbours are connected to it at once, then join the frontier.
        """
        grid = self.grid
        start_x = self.rng.randrange(self.width)
        start_y = self.rng.randrange(self.height)
        grid.cell(start_x, start_y).visited = True
        frontier = [(start_x, start_y)]

        while frontier:
            # swap-remove: frontier order is irrelevant
            idx = self.rng.randrange(len(frontier))
            frontier[idx], frontier[-1] = frontier[-1], frontier[idx]
            x, y = frontier.pop()

            for nx, ny in grid.unvisited_neighbors(x, y):
                grid.remove_wall(x, y, nx, ny)
                grid.cell(nx, ny).visited = True
                frontier.append((nx, ny))

    def _dfs(self):
        """
        Iterative randomized depth-first backtracker.

        Starts in the north-west corner, descends into a random unvisited
        neighbour while one exists and backtracks otherwise.
        """
        grid = self.grid
        grid.cell(0, 0).visited = True
        stack = [(0, 0)]

        while stack:
            x, y = stack[-1]
            unvisited = grid.unvisited_neighbors(x, y)

            if unvisited:
                nx, ny = self.rng.choice(unvisited)
                grid.remove_wall(x, y, nx, ny)
                grid.cell(nx, ny).visited = True
                stack.append((nx, ny))
            else:
                stack.pop()


def verify_perfect_maze(grid: MazeGrid) -> dict[str, Any]:
    """
    Verify that a maze is perfect (fully connected, no loops).

    A perfect maze must satisfy:
    1. Connectivity: All cells reachable from any cell
    2. Acyclicity: Exactly (n-1) passages for n cells

    The cells' ``visited`` flags are left untouched.

    Returns:
        Dictionary with is_perfect, is_connected, is_no_loops,
        visited_cells, total_cells, passage_count and expected_passages
    """
    seen = {0}
    queue = deque([0])
    while queue:
        current = queue.popleft()
        for neighbor in grid.open_neighbors(current):
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)

    total_cells = grid.size
    is_connected = len(seen) == total_cells

    passage_count = grid.removed_wall_count()
    expected_passages = total_cells - 1
    is_no_loops = passage_count == expected_passages

    return {
        "is_perfect": is_connected and is_no_loops,
        "is_connected": is_connected,
        "is_no_loops": is_no_loops,
        "visited_cells": len(seen),
        "total_cells": total_cells,
        "passage_count": passage_count,
        "expected_passages": expected_passages,
    }


def has_symmetric_walls(grid: MazeGrid) -> bool:
    """Check that every shared wall has the same state on both sides."""
    for cell in grid.cells:
        for direction, nx, ny in grid.neighbors(cell.x, cell.y):
            other = grid.cells[grid.index_of(nx, ny)]
            if cell.walls[direction] != other.walls[direction.opposite]:
                return False
    return True


def has_closed_border(grid: MazeGrid) -> bool:
    """Check that no passage leads out of the grid."""
    for cell in grid.cells:
        for direction in Direction:
            dx, dy = direction.offset
            if not grid.in_bounds(cell.x + dx, cell.y + dy) and not cell.walls[direction]:
                return False
    return True


def generate_maze(
    width: int,
    height: int,
    algorithm: MazeAlgorithm | str = MazeAlgorithm.DFS,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> MazeGrid:
    """
    High-level function to generate and verify a perfect maze.

    Args:
        width: Number of columns
        height: Number of rows
        algorithm: 'kruskal', 'prim' or 'dfs'
        seed: Random seed for reproducibility
        rng: Random source to draw from

    Returns:
        Generated maze grid

    Raises:
        ConfigurationError: Invalid dimensions or algorithm name
        MazeGenerationError: The result is not a perfect maze

    Example:
        >>> maze = generate_maze(4, 3, algorithm="kruskal", seed=42)
        >>> maze.removed_wall_count()
        11
    """
    generator = PerfectMazeGenerator(width, height, algorithm, rng=rng)
    grid = generator.generate(seed=seed)

    verification = verify_perfect_maze(grid)
    if not verification["is_perfect"]:
        raise MazeGenerationError(generator.algorithm.value, verification)

    return grid
