"""
Structural quality metrics for generated mazes.

The analyzer reports:
- dead ends: cells with exactly one open passage (three walls)
- longest path: longest simple path, in passages, found from any start cell
- average path length: mean length of all terminal paths enumerated from
  every start cell
- branching factor: mean number of open passages per cell

These combine into a single weighted quality index.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from mazegen.utils.exceptions import ConfigurationError

if TYPE_CHECKING:
    from mazegen.geometry.grid import MazeGrid

W_DEAD_ENDS = 0.25
W_LONGEST_PATH = 0.30
W_AVG_PATH = 0.25
W_BRANCHING = 0.20


@dataclass(frozen=True)
class MazeQuality:
    """Read-only snapshot of maze quality metrics."""

    dead_ends: int
    longest_path: int
    avg_path_length: float
    branching_factor: float


class MazeAnalyzer:
    """Analyzes the structure of a finished maze."""

    def __init__(self, grid: MazeGrid):
        self.grid = grid

    def count_dead_ends(self) -> int:
        """Count cells with only one passage (dead ends)."""
        return sum(1 for cell in self.grid.cells if cell.wall_count == 3)

    def calculate_branching_factor(self) -> float:
        """Mean number of open passages per cell."""
        return sum(cell.passage_count for cell in self.grid.cells) / self.grid.size

    def measure_paths(self) -> tuple[int, int, int]:
        """
        Enumerate simple paths from every cell.

        Returns:
            (longest_path, total_path_length, total_paths) summed over all
            start cells
        """
        longest_path = 0
        total_path_length = 0
        total_paths = 0

        adjacency = [self.grid.open_neighbors(index) for index in range(self.grid.size)]

        for start in range(self.grid.size):
            longest, length_sum, count = self._paths_from(start, adjacency)
            longest_path = max(longest_path, longest)
            total_path_length += length_sum
            total_paths += count

        return longest_path, total_path_length, total_paths

    def _paths_from(self, start: int, adjacency: list[list[int]]) -> tuple[int, int, int]:
        """
        Exhaustive depth-first enumeration of simple paths from ``start``.

        A search node without an unvisited open neighbour ends one terminal
        path. Uses an explicit stack of [index, length, neighbour iterator,
        extended] frames and a per-call on-path marking.
        """
        on_path = np.zeros(self.grid.size, dtype=bool)
        on_path[start] = True
        stack = [[start, 0, iter(adjacency[start]), False]]

        longest = 0
        length_sum = 0
        count = 0

        while stack:
            frame = stack[-1]
            index, length, neighbors, _ = frame

            for neighbor in neighbors:
                if not on_path[neighbor]:
                    frame[3] = True
                    on_path[neighbor] = True
                    stack.append([neighbor, length + 1, iter(adjacency[neighbor]), False])
                    break
            else:
                if not frame[3]:
                    longest = max(longest, length)
                    length_sum += length
                    count += 1
                on_path[index] = False
                stack.pop()

        return longest, length_sum, count

    def measure_quality(self) -> MazeQuality:
        """Compute all metrics in one pass over the maze."""
        longest_path, total_path_length, total_paths = self.measure_paths()

        return MazeQuality(
            dead_ends=self.count_dead_ends(),
            longest_path=longest_path,
            avg_path_length=total_path_length / total_paths,
            branching_factor=self.calculate_branching_factor(),
        )


def calculate_quality_index(quality: MazeQuality, maze_size: int) -> float:
    """
    Combine quality metrics into one weighted score.

    Args:
        quality: Measured maze metrics
        maze_size: Number of cells (width * height)

    Returns:
        0.25 * (1 - dead_end_ratio) + 0.30 * path_length_ratio
        + 0.25 * normalized_avg_path + 0.20 * branching_factor
    """
    if maze_size < 1:
        raise ConfigurationError(
            parameter_name="maze_size",
            provided_value=maze_size,
            valid_range=(1, None),
            component="calculate_quality_index",
        )

    dead_end_ratio = quality.dead_ends / maze_size
    path_length_ratio = quality.longest_path / maze_size
    normalized_avg_path = quality.avg_path_length / maze_size

    return (
        (1.0 - dead_end_ratio) * W_DEAD_ENDS
        + path_length_ratio * W_LONGEST_PATH
        + normalized_avg_path * W_AVG_PATH
        + quality.branching_factor * W_BRANCHING
    )


def measure_quality(grid: MazeGrid) -> tuple[MazeQuality, float]:
    """Measure a maze and score it; returns (quality, quality_index)."""
    quality = MazeAnalyzer(grid).measure_quality()
    return quality, calculate_quality_index(quality, grid.size)
