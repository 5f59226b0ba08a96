"""
Perfect maze generation and quality analysis.

Examples
--------
>>> from mazegen.mazes import PerfectMazeGenerator, MazeAlgorithm, measure_quality
>>> grid = PerfectMazeGenerator(10, 10, MazeAlgorithm.KRUSKAL).generate(seed=42)
>>> quality, index = measure_quality(grid)
"""

from __future__ import annotations

from .maze_generator import (
    MazeAlgorithm,
    PerfectMazeGenerator,
    generate_maze,
    has_closed_border,
    has_symmetric_walls,
    verify_perfect_maze,
)
from .maze_quality import MazeAnalyzer, MazeQuality, calculate_quality_index, measure_quality

__all__ = [
    # Generation
    "MazeAlgorithm",
    "PerfectMazeGenerator",
    "generate_maze",
    "verify_perfect_maze",
    "has_symmetric_walls",
    "has_closed_border",
    # Analysis
    "MazeAnalyzer",
    "MazeQuality",
    "calculate_quality_index",
    "measure_quality",
]
