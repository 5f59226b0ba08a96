"""
Grid geometry for maze generation.

Provides the rectangular wall grid carved by the generators and the
union-find forest used by Kruskal's algorithm.
"""

from __future__ import annotations

from .grid import Cell, Direction, MazeGrid
from .union_find import UnionFind

__all__ = [
    "Cell",
    "Direction",
    "MazeGrid",
    "UnionFind",
]
