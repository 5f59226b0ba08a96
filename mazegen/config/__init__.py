"""Configuration for mazegen."""

from __future__ import annotations

from .maze_config import LARGE_MAZE_CELLS, MazeConfig

__all__ = [
    "LARGE_MAZE_CELLS",
    "MazeConfig",
]
