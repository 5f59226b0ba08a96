"""
Pydantic configuration for maze generation runs.

Validates dimensions and the algorithm name before any generation work
starts, so that invalid input never produces partial output.
"""

from __future__ import annotations

import random
import warnings

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mazegen.mazes.maze_generator import MazeAlgorithm, PerfectMazeGenerator

# Exhaustive path analysis is quadratic in the number of cells
LARGE_MAZE_CELLS = 2500


class MazeConfig(BaseModel):
    """
    Configuration of a single maze generation run.

    Attributes:
        width: Number of columns
        height: Number of rows
        algorithm: Generation algorithm, accepts names case-insensitively
        seed: Optional random seed for reproducible mazes
    """

    width: int = Field(..., ge=1, description="Number of maze columns")
    height: int = Field(..., ge=1, description="Number of maze rows")
    algorithm: MazeAlgorithm = Field(MazeAlgorithm.DFS, description="Maze generation algorithm")
    seed: int | None = Field(None, description="Random seed for reproducibility")

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("algorithm", mode="before")
    @classmethod
    def normalize_algorithm(cls, v):
        """Accept algorithm names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @model_validator(mode="after")
    def warn_large_maze(self) -> MazeConfig:
        """Warn when quality analysis will be slow."""
        if self.size > LARGE_MAZE_CELLS:
            warnings.warn(
                f"Maze with {self.size} cells: exhaustive path analysis may take a long time",
                UserWarning,
                stacklevel=2,
            )
        return self

    @property
    def size(self) -> int:
        return self.width * self.height

    def build_generator(self, rng: random.Random | None = None) -> PerfectMazeGenerator:
        """Create a generator for this configuration, seeded when a seed is set."""
        if rng is None:
            rng = random.Random(self.seed)
        return PerfectMazeGenerator(self.width, self.height, self.algorithm, rng=rng)
