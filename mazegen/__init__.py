from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("mazegen")  # Matches the name in pyproject.toml
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-dev"

from .config import MazeConfig
from .geometry import Cell, Direction, MazeGrid, UnionFind
from .mazes import (
    MazeAlgorithm,
    MazeAnalyzer,
    MazeQuality,
    PerfectMazeGenerator,
    calculate_quality_index,
    generate_maze,
    measure_quality,
    verify_perfect_maze,
)
from .utils.exceptions import ConfigurationError, GridPreconditionError, MazeError, MazeGenerationError

__all__ = [
    "__version__",
    "MazeConfig",
    "Cell",
    "Direction",
    "MazeGrid",
    "UnionFind",
    "MazeAlgorithm",
    "MazeAnalyzer",
    "MazeQuality",
    "PerfectMazeGenerator",
    "calculate_quality_index",
    "generate_maze",
    "measure_quality",
    "verify_perfect_maze",
    "ConfigurationError",
    "GridPreconditionError",
    "MazeError",
    "MazeGenerationError",
]
