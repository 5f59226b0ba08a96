"""Shared utilities: exceptions and logging."""

from __future__ import annotations

from .exceptions import (
    ConfigurationError,
    GridPreconditionError,
    MazeError,
    MazeGenerationError,
    validate_dimension,
)
from .maze_logging import LoggedOperation, configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "GridPreconditionError",
    "MazeError",
    "MazeGenerationError",
    "validate_dimension",
    "LoggedOperation",
    "configure_logging",
    "get_logger",
]
