"""
Rectangular maze grid with explicit wall state.

Each cell stores four wall flags indexed by Direction. A wall shared by two
adjacent cells is stored on both sides and the two flags always agree:
remove_wall() is the only operation that clears them and it clears both.

Cells live in a flat row-major list, ``index = y * width + x``, with
``y`` growing southwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

import numpy as np

from mazegen.utils.exceptions import GridPreconditionError, validate_dimension

if TYPE_CHECKING:
    from collections.abc import Iterator

    from numpy.typing import NDArray


class Direction(IntEnum):
    """Wall sides of a cell, in the canonical N, E, S, W order."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def opposite(self) -> Direction:
        return Direction((self + 2) % 4)

    @property
    def offset(self) -> tuple[int, int]:
        """(dx, dy) step towards the neighbour on this side."""
        return _OFFSETS[self]


_OFFSETS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}
_BY_OFFSET = {offset: direction for direction, offset in _OFFSETS.items()}


@dataclass(eq=False)
class Cell:
    """
    A single maze cell.

    Attributes:
        x: Column index
        y: Row index
        walls: Wall flags indexed by Direction, True means closed
        visited: Scratch flag for generation algorithms
    """

    x: int
    y: int
    walls: list[bool] = field(default_factory=lambda: [True, True, True, True])
    visited: bool = False

    def has_wall(self, direction: Direction) -> bool:
        return self.walls[direction]

    @property
    def wall_count(self) -> int:
        return sum(self.walls)

    @property
    def passage_count(self) -> int:
        return 4 - self.wall_count

    def __repr__(self) -> str:
        return f"Cell({self.x},{self.y})"


class MazeGrid:
    """Grid of cells that generators carve into a maze."""

    def __init__(self, width: int, height: int):
        """
        Initialize a fully walled grid.

        Args:
            width: Number of columns (>= 1)
            height: Number of rows (>= 1)

        Raises:
            ConfigurationError: If a dimension is not a positive integer
        """
        self.width = validate_dimension(width, "width", component="MazeGrid")
        self.height = validate_dimension(height, "height", component="MazeGrid")
        self.cells: list[Cell] = [Cell(x, y) for y in range(self.height) for x in range(self.width)]

    @property
    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index_of(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise GridPreconditionError("index_of", (x, y), (self.width, self.height), "coordinates out of bounds")
        return y * self.width + x

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[self.index_of(x, y)]

    def neighbors(self, x: int, y: int) -> list[tuple[Direction, int, int]]:
        """Grid-adjacent cells of (x, y) as (direction, nx, ny), N/E/S/W order."""
        result = []
        for direction in Direction:
            dx, dy = direction.offset
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                result.append((direction, nx, ny))
        return result

    def unvisited_neighbors(self, x: int, y: int) -> list[tuple[int, int]]:
        return [(nx, ny) for _, nx, ny in self.neighbors(x, y) if not self.cells[ny * self.width + nx].visited]

    def open_neighbors(self, index: int) -> list[int]:
        """Indices of cells reachable from ``index`` through a removed wall."""
        cell = self.cells[index]
        result = []
        for direction, nx, ny in self.neighbors(cell.x, cell.y):
            if not cell.walls[direction]:
                result.append(ny * self.width + nx)
        return result

    def remove_wall(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """
        Open the passage between two grid-adjacent cells.

        Raises:
            GridPreconditionError: If either cell is out of bounds or the
                cells are not adjacent
        """
        first = self.cell(x1, y1)
        second = self.cell(x2, y2)

        direction = _BY_OFFSET.get((x2 - x1, y2 - y1))
        if direction is None:
            raise GridPreconditionError(
                "remove_wall", ((x1, y1), (x2, y2)), (self.width, self.height), "cells are not adjacent"
            )

        first.walls[direction] = False
        second.walls[direction.opposite] = False

    def removed_wall_count(self) -> int:
        """Number of internal walls removed, each counted once."""
        count = 0
        for cell in self.cells:
            if cell.x < self.width - 1 and not cell.walls[Direction.EAST]:
                count += 1
            if cell.y < self.height - 1 and not cell.walls[Direction.SOUTH]:
                count += 1
        return count

    def rows(self) -> Iterator[list[Cell]]:
        for y in range(self.height):
            yield self.cells[y * self.width : (y + 1) * self.width]

    def render(self) -> str:
        """
        Render the maze as fixed-width text.

        Each row becomes a wall line (``+---+`` or ``+   +`` segments for the
        north walls) and a body line (``|`` or a blank for the west walls,
        closed on the right). A fully closed border line ends the drawing.
        """
        lines = []
        for row in self.rows():
            top = "+" + "".join(("---" if cell.walls[Direction.NORTH] else "   ") + "+" for cell in row)
            body = "".join(("|" if cell.walls[Direction.WEST] else " ") + "   " for cell in row) + "|"
            lines.append(top)
            lines.append(body)
        lines.append("+---" * self.width + "+")
        return "\n".join(lines) + "\n"

    def to_numpy_array(self, wall_thickness: int = 1) -> NDArray[np.int32]:
        """
        Convert maze to numpy array representation.

        Args:
            wall_thickness: Thickness of walls in array cells

        Returns:
            Numpy array where 1 = wall, 0 = passage
        """
        t = wall_thickness
        cell_size = 2 * t
        maze = np.ones((self.height * cell_size + t, self.width * cell_size + t), dtype=np.int32)

        for cell in self.cells:
            r = cell.y * cell_size + t
            c = cell.x * cell_size + t

            maze[r : r + t, c : c + t] = 0

            if not cell.walls[Direction.NORTH]:
                maze[r - t : r, c : c + t] = 0
            if not cell.walls[Direction.SOUTH]:
                maze[r + t : r + 2 * t, c : c + t] = 0
            if not cell.walls[Direction.WEST]:
                maze[r : r + t, c - t : c] = 0
            if not cell.walls[Direction.EAST]:
                maze[r : r + t, c + t : c + 2 * t] = 0

        return maze

    def __repr__(self) -> str:
        return f"MazeGrid(width={self.width}, height={self.height})"
