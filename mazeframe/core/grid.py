"""
Grid model for maze generation, frame adaptation and solving.

A maze is a rectangular array of cells, each carrying four independent wall
flags. Non-rectangular framings (polygon, circular, text) keep rectangular
storage and mark the playable shape with a boolean validity mask.

Wall symmetry contract:
    For any two grid-adjacent cells A and B, A's wall toward B is cleared
    iff B's wall toward A is cleared. Every wall operation on ``Grid`` updates
    both sides at once.

Reference: Jamis Buck, "Mazes for Programmers" (2015)
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator

    from numpy.typing import NDArray


class Direction(Enum):
    """Cardinal directions with their (row, col) offsets."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def wall(self) -> str:
        """Name of the ``Cell`` attribute holding this side's wall."""
        return f"{self.value}_wall"

    @classmethod
    def from_delta(cls, drow: int, dcol: int) -> Direction:
        for direction, delta in _DELTAS.items():
            if delta == (drow, dcol):
                return direction
        raise ValueError(f"Offset ({drow}, {dcol}) is not a cardinal step")


_DELTAS = {
    Direction.NORTH: (-1, 0),
    Direction.SOUTH: (1, 0),
    Direction.EAST: (0, 1),
    Direction.WEST: (0, -1),
}

_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

# Fixed exploration order shared by generators and solvers
CARDINALS = (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)


class Position(NamedTuple):
    """Integer (row, col) address of a cell."""

    row: int
    col: int

    def step(self, direction: Direction) -> Position:
        drow, dcol = direction.delta
        return Position(self.row + drow, self.col + dcol)


@dataclass
class Cell:
    """
    A single maze cell.

    Attributes:
        north_wall: Wall present on the north side
        south_wall: Wall present on the south side
        east_wall: Wall present on the east side
        west_wall: Wall present on the west side
        visited: Generation bookkeeping; after finalization, True marks a cell
            outside the playable shape
        is_entrance: Cell is the maze entrance
        is_exit: Cell is the maze exit
        is_solution: Cell lies on the displayed solution path
    """

    north_wall: bool = True
    south_wall: bool = True
    east_wall: bool = True
    west_wall: bool = True
    visited: bool = False
    is_entrance: bool = False
    is_exit: bool = False
    is_solution: bool = False

    def has_wall(self, direction: Direction) -> bool:
        return getattr(self, direction.wall)

    def set_wall(self, direction: Direction, present: bool) -> None:
        setattr(self, direction.wall, present)

    @property
    def wall_count(self) -> int:
        return self.north_wall + self.south_wall + self.east_wall + self.west_wall

    @classmethod
    def outside(cls) -> Cell:
        """Cell outside the playable shape: open on all sides, pre-visited."""
        return cls(north_wall=False, south_wall=False, east_wall=False, west_wall=False, visited=True)


class Grid:
    """Rectangular grid of cells with an optional validity mask."""

    def __init__(
        self,
        rows: int,
        cols: int,
        walls_present: bool = True,
        mask: NDArray[np.bool_] | None = None,
        wrap_columns: bool = False,
    ):
        """
        Initialize grid.

        Args:
            rows: Number of rows
            cols: Number of columns
            walls_present: Start with every wall set (False gives an open grid)
            mask: Validity mask of shape (rows, cols); defaults to all valid
            wrap_columns: Treat the last and first columns as adjacent
                (circular sector wraparound)
        """
        self.rows = rows
        self.cols = cols
        self.wrap_columns = wrap_columns
        if mask is None:
            mask = np.ones((rows, cols), dtype=bool)
        elif mask.shape != (rows, cols):
            raise ValueError(f"Mask shape {mask.shape} does not match grid shape {(rows, cols)}")
        self.mask = mask
        self.cells: list[list[Cell]] = [
            [Cell(walls_present, walls_present, walls_present, walls_present) for _ in range(cols)]
            for _ in range(rows)
        ]

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        row, col = pos
        return self.cells[row][col]

    def __setitem__(self, pos: tuple[int, int], cell: Cell) -> None:
        row, col = pos
        self.cells[row][col] = cell

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_valid(self, row: int, col: int) -> bool:
        """True if the position is inside the grid and the playable shape."""
        return self.in_bounds(row, col) and bool(self.mask[row, col])

    def positions(self) -> Iterator[Position]:
        """All positions in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield Position(row, col)

    def valid_positions(self) -> Iterator[Position]:
        for pos in self.positions():
            if self.mask[pos.row, pos.col]:
                yield pos

    def neighbor(self, pos: Position, direction: Direction) -> Position | None:
        """
        Grid-adjacent position in a direction, honoring sector wraparound.

        Returns:
            The neighbor position, or None if it falls outside the grid
        """
        row, col = pos.step(direction)
        if self.wrap_columns and self.cols > 1 and direction in (Direction.EAST, Direction.WEST):
            col %= self.cols
        if not self.in_bounds(row, col):
            return None
        return Position(row, col)

    def neighbors(self, pos: Position) -> list[Position]:
        """In-bounds 4-connected neighbors (north, south, east, west order)."""
        result = []
        for direction in CARDINALS:
            nxt = self.neighbor(pos, direction)
            if nxt is not None and nxt != pos:
                result.append(nxt)
        return result

    def _direction_between(self, a: Position, b: Position) -> Direction:
        drow, dcol = b.row - a.row, b.col - a.col
        if self.wrap_columns and drow == 0 and self.cols > 2:
            if dcol == self.cols - 1:
                dcol = -1
            elif dcol == -(self.cols - 1):
                dcol = 1
        return Direction.from_delta(drow, dcol)

    def clear_wall_between(self, a: Position, b: Position) -> None:
        """
        Remove the wall between two adjacent cells on both sides.

        The side is inferred from the offset of ``b`` relative to ``a``; any
        offset other than a single cardinal step raises ValueError. Bounds are
        the caller's responsibility.
        """
        direction = self._direction_between(a, b)
        self.cells[a.row][a.col].set_wall(direction, False)
        self.cells[b.row][b.col].set_wall(direction.opposite, False)

    def add_wall_between(self, a: Position, b: Position) -> None:
        """Set the wall between two adjacent cells on both sides."""
        direction = self._direction_between(a, b)
        self.cells[a.row][a.col].set_wall(direction, True)
        self.cells[b.row][b.col].set_wall(direction.opposite, True)

    def is_open_between(self, a: Position, b: Position) -> bool:
        """True if both sides of the wall between adjacent cells are cleared."""
        direction = self._direction_between(a, b)
        return not self.cells[a.row][a.col].has_wall(direction) and not self.cells[b.row][b.col].has_wall(
            direction.opposite
        )

    def is_boundary(self, pos: Position, direction: Direction) -> bool:
        """True if the given side of a cell faces outside the grid."""
        return self.neighbor(pos, direction) is None

    def reset_visited(self) -> None:
        """Reset generation flags; cells outside the mask stay marked visited."""
        for pos in self.positions():
            self.cells[pos.row][pos.col].visited = not self.mask[pos.row, pos.col]

    def clear_solution(self) -> None:
        for row in self.cells:
            for cell in row:
                cell.is_solution = False

    def find_entrance(self) -> Position | None:
        for pos in self.positions():
            if self.cells[pos.row][pos.col].is_entrance:
                return pos
        return None

    def find_exit(self) -> Position | None:
        for pos in self.positions():
            if self.cells[pos.row][pos.col].is_exit:
                return pos
        return None

    def clone(self) -> Grid:
        """Independent copy of the cells, mask and topology."""
        copy = Grid.__new__(Grid)
        copy.rows = self.rows
        copy.cols = self.cols
        copy.wrap_columns = self.wrap_columns
        copy.mask = self.mask.copy()
        copy.cells = [[dataclasses.replace(cell) for cell in row] for row in self.cells]
        return copy

    def wall_state(self) -> NDArray[np.bool_]:
        """Wall flags as an array of shape (rows, cols, 4) in N, S, E, W order."""
        return np.array(
            [[[c.north_wall, c.south_wall, c.east_wall, c.west_wall] for c in row] for row in self.cells],
            dtype=bool,
        ).reshape(self.rows, self.cols, 4)

    def to_numpy_array(self, wall_thickness: int = 1) -> NDArray[np.int32]:
        """
        Convert maze to numpy array representation.

        Args:
            wall_thickness: Thickness of walls in cells

        Returns:
            Numpy array where 1 = wall, 0 = passage
        """
        cell_size = 2 * wall_thickness + 1
        height = self.rows * cell_size + wall_thickness
        width = self.cols * cell_size + wall_thickness
        t = wall_thickness

        maze = np.ones((height, width), dtype=np.int32)

        for pos in self.valid_positions():
            cell = self.cells[pos.row][pos.col]
            r_start = pos.row * cell_size + t
            c_start = pos.col * cell_size + t

            maze[r_start : r_start + t, c_start : c_start + t] = 0

            if not cell.north_wall:
                maze[r_start - t : r_start, c_start : c_start + t] = 0
            if not cell.south_wall:
                maze[r_start + t : r_start + 2 * t, c_start : c_start + t] = 0
            if not cell.west_wall:
                maze[r_start : r_start + t, c_start - t : c_start] = 0
            if not cell.east_wall:
                maze[r_start : r_start + t, c_start + t : c_start + 2 * t] = 0

        return maze

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, valid={int(self.mask.sum())})"


def create_grid(rows: int, cols: int, walls_present: bool = True) -> Grid:
    """
    Create a fresh grid.

    Args:
        rows: Number of rows
        cols: Number of columns
        walls_present: True for a fully walled grid, False for an open grid
            (the starting point of Recursive Division)

    Returns:
        New grid with every cell unvisited
    """
    return Grid(rows, cols, walls_present=walls_present)
