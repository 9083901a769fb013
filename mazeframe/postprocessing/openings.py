"""
Entrance and exit placement.

Rectangular grids pick a random cell on the requested boundary and open the
wall facing out of the grid. Masked frames (polygon) pick from a list of
edge cells instead.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from mazeframe.core.grid import Direction, Position
from mazeframe.generation.base import make_rng
from mazeframe.utils.exceptions import MazeConfigurationError
from mazeframe.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from mazeframe.core.grid import Grid

logger = get_logger(__name__)

SIDES = ("north", "south", "east", "west")
ENTRANCE_POSITIONS = (*SIDES, "random")
EXIT_POSITIONS = (*ENTRANCE_POSITIONS, "farthest")

_MAX_REDRAWS = 100


def boundary_position(side: str, rows: int, cols: int, rng: random.Random | None = None) -> Position:
    """
    Random cell on one boundary of a rows x cols grid.

    Args:
        side: ``north``, ``south``, ``east``, ``west`` or ``random`` (one of
            the four, uniformly)
        rows: Number of rows
        cols: Number of columns
        rng: Random source

    Returns:
        Boundary position
    """
    rng = make_rng(rng)
    if side == "random":
        side = rng.choice(SIDES)

    if side == "north":
        return Position(0, rng.randrange(cols))
    if side == "south":
        return Position(rows - 1, rng.randrange(cols))
    if side == "east":
        return Position(rng.randrange(rows), cols - 1)
    if side == "west":
        return Position(rng.randrange(rows), 0)
    raise MazeConfigurationError("position", side, component="openings")


def farthest_position(reference: Position, rows: int, cols: int) -> Position:
    """
    Cell with the largest Manhattan distance from ``reference``.

    This is a geometric approximation, not the cell with the longest path
    through the maze. Ties go to the first cell in row-major order.
    """
    best = Position(0, 0)
    best_distance = 0
    for row in range(rows):
        for col in range(cols):
            distance = abs(row - reference.row) + abs(col - reference.col)
            if distance > best_distance:
                best_distance = distance
                best = Position(row, col)
    return best


def boundary_side(pos: Position, rows: int, cols: int) -> Direction:
    """Outward-facing side of a boundary cell: north row, south row, else west/east column."""
    if pos.row == 0:
        return Direction.NORTH
    if pos.row == rows - 1:
        return Direction.SOUTH
    if pos.col == 0:
        return Direction.WEST
    return Direction.EAST


def mark_opening(grid: Grid, pos: Position, side: Direction, *, entrance: bool) -> None:
    """Flag a cell as entrance or exit and open its wall on ``side``."""
    cell = grid[pos]
    cell.set_wall(side, False)
    if entrance:
        cell.is_entrance = True
    else:
        cell.is_exit = True


def place_entrance_exit(
    grid: Grid,
    entrance_position: str = "west",
    exit_position: str = "east",
    rng: random.Random | None = None,
) -> tuple[Position, Position]:
    """
    Place the entrance and exit on a rectangular grid.

    The exit is redrawn if it lands on the entrance cell (unless the grid has
    a single cell).

    Args:
        grid: Grid to modify in place
        entrance_position: Entrance side or ``random``
        exit_position: Exit side, ``random`` or ``farthest``
        rng: Random source

    Returns:
        (entrance, exit) positions
    """
    if entrance_position not in ENTRANCE_POSITIONS:
        raise MazeConfigurationError("entrance_position", entrance_position, component="openings")
    if exit_position not in EXIT_POSITIONS:
        raise MazeConfigurationError("exit_position", exit_position, component="openings")

    rng = make_rng(rng)
    rows, cols = grid.shape

    entrance = boundary_position(entrance_position, rows, cols, rng)

    if exit_position == "farthest":
        exit_ = farthest_position(entrance, rows, cols)
    else:
        exit_ = boundary_position(exit_position, rows, cols, rng)
        redraws = 0
        while exit_ == entrance and rows * cols > 1:
            redraws += 1
            if redraws > _MAX_REDRAWS:
                exit_ = farthest_position(entrance, rows, cols)
                break
            exit_ = boundary_position(exit_position, rows, cols, rng)

    mark_opening(grid, entrance, boundary_side(entrance, rows, cols), entrance=True)
    mark_opening(grid, exit_, boundary_side(exit_, rows, cols), entrance=False)

    logger.debug(f"Entrance at {tuple(entrance)}, exit at {tuple(exit_)}")
    return entrance, exit_


def edge_position(
    edges: list[Position],
    preference: str,
    rng: random.Random | None = None,
    reference: Position | None = None,
) -> Position:
    """
    Pick an edge cell of a masked frame by placement preference.

    ``north`` picks among the edge cells with the smallest row, ``south`` the
    largest row, ``west`` the smallest column and ``east`` the largest column;
    ``random`` is uniform over all edge cells and ``farthest`` takes the edge
    cell with the largest Manhattan distance from ``reference``.

    Args:
        edges: Candidate edge cells (non-empty)
        preference: Placement preference
        rng: Random source
        reference: Anchor for ``farthest`` (the entrance)

    Returns:
        Chosen edge position
    """
    rng = make_rng(rng)
    if preference == "random":
        return rng.choice(edges)
    if preference == "farthest":
        if reference is None:
            raise MazeConfigurationError("exit_position", preference, component="openings")
        return max(edges, key=lambda p: abs(p.row - reference.row) + abs(p.col - reference.col))

    if preference == "north":
        target = min(p.row for p in edges)
        candidates = [p for p in edges if p.row == target]
    elif preference == "south":
        target = max(p.row for p in edges)
        candidates = [p for p in edges if p.row == target]
    elif preference == "west":
        target = min(p.col for p in edges)
        candidates = [p for p in edges if p.col == target]
    elif preference == "east":
        target = max(p.col for p in edges)
        candidates = [p for p in edges if p.col == target]
    else:
        raise MazeConfigurationError("position", preference, component="openings")
    return rng.choice(candidates)
