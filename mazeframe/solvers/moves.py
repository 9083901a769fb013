"""
Neighbor functions shared by the solvers.

A move from one cell to a neighbor is legal when the walls on both sides are
cleared, the target lies inside the playable shape and has not been visited.
Circular grids treat rows as rings (north = inward, south = outward) and wrap
the sector index.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mazeframe.core.grid import CARDINALS, Direction, Position

if TYPE_CHECKING:
    from collections.abc import Container

    from mazeframe.core.grid import Grid


def _rectangular_neighbor(grid: Grid, pos: Position, direction: Direction) -> Position | None:
    nxt = pos.step(direction)
    return nxt if grid.in_bounds(*nxt) else None


def _circular_neighbor(grid: Grid, pos: Position, direction: Direction) -> Position | None:
    ring, sector = pos.step(direction)
    if not 0 <= ring < grid.rows:
        return None
    return Position(ring, sector % grid.cols)


def valid_moves(grid: Grid, pos: Position, visited: Container[Position] = ()) -> list[Position]:
    """
    Legal moves from ``pos`` in north, south, east, west order.

    Args:
        grid: Maze grid
        pos: Current position
        visited: Positions that must not be entered again

    Returns:
        Reachable neighbor positions
    """
    neighbor = _circular_neighbor if grid.wrap_columns else _rectangular_neighbor
    cell = grid[pos]
    moves = []
    for direction in CARDINALS:
        if cell.has_wall(direction):
            continue
        nxt = neighbor(grid, pos, direction)
        if nxt is None or nxt == pos or nxt in visited or not grid.is_valid(*nxt):
            continue
        if grid[nxt].has_wall(direction.opposite):
            continue
        moves.append(nxt)
    return moves
