"""
A* search on the cell lattice.

Used two ways: with walls respected it answers "is there a path", and with
walls ignored it finds the shortest lattice path between two valid cells so
the path can be carved open to repair connectivity.
"""

from __future__ import annotations

import heapq
import itertools
from typing import TYPE_CHECKING

from mazeframe.core.analysis import reachable_from
from mazeframe.core.grid import CARDINALS
from mazeframe.solvers.moves import valid_moves
from mazeframe.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from mazeframe.core.grid import Grid, Position

logger = get_logger(__name__)


def manhattan(a: Position, b: Position) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)


def _lattice_neighbors(grid: Grid, pos: Position) -> list[Position]:
    result = []
    for direction in CARDINALS:
        nxt = grid.neighbor(pos, direction)
        if nxt is not None and nxt != pos and grid.is_valid(*nxt):
            result.append(nxt)
    return result


def astar_path(
    grid: Grid,
    start: Position,
    goal: Position,
    respect_walls: bool = False,
) -> list[Position] | None:
    """
    Shortest 4-directional path between two valid cells.

    Args:
        grid: Maze grid
        start: Start position
        goal: Goal position
        respect_walls: Only step through cleared walls when True; otherwise
            walls are ignored and only the validity mask constrains the path

    Returns:
        Path from start to goal inclusive, or None if the goal is unreachable
    """
    counter = itertools.count()
    open_set: list[tuple[int, int, Position]] = [(manhattan(start, goal), next(counter), start)]
    came_from: dict[Position, Position] = {}
    g_score = {start: 0}
    closed: set[Position] = set()

    while open_set:
        _, _, current = heapq.heappop(open_set)
        if current == goal:
            path = [current]
            while current in came_from:
                current = came_from[current]
                path.append(current)
            path.reverse()
            return path

        if current in closed:
            continue
        closed.add(current)

        neighbors = valid_moves(grid, current) if respect_walls else _lattice_neighbors(grid, current)
        for nxt in neighbors:
            tentative = g_score[current] + 1
            if tentative < g_score.get(nxt, float("inf")):
                came_from[nxt] = current
                g_score[nxt] = tentative
                heapq.heappush(open_set, (tentative + manhattan(nxt, goal), next(counter), nxt))

    return None


def is_reachable(grid: Grid, start: Position, goal: Position) -> bool:
    """True if ``goal`` can be reached from ``start`` through cleared walls."""
    return goal in reachable_from(grid, start)


def carve_path(grid: Grid, path: list[Position]) -> int:
    """
    Clear every wall along a path of adjacent cells.

    Returns:
        Number of walls that were actually opened
    """
    opened = 0
    for a, b in zip(path, path[1:]):
        if not grid.is_open_between(a, b):
            grid.clear_wall_between(a, b)
            opened += 1
    logger.debug(f"Carved path of {len(path)} cells, opened {opened} walls")
    return opened
