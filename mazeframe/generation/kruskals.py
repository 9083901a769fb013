"""
Randomized Kruskal's algorithm.

Every interior wall is a candidate edge. Walls are processed in shuffled
order and carved only when they join two different sets.
"""

from __future__ import annotations

import random

from mazeframe.core.grid import Direction, Grid, Position, create_grid
from mazeframe.generation.base import check_dimensions, make_rng
from mazeframe.utils.disjoint_set import DisjointSet
from mazeframe.utils.maze_logging import get_logger

logger = get_logger(__name__)


def kruskals(rows: int, columns: int, *, rng: random.Random | None = None) -> Grid:
    """
    Generate a maze with randomized Kruskal's algorithm.

    Args:
        rows: Number of rows
        columns: Number of columns
        rng: Random source

    Returns:
        Carved grid (a spanning tree with rows * columns - 1 passages)
    """
    check_dimensions(rows, columns)
    rng = make_rng(rng)
    grid = create_grid(rows, columns)

    walls: list[tuple[Position, Position]] = []
    for pos in grid.positions():
        for direction in (Direction.SOUTH, Direction.EAST):
            nxt = grid.neighbor(pos, direction)
            if nxt is not None:
                walls.append((pos, nxt))
    rng.shuffle(walls)

    sets: DisjointSet[Position] = DisjointSet(grid.positions())
    carved = 0
    for a, b in walls:
        if sets.union(a, b):
            grid.clear_wall_between(a, b)
            carved += 1

    logger.debug(f"Kruskal's carved {carved} of {len(walls)} walls in {rows}x{columns}")
    return grid
