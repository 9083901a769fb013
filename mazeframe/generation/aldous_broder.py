"""
Aldous-Broder algorithm.

An unbiased random walk over the whole grid that carves into each cell the
first time it is entered. Simple and uniform, but slow to finish on large
grids.
"""

from __future__ import annotations

import random

from mazeframe.core.grid import Grid, Position, create_grid
from mazeframe.generation.base import check_dimensions, make_rng
from mazeframe.utils.maze_logging import get_logger

logger = get_logger(__name__)


def aldous_broder(rows: int, columns: int, *, rng: random.Random | None = None) -> Grid:
    """
    Generate a maze with the Aldous-Broder algorithm.

    Args:
        rows: Number of rows
        columns: Number of columns
        rng: Random source

    Returns:
        Carved grid (a spanning tree)
    """
    check_dimensions(rows, columns)
    rng = make_rng(rng)
    grid = create_grid(rows, columns)

    current = Position(rng.randrange(rows), rng.randrange(columns))
    grid[current].visited = True
    remaining = rows * columns - 1
    steps = 0

    while remaining > 0:
        nxt = rng.choice(grid.neighbors(current))
        if not grid[nxt].visited:
            grid.clear_wall_between(current, nxt)
            grid[nxt].visited = True
            remaining -= 1
        current = nxt
        steps += 1

    logger.debug(f"Aldous-Broder covered {rows}x{columns} in {steps} steps")
    return grid
