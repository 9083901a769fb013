"""
Wilson's algorithm using loop-erased random walks.

Produces unbiased mazes: every spanning tree of the grid is equally likely.
"""

from __future__ import annotations

import random

from mazeframe.core.grid import Grid, create_grid
from mazeframe.generation.base import check_dimensions, make_rng
from mazeframe.utils.maze_logging import get_logger

logger = get_logger(__name__)


def wilsons(rows: int, columns: int, *, rng: random.Random | None = None) -> Grid:
    """
    Generate a maze with Wilson's algorithm.

    Algorithm:
    1. Mark one random cell as part of the maze
    2. From a random cell outside the maze, walk randomly until the walk hits
       the maze; whenever the walk revisits one of its own cells, cut the
       recorded path back to that cell (loop erasure)
    3. Carve the surviving path into the maze and repeat until every cell
       is in

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

    unvisited = list(grid.positions())
    first = rng.choice(unvisited)
    grid[first].visited = True
    unvisited.remove(first)
    walks = 0

    while unvisited:
        cell = rng.choice(unvisited)
        path = [cell]

        while not grid[cell].visited:
            cell = rng.choice(grid.neighbors(cell))
            if cell in path:
                path = path[: path.index(cell) + 1]
            else:
                path.append(cell)

        for i in range(len(path) - 1):
            grid.clear_wall_between(path[i], path[i + 1])
            grid[path[i]].visited = True
            unvisited.remove(path[i])
        walks += 1

    logger.debug(f"Wilson's carved {rows}x{columns} in {walks} walks")
    return grid
