"""
Hunt-and-Kill algorithm.

Alternates a random walk (kill) with a row-major scan (hunt) for the first
unvisited cell that borders the visited region.
"""

from __future__ import annotations

import random

from mazeframe.core.grid import Grid, Position, create_grid
from mazeframe.generation.base import (
    check_dimensions,
    make_rng,
    normalize,
    unvisited_neighbors,
    visited_neighbors,
)
from mazeframe.generation.dead_ends import reduce_dead_ends
from mazeframe.utils.maze_logging import get_logger

logger = get_logger(__name__)


def _hunt(grid: Grid, rng: random.Random) -> Position | None:
    for pos in grid.positions():
        if grid[pos].visited:
            continue
        anchors = visited_neighbors(grid, pos)
        if anchors:
            grid.clear_wall_between(pos, rng.choice(anchors))
            grid[pos].visited = True
            return pos
    return None


def hunt_and_kill(
    rows: int,
    columns: int,
    branching_probability: float = 100,
    dead_end_density: float = 50,
    *,
    rng: random.Random | None = None,
) -> Grid:
    """
    Generate a maze with the Hunt-and-Kill algorithm.

    Args:
        rows: Number of rows
        columns: Number of columns
        branching_probability: Probability (0-100) that the walk continues
            from the current cell instead of hunting for a new start
        dead_end_density: Probability (0-100) that a dead end is kept
        rng: Random source

    Returns:
        Carved grid
    """
    check_dimensions(rows, columns)
    branching = normalize(branching_probability, "branching_probability")
    rng = make_rng(rng)
    grid = create_grid(rows, columns)

    current: Position | None = Position(rng.randrange(rows), rng.randrange(columns))
    grid[current].visited = True
    hunts = 0

    while current is not None:
        neighbors = unvisited_neighbors(grid, current)
        if neighbors and rng.random() < branching:
            nxt = rng.choice(neighbors)
            grid.clear_wall_between(current, nxt)
            grid[nxt].visited = True
            current = nxt
        else:
            current = _hunt(grid, rng)
            hunts += 1

    logger.debug(f"Hunt-and-kill carved {rows}x{columns} after {hunts} hunts")
    reduce_dead_ends(grid, dead_end_density, rng=rng)
    return grid
