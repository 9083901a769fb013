"""
Recursive Backtracker (depth-first search) algorithm.

Implemented with an explicit stack so large grids never hit the interpreter
recursion limit.
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


def _reseed(grid: Grid, rng: random.Random) -> Position | None:
    """Attach the first unvisited cell bordering the visited region and return it."""
    for pos in grid.positions():
        if grid[pos].visited:
            continue
        anchors = visited_neighbors(grid, pos)
        if anchors:
            grid.clear_wall_between(pos, rng.choice(anchors))
            grid[pos].visited = True
            return pos
    return None


def recursive_backtracker(
    rows: int,
    columns: int,
    branching_probability: float = 50,
    dead_end_density: float = 50,
    *,
    rng: random.Random | None = None,
) -> Grid:
    """
    Generate a maze with the Recursive Backtracker algorithm.

    Algorithm:
    1. Start at a random cell, mark it visited and push it
    2. Keep each unvisited neighbor of the stack top with probability
       ``branching_probability``; carve to a random survivor and push it
    3. Pop when nothing survives the filter
    4. When the stack empties with cells left, re-seed from the first
       unvisited cell adjacent to the visited region
    5. Run the dead-end post-pass

    Args:
        rows: Number of rows
        columns: Number of columns
        branching_probability: Probability (0-100) that a neighbor stays a
            candidate at each step
        dead_end_density: Probability (0-100) that a dead end is kept
        rng: Random source

    Returns:
        Carved grid
    """
    check_dimensions(rows, columns)
    branching = normalize(branching_probability, "branching_probability")
    rng = make_rng(rng)
    grid = create_grid(rows, columns)

    start = Position(rng.randrange(rows), rng.randrange(columns))
    grid[start].visited = True
    stack = [start]
    reseeds = 0

    while stack:
        while stack:
            current = stack[-1]
            candidates = [n for n in unvisited_neighbors(grid, current) if rng.random() < branching]

            if candidates:
                nxt = rng.choice(candidates)
                grid.clear_wall_between(current, nxt)
                grid[nxt].visited = True
                stack.append(nxt)
            else:
                stack.pop()

        seed = _reseed(grid, rng)
        if seed is not None:
            stack.append(seed)
            reseeds += 1

    logger.debug(f"Recursive backtracker carved {rows}x{columns} with {reseeds} re-seeds")
    reduce_dead_ends(grid, dead_end_density, rng=rng)
    return grid
