"""
Randomized Prim's algorithm.

Grows the maze outward from one random cell by repeatedly attaching a random
frontier cell (an unvisited cell bordering the visited region) to one of its
visited neighbors.
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
from mazeframe.utils.maze_logging import get_logger

logger = get_logger(__name__)


def prims(
    rows: int,
    columns: int,
    branching_probability: float = 50,
    *,
    rng: random.Random | None = None,
) -> Grid:
    """
    Generate a maze with randomized Prim's algorithm.

    Each drawn frontier cell is processed with probability
    ``branching_probability``. A cell that fails the draw is deferred rather
    than dropped: deferred cells are only attached once the active frontier
    runs dry, so low values grow long spurs before side branches fill in.

    Args:
        rows: Number of rows
        columns: Number of columns
        branching_probability: Probability (0-100) that a drawn frontier cell
            is attached immediately
        rng: Random source

    Returns:
        Carved grid (a spanning tree)
    """
    check_dimensions(rows, columns)
    branching = normalize(branching_probability, "branching_probability")
    rng = make_rng(rng)
    grid = create_grid(rows, columns)

    frontier: list[Position] = []
    deferred: list[Position] = []
    queued: set[Position] = set()

    def attach(pos: Position) -> None:
        anchors = visited_neighbors(grid, pos)
        if anchors:
            grid.clear_wall_between(pos, rng.choice(anchors))
        grid[pos].visited = True
        for nxt in unvisited_neighbors(grid, pos):
            if nxt not in queued:
                queued.add(nxt)
                frontier.append(nxt)

    attach(Position(rng.randrange(rows), rng.randrange(columns)))

    while frontier or deferred:
        if not frontier:
            attach(deferred.pop(rng.randrange(len(deferred))))
            continue

        current = frontier.pop(rng.randrange(len(frontier)))
        if rng.random() < branching:
            attach(current)
        else:
            deferred.append(current)

    logger.debug(f"Prim's carved {rows}x{columns} (branching={branching:.2f})")
    return grid
