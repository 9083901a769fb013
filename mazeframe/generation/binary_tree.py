"""
Binary Tree algorithm.

Each cell carves exactly one passage, either north or east. The top row can
only carve east and the last column can only carve north, which leaves a
straight corridor along both of those edges.
"""

from __future__ import annotations

import random

from mazeframe.core.grid import Grid, Position, create_grid
from mazeframe.generation.base import check_dimensions, make_rng, normalize
from mazeframe.utils.maze_logging import get_logger

logger = get_logger(__name__)


def binary_tree(
    rows: int,
    columns: int,
    horizontal_bias: float = 50,
    *,
    rng: random.Random | None = None,
) -> Grid:
    """
    Generate a maze with the Binary Tree algorithm.

    Args:
        rows: Number of rows
        columns: Number of columns
        horizontal_bias: Probability (0-100) of carving east rather than north
        rng: Random source

    Returns:
        Carved grid (a spanning tree)
    """
    check_dimensions(rows, columns)
    bias = normalize(horizontal_bias, "horizontal_bias")
    rng = make_rng(rng)
    grid = create_grid(rows, columns)

    for row in range(rows):
        for col in range(columns):
            can_carve_north = row > 0
            can_carve_east = col < columns - 1
            if not can_carve_north and not can_carve_east:
                continue

            here = Position(row, col)
            carve_east = not can_carve_north or (can_carve_east and rng.random() < bias)
            if carve_east:
                grid.clear_wall_between(here, Position(row, col + 1))
            else:
                grid.clear_wall_between(here, Position(row - 1, col))

    logger.debug(f"Binary tree carved {rows}x{columns} (bias={bias:.2f})")
    return grid
