"""
Recursive Division algorithm.

The only wall-adder in the library: starts from an open grid with a solid
outer boundary and repeatedly bisects chambers with a wall that has a single
passage through it. Chambers are kept on an explicit stack.
"""

from __future__ import annotations

import random

from mazeframe.core.grid import Grid, Position, create_grid
from mazeframe.generation.base import check_dimensions, make_rng, normalize
from mazeframe.utils.maze_logging import get_logger

logger = get_logger(__name__)


def recursive_division(
    rows: int,
    columns: int,
    horizontal_bias: float = 50,
    *,
    rng: random.Random | None = None,
) -> Grid:
    """
    Generate a maze with the Recursive Division algorithm.

    A chamber of height ``h`` and width ``w`` is split only while both
    dimensions are at least 2. The split is horizontal with probability
    ``horizontal_bias``.

    Args:
        rows: Number of rows
        columns: Number of columns
        horizontal_bias: Probability (0-100) of a horizontal dividing wall
        rng: Random source

    Returns:
        Carved grid (a spanning tree)
    """
    check_dimensions(rows, columns)
    bias = normalize(horizontal_bias, "horizontal_bias")
    rng = make_rng(rng)
    grid = create_grid(rows, columns, walls_present=False)

    for row in range(rows):
        grid.cells[row][0].west_wall = True
        grid.cells[row][columns - 1].east_wall = True
    for col in range(columns):
        grid.cells[0][col].north_wall = True
        grid.cells[rows - 1][col].south_wall = True

    chambers = [(0, 0, rows, columns)]
    divisions = 0

    while chambers:
        top, left, height, width = chambers.pop()
        if height < 2 or width < 2:
            continue
        divisions += 1

        if rng.random() < bias:
            # Wall between rows (top + k) and (top + k + 1)
            k = rng.randrange(height - 1)
            passage = left + rng.randrange(width)
            for col in range(left, left + width):
                if col != passage:
                    grid.add_wall_between(Position(top + k, col), Position(top + k + 1, col))
            chambers.append((top, left, k + 1, width))
            chambers.append((top + k + 1, left, height - k - 1, width))
        else:
            k = rng.randrange(width - 1)
            passage = top + rng.randrange(height)
            for row in range(top, top + height):
                if row != passage:
                    grid.add_wall_between(Position(row, left + k), Position(row, left + k + 1))
            chambers.append((top, left, height, k + 1))
            chambers.append((top, left + k + 1, height, width - k - 1))

    logger.debug(f"Recursive division split {rows}x{columns} into {divisions} walls")
    return grid
