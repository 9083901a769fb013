"""
Sidewinder algorithm.

Works row by row: cells accumulate into a horizontal run, and closing a run
carves a single north exit from a random member. The top row has no north
exits, so it is one long corridor.
"""

from __future__ import annotations

import random

from mazeframe.core.grid import Grid, Position, create_grid
from mazeframe.generation.base import check_dimensions, make_rng, normalize
from mazeframe.utils.maze_logging import get_logger

logger = get_logger(__name__)


def sidewinder(
    rows: int,
    columns: int,
    horizontal_bias: float = 50,
    branching_probability: float = 50,
    *,
    rng: random.Random | None = None,
) -> Grid:
    """
    Generate a maze with the Sidewinder algorithm.

    A run closes at the eastern boundary or when the bias draw fails. The
    branching draw then decides whether the run gets its north exit now; when
    it does not, the run keeps growing eastwards. The run that reaches the
    last column always exits north, so every row joins the row above.

    Args:
        rows: Number of rows
        columns: Number of columns
        horizontal_bias: Probability (0-100) of extending a run east
        branching_probability: Probability (0-100) that a closing run carves
            its north exit
        rng: Random source

    Returns:
        Carved grid (a spanning tree)
    """
    check_dimensions(rows, columns)
    bias = normalize(horizontal_bias, "horizontal_bias")
    branching = normalize(branching_probability, "branching_probability")
    rng = make_rng(rng)
    grid = create_grid(rows, columns)

    for col in range(columns - 1):
        grid.clear_wall_between(Position(0, col), Position(0, col + 1))

    for row in range(1, rows):
        run_start = 0
        for col in range(columns):
            at_eastern_boundary = col == columns - 1
            close_run = at_eastern_boundary or rng.random() >= bias

            if close_run and (at_eastern_boundary or rng.random() < branching):
                north_col = rng.randint(run_start, col)
                grid.clear_wall_between(Position(row, north_col), Position(row - 1, north_col))
                run_start = col + 1
            else:
                grid.clear_wall_between(Position(row, col), Position(row, col + 1))

    logger.debug(f"Sidewinder carved {rows}x{columns} (bias={bias:.2f}, branching={branching:.2f})")
    return grid
