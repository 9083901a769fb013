"""
Dead-end reduction post-pass shared by the depth-first style generators.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from mazeframe.core.grid import CARDINALS
from mazeframe.generation.base import make_rng, normalize
from mazeframe.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from mazeframe.core.grid import Grid

logger = get_logger(__name__)


def reduce_dead_ends(grid: Grid, dead_end_density: float, *, rng: random.Random | None = None) -> int:
    """
    Reopen one wall of some dead-end cells, introducing loops.

    Each valid cell with exactly three walls is left alone with probability
    ``dead_end_density``; otherwise the wall toward a random walled-off valid
    neighbor is cleared. A density of 100 leaves the grid untouched.

    Args:
        grid: Grid to modify in place
        dead_end_density: Probability (0-100) that a dead end is kept
        rng: Random source

    Returns:
        Number of walls removed
    """
    density = normalize(dead_end_density, "dead_end_density")
    if density >= 1.0:
        return 0
    rng = make_rng(rng)

    removed = 0
    for pos in grid.valid_positions():
        cell = grid[pos]
        if cell.wall_count != 3:
            continue
        if rng.random() < density:
            continue

        candidates = []
        for direction in CARDINALS:
            nxt = grid.neighbor(pos, direction)
            if nxt is not None and cell.has_wall(direction) and grid.is_valid(*nxt):
                candidates.append(nxt)
        if candidates:
            grid.clear_wall_between(pos, rng.choice(candidates))
            removed += 1

    logger.debug(f"Dead-end pass removed {removed} walls (density={density:.2f})")
    return removed
