"""
Eller's algorithm for row-by-row maze generation.

Algorithm:
1. Process rows from top to bottom
2. Cells carried down from the previous row keep their set; new cells get
   a fresh set
3. Join adjacent cells of different sets in the same row (merging sets)
4. Open at least one vertical passage per set so no set dies out
5. The last row joins every remaining pair of distinct sets

Reference: Eller (1982), "An Efficient Method for Generating Mazes"
"""

from __future__ import annotations

import math
import random
from collections import defaultdict

from mazeframe.core.grid import Grid, Position, create_grid
from mazeframe.generation.base import check_dimensions, make_rng, normalize
from mazeframe.utils.disjoint_set import DisjointSet
from mazeframe.utils.maze_logging import get_logger

logger = get_logger(__name__)


def ellers(
    rows: int,
    columns: int,
    horizontal_bias: float = 50,
    branching_probability: float = 50,
    *,
    rng: random.Random | None = None,
) -> Grid:
    """
    Generate a maze with Eller's algorithm.

    Args:
        rows: Number of rows
        columns: Number of columns
        horizontal_bias: Probability (0-100) of merging two adjacent cells of
            different sets within a row
        branching_probability: Fraction (0-100) of each set's cells that get a
            passage down; at least one per set is always opened
        rng: Random source

    Returns:
        Carved grid (a spanning tree)
    """
    check_dimensions(rows, columns)
    bias = normalize(horizontal_bias, "horizontal_bias")
    branching = normalize(branching_probability, "branching_probability")
    rng = make_rng(rng)
    grid = create_grid(rows, columns)

    sets: DisjointSet[int] = DisjointSet()
    next_label = 0
    labels: list[int | None] = [None] * columns

    for row in range(rows):
        for col in range(columns):
            if labels[col] is None:
                labels[col] = next_label
                sets.add(next_label)
                next_label += 1

        last_row = row == rows - 1
        for col in range(columns - 1):
            if sets.connected(labels[col], labels[col + 1]):
                continue
            if last_row or rng.random() < bias:
                sets.union(labels[col], labels[col + 1])
                grid.clear_wall_between(Position(row, col), Position(row, col + 1))

        if last_row:
            break

        members: dict[int, list[int]] = defaultdict(list)
        for col in range(columns):
            members[sets.find(labels[col])].append(col)

        below: list[int | None] = [None] * columns
        for cols in members.values():
            count = max(1, math.ceil(len(cols) * branching))
            for col in rng.sample(cols, min(count, len(cols))):
                grid.clear_wall_between(Position(row, col), Position(row + 1, col))
                below[col] = labels[col]
        labels = below

    logger.debug(f"Eller's carved {rows}x{columns} (bias={bias:.2f}, branching={branching:.2f})")
    return grid
