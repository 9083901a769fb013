"""
Shared pieces of the generation algorithm library.

Every generator builds a fresh fully-walled (or, for Recursive Division,
fully open) grid, carves it with its own strategy and returns it. Percentage
parameters arrive on the 0-100 scale and are normalized to probabilities
here. Randomness always flows through an injected ``random.Random`` so mazes
can be replayed from a seed.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import TYPE_CHECKING

from mazeframe.core.grid import CARDINALS
from mazeframe.utils.exceptions import validate_dimensions, validate_percentage

if TYPE_CHECKING:
    from mazeframe.core.grid import Grid, Position


class MazeAlgorithm(Enum):
    """Available maze generation algorithms."""

    BINARY_TREE = "binary-tree"
    SIDEWINDER = "sidewinder"
    RECURSIVE_BACKTRACKER = "recursive-backtracker"
    PRIMS = "prims"
    RECURSIVE_DIVISION = "recursive-division"
    HUNT_AND_KILL = "hunt-and-kill"
    ELLERS = "ellers"
    KRUSKALS = "kruskals"
    WILSONS = "wilsons"
    ALDOUS_BRODER = "aldous-broder"

    @classmethod
    def parse(cls, value: str | MazeAlgorithm) -> MazeAlgorithm:
        """Accept an enum member or its name in kebab, snake or upper case."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("_", "-")
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Unknown algorithm: {value}")


# Algorithms that build a spanning tree before any dead-end post-pass
SPANNING_TREE_ALGORITHMS = frozenset(
    {
        MazeAlgorithm.RECURSIVE_BACKTRACKER,
        MazeAlgorithm.PRIMS,
        MazeAlgorithm.KRUSKALS,
        MazeAlgorithm.WILSONS,
        MazeAlgorithm.HUNT_AND_KILL,
        MazeAlgorithm.ALDOUS_BRODER,
    }
)


def make_rng(rng: random.Random | int | None = None) -> random.Random:
    """Return ``rng`` unchanged, or a new generator seeded with it."""
    if isinstance(rng, random.Random):
        return rng
    return random.Random(rng)


def normalize(value: float, name: str) -> float:
    """Validate a 0-100 percentage and scale it to [0, 1]."""
    validate_percentage(value, name, component="generation")
    return value / 100.0


def check_dimensions(rows: int, columns: int) -> None:
    validate_dimensions(rows, columns, component="generation")


def unvisited_neighbors(grid: Grid, pos: Position) -> list[Position]:
    """In-bounds neighbors not yet visited, in north/south/east/west order."""
    result = []
    for direction in CARDINALS:
        nxt = grid.neighbor(pos, direction)
        if nxt is not None and not grid[nxt].visited:
            result.append(nxt)
    return result


def visited_neighbors(grid: Grid, pos: Position) -> list[Position]:
    result = []
    for direction in CARDINALS:
        nxt = grid.neighbor(pos, direction)
        if nxt is not None and grid[nxt].visited:
            result.append(nxt)
    return result
