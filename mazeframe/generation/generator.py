"""
Dispatcher over the generation algorithm library.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from mazeframe.generation.aldous_broder import aldous_broder
from mazeframe.generation.base import MazeAlgorithm, make_rng
from mazeframe.generation.binary_tree import binary_tree
from mazeframe.generation.ellers import ellers
from mazeframe.generation.hunt_and_kill import hunt_and_kill
from mazeframe.generation.kruskals import kruskals
from mazeframe.generation.prims import prims
from mazeframe.generation.recursive_backtracker import recursive_backtracker
from mazeframe.generation.recursive_division import recursive_division
from mazeframe.generation.sidewinder import sidewinder
from mazeframe.generation.wilsons import wilsons
from mazeframe.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from mazeframe.config.core import MazeSettings
    from mazeframe.core.grid import Grid

logger = get_logger(__name__)


def generate_grid(
    algorithm: MazeAlgorithm | str,
    rows: int,
    columns: int,
    settings: MazeSettings | None = None,
    *,
    rng: random.Random | int | None = None,
) -> Grid:
    """
    Run one generation algorithm with the parameters it understands.

    Args:
        algorithm: Algorithm enum member or name
        rows: Number of rows
        columns: Number of columns
        settings: Generation parameters (defaults to ``MazeSettings()``)
        rng: Random source or integer seed

    Returns:
        Freshly carved grid
    """
    if settings is None:
        from mazeframe.config.core import MazeSettings

        settings = MazeSettings()

    algorithm = MazeAlgorithm.parse(algorithm)
    rng = make_rng(rng)
    bias = settings.horizontal_bias
    branching = settings.branching_probability
    dead_ends = settings.dead_end_density

    logger.debug(f"Generating {rows}x{columns} maze with {algorithm.value}")

    if algorithm == MazeAlgorithm.BINARY_TREE:
        return binary_tree(rows, columns, bias, rng=rng)
    elif algorithm == MazeAlgorithm.SIDEWINDER:
        return sidewinder(rows, columns, bias, branching, rng=rng)
    elif algorithm == MazeAlgorithm.RECURSIVE_BACKTRACKER:
        return recursive_backtracker(rows, columns, branching, dead_ends, rng=rng)
    elif algorithm == MazeAlgorithm.PRIMS:
        return prims(rows, columns, branching, rng=rng)
    elif algorithm == MazeAlgorithm.RECURSIVE_DIVISION:
        return recursive_division(rows, columns, bias, rng=rng)
    elif algorithm == MazeAlgorithm.HUNT_AND_KILL:
        return hunt_and_kill(rows, columns, branching, dead_ends, rng=rng)
    elif algorithm == MazeAlgorithm.ELLERS:
        return ellers(rows, columns, bias, branching, rng=rng)
    elif algorithm == MazeAlgorithm.KRUSKALS:
        return kruskals(rows, columns, rng=rng)
    elif algorithm == MazeAlgorithm.WILSONS:
        return wilsons(rows, columns, rng=rng)
    elif algorithm == MazeAlgorithm.ALDOUS_BRODER:
        return aldous_broder(rows, columns, rng=rng)
    else:
        raise ValueError(f"Unknown algorithm: {algorithm}")


class MazeGenerator:
    """
    Rectangular maze generator over the ten-algorithm library.

    Example:
        >>> generator = MazeGenerator(10, 10, MazeAlgorithm.KRUSKALS)
        >>> grid = generator.generate(seed=42)
    """

    def __init__(
        self,
        rows: int,
        columns: int,
        algorithm: MazeAlgorithm | str = MazeAlgorithm.RECURSIVE_BACKTRACKER,
        settings: MazeSettings | None = None,
    ):
        """
        Initialize maze generator.

        Args:
            rows: Number of rows in maze
            columns: Number of columns in maze
            algorithm: Algorithm to use for generation
            settings: Generation parameters
        """
        self.rows = rows
        self.columns = columns
        self.algorithm = MazeAlgorithm.parse(algorithm)
        self.settings = settings

    def generate(self, seed: int | None = None, rng: random.Random | None = None) -> Grid:
        """
        Generate a maze.

        Args:
            seed: Random seed for reproducibility (ignored when ``rng`` is given)
            rng: Explicit random source

        Returns:
            Generated maze grid
        """
        return generate_grid(
            self.algorithm,
            self.rows,
            self.columns,
            self.settings,
            rng=rng if rng is not None else make_rng(seed),
        )
