"""
Generation pipeline and engine facade.

A maze request runs generate -> symmetry -> frame adaptation -> entrance/exit
on a freshly created grid. Failures are raised as ``MazeError`` inside the
pipeline and stopped at this boundary: they are logged once and surface as a
``None`` result, so callers never receive a half-built grid.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mazeframe.config.core import MazeConfig
from mazeframe.core.analysis import verify_perfect_maze
from mazeframe.generation.base import MazeAlgorithm, make_rng
from mazeframe.generation.generator import generate_grid
from mazeframe.geometry.frames import (
    FrameType,
    adapt_to_circular,
    adapt_to_polygon,
    build_text_maze,
    circular_dimensions,
)
from mazeframe.postprocessing.openings import place_entrance_exit
from mazeframe.postprocessing.symmetry import apply_symmetry
from mazeframe.solvers.animated import AnimatedSolver, SearchState
from mazeframe.solvers.search import solve_instant
from mazeframe.utils.exceptions import MazeError, UnsupportedFrameError, validate_dimensions
from mazeframe.utils.maze_logging import LoggedOperation, get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from mazeframe.core.grid import Grid, Position

logger = get_logger(__name__)


@dataclass
class MazeResult:
    """
    A finalized maze.

    Attributes:
        grid: Finalized grid
        frame_type: Framing the grid was built for
        algorithm: Generation algorithm (None for text frames, which carve
            directly over the glyph mask)
        entrance: Entrance position
        exit: Exit position
    """

    grid: Grid
    frame_type: FrameType
    algorithm: MazeAlgorithm | None
    entrance: Position | None
    exit: Position | None

    def verify(self) -> dict:
        return verify_perfect_maze(self.grid)


def _frame_type(value: str) -> FrameType:
    try:
        return FrameType(value)
    except ValueError:
        raise UnsupportedFrameError(str(value), component="pipeline") from None


def build_maze(config: MazeConfig, rng: random.Random) -> MazeResult:
    """
    Run the full pipeline, raising ``MazeError`` on failure.

    Args:
        config: Maze request
        rng: Random source for every stage

    Returns:
        Finalized maze
    """
    frame = config.frame
    settings = config.maze
    frame_type = _frame_type(frame.frame_type)
    validate_dimensions(frame.rows, frame.columns, component="pipeline")
    algorithm: MazeAlgorithm | None = config.algorithm

    if frame_type == FrameType.TEXT:
        algorithm = None
        grid = build_text_maze(frame.text, frame.rows, frame.letter_distance)
    elif frame_type == FrameType.CIRCULAR:
        rings, sectors = circular_dimensions(frame.rows, frame.columns)
        grid = generate_grid(config.algorithm, rings, sectors, settings, rng=rng)
        grid = apply_symmetry(grid, settings.symmetry)
        grid = adapt_to_circular(grid)
    elif frame_type == FrameType.POLYGON:
        grid = generate_grid(config.algorithm, frame.rows, frame.columns, settings, rng=rng)
        grid = apply_symmetry(grid, settings.symmetry)
        grid = adapt_to_polygon(
            grid,
            frame.polygon_sides,
            frame.cell_size,
            settings.entrance_position,
            settings.exit_position,
            rng,
        )
    else:
        grid = generate_grid(config.algorithm, frame.rows, frame.columns, settings, rng=rng)
        grid = apply_symmetry(grid, settings.symmetry)
        place_entrance_exit(grid, settings.entrance_position, settings.exit_position, rng)

    grid.reset_visited()
    return MazeResult(grid, frame_type, algorithm, grid.find_entrance(), grid.find_exit())


def generate_maze(config: MazeConfig | None = None, rng: random.Random | None = None) -> MazeResult | None:
    """
    Generate a finalized maze.

    Args:
        config: Maze request (defaults to ``MazeConfig()``)
        rng: Random source; when omitted one is seeded from ``config.seed``

    Returns:
        The maze, or None if generation failed (the error is logged)
    """
    config = config if config is not None else MazeConfig()
    rng = rng if rng is not None else make_rng(config.seed)
    label = f"{config.frame.frame_type} maze ({config.algorithm.value})"

    try:
        with LoggedOperation(logger, f"generate {label}"):
            result = build_maze(config, rng)
    except MazeError as e:
        logger.error(f"Maze generation failed: {e}")
        return None

    logger.info(f"Generated {label}: {result.grid.rows}x{result.grid.cols}")
    return result


class MazeEngine:
    """
    Stateful facade used by a UI layer: generate, solve, show/clear solution.

    The engine owns the current grid and at most one animated search. A new
    generation or solve cancels the in-flight search first, and a failed
    generation keeps the previous grid.

    Example:
        >>> engine = MazeEngine(MazeConfig(algorithm="prims"), on_path=print)
        >>> engine.generate()
        >>> asyncio.run(engine.solve())
    """

    def __init__(
        self,
        config: MazeConfig | None = None,
        on_path: Callable[[list[Position]], None] | None = None,
    ):
        self.config = config if config is not None else MazeConfig()
        self.on_path = on_path
        self.result: MazeResult | None = None
        self.solution_shown = False
        self._solver: AnimatedSolver | None = None

    @property
    def grid(self) -> Grid | None:
        return self.result.grid if self.result is not None else None

    @property
    def solving(self) -> bool:
        return self._solver is not None and self._solver.running

    def generate(self, config: MazeConfig | None = None, rng: random.Random | None = None) -> MazeResult | None:
        """
        Replace the current maze with a freshly generated one.

        Any animated search on the old grid is signalled to stop; it reports
        nothing further. Use ``regenerate`` from async code to also wait for
        it to unwind.

        Returns:
            The new maze, or None (previous maze kept) on failure
        """
        if config is not None:
            self.config = config
        if self._solver is not None:
            self._solver.request_cancel()

        result = generate_maze(self.config, rng)
        if result is None:
            return None

        self.result = result
        self.solution_shown = False
        self._solver = None
        return result

    async def regenerate(self, config: MazeConfig | None = None, rng: random.Random | None = None) -> MazeResult | None:
        await self.stop_solving()
        return self.generate(config, rng)

    async def solve(self) -> SearchState | None:
        """
        Animate a depth-first search on the current maze.

        Path updates go to ``on_path``. Returns the terminal search state, or
        None when there is no maze or it has no entrance/exit.
        """
        if self.grid is None:
            logger.warning("solve() called before a maze was generated")
            return None

        await self.stop_solving()
        self.clear_solution()
        self._solver = AnimatedSolver(self.grid, self.on_path, speed=self.config.solver.speed)

        try:
            state = await self._solver.solve()
        except MazeError as e:
            logger.error(f"Solving failed: {e}")
            return None

        if state == SearchState.EXHAUSTED:
            logger.error("Animated search found no path; the maze violates its connectivity invariant")
        return state

    async def stop_solving(self) -> None:
        """Cancel the animated search, wait for it to unwind and report an empty path once."""
        if self._solver is None or not self._solver.running:
            return
        await self._solver.cancel()
        if self.on_path is not None:
            self.on_path([])

    def show_solution(self) -> list[Position] | None:
        """
        Mark the entrance-to-exit path on the grid.

        Returns:
            The marked path, or None if there is nothing to solve
        """
        if self.grid is None:
            return None
        try:
            path = solve_instant(self.grid)
        except MazeError as e:
            logger.error(f"Instant solve failed: {e}")
            return None
        self.solution_shown = True
        return path

    def clear_solution(self) -> None:
        if self.grid is not None:
            self.grid.clear_solution()
        self.solution_shown = False

    def toggle_solution(self) -> bool:
        """Show the solution if hidden, hide it if shown; returns the new flag."""
        if self.solution_shown:
            self.clear_solution()
        else:
            self.show_solution()
        return self.solution_shown
