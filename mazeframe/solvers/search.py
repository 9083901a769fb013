"""
Instant depth-first solver.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mazeframe.solvers.moves import valid_moves
from mazeframe.utils.exceptions import EntranceExitNotFoundError, SearchExhaustedError
from mazeframe.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from mazeframe.core.grid import Grid, Position

logger = get_logger(__name__)


def locate_endpoints(grid: Grid, start: Position | None, goal: Position | None) -> tuple[Position, Position]:
    """Resolve start/goal, defaulting to the marked entrance and exit cells."""
    frame_type = "circular" if grid.wrap_columns else "rectangular"
    start = start if start is not None else grid.find_entrance()
    if start is None:
        raise EntranceExitNotFoundError("entrance", frame_type, component="solver")
    goal = goal if goal is not None else grid.find_exit()
    if goal is None:
        raise EntranceExitNotFoundError("exit", frame_type, component="solver")
    return start, goal


def find_solution_path(
    grid: Grid,
    start: Position | None = None,
    goal: Position | None = None,
) -> list[Position]:
    """
    Depth-first path from entrance to exit.

    Explores neighbors in north, south, east, west order with an explicit
    stack; the stack itself is the current path.

    Args:
        grid: Maze grid (not modified)
        start: Start position (defaults to the entrance cell)
        goal: Goal position (defaults to the exit cell)

    Returns:
        Path from start to goal inclusive

    Raises:
        EntranceExitNotFoundError: No entrance or exit is marked
        SearchExhaustedError: The goal cannot be reached
    """
    start, goal = locate_endpoints(grid, start, goal)

    visited = {start}
    path = [start]
    pending = [iter(valid_moves(grid, start, visited))]

    while path:
        if path[-1] == goal:
            return path

        nxt = next(pending[-1], None)
        if nxt is None:
            path.pop()
            pending.pop()
            continue
        if nxt in visited:
            continue

        visited.add(nxt)
        path.append(nxt)
        pending.append(iter(valid_moves(grid, nxt, visited)))

    logger.error(f"Solver exhausted {len(visited)} cells without reaching {tuple(goal)}")
    raise SearchExhaustedError(start, goal, len(visited), component="solver")


def solve_instant(grid: Grid) -> list[Position]:
    """
    Mark the entrance-to-exit path with ``is_solution`` in one pass.

    Walls are never touched; any previous solution marks are cleared first.

    Returns:
        The marked path
    """
    path = find_solution_path(grid)
    grid.clear_solution()
    for pos in path:
        grid[pos].is_solution = True
    logger.debug(f"Instant solve marked {len(path)} cells")
    return path
