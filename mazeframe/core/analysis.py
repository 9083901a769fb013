"""
Structural checks and text rendering for maze grids.

These helpers back the connectivity, wall-symmetry and perfect-maze checks
used by the frame adapter, the pipeline and the test suite.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from mazeframe.core.grid import Direction, Position

if TYPE_CHECKING:
    from mazeframe.core.grid import Grid


def _adjacent_pairs(grid: Grid):
    """Yield each pair of grid-adjacent cells once, as (a, b, direction from a)."""
    for pos in grid.positions():
        for direction in (Direction.SOUTH, Direction.EAST):
            nxt = grid.neighbor(pos, direction)
            if nxt is None or nxt == pos:
                continue
            if direction is Direction.EAST and grid.cols == 2 and grid.wrap_columns and pos.col == 1:
                continue
            yield pos, nxt, direction


def reachable_from(grid: Grid, start: Position) -> set[Position]:
    """
    Breadth-first set of valid cells reachable from ``start`` through cleared walls.

    Args:
        grid: Maze grid
        start: Starting position (must be a valid cell)

    Returns:
        Set of reachable positions, including ``start``
    """
    seen = {start}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        cell = grid[current]
        for direction in Direction:
            if cell.has_wall(direction):
                continue
            nxt = grid.neighbor(current, direction)
            if nxt is None or nxt in seen or not grid.is_valid(*nxt):
                continue
            if grid[nxt].has_wall(direction.opposite):
                continue
            seen.add(nxt)
            queue.append(nxt)

    return seen


def is_wall_symmetric(grid: Grid) -> bool:
    """
    Check the wall-symmetry invariant between every pair of adjacent valid cells.

    Pairs touching a cell outside the validity mask are skipped: masked-out
    cells are open on all sides while their valid neighbors keep the
    boundary wall.
    """
    for a, b, direction in _adjacent_pairs(grid):
        if not (grid.is_valid(*a) and grid.is_valid(*b)):
            continue
        if grid[a].has_wall(direction) != grid[b].has_wall(direction.opposite):
            return False
    return True


def count_passages(grid: Grid) -> int:
    """Number of cleared wall pairs between adjacent valid cells."""
    count = 0
    for a, b, direction in _adjacent_pairs(grid):
        if not (grid.is_valid(*a) and grid.is_valid(*b)):
            continue
        if not grid[a].has_wall(direction) and not grid[b].has_wall(direction.opposite):
            count += 1
    return count


def verify_perfect_maze(grid: Grid) -> dict:
    """
    Verify that a maze is perfect (fully connected, no loops).

    A perfect maze must satisfy:
    1. Connectivity: All valid cells reachable from any valid cell
    2. Acyclicity: Exactly (n-1) passages for n valid cells

    Args:
        grid: Maze grid to verify

    Returns:
        Dictionary with verification results including:
        - is_perfect: Overall validity
        - is_connected: Connectivity check
        - is_no_loops: Acyclicity check
        - visited_cells: Number of reachable cells
        - total_cells: Total number of valid cells
        - passage_count: Number of passages
        - expected_passages: Expected passages for perfect maze
    """
    valid = list(grid.valid_positions())
    total_cells = len(valid)
    visited_count = len(reachable_from(grid, valid[0])) if valid else 0
    passage_count = count_passages(grid)
    expected_passages = max(total_cells - 1, 0)

    is_connected = visited_count == total_cells
    is_no_loops = passage_count == expected_passages

    return {
        "is_perfect": is_connected and is_no_loops,
        "is_connected": is_connected,
        "is_no_loops": is_no_loops,
        "visited_cells": visited_count,
        "total_cells": total_cells,
        "passage_count": passage_count,
        "expected_passages": expected_passages,
    }


def maze_to_string(grid: Grid) -> str:
    """
    Render a grid as ASCII art.

    Walls are drawn with ``+---+`` and ``|``; entrance, exit and solution
    cells are marked ``E``, ``X`` and ``*``. Cells outside the validity mask
    render as ``.``.
    """
    rows, cols = grid.shape
    lines = []

    lines.append("".join("+---" if grid.cells[0][c].north_wall else "+   " for c in range(cols)) + "+")

    for r in range(rows):
        line = ""
        for c in range(cols):
            cell = grid.cells[r][c]
            line += "|" if cell.west_wall else " "
            content = "   "
            if not grid.mask[r, c]:
                content = " . "
            if cell.is_solution:
                content = " * "
            if cell.is_entrance:
                content = " E "
            if cell.is_exit:
                content = " X "
            line += content
        line += "|" if grid.cells[r][cols - 1].east_wall else " "
        lines.append(line)

        lines.append("".join("+---" if grid.cells[r][c].south_wall else "+   " for c in range(cols)) + "+")

    return "\n".join(lines)
