"""
Mirror symmetry for maze wall layouts.

``apply_symmetry`` copies the left (top) half of a grid onto its right
(bottom) half with east/west (north/south) walls swapped, so the result is
symmetric about the midline. The mirrored halves are independent copies, so
the result may be disconnected or contain a loop across the midline; this is
logged, not corrected.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import TYPE_CHECKING

from mazeframe.core.analysis import reachable_from
from mazeframe.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from mazeframe.core.grid import Cell, Grid

logger = get_logger(__name__)


class Symmetry(Enum):
    NONE = "none"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    BOTH = "both"


def _swap_east_west(cell: Cell) -> Cell:
    return dataclasses.replace(cell, east_wall=cell.west_wall, west_wall=cell.east_wall)


def _swap_north_south(cell: Cell) -> Cell:
    return dataclasses.replace(cell, north_wall=cell.south_wall, south_wall=cell.north_wall)


def reflect_grid(grid: Grid, axis: Symmetry | str) -> Grid:
    """
    Full mirror image of a grid.

    ``horizontal`` flips columns (left-right), ``vertical`` flips rows
    (top-bottom). Reflecting twice about the same axis returns the original.
    """
    axis = Symmetry(axis)
    result = grid.clone()
    rows, cols = grid.shape

    if axis in (Symmetry.HORIZONTAL, Symmetry.BOTH):
        source = result.clone()
        for row in range(rows):
            for col in range(cols):
                result.cells[row][col] = _swap_east_west(source.cells[row][cols - 1 - col])
        result.mask = result.mask[:, ::-1].copy()

    if axis in (Symmetry.VERTICAL, Symmetry.BOTH):
        source = result.clone()
        for row in range(rows):
            for col in range(cols):
                result.cells[row][col] = _swap_north_south(source.cells[rows - 1 - row][col])
        result.mask = result.mask[::-1, :].copy()

    return result


def _mirror_columns(grid: Grid) -> None:
    rows, cols = grid.shape
    for row in range(rows):
        for col in range(cols // 2):
            grid.cells[row][cols - 1 - col] = _swap_east_west(grid.cells[row][col])
            grid.mask[row, cols - 1 - col] = grid.mask[row, col]
        if cols % 2:
            middle = grid.cells[row][cols // 2]
            middle.east_wall = middle.west_wall


def _mirror_rows(grid: Grid) -> None:
    rows, cols = grid.shape
    for row in range(rows // 2):
        for col in range(cols):
            grid.cells[rows - 1 - row][col] = _swap_north_south(grid.cells[row][col])
            grid.mask[rows - 1 - row, col] = grid.mask[row, col]
    if rows % 2:
        for middle in grid.cells[rows // 2]:
            middle.south_wall = middle.north_wall


def apply_symmetry(grid: Grid, symmetry: Symmetry | str) -> Grid:
    """
    Make a grid mirror-symmetric.

    Args:
        grid: Source grid (not modified)
        symmetry: ``none``, ``horizontal``, ``vertical`` or ``both``

    Returns:
        New symmetric grid; applying the same symmetry again changes nothing
    """
    symmetry = Symmetry(symmetry)
    result = grid.clone()
    if symmetry == Symmetry.NONE:
        return result

    if symmetry in (Symmetry.HORIZONTAL, Symmetry.BOTH):
        _mirror_columns(result)
    if symmetry in (Symmetry.VERTICAL, Symmetry.BOTH):
        _mirror_rows(result)

    valid = list(result.valid_positions())
    if valid and len(reachable_from(result, valid[0])) != len(valid):
        logger.warning(f"{symmetry.value} symmetry left the maze disconnected")
    return result
