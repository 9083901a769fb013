"""
Frame adaptation: fitting rectangular mazes onto non-rectangular framings.

- polygon: mask the rectangle with a regular polygon, place the entrance and
  exit on the mask's edge, then repair connectivity
- circular: reinterpret a rings x sectors rectangle as concentric rings with
  sector wraparound
- text: carve directly over a rasterized glyph mask
"""

from __future__ import annotations

import random
from enum import Enum
from typing import TYPE_CHECKING

from mazeframe.core.analysis import reachable_from
from mazeframe.core.grid import CARDINALS, Cell, Direction, Grid, Position
from mazeframe.generation.base import make_rng
from mazeframe.geometry.polygon import (
    edge_cells,
    frame_vertices,
    largest_component,
    nearest_polygon_side,
    polygon_mask,
)
from mazeframe.geometry.text_mask import DEFAULT_LETTER_DISTANCE, rasterize_text, text_canvas_width
from mazeframe.postprocessing.openings import edge_position, mark_opening
from mazeframe.solvers.astar import astar_path, carve_path
from mazeframe.utils.exceptions import EntranceExitNotFoundError, SearchExhaustedError
from mazeframe.utils.maze_logging import get_logger

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import NDArray

logger = get_logger(__name__)


class FrameType(Enum):
    """Spatial framings a maze can be generated in."""

    SQUARE = "square"
    CIRCULAR = "circular"
    POLYGON = "polygon"
    TEXT = "text"


def apply_mask(grid: Grid, mask: NDArray[np.bool_]) -> Grid:
    """
    Restrict a grid to a validity mask, in place.

    Cells outside the mask become open, pre-visited outside cells; valid cells
    keep their carving but get their walls toward outside cells restored so
    the shape is closed.
    """
    grid.mask = mask.copy()
    for pos in grid.positions():
        if not mask[pos.row, pos.col]:
            grid[pos] = Cell.outside()

    for pos in grid.valid_positions():
        cell = grid[pos]
        for direction in CARDINALS:
            nxt = grid.neighbor(pos, direction)
            if nxt is not None and not mask[nxt.row, nxt.col]:
                cell.set_wall(direction, True)
    return grid


def _opening_side(grid: Grid, pos: Position, vertices, cell_size: float) -> Direction:
    """Side to open for an edge cell: toward the nearest polygon side if that faces outside."""
    center_x = (pos.col + 0.5) * cell_size
    center_y = (pos.row + 0.5) * cell_size
    preferred = nearest_polygon_side(center_x, center_y, vertices)

    candidates = (preferred, *(d for d in CARDINALS if d is not preferred))
    for direction in candidates:
        nxt = grid.neighbor(pos, direction)
        if nxt is None or not grid.is_valid(*nxt):
            return direction
    return preferred


def join_stranded_regions(grid: Grid, start: Position, rng: random.Random | None = None) -> int:
    """
    Open walls until every valid cell is reachable from ``start``.

    Each round attaches the first unreached valid cell (row-major) that
    borders the reached region to a random reached neighbor.

    Returns:
        Number of walls opened
    """
    rng = make_rng(rng)
    opened = 0
    reached = reachable_from(grid, start)
    total = int(grid.mask.sum())

    while len(reached) < total:
        joined = False
        for pos in grid.valid_positions():
            if pos in reached:
                continue
            anchors = [n for n in grid.neighbors(pos) if n in reached]
            if anchors:
                grid.clear_wall_between(pos, rng.choice(anchors))
                opened += 1
                joined = True
                break
        if not joined:
            break
        reached = reachable_from(grid, start)

    if opened:
        logger.debug(f"Joined {opened} stranded regions")
    return opened


def adapt_to_polygon(
    grid: Grid,
    sides: int,
    cell_size: float = 30,
    entrance_position: str = "west",
    exit_position: str = "east",
    rng: random.Random | None = None,
) -> Grid:
    """
    Fit a rectangular maze into a regular polygon.

    Steps:
    1. Mask cells whose centers lie inside the polygon (largest connected
       region only)
    2. Null out cells outside the mask and close the shape boundary
    3. Choose entrance and exit among the edge cells and open the wall toward
       the nearest polygon side
    4. If the exit is unreachable from the entrance, carve the A* lattice
       path between them
    5. Join any region still unreachable from the entrance

    Args:
        grid: Rectangular maze to adapt in place
        sides: Number of polygon sides
        cell_size: Cell edge length used for the polygon geometry
        entrance_position: Entrance preference
        exit_position: Exit preference (may be ``farthest``)
        rng: Random source

    Returns:
        The adapted grid
    """
    rng = make_rng(rng)
    rows, cols = grid.shape
    vertices = frame_vertices(rows, cols, sides, cell_size)
    mask = largest_component(polygon_mask(rows, cols, vertices, cell_size))
    apply_mask(grid, mask)
    logger.debug(f"Polygon mask ({sides} sides) keeps {int(mask.sum())} of {rows * cols} cells")

    edges = edge_cells(mask)
    if not edges:
        raise EntranceExitNotFoundError("entrance", "polygon", component="frames", valid_cells=int(mask.sum()))
    entrance = edge_position(edges, entrance_position, rng)
    remaining = [p for p in edges if p != entrance]
    if not remaining:
        raise EntranceExitNotFoundError("exit", "polygon", component="frames", edge_cells=len(edges))
    exit_ = edge_position(remaining, exit_position, rng, reference=entrance)

    mark_opening(grid, entrance, _opening_side(grid, entrance, vertices, cell_size), entrance=True)
    mark_opening(grid, exit_, _opening_side(grid, exit_, vertices, cell_size), entrance=False)

    if exit_ not in reachable_from(grid, entrance):
        path = astar_path(grid, entrance, exit_)
        if path is None:
            logger.error("No lattice path between polygon entrance and exit")
            raise SearchExhaustedError(entrance, exit_, int(mask.sum()), component="frames")
        opened = carve_path(grid, path)
        logger.warning(f"Polygon entrance and exit were disconnected; carved {opened} walls along A* path")

    join_stranded_regions(grid, entrance, rng)
    return grid


def circular_dimensions(rows: int, columns: int) -> tuple[int, int]:
    """Rings and sectors for a circular frame; one ring is reserved for the hub."""
    return max(2, rows // 2) - 1, max(4, columns)


def adapt_to_circular(grid: Grid) -> Grid:
    """
    Reinterpret a rings x sectors maze as concentric rings, in place.

    Row index is the ring (0 = innermost, next to the hub) and column index
    is the sector. The last and first sectors become adjacent, ring 0's north
    wall stays closed as the hub boundary, and the entrance and exit sit on
    the outermost ring at a quarter and three quarters of the way round with
    their outward (south) walls open.
    """
    rings, sectors = grid.shape
    grid.wrap_columns = True

    for ring in range(rings):
        first = grid.cells[ring][0]
        last = grid.cells[ring][sectors - 1]
        first.west_wall = last.east_wall
    for cell in grid.cells[0]:
        cell.north_wall = True

    outer = rings - 1
    entrance = Position(outer, int(sectors * 0.25))
    exit_ = Position(outer, int(sectors * 0.75))
    mark_opening(grid, entrance, Direction.SOUTH, entrance=True)
    mark_opening(grid, exit_, Direction.SOUTH, entrance=False)

    logger.debug(f"Circular frame: {rings} rings x {sectors} sectors")
    return grid


def _scan_column(mask: NDArray[np.bool_], col: int) -> int:
    rows = mask.shape[0]
    middle = rows // 2
    for offset in range(rows // 2 + 1):
        for row in (middle + offset, middle - offset):
            if 0 <= row < rows and mask[row, col]:
                return row
    return middle


def build_text_maze(text: str, rows: int, letter_distance: float = DEFAULT_LETTER_DISTANCE) -> Grid:
    """
    Carve a maze over a glyph mask.

    No generation algorithm is involved: every wall between two adjacent
    glyph pixels is cleared. The entrance is on the first column containing
    glyph pixels and the exit on the last, each at the pixel nearest the
    vertical middle.

    Args:
        text: String to draw
        rows: Raster height (glyph height is 0.8x this)
        letter_distance: Letter spacing setting

    Returns:
        Grid of shape (rows, 50 * len(text)) with the glyph mask, wider when
        ``letter_distance`` exceeds the default
    """
    width = text_canvas_width(text, rows, letter_distance)
    mask = rasterize_text(text, rows, width, letter_distance)
    grid = Grid(rows, width, mask=mask)

    for pos in grid.positions():
        if not mask[pos.row, pos.col]:
            grid[pos] = Cell.outside()

    for pos in grid.valid_positions():
        for direction in (Direction.SOUTH, Direction.EAST):
            nxt = grid.neighbor(pos, direction)
            if nxt is not None and mask[nxt.row, nxt.col]:
                grid.clear_wall_between(pos, nxt)

    columns_with_glyphs = mask.any(axis=0).nonzero()[0]
    if len(columns_with_glyphs) == 0:
        raise EntranceExitNotFoundError("entrance", "text", component="frames", text=text)

    first_col = int(columns_with_glyphs[0])
    last_col = int(columns_with_glyphs[-1])
    entrance = Position(_scan_column(mask, first_col), first_col)
    exit_ = Position(_scan_column(mask, last_col), last_col)
    mark_opening(grid, entrance, Direction.WEST, entrance=True)
    mark_opening(grid, exit_, Direction.EAST, entrance=False)

    if exit_ not in reachable_from(grid, entrance):
        logger.warning(f"Text maze {text!r}: exit is not reachable from entrance (glyphs are not joined)")
    return grid
