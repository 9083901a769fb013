"""
Regular-polygon geometry for polygon-framed mazes.

Coordinates are screen-style: x grows to the right (columns) and y grows
downward (rows). A cell (row, col) of size ``cell_size`` has its center at
((col + 0.5) * cell_size, (row + 0.5) * cell_size).
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np
from scipy import ndimage

from mazeframe.core.grid import Direction, Position

if TYPE_CHECKING:
    from numpy.typing import NDArray

# 4-connected structuring element
_CROSS = np.array([[0, 1, 0], [1, 1, 1], [0, 1, 0]], dtype=bool)


def polygon_vertices(sides: int, radius: float, center_x: float, center_y: float) -> NDArray[np.floating]:
    """
    Vertices of a regular polygon with its first vertex at the top.

    Args:
        sides: Number of sides (>= 3)
        radius: Circumradius
        center_x: Center x coordinate
        center_y: Center y coordinate

    Returns:
        Array of shape (sides, 2) holding (x, y) pairs
    """
    if sides < 3:
        raise ValueError(f"A polygon needs at least 3 sides, got {sides}")
    angles = np.arange(sides) * (2 * np.pi / sides) - np.pi / 2
    return np.column_stack([center_x + radius * np.cos(angles), center_y + radius * np.sin(angles)])


def frame_vertices(rows: int, columns: int, sides: int, cell_size: float = 1.0) -> NDArray[np.floating]:
    """Polygon inscribed at 0.8x the smaller half-extent of a rows x columns canvas."""
    width = columns * cell_size
    height = rows * cell_size
    radius = min(width, height) / 2 * 0.8
    return polygon_vertices(sides, radius, width / 2, height / 2)


def point_in_polygon(x: float, y: float, vertices: NDArray[np.floating]) -> bool:
    """Ray-casting inclusion test for a single point."""
    return bool(_ray_cast(np.array([[x, y]], dtype=float), np.asarray(vertices, dtype=float))[0])


def _ray_cast(points: NDArray[np.floating], vertices: NDArray[np.floating]) -> NDArray[np.bool_]:
    n = len(vertices)
    inside = np.zeros(len(points), dtype=bool)

    j = n - 1
    for i in range(n):
        xi, yi = vertices[i]
        xj, yj = vertices[j]

        # Check if ray from point crosses edge
        cond1 = (yi > points[:, 1]) != (yj > points[:, 1])
        slope = (xj - xi) / (yj - yi + 1e-15)
        cond2 = points[:, 0] < (slope * (points[:, 1] - yi) + xi)

        inside ^= cond1 & cond2
        j = i

    return inside


def polygon_mask(
    rows: int,
    columns: int,
    vertices: NDArray[np.floating],
    cell_size: float = 1.0,
) -> NDArray[np.bool_]:
    """
    Validity mask of the cells whose centers fall inside a polygon.

    Args:
        rows: Number of rows
        columns: Number of columns
        vertices: Polygon vertices as array of shape (n_vertices, 2)
        cell_size: Cell edge length in the vertices' units

    Returns:
        Boolean mask of shape (rows, columns)
    """
    vertices = np.asarray(vertices, dtype=float)
    xs = (np.arange(columns) + 0.5) * cell_size
    ys = (np.arange(rows) + 0.5) * cell_size
    X, Y = np.meshgrid(xs, ys, indexing="xy")
    points = np.column_stack([X.ravel(), Y.ravel()])
    return _ray_cast(points, vertices).reshape(rows, columns)


def largest_component(mask: NDArray[np.bool_]) -> NDArray[np.bool_]:
    """Keep only the largest 4-connected region of a mask."""
    labels, count = ndimage.label(mask, structure=_CROSS)
    if count <= 1:
        return mask.copy()
    sizes = np.bincount(labels.ravel())
    sizes[0] = 0
    return labels == int(np.argmax(sizes))


def edge_cells(mask: NDArray[np.bool_]) -> list[Position]:
    """
    Valid cells with at least one 4-neighbor outside the mask.

    Positions beyond the array border count as outside.

    Returns:
        Edge positions in row-major order
    """
    interior = ndimage.binary_erosion(mask, structure=_CROSS, border_value=0)
    rows, cols = np.nonzero(mask & ~interior)
    return [Position(int(r), int(c)) for r, c in zip(rows, cols)]


def distance_to_segment(px: float, py: float, x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance from a point to the segment (x1, y1)-(x2, y2)."""
    dx, dy = x2 - x1, y2 - y1
    length_sq = dx * dx + dy * dy
    t = ((px - x1) * dx + (py - y1) * dy) / length_sq if length_sq else -1.0
    t = min(max(t, 0.0), 1.0)
    return math.hypot(px - (x1 + t * dx), py - (y1 + t * dy))


def nearest_polygon_side(x: float, y: float, vertices: NDArray[np.floating]) -> Direction:
    """
    Compass direction from a point toward the closest polygon side.

    The closest point on the nearest side is found and the offset to it is
    snapped to the dominant axis (y grows southward).
    """
    vertices = np.asarray(vertices, dtype=float)
    n = len(vertices)
    best = min(
        range(n),
        key=lambda i: distance_to_segment(x, y, *vertices[i], *vertices[(i + 1) % n]),
    )
    (x1, y1), (x2, y2) = vertices[best], vertices[(best + 1) % n]

    dx, dy = x2 - x1, y2 - y1
    length_sq = dx * dx + dy * dy
    t = ((x - x1) * dx + (y - y1) * dy) / length_sq if length_sq else 0.0
    t = min(max(t, 0.0), 1.0)
    off_x, off_y = x1 + t * dx - x, y1 + t * dy - y

    if abs(off_x) >= abs(off_y):
        return Direction.EAST if off_x >= 0 else Direction.WEST
    return Direction.SOUTH if off_y >= 0 else Direction.NORTH
