"""Frame geometry: polygon and glyph masks and the frame adapters."""

from .frames import (
    FrameType,
    adapt_to_circular,
    adapt_to_polygon,
    apply_mask,
    build_text_maze,
    circular_dimensions,
    join_stranded_regions,
)
from .polygon import (
    distance_to_segment,
    edge_cells,
    frame_vertices,
    largest_component,
    nearest_polygon_side,
    point_in_polygon,
    polygon_mask,
    polygon_vertices,
)
from .text_mask import CELLS_PER_LETTER, rasterize_text, text_maze_dimensions

__all__ = [
    "CELLS_PER_LETTER",
    "FrameType",
    "adapt_to_circular",
    "adapt_to_polygon",
    "apply_mask",
    "build_text_maze",
    "circular_dimensions",
    "distance_to_segment",
    "edge_cells",
    "frame_vertices",
    "join_stranded_regions",
    "largest_component",
    "nearest_polygon_side",
    "point_in_polygon",
    "polygon_mask",
    "polygon_vertices",
    "rasterize_text",
    "text_maze_dimensions",
]
