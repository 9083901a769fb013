"""Entrance/exit placement and mirror symmetry."""

from .openings import (
    ENTRANCE_POSITIONS,
    EXIT_POSITIONS,
    boundary_position,
    boundary_side,
    edge_position,
    farthest_position,
    mark_opening,
    place_entrance_exit,
)
from .symmetry import Symmetry, apply_symmetry, reflect_grid

__all__ = [
    "ENTRANCE_POSITIONS",
    "EXIT_POSITIONS",
    "Symmetry",
    "apply_symmetry",
    "boundary_position",
    "boundary_side",
    "edge_position",
    "farthest_position",
    "mark_opening",
    "place_entrance_exit",
    "reflect_grid",
]
