"""Grid data model and structural analysis."""

from .analysis import count_passages, is_wall_symmetric, maze_to_string, reachable_from, verify_perfect_maze
from .grid import CARDINALS, Cell, Direction, Grid, Position, create_grid

__all__ = [
    "CARDINALS",
    "Cell",
    "Direction",
    "Grid",
    "Position",
    "count_passages",
    "create_grid",
    "is_wall_symmetric",
    "maze_to_string",
    "reachable_from",
    "verify_perfect_maze",
]
