"""
Maze generation algorithm library.

Each algorithm takes ``rows``, ``columns`` and its 0-100 percentage
parameters, plus a keyword-only ``rng``, and returns a fresh ``Grid``.
"""

from .base import SPANNING_TREE_ALGORITHMS, MazeAlgorithm, make_rng
from .aldous_broder import aldous_broder
from .binary_tree import binary_tree
from .dead_ends import reduce_dead_ends
from .ellers import ellers
from .generator import MazeGenerator, generate_grid
from .hunt_and_kill import hunt_and_kill
from .kruskals import kruskals
from .prims import prims
from .recursive_backtracker import recursive_backtracker
from .recursive_division import recursive_division
from .sidewinder import sidewinder
from .wilsons import wilsons

__all__ = [
    "SPANNING_TREE_ALGORITHMS",
    "MazeAlgorithm",
    "MazeGenerator",
    "aldous_broder",
    "binary_tree",
    "ellers",
    "generate_grid",
    "hunt_and_kill",
    "kruskals",
    "make_rng",
    "prims",
    "recursive_backtracker",
    "recursive_division",
    "reduce_dead_ends",
    "sidewinder",
    "wilsons",
]
