"""Maze solvers: instant DFS, animated DFS and A* repair search."""

from .animated import AnimatedSolver, CancellationToken, SearchState, step_delay
from .astar import astar_path, carve_path, is_reachable, manhattan
from .moves import valid_moves
from .search import find_solution_path, solve_instant

__all__ = [
    "AnimatedSolver",
    "CancellationToken",
    "SearchState",
    "astar_path",
    "carve_path",
    "find_solution_path",
    "is_reachable",
    "manhattan",
    "solve_instant",
    "step_delay",
    "valid_moves",
]
