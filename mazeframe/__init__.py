from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("mazeframe")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

from .config import FrameSettings, MazeConfig, MazeSettings, SolverSettings
from .core import Cell, Direction, Grid, Position, create_grid, maze_to_string, verify_perfect_maze
from .generation import MazeAlgorithm, MazeGenerator, generate_grid
from .geometry import FrameType
from .pipeline import MazeEngine, MazeResult, generate_maze
from .solvers import AnimatedSolver, CancellationToken, SearchState, find_solution_path, solve_instant
from .utils.exceptions import (
    EntranceExitNotFoundError,
    MazeConfigurationError,
    MazeError,
    SearchExhaustedError,
    UnsupportedFrameError,
)
from .utils.maze_logging import configure_logging, get_logger

__all__ = [
    "AnimatedSolver",
    "CancellationToken",
    "Cell",
    "Direction",
    "EntranceExitNotFoundError",
    "FrameSettings",
    "FrameType",
    "Grid",
    "MazeAlgorithm",
    "MazeConfig",
    "MazeConfigurationError",
    "MazeEngine",
    "MazeError",
    "MazeGenerator",
    "MazeResult",
    "MazeSettings",
    "Position",
    "SearchExhaustedError",
    "SearchState",
    "SolverSettings",
    "UnsupportedFrameError",
    "__version__",
    "configure_logging",
    "create_grid",
    "find_solution_path",
    "generate_grid",
    "generate_maze",
    "get_logger",
    "maze_to_string",
    "solve_instant",
    "verify_perfect_maze",
]
