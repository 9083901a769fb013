"""
Maze configuration: pydantic settings models, presets and YAML I/O.
"""

from .core import FrameSettings, MazeConfig, MazeSettings, SolverSettings
from .io import load_maze_config, save_maze_config, validate_yaml_config
from .presets import ALGORITHM_DESCRIPTIONS, ALGORITHM_PRESETS, apply_preset, describe_algorithm

__all__ = [
    "ALGORITHM_DESCRIPTIONS",
    "ALGORITHM_PRESETS",
    "FrameSettings",
    "MazeConfig",
    "MazeSettings",
    "SolverSettings",
    "apply_preset",
    "describe_algorithm",
    "load_maze_config",
    "save_maze_config",
    "validate_yaml_config",
]
