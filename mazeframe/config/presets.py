"""
Recommended generation parameters per algorithm.

Usage
-----
>>> from mazeframe.config import presets
>>> settings = presets.apply_preset(MazeSettings(), "prims")
"""

from __future__ import annotations

from mazeframe.generation.base import MazeAlgorithm

from .core import MazeSettings

ALGORITHM_PRESETS: dict[MazeAlgorithm, dict[str, float]] = {
    MazeAlgorithm.BINARY_TREE: {"horizontal_bias": 50},
    MazeAlgorithm.SIDEWINDER: {"horizontal_bias": 50, "branching_probability": 80},
    MazeAlgorithm.RECURSIVE_BACKTRACKER: {"branching_probability": 85, "dead_end_density": 30},
    MazeAlgorithm.PRIMS: {"branching_probability": 95},
    MazeAlgorithm.RECURSIVE_DIVISION: {"horizontal_bias": 50},
    MazeAlgorithm.HUNT_AND_KILL: {"branching_probability": 80, "dead_end_density": 40},
    MazeAlgorithm.ELLERS: {"horizontal_bias": 50, "branching_probability": 30},
    MazeAlgorithm.KRUSKALS: {},
    MazeAlgorithm.WILSONS: {},
    MazeAlgorithm.ALDOUS_BRODER: {},
}

ALGORITHM_DESCRIPTIONS: dict[MazeAlgorithm, str] = {
    MazeAlgorithm.BINARY_TREE: (
        "Creates mazes with a clear diagonal bias and straight corridors along two edges.\n\n"
        "Affected by: Horizontal Bias"
    ),
    MazeAlgorithm.SIDEWINDER: (
        "Creates mazes with horizontal corridors and random vertical connections.\n\n"
        "Affected by: Horizontal Bias, Branching Probability"
    ),
    MazeAlgorithm.RECURSIVE_BACKTRACKER: (
        "Creates long, winding corridors with fewer dead ends.\n\nAffected by: Branching Probability, Dead End Density"
    ),
    MazeAlgorithm.PRIMS: (
        "Creates organic-looking mazes with many short dead ends.\n\nAffected by: Branching Probability"
    ),
    MazeAlgorithm.RECURSIVE_DIVISION: (
        "Creates geometric patterns by recursively dividing chambers.\n\nAffected by: Horizontal Bias"
    ),
    MazeAlgorithm.HUNT_AND_KILL: (
        "Balanced algorithm with a mix of corridors and dead ends.\n\n"
        "Affected by: Branching Probability, Dead End Density"
    ),
    MazeAlgorithm.ELLERS: (
        "Builds the maze one row at a time with merging sets.\n\nAffected by: Horizontal Bias, Branching Probability"
    ),
    MazeAlgorithm.KRUSKALS: "Uniform-looking spanning tree from randomly ordered walls.\n\nAffected by: nothing",
    MazeAlgorithm.WILSONS: "Unbiased maze from loop-erased random walks.\n\nAffected by: nothing",
    MazeAlgorithm.ALDOUS_BRODER: "Unbiased maze from a plain random walk; slow on large grids.\n\nAffected by: nothing",
}


def describe_algorithm(algorithm: MazeAlgorithm | str) -> str:
    return ALGORITHM_DESCRIPTIONS[MazeAlgorithm.parse(algorithm)]


def apply_preset(settings: MazeSettings, algorithm: MazeAlgorithm | str) -> MazeSettings:
    """
    Overlay an algorithm's recommended parameters on existing settings.

    Returns
    -------
    MazeSettings
        New settings; entrance, exit and symmetry choices are kept
    """
    return settings.model_copy(update=ALGORITHM_PRESETS[MazeAlgorithm.parse(algorithm)])
