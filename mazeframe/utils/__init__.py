"""Shared utilities: exceptions, logging and union-find."""

from .disjoint_set import DisjointSet
from .exceptions import (
    EntranceExitNotFoundError,
    MazeConfigurationError,
    MazeError,
    SearchExhaustedError,
    UnsupportedFrameError,
    validate_dimensions,
    validate_percentage,
)
from .maze_logging import configure_logging, get_logger

__all__ = [
    "DisjointSet",
    "EntranceExitNotFoundError",
    "MazeConfigurationError",
    "MazeError",
    "SearchExhaustedError",
    "UnsupportedFrameError",
    "configure_logging",
    "get_logger",
    "validate_dimensions",
    "validate_percentage",
]
