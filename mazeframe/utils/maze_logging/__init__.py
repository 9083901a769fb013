"""
Logging utilities for mazeframe.

Example:
    >>> from mazeframe.utils.maze_logging import get_logger, configure_logging
    >>> configure_logging(level="INFO", use_colors=True)
    >>> logger = get_logger(__name__)
    >>> logger.info("Generating maze")
"""

from .logger import (
    LoggedOperation,
    MazeFormatter,
    MazeLogger,
    configure_development_logging,
    configure_logging,
    configure_production_logging,
    get_logger,
)

__all__ = [
    "LoggedOperation",
    "MazeFormatter",
    "MazeLogger",
    "configure_development_logging",
    "configure_logging",
    "configure_production_logging",
    "get_logger",
]
