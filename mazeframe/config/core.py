"""
Core maze configuration classes.

Configurations specify the generation parameters, frame and solver settings
of a maze request. They are plain pydantic models, so they validate on
construction and serialize to YAML through ``mazeframe.config.io``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from mazeframe.generation.base import MazeAlgorithm

if TYPE_CHECKING:
    from pathlib import Path

EntrancePosition = Literal["north", "south", "east", "west", "random"]
ExitPosition = Literal["north", "south", "east", "west", "random", "farthest"]
SymmetryMode = Literal["none", "horizontal", "vertical", "both"]
FrameKind = Literal["square", "circular", "polygon", "text"]


class MazeSettings(BaseModel):
    """
    Generation parameters shared by every algorithm.

    Attributes
    ----------
    horizontal_bias : float
        Probability (0-100) of the horizontal choice: carving east (Binary
        Tree, Sidewinder), a horizontal dividing wall (Recursive Division) or
        a horizontal merge (Eller's) (default: 90)
    branching_probability : float
        Probability (0-100) gating branching decisions (default: 90)
    dead_end_density : float
        Probability (0-100) that a dead end is kept by the dead-end post-pass
        (default: 50)
    entrance_position : EntrancePosition
        Boundary the entrance is placed on (default: west)
    exit_position : ExitPosition
        Boundary the exit is placed on, or ``farthest`` (default: east)
    symmetry : SymmetryMode
        Mirror symmetry applied after generation (default: none)
    """

    horizontal_bias: float = Field(default=90, ge=0, le=100)
    branching_probability: float = Field(default=90, ge=0, le=100)
    dead_end_density: float = Field(default=50, ge=0, le=100)
    entrance_position: EntrancePosition = "west"
    exit_position: ExitPosition = "east"
    symmetry: SymmetryMode = "none"


class FrameSettings(BaseModel):
    """
    Spatial framing of the maze.

    Attributes
    ----------
    frame_type : FrameKind
        ``square``, ``circular``, ``polygon`` or ``text`` (default: square)
    rows : int
        Grid rows; for text frames the raster height (default: 10)
    columns : int
        Grid columns; sectors for circular frames (default: 10)
    cell_size : float
        Cell edge length used by polygon geometry (default: 30)
    polygon_sides : int
        Sides of the polygon frame, 3-10 (default: 6)
    text : str
        String drawn by the text frame (default: "MAZE")
    letter_distance : float
        Spacing between glyphs of the text frame; larger values push letters
        apart and widen the raster (default: 5)
    """

    frame_type: FrameKind = "square"
    rows: int = Field(default=10, ge=1)
    columns: int = Field(default=10, ge=1)
    cell_size: float = Field(default=30, gt=0)
    polygon_sides: int = Field(default=6, ge=3, le=10)
    text: str = "MAZE"
    letter_distance: float = Field(default=5, ge=0)

    @model_validator(mode="after")
    def validate_text(self) -> FrameSettings:
        """Text frames need something to draw."""
        if self.frame_type == "text" and not self.text.strip():
            raise ValueError("text must be non-empty for the text frame")
        return self


class SolverSettings(BaseModel):
    """
    Animated solver settings.

    Attributes
    ----------
    speed : int
        1-100; each step waits ``101 - speed`` milliseconds (default: 50)
    """

    speed: int = Field(default=50, ge=1, le=100)


class MazeConfig(BaseModel):
    """
    Complete maze request.

    Examples
    --------
    >>> config = MazeConfig(algorithm="kruskals", frame=FrameSettings(rows=20, columns=20))
    >>> config.to_yaml("mazes/kruskals.yaml")
    """

    algorithm: MazeAlgorithm = MazeAlgorithm.RECURSIVE_BACKTRACKER
    maze: MazeSettings = Field(default_factory=MazeSettings)
    frame: FrameSettings = Field(default_factory=FrameSettings)
    solver: SolverSettings = Field(default_factory=SolverSettings)
    seed: int | None = None

    @field_validator("algorithm", mode="before")
    @classmethod
    def parse_algorithm(cls, value):
        """Accept kebab-case, snake_case or enum member names."""
        if isinstance(value, str):
            return MazeAlgorithm.parse(value)
        return value

    def to_yaml(self, path: str | Path) -> None:
        from .io import save_maze_config

        save_maze_config(self, path)

    @classmethod
    def from_yaml(cls, path: str | Path) -> MazeConfig:
        from .io import load_maze_config

        return load_maze_config(path)
