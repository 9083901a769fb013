"""
YAML I/O for maze configurations.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import yaml

if TYPE_CHECKING:
    from .core import MazeConfig


def load_maze_config(path: str | Path) -> MazeConfig:
    """
    Load a maze configuration from a YAML file.

    Parameters
    ----------
    path : str | Path
        Path to YAML configuration file

    Returns
    -------
    MazeConfig
        Validated configuration

    Raises
    ------
    FileNotFoundError
        If configuration file doesn't exist
    ValueError
        If configuration is invalid
    yaml.YAMLError
        If YAML syntax is invalid

    YAML Format
    -----------
    algorithm: kruskals
    seed: 7
    maze:
      entrance_position: north
      exit_position: farthest
    frame:
      frame_type: polygon
      rows: 20
      columns: 20
      polygon_sides: 6
    """
    from .core import MazeConfig

    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Invalid YAML syntax in {path}: {e}") from e

    if data is None:
        data = {}

    try:
        return MazeConfig.model_validate(data)
    except Exception as e:
        raise ValueError(f"Invalid configuration in {path}:\n{e}") from e


def save_maze_config(config: MazeConfig, path: str | Path) -> None:
    """
    Save a maze configuration to a YAML file.

    Parameters
    ----------
    config : MazeConfig
        Configuration to save
    path : str | Path
        Output file path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config.model_dump(exclude_none=True, mode="json")

    with open(path, "w") as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False, indent=2, allow_unicode=True)


def validate_yaml_config(path: str | Path) -> tuple[bool, str]:
    """
    Validate a YAML configuration file.

    Returns
    -------
    tuple[bool, str]
        (is_valid, message)
    """
    try:
        load_maze_config(path)
        return True, "Configuration is valid"
    except FileNotFoundError as e:
        return False, str(e)
    except yaml.YAMLError as e:
        return False, f"YAML syntax error: {e}"
    except ValueError as e:
        return False, f"Validation error: {e}"
