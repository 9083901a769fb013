"""
Command-line interface for mazeframe.

Generates and solves mazes from the terminal, printing them as ASCII art.
"""

import asyncio
import sys

import click

from mazeframe import __version__
from mazeframe.config import ALGORITHM_DESCRIPTIONS, MazeConfig, load_maze_config, save_maze_config
from mazeframe.core.analysis import maze_to_string
from mazeframe.generation.base import MazeAlgorithm
from mazeframe.pipeline import MazeEngine
from mazeframe.solvers.animated import SearchState
from mazeframe.utils.maze_logging import configure_logging

ALGORITHM_NAMES = [algorithm.value for algorithm in MazeAlgorithm]
FRAME_NAMES = ["square", "circular", "polygon", "text"]
POSITIONS = ["north", "south", "east", "west", "random"]


def maze_options(func):
    """Options shared by ``generate`` and ``solve``."""
    options = [
        click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="YAML config to start from"),
        click.option("--algorithm", "-a", type=click.Choice(ALGORITHM_NAMES), default=None, help="Algorithm"),
        click.option("--frame", "-f", type=click.Choice(FRAME_NAMES), default=None, help="Frame type"),
        click.option("--rows", "-r", type=int, default=None, help="Number of rows (rings for circular)"),
        click.option("--columns", "-k", type=int, default=None, help="Number of columns (sectors for circular)"),
        click.option("--sides", type=int, default=None, help="Polygon sides"),
        click.option("--text", "-t", type=str, default=None, help="Text for the text frame"),
        click.option("--entrance", type=click.Choice(POSITIONS), default=None, help="Entrance position"),
        click.option("--exit", "exit_", type=click.Choice([*POSITIONS, "farthest"]), default=None, help="Exit side"),
        click.option(
            "--symmetry", type=click.Choice(["none", "horizontal", "vertical", "both"]), default=None, help="Symmetry"
        ),
        click.option("--seed", "-s", type=int, default=None, help="Random seed"),
        click.option("--save-config", type=click.Path(), default=None, help="Write the resolved config to YAML"),
        click.option("--verbose", "-v", is_flag=True, help="Enable debug logging"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _resolve_config(config_path, algorithm, frame, rows, columns, sides, text, entrance, exit_, symmetry, seed):
    config = load_maze_config(config_path) if config_path else MazeConfig()
    data = config.model_dump()

    if algorithm is not None:
        data["algorithm"] = algorithm
    if seed is not None:
        data["seed"] = seed
    frame_overrides = {"frame_type": frame, "rows": rows, "columns": columns, "polygon_sides": sides, "text": text}
    data["frame"].update({k: v for k, v in frame_overrides.items() if v is not None})
    maze_overrides = {"entrance_position": entrance, "exit_position": exit_, "symmetry": symmetry}
    data["maze"].update({k: v for k, v in maze_overrides.items() if v is not None})

    return MazeConfig.model_validate(data)


def _build_engine(verbose, save_config, **options) -> MazeEngine:
    configure_logging(level="DEBUG" if verbose else "WARNING")
    try:
        config = _resolve_config(**options)
    except ValueError as e:
        click.echo(f"Error: invalid configuration - {e}", err=True)
        sys.exit(2)

    if save_config:
        save_maze_config(config, save_config)
        click.echo(f"Saved configuration to: {save_config}")

    engine = MazeEngine(config)
    if engine.generate() is None:
        click.echo("Error: maze generation failed (see log output)", err=True)
        sys.exit(1)
    return engine


@click.group()
@click.version_option(version=__version__, prog_name="mazeframe")
def main():
    """
    mazeframe: procedural maze generation over square, circular, polygon
    and text framings.
    """


@main.command()
@maze_options
def generate(
    config_path,
    algorithm,
    frame,
    rows,
    columns,
    sides,
    text,
    entrance,
    exit_,
    symmetry,
    seed,
    save_config,
    verbose,
):
    """
    Generate a maze and print it as ASCII art.

    Examples:
        mazeframe generate --algorithm kruskals --rows 8 --columns 12
        mazeframe generate -f polygon --sides 6 -r 16 -k 16 --seed 3
    """
    engine = _build_engine(
        verbose,
        save_config,
        config_path=config_path,
        algorithm=algorithm,
        frame=frame,
        rows=rows,
        columns=columns,
        sides=sides,
        text=text,
        entrance=entrance,
        exit_=exit_,
        symmetry=symmetry,
        seed=seed,
    )
    click.echo(maze_to_string(engine.grid))


@main.command()
@maze_options
@click.option("--animate", is_flag=True, help="Run the animated search instead of the instant solver")
@click.option("--speed", type=click.IntRange(1, 100), default=100, help="Animation speed (1-100)")
def solve(
    config_path,
    algorithm,
    frame,
    rows,
    columns,
    sides,
    text,
    entrance,
    exit_,
    symmetry,
    seed,
    save_config,
    verbose,
    animate,
    speed,
):
    """
    Generate a maze, solve it and print it with the solution marked.

    Examples:
        mazeframe solve --algorithm wilsons --seed 7
        mazeframe solve --animate --speed 100
    """
    engine = _build_engine(
        verbose,
        save_config,
        config_path=config_path,
        algorithm=algorithm,
        frame=frame,
        rows=rows,
        columns=columns,
        sides=sides,
        text=text,
        entrance=entrance,
        exit_=exit_,
        symmetry=symmetry,
        seed=seed,
    )

    if animate:
        steps = []
        engine.on_path = steps.append
        engine.config.solver.speed = speed
        state = asyncio.run(engine.solve())
        if state != SearchState.FOUND:
            click.echo(f"Error: animated search ended in state {state.value if state else 'failed'}", err=True)
            sys.exit(1)
        for pos in steps[-1]:
            engine.grid[pos].is_solution = True
        click.echo(f"Animated search reported {len(steps)} path updates")
        path = steps[-1]
    else:
        path = engine.show_solution()
        if path is None:
            click.echo("Error: no solution found (see log output)", err=True)
            sys.exit(1)

    click.echo(maze_to_string(engine.grid))
    click.echo(f"Solution length: {len(path)} cells")


@main.command()
def algorithms():
    """List the generation algorithms and the parameters that affect them."""
    for algorithm in MazeAlgorithm:
        description = ALGORITHM_DESCRIPTIONS[algorithm].replace("\n\n", " ")
        click.echo(f"{algorithm.value:<22} {description}")


if __name__ == "__main__":
    main()
