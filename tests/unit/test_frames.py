"""
Unit tests for frame adaptation: polygon, circular and text framings.
"""

import random

import pytest

import numpy as np

from mazeframe.core.analysis import is_wall_symmetric, reachable_from
from mazeframe.core.grid import Direction, Grid, Position
from mazeframe.generation import generate_grid, kruskals, recursive_backtracker
from mazeframe.geometry.frames import (
    FrameType,
    adapt_to_circular,
    adapt_to_polygon,
    apply_mask,
    build_text_maze,
    circular_dimensions,
    join_stranded_regions,
)
from mazeframe.geometry.polygon import edge_cells
from mazeframe.solvers.search import find_solution_path
from mazeframe.utils.exceptions import EntranceExitNotFoundError


def _opening_faces_outside(grid, pos):
    cell = grid[pos]
    for direction in Direction:
        if cell.has_wall(direction):
            continue
        nxt = grid.neighbor(pos, direction)
        if nxt is None or not grid.is_valid(*nxt):
            return True
    return False


class TestApplyMask:
    def test_outside_cells_and_closed_boundary(self):
        grid = Grid(3, 3, walls_present=False)
        mask = np.zeros((3, 3), dtype=bool)
        mask[1, :] = True
        apply_mask(grid, mask)

        assert grid[Position(0, 0)].visited
        assert grid[Position(0, 0)].wall_count == 0
        middle = grid[Position(1, 1)]
        assert middle.north_wall and middle.south_wall
        assert not middle.east_wall and not middle.west_wall
        assert is_wall_symmetric(grid)

    def test_mask_is_copied(self):
        grid = Grid(2, 2)
        mask = np.ones((2, 2), dtype=bool)
        apply_mask(grid, mask)
        mask[0, 0] = False
        assert grid.is_valid(0, 0)


class TestJoinStrandedRegions:
    def test_joins_everything(self):
        grid = Grid(3, 3)
        opened = join_stranded_regions(grid, Position(0, 0), random.Random(0))

        assert opened == 8
        assert len(reachable_from(grid, Position(0, 0))) == 9

    def test_connected_grid_untouched(self, small_maze):
        assert join_stranded_regions(small_maze, Position(0, 0)) == 0


class TestPolygonFrame:
    """Test fitting rectangular mazes into regular polygons."""

    def test_hexagon_entrance_reaches_exit(self):
        """A 10x10 hexagon with west entrance and east exit stays solvable."""
        rng = random.Random(5)
        grid = recursive_backtracker(10, 10, rng=rng)
        adapt_to_polygon(grid, 6, entrance_position="west", exit_position="east", rng=rng)

        entrance, exit_ = grid.find_entrance(), grid.find_exit()
        assert entrance is not None and exit_ is not None
        assert entrance != exit_
        assert exit_ in reachable_from(grid, entrance)

    @pytest.mark.parametrize("sides", [3, 4, 5, 6, 8, 10])
    def test_every_valid_cell_reachable(self, sides, seeded_rng):
        grid = generate_grid("prims", 14, 14, rng=seeded_rng)
        adapt_to_polygon(grid, sides, rng=seeded_rng)

        entrance = grid.find_entrance()
        assert len(reachable_from(grid, entrance)) == int(grid.mask.sum())
        assert is_wall_symmetric(grid)

    def test_openings_on_mask_edge(self, seeded_rng):
        grid = kruskals(12, 12, rng=seeded_rng)
        adapt_to_polygon(grid, 6, rng=seeded_rng)
        edges = edge_cells(grid.mask)

        for pos in (grid.find_entrance(), grid.find_exit()):
            assert pos in edges
            assert _opening_faces_outside(grid, pos)

    def test_directional_preference(self, rng):
        grid = kruskals(12, 12, rng=rng)
        adapt_to_polygon(grid, 4, entrance_position="west", exit_position="east", rng=rng)
        valid_cols = np.nonzero(grid.mask.any(axis=0))[0]

        assert grid.find_entrance().col == valid_cols.min()
        assert grid.find_exit().col == valid_cols.max()

    def test_outside_cells_nulled(self, rng):
        grid = kruskals(10, 10, rng=rng)
        adapt_to_polygon(grid, 6, rng=rng)

        assert not grid.is_valid(0, 0)
        assert grid[Position(0, 0)].wall_count == 0
        assert grid[Position(0, 0)].visited

    def test_too_small_for_exit(self, rng):
        grid = kruskals(1, 1, rng=rng)
        with pytest.raises(EntranceExitNotFoundError):
            adapt_to_polygon(grid, 6, rng=rng)


class TestCircularFrame:
    """Test reinterpretation of a rectangle as concentric rings."""

    @pytest.mark.parametrize(
        ("rows", "columns", "expected"),
        [(10, 10, (4, 10)), (2, 3, (1, 4)), (21, 16, (9, 16))],
    )
    def test_dimensions(self, rows, columns, expected):
        assert circular_dimensions(rows, columns) == expected

    def test_entrance_exit_on_outer_ring(self, rng):
        grid = adapt_to_circular(kruskals(4, 8, rng=rng))

        assert grid.find_entrance() == Position(3, 2)
        assert grid.find_exit() == Position(3, 6)
        assert not grid[Position(3, 2)].south_wall
        assert not grid[Position(3, 6)].south_wall

    def test_hub_and_wrap_walls(self, rng):
        grid = adapt_to_circular(kruskals(3, 6, rng=rng))

        assert grid.wrap_columns
        assert all(cell.north_wall for cell in grid.cells[0])
        for ring in range(3):
            assert grid.cells[ring][0].west_wall == grid.cells[ring][5].east_wall
        assert is_wall_symmetric(grid)

    def test_solvable(self, seeded_rng):
        rings, sectors = circular_dimensions(12, 12)
        grid = adapt_to_circular(generate_grid("wilsons", rings, sectors, rng=seeded_rng))
        path = find_solution_path(grid)

        assert path[0] == grid.find_entrance()
        assert path[-1] == grid.find_exit()

    def test_wrap_passage_is_walkable(self):
        grid = Grid(1, 4)
        grid.clear_wall_between(Position(0, 0), Position(0, 1))
        grid.clear_wall_between(Position(0, 2), Position(0, 3))
        grid.cells[0][3].east_wall = False
        adapt_to_circular(grid)

        path = find_solution_path(grid, Position(0, 1), Position(0, 2))
        assert path == [Position(0, 1), Position(0, 0), Position(0, 3), Position(0, 2)]


class TestTextFrame:
    def test_shape_and_openings(self):
        grid = build_text_maze("MAZE", 30)

        assert grid.shape == (30, 200)
        entrance, exit_ = grid.find_entrance(), grid.find_exit()
        assert not grid[entrance].west_wall
        assert not grid[exit_].east_wall
        assert grid.is_valid(*entrance) and grid.is_valid(*exit_)

        glyph_columns = grid.mask.any(axis=0).nonzero()[0]
        assert entrance.col == glyph_columns[0]
        assert exit_.col == glyph_columns[-1]

    def test_glyph_pixels_are_open_to_each_other(self):
        grid = build_text_maze("T", 30)

        for pos in grid.valid_positions():
            for direction in (Direction.SOUTH, Direction.EAST):
                nxt = grid.neighbor(pos, direction)
                if nxt is not None and grid.is_valid(*nxt):
                    assert grid.is_open_between(pos, nxt)

    def test_outside_cells_pre_visited(self):
        grid = build_text_maze("I", 30)
        assert all(grid[pos].visited for pos in grid.positions() if not grid.mask[pos.row, pos.col])

    def test_single_stroke_is_connected(self):
        grid = build_text_maze("I", 40)
        assert grid.find_exit() in reachable_from(grid, grid.find_entrance())

    def test_letter_distance_widens_grid(self):
        default = build_text_maze("HI", 30)
        spaced = build_text_maze("HI", 30, letter_distance=20)

        assert default.shape == (30, 100)
        assert spaced.shape == (30, 112)
        assert spaced.find_entrance() is not None and spaced.find_exit() is not None

    def test_blank_text_raises(self):
        with pytest.raises(EntranceExitNotFoundError):
            build_text_maze("   ", 30)


def test_frame_type_values():
    assert [f.value for f in FrameType] == ["square", "circular", "polygon", "text"]
