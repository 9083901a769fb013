"""
Unit tests for the instant solver, neighbor rules and A* repair search.
"""

import pytest

import numpy as np

from mazeframe.core.grid import Grid, Position
from mazeframe.solvers import (
    astar_path,
    carve_path,
    find_solution_path,
    is_reachable,
    manhattan,
    solve_instant,
    valid_moves,
)
from mazeframe.utils.exceptions import EntranceExitNotFoundError, SearchExhaustedError


def _assert_valid_path(grid, path):
    assert len(set(path)) == len(path)
    for a, b in zip(path, path[1:]):
        assert manhattan(a, b) == 1
        assert grid.is_open_between(a, b)


class TestValidMoves:
    def test_order_and_walls(self):
        grid = Grid(3, 3, walls_present=False)
        assert valid_moves(grid, Position(1, 1)) == [
            Position(0, 1),
            Position(2, 1),
            Position(1, 2),
            Position(1, 0),
        ]

    def test_visited_excluded(self):
        grid = Grid(1, 3, walls_present=False)
        assert valid_moves(grid, Position(0, 1), {Position(0, 0)}) == [Position(0, 2)]

    def test_one_sided_wall_blocks(self):
        grid = Grid(1, 2)
        grid[Position(0, 0)].east_wall = False
        assert valid_moves(grid, Position(0, 0)) == []

    def test_invalid_cells_blocked(self):
        grid = Grid(1, 3, walls_present=False)
        grid.mask = np.array([[True, False, True]])
        assert valid_moves(grid, Position(0, 0)) == []

    def test_opening_out_of_grid_ignored(self, open_corridor):
        open_corridor[Position(0, 0)].west_wall = False
        assert valid_moves(open_corridor, Position(0, 0)) == [Position(0, 1)]


class TestFindSolutionPath:
    def test_corridor(self, open_corridor):
        assert find_solution_path(open_corridor) == [Position(0, c) for c in range(4)]

    def test_generated_maze(self, small_maze):
        path = find_solution_path(small_maze)

        assert path[0] == small_maze.find_entrance()
        assert path[-1] == small_maze.find_exit()
        _assert_valid_path(small_maze, path)

    def test_single_path(self, single_path_grid):
        path = find_solution_path(single_path_grid)
        assert len(path) == 9
        assert path[-1] == Position(2, 2)

    def test_explicit_endpoints(self, small_maze):
        path = find_solution_path(small_maze, Position(0, 0), Position(9, 9))
        assert path[0] == Position(0, 0)
        assert path[-1] == Position(9, 9)

    def test_does_not_modify_grid(self, small_maze):
        before = small_maze.wall_state()
        find_solution_path(small_maze)
        np.testing.assert_array_equal(before, small_maze.wall_state())
        assert not any(small_maze[p].is_solution for p in small_maze.positions())

    def test_missing_entrance(self):
        with pytest.raises(EntranceExitNotFoundError):
            find_solution_path(Grid(2, 2))

    def test_exhausted(self):
        grid = Grid(1, 3)
        grid[Position(0, 0)].is_entrance = True
        grid[Position(0, 2)].is_exit = True
        with pytest.raises(SearchExhaustedError):
            find_solution_path(grid)


class TestSolveInstant:
    def test_marks_exactly_the_path(self, small_maze):
        path = solve_instant(small_maze)
        marked = {p for p in small_maze.positions() if small_maze[p].is_solution}
        assert marked == set(path)

    def test_clears_previous_marks(self, small_maze):
        stray = Position(5, 5)
        small_maze[stray].is_solution = True
        path = solve_instant(small_maze)
        assert small_maze[stray].is_solution == (stray in path)

    def test_walls_untouched(self, small_maze):
        before = small_maze.wall_state()
        solve_instant(small_maze)
        np.testing.assert_array_equal(before, small_maze.wall_state())


class TestAStar:
    """Test the lattice A* used to repair connectivity."""

    def test_ignores_walls_by_default(self):
        grid = Grid(4, 4)
        path = astar_path(grid, Position(0, 0), Position(3, 3))

        assert path is not None
        assert len(path) == 7
        assert path[0] == Position(0, 0) and path[-1] == Position(3, 3)

    def test_respects_walls(self, open_corridor):
        assert astar_path(open_corridor, Position(0, 0), Position(0, 3), respect_walls=True) == [
            Position(0, c) for c in range(4)
        ]
        assert astar_path(Grid(2, 2), Position(0, 0), Position(1, 1), respect_walls=True) is None

    def test_routes_around_mask(self):
        grid = Grid(3, 3)
        grid.mask[1, :2] = False
        path = astar_path(grid, Position(0, 0), Position(2, 0))

        assert path is not None
        assert all(grid.is_valid(*p) for p in path)
        assert len(path) == 7

    def test_unreachable_through_mask(self):
        grid = Grid(3, 3)
        grid.mask[1, :] = False
        assert astar_path(grid, Position(0, 0), Position(2, 2)) is None

    def test_start_is_goal(self):
        assert astar_path(Grid(2, 2), Position(1, 1), Position(1, 1)) == [Position(1, 1)]

    def test_carve_repairs_connectivity(self):
        grid = Grid(5, 5)
        start, goal = Position(0, 0), Position(4, 4)
        assert not is_reachable(grid, start, goal)

        opened = carve_path(grid, astar_path(grid, start, goal))

        assert opened == 8
        assert is_reachable(grid, start, goal)
        assert carve_path(grid, astar_path(grid, start, goal)) == 0
