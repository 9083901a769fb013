"""
Unit tests for the animated, cancellable solver.

The async API is driven with ``asyncio.run`` from plain test functions.
"""

import asyncio

import pytest

from mazeframe.core.grid import Grid, Position
from mazeframe.solvers.animated import AnimatedSolver, CancellationToken, SearchState, step_delay
from mazeframe.utils.exceptions import EntranceExitNotFoundError


class TestStepDelay:
    @pytest.mark.parametrize(("speed", "expected"), [(1, 0.1), (50, 0.051), (100, 0.001)])
    def test_delay(self, speed, expected):
        assert step_delay(speed) == pytest.approx(expected)

    @pytest.mark.parametrize("speed", [0, 101])
    def test_out_of_range(self, speed):
        with pytest.raises(ValueError):
            step_delay(speed)


class TestCancellationToken:
    def test_sleep_times_out(self):
        async def scenario():
            token = CancellationToken()
            return await token.sleep(0.001)

        assert asyncio.run(scenario()) is False

    def test_sleep_wakes_on_cancel(self):
        async def scenario():
            token = CancellationToken()
            asyncio.get_running_loop().call_later(0.01, token.cancel)
            return await token.sleep(5.0)

        assert asyncio.run(scenario()) is True

    def test_already_cancelled(self):
        async def scenario():
            token = CancellationToken()
            token.cancel()
            return token.cancelled, await token.sleep(5.0)

        assert asyncio.run(scenario()) == (True, True)


class TestAnimatedSolver:
    """Test the step-by-step depth-first search."""

    def test_single_path_maze(self, single_path_grid):
        """The last report ends at the exit and repeats no cell."""
        reports = []
        solver = AnimatedSolver(single_path_grid, on_path=reports.append, speed=100)
        state = asyncio.run(solver.solve())

        assert state is SearchState.FOUND
        final = reports[-1]
        assert final[-1] == single_path_grid.find_exit()
        assert final[0] == single_path_grid.find_entrance()
        assert len(set(final)) == len(final) == 9
        assert solver.path == final

    def test_reports_grow_one_cell_at_a_time(self, single_path_grid):
        reports = []
        asyncio.run(AnimatedSolver(single_path_grid, reports.append, speed=100).solve())

        lengths = [len(r) for r in reports]
        assert lengths[:9] == list(range(1, 10))
        for earlier, later in zip(reports, reports[1:]):
            assert later[: len(earlier)] == earlier or earlier[: len(later)] == later

    def test_reports_are_copies(self, single_path_grid):
        reports = []
        asyncio.run(AnimatedSolver(single_path_grid, reports.append, speed=100).solve())
        assert reports[0] == [Position(0, 0)]

    def test_backtracking_reported(self):
        # Dead-end spur north of the entrance row forces one backtrack
        grid = Grid(2, 3)
        grid.clear_wall_between(Position(1, 0), Position(0, 0))
        grid.clear_wall_between(Position(1, 0), Position(1, 1))
        grid.clear_wall_between(Position(1, 1), Position(1, 2))
        grid[Position(1, 0)].is_entrance = True
        grid[Position(1, 2)].is_exit = True

        reports = []
        state = asyncio.run(AnimatedSolver(grid, reports.append, speed=100).solve())

        assert state is SearchState.FOUND
        assert [Position(1, 0), Position(0, 0)] in reports
        assert reports[-1] == [Position(1, 0), Position(1, 1), Position(1, 2)]

    def test_exhausted(self):
        grid = Grid(1, 3)
        grid[Position(0, 0)].is_entrance = True
        grid[Position(0, 2)].is_exit = True
        solver = AnimatedSolver(grid, speed=100)

        assert asyncio.run(solver.solve()) is SearchState.EXHAUSTED
        assert solver.state is SearchState.EXHAUSTED

    def test_missing_entrance_raises(self):
        with pytest.raises(EntranceExitNotFoundError):
            asyncio.run(AnimatedSolver(Grid(2, 2), speed=100).solve())

    def test_initial_state(self, small_maze):
        solver = AnimatedSolver(small_maze)
        assert solver.state is SearchState.IDLE
        assert not solver.running
        assert not solver.state.is_terminal


class TestCancellation:
    """Test cooperative cancellation of the animated search."""

    def test_cancel_stops_reports(self, small_maze):
        reports = []

        async def scenario():
            solver = AnimatedSolver(small_maze, reports.append, speed=1)
            task = await solver.start()
            await asyncio.sleep(0.05)
            await solver.cancel()
            count = len(reports)
            await asyncio.sleep(0.15)
            return solver, task.result(), count

        solver, state, count = asyncio.run(scenario())

        assert state is SearchState.CANCELLED
        assert state.is_terminal
        assert len(reports) == count
        assert not solver.running

    def test_cancel_before_first_step_reports_nothing(self, small_maze):
        reports = []

        async def scenario():
            solver = AnimatedSolver(small_maze, reports.append, speed=1)
            task = await solver.start()
            solver.request_cancel()
            return await task

        assert asyncio.run(scenario()) is SearchState.CANCELLED
        assert reports == []

    def test_new_start_cancels_previous(self, small_maze):
        async def scenario():
            solver = AnimatedSolver(small_maze, speed=100)
            first = await solver.start()
            await asyncio.sleep(0)
            second = await solver.start()
            return first.result(), await second

        first_state, second_state = asyncio.run(scenario())

        assert first_state is SearchState.CANCELLED
        assert second_state is SearchState.FOUND

    def test_cancel_without_search_is_noop(self, small_maze):
        solver = AnimatedSolver(small_maze)
        asyncio.run(solver.cancel())
        solver.request_cancel()
        assert solver.state is SearchState.IDLE
