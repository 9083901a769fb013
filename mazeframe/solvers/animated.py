"""
Animated, cancellable depth-first solver.

The search runs as an asyncio task. After every path extension it reports a
copy of the current path to a caller-supplied callback and suspends for
``101 - speed`` milliseconds. Cancellation is cooperative: the token is
checked before each extension and raced against every suspension, and a
cancelled search unwinds without reporting anything further.

State machine:
    IDLE -> SEARCHING -> FOUND | EXHAUSTED | CANCELLED
"""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import TYPE_CHECKING

from mazeframe.solvers.moves import valid_moves
from mazeframe.solvers.search import locate_endpoints
from mazeframe.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from mazeframe.core.grid import Grid, Position

logger = get_logger(__name__)


class SearchState(Enum):
    """Lifecycle of an animated search."""

    IDLE = "idle"
    SEARCHING = "searching"
    FOUND = "found"
    EXHAUSTED = "exhausted"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (SearchState.FOUND, SearchState.EXHAUSTED, SearchState.CANCELLED)


class CancellationToken:
    """One-shot cancellation signal polled by the animated solver."""

    def __init__(self):
        self._event = asyncio.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    async def sleep(self, seconds: float) -> bool:
        """
        Suspend for ``seconds`` unless cancelled first.

        Returns:
            True if the token was cancelled before or during the wait
        """
        if self.cancelled:
            return True
        try:
            await asyncio.wait_for(self._event.wait(), timeout=seconds)
        except asyncio.TimeoutError:
            return False
        return True


def step_delay(speed: int) -> float:
    """Suspension between extensions, in seconds, for a 1-100 speed."""
    if not 1 <= speed <= 100:
        raise ValueError(f"speed must be in [1, 100], got {speed}")
    return (101 - speed) / 1000.0


class AnimatedSolver:
    """
    Step-by-step depth-first solver for visualization.

    Only one search runs at a time: starting a new one first cancels the
    in-flight search and waits for it to unwind.

    Example:
        >>> solver = AnimatedSolver(grid, on_path=renderer.draw_path, speed=80)
        >>> state = await solver.solve()
    """

    def __init__(
        self,
        grid: Grid,
        on_path: Callable[[list[Position]], None] | None = None,
        speed: int = 50,
    ):
        self.grid = grid
        self.on_path = on_path
        self.speed = speed
        self.state = SearchState.IDLE
        self.path: list[Position] = []
        self._token: CancellationToken | None = None
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def _report(self, path: list[Position]) -> None:
        self.path = list(path)
        if self.on_path is not None:
            self.on_path(list(path))

    async def start(self) -> asyncio.Task:
        """Cancel any running search, then launch a new one as a task."""
        await self.cancel()
        delay = step_delay(self.speed)
        self._token = CancellationToken()
        self._task = asyncio.create_task(self._search(self._token, delay))
        return self._task

    async def solve(self) -> SearchState:
        """Run a search to completion and return its terminal state."""
        task = await self.start()
        return await task

    def request_cancel(self) -> None:
        """Signal the running search without waiting; it stops at its next check."""
        if self._token is not None:
            self._token.cancel()

    async def cancel(self) -> None:
        """Signal the running search (if any) and wait until it has unwound."""
        if self._token is not None:
            self._token.cancel()
        if self._task is not None and not self._task.done():
            await self._task

    async def _search(self, token: CancellationToken, delay: float) -> SearchState:
        start, goal = locate_endpoints(self.grid, None, None)
        if token.cancelled:
            self.state = SearchState.CANCELLED
            return self.state
        self.state = SearchState.SEARCHING
        logger.debug(f"Animated search from {tuple(start)} to {tuple(goal)} (delay={delay * 1000:.0f}ms)")

        visited = {start}
        path = [start]
        pending = [iter(valid_moves(self.grid, start, visited))]
        self._report(path)

        while path:
            if token.cancelled:
                self.state = SearchState.CANCELLED
                logger.debug("Animated search cancelled")
                return self.state

            if path[-1] == goal:
                self.state = SearchState.FOUND
                self._report(path)
                logger.info(f"Animated search reached the exit in {len(path)} cells")
                return self.state

            nxt = next(pending[-1], None)
            if nxt is None:
                path.pop()
                pending.pop()
                if path:
                    self._report(path)
                continue
            if nxt in visited:
                continue

            visited.add(nxt)
            path.append(nxt)
            pending.append(iter(valid_moves(self.grid, nxt, visited)))
            self._report(path)

            if await token.sleep(delay):
                self.state = SearchState.CANCELLED
                logger.debug("Animated search cancelled")
                return self.state

        self.state = SearchState.EXHAUSTED
        logger.error(f"Animated search exhausted {len(visited)} cells without reaching {tuple(goal)}")
        return self.state
