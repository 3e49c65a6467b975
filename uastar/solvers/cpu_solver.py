"""Sequential A* search engine."""

from __future__ import annotations

import enum
import logging
from typing import Set

from ..core.frontier import Frontier
from ..core.grid import Coord, GridModel
from ..core.heuristic import OctileHeuristic
from ..core.node_table import NodeTable
from .base_solver import BaseSolver, SolveResult
from .path import reconstruct_path


logger = logging.getLogger(__name__)


class SolverState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    SOLVING = "solving"
    SOLVED_SUCCESS = "solved_success"
    SOLVED_FAILURE = "solved_failure"


class CPUSolver(BaseSolver):
    """A* over a :class:`GridModel` with an octile heuristic.

    Relaxing a node pushes a fresh frontier entry instead of decreasing the
    key of the old one. Stale entries are dropped when popped because their
    node is already closed.
    """

    name = "CPU"

    def __init__(self) -> None:
        self.grid: GridModel | None = None
        self.nodes = NodeTable()
        self.frontier = Frontier()
        self.closed: Set[int] = set()
        self.heuristic: OctileHeuristic | None = None
        self.target_id: int = -1
        self.state = SolverState.UNINITIALIZED
        self.expanded: int = 0
        self.pushed: int = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize(
        self, grid: GridModel, start: Coord | None = None, end: Coord | None = None
    ) -> None:
        start = grid.start if start is None else start
        end = grid.end if end is None else end
        for name, point in (("start", start), ("end", end)):
            if not grid.in_range(*point):
                raise ValueError(f"{name} point {point} outside grid")

        self.grid = grid
        self.nodes.clear()
        self.frontier.clear()
        self.closed.clear()
        self.expanded = 0
        self.pushed = 0

        self.heuristic = OctileHeuristic(*end)
        self.target_id = grid.to_id(*end)

        start_index = self.nodes.create(grid.to_id(*start), 0.0, None)
        self._push(start_index, start)
        self.state = SolverState.READY

    def solve(self) -> SolveResult:
        if self.state is not SolverState.READY:
            raise RuntimeError(
                f"solve() requires a fresh initialize(); solver is {self.state.value}"
            )
        assert self.grid is not None
        self.state = SolverState.SOLVING
        grid = self.grid
        nodes = self.nodes

        while True:
            index = self._pop_open()
            if index is None:
                self.state = SolverState.SOLVED_FAILURE
                logger.info(
                    "No path to %s after closing %d cells",
                    grid.to_xy(self.target_id),
                    self.expanded,
                )
                return SolveResult(success=False)

            node = nodes.node(index)
            self.closed.add(node.cell_id)
            self.expanded += 1
            logger.debug("close %s g=%.3f", grid.to_xy(node.cell_id), node.distance)

            if node.cell_id == self.target_id:
                self.state = SolverState.SOLVED_SUCCESS
                path = reconstruct_path(nodes, grid, index)
                logger.info(
                    "Path found: distance %.3f, %d steps, %d cells closed",
                    node.distance,
                    len(path),
                    self.expanded,
                )
                return SolveResult(success=True, optimal=node.distance, path=path)

            self._expand(index)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _pop_open(self) -> int | None:
        """Pop the best non-stale entry, or ``None`` once exhausted."""

        while self.frontier:
            _, index = self.frontier.pop()
            if self.nodes.node(index).cell_id not in self.closed:
                return index
        return None

    def _push(self, index: int, coord: Coord) -> None:
        assert self.heuristic is not None
        priority = self.nodes.node(index).distance + self.heuristic.estimate(*coord)
        self.frontier.push(priority, index)
        self.pushed += 1

    def _expand(self, index: int) -> None:
        assert self.grid is not None
        grid = self.grid
        nodes = self.nodes
        distance = nodes.node(index).distance

        for neighbor_id, cost in grid.neighbors(nodes.node(index).cell_id):
            tentative = distance + cost
            existing = nodes.index_of(neighbor_id)
            coord = grid.to_xy(neighbor_id)
            if existing is None:
                new_index = nodes.create(neighbor_id, tentative, index)
                self._push(new_index, coord)
                logger.debug("\tnew %s g=%.3f", coord, tentative)
            elif tentative < nodes.node(existing).distance:
                if neighbor_id in self.closed:
                    # Unreachable with a consistent heuristic.
                    continue
                nodes.relax(existing, tentative, index)
                self._push(existing, coord)
                logger.debug("\tupdate %s g=%.3f", coord, tentative)


__all__ = ["CPUSolver", "SolverState"]
