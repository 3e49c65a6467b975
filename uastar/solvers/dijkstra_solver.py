"""Heuristic-free reference solver used to cross-check :class:`CPUSolver`."""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Dict, List, Tuple

from ..core.grid import Coord, GridModel
from .base_solver import BaseSolver, SolveResult


class DijkstraSolver(BaseSolver):
    """Plain Dijkstra with dictionaries keyed by cell id."""

    name = "Dijkstra"

    def __init__(self) -> None:
        self.grid: GridModel | None = None
        self._start: Coord = (0, 0)
        self._goal: Coord = (0, 0)
        self._ready = False

    def initialize(
        self, grid: GridModel, start: Coord | None = None, end: Coord | None = None
    ) -> None:
        self.grid = grid
        self._start = grid.start if start is None else start
        self._goal = grid.end if end is None else end
        if not grid.in_range(*self._start) or not grid.in_range(*self._goal):
            raise ValueError("start/end outside grid")
        self._ready = True

    def solve(self) -> SolveResult:
        if not self._ready or self.grid is None:
            raise RuntimeError("solve() called before initialize()")
        self._ready = False
        grid = self.grid

        start_id = grid.to_id(*self._start)
        goal_id = grid.to_id(*self._goal)
        dist: Dict[int, float] = {start_id: 0.0}
        came_from: Dict[int, int] = {}
        done: set[int] = set()
        open_set: List[Tuple[float, int]] = [(0.0, start_id)]

        while open_set:
            d, current = heappop(open_set)
            if current in done:
                continue
            done.add(current)
            if current == goal_id:
                return SolveResult(True, d, self._reconstruct(came_from, current))
            for nid, cost in grid.neighbors(current):
                nd = d + cost
                if nd < dist.get(nid, float("inf")):
                    dist[nid] = nd
                    came_from[nid] = current
                    heappush(open_set, (nd, nid))

        return SolveResult(success=False)

    def _reconstruct(self, came_from: Dict[int, int], current: int) -> List[Coord]:
        assert self.grid is not None
        path = [self.grid.to_xy(current)]
        while current in came_from:
            current = came_from[current]
            path.append(self.grid.to_xy(current))
        path.reverse()
        return path


__all__ = ["DijkstraSolver"]
