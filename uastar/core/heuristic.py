"""Octile distance heuristic for 8-connected grids."""

from __future__ import annotations

from .grid import SQRT2


class OctileHeuristic:
    """Lower bound on the remaining cost to a fixed target cell.

    Admissible and consistent only for the unit axis / ``sqrt(2)`` diagonal
    cost table in :mod:`uastar.core.grid`.
    """

    __slots__ = ("target_x", "target_y")

    def __init__(self, target_x: int, target_y: int) -> None:
        self.target_x = target_x
        self.target_y = target_y

    def estimate(self, x: int, y: int) -> float:
        dx = abs(x - self.target_x)
        dy = abs(y - self.target_y)
        return min(dx, dy) * SQRT2 + abs(dx - dy)

    __call__ = estimate


__all__ = ["OctileHeuristic"]
