"""Result equivalence checks between independent solvers."""

from __future__ import annotations

from typing import Sequence

from ..core.grid import Coord, GridModel
from .base_solver import SolveResult


FLOAT_EPS = 1e-4


def float_equal(a: float, b: float, eps: float = FLOAT_EPS) -> bool:
    """Compare two distances with a relative tolerance for long paths."""

    return abs(a - b) <= eps * max(1.0, abs(a), abs(b))


def results_match(a: SolveResult, b: SolveResult, eps: float = FLOAT_EPS) -> bool:
    """Return ``True`` if both solvers agree on success and distance.

    Paths are not compared since several optimal paths may exist.
    """

    if a.success != b.success:
        return False
    if not a.success:
        return True
    return float_equal(a.optimal, b.optimal, eps)


def is_valid_path(grid: GridModel, path: Sequence[Coord]) -> bool:
    """Check that every consecutive pair in ``path`` is an edge of ``grid``."""

    if not path:
        return False
    if not all(grid.in_range(*p) for p in path):
        return False
    return all(grid.has_edge(a, b) for a, b in zip(path, path[1:]))


def path_cost(grid: GridModel, path: Sequence[Coord]) -> float:
    return sum(grid.edge_cost(a, b) for a, b in zip(path, path[1:]))


__all__ = ["FLOAT_EPS", "float_equal", "is_valid_path", "path_cost", "results_match"]
