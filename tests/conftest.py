# tests/conftest.py
from typing import Callable, Dict

import pytest

from uastar.core.grid import GridModel


def _bellman_ford(grid: GridModel) -> Dict[int, float]:
    """Distances from ``grid.start`` by repeated edge relaxation."""

    dist: Dict[int, float] = {grid.to_id(*grid.start): 0.0}
    changed = True
    while changed:
        changed = False
        for cell in list(dist):
            for nid, cost in grid.neighbors(cell):
                nd = dist[cell] + cost
                if nd < dist.get(nid, float("inf")) - 1e-12:
                    dist[nid] = nd
                    changed = True
    return dist


@pytest.fixture
def brute_force() -> Callable[[GridModel], float | None]:
    """Return a function giving the true start->end cost or ``None``."""

    def _solve(grid: GridModel) -> float | None:
        return _bellman_ford(grid).get(grid.to_id(*grid.end))

    return _solve


@pytest.fixture
def open_grid_3x3() -> GridModel:
    return GridModel.fully_connected(3, 3, (0, 0), (2, 2))
