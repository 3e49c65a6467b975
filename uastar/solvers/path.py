"""Predecessor chain walking."""

from __future__ import annotations

from typing import List

from ..core.grid import Coord, GridModel
from ..core.node_table import NodeTable


def reconstruct_path(table: NodeTable, grid: GridModel, index: int) -> List[Coord]:
    """Return coordinates from the start node to the node at ``index``."""

    path: List[Coord] = []
    current: int | None = index
    while current is not None:
        node = table.node(current)
        path.append(grid.to_xy(node.cell_id))
        current = node.predecessor
    path.reverse()
    return path


__all__ = ["reconstruct_path"]
