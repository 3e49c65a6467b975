"""Arena of search nodes keyed by cell id."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(slots=True)
class Node:
    """Best known distance to ``cell_id`` and the arena index it came from."""

    cell_id: int
    distance: float
    predecessor: Optional[int] = None


class NodeTable:
    """Owns at most one :class:`Node` per cell id.

    Nodes live in a growable list and refer to their predecessor by list
    index, so the predecessor chain needs no cleanup.
    """

    def __init__(self) -> None:
        self._nodes: List[Node] = []
        self._index: Dict[int, int] = {}

    def clear(self) -> None:
        self._nodes.clear()
        self._index.clear()

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def index_of(self, cell_id: int) -> Optional[int]:
        return self._index.get(cell_id)

    def get(self, cell_id: int) -> Optional[Node]:
        idx = self._index.get(cell_id)
        return None if idx is None else self._nodes[idx]

    def node(self, index: int) -> Node:
        return self._nodes[index]

    def __contains__(self, cell_id: object) -> bool:
        return cell_id in self._index

    def __len__(self) -> int:
        return len(self._nodes)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def create(
        self, cell_id: int, distance: float, predecessor: Optional[int] = None
    ) -> int:
        """Insert a node for ``cell_id`` and return its arena index."""

        if cell_id in self._index:
            raise KeyError(f"cell {cell_id} already has a node")
        self._nodes.append(Node(cell_id, distance, predecessor))
        idx = len(self._nodes) - 1
        self._index[cell_id] = idx
        return idx

    def relax(self, index: int, distance: float, predecessor: int) -> None:
        """Lower the distance of the node at ``index`` in place."""

        node = self._nodes[index]
        if distance >= node.distance:
            raise ValueError(
                f"relaxation must decrease distance ({distance} >= {node.distance})"
            )
        node.distance = distance
        node.predecessor = predecessor


__all__ = ["Node", "NodeTable"]
