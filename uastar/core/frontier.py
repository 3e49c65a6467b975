"""Binary-heap open list with lazy invalidation."""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Iterator, List, Tuple


class Frontier:
    """Min-priority queue of ``(priority, node_index)`` entries.

    A node may be pushed several times; the caller discards entries whose
    node is already closed when they are popped. Equal priorities pop in
    insertion order.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, int]] = []
        self._seq: Iterator[int] = count()

    def push(self, priority: float, node_index: int) -> None:
        heappush(self._heap, (priority, next(self._seq), node_index))

    def pop(self) -> Tuple[float, int]:
        """Remove and return the lowest ``(priority, node_index)``.

        Raises ``IndexError`` when empty.
        """

        priority, _, node_index = heappop(self._heap)
        return priority, node_index

    def clear(self) -> None:
        self._heap.clear()
        self._seq = count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


__all__ = ["Frontier"]
