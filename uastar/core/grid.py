"""Immutable 8-connected grid with per-cell connectivity masks."""

from __future__ import annotations

import math
from typing import Iterator, Sequence, Tuple


Coord = Tuple[int, int]

SQRT2 = math.sqrt(2.0)

# Direction ``k`` corresponds to bit ``1 << k`` of a cell mask. Even
# directions move along an axis, odd ones diagonally.
DX: Tuple[int, ...] = (1, 1, 0, -1, -1, -1, 0, 1)
DY: Tuple[int, ...] = (0, 1, 1, 1, 0, -1, -1, -1)
COST: Tuple[float, ...] = tuple(1.0 if k % 2 == 0 else SQRT2 for k in range(8))

ALL_DIRECTIONS = 0xFF


def direction_between(a: Coord, b: Coord) -> int | None:
    """Return the direction index leading from ``a`` to the adjacent ``b``."""

    dx, dy = b[0] - a[0], b[1] - a[1]
    for k in range(8):
        if DX[k] == dx and DY[k] == dy:
            return k
    return None


class GridModel:
    """Read-only ``width`` x ``height`` grid.

    Parameters
    ----------
    width, height:
        Grid dimensions, both positive.
    masks:
        One 8-bit connectivity mask per cell in row-major order.
    start, end:
        Designated start and end coordinates.
    """

    __slots__ = ("_width", "_height", "_masks", "_start", "_end")

    def __init__(
        self,
        width: int,
        height: int,
        masks: Sequence[int] | bytes,
        start: Coord = (0, 0),
        end: Coord | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        if len(masks) != width * height:
            raise ValueError(
                f"expected {width * height} connectivity masks, got {len(masks)}"
            )
        self._width = int(width)
        self._height = int(height)
        self._masks = bytes(masks)
        if end is None:
            end = (width - 1, height - 1)
        for name, point in (("start", start), ("end", end)):
            if not self.in_range(*point):
                raise ValueError(f"{name} point {point} outside {width}x{height} grid")
        self._start = (int(start[0]), int(start[1]))
        self._end = (int(end[0]), int(end[1]))

    @classmethod
    def fully_connected(
        cls, width: int, height: int, start: Coord = (0, 0), end: Coord | None = None
    ) -> "GridModel":
        """Return a grid where every in-range direction bit is set."""

        masks = bytearray(width * height)
        for y in range(height):
            for x in range(width):
                mask = 0
                for k in range(8):
                    nx, ny = x + DX[k], y + DY[k]
                    if 0 <= nx < width and 0 <= ny < height:
                        mask |= 1 << k
                masks[y * width + x] = mask
        return cls(width, height, masks, start, end)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        return self._width * self._height

    @property
    def start(self) -> Coord:
        return self._start

    @property
    def end(self) -> Coord:
        return self._end

    @property
    def masks(self) -> bytes:
        return self._masks

    def in_range(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def to_id(self, x: int, y: int) -> int:
        return y * self._width + x

    def to_xy(self, cell_id: int) -> Coord:
        y, x = divmod(cell_id, self._width)
        return x, y

    def connectivity(self, cell_id: int) -> int:
        return self._masks[cell_id]

    # ------------------------------------------------------------------
    # Edge helpers
    # ------------------------------------------------------------------
    def neighbors(self, cell_id: int) -> Iterator[Tuple[int, float]]:
        """Yield ``(neighbor_id, cost)`` for each usable edge of ``cell_id``."""

        mask = self._masks[cell_id]
        x, y = self.to_xy(cell_id)
        for k in range(8):
            if not mask & (1 << k):
                continue
            nx, ny = x + DX[k], y + DY[k]
            if self.in_range(nx, ny):
                yield self.to_id(nx, ny), COST[k]

    def has_edge(self, a: Coord, b: Coord) -> bool:
        """Return ``True`` if a direction bit of ``a`` leads to ``b``."""

        k = direction_between(a, b)
        if k is None or not self.in_range(*a) or not self.in_range(*b):
            return False
        return bool(self._masks[self.to_id(*a)] & (1 << k))

    def edge_cost(self, a: Coord, b: Coord) -> float:
        k = direction_between(a, b)
        if k is None:
            raise ValueError(f"{a} and {b} are not adjacent")
        return COST[k]

    def __repr__(self) -> str:
        return (
            f"GridModel({self._width}x{self._height}, "
            f"start={self._start}, end={self._end})"
        )


__all__ = [
    "ALL_DIRECTIONS",
    "COST",
    "Coord",
    "DX",
    "DY",
    "GridModel",
    "SQRT2",
    "direction_between",
]
