"""Grid loader for plain-text maps.

``.`` marks an open cell, ``#`` a blocked one, ``S`` and ``E`` the open start
and end cells. Diagonal moves are only linked when both orthogonal cells
beside them are open so paths never cut corners.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..core.grid import DX, DY, Coord
from .base_input import PathwayInput


OPEN = "."
BLOCKED = "#"
START = "S"
END = "E"


def _parse_rows(text: str) -> List[str]:
    rows = [line.rstrip() for line in text.splitlines()]
    rows = [row for row in rows if row]
    if not rows:
        raise ValueError("map is empty")
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"map row {i} has length {len(row)}, expected {width}")
        bad = set(row) - {OPEN, BLOCKED, START, END}
        if bad:
            raise ValueError(f"map row {i} has unknown symbols {sorted(bad)}")
    return rows


def _find(rows: List[str], symbol: str) -> Coord:
    hits = [(x, y) for y, row in enumerate(rows) for x, c in enumerate(row) if c == symbol]
    if len(hits) != 1:
        raise ValueError(f"map must contain exactly one '{symbol}', found {len(hits)}")
    return hits[0]


class AsciiPathwayInput(PathwayInput):
    """Build connectivity from a text map."""

    def __init__(self, text: str) -> None:
        self.rows = _parse_rows(text)
        super().__init__(len(self.rows[0]), len(self.rows))
        self._start = _find(self.rows, START)
        self._end = _find(self.rows, END)

    @classmethod
    def from_file(cls, path: str | Path) -> "AsciiPathwayInput":
        return cls(Path(path).read_text())

    def is_open(self, x: int, y: int) -> bool:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        return self.rows[y][x] != BLOCKED

    def generate(self) -> bytes:
        masks = bytearray(self.width * self.height)
        for y in range(self.height):
            for x in range(self.width):
                if not self.is_open(x, y):
                    continue
                for k in (0, 1, 2, 3):
                    nx, ny = x + DX[k], y + DY[k]
                    if not self.is_open(nx, ny):
                        continue
                    if k % 2 and not (self.is_open(nx, y) and self.is_open(x, ny)):
                        continue
                    self._link(masks, x, y, k)
        return bytes(masks)

    def start_point(self) -> Coord:
        return self._start

    def end_point(self) -> Coord:
        return self._end


__all__ = ["AsciiPathwayInput"]
