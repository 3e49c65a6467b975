"""Seeded random grid generator."""

from __future__ import annotations

import logging
import random

from ..core.grid import DX, DY, Coord
from .base_input import PathwayInput


logger = logging.getLogger(__name__)

# Directions whose reverse edge is set when the cell on the other side is
# visited; iterating these four covers every undirected edge once.
_FORWARD = (0, 1, 2, 3)


class CustomPathwayInput(PathwayInput):
    """Random undirected 8-connected grid.

    Each edge between in-range neighbours exists with probability
    ``edge_probability``. Start is the top-left cell, end the bottom-right.
    """

    def __init__(
        self,
        width: int,
        height: int,
        seed: int | None = None,
        edge_probability: float = 0.7,
    ) -> None:
        super().__init__(width, height)
        if not 0.0 <= edge_probability <= 1.0:
            raise ValueError("edge_probability must be within [0, 1]")
        self.seed = seed
        self.edge_probability = edge_probability

    def generate(self) -> bytes:
        rnd = random.Random(self.seed)
        masks = bytearray(self.width * self.height)
        edges = 0
        for y in range(self.height):
            for x in range(self.width):
                for k in _FORWARD:
                    nx, ny = x + DX[k], y + DY[k]
                    if not (0 <= nx < self.width and 0 <= ny < self.height):
                        continue
                    if rnd.random() < self.edge_probability:
                        self._link(masks, x, y, k)
                        edges += 1
        logger.debug(
            "Generated %dx%d grid with %d edges (seed=%s)",
            self.width,
            self.height,
            edges,
            self.seed,
        )
        return bytes(masks)

    def start_point(self) -> Coord:
        return (0, 0)

    def end_point(self) -> Coord:
        return (self.width - 1, self.height - 1)


__all__ = ["CustomPathwayInput"]
