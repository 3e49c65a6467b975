"""Interface for modules that generate pathway problems."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..core.grid import DX, DY, Coord, GridModel


def opposite(direction: int) -> int:
    """Return the direction pointing back along ``direction``."""

    return (direction + 4) % 8


class PathwayInput(ABC):
    """Produces connectivity masks plus start and end coordinates."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        self.width = width
        self.height = height

    @abstractmethod
    def generate(self) -> bytes:
        """Return ``width * height`` connectivity masks in row-major order."""
        raise NotImplementedError

    @abstractmethod
    def start_point(self) -> Coord:
        raise NotImplementedError

    @abstractmethod
    def end_point(self) -> Coord:
        raise NotImplementedError

    def _link(self, masks: bytearray, x: int, y: int, direction: int) -> None:
        """Set the edge from ``(x, y)`` along ``direction`` in both cells."""

        nx, ny = x + DX[direction], y + DY[direction]
        masks[y * self.width + x] |= 1 << direction
        masks[ny * self.width + nx] |= 1 << opposite(direction)


def build_grid(source: PathwayInput) -> GridModel:
    """Run ``source`` once and wrap its output in a :class:`GridModel`."""

    masks = source.generate()
    return GridModel(
        source.width, source.height, masks, source.start_point(), source.end_point()
    )


__all__ = ["PathwayInput", "build_grid", "opposite"]
