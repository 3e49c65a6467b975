"""Raster rendering of a grid and a solution path using :mod:`Pillow`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence, Tuple

from PIL import Image, ImageDraw

from ..core.grid import DX, DY, Coord, GridModel


logger = logging.getLogger(__name__)

# Each cell occupies a 3x3 block: the centre plus one pixel per direction.
BLOCK = 3

WHITE = (255, 255, 255)
GREY = (128, 128, 128)
GREEN = (0, 255, 0)
RED = (255, 0, 0)
BLUE = (0, 0, 255)


def pixel_size_for(grid: GridModel, max_size: Tuple[int, int] = (1024, 768)) -> int:
    """Return the edge length in pixels of one block pixel, ``0`` if too small."""

    return min(
        max_size[0] // BLOCK // grid.width,
        max_size[1] // BLOCK // grid.height,
    )


def _fill(draw: ImageDraw.ImageDraw, size: int, bx: int, by: int, colour) -> None:
    x0, y0 = bx * size, by * size
    draw.rectangle([(x0, y0), (x0 + size - 1, y0 + size - 1)], fill=colour)


def render_solution(
    grid: GridModel,
    path: Sequence[Coord],
    max_size: Tuple[int, int] = (1024, 768),
) -> Image.Image | None:
    """Draw ``grid`` and ``path`` into a new image.

    Cell centres are white, edge pixels white when the direction bit is set
    and grey otherwise. The path is drawn in green on top. Returns ``None``
    when the grid is too large for ``max_size``.
    """

    size = pixel_size_for(grid, max_size)
    if size == 0:
        logger.warning("Grid %dx%d too large to plot", grid.width, grid.height)
        return None

    width_px = grid.width * BLOCK * size
    height_px = grid.height * BLOCK * size
    img = Image.new("RGB", (width_px, height_px), (0, 0, 0))
    draw = ImageDraw.Draw(img)

    for y in range(grid.height):
        for x in range(grid.width):
            cx, cy = BLOCK * x + 1, BLOCK * y + 1
            _fill(draw, size, cx, cy, WHITE)
            mask = grid.connectivity(grid.to_id(x, y))
            for k in range(8):
                colour = WHITE if mask & (1 << k) else GREY
                _fill(draw, size, cx + DX[k], cy + DY[k], colour)

    for x, y in path:
        _fill(draw, size, BLOCK * x + 1, BLOCK * y + 1, GREEN)
    for (ax, ay), (bx, by) in zip(path, path[1:]):
        dx, dy = ax - bx, ay - by
        _fill(draw, size, BLOCK * ax + 1 - dx, BLOCK * ay + 1 - dy, GREEN)
        _fill(draw, size, BLOCK * bx + 1 + dx, BLOCK * by + 1 + dy, GREEN)

    for i in range(1, grid.height * BLOCK):
        colour, width = (RED, 3) if i % BLOCK == 0 else (BLUE, 2)
        draw.line([(5, i * size), (width_px - 6, i * size)], fill=colour, width=width)
    for i in range(1, grid.width * BLOCK):
        colour, width = (RED, 3) if i % BLOCK == 0 else (BLUE, 2)
        draw.line([(i * size, 5), (i * size, height_px - 6)], fill=colour, width=width)

    return img


def plot_solution(
    grid: GridModel,
    path: Sequence[Coord],
    filename: str | Path,
    max_size: Tuple[int, int] = (1024, 768),
) -> Path | None:
    """Render and save the solution image, returning the written path."""

    img = render_solution(grid, path, max_size)
    if img is None:
        return None
    out = Path(filename)
    out.parent.mkdir(parents=True, exist_ok=True)
    img.save(out)
    logger.info("Wrote solution image to %s", out)
    return out


__all__ = ["pixel_size_for", "plot_solution", "render_solution"]
