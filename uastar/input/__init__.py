"""Input modules producing grids for the solvers."""

from __future__ import annotations

from typing import Any

from .ascii_map import AsciiPathwayInput
from .base_input import PathwayInput, build_grid
from .custom import CustomPathwayInput

INPUT_MODULES = ("custom", "ascii")


def get_input_module(name: str, width: int, height: int, cfg: Any = None) -> PathwayInput:
    """Return the input module called ``name``.

    ``cfg`` is an :class:`~uastar.config.InputConfig` or ``None``.
    """

    if name == "custom":
        seed = getattr(cfg, "seed", None)
        probability = getattr(cfg, "edge_probability", 0.7)
        return CustomPathwayInput(width, height, seed=seed, edge_probability=probability)
    if name == "ascii":
        map_path = getattr(cfg, "map_path", None)
        if not map_path:
            raise ValueError("the ascii input module needs a map path")
        return AsciiPathwayInput.from_file(map_path)
    raise ValueError(
        f"unknown input module '{name}', expected one of {', '.join(INPUT_MODULES)}"
    )


__all__ = [
    "AsciiPathwayInput",
    "CustomPathwayInput",
    "INPUT_MODULES",
    "PathwayInput",
    "build_grid",
    "get_input_module",
]
