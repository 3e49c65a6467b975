"""Abstract solver interface shared by every pathway solver."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List

from ..core.grid import Coord, GridModel


@dataclass
class SolveResult:
    """Outcome of a single search.

    ``optimal`` and ``path`` are meaningful only when ``success`` is true.
    """

    success: bool
    optimal: float = 0.0
    path: List[Coord] = field(default_factory=list)


class BaseSolver(ABC):
    """Two-phase solver: :meth:`initialize` then :meth:`solve` once."""

    name: str = "solver"

    @abstractmethod
    def initialize(
        self, grid: GridModel, start: Coord | None = None, end: Coord | None = None
    ) -> None:
        """Reset all search state for a new problem on ``grid``."""
        raise NotImplementedError

    @abstractmethod
    def solve(self) -> SolveResult:
        """Run the search to completion and return its result."""
        raise NotImplementedError


__all__ = ["BaseSolver", "SolveResult"]
