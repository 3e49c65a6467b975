"""Pathway solvers."""

from .base_solver import BaseSolver, SolveResult
from .cpu_solver import CPUSolver, SolverState
from .dijkstra_solver import DijkstraSolver

SOLVERS = {
    "cpu": CPUSolver,
    "dijkstra": DijkstraSolver,
}

__all__ = [
    "BaseSolver",
    "CPUSolver",
    "DijkstraSolver",
    "SOLVERS",
    "SolveResult",
    "SolverState",
]
