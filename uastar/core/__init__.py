"""Core grid search data structures."""

from .grid import COST, DX, DY, SQRT2, Coord, GridModel
from .heuristic import OctileHeuristic
from .node_table import Node, NodeTable
from .frontier import Frontier

__all__ = [
    "COST",
    "Coord",
    "DX",
    "DY",
    "Frontier",
    "GridModel",
    "Node",
    "NodeTable",
    "OctileHeuristic",
    "SQRT2",
]
