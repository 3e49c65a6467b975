"""A* shortest paths on 8-connected grids."""

__version__ = "0.1.0"
