"""Console and image output for solver results."""

from .console import distance_line, format_solution, report, report_all
from .plot import plot_solution, render_solution

__all__ = [
    "distance_line",
    "format_solution",
    "plot_solution",
    "render_solution",
    "report",
    "report_all",
]
