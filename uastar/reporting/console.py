"""Plain-text reporting of solver results."""

from __future__ import annotations

from typing import Mapping, Sequence

from ..core.grid import Coord
from ..solvers.base_solver import SolveResult


# Coordinates per output line before wrapping.
PER_LINE = 10


def format_solution(path: Sequence[Coord]) -> str:
    """Return ``path`` as ``(x y) -> (x y) ...`` wrapped every 10 entries."""

    lines: list[str] = []
    for start in range(0, len(path), PER_LINE):
        chunk = path[start : start + PER_LINE]
        lines.append(" -> ".join(f"({x} {y})" for x, y in chunk))
    return "\t" + " ->\n\t".join(lines)


def report(label: str, result: SolveResult) -> str:
    """Return the solution block for one solver's ``result``."""

    if not result.success:
        return f"No solution from {label}."
    return f"Solution from {label}:\n{format_solution(result.path)}\n"


def distance_line(label: str, result: SolveResult) -> str | None:
    if not result.success:
        return None
    return f" > Optimal distance from {label}: {result.optimal:.3f}"


def report_all(results: Mapping[str, SolveResult]) -> str:
    """Return every solution block followed by all optimal distance lines."""

    blocks = [report(label, result) for label, result in results.items()]
    distances = [distance_line(label, result) for label, result in results.items()]
    return "\n".join(blocks + [line for line in distances if line is not None])


__all__ = ["PER_LINE", "distance_line", "format_solution", "report", "report_all"]
