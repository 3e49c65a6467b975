from uastar.reporting.console import distance_line, format_solution, report, report_all
from uastar.solvers.base_solver import SolveResult


def test_format_short_path():
    assert format_solution([(0, 0), (1, 1), (2, 2)]) == "\t(0 0) -> (1 1) -> (2 2)"


def test_format_wraps_every_ten():
    path = [(i, i) for i in range(12)]
    lines = format_solution(path).split("\n")
    assert len(lines) == 2
    assert lines[0].startswith("\t(0 0) -> ")
    assert lines[0].endswith("(9 9) ->")
    assert lines[1] == "\t(10 10) -> (11 11)"


def test_report_success_and_failure():
    result = SolveResult(True, 2.8284271, [(0, 0), (1, 1), (2, 2)])
    text = report("CPU", result)
    assert text.splitlines() == ["Solution from CPU:", "\t(0 0) -> (1 1) -> (2 2)"]
    assert distance_line("CPU", result) == " > Optimal distance from CPU: 2.828"
    assert report("CPU", SolveResult(False)) == "No solution from CPU."
    assert distance_line("CPU", SolveResult(False)) is None


def test_report_all_puts_distances_last():
    results = {
        "CPU": SolveResult(True, 1.0, [(0, 0), (1, 0)]),
        "Dijkstra": SolveResult(True, 1.0, [(0, 0), (1, 0)]),
    }
    lines = report_all(results).splitlines()
    assert lines == [
        "Solution from CPU:",
        "\t(0 0) -> (1 0)",
        "",
        "Solution from Dijkstra:",
        "\t(0 0) -> (1 0)",
        "",
        " > Optimal distance from CPU: 1.000",
        " > Optimal distance from Dijkstra: 1.000",
    ]


def test_report_all_without_solution():
    results = {"CPU": SolveResult(False), "Dijkstra": SolveResult(False)}
    assert report_all(results) == "No solution from CPU.\nNo solution from Dijkstra."
