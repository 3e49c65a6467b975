import pytest

from uastar.solvers.base_solver import SolveResult
from uastar.solvers.compare import float_equal, is_valid_path, path_cost, results_match


def test_float_equal():
    assert float_equal(1.0, 1.00001)
    assert not float_equal(1.0, 1.01)
    assert float_equal(10000.0, 10000.5)


def test_results_match_ignores_paths():
    a = SolveResult(True, 2.0, [(0, 0), (1, 0), (2, 0)])
    b = SolveResult(True, 2.0, [(0, 0), (1, 1), (2, 0)])
    assert results_match(a, b)
    assert not results_match(a, SolveResult(True, 2.5))
    assert not results_match(a, SolveResult(False))
    assert results_match(SolveResult(False), SolveResult(False, 9.0))


def test_path_checks(open_grid_3x3):
    assert is_valid_path(open_grid_3x3, [(0, 0), (1, 1), (2, 1)])
    assert not is_valid_path(open_grid_3x3, [(0, 0), (2, 2)])
    assert not is_valid_path(open_grid_3x3, [])
    assert path_cost(open_grid_3x3, [(0, 0)]) == 0
    assert path_cost(open_grid_3x3, [(0, 0), (1, 0), (2, 1)]) == pytest.approx(1 + 2 ** 0.5)
