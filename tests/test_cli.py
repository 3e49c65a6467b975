from pathlib import Path

import pytest

from uastar import main as cli
from uastar.config import load_config
from uastar.core.grid import GridModel
from uastar.solvers.base_solver import BaseSolver, SolveResult
from uastar.solvers.cpu_solver import CPUSolver


MAP = "S.#.\n..#.\n...E\n"


@pytest.fixture
def map_file(tmp_path) -> Path:
    path = tmp_path / "map.txt"
    path.write_text(MAP)
    return path


def test_main_with_map_validates(map_file, capsys):
    code = cli.main(["--map", str(map_file), "--no-plot", "--validate"])
    assert code == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "Solution from CPU:" in out
    assert "Solution from Dijkstra:" in out
    assert " > Optimal distance from CPU: " in out


def test_main_custom_grid(capsys):
    code = cli.main(["--width", "6", "--height", "4", "--seed", "2", "--no-plot"])
    assert code == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "from CPU" in out


def test_main_writes_plot(map_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg_path = tmp_path / "cfg.yaml"
    cfg_path.write_text(f"output:\n  plot_dir: {tmp_path / 'out'}\n")
    code = cli.main(["--config", str(cfg_path), "--map", str(map_file)])
    assert code == cli.EXIT_OK
    assert (tmp_path / "out" / "pathwayCPU.bmp").is_file()


def test_bad_input_module_config(tmp_path):
    assert cli.main(["--input-module", "ascii", "--no-plot"]) == cli.EXIT_BAD_INPUT
    missing = tmp_path / "missing.txt"
    assert cli.main(["--map", str(missing), "--no-plot"]) == cli.EXIT_BAD_INPUT


class _WrongSolver(BaseSolver):
    name = "Wrong"

    def initialize(self, grid, start=None, end=None):
        self.grid = grid

    def solve(self):
        return SolveResult(True, 0.5, [self.grid.start])


def test_run_reports_disagreement(capsys):
    cfg = load_config(Path("does-not-exist.yaml"))
    grid = GridModel.fully_connected(3, 3)
    agree, results = cli.run(cfg, grid, [CPUSolver(), _WrongSolver()])
    assert not agree
    assert set(results) == {"CPU", "Wrong"}
    assert capsys.readouterr().out == ""


def test_overrides():
    args = cli.build_parser().parse_args(
        ["--width", "8", "--seed", "4", "--map", "m.txt", "--no-plot"]
    )
    cfg = cli.apply_overrides(load_config(Path("does-not-exist.yaml")), args)
    assert cfg.pathway.width == 8
    assert cfg.pathway.input_module == "ascii"
    assert cfg.input.seed == 4
    assert cfg.input.map_path == "m.txt"
    assert cfg.output.plot is False


def test_unreachable_target_exits_ok(tmp_path, capsys):
    walled = tmp_path / "walled.txt"
    walled.write_text("S#.\n##.\n..E\n")
    code = cli.main(["--map", str(walled), "--no-plot", "--validate"])
    assert code == cli.EXIT_OK
    out = capsys.readouterr().out
    assert out.splitlines() == ["No solution from CPU.", "No solution from Dijkstra."]


def test_distances_printed_after_all_solutions(map_file, capsys):
    cli.main(["--map", str(map_file), "--no-plot", "--validate"])
    lines = capsys.readouterr().out.splitlines()
    distance_rows = [i for i, line in enumerate(lines) if line.startswith(" > ")]
    solution_rows = [i for i, line in enumerate(lines) if line.startswith("Solution")]
    assert len(distance_rows) == 2 and len(solution_rows) == 2
    assert max(solution_rows) < min(distance_rows)


def test_unwritable_plot_dir_keeps_exit_code(map_file, tmp_path, monkeypatch):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    errors: list[tuple] = []
    monkeypatch.setattr(cli.logger, "error", lambda *args: errors.append(args))
    cfg_path = tmp_path / "cfg.yaml"
    cfg_path.write_text(f"output:\n  plot_dir: {blocker / 'out'}\n")
    code = cli.main(["--config", str(cfg_path), "--map", str(map_file)])
    assert code == cli.EXIT_OK
    assert errors and errors[0][0].startswith("Could not write")
