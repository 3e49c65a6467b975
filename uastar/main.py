# uastar/main.py
"""Command line entry point: build a grid, solve it, compare, report."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Sequence

from .config import CONFIG, Config, LoggingConfig, load_config
from .core.grid import GridModel
from .input import INPUT_MODULES, build_grid, get_input_module
from .reporting.console import report_all
from .reporting.plot import plot_solution
from .solvers import SOLVERS, BaseSolver, SolveResult
from .solvers.compare import results_match


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_BAD_INPUT = 2

logger = logging.getLogger(__name__)


def configure_logging(cfg: LoggingConfig) -> None:
    numeric_level = getattr(logging, str(cfg.global_level).upper(), None)
    valid_global = isinstance(numeric_level, int)
    logging.basicConfig(
        level=numeric_level if valid_global else logging.INFO,
        format=LOG_FORMAT,
        force=True,
    )
    if not valid_global:
        logger.warning(
            "Invalid global log level '%s' in config, using INFO.", cfg.global_level
        )

    # Apply per-module levels if defined
    for module_name, level_str in cfg.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning(
                "Invalid log level '%s' for module '%s' in config.", level_str, module_name
            )


configure_logging(CONFIG.logging)


def bootstrap(cfg: Config) -> GridModel:
    """Build the problem grid described by ``cfg``."""

    source = get_input_module(
        cfg.pathway.input_module, cfg.pathway.width, cfg.pathway.height, cfg.input
    )
    grid = build_grid(source)
    logger.info(
        "[Bootstrap] %s input produced %s", cfg.pathway.input_module, grid
    )
    return grid


def run(
    cfg: Config, grid: GridModel, solvers: Sequence[BaseSolver]
) -> tuple[bool, Dict[str, SolveResult]]:
    """Solve ``grid`` with every solver and report the results.

    Returns whether all solvers agree, plus each solver's result.
    """

    results: Dict[str, SolveResult] = {}
    for solver in solvers:
        solver.initialize(grid)
        results[solver.name] = solver.solve()

    values = list(results.values())
    agree = all(results_match(values[0], other) for other in values[1:])
    if not agree:
        logger.error(
            "Solvers disagree: %s",
            ", ".join(
                f"{name}={r.optimal:.3f}" if r.success else f"{name}=none"
                for name, r in results.items()
            ),
        )
        return False, results

    print(report_all(results))

    if cfg.output.plot:
        for name, result in results.items():
            if not result.success:
                continue
            filename = Path(cfg.output.plot_dir) / f"pathway{name}.bmp"
            try:
                plot_solution(grid, result.path, filename, cfg.output.max_image_size)
            except OSError as exc:
                logger.error("Could not write %s: %s", filename, exc)
    return True, results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uastar", description="Shortest paths on 8-connected grids with A*."
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML config file")
    parser.add_argument("--width", type=int, help="grid width")
    parser.add_argument("--height", type=int, help="grid height")
    parser.add_argument(
        "--input-module", choices=INPUT_MODULES, help="grid generator to use"
    )
    parser.add_argument("--map", help="text map for the ascii input module")
    parser.add_argument("--seed", type=int, help="seed for the custom input module")
    parser.add_argument("--no-plot", action="store_true", help="skip image output")
    parser.add_argument(
        "--validate",
        action="store_true",
        help="cross-check the A* result with the Dijkstra solver",
    )
    return parser


def apply_overrides(cfg: Config, args: argparse.Namespace) -> Config:
    """Return ``cfg`` with command line values taking precedence."""

    pathway = cfg.pathway
    if args.width is not None:
        pathway = replace(pathway, width=args.width)
    if args.height is not None:
        pathway = replace(pathway, height=args.height)
    input_cfg = cfg.input
    if args.map is not None:
        input_cfg = replace(input_cfg, map_path=args.map)
        pathway = replace(pathway, input_module="ascii")
    if args.input_module is not None:
        pathway = replace(pathway, input_module=args.input_module)
    if args.seed is not None:
        input_cfg = replace(input_cfg, seed=args.seed)
    output = cfg.output
    if args.no_plot:
        output = replace(output, plot=False)
    return replace(cfg, pathway=pathway, input=input_cfg, output=output)


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = CONFIG
    if args.config is not None:
        cfg = load_config(args.config)
        configure_logging(cfg.logging)
    cfg = apply_overrides(cfg, args)

    try:
        grid = bootstrap(cfg)
    except (OSError, ValueError) as exc:
        logger.error("Could not build the grid: %s", exc)
        return EXIT_BAD_INPUT

    names = ["cpu", "dijkstra"] if args.validate else ["cpu"]
    solvers = [SOLVERS[name]() for name in names]
    agree, _ = run(cfg, grid, solvers)
    return EXIT_OK if agree else EXIT_MISMATCH


if __name__ == "__main__":
    sys.exit(main())
