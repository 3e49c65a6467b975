"""Simple configuration loader for uastar."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class PathwayConfig:
    """Problem dimensions and the input module that fills the grid."""

    width: int = 16
    height: int = 16
    input_module: str = "custom"


@dataclass
class InputConfig:
    """Settings passed to the input modules."""

    seed: Optional[int] = None
    edge_probability: float = 0.7
    map_path: Optional[str] = None


@dataclass
class OutputConfig:
    """Console and image output settings."""

    plot: bool = True
    plot_dir: str = "."
    max_image_size: tuple[int, int] = (1024, 768)


@dataclass
class LoggingConfig:
    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    pathway: PathwayConfig
    input: InputConfig
    output: OutputConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    pathway_data = data.get("pathway") or {}
    pathway = PathwayConfig(
        width=int(pathway_data.get("width", 16)),
        height=int(pathway_data.get("height", 16)),
        input_module=str(pathway_data.get("input_module", "custom")),
    )

    input_data = data.get("input") or {}
    seed = input_data.get("seed")
    input_cfg = InputConfig(
        seed=None if seed is None else int(seed),
        edge_probability=float(input_data.get("edge_probability", 0.7)),
        map_path=input_data.get("map_path"),
    )

    output_data = data.get("output") or {}
    output = OutputConfig(
        plot=bool(output_data.get("plot", True)),
        plot_dir=str(output_data.get("plot_dir", ".")),
        max_image_size=tuple(output_data.get("max_image_size", [1024, 768])),
    )

    logging_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(pathway=pathway, input=input_cfg, output=output, logging=logging_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "InputConfig",
    "LoggingConfig",
    "OutputConfig",
    "PathwayConfig",
    "load_config",
]
