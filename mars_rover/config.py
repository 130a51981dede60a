from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import os

import yaml

from .errors import RoverError


MAPS_DIR = os.path.join(os.path.dirname(__file__), "maps")


@dataclass
class GridConfig:
    map: str = "open_map"
    random_density: Optional[float] = None
    random_seed: int = 0
    width: int = 4
    height: int = 4


@dataclass
class RoverConfig:
    x: int = 0
    y: int = 0
    heading: str = "N"
    commands: str = ""


@dataclass
class TelemetryConfig:
    path: Optional[str] = None


@dataclass
class RenderConfig:
    enabled: bool = False
    cell_size: int = 96
    fps: int = 4


@dataclass
class SimConfig:
    grid: GridConfig = field(default_factory=GridConfig)
    rover: RoverConfig = field(default_factory=RoverConfig)
    telemetry: TelemetryConfig = field(default_factory=TelemetryConfig)
    render: RenderConfig = field(default_factory=RenderConfig)


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise RoverError(f"{path} is not valid YAML: {exc}") from exc


def resolve_map_path(name: str) -> str:
    """Return a path for a bundled map name or pass an explicit path through."""
    if name.endswith(".json") or os.sep in name:
        return name
    return os.path.join(MAPS_DIR, f"{name}.json")


def _section(value: Any, name: str) -> Dict[str, Any]:
    """Return a config mapping; None means the section is absent."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise RoverError(f"Config section {name!r} must be a mapping, got {type(value).__name__}")
    return value


def config_from_dict(cfg: Dict[str, Any]) -> SimConfig:
    """Build a SimConfig from a parsed YAML dict, falling back to defaults."""
    cfg = _section(cfg, "root")
    grid_cfg = _section(cfg.get("grid"), "grid")
    rover_cfg = _section(cfg.get("rover"), "rover")
    telemetry_cfg = _section(cfg.get("telemetry"), "telemetry")
    render_cfg = _section(cfg.get("render"), "render")
    random_cfg = _section(grid_cfg.get("random_obstacles"), "grid.random_obstacles")

    try:
        density = random_cfg.get("density")
        return SimConfig(
            grid=GridConfig(
                map=str(grid_cfg.get("map", "open_map")),
                random_density=float(density) if density is not None else None,
                random_seed=int(random_cfg.get("seed", 0)),
                width=int(grid_cfg.get("width", 4)),
                height=int(grid_cfg.get("height", 4)),
            ),
            rover=RoverConfig(
                x=int(rover_cfg.get("x", 0)),
                y=int(rover_cfg.get("y", 0)),
                heading=str(rover_cfg.get("heading", "N")),
                commands=str(rover_cfg.get("commands", "") or ""),
            ),
            telemetry=TelemetryConfig(path=telemetry_cfg.get("path")),
            render=RenderConfig(
                enabled=bool(render_cfg.get("enabled", False)),
                cell_size=int(render_cfg.get("cell_size", 96)),
                fps=int(render_cfg.get("fps", 4)),
            ),
        )
    except (TypeError, ValueError) as exc:
        raise RoverError(f"Invalid configuration: {exc}") from exc


def load_config(path: str) -> SimConfig:
    return config_from_dict(load_yaml(path))
