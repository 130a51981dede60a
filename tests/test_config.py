from __future__ import annotations

import os

import pytest

from mars_rover.config import MAPS_DIR, config_from_dict, load_config, resolve_map_path
from mars_rover.errors import RoverError
from mars_rover.grid import Grid


def test_defaults_for_empty_config() -> None:
    cfg = config_from_dict({})
    assert cfg.grid.map == "open_map"
    assert cfg.grid.random_density is None
    assert (cfg.rover.x, cfg.rover.y, cfg.rover.heading, cfg.rover.commands) == (0, 0, "N", "")
    assert cfg.telemetry.path is None
    assert cfg.render.enabled is False


def test_load_yaml_config(tmp_path) -> None:
    path = tmp_path / "rover.yaml"
    path.write_text(
        "grid:\n"
        "  map: diagonal_map\n"
        "  random_obstacles: {density: 0.25, seed: 7}\n"
        "rover:\n"
        "  x: 1\n"
        "  y: 0\n"
        "  heading: E\n"
        "  commands: FRBB\n"
        "telemetry:\n"
        "  path: runs/t.jsonl\n",
        encoding="utf-8",
    )
    cfg = load_config(str(path))
    assert cfg.grid.map == "diagonal_map"
    assert cfg.grid.random_density == 0.25
    assert cfg.grid.random_seed == 7
    assert cfg.rover.heading == "E"
    assert cfg.rover.commands == "FRBB"
    assert cfg.telemetry.path == "runs/t.jsonl"
    assert cfg.render.cell_size == 96


def test_invalid_values_raise() -> None:
    with pytest.raises(RoverError):
        config_from_dict({"rover": {"x": "left"}})


def test_bundled_maps_resolve_and_load() -> None:
    assert resolve_map_path("open_map") == os.path.join(MAPS_DIR, "open_map.json")
    assert resolve_map_path("custom/my.json") == "custom/my.json"
    diagonal = Grid.from_map_file(resolve_map_path("diagonal_map"))
    assert diagonal.to_dict() == Grid.with_diagonal_obstacles().to_dict()
    assert Grid.from_map_file(resolve_map_path("open_map")).obstacles() == []


def test_malformed_yaml_raises_rover_error(tmp_path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("rover: {x: 1\n", encoding="utf-8")
    with pytest.raises(RoverError):
        load_config(str(path))


def test_scalar_sections_raise_rover_error() -> None:
    with pytest.raises(RoverError):
        config_from_dict({"grid": {"random_obstacles": True}})
    with pytest.raises(RoverError):
        config_from_dict({"rover": "fast"})
    with pytest.raises(RoverError):
        config_from_dict(["grid"])  # type: ignore[arg-type]
