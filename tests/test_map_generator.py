from __future__ import annotations

import json
import random

import pytest

from mars_rover.coordinate import Coordinate
from mars_rover.grid import Grid
from mars_rover.map_generator import (
    generate_border_map,
    generate_diagonal_map,
    generate_open_map,
    generate_random_map,
    save_map,
)


def test_fixed_layouts_match_presets() -> None:
    assert Grid.from_map_dict(generate_open_map()).to_dict() == Grid.without_obstacles().to_dict()
    assert (
        Grid.from_map_dict(generate_diagonal_map()).to_dict()
        == Grid.with_diagonal_obstacles().to_dict()
    )


def test_border_map_leaves_interior_free() -> None:
    grid = Grid.from_map_dict(generate_border_map(5, 4))
    assert grid.to_layout() == ["#####", "#...#", "#...#", "#####"]


def test_random_map_is_seeded_and_keeps_start_clear() -> None:
    a = generate_random_map(6, 6, density=0.5, rng=random.Random(3), keep_clear=[(0, 0)])
    b = generate_random_map(6, 6, density=0.5, rng=random.Random(3), keep_clear=[(0, 0)])
    assert a == b
    grid = Grid.from_map_dict(a)
    assert len(grid.obstacles()) == 18
    assert not grid.is_obstacle(Coordinate(0, 0))


def test_random_map_full_density_is_capped_by_clear_cells() -> None:
    data = generate_random_map(2, 2, density=1.0, rng=random.Random(0), keep_clear=[(1, 1)])
    assert len(data["obstacles"]) == 3


def test_random_map_rejects_bad_density() -> None:
    with pytest.raises(ValueError):
        generate_random_map(3, 3, density=1.5)


def test_save_map(tmp_path) -> None:
    path = tmp_path / "maps" / "diag.json"
    save_map(generate_diagonal_map(3), str(path))
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    assert Grid.from_map_dict(data).obstacles() == [Coordinate(i, i) for i in range(3)]
