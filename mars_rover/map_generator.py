"""
Procedural map generation for the rover grid.

Produces map dicts (``width``/``height``/``obstacles``) compatible with
Grid.from_map_dict(): open fields, the diagonal test layout, walled
arenas and random scatter.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Set, Tuple
import json
import os
import random


Cell = Tuple[int, int]


def _map_dict(width: int, height: int, cells: Iterable[Cell]) -> Dict[str, Any]:
    obstacles = [{"x": x, "y": y} for x, y in sorted(set(cells), key=lambda c: (c[1], c[0]))]
    return {"width": width, "height": height, "obstacles": obstacles}


# ---------------------------------------------------------------------------
# Fixed layouts
# ---------------------------------------------------------------------------


def generate_open_map(width: int = 4, height: int = 4) -> Dict[str, Any]:
    """Map without obstacles."""
    return _map_dict(width, height, [])


def generate_diagonal_map(size: int = 4) -> Dict[str, Any]:
    """Square map with obstacles on the diagonal from (0,0) to (size-1,size-1)."""
    return _map_dict(size, size, [(i, i) for i in range(size)])


def generate_border_map(width: int, height: int) -> Dict[str, Any]:
    """Obstacles along the outer ring, free interior."""
    cells: List[Cell] = []
    for x in range(width):
        cells.append((x, 0))
        cells.append((x, height - 1))
    for y in range(height):
        cells.append((0, y))
        cells.append((width - 1, y))
    return _map_dict(width, height, cells)


# ---------------------------------------------------------------------------
# Random scatter
# ---------------------------------------------------------------------------


def generate_random_map(
    width: int,
    height: int,
    density: float = 0.2,
    rng: Optional[random.Random] = None,
    keep_clear: Optional[Iterable[Cell]] = None,
) -> Dict[str, Any]:
    """
    Scatter obstacles over roughly ``density`` of the cells.

    Cells in ``keep_clear`` (typically the rover start) never receive an
    obstacle, so the requested count may be lower on tiny grids.
    """
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be in [0, 1], got {density}")
    rng = rng or random.Random()
    clear: Set[Cell] = set(keep_clear or ())
    candidates = [
        (x, y) for y in range(height) for x in range(width) if (x, y) not in clear
    ]
    num = min(len(candidates), int(round(density * width * height)))
    cells = rng.sample(candidates, num)
    return _map_dict(width, height, cells)


def save_map(data: Dict[str, Any], path: str) -> None:
    """Write a map dict as JSON."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
