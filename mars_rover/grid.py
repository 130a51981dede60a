from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union
import json

import numpy as np

from .coordinate import Coordinate
from .errors import InvalidGridError, OutOfBoundsError


CellLike = Union[Coordinate, Tuple[int, int]]

OBSTACLE_CHAR = "#"
FREE_CHAR = "."


def _as_coordinate(cell: CellLike) -> Coordinate:
    if isinstance(cell, Coordinate):
        return cell
    x, y = cell
    return Coordinate(int(x), int(y))


class Grid:
    """Fixed-size rectangular map with static obstacles.

    Coordinates have their origin at the bottom-left cell:
    - x increases to the east (columns)
    - y increases to the north (rows)

    The obstacle mask is a read-only boolean array indexed ``[y, x]``; the grid
    never changes after construction and can be shared between rovers.

    Parameters
    ----------
    width : int
        Number of columns, at least 1.
    height : int
        Number of rows, at least 1.
    obstacles : iterable of Coordinate or (x, y), optional
        Obstacle cells. Each must lie inside the grid.
    """

    def __init__(
        self,
        width: int,
        height: int,
        obstacles: Optional[Iterable[CellLike]] = None,
    ) -> None:
        if int(width) < 1 or int(height) < 1:
            raise InvalidGridError(f"Grid must be at least 1x1, got {width}x{height}")
        self._width = int(width)
        self._height = int(height)

        mask = np.zeros((self._height, self._width), dtype=bool)
        for cell in obstacles or ():
            c = _as_coordinate(cell)
            if self.is_out_of_bounds(c):
                raise InvalidGridError(
                    f"Obstacle {c} lies outside the {self._width}x{self._height} grid"
                )
            mask[c.y, c.x] = True
        mask.flags.writeable = False
        self._mask = mask

    # ------------------------------------------------------------------
    # Presets
    # ------------------------------------------------------------------
    @classmethod
    def without_obstacles(cls) -> "Grid":
        """4x4 grid with no obstacles."""
        return cls(width=4, height=4)

    @classmethod
    def with_diagonal_obstacles(cls) -> "Grid":
        """4x4 grid with obstacles on the rising diagonal.

        ::

            3  . . . #
            2  . . # .
            1  . # . .
            0  # . . .
               0 1 2 3
        """
        return cls(width=4, height=4, obstacles=[(i, i) for i in range(4)])

    # ------------------------------------------------------------------
    # Map loading
    # ------------------------------------------------------------------
    @classmethod
    def from_layout(cls, rows: Sequence[str]) -> "Grid":
        """Build a grid from text rows, top (northmost) row first.

        ``#`` marks an obstacle and ``.`` a free cell.
        """
        if len(rows) == 0:
            raise InvalidGridError("Layout has no rows")
        width = len(rows[0])
        obstacles: List[Tuple[int, int]] = []
        height = len(rows)
        for row_idx, row in enumerate(rows):
            if len(row) != width:
                raise InvalidGridError(
                    f"Layout row {row_idx} has length {len(row)}, expected {width}"
                )
            y = height - 1 - row_idx
            for x, ch in enumerate(row):
                if ch == OBSTACLE_CHAR:
                    obstacles.append((x, y))
                elif ch != FREE_CHAR:
                    raise InvalidGridError(f"Unknown layout character {ch!r} in row {row_idx}")
        return cls(width=width, height=height, obstacles=obstacles)

    @classmethod
    def from_map_dict(cls, data: Dict[str, Any]) -> "Grid":
        """Create a grid from a dict holding either ``layout`` or ``width``/``height``/``obstacles``."""
        if "layout" in data:
            rows = data["layout"]
            if not isinstance(rows, list) or not all(isinstance(row, str) for row in rows):
                raise InvalidGridError("Map 'layout' must be a list of strings")
            return cls.from_layout(rows)
        try:
            width = int(data["width"])
            height = int(data["height"])
            obstacles = [(int(o["x"]), int(o["y"])) for o in data.get("obstacles", [])]
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidGridError(f"Malformed map description: {exc}") from exc
        return cls(width=width, height=height, obstacles=obstacles)

    @classmethod
    def from_map_file(cls, path: str) -> "Grid":
        """Create a grid from a JSON map file."""
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise InvalidGridError(f"{path} is not valid JSON: {exc}") from exc
        return cls.from_map_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize grid description to a Python dict."""
        return {
            "width": self._width,
            "height": self._height,
            "obstacles": [c.to_dict() for c in self.obstacles()],
        }

    def to_layout(self) -> List[str]:
        """Text rows, top row first (inverse of ``from_layout``)."""
        return [
            "".join(OBSTACLE_CHAR if cell else FREE_CHAR for cell in self._mask[y])
            for y in range(self._height - 1, -1, -1)
        ]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def mask(self) -> np.ndarray:
        """Read-only obstacle mask indexed ``[y, x]``."""
        return self._mask

    def is_out_of_bounds(self, cell: CellLike) -> bool:
        c = _as_coordinate(cell)
        return c.x < 0 or c.y < 0 or c.x >= self._width or c.y >= self._height

    def is_obstacle(self, cell: CellLike) -> bool:
        """Return True if the in-bounds cell holds an obstacle.

        Raises OutOfBoundsError for cells outside the grid; callers check
        ``is_out_of_bounds`` first.
        """
        c = _as_coordinate(cell)
        if self.is_out_of_bounds(c):
            raise OutOfBoundsError(c.x, c.y, self._width, self._height)
        return bool(self._mask[c.y, c.x])

    def obstacles(self) -> List[Coordinate]:
        """Obstacle cells ordered by row, then column."""
        ys, xs = np.nonzero(self._mask)
        return [Coordinate(int(x), int(y)) for y, x in zip(ys, xs)]

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, obstacles={len(self.obstacles())})"
