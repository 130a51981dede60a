from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Tuple

if TYPE_CHECKING:
    from .orientation import Orientation


@dataclass(frozen=True)
class Coordinate:
    """Integer grid cell.

    Attributes
    ----------
    x : int
        Column, increasing to the east.
    y : int
        Row, increasing to the north.
    """

    x: int
    y: int

    def translate(self, dx: int, dy: int) -> "Coordinate":
        return Coordinate(self.x + dx, self.y + dy)

    def north(self) -> "Coordinate":
        return self.translate(0, 1)

    def south(self) -> "Coordinate":
        return self.translate(0, -1)

    def east(self) -> "Coordinate":
        return self.translate(1, 0)

    def west(self) -> "Coordinate":
        return self.translate(-1, 0)

    def step(self, heading: "Orientation") -> "Coordinate":
        """Neighbouring cell one unit away in the given heading."""
        dx, dy = heading.delta
        return self.translate(dx, dy)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
