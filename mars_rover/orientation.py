from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from .errors import UnknownHeadingError


class Orientation(int, Enum):
    """Compass heading of the rover.

    Members are ordered clockwise, so turning is index arithmetic modulo 4:
    a right turn adds one, a left turn adds three and the opposite heading
    is two quarter turns away.
    """

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def turn_right(self) -> "Orientation":
        return Orientation((self.value + 1) % 4)

    def turn_left(self) -> "Orientation":
        return Orientation((self.value + 3) % 4)

    def opposite(self) -> "Orientation":
        return Orientation((self.value + 2) % 4)

    @property
    def letter(self) -> str:
        """Single-letter name: N, E, S or W."""
        return self.name[0]

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit step (dx, dy) for one cell of travel in this heading."""
        return _DELTAS[self]

    @classmethod
    def from_letter(cls, letter: str) -> "Orientation":
        key = letter.strip().upper()
        for heading in cls:
            if heading.letter == key:
                return heading
        raise UnknownHeadingError(letter)

    def __str__(self) -> str:
        return self.letter


# +y is north, +x is east (origin at the bottom-left of the grid)
_DELTAS: Dict[Orientation, Tuple[int, int]] = {
    Orientation.NORTH: (0, 1),
    Orientation.EAST: (1, 0),
    Orientation.SOUTH: (0, -1),
    Orientation.WEST: (-1, 0),
}
