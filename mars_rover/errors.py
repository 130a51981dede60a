"""Exceptions raised by the rover simulator.

A blocked move is not an exception: the rover records it and stops the
command sequence. Everything below is raised at the edges (parsing, map
loading, construction) or on a broken grid contract.
"""

from __future__ import annotations


class RoverError(Exception):
    """Base error for the rover simulator."""


class UnknownCommandError(RoverError, ValueError):
    """A command string contains a letter that maps to no Command.

    Attributes
    ----------
    letter : str
        The offending character.
    index : int
        Position of the character in the parsed text, or -1 when a single
        letter was parsed on its own.
    """

    def __init__(self, letter: str, index: int = -1) -> None:
        self.letter = letter
        self.index = index
        where = f" at position {index}" if index >= 0 else ""
        super().__init__(f"Unknown command {letter!r}{where}; expected one of F, B, L, R")


class UnknownHeadingError(RoverError, ValueError):
    """A heading letter is not one of N, E, S, W."""

    def __init__(self, letter: str) -> None:
        self.letter = letter
        super().__init__(f"Unknown heading {letter!r}; expected one of N, E, S, W")


class OutOfBoundsError(RoverError, IndexError):
    """An obstacle query was made for a cell outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        super().__init__(f"({x}, {y}) is outside the {width}x{height} grid")


class InvalidGridError(RoverError, ValueError):
    """Grid dimensions, obstacle layout or map file are invalid."""


class InvalidStartError(RoverError, ValueError):
    """The rover cannot be placed at the requested start position."""
