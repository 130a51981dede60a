"""
Top-level package for the grid rover simulator.

Components:
- orientation: compass headings and quarter-turn arithmetic
- coordinate: immutable integer grid cells
- grid: bounds and obstacle lookup, map loading
- rover: command-driven state machine with blocked-move tracking
- command: command enum, dispatch and text parsing
- map_generator: open, diagonal, walled and random layouts
- config: YAML run configuration
- render: pygame-based visualization
"""

from .orientation import Orientation
from .coordinate import Coordinate
from .grid import Grid
from .rover import Rover
from .command import Command, parse_commands
from .errors import (
    RoverError,
    UnknownCommandError,
    UnknownHeadingError,
    OutOfBoundsError,
    InvalidGridError,
    InvalidStartError,
)

__all__ = [
    "Orientation",
    "Coordinate",
    "Grid",
    "Rover",
    "Command",
    "parse_commands",
    "RoverError",
    "UnknownCommandError",
    "UnknownHeadingError",
    "OutOfBoundsError",
    "InvalidGridError",
    "InvalidStartError",
]
