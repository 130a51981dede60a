from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, Optional

from .coordinate import Coordinate
from .errors import InvalidStartError
from .grid import Grid
from .orientation import Orientation

if TYPE_CHECKING:
    from .command import Command


StepCallback = Callable[[int, "Command", bool, "Rover"], None]


class Rover:
    """Rover executing discrete commands on a grid.

    Moves into an obstacle fail: the obstacle cell is recorded as the last
    failure, the rover stays put and the rest of the command sequence is
    dropped. Moves off the edge of the grid are harmless no-ops.

    Parameters
    ----------
    x, y : int
        Start cell. Must be inside the grid and free of obstacles.
    orientation : Orientation
        Initial heading.
    grid : Grid
        Map the rover drives on. Shared, never modified by the rover.
    """

    def __init__(self, x: int, y: int, orientation: Orientation, grid: Grid) -> None:
        start = Coordinate(int(x), int(y))
        if grid.is_out_of_bounds(start):
            raise InvalidStartError(
                f"Start {start} is outside the {grid.width}x{grid.height} grid"
            )
        if grid.is_obstacle(start):
            raise InvalidStartError(f"Start {start} is an obstacle")

        self.grid = grid
        self._position = start
        self._orientation = orientation
        self._failure: Optional[Coordinate] = None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def move_forward(self) -> bool:
        return self._move(self._orientation)

    def move_backward(self) -> bool:
        return self._move(self._orientation.opposite())

    def turn_left(self) -> bool:
        self._orientation = self._orientation.turn_left()
        return True

    def turn_right(self) -> bool:
        self._orientation = self._orientation.turn_right()
        return True

    def _move(self, heading: Orientation) -> bool:
        candidate = self._position.step(heading)
        if self.grid.is_out_of_bounds(candidate):
            return True
        if self.grid.is_obstacle(candidate):
            self._failure = candidate
            return False
        self._position = candidate
        return True

    # ------------------------------------------------------------------
    # Command execution
    # ------------------------------------------------------------------
    def execute(self, command: "Command") -> bool:
        """Apply a single command; False means the move was blocked."""
        return command.apply(self)

    def execute_commands(
        self,
        commands: Iterable["Command"],
        on_step: Optional[StepCallback] = None,
    ) -> None:
        """Apply commands in order, stopping after the first blocked move.

        ``on_step(index, command, succeeded, rover)`` is called after each
        applied command, including the one that failed.
        """
        for idx, command in enumerate(commands):
            succeeded = self.execute(command)
            if on_step is not None:
                on_step(idx, command, succeeded, self)
            if not succeeded:
                break

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def current_position(self) -> Coordinate:
        return self._position

    def current_orientation(self) -> Orientation:
        return self._orientation

    def last_failure_position(self) -> Optional[Coordinate]:
        """Most recent obstacle that blocked a move, or None if none ever did."""
        return self._failure

    def to_dict(self) -> Dict[str, Any]:
        """Serialize current rover state to a dict for logging/telemetry."""
        failure = self._failure.to_dict() if self._failure is not None else None
        return {
            "x": self._position.x,
            "y": self._position.y,
            "heading": self._orientation.letter,
            "failure": failure,
        }

    def __repr__(self) -> str:
        return (
            f"Rover(position={self._position}, heading={self._orientation.letter}, "
            f"failure={self._failure})"
        )
