from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List

from .errors import UnknownCommandError
from .rover import Rover


class Command(Enum):
    """Rover command, valued by its single-letter token."""

    FORWARD = "F"
    BACKWARD = "B"
    TURN_LEFT = "L"
    TURN_RIGHT = "R"

    def apply(self, rover: Rover) -> bool:
        """Run the matching rover transition; False when the move was blocked."""
        return _TRANSITIONS[self](rover)

    @property
    def letter(self) -> str:
        return self.value

    @classmethod
    def from_letter(cls, letter: str) -> "Command":
        try:
            return cls(letter.upper())
        except ValueError:
            raise UnknownCommandError(letter) from None


_TRANSITIONS: Dict[Command, Callable[[Rover], bool]] = {
    Command.FORWARD: Rover.move_forward,
    Command.BACKWARD: Rover.move_backward,
    Command.TURN_LEFT: Rover.turn_left,
    Command.TURN_RIGHT: Rover.turn_right,
}


def parse_commands(text: str) -> List[Command]:
    """Parse a command string such as ``"FFRBL"``.

    Letters are case-insensitive and whitespace is ignored. Any other
    character raises UnknownCommandError naming its position.
    """
    commands: List[Command] = []
    for idx, ch in enumerate(text):
        if ch.isspace():
            continue
        try:
            commands.append(Command.from_letter(ch))
        except UnknownCommandError:
            raise UnknownCommandError(ch, idx) from None
    return commands


def format_commands(commands: List[Command]) -> str:
    return "".join(c.letter for c in commands)
