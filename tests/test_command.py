from __future__ import annotations

import pytest

from mars_rover.command import Command, format_commands, parse_commands
from mars_rover.coordinate import Coordinate
from mars_rover.errors import UnknownCommandError
from mars_rover.grid import Grid
from mars_rover.orientation import Orientation
from mars_rover.rover import Rover


def test_each_command_maps_to_one_transition() -> None:
    grid = Grid.without_obstacles()

    rover = Rover(1, 1, Orientation.NORTH, grid)
    assert Command.FORWARD.apply(rover)
    assert rover.current_position() == Coordinate(1, 2)

    rover = Rover(1, 1, Orientation.NORTH, grid)
    assert Command.BACKWARD.apply(rover)
    assert rover.current_position() == Coordinate(1, 0)

    rover = Rover(1, 1, Orientation.NORTH, grid)
    assert Command.TURN_LEFT.apply(rover)
    assert rover.current_orientation() is Orientation.WEST
    assert rover.current_position() == Coordinate(1, 1)

    rover = Rover(1, 1, Orientation.NORTH, grid)
    assert Command.TURN_RIGHT.apply(rover)
    assert rover.current_orientation() is Orientation.EAST


def test_parse_commands() -> None:
    assert parse_commands("FBLR") == [
        Command.FORWARD,
        Command.BACKWARD,
        Command.TURN_LEFT,
        Command.TURN_RIGHT,
    ]
    assert parse_commands(" f f\tr ") == [Command.FORWARD, Command.FORWARD, Command.TURN_RIGHT]
    assert parse_commands("") == []


def test_parse_rejects_unknown_letters() -> None:
    with pytest.raises(UnknownCommandError) as excinfo:
        parse_commands("FFXB")
    assert excinfo.value.letter == "X"
    assert excinfo.value.index == 2
    assert "position 2" in str(excinfo.value)


def test_from_letter() -> None:
    assert Command.from_letter("l") is Command.TURN_LEFT
    with pytest.raises(ValueError):
        Command.from_letter("Q")
    with pytest.raises(UnknownCommandError):
        Command.from_letter("FF")


def test_format_commands_round_trip() -> None:
    assert format_commands(parse_commands("ffrbl")) == "FFRBL"
