from __future__ import annotations

import pytest

from mars_rover.coordinate import Coordinate
from mars_rover.errors import UnknownHeadingError
from mars_rover.orientation import Orientation


def test_turn_right_cycles_clockwise() -> None:
    assert Orientation.NORTH.turn_right() is Orientation.EAST
    assert Orientation.EAST.turn_right() is Orientation.SOUTH
    assert Orientation.SOUTH.turn_right() is Orientation.WEST
    assert Orientation.WEST.turn_right() is Orientation.NORTH


def test_turn_left_cycles_counter_clockwise() -> None:
    assert Orientation.NORTH.turn_left() is Orientation.WEST
    assert Orientation.WEST.turn_left() is Orientation.SOUTH
    assert Orientation.SOUTH.turn_left() is Orientation.EAST
    assert Orientation.EAST.turn_left() is Orientation.NORTH


def test_opposite_pairs() -> None:
    assert Orientation.NORTH.opposite() is Orientation.SOUTH
    assert Orientation.SOUTH.opposite() is Orientation.NORTH
    assert Orientation.EAST.opposite() is Orientation.WEST
    assert Orientation.WEST.opposite() is Orientation.EAST


def test_turn_identities_hold_for_every_heading() -> None:
    for o in Orientation:
        assert o.opposite().opposite() is o
        assert o.turn_left().turn_right() is o
        assert o.turn_right().turn_right() is o.opposite()
        assert o.turn_right().turn_right().turn_right().turn_right() is o


def test_step_then_opposite_returns_to_start() -> None:
    start = Coordinate(-3, 7)
    for o in Orientation:
        assert start.step(o).step(o.opposite()) == start


def test_from_letter_accepts_lowercase_and_rejects_unknown() -> None:
    assert Orientation.from_letter("n") is Orientation.NORTH
    assert Orientation.from_letter(" W ") is Orientation.WEST
    with pytest.raises(UnknownHeadingError):
        Orientation.from_letter("X")
    with pytest.raises(ValueError):
        Orientation.from_letter("")


def test_letters() -> None:
    assert [o.letter for o in Orientation] == ["N", "E", "S", "W"]
    assert str(Orientation.SOUTH) == "S"
