import pytest

from algokit.rover import Heading, Rover


def test_classic_command_sequence():
    rover = Rover(3, 3, "E")
    rover.process("MMRMMRMRRM")
    assert str(rover) == "5 1 E"


def test_str_reports_initial_position():
    assert str(Rover(1, 2, "N")) == "1 2 N"


@pytest.mark.parametrize("heading", list(Heading))
def test_four_turns_restore_heading(heading):
    left = Rover(0, 0, heading)
    left.process("LLLL")
    right = Rover(0, 0, heading)
    right.process("RRRR")
    assert left.heading is heading
    assert right.heading is heading


@pytest.mark.parametrize("heading", list(Heading))
def test_left_undoes_right(heading):
    rover = Rover(0, 0, heading)
    rover.process("RL")
    assert rover.heading is heading
    assert (rover.x, rover.y) == (0, 0)


@pytest.mark.parametrize("heading", list(Heading))
def test_turn_around_and_back_returns_home(heading):
    rover = Rover(4, -2, heading)
    rover.process("MMRRMM")
    assert (rover.x, rover.y) == (4, -2)
    assert rover.heading is heading.right.right


def test_unknown_command_moves_forward():
    rover = Rover(0, 0, Heading.N)
    rover.process("X")
    assert (rover.x, rover.y) == (0, 1)


def test_invalid_heading_rejected():
    with pytest.raises(ValueError):
        Rover(0, 0, "Q")