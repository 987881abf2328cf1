import pytest

from yapp.direction import Direction, from_point
from yapp.point import Point

MOVES = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]


@pytest.mark.parametrize(
    "direction,vector",
    [
        (Direction.UP, Point(0, -1)),
        (Direction.DOWN, Point(0, 1)),
        (Direction.LEFT, Point(-1, 0)),
        (Direction.RIGHT, Point(1, 0)),
        (Direction.STOP, Point(0, 0)),
    ],
)
def test_to_point(direction, vector):
    assert direction.to_point() == vector


@pytest.mark.parametrize("direction", list(Direction))
def test_from_point_round_trip(direction):
    assert from_point(direction.to_point()) is direction


def test_from_point_unknown_vector_is_stop():
    assert from_point(Point(2, 0)) is Direction.STOP


def test_enum_values():
    assert int(Direction.STOP) == -1
    assert Direction(0) is Direction.UP
    assert Direction(3) is Direction.RIGHT


@pytest.mark.parametrize(
    "direction,expected",
    [
        (Direction.UP, Direction.DOWN),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.RIGHT, Direction.LEFT),
    ],
)
def test_reverse(direction, expected):
    assert Direction.reverse(direction) is expected
    assert Direction.reverse(Direction.reverse(direction)) is direction
    assert from_point(Direction.reverse(direction).to_point()) is expected


def test_stop_is_fixed_under_all_operations():
    assert Direction.STOP.reverse() is Direction.STOP
    assert Direction.STOP.rotate_clockwise() is Direction.STOP
    assert Direction.STOP.rotate_counter_clockwise() is Direction.STOP


def test_rotate_clockwise_from_up():
    assert Direction.UP.rotate_clockwise() is Direction.RIGHT
    assert Direction.RIGHT.rotate_clockwise() is Direction.DOWN
    assert Direction.DOWN.rotate_clockwise() is Direction.LEFT
    assert Direction.LEFT.rotate_clockwise() is Direction.UP


@pytest.mark.parametrize("direction", MOVES)
def test_four_rotations_return_home(direction):
    d = direction
    for _ in range(4):
        d = Direction.rotate_clockwise(d)
    assert d is direction


@pytest.mark.parametrize("direction", MOVES)
def test_counter_clockwise_undoes_clockwise(direction):
    clockwise = Direction.rotate_clockwise(direction)
    assert Direction.rotate_counter_clockwise(clockwise) is direction
    assert Direction.rotate_counter_clockwise(direction) is Direction.reverse(clockwise)