"""Movement directions on the maze grid."""

from __future__ import annotations

from enum import IntEnum

from yapp.point import Point


class Direction(IntEnum):
    """A heading on the grid; STOP means no movement."""

    STOP = -1
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    def to_point(self) -> Point:
        """Unit vector of this direction."""
        return _VECTORS[self]

    def reverse(self) -> Direction:
        """The opposite direction."""
        return _REVERSE[self]

    def rotate_clockwise(self) -> Direction:
        """The direction a quarter turn clockwise."""
        return _CLOCKWISE[self]

    def rotate_counter_clockwise(self) -> Direction:
        """The direction a quarter turn counter-clockwise."""
        return self.rotate_clockwise().reverse()


_VECTORS = {
    Direction.UP: Point(0, -1),
    Direction.DOWN: Point(0, 1),
    Direction.LEFT: Point(-1, 0),
    Direction.RIGHT: Point(1, 0),
    Direction.STOP: Point(0, 0),
}

_BY_VECTOR = {vector: direction for direction, vector in _VECTORS.items()}

_REVERSE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.STOP: Direction.STOP,
}

_CLOCKWISE = {
    Direction.UP: Direction.RIGHT,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
    Direction.RIGHT: Direction.DOWN,
    Direction.STOP: Direction.STOP,
}


def from_point(point: Point) -> Direction:
    """The direction whose unit vector is point, or STOP for anything else."""
    return _BY_VECTOR.get(point, Direction.STOP)