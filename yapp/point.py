"""Integer points on the playfield and conversion from grid to pixel space."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Point:
    """An immutable integer 2D point supporting vector arithmetic."""

    x: int = 0
    y: int = 0

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __mul__(self, factor: object) -> Point:
        if not isinstance(factor, int):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def distance_with(self, other: Point) -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)


def to_pixel(x: float, y: float, grid_size: int) -> Point:
    """Scale a (possibly fractional) grid coordinate to a pixel point, truncating."""
    return Point(int(x * grid_size), int(y * grid_size))