"""The maze layout and the movement and collision rules built on it."""

from __future__ import annotations

from yapp.direction import Direction
from yapp.point import Point

# '#' wall, '.' dot, 'o' pellet, ' ' open floor without an item.
_LAYOUT = (
    "############################",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#o####.#####.##.#####.####o#",
    "#.####.#####.##.#####.####.#",
    "#..........................#",
    "#.####.##.########.##.####.#",
    "#.####.##.########.##.####.#",
    "#......##....##....##......#",
    "######.##### ## #####.######",
    "     #.##### ## #####.#     ",
    "     #.##          ##.#     ",
    "     #.## ######## ##.#     ",
    "######.## #      # ##.######",
    "      .   #      #   .      ",
    "######.## #      # ##.######",
    "     #.## ######## ##.#     ",
    "     #.##          ##.#     ",
    "     #.## ######## ##.#     ",
    "######.## ######## ##.######",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#.####.#####.##.#####.####.#",
    "#o..##.......  .......##..o#",
    "###.##.##.########.##.##.###",
    "###.##.##.########.##.##.###",
    "#......##....##....##......#",
    "#.##########.##.##########.#",
    "#.##########.##.##########.#",
    "#..........................#",
    "############################",
)

_WALL = 0
_DOT = 1
_PELLET = 2
_TILES = {"#": _WALL, ".": _DOT, "o": _PELLET, " ": -1}

_MOVES = tuple(d for d in Direction if d is not Direction.STOP)


def _is_positive_odd(value: int) -> bool:
    return value > 0 and value % 2 == 1


class Maze:
    """Grid of walls and items plus the last known positions of every actor."""

    WIDTH = 28
    HEIGHT = 31
    GRID_SIZE = 20
    GHOST_NAMES = ("blinky", "clyde", "inky", "pinky")

    def __init__(self) -> None:
        self._grid = tuple(tuple(_TILES[c] for c in row) for row in _LAYOUT)
        self.pacman_pos = Point()
        self.pacman_dir = Point()
        self.ghost_positions: dict[str, Point] = {name: Point() for name in self.GHOST_NAMES}

    def _in_bounds(self, cord: Point) -> bool:
        return 0 <= cord.x < self.WIDTH and 0 <= cord.y < self.HEIGHT - 1

    def _cell(self, cord: Point) -> int:
        if not self._in_bounds(cord):
            return _WALL
        return self._grid[cord.y][cord.x]

    def _find(self, tile: int) -> list[Point]:
        return [
            Point(x, y)
            for y, row in enumerate(self._grid)
            for x, value in enumerate(row)
            if value == tile
        ]

    def dots(self) -> list[Point]:
        """Grid coordinates of all dots, row by row."""
        return self._find(_DOT)

    def pellets(self) -> list[Point]:
        """Grid coordinates of all power pellets, row by row."""
        return self._find(_PELLET)

    def translate_to_maze_cord(self, pos: Point) -> Point:
        """Grid cell that an actor drawn at pixel position pos occupies."""
        size = self.GRID_SIZE
        return Point(int((pos.x + size) / size), int((pos.y + size) / size))

    def can_forward_to_direction(self, pos: Point, direction: Direction) -> bool:
        """Whether an actor at pos may take a step in direction."""
        size = self.GRID_SIZE
        step = direction.to_point()
        center = pos + Point(size, size)
        next_cord = self.translate_to_maze_cord(pos) + step
        if self._cell(next_cord) != _WALL:
            return True

        wall_center = next_cord * size + Point(size // 2, size // 2)
        if direction is Direction.UP:
            return center.y - size > wall_center.y
        if direction is Direction.DOWN:
            return center.y + size < wall_center.y
        if direction is Direction.LEFT:
            return center.x - size > wall_center.x
        if direction is Direction.RIGHT:
            return center.x + size < wall_center.x
        return False

    def can_turn_around_to_next_direction(
        self, pos: Point, direction: Direction, next_direction: Direction
    ) -> bool:
        """Whether an actor at pos heading direction may switch to next_direction."""
        if next_direction in (direction, direction.reverse()):
            return True
        if pos.x % 10 or pos.y % 10:
            return False
        if not (_is_positive_odd(pos.x // 10) and _is_positive_odd(pos.y // 10)):
            return False

        step = next_direction.to_point()
        target = self.translate_to_maze_cord(pos + step) + step
        return self._cell(target) != _WALL

    def is_encounter_intersection(self, pos: Point, direction: Direction) -> bool:
        """Whether at least two open neighbours exist besides the one in direction."""
        cord = self.translate_to_maze_cord(pos)
        open_sides = sum(
            1
            for d in _MOVES
            if d != direction and self._cell(cord + d.to_point()) != _WALL
        )
        return open_sides >= 2

    def check_collision(self, name: str) -> bool:
        """Whether pacman shares a grid cell with the named ghost."""
        ghost_pos = self.ghost_positions[name]
        return self.translate_to_maze_cord(self.pacman_pos) == self.translate_to_maze_cord(
            ghost_pos
        )

    def check_collision_ghost(self) -> bool:
        """Whether pacman shares a grid cell with any ghost."""
        return any(self.check_collision(name) for name in self.GHOST_NAMES)

    def check_collision_dot(self, dot_point: Point) -> bool:
        """Whether pacman is on the cell of an item placed at dot_point."""
        return self.translate_to_maze_cord(self.pacman_pos) == self.translate_to_maze_cord(
            dot_point - Point(10, 10)
        )