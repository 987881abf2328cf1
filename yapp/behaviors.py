"""Targeting rules the ghosts follow in each mode."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from yapp.actors import Ghost
from yapp.direction import Direction
from yapp.maze import Maze
from yapp.point import Point

_MOVES = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)

_SCATTER_TARGETS = {
    "blinky": Point(500, -60),
    "inky": Point(20, 780),
    "pinky": Point(60, -60),
    "clyde": Point(500, 780),
}


class ChaseBehavior(ABC):
    """Chooses the target a ghost heads for while chasing."""

    @abstractmethod
    def chase(self, ghost: Ghost, maze: Maze) -> None:
        ...


class AggressiveChaseBehavior(ChaseBehavior):
    """Head straight for pac-man."""

    def chase(self, ghost: Ghost, maze: Maze) -> None:
        ghost.target = maze.pacman_pos


class AmbushChaseBehavior(ChaseBehavior):
    """Head for a spot ahead of pac-man."""

    def chase(self, ghost: Ghost, maze: Maze) -> None:
        ghost.target = maze.pacman_pos + maze.pacman_dir * 4


class PatrolChaseBehavior(ChaseBehavior):
    """Head for the point mirroring blinky around the spot ahead of pac-man."""

    def chase(self, ghost: Ghost, maze: Maze) -> None:
        ahead = maze.pacman_pos + maze.pacman_dir * 2
        ghost.target = 2 * ahead - maze.ghost_positions["blinky"]


class RandomChaseBehavior(ChaseBehavior):
    """Chase pac-man when far away, retreat to a corner when close."""

    RETREAT = Point(480, 1000)
    SHY_DISTANCE = 160

    def chase(self, ghost: Ghost, maze: Maze) -> None:
        if ghost.pos.distance_with(maze.pacman_pos) >= self.SHY_DISTANCE:
            ghost.target = maze.pacman_pos
        else:
            ghost.target = self.RETREAT


def scatter(ghost: Ghost, maze: Maze) -> None:
    """Send the ghost towards its home corner; unknown names keep their target."""
    target = _SCATTER_TARGETS.get(ghost.name)
    if target is not None:
        ghost.target = target


def frightened(ghost: Ghost, rng: random.Random | None = None) -> None:
    """Pick a random next direction that does not reverse the current one."""
    rng = rng or random.Random()
    forbidden = ghost.direction.reverse()
    choice = rng.choice(_MOVES)
    while choice == forbidden:
        choice = rng.choice(_MOVES)
    ghost.next_direction = choice