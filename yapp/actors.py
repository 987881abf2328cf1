"""Pac-Man and the ghosts."""

from __future__ import annotations

from enum import IntEnum

from yapp.direction import Direction
from yapp.gameobject import DynamicGameObject, Signal
from yapp.point import Point


class GhostBehavior(IntEnum):
    """What a ghost is currently doing."""

    CHASE = 0
    SCATTER = 1
    FRIGHTENED = 2
    DEAD = 3
    STOP = 4
    GO_OUT_GATE = 5


class Ghost(DynamicGameObject):
    """A ghost with a behaviour mode, a target and several timers."""

    def __init__(self, name: str, pos: Point, direction: Direction, **components) -> None:
        super().__init__(name, pos, direction, **components)
        self.behavior = GhostBehavior.GO_OUT_GATE
        self.target = Point()
        self.frightened_timer = 0
        self.mode_timer = 0
        self.speed = 1
        self.start_timer = 0

    def pellet_eaten(self) -> None:
        """Become frightened unless dead or still leaving the ghost house."""
        if self.behavior not in (GhostBehavior.DEAD, GhostBehavior.GO_OUT_GATE):
            self.behavior = GhostBehavior.FRIGHTENED


class Pacman(DynamicGameObject):
    """The player character."""

    ENERGIZE_TICKS = 100

    def __init__(self, name: str, pos: Point, direction: Direction, **components) -> None:
        super().__init__(name, pos, direction, **components)
        self.life_status = True
        self.energized = False
        self.timer = 0
        self.revived = Signal()

    def energize(self) -> None:
        """Make ghosts edible for a while."""
        self.energized = True
        self.timer = self.ENERGIZE_TICKS