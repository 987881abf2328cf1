"""Steering for ghosts: mode handling and choice of the next turn."""

from __future__ import annotations

import random

from yapp.actors import Ghost, GhostBehavior
from yapp.behaviors import AggressiveChaseBehavior, ChaseBehavior, frightened, scatter
from yapp.direction import Direction
from yapp.gameobject import GameObject, InputComponent
from yapp.maze import Maze
from yapp.point import Point

GATE_X = 260
GATE = Point(260, 210)
_UNREACHABLE = 1000.0


class GhostInputComponent(InputComponent):
    """Sets a ghost's target and next direction according to its behaviour."""

    def __init__(
        self, chase_behavior: ChaseBehavior | None = None, rng: random.Random | None = None
    ) -> None:
        self.chase = chase_behavior if chase_behavior is not None else AggressiveChaseBehavior()
        self.rng = rng if rng is not None else random.Random()

    def update(self, obj: GameObject, maze: Maze) -> None:
        ghost: Ghost = obj  # type: ignore[assignment]
        if ghost.start_timer != 0:
            ghost.start_timer -= 1
            if ghost.start_timer != 0:
                return
            ghost.behavior = GhostBehavior.GO_OUT_GATE

        if ghost.behavior is GhostBehavior.GO_OUT_GATE:
            if ghost.pos.x != GATE_X:
                ghost.target = Point(GATE_X, ghost.pos.y)
                return
            if ghost.pos.y != GATE.y:
                ghost.target = GATE
                return
            ghost.behavior = GhostBehavior.CHASE

        next_pos = ghost.pos + ghost.direction.to_point() * 5
        if not maze.is_encounter_intersection(next_pos, ghost.direction):
            return

        if ghost.behavior is GhostBehavior.CHASE:
            self.chase.chase(ghost, maze)
        elif ghost.behavior is GhostBehavior.SCATTER:
            scatter(ghost, maze)
        elif ghost.behavior is GhostBehavior.FRIGHTENED:
            frightened(ghost, self.rng)
            return
        elif ghost.behavior is GhostBehavior.DEAD:
            ghost.target = GATE

        ghost.next_direction = self.find_next_direction(ghost, maze)

    def find_next_direction(self, ghost: Ghost, maze: Maze) -> Direction:
        """Of straight on, right and left, the open one whose next cell is nearest the target."""
        current = ghost.direction
        candidates = (current, current.rotate_clockwise(), current.rotate_counter_clockwise())
        cord = maze.translate_to_maze_cord(ghost.pos)
        target_cord = maze.translate_to_maze_cord(ghost.target)

        distances = [
            (cord + d.to_point()).distance_with(target_cord)
            if maze.can_forward_to_direction(ghost.pos, d)
            else _UNREACHABLE
            for d in candidates
        ]
        best = min(distances)
        return next(
            (d for d, dist in zip(candidates, distances) if dist == best), Direction.STOP
        )