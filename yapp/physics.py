"""Movement, tunnels, collisions and mode timers for ghosts, pac-man and items."""

from __future__ import annotations

from typing import Any

from yapp.actors import GhostBehavior
from yapp.direction import Direction
from yapp.gameobject import GameObject, PhysicsComponent
from yapp.ghostinput import GATE, GATE_X
from yapp.maze import Maze
from yapp.point import Point

STEP = 5
GHOST_HOUSE_TOP = 210
GHOST_HOUSE_BOTTOM = 270
FRIGHTENED_DURATION = 100
MODE_DURATION = 100
DEAD_SPEED = 4

_TUNNEL_Y = 14 * 20 - 10
_TUNNEL = {
    Point(26 * 20, _TUNNEL_Y): Point(10, _TUNNEL_Y),
    Point(0, _TUNNEL_Y): Point(26 * 20 - 10, _TUNNEL_Y),
}


def _wrap_tunnel(obj: GameObject, pos: Point) -> None:
    destination = _TUNNEL.get(pos)
    if destination is not None:
        obj.pos = destination


class GhostPhysicsComponent(PhysicsComponent):
    """Moves a ghost, leaves the ghost house, and runs its mode timers."""

    def update(self, obj: GameObject, maze: Maze) -> None:
        ghost: Any = obj
        if ghost.start_timer != 0:
            return

        if ghost.behavior == GhostBehavior.GO_OUT_GATE:
            x, y = ghost.pos
            if x > GATE_X:
                ghost.direction = Direction.LEFT
            elif x < GATE_X:
                ghost.direction = Direction.RIGHT
            elif GHOST_HOUSE_TOP <= y <= GHOST_HOUSE_BOTTOM:
                ghost.pos = ghost.pos + Point(0, -STEP)
                return

        if ghost.behavior == GhostBehavior.STOP:
            return

        pos = ghost.pos
        direction = ghost.direction
        next_direction = ghost.next_direction
        step = direction.to_point()

        if next_direction != Direction.STOP and maze.can_turn_around_to_next_direction(
            pos, direction, next_direction
        ):
            step = next_direction.to_point()
            ghost.direction = next_direction
            ghost.next_direction = Direction.STOP

        moved = 0
        while moved < ghost.speed:
            if maze.can_forward_to_direction(pos, direction):
                pos = pos + step * STEP
                ghost.pos = pos
            if ghost.behavior == GhostBehavior.DEAD and ghost.target == ghost.pos:
                ghost.behavior = GhostBehavior.CHASE
            if ghost.behavior != GhostBehavior.DEAD:
                ghost.speed = 1
            if maze.is_encounter_intersection(pos, ghost.direction):
                break
            moved += 1

        _wrap_tunnel(ghost, pos)

        if ghost.name in maze.ghost_positions:
            if ghost.behavior == GhostBehavior.DEAD:
                maze.ghost_positions[ghost.name] = GATE
                return
            maze.ghost_positions[ghost.name] = pos
            if maze.check_collision(ghost.name) and ghost.behavior == GhostBehavior.FRIGHTENED:
                ghost.eaten.emit()
                ghost.behavior = GhostBehavior.DEAD
                ghost.speed = DEAD_SPEED

        self._run_timers(ghost)

    @staticmethod
    def _run_timers(ghost: Any) -> None:
        if ghost.behavior != GhostBehavior.FRIGHTENED:
            ghost.frightened_timer = 0
        else:
            ghost.frightened_timer += 1
        if ghost.frightened_timer >= FRIGHTENED_DURATION:
            ghost.behavior = GhostBehavior.CHASE

        if ghost.behavior in (GhostBehavior.CHASE, GhostBehavior.SCATTER):
            ghost.mode_timer += 1
            if ghost.mode_timer >= MODE_DURATION:
                ghost.mode_timer = 0
                ghost.behavior = (
                    GhostBehavior.SCATTER
                    if ghost.behavior == GhostBehavior.CHASE
                    else GhostBehavior.CHASE
                )


class PacmanPhysicsComponent(PhysicsComponent):
    """Moves pac-man, reports his position to the maze and detects ghost hits."""

    def update(self, obj: GameObject, maze: Maze) -> None:
        pacman: Any = obj
        pos = pacman.pos
        direction = pacman.direction
        next_direction = pacman.next_direction
        step = direction.to_point()

        if pacman.life_status:
            if next_direction != Direction.STOP and maze.can_turn_around_to_next_direction(
                pos, direction, next_direction
            ):
                step = next_direction.to_point()
                pacman.direction = next_direction
                pacman.next_direction = Direction.STOP

            if maze.can_forward_to_direction(pos, direction):
                pacman.pos = pos + step * STEP

            _wrap_tunnel(pacman, pos)

            maze.pacman_pos = pacman.pos
            maze.pacman_dir = direction.to_point()

            if maze.check_collision_ghost() and not pacman.energized:
                pacman.eaten.emit()

        if pacman.energized:
            pacman.timer -= 1
        if pacman.timer == 0:
            pacman.energized = False


class ItemPhysicsComponent(PhysicsComponent):
    """Marks an item as consumed once pac-man reaches its cell."""

    def update(self, obj: GameObject, maze: Maze) -> None:
        item: Any = obj
        if not item.status:
            return
        if maze.check_collision_dot(item.pos):
            item.status = False
            item.eaten.emit()