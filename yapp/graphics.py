"""Sprite handling for ghosts, pac-man and items."""

from __future__ import annotations

from typing import Any

from yapp.actors import GhostBehavior
from yapp.direction import Direction
from yapp.gameobject import GameObject, GraphicsComponent
from yapp.point import Point
from yapp.scene import PixmapItem, Scene

IMAGE_ROOT = "res/img"

_GHOST_DEAD_BASE = {
    Direction.UP: 15,
    Direction.DOWN: 12,
    Direction.LEFT: 13,
    Direction.RIGHT: 14,
}
_GHOST_DEFAULT_BASE = {
    Direction.UP: 6,
    Direction.DOWN: 0,
    Direction.LEFT: 2,
    Direction.RIGHT: 4,
}
_PACMAN_ROTATION = {
    Direction.UP: 270,
    Direction.DOWN: 90,
    Direction.LEFT: 180,
    Direction.RIGHT: 0,
}
_PACMAN_REVIVE_POS = Point(14 * 20 - 10, 17 * 20 - 10)
_PACMAN_DEATH_FRAMES = 14


class GhostGraphicsComponent(GraphicsComponent):
    """Animates a ghost's body, frightened look and eyes-only dead look."""

    SCALE = 40

    def __init__(self, scene: Scene, name: str) -> None:
        self.scene = scene
        self.sprites = (
            [f"{IMAGE_ROOT}/ghost/{name}/{i}.png" for i in range(8)]
            + [f"{IMAGE_ROOT}/ghost/nerf/{i}.png" for i in range(4)]
            + [f"{IMAGE_ROOT}/ghost/eaten/{i}.png" for i in range(4)]
        )
        self.shape = PixmapItem(source=self.sprites[0], height=self.SCALE)
        scene.add_item(self.shape)
        self._base = 0
        self._add = 1

    def update(self, obj: GameObject) -> None:
        ghost: Any = obj
        behavior = ghost.behavior
        if behavior == GhostBehavior.FRIGHTENED:
            self._base = 9 if ghost.frightened_timer >= 85 else 8
        elif behavior == GhostBehavior.DEAD:
            self._base = _GHOST_DEAD_BASE.get(ghost.direction, self._base)
        elif behavior != GhostBehavior.STOP:
            self._base = _GHOST_DEFAULT_BASE.get(ghost.direction, self._base)

        self.shape.pos = (ghost.pos.x, ghost.pos.y)
        if self._base >= 12:
            self.shape.source = self.sprites[self._base]
        else:
            self.shape.source = self.sprites[self._base + self._add]
        self._add ^= 1

    def delete(self) -> None:
        self.scene.remove_item(self.shape)


class PacmanGraphicsComponent(GraphicsComponent):
    """Animates pac-man's mouth and plays the death sequence before reviving him."""

    SCALE = 40

    def __init__(self, scene: Scene) -> None:
        self.scene = scene
        self.sprites = [f"{IMAGE_ROOT}/pacman/{i}.png" for i in range(3)]
        self.shape = PixmapItem(source=self.sprites[0], height=self.SCALE)
        scene.add_item(self.shape)
        self._index = 0
        self._add = 1
        self._last_pos = Point(0, 0)

    def update(self, obj: GameObject) -> None:
        pacman: Any = obj
        if pacman.life_status:
            self.shape.pos = (pacman.pos.x, pacman.pos.y)
            if pacman.pos == self._last_pos:
                return
            self._last_pos = pacman.pos

            self.shape.source = self.sprites[self._index]
            self._index += self._add
            if self._index >= 2 or self._index <= 0:
                self._add = -self._add

            rotation = _PACMAN_ROTATION.get(pacman.direction)
            if rotation is not None:
                self.shape.rotation = rotation
            return

        if self._index == _PACMAN_DEATH_FRAMES:
            self._index = 0
            pacman.pos = _PACMAN_REVIVE_POS
            pacman.life_status = True
            pacman.pacman_revive.emit()
        self.shape.source = f"{IMAGE_ROOT}/pacman/dead/{self._index}.png"
        self.shape.height = self.SCALE
        self._index += 1

    def delete(self) -> None:
        self.scene.remove_item(self.shape)


class ItemGraphicsComponent(GraphicsComponent):
    """Shows a dot or pellet until it has been eaten."""

    SCALE = 20

    def __init__(self, name: str, scene: Scene) -> None:
        self.name = name
        self.scene = scene
        self.sprite = f"{IMAGE_ROOT}/item/{name}.png"
        self.shape = PixmapItem(source=self.sprite, height=self.SCALE)
        scene.add_item(self.shape)

    def update(self, obj: GameObject) -> None:
        self.shape.pos = (obj.pos.x, obj.pos.y)
        if not getattr(obj, "status", True):
            self.shape.visible = False

    def delete(self) -> None:
        self.scene.remove_item(self.shape)