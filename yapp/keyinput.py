"""Keyboard steering for pac-man."""

from __future__ import annotations

from typing import Any

from yapp.direction import Direction
from yapp.gameobject import GameObject, InputComponent
from yapp.maze import Maze

KEY_BINDINGS = {
    "right": Direction.RIGHT,
    "d": Direction.RIGHT,
    "left": Direction.LEFT,
    "a": Direction.LEFT,
    "up": Direction.UP,
    "w": Direction.UP,
    "down": Direction.DOWN,
    "s": Direction.DOWN,
}


class KeyInputComponent(InputComponent):
    """Remembers the last arrow or WASD key and hands it on as the next direction."""

    def __init__(self) -> None:
        self.next_direction = Direction.STOP

    def handle_key(self, key: Any) -> bool:
        """Record the direction bound to key; every key press is consumed."""
        direction = KEY_BINDINGS.get(str(key).lower())
        if direction is not None:
            self.next_direction = direction
        return True

    def __call__(self, key: Any) -> bool:
        return self.handle_key(key)

    def update(self, obj: GameObject, maze: Maze) -> None:
        obj.next_direction = self.next_direction  # type: ignore[attr-defined]