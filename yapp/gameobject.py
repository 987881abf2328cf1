"""Game objects, their pluggable components and a minimal signal mechanism."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from yapp.direction import Direction
from yapp.maze import Maze
from yapp.point import Point


class Signal:
    """A list of callables that are invoked together when the signal is emitted."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def __len__(self) -> int:
        return len(self._slots)

    def connect(self, slot: Callable[..., Any]) -> None:
        """Call slot on every later emission."""
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        """Stop calling slot; raises ValueError if it was never connected."""
        self._slots.remove(slot)

    def emit(self, *args: Any) -> None:
        """Call every connected slot with args, in connection order."""
        for slot in list(self._slots):
            slot(*args)


class InputComponent(ABC):
    """Decides where an object wants to go."""

    @abstractmethod
    def update(self, obj: GameObject, maze: Maze) -> None:
        ...


class PhysicsComponent(ABC):
    """Moves an object and resolves its collisions."""

    @abstractmethod
    def update(self, obj: GameObject, maze: Maze) -> None:
        ...


class GraphicsComponent(ABC):
    """Draws an object on a scene."""

    @abstractmethod
    def update(self, obj: GameObject) -> None:
        ...

    @abstractmethod
    def delete(self) -> None:
        ...


def _require(component: Any, kind: str, name: str) -> Any:
    if component is None:
        raise RuntimeError(f"{name!r} has no {kind} component")
    return component


class GameObject(ABC):
    """Something on the playfield with a name and a pixel position."""

    def __init__(self, name: str = "", pos: Point | None = None) -> None:
        self.name = name
        self.pos = pos if pos is not None else Point()
        self.eaten = Signal()

    @abstractmethod
    def update(self, maze: Maze) -> None:
        """Advance the object by one tick."""

    @abstractmethod
    def delete(self) -> None:
        """Remove the object's drawing from the scene."""


class DynamicGameObject(GameObject):
    """A moving object driven by input, physics and graphics components."""

    def __init__(
        self,
        name: str = "",
        pos: Point | None = None,
        direction: Direction = Direction.STOP,
        input: InputComponent | None = None,
        physics: PhysicsComponent | None = None,
        graphics: GraphicsComponent | None = None,
    ) -> None:
        super().__init__(name, pos)
        self.direction = direction
        self.next_direction = Direction.STOP
        self.input = input
        self.physics = physics
        self.graphics = graphics

    def update(self, maze: Maze) -> None:
        """Run input, then physics, then graphics."""
        input_component = _require(self.input, "input", self.name)
        physics = _require(self.physics, "physics", self.name)
        graphics = _require(self.graphics, "graphics", self.name)
        input_component.update(self, maze)
        physics.update(self, maze)
        graphics.update(self)

    def delete(self) -> None:
        _require(self.graphics, "graphics", self.name).delete()


class StaticGameObject(GameObject):
    """An item that stays in place until it is consumed."""

    def __init__(
        self,
        name: str = "",
        pos: Point | None = None,
        physics: PhysicsComponent | None = None,
        graphics: GraphicsComponent | None = None,
    ) -> None:
        super().__init__(name, pos)
        self.status = True
        self.physics = physics
        self.graphics = graphics

    def update(self, maze: Maze) -> None:
        """Run physics, then graphics."""
        physics = _require(self.physics, "physics", self.name)
        graphics = _require(self.graphics, "graphics", self.name)
        physics.update(self, maze)
        graphics.update(self)

    def delete(self) -> None:
        _require(self.graphics, "graphics", self.name).delete()