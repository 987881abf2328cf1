"""Builders that assemble ghosts, pac-man and items from their components."""

from __future__ import annotations

import random

from yapp.actors import Ghost, Pacman
from yapp.behaviors import (
    AggressiveChaseBehavior,
    AmbushChaseBehavior,
    ChaseBehavior,
    PatrolChaseBehavior,
    RandomChaseBehavior,
)
from yapp.direction import Direction
from yapp.gameobject import StaticGameObject
from yapp.ghostinput import GhostInputComponent
from yapp.graphics import GhostGraphicsComponent, ItemGraphicsComponent, PacmanGraphicsComponent
from yapp.keyinput import KeyInputComponent
from yapp.physics import GhostPhysicsComponent, ItemPhysicsComponent, PacmanPhysicsComponent
from yapp.point import to_pixel
from yapp.scene import Scene

GRID_SIZE = 20

Cord = tuple[float, float]

# Per ghost: starting heading, chase strategy and ticks spent waiting in the house.
_GHOST_SETUP: dict[str, tuple[Direction, type[ChaseBehavior], int]] = {
    "blinky": (Direction.RIGHT, AggressiveChaseBehavior, 1),
    "pinky": (Direction.LEFT, AmbushChaseBehavior, 10),
    "inky": (Direction.RIGHT, PatrolChaseBehavior, 50),
}
_DEFAULT_GHOST_SETUP = (Direction.LEFT, RandomChaseBehavior, 100)


def create_ghost(
    scene: Scene, name: str, cord: Cord, rng: random.Random | None = None
) -> Ghost:
    """A ghost at grid cord; any name other than blinky, pinky or inky behaves as clyde."""
    direction, chase_type, start_timer = _GHOST_SETUP.get(name, _DEFAULT_GHOST_SETUP)
    ghost = Ghost(name, to_pixel(cord[0], cord[1], GRID_SIZE), direction)
    ghost.input = GhostInputComponent(chase_type(), rng)
    ghost.physics = GhostPhysicsComponent()
    ghost.graphics = GhostGraphicsComponent(scene, name)
    ghost.start_timer = start_timer
    return ghost


def create_pacman(scene: Scene, name: str, cord: Cord) -> Pacman:
    """Pac-man at grid cord, steered by keys delivered through the scene."""
    pacman = Pacman(name, to_pixel(cord[0], cord[1], GRID_SIZE), Direction.RIGHT)
    keyboard = KeyInputComponent()
    scene.install_event_filter(keyboard)
    pacman.input = keyboard
    pacman.physics = PacmanPhysicsComponent()
    pacman.graphics = PacmanGraphicsComponent(scene)
    return pacman


def create_item(scene: Scene, name: str, cord: Cord) -> StaticGameObject:
    """A dot or pellet at grid cord."""
    return StaticGameObject(
        name,
        to_pixel(cord[0], cord[1], GRID_SIZE),
        physics=ItemPhysicsComponent(),
        graphics=ItemGraphicsComponent(name, scene),
    )