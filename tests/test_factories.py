import random

import pytest

from yapp.behaviors import (
    AggressiveChaseBehavior,
    AmbushChaseBehavior,
    PatrolChaseBehavior,
    RandomChaseBehavior,
)
from yapp.direction import Direction
from yapp.factories import create_ghost, create_item, create_pacman
from yapp.gameobject import StaticGameObject
from yapp.point import Point
from yapp.scene import Scene


@pytest.mark.parametrize(
    "name, direction, chase_type, start_timer",
    [
        ("blinky", Direction.RIGHT, AggressiveChaseBehavior, 1),
        ("pinky", Direction.LEFT, AmbushChaseBehavior, 10),
        ("inky", Direction.RIGHT, PatrolChaseBehavior, 50),
        ("clyde", Direction.LEFT, RandomChaseBehavior, 100),
    ],
)
def test_create_ghost_setup(name, direction, chase_type, start_timer):
    scene = Scene()
    ghost = create_ghost(scene, name, (13, 10.5), random.Random(0))
    assert ghost.name == name
    assert ghost.direction == direction
    assert isinstance(ghost.input.chase, chase_type)
    assert ghost.start_timer == start_timer


def test_create_ghost_position_scaled_to_pixels():
    ghost = create_ghost(Scene(), "blinky", (13, 10.5), None)
    assert ghost.pos == Point(260, 210)


def test_create_ghost_draws_on_scene():
    scene = Scene()
    ghost = create_ghost(scene, "pinky", (13, 13.5), None)
    assert ghost.graphics.shape in scene


def test_create_pacman_position_and_heading():
    pacman = create_pacman(Scene(), "pacman", (13, 16.5))
    assert pacman.pos == Point(260, 330)
    assert pacman.direction == Direction.RIGHT


def test_create_pacman_receives_keys_from_scene():
    scene = Scene()
    pacman = create_pacman(scene, "pacman", (13, 16.5))
    assert scene.dispatch_key("w") is True
    assert pacman.input.next_direction == Direction.UP
    assert pacman.graphics.shape in scene


def test_create_item():
    scene = Scene()
    item = create_item(scene, "dot", (3, 4))
    assert isinstance(item, StaticGameObject)
    assert item.pos == Point(3 * 20, 4 * 20)
    assert item.status is True
    assert item.graphics.shape in scene
    assert item.graphics.sprite.endswith("item/dot.png")