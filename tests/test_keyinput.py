import pytest

from yapp.direction import Direction
from yapp.gameobject import DynamicGameObject
from yapp.keyinput import KeyInputComponent
from yapp.maze import Maze
from yapp.point import Point
from yapp.scene import Scene


def make_object():
    return DynamicGameObject("pacman", Point(0, 0), Direction.RIGHT)


def test_initial_update_sets_stop():
    obj = make_object()
    obj.next_direction = Direction.UP
    KeyInputComponent().update(obj, Maze())
    assert obj.next_direction == Direction.STOP


@pytest.mark.parametrize(
    "key, expected",
    [
        ("right", Direction.RIGHT),
        ("d", Direction.RIGHT),
        ("left", Direction.LEFT),
        ("a", Direction.LEFT),
        ("up", Direction.UP),
        ("w", Direction.UP),
        ("down", Direction.DOWN),
        ("s", Direction.DOWN),
        ("W", Direction.UP),
    ],
)
def test_key_sets_next_direction(key, expected):
    component = KeyInputComponent()
    assert component.handle_key(key) is True
    obj = make_object()
    component.update(obj, Maze())
    assert obj.next_direction == expected


def test_unbound_key_keeps_previous_direction():
    component = KeyInputComponent()
    component.handle_key("left")
    assert component.handle_key("q") is True
    obj = make_object()
    component.update(obj, Maze())
    assert obj.next_direction == Direction.LEFT


def test_works_as_scene_filter():
    scene = Scene()
    component = KeyInputComponent()
    scene.install_event_filter(component)
    assert scene.dispatch_key("down") is True
    assert component.next_direction == Direction.DOWN