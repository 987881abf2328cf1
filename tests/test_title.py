import pytest

from yapp.scene import PixmapItem, Scene, TextItem
from yapp.sound import SoundEngine
from yapp.title import Title


@pytest.fixture
def played():
    return []


@pytest.fixture
def title(played):
    return Title(Scene(), SoundEngine(backend=played.append))


def _texts(scene):
    return {item.text: item for item in scene.items if isinstance(item, TextItem)}


def _images(scene):
    return [item.source for item in scene.items if isinstance(item, PixmapItem)]


def test_construction_plays_beginning_sound(title, played):
    assert played == [title.sound.source]
    assert played[0].endswith("pacman_beginning.wav")


def test_construction_adds_logo_and_header(title):
    assert title.logo in title.scene
    assert title.logo.source.endswith("title.png")
    header = _texts(title.scene)["CHARACTER / NICKNAME"]
    assert header.color == "white"
    assert title.index == 0
    assert title.active


def test_ghost_images_use_fourth_frame(title):
    assert all(src.endswith("/4.png") for src in title.images)
    assert "blinky" in title.images[0]
    assert len(title.points) == len(title.nicknames)


def test_roster_rows_are_spaced_by_margin(title):
    ys = [point[1] for point in title.points]
    assert all(b - a == title.MARGIN for a, b in zip(ys, ys[1:]))
    assert {point[0] for point in title.points} == {title.GHOST_IMAGE_WIDTH}


@pytest.mark.parametrize(
    "step, character, nickname, color",
    [
        (0, "SHADOW", "BLINKY", "red"),
        (1, "SPEEDY", "PINKY", "pink"),
        (2, "BASHFUL", "INKY", "skyblue"),
        (3, "POKEY", "CLYDE", "orange"),
    ],
)
def test_roster_entries(title, step, character, nickname, color):
    for _ in range(step + 1):
        title.print_generator()
    texts = _texts(title.scene)
    assert texts["-" + character].color == color
    assert texts['"' + nickname + '"'].color == color
    assert title.images[step] in _images(title.scene)


def test_point_table_and_credit(title):
    for _ in range(6):
        title.print_generator()
    texts = _texts(title.scene)
    assert "10 pts" in texts
    assert "50 pts" in texts
    assert any("Pac-Man" in text for text in texts)
    assert title.active


def test_final_step_draws_cast_and_stops(title):
    for _ in range(7):
        title.print_generator()
    images = _images(title.scene)
    assert any(src.endswith("pacman/0.png") for src in images)
    for name in title.nicknames:
        assert any(src.endswith(f"{name.lower()}/2.png") for src in images)
    assert not title.active
    assert title.index == 7


def test_handle_key_emits_and_is_not_consumed(title):
    calls = []
    title.on_key_press.connect(lambda: calls.append(True))
    assert title.handle_key("space") is False
    assert calls == [True]
    assert not title.active


def test_title_as_scene_filter(title):
    calls = []
    title.on_key_press.connect(lambda: calls.append(True))
    title.scene.install_event_filter(title.handle_key)
    assert title.scene.dispatch_key("x") is False
    assert len(calls) == 1


def test_make_text_scales_to_grid_with_default_color(title):
    item = title.make_text("hello", (1, 2))
    assert item.pos == (1 * title.GRID_SIZE, 2 * title.GRID_SIZE)
    assert item.color == "white"
    assert item in title.scene


def test_make_image_scales_to_grid(title):
    item = title.make_image("some.png", (2.5, 3), 30)
    assert item.pos == (2.5 * title.GRID_SIZE, 3 * title.GRID_SIZE)
    assert item.height == 30
    assert item in title.scene