"""The attract screen: logo, ghost roster, point table and credit, revealed step by step."""

from __future__ import annotations

from typing import Any

from yapp.gameobject import Signal
from yapp.graphics import IMAGE_ROOT
from yapp.scene import PixmapItem, Scene, TextItem
from yapp.sound import SoundEngine

Coordinate = tuple[float, float]

_CHARACTER_COLORS = {
    "SHADOW": "red",
    "SPEEDY": "pink",
    "BASHFUL": "skyblue",
    "POKEY": "orange",
}


def _offset(point: Coordinate, dx: float, dy: float) -> Coordinate:
    return (point[0] + dx, point[1] + dy)


class Title:
    """Builds the title screen on a scene and waits for a key to start the game."""

    IMAGE_GHOST_SRC = f"{IMAGE_ROOT}/ghost/"
    IMAGE_ITEM_SRC = f"{IMAGE_ROOT}/item/"
    GRID_SIZE = 20
    MARGIN = 3
    GHOST_SIZE = 40
    GHOST_IMAGE_WIDTH = 4
    INTERVAL_MS = 500

    def __init__(self, scene: Scene, sound: SoundEngine | None = None) -> None:
        self.scene = scene
        self.sound = sound if sound is not None else SoundEngine()
        self.sound.begin_sound()
        self.on_key_press = Signal()

        self.logo = PixmapItem(source=f"{IMAGE_ROOT}/title.png", height=89, pos=(97, -60))
        scene.add_item(self.logo)

        self.make_text("CHARACTER / NICKNAME", (7, 2))
        self.index = 0
        self.characters = ["SHADOW", "SPEEDY", "BASHFUL", "POKEY"]
        self.nicknames = ["BLINKY", "PINKY", "INKY", "CLYDE"]
        self.images = [f"{self.IMAGE_GHOST_SRC}{name.lower()}/4.png" for name in self.nicknames]
        self.points: list[Coordinate] = [
            (self.GHOST_IMAGE_WIDTH, 4 + row * self.MARGIN) for row in range(len(self.nicknames))
        ]
        # While active, the driver calls print_generator every INTERVAL_MS.
        self.active = True

    def handle_key(self, key: Any) -> bool:
        """Stop revealing the screen and announce the key press; the key is not consumed."""
        self.active = False
        self.on_key_press.emit()
        return False

    def __call__(self, key: Any) -> bool:
        return self.handle_key(key)

    def print_generator(self) -> None:
        """Reveal the next part of the screen."""
        if self.index < 4:
            self.printer(
                self.images[self.index],
                self.characters[self.index],
                self.nicknames[self.index],
                self.points[self.index],
            )
        elif self.index == 4:
            self.dot_printer()
        elif self.index == 5:
            self.print_credit()
        else:
            self.make_image(f"{self.IMAGE_ITEM_SRC}pellet.png", (4.5, 18.5), 20)
            self.make_image(f"{IMAGE_ROOT}/pacman/0.png", (14, 18), 40)
            for column, name in enumerate(self.nicknames):
                self.make_image(
                    f"{IMAGE_ROOT}/ghost/{name.lower()}/2.png", (16 + 2 * column, 18), 40
                )
            self.active = False
        self.index += 1

    def printer(
        self, image: str, character: str, nickname: str, point: Coordinate
    ) -> None:
        """Draw one ghost with its character name and nickname in its colour."""
        color = _CHARACTER_COLORS.get(character, "white")
        self.make_image(image, point, self.GHOST_SIZE)
        self.make_text(f"-{character}", _offset(point, 3, 0.4), color)
        self.make_text(f'"{nickname}"', _offset(point, 12.5, 0.3), color)

    def dot_printer(self) -> None:
        """Draw the point values of a dot and a pellet."""
        image_x, text_x = 11, 13
        upper, lower = 23, 25
        self.make_image(f"{self.IMAGE_ITEM_SRC}dot.png", (image_x, upper), 20)
        self.make_text("10 pts", (text_x, upper))
        self.make_image(f"{self.IMAGE_ITEM_SRC}pellet.png", (image_x, lower), 20)
        self.make_text("50 pts", (text_x, lower))

    def print_credit(self) -> None:
        self.make_text("㉿Industrial Security OOP Pac-Man", (1, 28))

    def make_image(self, image_src: str, coordinate: Coordinate, size: int) -> PixmapItem:
        """Add an image scaled to size at a grid coordinate."""
        item = PixmapItem(
            source=image_src,
            height=size,
            pos=(coordinate[0] * self.GRID_SIZE, coordinate[1] * self.GRID_SIZE),
        )
        self.scene.add_item(item)
        return item

    def make_text(
        self, text: str, coordinate: Coordinate, color: str = "white"
    ) -> TextItem:
        """Add a line of text at a grid coordinate."""
        item = self.scene.add_text(text)
        item.pos = (coordinate[0] * self.GRID_SIZE, coordinate[1] * self.GRID_SIZE)
        item.color = color
        item.scale = 1.0
        return item