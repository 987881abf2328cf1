"""The main window: title screen, starting a game, the tick driver and the pygame front end."""

from __future__ import annotations

import argparse
import contextlib
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from yapp.game import Game
from yapp.graphics import IMAGE_ROOT
from yapp.scene import PixmapItem, Scene, TextItem
from yapp.sound import SoundEngine, pygame
from yapp.title import Title

FONT_PATH = "res/font/emulogic.ttf"
ICON_PATH = f"{IMAGE_ROOT}/pacman/1.png"


@dataclass(eq=False)
class GridLine:
    """A straight line drawn on the scene."""

    start: tuple[float, float]
    end: tuple[float, float]
    color: str = "gray"
    visible: bool = True


class MainWindow:
    """Owns the current scene and switches from the title screen to a game."""

    WIDTH = 560
    HEIGHT = 720
    GRID_SCALE = 20
    MAZE_OFFSET = 60
    WINDOW_TITLE = "Yet Another Pac-Man Project!"

    def __init__(
        self,
        highscore_path: str | Path | None = None,
        sound: SoundEngine | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.window_title = self.WINDOW_TITLE
        self.highscore_path = highscore_path
        self.sound = sound if sound is not None else SoundEngine()
        self.rng = rng
        self.scene = self._new_scene()
        self.title: Title | None = None
        self.game: Game | None = None
        self._title_elapsed = 0
        self._game_elapsed = 0

    def _new_scene(self) -> Scene:
        return Scene(self.WIDTH, self.HEIGHT, top=-self.MAZE_OFFSET, background="black")

    def intro(self) -> None:
        """Show the title screen; a key press starts the game."""
        self.title = Title(self.scene, self.sound)
        self.scene.install_event_filter(self.title.handle_key)
        self.title.on_key_press.connect(self.handle_start_game)
        self._title_elapsed = 0

    def handle_start_game(self) -> None:
        """Replace the scene with the maze and start a game on it."""
        if self.title is not None:
            with contextlib.suppress(ValueError):
                self.title.on_key_press.disconnect(self.handle_start_game)
        self.scene = self._new_scene()
        # An image without a height is drawn scaled to the scene width.
        self.scene.add_pixmap(f"{IMAGE_ROOT}/maze.png")
        self.game = Game(self.scene, self.highscore_path, self.sound, self.rng)
        self.game.init()
        self.game.game_loop()
        self._game_elapsed = 0

    def draw_debug_grid(self) -> list[GridLine]:
        """Overlay grey lines on every grid boundary."""
        top = -self.MAZE_OFFSET
        lines = [
            GridLine((x, top), (x, self.HEIGHT))
            for x in range(0, self.WIDTH + 1, self.GRID_SCALE)
        ]
        lines += [
            GridLine((0, y), (self.WIDTH, y))
            for y in range(top, self.HEIGHT + 1, self.GRID_SCALE)
        ]
        for line in lines:
            self.scene.add_item(line)
        return lines

    def tick(self, elapsed_ms: int) -> None:
        """Advance the title animation and the game loop by elapsed_ms of wall time."""
        title = self.title
        if title is not None and title.active:
            self._title_elapsed += elapsed_ms
            while title.active and self._title_elapsed >= Title.INTERVAL_MS:
                self._title_elapsed -= Title.INTERVAL_MS
                title.print_generator()

        game = self.game
        if game is not None and game.running:
            self._game_elapsed += elapsed_ms
            while game.running and self._game_elapsed >= Game.LOOP_INTERVAL_MS:
                self._game_elapsed -= Game.LOOP_INTERVAL_MS
                game.update()
        else:
            self._game_elapsed = 0


def _color(name: str) -> Any:
    try:
        return pygame.Color(name)
    except ValueError:
        return pygame.Color("white")


class _Renderer:
    """Draws a scene's items onto a pygame surface."""

    def __init__(self, surface: Any, font: Any) -> None:
        self.surface = surface
        self.font = font
        self._images: dict[tuple[str, int | None, int], Any] = {}

    def _image(self, source: str, height: int | None, width: int) -> Any:
        key = (source, height, width)
        if key not in self._images:
            try:
                image = pygame.image.load(source).convert_alpha()
            except (pygame.error, FileNotFoundError):
                image = None
            if image is not None and image.get_height() and image.get_width():
                w, h = image.get_size()
                if height is not None:
                    size = (max(1, round(w * height / h)), height)
                else:
                    size = (width, max(1, round(h * width / w)))
                image = pygame.transform.smoothscale(image, size)
            self._images[key] = image
        return self._images[key]

    def draw(self, scene: Scene) -> None:
        self.surface.fill(_color(scene.background))
        for item in scene.items:
            if not getattr(item, "visible", True):
                continue
            if isinstance(item, PixmapItem):
                self._draw_pixmap(scene, item)
            elif isinstance(item, TextItem):
                rendered = self.font.render(item.text, True, _color(item.color))
                self.surface.blit(rendered, (item.pos[0], item.pos[1] - scene.top))
            elif isinstance(item, GridLine):
                start = (item.start[0], item.start[1] - scene.top)
                end = (item.end[0], item.end[1] - scene.top)
                pygame.draw.line(self.surface, _color(item.color), start, end)

    def _draw_pixmap(self, scene: Scene, item: PixmapItem) -> None:
        image = self._image(item.source, item.height, scene.width)
        if image is None:
            return
        x, y = item.pos[0], item.pos[1] - scene.top
        if item.rotation:
            rect = image.get_rect(topleft=(x, y))
            rotated = pygame.transform.rotate(image, -item.rotation)
            self.surface.blit(rotated, rotated.get_rect(center=rect.center))
        else:
            self.surface.blit(image, (x, y))


def _load_font() -> Any:
    if Path(FONT_PATH).is_file():
        with contextlib.suppress(pygame.error, OSError):
            return pygame.font.Font(FONT_PATH, 10)
    return pygame.font.Font(None, 18)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="yapp", description=MainWindow.WINDOW_TITLE)
    parser.add_argument("--highscore", help="file that stores the high score")
    parser.add_argument("--debug-grid", action="store_true", help="draw the grid lines")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        surface = pygame.display.set_mode((MainWindow.WIDTH, MainWindow.HEIGHT))
        pygame.display.set_caption(MainWindow.WINDOW_TITLE)
        if Path(ICON_PATH).is_file():
            with contextlib.suppress(pygame.error):
                pygame.display.set_icon(pygame.image.load(ICON_PATH))
        renderer = _Renderer(surface, _load_font())

        window = MainWindow(highscore_path=args.highscore)
        window.intro()
        shown_scene = None
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    window.scene.dispatch_key(pygame.key.name(event.key))
            window.tick(clock.tick(60))
            if args.debug_grid and window.scene is not shown_scene:
                window.draw_debug_grid()
            shown_scene = window.scene
            renderer.draw(window.scene)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())