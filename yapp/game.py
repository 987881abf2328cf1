"""One round of play: building the board, running ticks, lives and the end screens."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Any

from yapp.actors import Ghost, GhostBehavior, Pacman
from yapp.direction import Direction
from yapp.factories import create_ghost, create_item, create_pacman
from yapp.gameobject import GameObject
from yapp.graphics import IMAGE_ROOT
from yapp.maze import Maze
from yapp.point import Point
from yapp.scene import PixmapItem, Scene, TextItem
from yapp.score import Score
from yapp.sound import SoundEngine

_GRID = 20

_GHOST_RESET = (
    ("blinky", Point(260, 210), 1, Direction.RIGHT),
    ("pinky", Point(260, 270), 10, Direction.LEFT),
    ("inky", Point(220, 270), 50, Direction.RIGHT),
    ("clyde", Point(300, 270), 100, Direction.LEFT),
)


class Game:
    """Owns every object of a round and wires their signals together."""

    LOOP_INTERVAL_MS = 70
    START_LIVES = 3

    def __init__(
        self,
        scene: Scene,
        highscore_path: str | Path | None = None,
        sound: SoundEngine | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.scene = scene
        self.highscore_path = highscore_path
        self._sound_override = sound
        self.rng = rng
        self.life = self.START_LIVES
        self.running = False
        self.dot_num = 0
        self.items: list[GameObject] = []
        self.sound: SoundEngine | None = None
        self.maze: Maze | None = None
        self.score: Score | None = None
        self.life_label: PixmapItem | None = None
        self.game_over_text: TextItem | None = None
        self.pacman: Pacman | None = None
        self.blinky: Ghost | None = None
        self.pinky: Ghost | None = None
        self.inky: Ghost | None = None
        self.clyde: Ghost | None = None

    @property
    def ghosts(self) -> tuple[Any, ...]:
        """The ghosts in update order."""
        return (self.blinky, self.pinky, self.inky, self.clyde)

    def init(self) -> None:
        """Build the maze, score, lives display, items and actors for a new round."""
        self.sound = self._sound_override if self._sound_override is not None else SoundEngine()
        self.maze = Maze()
        self.score = Score(self.scene, self.highscore_path)
        self.dot_num = 0
        self.items = []

        if self.life_label is not None:
            self.scene.remove_item(self.life_label)
        self.life_label = PixmapItem()
        self.scene.add_item(self.life_label)
        self.life_display()

        for cord in self.maze.dots():
            dot = create_item(self.scene, "dot", (cord.x, cord.y))
            dot.eaten.connect(self.score.increase_dot_score)
            dot.eaten.connect(self.dot_count)
            dot.eaten.connect(self.sound.eat_dots_sound)
            self.dot_num += 1
            self.items.append(dot)

        self.pacman = create_pacman(self.scene, "pacman", (13, 16.5))
        self.blinky = create_ghost(self.scene, "blinky", (13, 10.5), self.rng)
        self.pinky = create_ghost(self.scene, "pinky", (13, 13.5), self.rng)
        self.inky = create_ghost(self.scene, "inky", (11, 13.5), self.rng)
        self.clyde = create_ghost(self.scene, "clyde", (15, 13.5), self.rng)

        for ghost in self.ghosts:
            ghost.eaten.connect(self.sound.eat_ghost_sound)
        for ghost in self.ghosts:
            ghost.eaten.connect(self.score.increase_ghost_score)

        self.pacman.eaten.connect(self.life_decrease)
        self.pacman.pacman_revive.connect(self.resume)

        for cord in self.maze.pellets():
            pellet = create_item(self.scene, "pellet", (cord.x, cord.y))
            self.dot_num += 1
            pellet.eaten.connect(self.pacman.energize)
            pellet.eaten.connect(self.sound.eat_dots_sound)
            pellet.eaten.connect(self.dot_count)
            pellet.eaten.connect(self.score.increase_pellet_score)
            for ghost in self.ghosts:
                pellet.eaten.connect(ghost.pellet_eaten)
            self.items.append(pellet)

    def game_loop(self) -> None:
        """Start ticking; the driver calls update every LOOP_INTERVAL_MS while running."""
        self.running = True

    def update(self) -> None:
        """Advance pac-man, the ghosts and the items by one tick."""
        self.pacman.update(self.maze)
        for ghost in self.ghosts:
            ghost.update(self.maze)
        for item in self.items:
            item.update(self.maze)

    def life_display(self) -> None:
        """Show the image for the number of lives left."""
        self.life_label.source = f"{IMAGE_ROOT}/lives_{self.life}.png"
        self.life_label.height = 40
        self.life_label.pos = (0, 31 * _GRID)

    def life_decrease(self) -> None:
        """Start pac-man's death sequence."""
        self.pacman.life_status = False
        self.sound.death_sound()

    def resume(self) -> None:
        """After a death: lose a life, then end the game or send the ghosts home."""
        self.life -= 1
        self.life_display()
        if self.life == 0:
            self.game_end()
            return

        for name, pos, start_timer, _ in _GHOST_RESET:
            ghost = getattr(self, name)
            ghost.pos = pos
            ghost.start_timer = start_timer
        for name, _, _, direction in _GHOST_RESET:
            ghost = getattr(self, name)
            ghost.behavior = GhostBehavior.GO_OUT_GATE
            ghost.direction = direction

    def dot_count(self) -> None:
        """Count an eaten dot or pellet; clearing the board wins the game."""
        self.dot_num -= 1
        if self.dot_num == 0:
            self.game_clear()

    def _finish(self, message: str, color: str) -> None:
        self.score.save_highscore()
        for ghost in self.ghosts:
            ghost.delete()
        self.pacman.delete()
        self.score.delete()
        for item in self.items:
            item.delete()
        self.running = False
        self.game_over_text = self.scene.add_text(message)
        self.game_over_text.pos = (10 * _GRID, 17 * _GRID)
        self.game_over_text.color = color
        self.sound.end_sound()
        self.scene.install_event_filter(self.handle_key)

    def game_end(self) -> None:
        """Stop the round after the last life is lost."""
        self._finish("Game Over", "red")

    def game_clear(self) -> None:
        """Stop the round after the board is cleared."""
        self._finish("Game Clear!", "yellow")

    def handle_key(self, key: Any) -> bool:
        """On the end screen, any key starts a new round; the key is not consumed."""
        if self.game_over_text is not None:
            self.scene.remove_item(self.game_over_text)
            self.game_over_text = None
        if self.pacman is not None:
            self.scene.remove_event_filter(self.pacman.input)
        self.scene.remove_event_filter(self.handle_key)
        self.life = self.START_LIVES
        self.init()
        self.game_loop()
        return False