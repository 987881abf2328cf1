# yapp

Yet Another Pac-Man Project: a small maze-chase arcade game built on pygame.

Guide Pac-Man through the maze, eat every dot and power pellet, and stay
clear of the four ghosts (Blinky, Pinky, Inky and Clyde). Eating a pellet
frightens the ghosts for a while, and during that time you can eat them.

## Installing

```
pip install .
```

## Playing

```
yapp
```

Options:

- `--highscore FILE` – the file the high score is read from and written to.
  Without it, `highscore.txt` beside the running program is used.
- `--debug-grid` – draw grey lines on every 20-pixel grid boundary.

The title screen introduces the ghosts and the point values. Press any key
to start.

Controls:

- Arrow keys or `W` `A` `S` `D` to steer.
- After "Game Over" or "Game Clear!", press any key to play again.

Scoring:

| Eaten  | Points |
|--------|--------|
| Dot    | 10     |
| Pellet | 50     |
| Ghost  | 200    |

You start with three lives. When a round ends, the high score is saved if
that round set it.

## Images, sounds and font

The package contains no image, sound or font files. The game looks for them
under a `res/` directory in the current working directory:

- `res/img/...` – maze, title logo, sprites and lives images (PNG),
- `res/sound/...` – sound effects (WAV),
- `res/font/emulogic.ttf` – the text font.

Any image that cannot be loaded is simply not drawn, sounds are skipped when
they or an audio device are missing, and pygame's default font is used when
the font file is absent. Without these files the game still runs, but only
text is shown on screen.

## Using the game logic

The rules can be used on their own, with no window open:

```python
from yapp.maze import Maze
from yapp.direction import Direction
from yapp.point import Point

maze = Maze()
print(len(maze.dots()), len(maze.pellets()))
print(maze.can_forward_to_direction(Point(260, 330), Direction.RIGHT))
```

`yapp.scene.Scene` is a headless collection of drawable items and key
filters. `yapp.game.Game` builds a round on a scene with `init()`; each call
to `update()` advances it by one tick. `yapp.app.MainWindow` ties the title
screen and the game together, and its `tick(elapsed_ms)` method drives both
from elapsed time, so a whole game can be stepped through from a script or a
test. Key presses are delivered with `Scene.dispatch_key`, using key names
such as `"left"` or `"w"`.

## Running the tests

```
pip install ".[test]"
pytest
```