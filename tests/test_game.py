import random

import pytest

from yapp.actors import GhostBehavior
from yapp.direction import Direction
from yapp.game import Game
from yapp.point import Point
from yapp.scene import Scene
from yapp.score import load_highscore
from yapp.sound import SoundEngine


@pytest.fixture
def setup(tmp_path):
    played = []
    scene = Scene()
    game = Game(
        scene,
        highscore_path=tmp_path / "highscore.txt",
        sound=SoundEngine(backend=played.append),
        rng=random.Random(1),
    )
    game.init()
    game.game_loop()
    return game, scene, played, tmp_path / "highscore.txt"


def test_init_counts_every_dot_and_pellet(setup):
    game, _, _, _ = setup
    expected = len(game.maze.dots()) + len(game.maze.pellets())
    assert game.dot_num == expected
    assert len(game.items) == expected
    assert game.running is True


def test_life_display(setup):
    game, scene, _, _ = setup
    assert game.life_label in scene
    assert game.life_label.source.endswith("lives_3.png")
    assert game.life_label.pos == (0, 31 * 20)


def test_pacman_hit_starts_death(setup):
    game, _, played, _ = setup
    game.pacman.eaten.emit()
    assert game.pacman.life_status is False
    assert played[-1].endswith("pacman_death.wav")


def test_resume_loses_life_and_resets_ghosts(setup):
    game, _, _, _ = setup
    game.blinky.pos = Point(100, 100)
    game.blinky.behavior = GhostBehavior.CHASE
    game.pacman.pacman_revive.emit()
    assert game.life == 2
    assert game.life_label.source.endswith("lives_2.png")
    assert game.blinky.pos == Point(260, 210)
    assert game.blinky.start_timer == 1
    assert game.blinky.behavior == GhostBehavior.GO_OUT_GATE
    assert game.pinky.direction == Direction.LEFT
    assert game.clyde.start_timer == 100


def test_last_life_ends_game(setup):
    game, scene, played, _ = setup
    for _ in range(3):
        game.resume()
    assert game.life == 0
    assert game.running is False
    assert game.game_over_text.text == "Game Over"
    assert game.game_over_text.color == "red"
    assert game.game_over_text in scene
    assert game.pacman.graphics.shape not in scene
    assert played[-1].endswith("pacman_intermission.wav")


def test_eating_everything_clears_game(setup):
    game, scene, _, _ = setup
    total = game.dot_num
    for _ in range(total):
        game.dot_count()
    assert game.dot_num == 0
    assert game.game_over_text.text == "Game Clear!"
    assert game.items[0].graphics.shape not in scene


def test_key_after_end_restarts(setup):
    game, scene, _, _ = setup
    game.life = 1
    game.resume()
    old_text = game.game_over_text
    scene.dispatch_key("x")
    assert old_text not in scene
    assert game.life == Game.START_LIVES
    assert game.running is True
    assert game.dot_num == len(game.items)


def test_dot_eaten_updates_score_and_count(setup):
    game, _, played, _ = setup
    before = game.dot_num
    dot = next(item for item in game.items if item.name == "dot")
    dot.eaten.emit()
    assert game.score.value == 10
    assert game.dot_num == before - 1
    assert played[-1].endswith("pacman_chomp.wav")


def test_pellet_energizes_and_frightens(setup):
    game, _, _, _ = setup
    game.blinky.behavior = GhostBehavior.CHASE
    pellet = next(item for item in game.items if item.name == "pellet")
    pellet.eaten.emit()
    assert game.pacman.energized is True
    assert game.blinky.behavior == GhostBehavior.FRIGHTENED
    assert game.pinky.behavior == GhostBehavior.GO_OUT_GATE
    assert game.score.value == 50


def test_ghost_eaten_scores(setup):
    game, _, played, _ = setup
    game.inky.eaten.emit()
    assert game.score.value == 200
    assert played[-1].endswith("pacman_eatghost.wav")


def test_update_reports_pacman_position(setup):
    game, _, _, _ = setup
    game.update()
    assert game.maze.pacman_pos == game.pacman.pos


def test_highscore_saved_on_end(setup):
    game, _, _, path = setup
    game.score.increase_ghost_score()
    game.game_end()
    assert load_highscore(path) == game.score.value