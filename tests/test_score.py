import pytest

from yapp.scene import Scene
from yapp.score import Score, load_highscore


@pytest.fixture
def path(tmp_path):
    return tmp_path / "highscore.txt"


@pytest.fixture
def scene():
    return Scene()


def test_fresh_score_without_file(scene, path):
    score = Score(scene, path)
    assert (score.value, score.highscore) == (0, 0)
    assert score.score_text.text == "SCORE : 0"
    assert score.highscore_text.text == "HIGHSCORE : 0"
    assert score.score_text in scene and score.highscore_text in scene
    assert score.score_text.color == "white"


def test_points_per_item(scene, path):
    score = Score(scene, path)
    score.increase_dot_score()
    assert score.value == 10
    score.increase_pellet_score()
    assert score.value == 10 + 50
    score.increase_ghost_score()
    assert score.value == 10 + 50 + 200
    assert score.score_text.text == f"SCORE : {score.value}"
    assert score.highscore == score.value
    assert score.highscore_text.text == f"HIGHSCORE : {score.value}"


def test_existing_highscore_is_kept(scene, path):
    path.write_text("1000\n", encoding="utf-8")
    score = Score(scene, path)
    assert score.highscore == 1000
    score.increase_ghost_score()
    assert score.highscore == 1000
    assert score.highscore_text.text == "HIGHSCORE : 1000"


def test_save_skipped_when_not_beaten(scene, path):
    path.write_text("1000", encoding="utf-8")
    score = Score(scene, path)
    score.increase_dot_score()
    score.save_highscore()
    assert path.read_text(encoding="utf-8") == "1000"


def test_save_round_trip(scene, path):
    score = Score(scene, path)
    score.increase_pellet_score()
    score.increase_dot_score()
    score.save_highscore()
    assert path.read_text(encoding="utf-8") == str(score.highscore)
    assert load_highscore(path) == score.highscore
    assert Score(Scene(), path).highscore == score.highscore


def test_update_score_refreshes_text(scene, path):
    score = Score(scene, path)
    score.value = 70
    score.update_score()
    assert score.score_text.text == "SCORE : 70"


def test_delete_removes_texts(scene, path):
    score = Score(scene, path)
    score.delete()
    assert score.score_text not in scene
    assert score.highscore_text not in scene


def test_load_missing_file(path):
    assert load_highscore(path) == 0


@pytest.mark.parametrize("content", ["", "abc\n", "1_000\n", "12x\n"])
def test_load_invalid_content(path, content):
    path.write_text(content, encoding="utf-8")
    assert load_highscore(path) == 0


def test_load_reads_first_line_only(path):
    path.write_text("4200\n99\n", encoding="utf-8")
    assert load_highscore(path) == 4200