"""The running score and the persisted high score."""

from __future__ import annotations

import contextlib
import re
import sys
from pathlib import Path

from yapp.scene import Scene

_FILE_NAME = "highscore.txt"
_NUMBER = re.compile(r"[+-]?[0-9]+")
_INT32 = range(-(2**31), 2**31)


def _default_highscore_path() -> Path:
    if sys.argv and sys.argv[0]:
        return Path(sys.argv[0]).resolve().parent / _FILE_NAME
    return Path.cwd() / _FILE_NAME


def load_highscore(path: str | Path) -> int:
    """Read the high score from the first line of path; 0 if absent or unreadable."""
    try:
        with open(path, encoding="utf-8") as stream:
            first_line = stream.readline()
    except (OSError, UnicodeDecodeError):
        return 0
    text = first_line.strip()
    if not _NUMBER.fullmatch(text):
        return 0
    value = int(text)
    return value if value in _INT32 else 0


class Score:
    """Score counters and their text items on the scene."""

    DOT_POINTS = 10
    PELLET_POINTS = 50
    GHOST_POINTS = 200

    def __init__(self, scene: Scene, highscore_path: str | Path | None = None) -> None:
        self.scene = scene
        self.highscore_path = (
            Path(highscore_path) if highscore_path is not None else _default_highscore_path()
        )
        self.value = 0
        self.score_text = scene.add_text(self._score_label())
        self.score_text.pos = (30, -30)
        self.score_text.color = "white"

        self.highscore = load_highscore(self.highscore_path)
        self.highscore_text = scene.add_text(self._highscore_label())
        self.highscore_text.pos = (30, -50)
        self.highscore_text.color = "white"

    def _score_label(self) -> str:
        return f"SCORE : {self.value}"

    def _highscore_label(self) -> str:
        return f"HIGHSCORE : {self.highscore}"

    def _add(self, points: int) -> None:
        self.value += points
        self.score_text.text = self._score_label()
        if self.value > self.highscore:
            self.highscore = self.value
            self.highscore_text.text = self._highscore_label()

    def update_score(self) -> None:
        """Refresh the score text from the current value."""
        self.score_text.text = self._score_label()

    def increase_dot_score(self) -> None:
        self._add(self.DOT_POINTS)

    def increase_pellet_score(self) -> None:
        self._add(self.PELLET_POINTS)

    def increase_ghost_score(self) -> None:
        self._add(self.GHOST_POINTS)

    def delete(self) -> None:
        """Remove both text items from the scene."""
        self.scene.remove_item(self.score_text)
        self.scene.remove_item(self.highscore_text)

    def save_highscore(self) -> None:
        """Write the high score to disk if this game set it."""
        if self.highscore > self.value:
            return
        with contextlib.suppress(OSError):
            self.highscore_path.write_text(str(self.highscore), encoding="utf-8")