"""Sound effects played through a single player, one clip at a time."""

from __future__ import annotations

import os
from typing import Callable

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

SOUND_ROOT = "res/sound"
VOLUME = 1.0

Backend = Callable[[str], None]


class _PygameBackend:
    """Streams a clip through the mixer; stays silent when no audio is available."""

    def __init__(self, volume: float = VOLUME) -> None:
        self.volume = volume
        self._ready: bool | None = None

    def _ensure_ready(self) -> bool:
        if self._ready is None:
            try:
                pygame.mixer.init()
                pygame.mixer.music.set_volume(self.volume)
                self._ready = True
            except pygame.error:
                self._ready = False
        return self._ready

    def __call__(self, path: str) -> None:
        if not self._ensure_ready():
            return
        try:
            pygame.mixer.music.load(path)
            pygame.mixer.music.play()
        except pygame.error:
            pass


class SoundEngine:
    """Plays the game's sound effects; a new clip replaces the one playing."""

    def __init__(self, backend: Backend | None = None, sound_root: str = SOUND_ROOT) -> None:
        self.backend = backend if backend is not None else _PygameBackend()
        self.sound_root = sound_root
        self.source: str | None = None

    def _play(self, file_name: str) -> None:
        self.source = f"{self.sound_root}/{file_name}"
        self.backend(self.source)

    def begin_sound(self) -> None:
        self._play("pacman_beginning.wav")

    def eat_dots_sound(self) -> None:
        self._play("pacman_chomp.wav")

    def death_sound(self) -> None:
        self._play("pacman_death.wav")

    def eat_ghost_sound(self) -> None:
        self._play("pacman_eatghost.wav")

    def end_sound(self) -> None:
        self._play("pacman_intermission.wav")