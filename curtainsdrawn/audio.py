"""Sound playback for the game, backed by the pygame mixer when available."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Protocol


class AudioError(Exception):
    """A sound file exists but could not be loaded for playback."""


class Sound(Protocol):
    def play(self, loops: int = 0) -> object: ...

    def stop(self) -> None: ...


SoundFactory = Callable[[str], Sound]


class AudioPlayer:
    """Plays sound files and keeps them alive until stopped.

    Without a sound factory there is no output device: files are still
    checked for existence but nothing is played.
    """

    def __init__(self, sound_factory: SoundFactory | None = None) -> None:
        self._factory = sound_factory
        self._sounds: list[Sound] = []

    @classmethod
    def from_mixer(cls) -> AudioPlayer:
        """A player on the default mixer output, or a silent one if there is none."""
        os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
        try:
            import pygame
        except ImportError:
            return cls()
        try:
            pygame.mixer.init()
        except pygame.error:
            return cls()
        return cls(pygame.mixer.Sound)

    @property
    def enabled(self) -> bool:
        return self._factory is not None

    @property
    def playing(self) -> int:
        """Number of sounds currently held by the player."""
        return len(self._sounds)

    def play(self, path: str | os.PathLike[str], looping: bool = False) -> Sound | None:
        """Start playing a file, forever if looping; returns the sound, if played."""
        path = Path(path)
        with path.open("rb"):
            pass
        if self._factory is None:
            return None
        try:
            sound = self._factory(str(path))
        except Exception as exc:
            raise AudioError(f"cannot load {path}: {exc}") from exc
        sound.play(loops=-1 if looping else 0)
        self._sounds.append(sound)
        return sound

    def stop_all(self) -> None:
        """Stop every sound immediately and forget them."""
        for sound in self._sounds:
            sound.stop()
        self._sounds.clear()