"""Loading of the game's textures and music streams."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

import pygame

log = logging.getLogger(__name__)

TEXTURE_FILES: dict[str, str] = {
    "player_right": "personagem/scarfy.png",
    "player_left": "personagem/scarfy_2.png",
    "player_stop_right": "personagem/stop.png",
    "player_stop_left": "personagem/stopLeft.png",
    "heart_full": "gui/Heart1.png",
    "heart_empty": "gui/Heart2.png",
    "portion": "gui/portion.png",
    "platform": "img_teste/plat.png",
    "background1": "background/background1.png",
    "midground1": "background/midground1.png",
    "foreground1": "background/foreground1.png",
    "background2": "background/background2.png",
    "midground2": "background/midground2.png",
    "foreground2": "background/foreground2.png",
    "floor": "background/floor1.png",
    "title": "background/title_game.png",
    "fanatico_walk_right": "inimigos/Fanatico/walk_right.png",
    "fanatico_walk_left": "inimigos/Fanatico/walk_left.png",
    "fanatico_stop_right": "inimigos/Fanatico/stop_right.png",
    "fanatico_stop_left": "inimigos/Fanatico/stop_left.png",
}

MUSIC_FILES: dict[str, str] = {
    "menu": "audio/music.mp3",
    "jump": "audio/jump.mp3",
    "run": "audio/correndo.mp3",
    "nature": "audio/natureza.mp3",
    "start": "audio/start_game.wav",
    "fanatic": "audio/fanatic.wav",
}

MUSIC_VOLUMES: dict[str, float] = {"nature": 0.1, "start": 0.5}


@dataclass
class Assets:
    """The loaded textures, looked up by name."""

    textures: dict[str, pygame.Surface] = field(default_factory=dict)

    def __getitem__(self, name: str) -> pygame.Surface:
        return self.textures[name]

    def sizes(self) -> dict[str, tuple[int, int]]:
        """The (width, height) of every texture."""
        return {name: surface.get_size() for name, surface in self.textures.items()}


def _load_texture(path: Path) -> pygame.Surface:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError, OSError) as exc:
        log.warning("could not load texture %s: %s", path, exc)
        return pygame.Surface((0, 0), pygame.SRCALPHA)


def load_assets(root: str | Path) -> Assets:
    """Load every texture under root; a missing file gives an empty 0x0 texture."""
    base = Path(root)
    return Assets({name: _load_texture(base / rel) for name, rel in TEXTURE_FILES.items()})


class PygameAudio:
    """Looping music streams that play while they are fed and pause when left idle."""

    def __init__(
        self,
        sounds: Mapping[str, object],
        idle_after: float = 0.25,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.sounds = dict(sounds)
        self._idle_after = idle_after
        self._clock = clock
        self._channels: dict[str, object] = {}
        self._last_fed: dict[str, float] = {}
        self._paused: set[str] = set()
        self._stopped: set[str] = set()

    def _pause_idle(self, now: float) -> None:
        for name, channel in self._channels.items():
            if name in self._paused:
                continue
            if now - self._last_fed[name] > self._idle_after:
                channel.pause()
                self._paused.add(name)

    def update(self, name: str) -> None:
        now = self._clock()
        self._pause_idle(now)
        sound = self.sounds.get(name)
        if sound is None or name in self._stopped:
            return
        self._last_fed[name] = now
        channel = self._channels.get(name)
        if channel is None:
            channel = sound.play(loops=-1)
            if channel is not None:
                self._channels[name] = channel
        elif name in self._paused:
            channel.unpause()
            self._paused.discard(name)

    def stop(self, name: str) -> None:
        self._stopped.add(name)
        self._paused.discard(name)
        channel = self._channels.pop(name, None)
        if channel is not None:
            channel.stop()


def load_audio(root: str | Path) -> PygameAudio:
    """Load the music streams found under root, with their volumes set."""
    base = Path(root)
    present = {name: base / rel for name, rel in MUSIC_FILES.items() if (base / rel).is_file()}
    if not present:
        return PygameAudio({})
    if not pygame.mixer.get_init():
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            log.warning("no audio device: %s", exc)
            return PygameAudio({})
    sounds = {}
    for name, path in present.items():
        try:
            sound = pygame.mixer.Sound(str(path))
        except pygame.error as exc:
            log.warning("could not load music %s: %s", path, exc)
            continue
        if name in MUSIC_VOLUMES:
            sound.set_volume(MUSIC_VOLUMES[name])
        sounds[name] = sound
    return PygameAudio(sounds)