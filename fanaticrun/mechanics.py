"""Per-frame rules for every screen.

Music streams are referred to by name: "nature", "start", "jump", "run",
"menu" and "fanatic".
"""

from __future__ import annotations

import enum
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from .state import SCREEN_WIDTH, GameScreen, GameState

GROUND_Y = 628
JUMP_TOP_Y = 300
SCROLL_X = 560
STEPS_PER_MAP = 3600
HIT_COOLDOWN = 451
MAX_LIVES = 5


class Key(enum.Enum):
    SPACE = enum.auto()
    A = enum.auto()
    D = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    ENTER = enum.auto()
    ESCAPE = enum.auto()
    F11 = enum.auto()


@dataclass(frozen=True)
class Keys:
    """Keyboard input for one frame: keys newly pressed and keys held down."""

    pressed: frozenset[Key] = frozenset()
    down: frozenset[Key] = frozenset()

    def __init__(self, pressed: Iterable[Key] = (), down: Iterable[Key] = ()):
        object.__setattr__(self, "pressed", frozenset(pressed))
        object.__setattr__(self, "down", frozenset(down))

    def is_pressed(self, key: Key) -> bool:
        return key in self.pressed

    def is_down(self, key: Key) -> bool:
        """A key pressed this frame also counts as held down."""
        return key in self.down or key in self.pressed


class Audio(Protocol):
    """Something that keeps named music streams playing."""

    def update(self, name: str) -> None:
        """Feed the named stream for this frame."""

    def stop(self, name: str) -> None:
        """Stop the named stream."""


@dataclass
class SilentAudio:
    """Audio that plays nothing but remembers what was asked of it."""

    updates: Counter = field(default_factory=Counter)
    stopped: set = field(default_factory=set)

    def update(self, name: str) -> None:
        self.updates[name] += 1

    def stop(self, name: str) -> None:
        self.stopped.add(name)


class QuitGame(Exception):
    """Raised when the player confirms leaving the game."""

    def __init__(self, code: int = 1):
        super().__init__(f"quit with status {code}")
        self.code = code


def set_rec(state: GameState) -> None:
    """Move the collision rectangles onto the current positions."""
    player, fan, plat = state.player, state.fanatico, state.platform
    player.rec.x = player.position.x + 50
    player.rec.y = player.position.y
    fan.rec.x = fan.position.x
    fan.rec.y = fan.position.y
    plat.rec.x = plat.position.x
    plat.rec.y = plat.position.y


def jump_mechanics(state: GameState, keys: Keys, audio: Audio) -> None:
    player, plat = state.player, state.platform
    pos = player.position

    state.colliding = player.rec.collides(plat.rec)

    if keys.is_down(Key.SPACE) and player.can_jump == 0:
        player.can_jump = 1
    if player.can_jump != 0 and not state.colliding:
        audio.update("jump")

    if state.colliding:
        if pos.y > plat.position.y:
            state.descending = True
            pos.y += 2
        player.can_jump = 2
        return

    if player.can_jump == 1 and pos.y != JUMP_TOP_Y:
        pos.y -= 2
    if pos.y == JUMP_TOP_Y:
        player.can_jump = 2
    if player.can_jump == 2 and (pos.y != GROUND_Y or state.descending):
        pos.y += 2
    if pos.y == GROUND_Y:
        player.can_jump = 0


def _move_fanatico(state: GameState) -> None:
    player, fan, game = state.player, state.fanatico, state.game

    if 3000 < game.steps < 3400:
        if fan.position.x - player.position.x < 0:
            fan.position.x += 2.0
        else:
            fan.position.x -= 2.0

    gap = fan.position.x - player.position.x
    if -1000 < gap < -500:
        fan.position.x += 1.3

    gap = fan.position.x - player.position.x
    if 20 < gap < 20000:
        fan.stop = 0
        fan.direction = -1
        fan.position.x -= 1.3
    elif -20000 < gap < -20:
        fan.stop = 0
        fan.direction = 1
        fan.position.x += 1.3
    else:
        fan.stop = 1


def _wrap_background(state: GameState) -> None:
    bg, index = state.background, state.game.map
    if bg.back <= -bg.back_widths[index] * 4:
        bg.back = 0
    if bg.mid <= -bg.mid_widths[index] * 4:
        bg.mid = 0
    if bg.fore <= -bg.fore_widths[index] * 4:
        bg.fore = 0


def game_mechanics(state: GameState, keys: Keys, audio: Audio) -> None:
    player, fan, game = state.player, state.fanatico, state.game
    bg, plat = state.background, state.platform
    pos = player.position

    audio.update("nature")
    audio.update("start")
    set_rec(state)

    if keys.is_pressed(Key.ESCAPE):
        state.screen = GameScreen.MENU

    if keys.is_down(Key.D) and pos.x + player.character_radius < SCREEN_WIDTH:
        player.stop = 0
        pos.x += 1.5
        audio.update("run")
        if pos.x > SCROLL_X:
            plat.position.x -= 0.5
            game.steps += 1
            pos.x = SCROLL_X
            bg.back -= 0.1
            bg.mid -= 0.5
            bg.fore -= 1.4
            fan.position.x -= 2
        player.direction = 1
    elif keys.is_down(Key.A) and pos.x > 0:
        audio.update("run")
        player.stop = 0
        pos.x -= 1.5
        player.direction = -1

    jump_mechanics(state, keys, audio)

    if keys.is_pressed(Key.RIGHT) and player.vida < MAX_LIVES:
        player.vida += 1
    if keys.is_pressed(Key.LEFT) and player.vida >= 1:
        player.vida -= 1

    if player.vida == 0:
        state.screen = GameScreen.GAME_OVER

    if game.steps == STEPS_PER_MAP:
        game.map = 1
        game.steps = 0

    if fan.position.x < 1000:
        audio.update("fanatic")
        audio.stop("start")
    _move_fanatico(state)

    if player.espera_hit != 0:
        player.espera_hit -= 1
    if player.rec.collides(fan.rec) and player.espera_hit == 0:
        player.vida -= 1
        player.espera_hit = HIT_COOLDOWN

    _wrap_background(state)


def title_mechanics(state: GameState, keys: Keys, audio: Audio) -> None:
    audio.update("menu")
    menu = state.menu
    if keys.is_pressed(Key.ENTER):
        if menu.start == 1:
            state.screen = GameScreen.GAMEPLAY
        elif menu.start == 0:
            state.screen = GameScreen.INFO
    if keys.is_pressed(Key.UP):
        menu.start = 1
    elif keys.is_pressed(Key.DOWN):
        menu.start = 0


_MENU_TARGETS = {
    1: GameScreen.TITLE,
    2: GameScreen.OPTIONS,
    3: GameScreen.SAVEGAME,
    4: GameScreen.EXIT,
}


def menu_mechanics(state: GameState, keys: Keys) -> None:
    menu = state.menu
    if keys.is_pressed(Key.ENTER) and menu.in_game in _MENU_TARGETS:
        state.screen = _MENU_TARGETS[menu.in_game]
    if keys.is_pressed(Key.UP) and menu.in_game > 1:
        menu.in_game -= 1
    elif keys.is_pressed(Key.DOWN) and menu.in_game < 4:
        menu.in_game += 1


def info_mechanics(state: GameState, keys: Keys, audio: Audio) -> None:
    audio.update("menu")
    if keys.is_pressed(Key.ESCAPE):
        state.screen = GameScreen.TITLE


def options_mechanics(state: GameState, keys: Keys) -> None:
    if keys.is_pressed(Key.ESCAPE):
        state.screen = GameScreen.MENU


def save_mechanics(state: GameState, keys: Keys) -> None:
    if keys.is_pressed(Key.ESCAPE):
        state.screen = GameScreen.MENU


def exit_mechanics(state: GameState, keys: Keys) -> None:
    """Handle the quit prompt; raises QuitGame when quitting is confirmed."""
    menu = state.menu
    if keys.is_pressed(Key.ENTER):
        if menu.exit == 1:
            raise QuitGame(1)
        if menu.exit == 2:
            state.screen = GameScreen.MENU
    if keys.is_pressed(Key.LEFT):
        menu.exit = 1
    elif keys.is_pressed(Key.RIGHT):
        menu.exit = 2


def over_mechanics(state: GameState, keys: Keys) -> None:
    if keys.is_pressed(Key.ESCAPE):
        state.player.vida = 4
        state.screen = GameScreen.TITLE


def step(state: GameState, keys: Keys, audio: Audio) -> None:
    """Run the rules of the current screen for one frame."""
    match state.screen:
        case GameScreen.TITLE:
            title_mechanics(state, keys, audio)
        case GameScreen.INFO:
            info_mechanics(state, keys, audio)
        case GameScreen.MENU:
            menu_mechanics(state, keys)
        case GameScreen.OPTIONS:
            options_mechanics(state, keys)
        case GameScreen.SAVEGAME:
            save_mechanics(state, keys)
        case GameScreen.EXIT:
            exit_mechanics(state, keys)
        case GameScreen.GAMEPLAY:
            game_mechanics(state, keys, audio)
        case GameScreen.GAME_OVER:
            over_mechanics(state, keys)