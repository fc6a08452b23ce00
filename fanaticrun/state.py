"""Game state: the player, the fanatic enemy, the scenery and menu selections."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field

SCREEN_WIDTH = 1260
SCREEN_HEIGHT = 800

PLAYER_START = (240.0, 628.0)
FANATICO_START = (3350.0, 590.0)
PLATFORM_START = (1200.0, 500.0)

# Texture names whose (width, height) `new_game` needs.
SIZE_KEYS = (
    "platform",
    "player_stop_left",
    "fanatico_stop_right",
    "background1",
    "background2",
    "midground1",
    "midground2",
    "foreground1",
    "foreground2",
)


@dataclass
class Vector2:
    """A point or offset in screen coordinates."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Rect:
    """An axis-aligned rectangle used for collisions."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def collides(self, other: Rect) -> bool:
        """Return True when the two rectangles overlap (touching edges do not count)."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


class GameScreen(enum.Enum):
    TITLE = enum.auto()
    MENU = enum.auto()
    GAMEPLAY = enum.auto()
    INFO = enum.auto()
    GAME_OVER = enum.auto()
    OPTIONS = enum.auto()
    SAVEGAME = enum.auto()
    EXIT = enum.auto()


@dataclass
class Player:
    vida: int = 3
    can_jump: int = 0
    direction: int = 0
    character_radius: int = 125
    stop: int = 1
    espera_hit: int = 0
    position: Vector2 = field(default_factory=lambda: Vector2(*PLAYER_START))
    rec: Rect = field(default_factory=Rect)


@dataclass
class Fanatico:
    hp: int = 12
    damage: int = 3
    direction: int = -1
    stop: int = 0
    position: Vector2 = field(default_factory=lambda: Vector2(*FANATICO_START))
    rec: Rect = field(default_factory=Rect)


@dataclass
class Background:
    """Scroll offsets of the three parallax layers and each layer's width per map."""

    back: float = 0.0
    mid: float = 0.0
    fore: float = 0.0
    back_widths: tuple[int, ...] = (0, 0)
    mid_widths: tuple[int, ...] = (0, 0)
    fore_widths: tuple[int, ...] = (0, 0)


@dataclass
class Menu:
    start: int = 1
    in_game: int = 1
    exit: int = 1


@dataclass
class SetGame:
    time: float = 0.0
    map: int = 0
    frames_counter: int = 0
    steps: int = 0
    game_over: int = 0


@dataclass
class Plataform:
    position: Vector2 = field(default_factory=lambda: Vector2(*PLATFORM_START))
    rec: Rect = field(default_factory=Rect)


@dataclass
class GameState:
    """Everything that changes while the game runs."""

    player: Player = field(default_factory=Player)
    fanatico: Fanatico = field(default_factory=Fanatico)
    background: Background = field(default_factory=Background)
    menu: Menu = field(default_factory=Menu)
    game: SetGame = field(default_factory=SetGame)
    platform: Plataform = field(default_factory=Plataform)
    screen: GameScreen = GameScreen.TITLE
    colliding: bool = False
    descending: bool = False


def new_game(sizes: Mapping[str, tuple[int, int]]) -> GameState:
    """Build the starting state from texture sizes keyed by the names in SIZE_KEYS."""
    plat_w, plat_h = sizes["platform"]
    stop_w, stop_h = sizes["player_stop_left"]
    fan_w, fan_h = sizes["fanatico_stop_right"]

    player = Player()
    player.rec = Rect(0.0, 0.0, stop_w - 100, stop_h)

    fanatico = Fanatico()
    fanatico.rec = Rect(fanatico.position.x, fanatico.position.y, fan_w, fan_h)

    platform = Plataform()
    platform.rec = Rect(0.0, 0.0, plat_w, plat_h)

    background = Background(
        back_widths=(sizes["background1"][0], sizes["background2"][0]),
        mid_widths=(sizes["midground1"][0], sizes["midground2"][0]),
        fore_widths=(sizes["foreground1"][0], sizes["foreground2"][0]),
    )

    return GameState(
        player=player,
        fanatico=fanatico,
        background=background,
        menu=Menu(),
        game=SetGame(),
        platform=platform,
    )