"""Rendering of every screen onto a pygame surface."""

from __future__ import annotations

from functools import lru_cache

import pygame

from .assets import Assets
from .state import SCREEN_HEIGHT, SCREEN_WIDTH, GameScreen, GameState

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (230, 41, 55)

MENU_SCALE = 1.37
HEART_XS = (15, 75, 135, 195, 255)


@lru_cache(maxsize=64)
def _scaled(texture: pygame.Surface, scale: float) -> pygame.Surface:
    width, height = texture.get_size()
    if scale == 1.0 or width == 0 or height == 0:
        return texture
    return pygame.transform.scale(texture, (int(width * scale), int(height * scale)))


@lru_cache(maxsize=16)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _point(x: float, y: float) -> tuple[int, int]:
    return int(x), int(y)


def _blit_scaled(surface, texture, x, y, scale) -> None:
    surface.blit(_scaled(texture, scale), _point(x, y))


def _blit_frame(surface, texture, frames, index, x, y) -> None:
    width, height = texture.get_size()
    frame_width = width // frames
    area = pygame.Rect(frame_width * index, 0, frame_width, height)
    surface.blit(texture, _point(x, y), area)


def _text(surface, text, x, y, size, color) -> None:
    surface.blit(_font(size).render(text, True, color), (x, y))


def _outline(surface, x, y, width, height) -> None:
    pygame.draw.rect(surface, RED, pygame.Rect(x, y, width, height), 1)


def draw_gameplay(surface: pygame.Surface, state: GameState, assets: Assets) -> None:
    game, bg = state.game, state.background
    player, fan, plat = state.player, state.fanatico, state.platform
    frame = game.frames_counter
    index = game.map + 1

    for layer, offset in (("background", bg.back), ("midground", bg.mid), ("foreground", bg.fore)):
        texture = assets[f"{layer}{index}"]
        _blit_scaled(surface, texture, offset, 40, 4.0)
        _blit_scaled(surface, texture, texture.get_width() * 4 + offset, 40, 4.0)

    if game.map == 0:
        _blit_scaled(surface, assets["floor"], 0, 740, 4.0)
        _blit_scaled(surface, assets["floor"], 620, 740, 4.0)

    _blit_frame(surface, assets["portion"], 3, frame % 4, plat.position.x + 25, plat.position.y - 70)
    surface.blit(assets["platform"], _point(plat.position.x, plat.position.y))

    pos = player.position
    facing_right = player.direction in (0, 1)
    if facing_right and player.stop == 0:
        _blit_frame(surface, assets["player_right"], 6, frame % 6, pos.x, pos.y)
    elif player.direction == -1 and player.stop == 0:
        _blit_frame(surface, assets["player_left"], 6, frame % 6, pos.x, pos.y)
    elif facing_right and player.stop == 1:
        surface.blit(assets["player_stop_right"], _point(pos.x, pos.y))
    else:
        surface.blit(assets["player_stop_left"], _point(pos.x, pos.y))

    fpos = fan.position
    if fan.direction == 1 and fan.stop == 0:
        _blit_frame(surface, assets["fanatico_walk_left"], 6, frame % 6, fpos.x, fpos.y)
    elif fan.direction == -1 and fan.stop == 0:
        _blit_frame(surface, assets["fanatico_walk_right"], 6, frame % 6, fpos.x, fpos.y)
    elif fan.direction == 1 and fan.stop == 1:
        surface.blit(assets["fanatico_stop_left"], _point(fpos.x, fpos.y))
    else:
        surface.blit(assets["fanatico_stop_right"], _point(fpos.x, fpos.y))

    for count, x in enumerate(HEART_XS, start=1):
        if player.vida >= count:
            _blit_scaled(surface, assets["heart_full"], x, 55, 3.0)
        _blit_scaled(surface, assets["heart_empty"], x, 55, 3.0)

    text_color = {0: BLACK, 1: WHITE}.get(game.map)
    if text_color is not None:
        _text(surface, "GAMEPLAY SCREEN", 50, 120, 40, text_color)
        _text(surface, "PRESS ESC TO MENU SCREEN", 50, 160, 20, text_color)
        _text(surface, "PRESS F11 TO FULL SCREEN MODE", 850, 160, 20, text_color)


def _menu_background(surface, assets) -> tuple[int, int]:
    title = assets["title"]
    _blit_scaled(surface, title, 0, 50, MENU_SCALE)
    return title.get_size()


_MENU_ITEMS = (("Main Menu", 100, 220), ("Options", 220, 160), ("Save Game", 340, 230), ("Exit", 460, 90))


def draw_menu(surface: pygame.Surface, state: GameState, assets: Assets) -> None:
    width, height = _menu_background(surface, assets)
    for label, offset, _ in _MENU_ITEMS:
        _text(surface, label, (width + 160) // 2, (height + offset) // 2, 40, BLACK)
    selected = state.menu.in_game
    if 1 <= selected <= len(_MENU_ITEMS):
        _, offset, box_width = _MENU_ITEMS[selected - 1]
        _outline(surface, (width + 150) // 2, (height + offset) // 2, box_width, 40)


def draw_title(surface: pygame.Surface, state: GameState, assets: Assets) -> None:
    width, height = _menu_background(surface, assets)
    _text(surface, "New Game", (width + 200) // 2, (height + 160) // 2, 40, BLACK)
    _text(surface, "Info", (width + 240) // 2, (height + 280) // 2, 40, BLACK)
    if state.menu.start == 1:
        _outline(surface, (width + 190) // 2, (height + 160) // 2, 200, 40)
    else:
        _outline(surface, (width + 215) // 2, (height + 280) // 2, 100, 40)


def _plain_screen(surface, assets, heading) -> None:
    _menu_background(surface, assets)
    _text(surface, heading, 50, 120, 40, BLACK)
    _text(surface, "PRESS ESC TO JUMP TO MENU SCREEN", 50, 160, 20, BLACK)


def draw_info(surface: pygame.Surface, state: GameState, assets: Assets) -> None:
    _plain_screen(surface, assets, "INFO SCREEN")


def draw_options(surface: pygame.Surface, state: GameState, assets: Assets) -> None:
    _plain_screen(surface, assets, "OPTIONS SCREEN")


def draw_save(surface: pygame.Surface, state: GameState, assets: Assets) -> None:
    _plain_screen(surface, assets, "SAVE SCREEN")


def draw_exit(surface: pygame.Surface, state: GameState, assets: Assets) -> None:
    surface.fill(BLACK)
    width, height = assets["title"].get_size()
    _text(surface, "DO YOU REALLY WANT TO CLOSE THE GAME?", 120, 250, 40, WHITE)
    _text(surface, "YES", (width + 80) // 2, (height + 200) // 2, 40, WHITE)
    _text(surface, "NO", (width + 360) // 2, (height + 200) // 2, 40, WHITE)
    if state.menu.exit == 1:
        _outline(surface, (width + 70) // 2, (height + 195) // 2, 95, 40)
    elif state.menu.exit == 2:
        _outline(surface, (width + 340) // 2, (height + 195) // 2, 75, 40)


def draw_game_over(surface: pygame.Surface, state: GameState, assets: Assets) -> None:
    surface.fill(BLACK)
    _text(surface, "Game Over", SCREEN_WIDTH // 2 - 150, SCREEN_HEIGHT // 2 - 50, 50, WHITE)
    _text(
        surface,
        "Press ESC to jump to Title Menu",
        SCREEN_WIDTH // 2 - 320,
        SCREEN_HEIGHT // 2 + 10,
        50,
        WHITE,
    )


_DRAWERS = {
    GameScreen.TITLE: draw_title,
    GameScreen.INFO: draw_info,
    GameScreen.MENU: draw_menu,
    GameScreen.OPTIONS: draw_options,
    GameScreen.EXIT: draw_exit,
    GameScreen.SAVEGAME: draw_save,
    GameScreen.GAMEPLAY: draw_gameplay,
    GameScreen.GAME_OVER: draw_game_over,
}


def draw_screen(surface: pygame.Surface, state: GameState, assets: Assets) -> None:
    """Clear the surface and draw the current screen."""
    surface.fill(BLACK)
    _DRAWERS[state.screen](surface, state, assets)