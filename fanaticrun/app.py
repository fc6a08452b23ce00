"""The game window and its main loop."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

import pygame

from .assets import load_assets, load_audio
from .draw import draw_screen
from .mechanics import Key, Keys, QuitGame, step
from .state import SCREEN_HEIGHT, SCREEN_WIDTH, GameScreen, GameState, new_game

WINDOW_TITLE = "Projeto_versao_0.1"
TARGET_FPS = 450
FRAME_PERIOD = 0.1

_KEYMAP = {
    pygame.K_SPACE: Key.SPACE,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_F11: Key.F11,
}


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="fanaticrun", description="Side-scrolling platform game.")
    parser.add_argument(
        "--assets",
        dest="asset_root",
        type=Path,
        default=Path("assets"),
        help="directory holding the game's images and audio",
    )
    return parser.parse_args(argv)


def advance_clock(state: GameState, dt: float) -> None:
    """Accumulate frame time and advance the animation frame every 0.1 s."""
    game = state.game
    game.time += dt
    if game.time >= FRAME_PERIOD:
        game.time = 0.0
        game.frames_counter += 1


def _read_keys(events) -> tuple[Keys, bool]:
    """Collect this frame's input; the flag is True when the window should close."""
    pressed = set()
    close = False
    for event in events:
        if event.type == pygame.QUIT:
            close = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_RCTRL:
                close = True
            elif event.key in _KEYMAP:
                pressed.add(_KEYMAP[event.key])
    held = pygame.key.get_pressed()
    down = [key for code, key in _KEYMAP.items() if held[code]]
    return Keys(pressed, down), close


def run(asset_root: str | Path) -> int:
    """Open the window and play until it is closed; returns the exit status."""
    pygame.init()
    try:
        surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        assets = load_assets(asset_root)
        state = new_game(assets.sizes())
        audio = load_audio(asset_root)
        clock = pygame.time.Clock()
        dt = 0.0
        while True:
            keys, close = _read_keys(pygame.event.get())
            if close:
                return 0
            advance_clock(state, dt)
            if keys.is_pressed(Key.F11):
                pygame.display.toggle_fullscreen()
            try:
                step(state, keys, audio)
            except QuitGame as quit_request:
                return quit_request.code
            draw_screen(surface, state, assets)
            if state.screen is GameScreen.GAMEPLAY:
                state.player.stop = 1
            pygame.display.flip()
            dt = clock.tick(TARGET_FPS) / 1000.0
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    return run(args.asset_root)


if __name__ == "__main__":
    raise SystemExit(main())