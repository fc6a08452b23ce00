import pytest

from fanaticrun.mechanics import (
    HIT_COOLDOWN,
    Key,
    Keys,
    QuitGame,
    SilentAudio,
    exit_mechanics,
    game_mechanics,
    info_mechanics,
    jump_mechanics,
    menu_mechanics,
    options_mechanics,
    over_mechanics,
    save_mechanics,
    set_rec,
    step,
    title_mechanics,
)
from fanaticrun.state import GameScreen, Vector2, new_game


@pytest.fixture
def state():
    sizes = {
        "platform": (200, 40),
        "player_stop_left": (250, 172),
        "fanatico_stop_right": (180, 210),
        "background1": (320, 180),
        "background2": (330, 180),
        "midground1": (340, 180),
        "midground2": (350, 180),
        "foreground1": (360, 180),
        "foreground2": (370, 180),
    }
    return new_game(sizes)


@pytest.fixture
def audio():
    return SilentAudio()


def press(*keys):
    return Keys(pressed=keys)


def hold(*keys):
    return Keys(down=keys)


def test_keys_pressed_counts_as_down():
    keys = press(Key.ENTER)
    assert keys.is_pressed(Key.ENTER) is True
    assert keys.is_down(Key.ENTER) is True
    assert hold(Key.D).is_pressed(Key.D) is False


def test_silent_audio_records(audio):
    audio.update("menu")
    audio.update("menu")
    audio.stop("start")
    assert audio.updates["menu"] == 2
    assert "start" in audio.stopped


def test_quit_game_code():
    assert QuitGame().code == 1


def test_set_rec(state):
    state.player.position = Vector2(300, 400)
    state.fanatico.position = Vector2(700, 590)
    set_rec(state)
    assert (state.player.rec.x, state.player.rec.y) == (350, 400)
    assert (state.fanatico.rec.x, state.fanatico.rec.y) == (700, 590)
    assert state.platform.rec.x == state.platform.position.x


def test_title_enter_starts_game(state, audio):
    title_mechanics(state, press(Key.ENTER), audio)
    assert state.screen is GameScreen.GAMEPLAY
    assert audio.updates["menu"] == 1


def test_title_down_then_enter_opens_info(state, audio):
    title_mechanics(state, press(Key.DOWN), audio)
    assert state.screen is GameScreen.TITLE
    title_mechanics(state, press(Key.ENTER), audio)
    assert state.screen is GameScreen.INFO


def test_info_escape_returns_to_title(state, audio):
    state.screen = GameScreen.INFO
    info_mechanics(state, press(Key.ESCAPE), audio)
    assert state.screen is GameScreen.TITLE


@pytest.mark.parametrize("func", [options_mechanics, save_mechanics])
def test_options_and_save_escape_to_menu(state, func):
    func(state, press(Key.ESCAPE))
    assert state.screen is GameScreen.MENU


@pytest.mark.parametrize(
    "downs,target",
    [
        (0, GameScreen.TITLE),
        (1, GameScreen.OPTIONS),
        (2, GameScreen.SAVEGAME),
        (3, GameScreen.EXIT),
    ],
)
def test_menu_selection(state, downs, target):
    for _ in range(downs):
        menu_mechanics(state, press(Key.DOWN))
    menu_mechanics(state, press(Key.ENTER))
    assert state.screen is target


def test_menu_clamps_at_ends(state):
    first = state.menu.in_game
    menu_mechanics(state, press(Key.UP))
    assert state.menu.in_game == first
    for _ in range(10):
        menu_mechanics(state, press(Key.DOWN))
    last = state.menu.in_game
    menu_mechanics(state, press(Key.DOWN))
    assert state.menu.in_game == last
    assert last - first == 3


def test_exit_confirm_raises(state):
    with pytest.raises(QuitGame):
        exit_mechanics(state, press(Key.ENTER))


def test_exit_decline_returns_to_menu(state):
    state.screen = GameScreen.EXIT
    exit_mechanics(state, press(Key.RIGHT))
    exit_mechanics(state, press(Key.ENTER))
    assert state.screen is GameScreen.MENU
    exit_mechanics(state, press(Key.LEFT))
    with pytest.raises(QuitGame):
        exit_mechanics(state, press(Key.ENTER))


def test_game_over_escape_restores_lives(state):
    state.screen = GameScreen.GAME_OVER
    state.player.vida = 0
    over_mechanics(state, press(Key.ESCAPE))
    assert state.screen is GameScreen.TITLE
    assert state.player.vida == 4


def test_walk_right(state, audio):
    start_x = state.player.position.x
    game_mechanics(state, hold(Key.D), audio)
    assert state.player.position.x == start_x + 1.5
    assert state.player.direction == 1
    assert state.player.stop == 0
    assert audio.updates["run"] == 1


def test_walk_left(state, audio):
    start_x = state.player.position.x
    game_mechanics(state, hold(Key.A), audio)
    assert state.player.position.x == start_x - 1.5
    assert state.player.direction == -1


def test_walk_right_scrolls_at_edge(state, audio):
    state.player.position.x = 560
    plat_x = state.platform.position.x
    game_mechanics(state, hold(Key.D), audio)
    assert state.player.position.x == 560
    assert state.game.steps == 1
    assert state.platform.position.x < plat_x
    bg = state.background
    assert bg.fore < bg.mid < bg.back < 0


def test_map_changes_after_steps(state, audio):
    state.player.position.x = 560
    state.game.steps = 3599
    game_mechanics(state, hold(Key.D), audio)
    assert state.game.map == 1
    assert state.game.steps == 0


def test_escape_in_game_opens_menu(state, audio):
    state.screen = GameScreen.GAMEPLAY
    game_mechanics(state, press(Key.ESCAPE), audio)
    assert state.screen is GameScreen.MENU


def test_lives_capped_by_right_arrow(state, audio):
    state.player.vida = 5
    game_mechanics(state, press(Key.RIGHT), audio)
    assert state.player.vida == 5


def test_losing_last_life_is_game_over(state, audio):
    state.screen = GameScreen.GAMEPLAY
    state.player.vida = 1
    game_mechanics(state, press(Key.LEFT), audio)
    assert state.screen is GameScreen.GAME_OVER


def test_fanatico_hit_and_cooldown(state, audio):
    player = state.player
    state.fanatico.position = Vector2(player.position.x + 50, player.position.y)
    lives = player.vida
    game_mechanics(state, Keys(), audio)
    assert player.vida == lives - 1
    assert player.espera_hit == HIT_COOLDOWN
    game_mechanics(state, Keys(), audio)
    assert player.vida == lives - 1
    assert player.espera_hit == HIT_COOLDOWN - 1


def test_fanatico_near_stops_start_music(state, audio):
    state.fanatico.position.x = state.player.position.x + 10
    game_mechanics(state, Keys(), audio)
    assert "start" in audio.stopped
    assert state.fanatico.stop == 1


def test_fanatico_walks_toward_player(state, audio):
    before = state.fanatico.position.x
    game_mechanics(state, Keys(), audio)
    assert state.fanatico.position.x < before
    assert state.fanatico.direction == -1
    assert "start" not in audio.stopped


def test_background_wraps(state, audio):
    bg = state.background
    bg.back = -bg.back_widths[0] * 4
    game_mechanics(state, Keys(), audio)
    assert bg.back == 0


def test_jump_rises_to_top_and_lands(state, audio):
    set_rec(state)
    jump_mechanics(state, hold(Key.SPACE), audio)
    assert state.player.can_jump == 1
    lowest_y = state.player.position.y
    for _ in range(2000):
        set_rec(state)
        jump_mechanics(state, Keys(), audio)
        lowest_y = min(lowest_y, state.player.position.y)
        if state.player.can_jump == 0:
            break
    assert lowest_y == 300
    assert state.player.position.y == 628
    assert state.player.can_jump == 0
    assert audio.updates["jump"] > 0


def test_jump_under_platform_pushes_down(state, audio):
    plat = state.platform.position
    state.player.position = Vector2(plat.x - 50, plat.y + 10)
    start_y = state.player.position.y
    set_rec(state)
    jump_mechanics(state, Keys(), audio)
    assert state.colliding is True
    assert state.descending is True
    assert state.player.position.y == start_y + 2
    assert state.player.can_jump == 2


def test_step_dispatches_by_screen(state, audio):
    state.screen = GameScreen.OPTIONS
    step(state, press(Key.ESCAPE), audio)
    assert state.screen is GameScreen.MENU
    state.screen = GameScreen.TITLE
    step(state, press(Key.ENTER), audio)
    assert state.screen is GameScreen.GAMEPLAY


def test_step_gameplay_moves_player(state, audio):
    state.screen = GameScreen.GAMEPLAY
    start_x = state.player.position.x
    step(state, hold(Key.D), audio)
    assert state.player.position.x > start_x