# fanaticrun

A small side-scrolling platformer built on pygame. You run to the right
through a parallax landscape, jump onto a floating platform and try to stay
out of reach of the fanatic who walks towards you. Touching him costs a
heart, after which you are safe from him for a short while; lose every heart
and the game is over. After enough running the scenery changes to a second
map.

## Installing

```
pip install .
```

## Playing

The game reads its images and sounds from an assets directory laid out as
`personagem/`, `gui/`, `img_teste/`, `background/`, `inimigos/Fanatico/` and
`audio/`. By default this is the directory `assets` under the current
working directory:

```
fanaticrun
```

To use another directory:

```
fanaticrun --assets path/to/assets
```

`fanaticrun --help` lists the options. An image that cannot be loaded is
replaced by an empty one (a warning is logged), and music that is missing,
or an audio device that cannot be opened, simply leaves the game silent.

### Keys

| Key | Where | Action |
| --- | --- | --- |
| Up / Down | title, menu | move the selection |
| Left / Right | exit prompt | choose yes or no |
| Enter | title, menu, exit prompt | confirm |
| D / A | gameplay | run right / left |
| Space | gameplay | jump |
| Right / Left arrow | gameplay | gain / lose a heart (at most five) |
| Esc | gameplay | open the in-game menu |
| Esc | info, game over | back to the title screen |
| Esc | options, save | back to the in-game menu |
| F11 | anywhere | toggle full screen |
| Right Ctrl | anywhere | quit |

The title screen offers *New Game* and *Info*. The in-game menu offers
*Main Menu* (back to the title screen), *Options*, *Save Game* and *Exit*.
The exit prompt asks for confirmation: *Yes* ends the program with exit
status 1, *No* returns to the menu. Closing the window or pressing Right Ctrl
ends it with status 0. Pressing Esc on the game-over screen gives the player
four hearts and returns to the title screen; the rest of the game carries on
where it was.

## What it does not do

The *Options* and *Save Game* screens only show a heading: there are no
settings to change, and the game is never saved or loaded. There are no
attacks; the fanatic cannot be hurt.

## Using it as a library

The game logic does not need a window. `fanaticrun.state.new_game` builds a
`GameState` from the sizes of the sprites, keyed by the names in
`fanaticrun.state.SIZE_KEYS`, and `fanaticrun.mechanics.step` advances it by
one frame given a `Keys` snapshot (keys newly pressed and keys held down) and
an audio object. `SilentAudio` plays nothing but counts which music streams
were fed and records which were stopped.

```python
from fanaticrun.mechanics import Key, Keys, SilentAudio, step
from fanaticrun.state import SIZE_KEYS, GameScreen, new_game

state = new_game({name: (100, 100) for name in SIZE_KEYS})
audio = SilentAudio()

step(state, Keys(pressed=[Key.ENTER]), audio)   # "New Game" on the title screen
assert state.screen is GameScreen.GAMEPLAY

step(state, Keys(down=[Key.D]), audio)          # run right for one frame
print(state.player.position.x)                  # 241.5
```

`fanaticrun.mechanics.exit_mechanics` raises `QuitGame` when quitting is
confirmed on the exit prompt. `fanaticrun.app.advance_clock` moves the
animation frame on every 0.1 seconds of accumulated time, and
`fanaticrun.app.run` opens the window and plays until it is closed.