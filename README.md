# duckjam

A small arcade game built on pygame. A duck walks around a playfield that
wraps at the window edges, with footstep sounds timed to its walking
animation. The game opens with a fading splash screen and then shows a
title menu with Play, Settings, Credits and Exit.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
duckjam
```

Options:

| Option                  | Meaning                                                       |
|-------------------------|---------------------------------------------------------------|
| `--assets DIR`          | directory holding the images and sounds (default `assets`)    |
| `--size WIDTHxHEIGHT`   | initial window size (default `1280x720`); the window resizes  |
| `--dev`                 | log state transitions and allow toggling the UI debug overlay |

The asset directory is expected to have this layout:

```
images/ducky.png
images/splash.png
audio/music/Fluffing A Duck.ogg
audio/music/Monkeys Spinning Monkeys.ogg
audio/sound_effects/step2.ogg
audio/sound_effects/step3.ogg
audio/sound_effects/step4.ogg
audio/sound_effects/button_hover.ogg
audio/sound_effects/button_click.ogg
```

The splash image, the button sounds and the credits music are optional: if
one is missing, or audio cannot be started, the game goes on without it.
The duck sprite, the step sounds and the level music are required; if any of
them is missing, the game stays on the loading screen.

### Controls

| Key                    | Action                                         |
|------------------------|------------------------------------------------|
| W / Up arrow           | Move up                                        |
| S / Down arrow         | Move down                                      |
| A / Left arrow         | Move left                                      |
| D / Right arrow        | Move right                                     |
| P or Escape            | Pause during play, which opens the pause menu  |
| P (during play)        | Close whichever menu is open and keep playing  |
| Escape (in a menu)     | Go back one menu                               |
| Escape (on the splash) | Skip the splash screen                         |
| Backquote (`--dev`)    | Show or hide outlines around UI widgets        |

In the Settings menu, the `-` and `+` buttons set the master volume from
0% to 300% in steps of 10%. The change applies to sounds already playing.
Settings opened from the title menu return to it; opened from the pause
menu they return there.

## Using the pieces

The game logic does not need a window, so it can be driven directly.
Screen, menu and pause changes run through `duckjam.screens.GameFlow`;
requested changes take effect on `apply()`, which runs the registered
enter and exit callbacks and returns the transitions made:

```python
from duckjam.screens import GameFlow
from duckjam.states import Screen, Menu

flow = GameFlow()
flow.set_screen(Screen.TITLE)
flow.apply()
assert flow.menu() is Menu.MAIN
```

Other modules:

- `duckjam.timer` — `Timer` with `TimerMode.ONCE` and `TimerMode.REPEATING`.
- `duckjam.states` — the `Screen` and `Menu` enums and the deferred `State`.
- `duckjam.animation` — `PlayerAnimation`, the idle and walking frame cycle.
- `duckjam.movement` — `MovementController`, `apply_movement` and `screen_wrap`.
- `duckjam.audio` — `AudioPlayer`, looping music by scope and one-shot effects.
- `duckjam.player` — `Player`, `Level`, `directional_intent` and asset loading.
- `duckjam.splash` — `FadeInOut` and `SplashScreen`.
- `duckjam.widgets` — labels, buttons, grids and `UiRoot`.
- `duckjam.menus`, `duckjam.settings` — the menus built from those widgets.
- `duckjam.app` — `App`, the window and event loop, and `main`.

## What it does not do

The volume setting is not saved; every start begins at 100%. There is no
score, goal or other content beyond walking the duck around.