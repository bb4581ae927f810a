# shootinggame

A small arcade shooting game skeleton built on pygame. The player's ship sits
near the bottom of a 1280×720 screen and moves left and right. An enemy starts
at (100, 100) and moves steadily down the screen. The game updates at a fixed
60 frames per second. A frame timer drives the updates and caps timing spikes.

## Installation

```
pip install .
```

This also installs pygame.

## Playing

```
shootinggame [--windowed] [--show-fps] [--sprite-sheet PATH]
```

- `--windowed`: run in a 1280×720 window. Without it the game runs full screen.
- `--show-fps`: draw the measured frame rate in the top-left corner.
- `--sprite-sheet PATH`: the image to draw the sprites from. The default is
  `Resources/Textures/ShootingGame.png`, relative to the working directory. If
  the image cannot be loaded, the game still runs but draws no sprites.

Controls:

- **Left / Right arrow keys** (or keypad 4 / 6): move the ship. The ship stays
  on the screen.
- **Escape**, or closing the window: quit.

The player is drawn from the 32×32 cell at the top-left of the sprite sheet.
The enemy is drawn from the cell at x = 96. Both are scaled to 64×64.

`main()` returns 0 on a normal exit. It returns -1 if no display can be opened.

## What the game does not do

This is a skeleton. There is one enemy and it never respawns. Nothing is fired,
nothing collides, and there is no score, sound or game-over screen.

## Using the pieces

- `shootinggame.screen.Screen`: the screen width and height, its edges and its
  centre. These values are read-only.
- `shootinggame.frame_timer.FrameTimer(fps=None, refresh_rate=60, clock=None)`:
  a frame timer that works in microseconds.
  - With `fps` given, it runs at a fixed rate, capped at `refresh_rate`.
  - With `fps` of None, every frame is an update frame.
  - `clock` is a function that returns microseconds. Pass your own to get
    deterministic timing.
  - Call `update()` once per loop, and `reset()` to start measuring again.
  - Read the properties `is_update_frame`, `elapsed_time` (seconds) and
    `frame_rate` (update frames counted over the last full second).
- `shootinggame.gamelib`:
  - `Colors`: the sixteen standard colours as `0xAARRGGBB` integers.
  - `to_rgba(color)`: converts a colour to the `(r, g, b, a)` tuple that pygame
    takes.
  - `exit_game()`: raises `ExitGame`, which the main loop catches to stop.
  - `output_debug_string(format, first_arg, *args)`: formats a printf-style
    message, writes it to stderr and returns it. It raises `RuntimeError` if
    the formatting fails.
- `shootinggame.player`:
  - `PadInput`: the pad input bits.
  - `Player`: `update(key_condition, key_trigger)` moves the ship by
    `Player.SPEED` pixels while RIGHT or LEFT is held, and clamps it to the
    screen.
- `shootinggame.enemy.Enemy`: moves down by `Enemy.SPEED` pixels on each
  `update()`.
- `shootinggame.game.Game`:
  - Holds the player and the enemy, exposed as `player` and `enemy`.
  - Has `initialize(sprite_sheet)`, `update(elapsed_time, key)`,
    `render(surface)` and `finalize()`.
- `shootinggame.main`:
  - `pad_state_from_keys(pressed)`: turns a `pygame.key.get_pressed()` table
    into `PadInput` bits.
  - `draw_frame_rate(surface, x, y, color, fps, font=None)`: draws the frame
    rate text.

```python
from shootinggame.frame_timer import FrameTimer

timer = FrameTimer(60)
while running:
    timer.update()
    if timer.is_update_frame:
        step(timer.elapsed_time)
```

## Tests

```
pip install .[test]
pytest
```