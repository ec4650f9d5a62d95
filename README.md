# blockyard

A small collection of desktop toys built on a block grid:

- **Snake** – the classic arcade game, drawn with pygame on a grid of
  25.6-pixel cells (30×30 cells by default).
- **Launcher** – a tkinter window that keeps a list of programs; tick the ones
  you want and start them one after another, with a one-second pause after
  each successful start.
- **HTTP helper** – `blockyard.http_utils.get_req(path)` builds a minimal
  HTTP/1.1 `GET` request for `localhost` with `Connection: close`.

## Installation

```
pip install .
```

The launcher needs tkinter, which ships with most Python builds.

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing Snake

```
blockyard-snake
blockyard-snake --width 40 --height 25
```

`--width` and `--height` set the grid size in cells (default 30, at least 3).

Steer with the arrow keys; the snake moves one cell every tenth of a second
and an arrow key also moves it one cell at once. Reversing straight into
yourself is ignored. Eating the red food makes the snake grow by one block
and new food appears on a free cell. Running into the border or into the
snake's own body ends the round; the board is shaded red and after a second
the game restarts on its own. Press Escape or close the window to quit.

The game logic can be driven without a window. `Game` takes an optional
`random.Random` used to place food:

```python
import random
from blockyard.game import Game
from blockyard.snake import Direction

game = Game(30, 30, random.Random(1))
game.key_press(Direction.DOWN)   # turn and step at once
game.update(0.2)                 # advance the clock; steps when due
print(game.snake.head_position(), game.food, game.game_over)
```

`blockyard.snake.Snake` holds the body (head first) and offers
`head_position()`, `head_direction()`, `next_head()`, `move_forward()`,
`restore_tail()` and `overlap_tail()`. `blockyard.draw` converts grid
coordinates to pixels (`to_coord`, `to_coord_u32`) and fills cells on a
pygame surface (`draw_block`, `draw_rectangle`) with colours given as
0..1 RGBA values.

## Starting programs

```
blockyard-launcher
```

Press "Add Program" to add an entry, "Select App" to pick a file for it,
tick the entries to start, then press "Launch". Entries ending in `.app` are
started through `open`; anything else is run directly. Each launch is
reported on standard output, failures on standard error, and a failed start
is skipped without the pause.

The launch logic is usable from code too:

```python
from blockyard.launcher import AppLauncher, launch_command, launch_applications

launch_command("/Applications/Calculator.app")  # ["open", "/Applications/Calculator.app"]
launch_command("/usr/bin/xterm")                # ["/usr/bin/xterm"]

state = AppLauncher()
state.file_selected(0, "/usr/bin/xterm")
state.toggle(0)
paths = state.start_launch()                    # ["/usr/bin/xterm"]
started = launch_applications(paths)            # the paths that started
state.finish_launch()
```

`launch_applications` accepts `spawn` and `sleep` callables in place of
`subprocess.Popen` and `time.sleep`.

## What it does not do

- The launcher's list lives only in memory; it is not saved between runs.
- `get_req` only builds the request text. Nothing in the package opens a
  connection, sends a request or reads a response.