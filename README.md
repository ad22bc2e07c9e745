# weeninja

A small fruit-slicing arcade game built on pygame. Fruit is thrown up from
below the screen, arcs under gravity and falls away again. Slice it and a
whole fruit splits into two halves that fly apart to the left and right.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the window, draws the game and reads the
input.

## Playing

```
weeninja
```

The game opens a 640×480 window and tries to switch it to full screen.

- A new fruit, of a random kind, is thrown about once a second.
- Moving the mouse moves the aiming marker; the marker follows the mouse
  with some smoothing.
- Pressing the left mouse button fixes the slice point where the pointer is.
  From then on, every frame, each fruit whose centre lies within one unit of
  that point (measured in the plane the fruit moves in) is cut. Whole fruit
  splits into halves; cut halves simply disappear.
- Close the window or press Escape to quit.

Fruit meshes are read from Wavefront OBJ files and PNG textures under
`resource/goodart/` relative to the current directory (for example
`resource/goodart/apple.obj` and `resource/goodart/apple.png`). These files
are not shipped with the package; when a fruit's files cannot be loaded it is
drawn as a plain coloured circle instead.

## Using the pieces

The game logic does not depend on the window and can be driven directly:

- `weeninja.fruit` – `FruitType` and the `Fruit` record. `FruitType.half()`
  returns the kind a whole fruit splits into, or `None` for kinds that do not
  split.
- `weeninja.game` – `GameState` with `spawn_fruit`, `update`, `fruit_pick`,
  `split_fruit`, `kill_fruit` and `alive_fruit`. `Ray` describes a picking
  ray. At most 1024 fruit (live or dead) fit in one state; adding more raises
  `GameFullError`.
- `weeninja.model` – `WNModel` and `model_for` map each fruit kind to its
  model and texture files; `ModelCache` loads them lazily on first `get` and
  reports with `is_loaded`. A custom loader and root directory can be passed
  to `ModelCache`.
- `weeninja.messages` – menu `Message` values and `handle_msg`, which
  returns `True` when the message asks to quit.
- `weeninja.menu` – `MenuButton`, the default `MENU_BUTTONS`,
  `menu_message` (which button's message a pressed mouse at a position
  selects) and `draw_menu` (draws the buttons onto a pygame surface).
- `weeninja.controls` – `IRSource`, `Pointer`, `ir_to_screen` and `lerp2`
  turn infrared pointer readings (pairs of blobs) and button states into a
  smoothed screen position and a slice start point.
- `weeninja.app` – `Camera`, with `screen_to_world_ray` and
  `world_to_screen`, and `main`, the entry point of the `weeninja` command.

```python
import random

from weeninja.fruit import FruitType
from weeninja.game import GameState

state = GameState()
state.spawn_fruit(FruitType.APPLE, random.Random(1))
state.update(1 / 60)
print(list(state.alive_fruit()))
```

## What it does not do

- There is no Wii remote support. `weeninja YES` prints `Using wiimote: 1`,
  reports `Unable to connect` and exits with status 1. The `controls` module
  only interprets readings handed to it; it does not talk to any device.
- The menu is not shown by the game; `draw_menu` and `menu_message` are
  available for your own loop. Choosing "Play" or "High Scores" does nothing
  beyond returning the message.
- There is no score and no high-score table.

## Tests

```
pip install ".[test]"
pytest
```