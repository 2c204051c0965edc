# plataformas

The game-state logic of a side-scrolling platformer. It tracks positions,
hitboxes, facing direction and animation frames. Your own drawing and game
loop code reads these values.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `plataformas.mario`

- `Rect`: a dataclass for an axis-aligned rectangle, with fields `x`, `y`, `width` and `height`.
  - `right` and `bottom` are properties for its far edges.
  - `contains(other)` is true when `other` lies entirely inside it.
- `Power`: the player's power level, an `IntEnum` with the values `BASE`, `SETA`, `FLOR` and `ESTRELLA`.
- `MarioState`: the player's state. Its values are `NORMAL`, `TRANSFORMANDOSE`, `TOCANDO_BANDERA`, `BAJANDO_BANDERA`, `CAMINANDO_CASTILLO` and `LEVEL_COMPLETED`.
- `Mario`: the player, a dataclass built from a starting `x` and `y`.
  - It holds a 32×32 `position` and four hitboxes: `feet`, `head`, `left` and `right`.
  - `set_x`, `set_y`, `move_x` and `move_y` change the position and recompute the hitboxes.
  - `update_hitboxes()` recomputes them from the current position and power. Call it after you change `position` or `power` directly. With `Power.SETA` the side hitboxes are inset 6 units from the top and bottom; at every other power level they are inset 4.
  - It also carries state fields that your game logic can use:
    - jumping: `can_jump`, `is_jumping`, `jump_time`, `max_jump_time`;
    - movement: `speed`, `speed_x`;
    - animation: `anim_timer`, `sprite_status`;
    - transformation: `transform_status`, `transform_timer`, `transform_sequence`, `inverse_transform_sequence`;
    - death: `is_dead`, `death_animation_in_progress`, `death_velocity`, `death_anim_timer`, `has_played_die_sound`;
    - `state` and `facing_right`.

```python
from plataformas.mario import Mario

mario = Mario(100.0, 200.0)
mario.move_x(5.0)
print(mario.position.x)   # 105.0
print(mario.feet)         # Rect(x=109.0, y=228.0, width=24.0, height=4)
```

### `plataformas.goomba`

- `Goomba`: a 32×32 walking enemy, a dataclass built from a starting `x` and `y`. It starts facing left and walks at 30 units per second.
  - `update(delta)` does nothing while `active` is false. Otherwise it does the following:
    1. moves the goomba horizontally by `speed` and vertically by `speed_y`;
    2. turns it to face right when `x < 0`, and to face left when `x > 6000`;
    3. moves its two-frame walk animation forward every `frame_speed` seconds;
    4. recomputes its `feet`, `head`, `left` and `right` hitboxes.
  - `source_rect()` returns the sprite-sheet region for the current frame. The region's width is negative when the goomba faces left, to mirror the sprite.
  - `reset()` restores its starting position, speed, facing direction, active flag and animation.

```python
from plataformas.goomba import Goomba

goomba = Goomba(300.0, 400.0)
goomba.update(0.5)
print(goomba.position.x)  # 285.0
```

### `plataformas.resources`

- `search_and_set_resource_dir(folder_name, app_dir=None)` looks for a folder named `folder_name` in these places, in order:
  1. the working directory;
  2. `app_dir`;
  3. one, two and three levels above `app_dir`.

  When `app_dir` is not given, it uses the directory of the running script. If the folder is found, it becomes the working directory and the function returns `True`. Otherwise the function returns `False` and leaves the working directory unchanged.

```python
from plataformas.resources import search_and_set_resource_dir

if not search_and_set_resource_dir("resources", "/opt/game/bin"):
    raise SystemExit("resources folder not found")
```

## What this package does not do

- It has no rendering, window, input handling, sound or game loop, and no command to start a game.
- It does not detect collisions between the player and enemies. It provides the hitboxes that such checks would use.