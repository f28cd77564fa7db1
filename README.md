# raycube

raycube is a small first-person maze explorer. It reads a scene from a `.cub`
file and draws the walls with a grid raycaster in a pygame window. It also
draws a minimap with a cone of sight rays, an animated torch, and doors that
open and close.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Running

```
raycube path/to/scene.cub
```

The command takes exactly one argument, and the file name must end in `.cub`.
Wall texture paths in the scene file are opened as written, so relative paths
are taken from the current directory.

The command also reads assets from a `textures/` directory under the current
directory:

- The torch frames are `textures/torch1.png` to `textures/torch5.png`. They are
  always needed.
- The door textures are `textures/closed_door.png` and `textures/open_door.png`.
  They are needed only when the map has doors.

When the window is closed or Escape is pressed, the program prints
`Cub3d finished!` and exits with status 0. If the scene or an asset cannot be
loaded, it prints a line starting with `ERROR:` to standard error and exits
with status 1.

### Controls

| Key            | Action                                  |
|----------------|-----------------------------------------|
| W / S          | move forward / back                     |
| A / D          | strafe left / right                     |
| Left / Right   | turn                                    |
| mouse          | turn, when Left and Right are not held  |
| Space          | open or close the door ahead            |
| Escape         | quit                                    |

Movement is blocked by walls, closed doors and empty (space) cells.

## The `.cub` format

A scene file has six header lines in any order, then the map:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0

111111
100101
1D1001
1010N1
111111
```

- `NO`, `SO`, `WE` and `EA` give the wall textures. Each one may appear only
  once. They are loaded with Pillow, so any image format it reads will work.
- `F` and `C` give the floor and ceiling colours as `R,G,B`. Each value runs
  from 0 to 255.
- The map comes after all six header lines. It uses these characters:
  - `1` is a wall.
  - `0` is floor.
  - A space is empty.
  - `D` is a closed door and `d` is an open one. A closed door must not be on
    the map's edge. It needs walls on two opposite sides and floor on the other
    two.
  - One of `N`, `S`, `E` or `W` marks the player's start and facing.
- The map must be closed: no floor cell may touch the edge or an empty cell.
  It must be at least 3×3 and hold exactly one player. Nothing but blank lines
  may come after it.

## Using it as a library

```python
from raycube.loader import load_scene
from raycube.raycast import cast_ray, render_frame
from raycube.minimap import render_minimap
from raycube.textures import load_texture

scene, player = load_scene("maps/example.cub")

hit = cast_ray(scene, player, column=960, width=1920)
print(hit.wall_dist, hit.side, hit.texture)

textures = {ident: load_texture(path) for ident, path in scene.textures.items()}
frame = render_frame(scene, player, textures, width=640, height=360)
minimap = render_minimap(scene, player)
```

- `raycube.loader.load_scene(path)` returns a `(Scene, Player)` pair. Both
  types are in `raycube.model`.
- `raycube.raycast.cast_ray` returns a `RayHit`. It records the cell that was
  hit, the side (`Side.VERTICAL` or `Side.HORIZONTAL`), the perpendicular
  distance `wall_dist`, and the texture key. The key is `NO`, `SO`, `WE`, `EA`,
  `closed_door` or `open_door`.
- `render_frame` returns a `(height, width, 4)` RGBA `uint8` array.
  `textures` must map every texture key that the rays can hit to an image
  array. The door keys are needed only when the map has doors.
- `render_minimap` returns a 320×320 RGBA array.
- `raycube.movement` has `step`, `turn`, `mouse_turn` and `toggle_door`. They
  change a `Player` or a `Scene` in place.
- `raycube.textures` has `load_texture`, `load_torch_frames` and
  `TorchAnimation`.
- `raycube.game.Game` holds a running scene, and `raycube.game.main` is the
  command's entry point.

Problems in a scene file are raised as subclasses of `raycube.errors.CubError`:
`UsageError`, `FileCheckError`, `MapParseError` and `ExecutionError`. Each one
carries a numeric `code` and the matching `message`.

## What it does not do

The window is a fixed 1920×1080 and cannot be resized. There is no sound, no
enemies or other sprites besides the torch overlay, and no saving of progress:
door states and the player's position last only while the window is open.