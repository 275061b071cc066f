# cubed

cubed is a small first-person maze explorer that draws its view by raycasting.
You describe a level in a `.cub` scene file. The program checks the file, loads
the wall textures and opens a 1600×900 window where you walk around the maze.

## Installation

```
pip install .
```

## Running

```
cubed path/to/level.cub
```

Pass exactly one argument: the path to a `.cub` file. With any other number of
arguments, or with an invalid scene file, the program prints `Error` and a
message to standard error and exits with status 1.

### Controls

| Key               | Action                  |
|-------------------|-------------------------|
| `W` / `S`         | move forward / backward |
| `A` / `D`         | strafe left / right     |
| `Left` / `Q`      | turn left               |
| `Right` / `E`     | turn right              |
| `Esc`             | quit                    |

Closing the window also quits. The player cannot walk into any cell that is not
floor.

## The `.cub` format

A scene file holds six identifier lines followed by the map:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0

111111
100101
1000N1
111111
```

- `NO`, `SO`, `WE` and `EA` give the PNG texture for each wall direction. The
  path is everything after the identifier and its single space, and it must
  end in `.png`.
- `F` and `C` give the floor and ceiling colours as `R,G,B`: digits and exactly
  two commas, with no spaces, and each value no higher than 255.
- Each of the six identifiers must start exactly one line. Blank lines are
  allowed in the header. Any other line there is rejected.
- The map begins at the first line made only of `1`, spaces and tabs. In the
  map, `1` is a wall, `0` is floor and a space is empty void. Exactly one of
  `N`, `S`, `E` or `W` marks where the player starts and which way they face.
- The map must be one unbroken block of lines. Walls must enclose every floor
  cell, and nothing but blank lines may follow the map.

If the map contains tab characters, the program prints a warning. Use spaces
instead.

## Using it as a library

You can also use the parsing and rendering parts on their own:

```python
from cubed.parser import parse_file
from cubed.raycaster import Raycaster, load_png
from cubed.drawing import Image

info = parse_file("level.cub")
textures = [load_png(p) for p in (info.west_texture, info.east_texture,
                                  info.north_texture, info.south_texture)]
rc = Raycaster.from_game_info(info, textures)
screen = Image(rc.screen_width, rc.screen_height)
hits = rc.render(screen)
```

- `cubed.parser.parse_file` returns a `cubed.model.GameInfo` with the texture
  paths, the packed `0xRRGGBBAA` colours, the player's start and the map as a
  grid of integers (`1` wall, `0` floor, `2` empty).
- `Raycaster.from_game_info` loads the four textures itself if you leave out
  the `textures` argument.
- `Raycaster.apply` takes a set of `cubed.raycaster.Action` values for one
  frame. `rotate` and `move` change the view directly.
- `Raycaster.cast_ray` returns a `RayHit` for one screen column.
  `Raycaster.render` draws every column onto an `Image` and returns the hits.
- `cubed.drawing` provides `draw_line`, `draw_rectangle`, `draw_triangle` and
  `set_background` for `Image`. `Image.tobytes` returns the pixels as RGBA
  bytes.

When a scene is invalid, the functions raise `cubed.errors.CubError` with a
message that describes the problem.

## What it does not do

The game only shows the textured 3D view over a plain ceiling and floor. It
does not draw a minimap, play sound or use the mouse. It also has no doors,
items or enemies.