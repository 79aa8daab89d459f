# brushwalk

brushwalk loads a brush-based map file and lets you walk around it in first
person. It draws each brush as a textured wall and a textured floor. The scene
is lit by three point lights, and one of them moves with you.

## Installing

```
pip install .
```

To run the tests, install the test extra as well:

```
pip install ".[test]"
pytest
```

## Running

```
brushwalk
brushwalk --map path/to/other.map
```

The command opens a full-screen window with pyglet. `--map` chooses the map
file and defaults to `res/test.map`. The other files are looked up relative to
the working directory:

- `res/shaders/basicVERT.txt` and `res/shaders/basicFRAG.txt`: the vertex and
  fragment shaders.
- `res/img/clay_wall.png`: the wall texture.
- `res/img/house.png`: the floor texture. Planes whose normal points straight
  up use this one.

If a shader cannot be loaded or linked, the command prints
`Failed to load shader` and exits with status 1. If a texture cannot be
loaded, it prints `Failed to load texture` and exits with status 1. A missing
map file loads no planes. While the window is open, the frame rate is printed
every frame.

Controls:

| Key            | Action           |
|----------------|------------------|
| W / A / S / D  | move             |
| Space          | rise             |
| Left Ctrl      | sink             |
| Left / Right   | turn             |
| Up / Down      | look up / down   |
| Q / E          | roll             |

## What it does not include

The package ships no shaders, textures or maps. You must provide the `res/`
files listed above yourself. There is no collision, no map editor, and no way
to save a scene.

## Using it as a library

- `brushwalk.mapload`
  - `load_map(filepath, texture)` reads a brush map into a list of `Plane`
    objects. Each brush gives one front wall and one top floor. A malformed
    brush raises `ValueError`.
  - `make_wall_set(filepath)` reads `WALL ... Pos x1 y1 x2 y2` lines into
    `TwoPoints` values, echoing each line it reads.
  - `split(text)` and `find_any(text, tokens)` are the tokenising helpers.
- `brushwalk.plane`
  - `Plane` holds six vertices of `(x, y, z, nx, ny, nz, u, v)` and a texture.
    It has `vertex(index)`, `normal()` and `is_floor()`.
  - `make_plane`, `make_floor_plane` and `make_floor_plane_center` build the
    vertex data for walls and floors.
- `brushwalk.player`
  - `Player.step(delta_time, pressed)` moves the player according to a set of
    held `Key` values.
  - `Player.place_camera(camera)` copies the player's position and rotation
    onto a `brushwalk.camera.Camera`.
  - `input_vector(pressed)` gives the planar direction from the WASD keys.
- `brushwalk.lights`
  - `PointLight` and `SpotLight` describe lights.
  - `light_uniforms(lights)` maps indexed shader uniform names to their values.
- `brushwalk.vectors`
  - `Vec2` and `Vec3` are small immutable vectors.
- `brushwalk.app`
  - `frustum_bounds(fov)`, `texture_for(plane, wall_texture, floor_texture)`,
    `anim_factor(elapsed)` and `default_point_lights(player_position)` are the
    helpers that the window uses.

```python
from brushwalk.camera import Camera
from brushwalk.mapload import load_map
from brushwalk.player import Key, Player

planes = load_map("res/test.map", texture=None)
player = Player()
camera = Camera()
player.step(1 / 60, {Key.W})
player.place_camera(camera)
```