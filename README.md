# glowbox

The geometry and game-support core of Glowbox, a small breakout-like
juggling game played in time with music. It builds triangle meshes,
computes tangent space for normal mapping, lays out bitmap-font text,
loads PNG images, keeps a scene graph, measures frame times and holds the
beat timings that drive the game.

Everything here is plain Python working on plain data (tuples and lists),
so meshes and scenes can be built, inspected and tested without a graphics
context. Pillow is used to decode PNG files.

## Installation

```
pip install .
pip install .[test]   # with pytest, to run the tests
```

## What is in the package

| Module | Provides |
| --- | --- |
| `glowbox.mesh` | `Mesh`, the container for vertices, normals, texture coordinates, tangents, bitangents and indices |
| `glowbox.shapes` | `cube(...)` and `generate_sphere(sphere_radius, slices, layers)` |
| `glowbox.glfont` | `generate_text_geometry_buffer(text, character_height_over_width, total_text_width)` |
| `glowbox.tangents` | `compute_tangents_and_bitangents(mesh)` |
| `glowbox.image_loader` | `PNGImage`, `ImageLoadError` and `load_png_file(file_name)` |
| `glowbox.scene_graph` | `SceneNodeType`, `SceneNode` and `print_node(node)` |
| `glowbox.timeutils` | `DeltaTimer` and `get_time_delta_seconds()` |
| `glowbox.timestamps` | `KeyFrameAction`, `KEYFRAME_TIMESTAMPS`, `KEYFRAME_DIRECTIONS` and `keyframes()` |
| `glowbox.config` | window constants, `CommandLineOptions`, `parse_options(argv)` and `gl_error_name(error_id)` |

## Meshes

A `Mesh` is a dataclass of lists: `vertices`, `normals`, `tangents` and
`bitangents` hold 3-tuples, `texture_coordinates` holds 2-tuples and
`indices` holds integers, three per triangle.

```python
from glowbox.shapes import cube, generate_sphere
from glowbox.tangents import compute_tangents_and_bitangents

box = cube()                         # unit cube: 36 vertices, one normal per face
ball = generate_sphere(1.0, 40, 40)  # radius, slices, layers

compute_tangents_and_bitangents(box)  # fills box.tangents and box.bitangents
```

`cube` takes a scale, a texture scale, whether textures tile across the
faces, whether the cube is inverted (triangle winding reversed and normals
pointing inwards, useful for rooms) and a three-dimensional texture scale.
Every triangle has its own vertices, so the indices simply count upwards.

`generate_sphere` builds a sphere around the z-axis out of
`slices * layers` quads, two triangles each, with unit normals.

`compute_tangents_and_bitangents` accumulates a tangent and bitangent per
triangle into each of its vertices and normalizes the result. It raises
`ValueError` if the index count is not a multiple of three; a vertex that
no triangle uses ends up with NaN components.

## Text

`generate_text_geometry_buffer` turns a string into one textured quad per
character, laid out along the x-axis. The texture is taken to be a
128-glyph horizontal strip indexed by character code; the quads are sized
so the whole string spans `total_text_width`, with each character's height
being its width times `character_height_over_width`. An empty string gives
an empty mesh.

```python
from glowbox.glfont import generate_text_geometry_buffer

label = generate_text_geometry_buffer("SCORE 42", 39 / 29, 300.0)
```

## PNG images

`load_png_file` decodes a PNG into an RGBA `PNGImage` (`width`, `height`,
`pixels` as bytes, four per pixel) whose rows are flipped so that the first
row is the bottom of the picture, the order graphics APIs expect. A file
that cannot be opened, cannot be decoded or is not a PNG raises
`ImageLoadError`, a subclass of `OSError`.

```python
from glowbox.image_loader import load_png_file

image = load_png_file("textures/charmap.png")
```

## Scene graph

```python
from glowbox.scene_graph import SceneNode, print_node

root = SceneNode()
paddle = SceneNode()
ball = SceneNode()
root.add_child(paddle)
paddle.add_child(ball)

root.total_children()   # 2, counting every descendant
print(root.describe())  # multi-line summary of the node
print_node(paddle)      # the same summary written to standard output
```

A node holds its position, rotation, scale and reference point, a light
colour, identity-initialised transformation, model and normal matrices,
render handles (vertex array object id and index count, texture, normal
map, roughness map and material ids) and a `SceneNodeType` telling a
renderer how to treat it. Each node gets a unique, increasing `id` when it
is created.

## Timing

`DeltaTimer().delta_seconds()` returns the seconds elapsed since the
previous call, or since the timer was made on the first call. The timer
reads `time.monotonic_ns` unless another nanosecond clock is passed in.
`get_time_delta_seconds()` does the same with one timer shared by the
whole program, started when the module is imported.

`keyframes()` returns the song's key frames as a list of pairs: each time
stamp in seconds with a `KeyFrameAction` (`TOP` or `BOTTOM`) saying where
the ball should be at that moment. The last entry is a far-future sentinel
time.

## Options and diagnostics

`parse_options(argv)` reads the game's command-line flags into
`CommandLineOptions`: `-a/--autoplay` sets `enable_autoplay`, and
`-h/--help` prints help and exits. On an invalid argument it writes
`Error parsing arguments: ...` and the usage line to standard error and
exits with status 1.

`gl_error_name(error_id)` turns an OpenGL error code into its symbolic name,
such as `GL_INVALID_ENUM`; it returns `None` for `GL_NO_ERROR` and
`[Unknown error ID]` for codes it does not name.

`glowbox.config` also holds the window settings: `WINDOW_WIDTH` (1366),
`WINDOW_HEIGHT` (768), `WINDOW_TITLE`, `WINDOW_RESIZABLE` and
`WINDOW_SAMPLES`.

## What this package does not do

There is no game here to run: the package opens no window, creates no
graphics context, uploads nothing to a GPU, compiles no shaders and has no
rendering loop, gameplay or input handling. It installs no command. It
supplies the data and helpers such a game is built from.