# quasarcore

Core building blocks for a small 3D engine. Everything here is plain Python
(with numpy for vector and matrix work) and runs without a window or a
graphics context.

## Modules

- `quasarcore.events`: `EventType` and the event classes
  `WindowResizeEvent`, `WindowCloseEvent`, `KeyPressedEvent`,
  `KeyReleasedEvent`, `KeyTypedEvent`, `MouseMovedEvent`,
  `MouseScrolledEvent`, `MouseButtonPressedEvent` and
  `MouseButtonReleasedEvent`. `str(event)` gives a one-line description.
  `EventDispatcher(event).dispatch(EventClass, handler)` calls the handler
  only when the event is of that class, stores the handler's result in
  `event.handled` and returns whether the handler ran.
- `quasarcore.chronometer`: `Chronometer`, a stopwatch on the system clock
  with `start`, `stop`, `reset`, `restart` and `elapsed_time()`, which
  returns an `ElapsedTime` in seconds, milliseconds and microseconds.
- `quasarcore.tsqueue`: `TSQueue`, a thread-safe FIFO whose `front()` and
  `pop()` wait until an item is available; also `push`, `empty` and `len()`.
- `quasarcore.tree`: `Tree`, a node with a value and ordered branches
  (`push_branch`, `add_branch`, `remove_branch`, `pop_branch`,
  `clear_branches`, indexing, `len()`, sibling queries). Iterating a node
  walks depth-first from it, then on through its ancestors' unvisited
  branches up to the root.
- `quasarcore.mathutils`: `map_range`; `calculate_frustum`, which extracts
  six normalised `Plane`s (a `Frustum`, indexed by `Direction`) from a 4x4
  view-projection matrix indexed `[row][column]`; and point and spline
  sampling for linear, Catmull-Rom, cubic and Bézier curves in 2D. The
  Catmull-Rom and cubic splines take 101 samples per four-point window; the
  linear spline takes 1001 samples per segment and the Bézier spline 1001
  samples overall. `bezier_interpolation` weights points by
  `(1 - t)**(n - i) * t**i`, without binomial coefficients.
- `quasarcore.texture`: `TextureFormat`, `TextureWrap`, `TextureFilter`,
  the `TextureSpecification` dataclass, conversions between these enums and
  their display names (unknown names fall back to `REPEAT` and `NEAREST`),
  `desired_channels`, `resolve_formats` (sets the formats from the `alpha`
  and `gamma` flags) and `read_file`, which returns a file's bytes.
- `quasarcore.material`: `TextureType`, `MaterialSpecification` and
  `Material`, with `set_texture`, `texture_path`, `has_texture` and
  `reset_texture`; `create_material`.
- `quasarcore.mesh`: `Vertex` and `Mesh`. A mesh keeps its vertices and
  indices, an axis-aligned bounding box (`bounding_box_position`,
  `bounding_box_size`) and a material specification. `is_visible(frustum,
  model_matrix)` tests the box, moved by the matrix's translation, against
  each frustum plane. The box's upper corner never lies below zero on any
  axis, because the maxima start at the smallest positive float.
- `quasarcore.model`: `Model`, a named set of meshes built from one vertex
  and index list, with `get_mesh` and `meshes()`; `create_model`.
- `quasarcore.camera`: `perspective(fov_y, aspect, near, far)` and
  `Camera`, whose projection is rebuilt by `set_fov` and `on_resize` (near
  0.1, far 1000) and whose view and transform come from the object passed
  to `init`, which must provide `global_view_matrix()` and
  `global_transform()`.
- `quasarcore.shader`: the `ShaderFile` and `ShaderSource` dataclasses
  naming the stages of a shader program.
- `quasarcore.lights`: `SpotLight`, `PointLight`, `DirectionalLight`,
  `DebugLineVertex` and `DebugTriangleVertex` dataclasses.
- `quasarcore.perlin`: `PerlinNoise` with 1D, 2D and 3D noise and its
  `_01`, octave, clamped and normalised variants. Seeding shuffles the
  permutation table with `MT19937`, a Mersenne Twister, so a given seed gives
  the same noise on every platform. `serialize` and `deserialize` save and
  restore the 256-byte table.
- `quasarcore.dxt_block`: `compress_dxt_block`, `compress_color_block` and
  `compress_alpha_block` turn a 64-byte 4x4 RGBA block into DXT1 (8 bytes)
  or DXT5 (16 bytes) data; `DxtMode` selects dithering and extra refinement.
- `quasarcore.dxt_image`: `ryg_compress` and `ryg_compress_ycocg` compress
  whole RGBA images block by block, padding edge blocks with pixels from
  inside the image; also `extract_block`, `rgb_to_ycocg_block` and
  `linearize`.

## What it does not do

The package draws nothing. It opens no window, talks to no GPU, and has no
renderer, shaders that compile, skybox or framebuffers: meshes, models,
textures, materials and shaders here are descriptions only. It does not
decode image files or load model files; a `Model` is built from vertex and
index lists you supply. There is no command-line program.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Dispatching an event:

```python
from quasarcore.events import EventDispatcher, WindowResizeEvent

event = WindowResizeEvent(1280, 720)
dispatcher = EventDispatcher(event)
dispatcher.dispatch(WindowResizeEvent, lambda e: e.width > 0)
print(event.handled, str(event))  # True WindowResizeEvent: 1280, 720
```

Sampling noise:

```python
from quasarcore.perlin import PerlinNoise

noise = PerlinNoise(12345)
print(noise.octave2d_01(0.3, 0.7, 4, 0.5))
```

Compressing an image to DXT1:

```python
from quasarcore.dxt_image import ryg_compress

pixels = bytes([255, 0, 0, 255]) * (8 * 8)
data = ryg_compress(pixels, 8, 8, False)
print(len(data))  # 4 blocks of 8 bytes
```

Frustum culling a mesh:

```python
import numpy as np
from quasarcore.camera import perspective
from quasarcore.mathutils import calculate_frustum
from quasarcore.mesh import Mesh, Vertex

frustum = calculate_frustum(perspective(np.radians(45.0), 1.0, 0.1, 100.0))
mesh = Mesh([Vertex((0, 0, -5)), Vertex((1, 1, -6))], [0, 1])
print(mesh.is_visible(frustum, np.identity(4)))
```