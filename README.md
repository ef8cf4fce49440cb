# soulsengine

A small OpenGL rendering engine built on pyglet and numpy. Its demo opens an
800×600 window titled "SoulsEngine" with vsync on and draws a skybox cube
behind a single triangle, seen through a perspective camera. Pressing Escape
or closing the window ends the main loop.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Running

```
soulsengine
```

The shaders are read from `Game/Shaders/` relative to the current directory.
Another directory can be given with `--shaders`:

```
soulsengine --shaders path/to/shaders
```

The directory must hold four files:

- `basic.vert` and `basic.frag` for the triangle
- `skybox.vert` and `skybox.frag` for the skybox

Both programs receive their combined view-projection matrix in the
`u_ViewProjection` uniform. The skybox gets the camera's view with its
translation removed, so it stays centred on the viewer.

Progress is logged at INFO level (`[soulsengine.application] ...`). If the
window cannot be created, or a shader file cannot be read, compiled or linked,
the error is logged and the command exits with status 1.

## Modules

- `soulsengine.camera`
  - `perspective(fov_y, aspect, near, far)`: right-handed projection matrix,
    `fov_y` in radians, depth mapped to [-1, 1]. Raises `ValueError` for a zero
    aspect ratio or equal clip planes.
  - `look_at(eye, center, up)`: right-handed view matrix.
  - `Camera(fov, aspect, near_clip, far_clip)`: `fov` in degrees. It starts at
    position (0, 0, 3) with pitch 0 and yaw -90, looking down -Z. It has
    `position`, `pitch`, `yaw`, `front`, and read-only numpy matrices
    `view_matrix` and `projection_matrix` (row-major). `set_position(pos)` and
    `set_rotation(pitch, yaw)` (degrees) recompute the view, and so does
    `update_view()`.
- `soulsengine.shader`
  - `load_file(path)`: reads shader source. Raises `ShaderError` if the file
    cannot be read.
  - `Shader(vertex_path, fragment_path, gl=None)`: compiles and links a
    program, raising `ShaderError` on failure. It has `bind()`, `unbind()`,
    `set_uniform_mat4(name, matrix)` (a 4×4 matrix in row-major form) and
    `close()`, and can be used as a context manager.
- `soulsengine.mesh`: `Mesh(gl=None)`, a single triangle, with `draw()`,
  `close()` and `vertex_count`. It is a context manager.
- `soulsengine.skybox`: `Skybox(gl=None)`, a 36-vertex cube, with
  `draw(shader, view_proj)`, `close()` and `vertex_count`. Drawing uses a
  less-or-equal depth test and restores less afterwards. It is a context manager.
- `soulsengine.renderer`: `Renderer().draw_mesh(mesh, shader, view_proj)` binds
  the shader, sets `u_ViewProjection` and draws the mesh.
- `soulsengine.input`: `Input(window)` registers key and mouse handlers on a
  window that offers `push_handlers` (as pyglet windows do). It has
  `is_key_pressed(key)`, `key_pressed()` (the lowest held key code, or `None`),
  `pressed_keys()` (held key codes, ascending) and `mouse_position()`.
- `soulsengine.application`: `Application(shader_dir=..., window_factory=None,
  gl=None).run()` runs the main loop; `main(argv=None)` is the command.

Drawing on a `Shader`, `Mesh` or `Skybox` after `close()` raises
`RuntimeError`.

```python
from soulsengine.camera import Camera

camera = Camera(45.0, 800 / 600, 0.1, 100.0)
camera.set_position((0.0, 0.0, 3.0))
camera.set_rotation(0.0, -90.0)
view_proj = camera.projection_matrix @ camera.view_matrix
```

## What it does not do

- There is no scripting: no script files are loaded and nothing is called per
  frame beyond drawing.
- There is no on-screen debug overlay.
- The camera is fixed in the demo; input only checks for Escape. Moving the
  camera is left to code that uses `Camera` and `Input` directly.
- There is no physics, model loading or texture support; the scene is the
  built-in triangle and skybox cube.

## Tests

```
pytest
```