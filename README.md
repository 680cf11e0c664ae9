# glscenes

The scene logic behind a set of small 3D graphics demos, kept apart from any
window or GPU code so it can be used and tested on its own. Matrices and
vectors are NumPy arrays.

## Modules

- `glscenes.transforms`: `perspective`, `ortho`, `look_at`, `translate`,
  `rotate`, `scale`, `normalize`, `inverse_transpose` and `wrap_angle`,
  following the usual OpenGL conventions (4x4 matrices, column vectors,
  right-handed view, depth in [-1, 1]). Angles are in radians.
- `glscenes.camera`: a look-at `Camera` with `eye`, `at` and `up` vectors
  that can `dolly` (move forward and back), `truck` (slide sideways) and
  `pan` (turn about its up axis), and recompute its `view_matrix` and
  `proj_matrix`.
- `glscenes.trackball`: a virtual `TrackBall` that turns mouse drags into
  rotations and keeps turning at the last drag's angular velocity after the
  mouse is released. The clock can be passed in for deterministic use.
- `glscenes.objfile`: a Wavefront OBJ/MTL reader (`parse_obj`, `parse_mtl`,
  `load_obj`) that triangulates polygons as fans, and `dedupe_positions` to
  merge face corners with equal positions. Malformed input raises `ObjError`.
- `glscenes.model`: a `Model` built from OBJ data that merges equal vertices,
  can centre and scale the mesh (`standardize`), computes smooth normals when
  the file has none, and takes its ambient, diffuse and specular colours and
  shininess from the first material.
- `glscenes.polygons`: `regular_polygon` builds triangle-fan positions and
  colours; `random_polygon` picks 3 to 20 sides, colours, position and size.
- `glscenes.starfield`: a `Starfield` of spinning stars that fly towards the
  camera and respawn far away, with `projection_matrix` for perspective or
  orthographic `Projection`.
- `glscenes.viewer`: `ViewerState` for a model viewer (zoom, projection,
  front face, culling, shader choice) and `normal_matrix`.
- `glscenes.apps`: the window and OpenGL settings each demo asks for
  (`settings_for`, `available_apps`).

## Requirements

Python 3.10 or later and NumPy.

## A camera walk

```python
from glscenes.camera import Camera

camera = Camera()
camera.compute_projection_matrix(600, 600)
camera.dolly(0.5)   # half a unit forward
camera.truck(-0.2)  # a little to the left
camera.pan(0.1)     # turn right by 0.1 radians
print(camera.eye, camera.at)
```

## Building matrices

```python
import math
import numpy as np
from glscenes import transforms

model = transforms.translate(np.identity(4), (-1.0, 0.0, 0.0))
model = transforms.rotate(model, math.radians(90.0), (0.0, 1.0, 0.0))
model = transforms.scale(model, 0.5)

projection = transforms.perspective(math.radians(70.0), 1.0, 0.1, 5.0)
view = transforms.look_at((0.0, 0.5, 2.5), (0.0, 0.5, 0.0), (0.0, 1.0, 0.0))
clip = projection @ view @ model
```

## Loading a mesh

```python
from glscenes.model import Model
from glscenes.objfile import parse_obj

data = parse_obj("""
v 0 0 0
v 1 0 0
v 0 1 0
f 1 2 3
""")
model = Model()
model.load(data)            # standardizes and computes normals
print(model.num_triangles(), model.normals)
```

`Model.load_from_file(path)` reads an OBJ file and looks for its material
libraries beside it. `load_diffuse_texture` only records the path of an
existing image in `diffuse_texture`; it does not decode the image.

## Dragging the trackball

```python
from glscenes.trackball import TrackBall

ball = TrackBall()
ball.resize_viewport(600, 600)
ball.mouse_press((300, 300))
ball.mouse_move((350, 300))
ball.mouse_release((350, 300))
rotation = ball.rotation()  # 4x4 matrix
```

## A starfield

```python
import random
from glscenes.starfield import Projection, Starfield, projection_matrix

field = Starfield(random.Random(1), num_stars=100)
field.update(1 / 60)
matrices = field.model_matrices()
projection = projection_matrix(Projection.PERSPECTIVE, aspect=1.0, fov=30.0)
```

## Demo settings

```python
from glscenes.apps import available_apps, settings_for

for name in available_apps():
    print(name, settings_for(name))
```

## What this package does not do

It opens no windows, creates no OpenGL context, compiles no shaders and draws
nothing; it has no command to run. It produces the matrices, vertex arrays
and state that a renderer would upload, and leaves the drawing to your own
code. The settings in `glscenes.apps` describe windows; nothing here creates
them.

## Running the tests

Install the `test` extra and run pytest from the project directory.