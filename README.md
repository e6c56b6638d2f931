# forestplot

Pure-Python geometry generation for plotting mathematical objects in two and
three dimensions. It turns functions into vertex and index data that any
renderer can take. It has no dependencies outside the standard library.

## Installation

```
pip install forestplot
```

To run the test suite:

```
pip install "forestplot[test]"
pytest
```

## 2D curves

`forestplot.curves2d` samples functions and returns lists of `Vertex`
objects (`x`, `y`, rounded to single precision) in world coordinates:

- `solve_explicit(f, x_range, width_px, zoom, screen_w, screen_h)` samples
  `y = f(x)` at about one point per screen column (at least 100 segments).
  It extrudes the samples into triangles, six vertices per segment, with the
  given pixel width. Segments with a non-finite end are dropped. So are
  segments whose vertical jump exceeds ten view heights, which marks an
  asymptote.
- `solve_parametric(f, t_range, width_px, zoom, aspect, screen_h)` does the
  same for `(x, y) = f(t)`. It takes 20 samples per unit of `t`, and at
  least 200. It drops segments that are non-finite, have zero length, or are
  longer than twice the view height. `aspect` does not change the result.
- `solve_implicit(f, x_range, y_range, screen_w, screen_h)` finds the sign
  changes of `f(x, y)` on a grid. The grid has half the screen resolution,
  clamped to 100–700 cells per axis. It returns the interpolated crossing
  points.

If the function raises `ZeroDivisionError`, `OverflowError` or `ValueError`,
that sample is treated as undefined (NaN).

`GeoObj.new_explicit`, `GeoObj.new_parametric` and `GeoObj.new_implicit`
bundle a function with a colour and a line width. The `GeoKind` enum says
which kind of object it is.

```python
import math
from forestplot.curves2d import solve_explicit

vertices = solve_explicit(math.sin, (-5.0, 5.0), 2.0, 1.0, 800, 600.0)
```

## Colours

`forestplot.colors.Color` holds named RGBA tuples in the range 0.0–1.0:
`BLACK`, `DARK_GRAY`, `WHITE`, `RED`, `BLUE`, `GREEN`, `YELLOW`, `CYAN`,
`MAGENTA`, `PURPLE`, `ORANGE`, `SOFT_PINK`, `ICE_BLUE` and `MINT`. The same
names are also available at module level.

## 2D view and layers

`forestplot.plotter2d.ViewState` holds the centre and zoom of a 2D view:

- `visible_ranges(width, height)` returns the world `(x_range, y_range)`
  shown in a window of that size.
- `scroll(y, width, height)` zooms by `y` wheel lines and keeps the world
  point under the mouse fixed. `scroll_pixels` takes a pixel delta instead.
- `set_dragging(pressed)` and `cursor_moved(x, y, width, height)` pan the
  view while the left button is held. `cursor_moved` returns whether the view
  changed.

`Plotter2D` keeps a list of `GeoObj`s along with its `view`.
`add_object(obj)` adds to that list. `compute_layers(width, height)`
recomputes one `Layer` per object. A layer holds its kind, colour, width,
vertices and `vertex_count`.

## 3D geometry

- `forestplot.mesh.Vec3` is an immutable vector. It supports `+`, `-`,
  scalar `*`, `dot`, `cross`, `length`, `unit` and `is_finite`, and has the
  constants `ZERO`, `I`, `J` and `K`.
- `MeshData.parametric_surface(func, u_range, v_range, u_segments,
  v_segments)` builds an indexed triangle mesh of `Vertex3D`s with normals
  from `func(u, v)`. It drops triangles that touch non-finite points or have
  an edge longer than 10 units. `MeshData.axes(length)` and
  `MeshData.plane(size)` build simple helper meshes.
- `forestplot.tube.tube_mesh(func, t_range, radius, tube_segments,
  path_segments)` wraps a space curve in a tube.
- `forestplot.implicit_surface.solve_implicit_surface(func, x_range, y_range,
  z_range, resolution)` runs marching cubes over `func(x, y, z) = 0`. Points
  where the field is negative count as inside. A negative `resolution`
  raises `ValueError`. The lookup tables live in `forestplot.marching_tables`.
- `forestplot.camera.Camera` is an orbit camera with z up. `drag(dx, dy,
  button)` rotates with `MouseButton.LEFT` and pans with
  `MouseButton.MIDDLE`. `scroll_lines` and `scroll_pixels` change the radius,
  clamped to 0.1–1000. `eye_position()` returns where the camera sits.
- `forestplot.scene3d.Scene3D` collects meshes with their colour, lighting
  flag and `Topology` (`TRIANGLE_LIST` or `LINE_LIST`). Iterating over a
  scene gives opaque objects first, then transparent ones. `GeoObjD3.surface`
  and `GeoObjD3.wireframe` build objects to pass to `add_object`.
  `default_scene()` returns a scene that already holds red, green and blue
  axes and a translucent grey ground plane.

```python
from forestplot.implicit_surface import solve_implicit_surface

sphere = solve_implicit_surface(
    lambda x, y, z: x * x + y * y + z * z - 1.0,
    (-1.5, 1.5), (-1.5, 1.5), (-1.5, 1.5), 20,
)
print(len(sphere.vertices), len(sphere.indices))
```

## What this package does not do

forestplot only produces geometry and keeps view state. It does not open
windows, draw on screen, talk to a GPU, or compute view or projection
matrices. It has no command-line program. Event handling is limited to the
`ViewState` and `Camera` methods above, which your own windowing code calls.