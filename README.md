# minirt

A compact ray tracer written in plain Python. It reads a scene description
from an `.rt` file, builds the cameras, lights and shapes it describes, and
renders the scene into rows of packed pixels that can be written out as BMP
images. Shapes include spheres, planes, cubes, squares, triangles, cylinders
and cones. They are lit with Phong shading, shadows and an ambient term.
Spheres can be striped and planes can carry a checkerboard.

## Installation

```
pip install .
```

No third-party libraries are needed at run time. To run the test suite:

```
pip install ".[test]"
pytest
```

## Rendering a scene

```python
from minirt.bmp import write_bmp
from minirt.camera import render
from minirt.colors import tuple_to_rgb
from minirt.scene import load_scene

scene = load_scene("scenes/example.rt")
for number, camera in enumerate(scene.cameras):
    camera.index, camera.total = number, len(scene.cameras)
    canvas = render(camera, scene.world(camera), tuple_to_rgb)
    write_bmp(f"scene_{number}.bmp", canvas, scene.width, scene.height)
```

`load_scene` checks the file first with `minirt.validation.validate_file`. A
file that cannot be read, or that holds an incorrect instruction, raises
`minirt.validation.SceneError`. `render` prints a progress bar while it
works. It returns one list of packed integers per row, top row first.
`tuple_to_rgb` packs colours as 24-bit RGB. `tuple_to_argb` gives the
alternative ARGB packing, with channels scaled to 0..127.

## Scene files

A scene is a text file with one element per line. Fields are separated by
whitespace. Vectors and colours are written as three comma-separated numbers,
and colours use the 0–255 range. Everything after a `#` is a comment. A scene
needs exactly one `R`, at most one `A`, and at least one `c`. The `R` line
must come before any camera.

| Id   | Element    | Fields                                                           |
|------|------------|------------------------------------------------------------------|
| `R`  | resolution | width, height                                                    |
| `A`  | ambient    | ratio in [0, 1], colour                                          |
| `c`  | camera     | position, direction, up vector, field of view in degrees         |
| `l`  | light      | position, brightness, colour                                     |
| `sp` | sphere     | centre, diameter, pattern (0 or 1), colour                       |
| `pl` | plane      | point, normal, checker size (0 for none), colour                 |
| `sq` | square     | centre, normal, side length, colour                              |
| `cu` | cube       | centre, orientation, side length, colour                         |
| `tr` | triangle   | point A, point B, point C, colour                                |
| `cy` | cylinder   | base centre, axis, diameter, height, closed (0 or 1), colour     |
| `co` | cone       | apex, axis, diameter, height, closed (0 or 1), colour            |

Example:

```
R   400 300
A   0.2                     255,255,255
c   0,5,-20   0,0,1   0,1,0 60
l   -10,10,-10  0.8         255,255,255
sp  0,5,0      5.0   1      225,25,25
pl  0,0,0      0,1,0 2      200,200,200   # checkered floor
cy  6,0,0      0,1,0 2.0 4.0 1          25,25,225
```

## Modules

- `minirt.tuple`: points, vectors and colours.
- `minirt.matrix`: matrices and transforms, composed with `a @ b`.
- `minirt.ray`: rays.
- `minirt.camera`: the camera, `render` and `progress_bar`.
- `minirt.shapes`: the `Shape` base class, `Sphere`, `Plane`, `Cube` and `hit`.
- `minirt.polygons`: `Triangle` and `Square`.
- `minirt.quadrics`: `Cylinder` and `Cone`.
- `minirt.material`: `Light`, `Material` and `lighting`.
- `minirt.world`: `World` and the stripe and checker patterns.
- `minirt.validation`: scene checking.
- `minirt.scene`: scene parsing.
- `minirt.bmp`: BMP encoding.

## What it does not do

The package installs no command-line program. Use it from Python as shown
above. It does not open a window to show the rendered images either. Its only
output is the pixel rows that `render` returns and the BMP files that
`write_bmp` writes.