# minirt

A small ray tracer. It reads a scene description from an `.rt` file and
renders it with one point light, ambient light, diffuse shading and hard
shadows. Spheres, planes and capped cylinders are supported. The result is
written as a binary PPM (P6) image.

## Installing

    pip install .

## Rendering a scene

    minirt scene.rt

Options:

| Option            | Meaning                                                        |
|-------------------|----------------------------------------------------------------|
| `-o`, `--output`  | where to write the image (default `minirt.ppm`)                |
| `--width`         | image width in pixels (default 1440); the height is `(width // 16) * 9` |
| `--debug`         | print the parsed scene values before rendering                 |

The command prints a line when it starts and when it finishes tracing rays.
If the scene cannot be read or rendered it prints `Error` followed by the
reason and exits with status 1.

## Scene files

Each line describes one element. Fields are separated by one or more
spaces. Positions, directions and colours are comma-separated triples.

    A  0.2                      255,255,255
    C  -50,0,20   0,0,1         70
    L  -40,0,30   0.7           255,255,255
    sp 0,0,20     20            255,0,0
    pl 0,0,0      0,1.0,0       255,0,225
    cy 50,0,20.6  0,0,1.0  14.2  21.42  10,0,255

| Id   | Fields                                                          |
|------|-----------------------------------------------------------------|
| `A`  | ratio in [0, 1], colour                                         |
| `C`  | position, unit direction, field of view (integer) in [0, 180]   |
| `L`  | position, brightness in [0, 1], colour                          |
| `sp` | centre, diameter in (0, 200], colour                            |
| `pl` | point, unit normal, colour                                      |
| `cy` | centre, unit axis, diameter, height (both in (0, 200]), colour  |

Rules enforced when a scene is read:

- each element has exactly the number of fields shown above;
- exactly one `A`, one `C` and one `L`;
- at most 50 spheres, 50 planes and 50 cylinders;
- numbers are plain decimals (an optional sign, digits, at most one dot,
  not ending in a dot); colour components and the field of view are
  integers;
- positions within [-1000, 1000] on every axis;
- colour components within [0, 255];
- directions with every component in [-1, 1] and a squared length between
  0.995 and 1.05.

Blank lines and lines starting with any other identifier are ignored. The
file name, with surrounding spaces removed, must end in `.rt`.

A malformed element raises `minirt.fields.ParseError` (a `ValueError`).
A bad file name, a file that cannot be opened, or a scene without its
ambient light, camera or light raises `minirt.parser.SceneFileError`.
A camera looking straight up or down cannot be rendered:
`minirt.viewport.create_viewport` raises `ValueError` for it.

## Using it from Python

    from minirt.parser import parse_file
    from minirt.render import render

    scene = parse_file("scene.rt")
    image = render(scene, 640, 360)
    image.save("scene.ppm")

- `minirt.parser.parse_lines` builds a `Scene` from any iterable of lines;
  `parse_line` adds a single line to an existing `Scene`.
- `minirt.scene.Scene` holds the ambient light, camera, light and the lists
  of spheres, planes and cylinders; `Scene.describe()` returns a text dump
  of its values and `Scene.copy()` a copy with independent object lists.
- `minirt.viewport.create_viewport(scene, width, height)` returns a
  `Viewport`; `Viewport.ray(x, y)` gives the primary ray direction for a
  pixel.
- `minirt.intersect.hit_scene` finds the nearest object along a ray, and
  `minirt.shading.calc_shadowlight` and `set_color` light it.
- `minirt.render.Image` stores `0xRRGGBB` pixels, with `set_pixel`,
  `get_pixel`, `to_ppm` and `save`.

## What it does not do

minirt renders to an image file only. It does not open a window, show the
picture on screen, or offer any interactive way to select or edit objects
and re-render the scene.

## Running the tests

    pip install .[test]
    pytest