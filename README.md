# raytrace1

A small ray tracer. It reads a scene file that describes a camera, lights and
objects (planes, spheres, cylinders and cones), shades each pixel with ambient
light, diffuse light with hard shadows and specular highlights, and writes the
result as a binary PPM (P6) image. It has no dependencies outside the standard
library.

## Installation

```
pip install .
```

## Command line

```
raytrace1 scene.scene
raytrace1 scene.scene out.ppm
```

The first argument is the scene file. The second, optional, argument is the
output image; without it the image is written next to the scene file with the
suffix changed to `.ppm`.

The command returns exit status 0 on success and 1 otherwise:

- with no arguments, too many arguments, or a scene file that cannot be
  opened, it prints `Usage: raytrace1 file.scene [output.ppm]`;
- with a bad scene file it prints `Error: Wrong character in the scene file.`
  or `Error: Wrong format in the scene file.`;
- if the image size is not positive, or the output cannot be written, it
  prints an `Error:` line saying so.

## What it does not do

The renderer does not open a window or show the image on screen; it only
writes a PPM file, which any image viewer can open. Rendering is done once,
pixel by pixel, in pure Python, so large images take a while.

## Scene files

A scene file has three sections, each introduced by a line that starts with
`#`. Fields within a line are separated by tabs, values within a field by
commas. Apart from the `#` lines, only letters, digits, commas, tabs, spaces
and `-` may appear. Values are whole numbers.

1. **Environment** (a line starting with a digit): `width,height`, camera
   position `x,y,z`, camera rotation in degrees `x,y,z`, field of view in
   degrees, ambient light in percent, the number of lights and the number of
   objects.
2. **Lights** (lines starting with a digit or `-`): position `x,y,z` and
   colour in percent `r,g,b`.
3. **Objects** (lines starting with a letter): type (`plane`, `sphere`,
   `cylinder` or `cone`, lower case or with an initial capital), position
   `x,y,z`, colour in percent `r,g,b`, rotation in degrees `x,y,z` and radius.
   For a cone the radius is the aperture in degrees. A sphere ignores its
   rotation. An object of any other type is read but never drawn.

The rotation turns the axis `(0, -1, 0)` about Z, then X, then Y. Cylinders
and cones are infinite; a plane is seen only from the side its normal faces.
Listing more lights or objects than the environment line declares is an error.

Example (the gaps are single tabs):

```
# environment
640,480	0,0,0	0,0,0	60	20	1	2
# lights
0,10,10	100,100,100
# objects
sphere	0,0,-20	100,0,0	0,0,0	3
plane	0,-5,0	50,50,50	0,0,0	0
```

## Library use

```python
from raytrace1.scene import load_scene
from raytrace1.render import render, save_ppm

scene = load_scene("scene.scene")
pixels = render(scene)
save_ppm(pixels, scene.width, scene.height, "out.ppm")
```

- `raytrace1.scene`: `parse_scene(text)` and `load_scene(path)` return a
  `Scene` (`width`, `height`, `camera`, `ambient`, `lights`, `objects`) made of
  `Camera`, `Light` and `SceneObject` values; malformed input raises
  `SceneError`, a `ValueError`. `check_line` validates a single line and
  `axis_from_rotation` turns rotation angles into an object's axis.
- `raytrace1.render`: `camera_ray`, `render` (a row-major list of packed
  `0xRRGGBB` integers), `to_ppm` (returns bytes) and `save_ppm`.
- `raytrace1.shading`: `cast_ray(scene, ray)` gives the colour of one ray, with
  `shadow_factor`, `specular` and `reflect` as its parts.
- `raytrace1.intersect`: `Ray`, `Hit`, `solve_quadratic`, `intersect_plane`,
  `intersect_sphere`, `intersect_cylinder`, `intersect_cone`,
  `surface_normal` and `closest_hit`.
- `raytrace1.vector`: the immutable `Vec` and `Color` types, `deg2rad` and the
  rotations `rotate_x`, `rotate_y`, `rotate_z` and `rotate_full`.
- `raytrace1.strutil`: the small string helpers the scene reader uses.

## XPM images

The package can also decode XPM pixmaps, independently of the renderer:
`raytrace1.xpm.xpm_file_to_image(path)` reads a file and
`raytrace1.xpm.xpm_to_image(strings)` takes its strings directly. Both return
an `XpmImage` with `width`, `height` and a row-major tuple of `0xRRGGBB`
`pixels`; transparent pixels (colour `None`) hold `0xFF000000`. Malformed data
raises `XpmError`. Colours are given as `#rrggbb` or as X11 colour names,
which `raytrace1.colornames.lookup_color(name)` resolves case-insensitively
(`none` gives -1, unknown names give `None`).

## Running the tests

```
pip install .[test]
pytest
```