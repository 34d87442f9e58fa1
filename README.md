# raytracer

A compact renderer written with NumPy. It shades scenes in two ways:

* **Ray tracing** (`Scene.get_color`): point lights, shadow rays, BRDF
  shading and recursive mirror reflection weighted by Schlick's Fresnel
  term (depth 2 by default).
* **Path tracing** (`Scene.trace_path`): cosine-weighted importance
  sampling, Russian-roulette continuation, emissive spheres, and
  rectangles with an `EmissiveRectangle` material sampled directly as area
  lights. Direct light from point lights is added at the first hit.

Shapes (`raytracer.shapes`): `Sphere`, `Plane`, `Box` and `Rectangle`. Each
is wrapped in a `SceneObject`, which holds a material and an optional 4x4
transform, applied about the shape's centre by `set_transform`.

Materials (`raytracer.materials`): `Lambertian`, `Metallic` (Blinn-Phong
lobe with a mirror reflection), `TorrenceSparrow` (GGX microfacet),
`Emissive` and `EmissiveRectangle`.

## Installation

```
pip install .
```

## Command line

```
raytracer [PRESET] [--width W] [--height H] [--samples N] [--bounces N]
          [-o FILE] [--exposure E] [--gamma G] [--no-open]
```

Renders one preset scene and writes it as a PNG. The result is then opened
in the system's default viewer (`xdg-open`, `open` or `start`) unless
`--no-open` is given.

| Preset                   | Scene                                          | Shading        | Default file       |
|--------------------------|------------------------------------------------|----------------|--------------------|
| `example`                | emissive sphere, metal sphere, red box, plane  | path, 500 / 5  | `path_tracing.png` |
| `p3`                     | brown sphere scaled about its centre           | ray            | `part_3.png`       |
| `p5`                     | microfacet sphere on a large white sphere      | ray            | `part_5.png`       |
| `pathtr`                 | emissive and metal spheres, point light        | path, 100 / 5  | `path_tracing.png` |
| `path_tracing_util`      | bright emissive sphere over diffuse objects    | path, 100 / 5  | `path_tracing.png` |
| `image_gen` (default)    | Cornell box with an emissive rectangle         | path, 500 / 5  | `path_tracing.png` |
| `no_shadow`              | Cornell box with a point light                 | ray            | `path_tracing.png` |
| `part6_final`            | emissive sphere, red box, metal sphere, plane  | path, 1000 / 5 | `path_tracing.png` |
| `part7_cornell_box_path` | Cornell box with an emissive sphere            | path, 500 / 5  | `path_tracing.png` |

The "path" figures are samples per pixel and the bounce parameter.
`--samples` and `--bounces` override them and are ignored for ray-traced
presets. `--width` and `--height` default to 800 and 600. `-o` or
`--output` chooses the output file. `--exposure` (default 1.0) and
`--gamma` (default 2.2) control tone mapping.

Every pixel is shaded in Python, one at a time, so path-traced presets at
full size take a very long time. Start with something like:

```
raytracer pathtr --width 80 --height 60 --samples 4 --no-open
```

## Library use

```python
from raytracer.camera import Camera
from raytracer.geometry import vec3
from raytracer.image import HDRImage, save_png
from raytracer.materials import Lambertian
from raytracer.scene import PointLight, Scene
from raytracer.shapes import SceneObject, Sphere

scene = Scene(camera=Camera())
scene.objects.append(
    SceneObject(Sphere(vec3(0.0, 0.0, -2.0), 0.5), Lambertian(vec3(1.0, 0.2, 0.2)))
)
scene.lights.append(PointLight(vec3(0.0, 3.0, 0.0), vec3(1.0, 1.0, 1.0) * 50))
scene.sky = vec3(0.69, 0.77, 0.87)

w, h = 160, 120
image = HDRImage(w, h)
for j in range(h):
    for i in range(w):
        x = 2 * (i + 0.5) / w - 1
        y = 1 - 2 * (j + 0.5) / h
        image[i, j] = scene.get_color(scene.camera.make_ray(x, y))

save_png(image, "sphere.png")
```

For path tracing, call `scene.trace_path(ray, samples, bounces)` instead of
`get_color`.

The preset scenes are built by functions in `raytracer.scenes`
(`example_scene`, `part3_scene`, `part5_scene`, `path_tracing_scene`,
`path_tracing_util_scene`) and in `raytracer.cornell`
(`cornell_emissive_rectangle_scene`, `cornell_point_light_scene`,
`part6_scene`, `cornell_sphere_light_scene`, plus `cornell_walls` for the
five walls alone). Each one returns a `RenderPreset`. Pass it to
`raytracer.cli.render(preset, width, height)` to get an `HDRImage`:

```python
from raytracer.cli import render
from raytracer.image import save_png
from raytracer.scenes import part3_scene

save_png(render(part3_scene(), 80, 60), "part_3.png")
```

`raytracer.geometry` provides `vec3`, `normalize` and the 4x4 matrix
helpers `translation`, `scaling` and `rotation` (angle in radians).
`Camera.transform_camera` moves and turns the camera.

## Images

`HDRImage` stores linear RGB, indexed as `image[i, j]` with column `i` and
row `j`. Indices outside the image raise `IndexError`. `tonemap` applies
exposure and gamma, clamps to [0, 1] and returns an 8-bit array. `save_png`
writes that array with Pillow. `open_image` passes a file to the desktop
viewer and returns the viewer's exit code, or `None` if it could not be
started.

## What it does not do

There is no interactive window or live preview, and no scene file format:
scenes are built in Python. Rendering runs on a single thread, one pixel at
a time.

## Tests

```
pip install .[test]
pytest
```