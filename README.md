# phongtracer

A compact ray tracer that renders scenes made of spheres and boxes, lit by
point and area lights, and shaded with the Phong model. Metal surfaces blend
in a mirror reflection weighted by Schlick's Fresnel approximation, traced
up to five bounces deep. Images are written as plain-text PPM (`P3`) files.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Rendering the demo scene

```
phongtracer
```

This renders the built-in scene: a red sphere stretched vertically, a
reflective blue box tilted by 45°, a light-grey floor, and a square area
light overhead, seen from a camera at `(0, 2.5, 7)` looking at `(0, 1, 0)`
with a 50° field of view. Options:

| Option       | Default      | Meaning                          |
|--------------|--------------|----------------------------------|
| `--width`    | `800`        | image width in pixels            |
| `--height`   | `600`        | image height in pixels           |
| `--samples`  | `25`         | jittered rays averaged per pixel |
| `--output`   | `output.ppm` | file the image is written to     |

On success it prints `Rendering completed successfully!` and exits with 0.
If the output file cannot be written, or anything else fails, it reports the
error on standard error and exits with 1. Rendering runs on one CPU core in
pure Python and takes a long time at the default size; try something like
`phongtracer --width 160 --height 120 --samples 4` first.

## Building your own scenes

| Module                   | Contents                                                         |
|--------------------------|------------------------------------------------------------------|
| `phongtracer.ray`        | `Ray(origin, direction)` – the direction is normalised           |
| `phongtracer.transform`  | `Transform` – `translate`, `scale`, `rotate` (degrees), point, vector and normal mapping and their inverses |
| `phongtracer.hit`        | `Hit` – `t`, `position`, `normal`, `backface`, and the `light` or `material` hit |
| `phongtracer.shape`      | `Shape`, `Sphere(center, radius)`, `Box(b_min, b_max)`; `intersect(ray)` returns a `Hit` or `None` |
| `phongtracer.camera`     | `Camera(eye, look_at, up, fov, distance, width, height)` and `generate_ray(x, y)` |
| `phongtracer.film`       | `Film(width, height, rng=None)` – `pixel_sampler`, `set_value`, `get_value`, `save_ppm` |
| `phongtracer.light`      | `Light`, `PointLight(position, power)`, `AreaLight(position, power, ei, ej, n_samples, rng=None)` |
| `phongtracer.material`   | `Material`, `PhongMaterial(diffuse, glossy, ambient, shininess)`, `PhongMetal(..., r_zero)` |
| `phongtracer.instance`   | `Instance(shape)` – a shape with a transform and a material or a light |
| `phongtracer.scene`      | `Scene(ambient_light=(0, 0, 0))` – `add_object`, `compute_intersection`, `trace_ray` |
| `phongtracer.raytracer`  | `render(film, camera, scene, num_samples)`                       |
| `phongtracer.cli`        | `build_scene()` and the `main` entry point                       |

A scene is a list of `Instance` objects, searched in the order they were
added; the nearest hit wins. Each instance wraps one shape and carries
either a material (it is shaded) or a light (it is an emitter). Instances
are moved with `translate`, `scale` and `rotate`; each operation is applied
in the instance's own space, after the ones before it.

A ray that hits a light instance sees the scene's ambient light plus the
light's power divided by the squared hit distance. A ray that hits a
material is shaded by it: `PhongMaterial.eval` adds the ambient term and,
for every light instance in the scene, the diffuse and glossy terms over
that light's `sample_count` samples, then clamps each channel to `[0, 1]`.
A light sample counts only when the shadow ray towards it meets that same
light first. `Light.radiance(scene, point)` returns the pair
`(direction towards the light, incoming radiance)`, both zero when blocked.

`render` averages `num_samples` jittered rays per pixel (it raises
`ValueError` when `num_samples` is below 1). `Film.save_ppm(filename)`
scales each channel by 255, clamps it to `0..255` and writes the image;
`OSError` is raised if the file cannot be opened. `Film.get_value` and
`set_value` raise `IndexError` for pixels outside the film.

`Film` and `AreaLight` accept a `random.Random` instance as `rng`, so renders
can be made repeatable.

```python
import random
from phongtracer.camera import Camera
from phongtracer.film import Film
from phongtracer.raytracer import render
from phongtracer.cli import build_scene

film = Film(80, 60, rng=random.Random(1))
camera = Camera((0, 2.5, 7), (0, 1, 0), (0, 1, 0), 50.0, 1.0, 80, 60)
render(film, camera, build_scene(), 2)
film.save_ppm("small.ppm")
```

## What it does not do

There is no scene file format: scenes are assembled in Python, and the
command renders only the built-in scene. Output is PPM only. Rendering is
single-threaded, with no acceleration structure, no refraction and no
textures.