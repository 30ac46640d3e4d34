"""Command that renders the demonstration scene to a PPM file."""

from __future__ import annotations

import argparse
import sys

from .camera import Camera
from .film import Film
from .instance import Instance
from .light import AreaLight
from .material import PhongMaterial, PhongMetal
from .raytracer import render
from .scene import Scene
from .shape import Box, Sphere

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
DEFAULT_SAMPLES = 25
DEFAULT_OUTPUT = "output.ppm"
LIGHT_POSITION = (2.0, 4.0, 3.0)


def build_scene() -> Scene:
    """The demonstration scene: an area light, a stretched sphere, a floor and a tilted metal box."""
    scene = Scene(ambient_light=(0.2, 0.2, 0.2))

    red = PhongMaterial((0.8, 0.1, 0.1), (0.5, 0.5, 0.5), (0.1, 0.1, 0.1), 10.0)
    blue_metal = PhongMetal((0.1, 0.1, 0.8), (0.5, 0.5, 0.5), (0.1, 0.1, 0.1), 100.0, 0.3)
    floor = PhongMaterial((0.8, 0.8, 0.8), (0.1, 0.1, 0.1), (0.01, 0.01, 0.01), 10.0)

    area_light = AreaLight(
        LIGHT_POSITION,
        (100.0, 100.0, 100.0),
        (1.0, 0.0, 0.0),
        (0.0, 0.0, 1.0),
        25,
    )
    light_panel = Instance(Box((-0.5, -0.01, -0.5), (0.5, 0.01, 0.5)))
    light_panel.set_light(area_light)
    light_panel.translate(LIGHT_POSITION)
    scene.add_object(light_panel)

    sphere = Instance(Sphere((0.5, 1.0, 0.0), 1.0))
    sphere.set_material(red)
    sphere.scale((1.0, 2.0, 1.0))
    scene.add_object(sphere)

    floor_slab = Instance(Box((-10.0, -0.1, -5.0), (10.0, 0.0, 10.0)))
    floor_slab.set_material(floor)
    scene.add_object(floor_slab)

    blue_box = Instance(Box((-3.0, 0.0, -2.0), (-1.0, 2.0, 1.0)))
    blue_box.set_material(blue_metal)
    blue_box.translate((0.0, 1.0, 0.0))
    blue_box.rotate(45.0, (1.0, 0.0, 0.0))
    scene.add_object(blue_box)

    return scene


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="phongtracer", description="Render the demonstration scene.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--samples", type=int, default=DEFAULT_SAMPLES)
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    try:
        film = Film(args.width, args.height)
        camera = Camera(
            (0.0, 2.5, 7.0),
            (0.0, 1.0, 0.0),
            (0.0, 1.0, 0.0),
            50.0,
            1.0,
            args.width,
            args.height,
        )
        render(film, camera, build_scene(), args.samples)
        try:
            film.save_ppm(args.output)
        except OSError as error:
            print(f"Failed to open file for writing: {args.output} ({error})", file=sys.stderr)
            print("Failed to save image", file=sys.stderr)
            return 1
        print("Rendering completed successfully!")
        return 0
    except Exception as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())