import random

import numpy as np
import pytest

from phongtracer.camera import Camera
from phongtracer.film import Film
from phongtracer.ray import Ray
from phongtracer.raytracer import render
from phongtracer.scene import Scene


class _ConstantScene:
    def __init__(self, color):
        self.color = np.asarray(color, dtype=float)
        self.calls = 0

    def trace_ray(self, ray):
        self.calls += 1
        return self.color


class _AlternatingScene:
    def __init__(self):
        self._colors = [np.zeros(3), np.ones(3)]
        self._count = 0

    def trace_ray(self, ray):
        color = self._colors[self._count % 2]
        self._count += 1
        return color


class _RecordingCamera:
    def __init__(self):
        self.points = []

    def generate_ray(self, x, y):
        self.points.append((x, y))
        return Ray((0.0, 0.0, 0.0), (0.0, 0.0, -1.0))


def test_constant_scene_fills_every_pixel():
    film = Film(3, 2, rng=random.Random(0))
    color = (0.25, 0.5, 0.75)
    scene = _ConstantScene(color)
    render(film, _RecordingCamera(), scene, 4)
    assert scene.calls == 3 * 2 * 4
    for j in range(2):
        for i in range(3):
            np.testing.assert_allclose(film.get_value(i, j), color)


def test_samples_stay_inside_their_pixels_row_by_row():
    width, height, samples = 3, 2, 5
    film = Film(width, height, rng=random.Random(1))
    camera = _RecordingCamera()
    render(film, camera, _ConstantScene((0, 0, 0)), samples)
    assert len(camera.points) == width * height * samples
    for index, (x, y) in enumerate(camera.points):
        pixel = index // samples
        i, j = pixel % width, pixel // width
        assert i / width <= x <= (i + 1) / width
        assert j / height <= y <= (j + 1) / height


def test_pixel_is_average_of_samples():
    film = Film(1, 1, rng=random.Random(2))
    render(film, _RecordingCamera(), _AlternatingScene(), 2)
    np.testing.assert_allclose(film.get_value(0, 0), [0.5, 0.5, 0.5])


def test_empty_scene_renders_black():
    film = Film(4, 3, rng=random.Random(3))
    camera = Camera((0, 0, 5), (0, 0, 0), (0, 1, 0), 50.0, 1.0, 4, 3)
    render(film, camera, Scene(), 1)
    for j in range(3):
        for i in range(4):
            assert not film.get_value(i, j).any()


def test_zero_samples_rejected():
    with pytest.raises(ValueError):
        render(Film(1, 1), _RecordingCamera(), _ConstantScene((1, 1, 1)), 0)