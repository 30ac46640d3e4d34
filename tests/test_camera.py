import math

import numpy as np
import pytest

from phongtracer.camera import Camera


def _camera(fov=60.0, width=800, height=600, distance=1.0):
    return Camera((0.0, 0.0, 5.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0), fov, distance, width, height)


def _angle(a, b):
    return math.acos(max(-1.0, min(1.0, float(np.dot(a, b)))))


def test_center_ray_points_at_target():
    ray = _camera().generate_ray(0.5, 0.5)
    assert np.allclose(ray.direction, [0.0, 0.0, -1.0])


def test_ray_starts_at_eye():
    ray = _camera().generate_ray(0.1, 0.9)
    assert np.allclose(ray.origin, [0.0, 0.0, 5.0])


def test_top_left_ray_goes_left_and_up():
    ray = _camera().generate_ray(0.0, 0.0)
    assert ray.direction[0] < 0
    assert ray.direction[1] > 0


def test_horizontal_mirror_symmetry():
    camera = _camera()
    left = camera.generate_ray(0.2, 0.3).direction
    right = camera.generate_ray(0.8, 0.3).direction
    assert left[0] == pytest.approx(-right[0])
    assert left[1] == pytest.approx(right[1])
    assert left[2] == pytest.approx(right[2])


@pytest.mark.parametrize("x, y", [(0.0, 0.0), (1.0, 1.0), (0.25, 0.75)])
def test_directions_are_unit_length(x, y):
    assert np.linalg.norm(_camera().generate_ray(x, y).direction) == pytest.approx(1.0)


@pytest.mark.parametrize("fov", [30.0, 50.0, 90.0])
@pytest.mark.parametrize("distance", [0.5, 1.0, 3.0])
def test_vertical_field_of_view(fov, distance):
    camera = _camera(fov=fov, distance=distance)
    center = camera.generate_ray(0.5, 0.5).direction
    top = camera.generate_ray(0.5, 0.0).direction
    assert _angle(center, top) == pytest.approx(math.radians(fov) / 2.0)


def test_horizontal_extent_follows_aspect_ratio():
    camera = _camera(fov=50.0, width=800, height=400)
    center = camera.generate_ray(0.5, 0.5).direction
    top = camera.generate_ray(0.5, 0.0).direction
    side = camera.generate_ray(0.0, 0.5).direction
    assert math.tan(_angle(center, side)) == pytest.approx(
        math.tan(_angle(center, top)) * 800 / 400
    )