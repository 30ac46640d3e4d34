"""Pinhole camera that turns normalised image coordinates into rays."""

from __future__ import annotations

import math

import numpy as np

from .ray import Ray


def _normalize(vector: np.ndarray) -> np.ndarray:
    return vector / np.linalg.norm(vector)


def _look_at(eye: np.ndarray, target: np.ndarray, up: np.ndarray) -> np.ndarray:
    forward = _normalize(target - eye)
    side = _normalize(np.cross(forward, up))
    upward = np.cross(side, forward)
    view = np.identity(4)
    view[0, :3] = side
    view[1, :3] = upward
    view[2, :3] = -forward
    view[0, 3] = -np.dot(side, eye)
    view[1, 3] = -np.dot(upward, eye)
    view[2, 3] = np.dot(forward, eye)
    return view


class Camera:
    """A camera at ``eye`` looking at ``look_at`` with a vertical field of view in degrees."""

    def __init__(self, eye, look_at, up, fov, distance, width, height) -> None:
        self.eye = np.asarray(eye, dtype=float)
        self.look_at = np.asarray(look_at, dtype=float)
        self.up = np.asarray(up, dtype=float)
        self.fov = float(fov)
        self.distance = float(distance)
        self.aspect_ratio = float(width) / float(height)
        self.view_matrix = _look_at(self.eye, self.look_at, self.up)
        self.inverse_view_matrix = np.linalg.inv(self.view_matrix)

    def generate_ray(self, x, y) -> Ray:
        """Ray through (x, y), both in [0, 1]; y grows downward in the image."""
        delta_v = self.distance * math.tan(math.radians(self.fov) / 2.0)
        delta_u = delta_v * self.aspect_ratio

        target = np.array(
            [
                -delta_u + 2.0 * delta_u * x,
                delta_v - 2.0 * delta_v * y,
                -self.distance,
                1.0,
            ]
        )
        origin = self.inverse_view_matrix @ np.array([0.0, 0.0, 0.0, 1.0])
        world_target = self.inverse_view_matrix @ target

        ray_origin = origin[:3] / origin[3]
        direction = world_target[:3] / world_target[3] - ray_origin
        return Ray(ray_origin, direction)