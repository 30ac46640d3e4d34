"""Shapes placed in the scene with a transform and a light or material."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

import numpy as np

from .hit import Hit
from .ray import Ray
from .shape import Shape
from .transform import Transform


def _normalize(vector: np.ndarray) -> np.ndarray:
    with np.errstate(invalid="ignore", divide="ignore"):
        return vector / np.linalg.norm(vector)


class _Role(Enum):
    NONE = auto()
    LIGHT = auto()
    MATERIAL = auto()


class Instance:
    """A shape under a transform, carrying either a light or a material."""

    def __init__(self, shape: Shape | None) -> None:
        self.shape = shape
        self.transform = Transform()
        self._role = _Role.NONE
        self._target: Any = None

    def set_material(self, material) -> None:
        self._target = material
        self._role = _Role.NONE if material is None else _Role.MATERIAL

    def set_light(self, light) -> None:
        self._target = light
        self._role = _Role.NONE if light is None else _Role.LIGHT

    def is_light(self) -> bool:
        return self._role is _Role.LIGHT

    def is_material(self) -> bool:
        return self._role is _Role.MATERIAL

    @property
    def light(self):
        return self._target if self._role is _Role.LIGHT else None

    @property
    def material(self):
        return self._target if self._role is _Role.MATERIAL else None

    def translate(self, translation) -> None:
        self.transform.translate(translation)

    def scale(self, factors) -> None:
        self.transform.scale(factors)

    def rotate(self, angle, axis) -> None:
        """Rotate by ``angle`` degrees about ``axis``."""
        self.transform.rotate(angle, axis)

    def compute_intersection(self, ray: Ray) -> Hit | None:
        """Intersect a world-space ray; the hit's position and normal are in world space."""
        if self.shape is None:
            return None

        local_origin = self.transform.inverse_transform_point(ray.origin)
        local_end = self.transform.inverse_transform_point(ray.origin + ray.direction)
        local_ray = Ray(local_origin, _normalize(local_end - local_origin))

        hit = self.shape.intersect(local_ray)
        if hit is None:
            return None

        if self._role is _Role.LIGHT:
            hit.set_light(self._target)
        elif self._role is _Role.MATERIAL:
            hit.set_material(self._target)

        hit.position = self.transform.transform_point(hit.position)
        hit.normal = self.transform.transform_normal(hit.normal)
        return hit