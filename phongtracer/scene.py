"""A collection of instances with ambient light, and ray tracing through it."""

from __future__ import annotations

import math

import numpy as np

from .hit import Hit
from .instance import Instance
from .ray import Ray


class Scene:
    """All instances of a scene, searched in insertion order."""

    def __init__(self, ambient_light=(0.0, 0.0, 0.0)) -> None:
        self.objects: list[Instance] = []
        self.ambient_light = np.asarray(ambient_light, dtype=float)

    def add_object(self, instance: Instance) -> None:
        self.objects.append(instance)

    def compute_intersection(self, ray: Ray) -> Hit | None:
        """The closest hit; on equal distance the instance added first wins."""
        closest: Hit | None = None
        nearest = math.inf
        for instance in self.objects:
            hit = instance.compute_intersection(ray)
            if hit is not None and hit.t < nearest:
                nearest = hit.t
                closest = hit
        return closest

    def trace_ray(self, ray: Ray) -> np.ndarray:
        """Colour seen along ``ray``; black when nothing is hit."""
        hit = self.compute_intersection(ray)
        if hit is None:
            return np.zeros(3)
        if hit.is_light():
            return self.ambient_light + hit.light.power / (hit.t * hit.t)
        if hit.is_material():
            return hit.material.eval(self, hit, ray.origin)
        raise ValueError("surface hit has neither a light nor a material")