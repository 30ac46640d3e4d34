"""Phong shading, with a reflective metal variant."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

from .ray import Ray

if TYPE_CHECKING:
    from .hit import Hit
    from .scene import Scene

MAX_REFLECTION_DEPTH = 5

_recursion = threading.local()


def _normalize(vector: np.ndarray) -> np.ndarray:
    with np.errstate(invalid="ignore", divide="ignore"):
        return vector / np.linalg.norm(vector)


class Material(ABC):
    """How a surface turns incoming light into a colour."""

    @abstractmethod
    def eval(self, scene: Scene, hit: Hit, ray_origin) -> np.ndarray:
        """Colour seen at ``hit`` from ``ray_origin``."""


class PhongMaterial(Material):
    """Ambient, diffuse and glossy terms summed over every light in the scene."""

    def __init__(self, diffuse, glossy, ambient, shininess) -> None:
        self.diffuse = np.asarray(diffuse, dtype=float)
        self.glossy = np.asarray(glossy, dtype=float)
        self.ambient = np.asarray(ambient, dtype=float)
        self.shininess = float(shininess)

    def reflect(self, incident, normal) -> np.ndarray:
        incident = np.asarray(incident, dtype=float)
        normal = np.asarray(normal, dtype=float)
        return 2.0 * float(np.dot(normal, incident)) * normal - incident

    def eval(self, scene: Scene, hit: Hit, ray_origin) -> np.ndarray:
        color = self.ambient * scene.ambient_light
        view = _normalize(np.asarray(ray_origin, dtype=float) - hit.position)

        for instance in scene.objects:
            light = instance.light
            if light is None:
                continue
            for _ in range(light.sample_count):
                direction, incoming = light.radiance(scene, hit.position)
                diffuse_factor = max(0.0, float(np.dot(hit.normal, direction)))
                color = color + self.diffuse * incoming * diffuse_factor

                reflected = self.reflect(-direction, hit.normal)
                glossy_factor = max(0.0, float(np.dot(reflected, view)))
                color = color + self.glossy * incoming * glossy_factor**self.shininess

        return np.clip(color, 0.0, 1.0)


class PhongMetal(PhongMaterial):
    """Phong shading blended with a traced reflection by Schlick's approximation."""

    def __init__(self, diffuse, glossy, ambient, shininess, r_zero) -> None:
        super().__init__(diffuse, glossy, ambient, shininess)
        self.r_zero = float(r_zero)

    def eval(self, scene: Scene, hit: Hit, ray_origin) -> np.ndarray:
        depth = getattr(_recursion, "depth", 0)
        if depth >= MAX_REFLECTION_DEPTH:
            return np.zeros(3)

        position = hit.position
        normal = hit.normal
        view = _normalize(np.asarray(ray_origin, dtype=float) - position)

        fresnel = self.r_zero + (1.0 - self.r_zero) * (1.0 - float(np.dot(view, normal))) ** 5.0
        color = (1.0 - fresnel) * super().eval(scene, hit, ray_origin)
        reflected = _normalize(self.reflect(-view, normal))

        _recursion.depth = depth + 1
        try:
            color = color + fresnel * scene.trace_ray(Ray(position, reflected))
        finally:
            _recursion.depth = depth

        return np.clip(color, 0.0, 1.0)