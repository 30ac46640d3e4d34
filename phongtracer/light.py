"""Light sources that illuminate points through shadow rays."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

from .ray import Ray

if TYPE_CHECKING:
    from .scene import Scene


def _normalize(vector: np.ndarray) -> np.ndarray:
    with np.errstate(invalid="ignore", divide="ignore"):
        return vector / np.linalg.norm(vector)


def _darkness() -> tuple[np.ndarray, np.ndarray]:
    return np.zeros(3), np.zeros(3)


class Light(ABC):
    """A source of light that a surface point may or may not see."""

    power: np.ndarray

    @property
    @abstractmethod
    def sample_count(self) -> int:
        """How many times a material should sample this light per shading point."""

    @abstractmethod
    def radiance(self, scene: Scene, point) -> tuple[np.ndarray, np.ndarray]:
        """Return (unit direction towards the light, incoming radiance).

        Both are zero vectors when the light is blocked from ``point``.
        """

    def _visible_along(self, scene: Scene, point: np.ndarray, direction: np.ndarray) -> bool:
        hit = scene.compute_intersection(Ray(point, direction))
        return hit is not None and hit.light is self


class PointLight(Light):
    """A light radiating from a single point with inverse-square falloff."""

    def __init__(self, position, power) -> None:
        self.position = np.asarray(position, dtype=float)
        self.power = np.asarray(power, dtype=float)

    @property
    def sample_count(self) -> int:
        return 1

    def radiance(self, scene: Scene, point) -> tuple[np.ndarray, np.ndarray]:
        point = np.asarray(point, dtype=float)
        direction = _normalize(self.position - point)
        distance = float(np.linalg.norm(self.position - point))
        if self._visible_along(scene, point, direction):
            return direction, self.power / (distance * distance)
        return _darkness()


class AreaLight(Light):
    """A parallelogram light spanned by edges ``ei`` and ``ej`` from ``position``."""

    def __init__(self, position, power, ei, ej, n_samples, rng: random.Random | None = None) -> None:
        self.position = np.asarray(position, dtype=float)
        self.power = np.asarray(power, dtype=float)
        self.ei = np.asarray(ei, dtype=float)
        self.ej = np.asarray(ej, dtype=float)
        self.n_samples = int(n_samples)
        cross = np.cross(self.ei, self.ej)
        self.normal = _normalize(cross)
        self.area = float(np.linalg.norm(cross))
        self._rng = rng if rng is not None else random.Random()

    @property
    def sample_count(self) -> int:
        return self.n_samples

    def sample(self) -> np.ndarray:
        """A uniformly random point on the light's surface."""
        return self.position + self.ei * self._rng.random() + self.ej * self._rng.random()

    def radiance(self, scene: Scene, point) -> tuple[np.ndarray, np.ndarray]:
        point = np.asarray(point, dtype=float)
        target = self.sample()
        direction = _normalize(target - point)
        if not self._visible_along(scene, point, direction):
            return _darkness()
        offset = point - target
        squared_distance = float(np.dot(offset, offset))
        cosine = max(0.0, float(np.dot(-direction, self.normal)))
        incoming = self.power * cosine / squared_distance / float(self.sample_count)
        return direction, incoming