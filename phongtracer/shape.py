"""Geometric primitives that rays can hit."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

import numpy as np

from .hit import Hit
from .ray import Ray

EPSILON = 1e-4
_FACE_TOLERANCE = 1e-4


def _normalize(vector: np.ndarray) -> np.ndarray:
    with np.errstate(invalid="ignore", divide="ignore"):
        return vector / np.linalg.norm(vector)


class Shape(ABC):
    """A surface in its own local space."""

    @abstractmethod
    def intersect(self, ray: Ray) -> Hit | None:
        """Return the nearest hit in front of the ray, or None."""


class Sphere(Shape):
    def __init__(self, center, radius: float) -> None:
        self.center = np.asarray(center, dtype=float)
        self.radius = float(radius)

    def intersect(self, ray: Ray) -> Hit | None:
        direction, origin = ray.direction, ray.origin
        offset = origin - self.center

        a = float(np.dot(direction, direction))
        b = 2.0 * float(np.dot(direction, offset))
        c = float(np.dot(offset, offset)) - self.radius * self.radius

        delta = b * b - 4.0 * a * c
        if delta < 0:
            return None

        root = math.sqrt(delta)
        t1 = (-b - root) / (2.0 * a)
        t2 = (-b + root) / (2.0 * a)

        if t1 >= EPSILON:
            t = t1
        elif t2 >= EPSILON:
            t = t2
        else:
            return None

        position = origin + t * direction
        normal = (position - self.center) / self.radius
        backface = t1 < 0 or t2 < 0
        return Hit(t, position, -normal if backface else normal, backface)


class Box(Shape):
    """An axis-aligned box between two corners."""

    def __init__(self, b_min, b_max) -> None:
        self.b_min = np.asarray(b_min, dtype=float)
        self.b_max = np.asarray(b_max, dtype=float)

    def _slabs(self, ray: Ray) -> tuple[list[float], list[float]] | None:
        near: list[float] = []
        far: list[float] = []
        for o, d, lo, hi in zip(ray.origin, ray.direction, self.b_min, self.b_max):
            if abs(d) < EPSILON:
                if o < lo or o > hi:
                    return None
                near.append(-math.inf)
                far.append(math.inf)
            else:
                t0 = (lo - o) / d
                t1 = (hi - o) / d
                near.append(min(t0, t1))
                far.append(max(t0, t1))
        return near, far

    def _face_normal(self, point: np.ndarray) -> np.ndarray:
        for axis in range(3):
            for bound, sign in ((self.b_min, -1.0), (self.b_max, 1.0)):
                if abs(point[axis] - bound[axis]) < _FACE_TOLERANCE:
                    normal = np.zeros(3)
                    normal[axis] = sign
                    return normal
        return _normalize(np.zeros(3))

    def intersect(self, ray: Ray) -> Hit | None:
        slabs = self._slabs(ray)
        if slabs is None:
            return None
        near, far = slabs
        t_enter = max(near)
        t_exit = min(far)

        if t_enter > t_exit or t_exit < EPSILON:
            return None

        t_final = t_enter
        starts_inside = False
        if t_enter < EPSILON:
            t_final = t_exit
            starts_inside = True

        if t_final <= EPSILON:
            return None

        position = ray.origin + t_final * ray.direction
        normal = self._face_normal(position)
        return Hit(t_final, position, -normal if starts_inside else normal, starts_inside)