"""Rays with an origin and a unit direction."""

from __future__ import annotations

import numpy as np


def _normalize(vector: np.ndarray) -> np.ndarray:
    with np.errstate(invalid="ignore", divide="ignore"):
        return vector / np.linalg.norm(vector)


class Ray:
    """A half-line starting at ``origin`` and heading along a unit ``direction``."""

    __slots__ = ("origin", "direction")

    def __init__(self, origin, direction) -> None:
        self.origin = np.asarray(origin, dtype=float).copy()
        self.direction = _normalize(np.asarray(direction, dtype=float))

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin.tolist()}, direction={self.direction.tolist()})"