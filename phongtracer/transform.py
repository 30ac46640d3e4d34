"""Affine transforms kept together with their inverse and normal matrix."""

from __future__ import annotations

import math

import numpy as np


def _normalize(vector: np.ndarray) -> np.ndarray:
    with np.errstate(invalid="ignore", divide="ignore"):
        return vector / np.linalg.norm(vector)


def _translation(offset) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = np.asarray(offset, dtype=float)
    return matrix


def _scaling(factors) -> np.ndarray:
    return np.diag([*np.asarray(factors, dtype=float), 1.0])


def _rotation(angle_degrees: float, axis) -> np.ndarray:
    x, y, z = _normalize(np.asarray(axis, dtype=float))
    theta = math.radians(angle_degrees)
    c, s = math.cos(theta), math.sin(theta)
    a = np.array([x, y, z])
    cross = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    matrix = np.identity(4)
    matrix[:3, :3] = c * np.identity(3) + (1.0 - c) * np.outer(a, a) + s * cross
    return matrix


class Transform:
    """A 4x4 transform; each operation is applied in object space, after the previous ones."""

    def __init__(self) -> None:
        self.set_identity()

    def set_identity(self) -> None:
        self.matrix = np.identity(4)
        self.inverse_matrix = np.identity(4)
        self.normal_matrix = np.identity(3)

    def _compose(self, other: np.ndarray) -> None:
        self.matrix = self.matrix @ other
        self.inverse_matrix = np.linalg.inv(self.matrix)
        self.normal_matrix = self.inverse_matrix.T[:3, :3].copy()

    def translate(self, translation) -> None:
        self._compose(_translation(translation))

    def scale(self, factors) -> None:
        self._compose(_scaling(factors))

    def rotate(self, angle, axis) -> None:
        """Rotate by ``angle`` degrees about ``axis``."""
        self._compose(_rotation(angle, axis))

    @staticmethod
    def _apply_point(matrix: np.ndarray, point) -> np.ndarray:
        result = matrix @ np.append(np.asarray(point, dtype=float), 1.0)
        return result[:3] / result[3]

    @staticmethod
    def _apply_vector(matrix: np.ndarray, vector) -> np.ndarray:
        return (matrix @ np.append(np.asarray(vector, dtype=float), 0.0))[:3]

    def transform_point(self, point) -> np.ndarray:
        return self._apply_point(self.matrix, point)

    def transform_vector(self, vector) -> np.ndarray:
        return self._apply_vector(self.matrix, vector)

    def transform_normal(self, normal) -> np.ndarray:
        return _normalize(self.normal_matrix @ np.asarray(normal, dtype=float))

    def inverse_transform_point(self, point) -> np.ndarray:
        return self._apply_point(self.inverse_matrix, point)

    def inverse_transform_vector(self, vector) -> np.ndarray:
        return self._apply_vector(self.inverse_matrix, vector)