"""Image buffer with jittered pixel sampling and PPM output."""

from __future__ import annotations

import os
import random

import numpy as np


class Film:
    """A width x height grid of RGB colours, initially black."""

    def __init__(self, width: int, height: int, rng: random.Random | None = None) -> None:
        self.width = int(width)
        self.height = int(height)
        self._image = np.zeros((self.height, self.width, 3))
        self._rng = rng if rng is not None else random.Random()

    def _check(self, i: int, j: int) -> None:
        if not (0 <= i < self.width and 0 <= j < self.height):
            raise IndexError(f"pixel ({i}, {j}) outside {self.width}x{self.height} film")

    def pixel_sampler(self, i, j) -> tuple[float, float]:
        """A random point inside pixel (i, j), in normalised image coordinates."""
        x = (i + self._rng.random()) / self.width
        y = (j + self._rng.random()) / self.height
        return x, y

    def set_value(self, i, j, color) -> None:
        self._check(i, j)
        self._image[j, i] = np.asarray(color, dtype=float)

    def get_value(self, i, j) -> np.ndarray:
        self._check(i, j)
        return self._image[j, i].copy()

    def save_ppm(self, filename: str | os.PathLike) -> None:
        """Write the image as plain-text PPM, clamping channels to 0..255."""
        values = np.clip(np.nan_to_num(self._image, nan=0.0) * 255.0, 0.0, 255.0).astype(int)
        with open(filename, "w", encoding="ascii") as file:
            file.write(f"P3\n{self.width} {self.height}\n255\n")
            for row in values:
                for r, g, b in row:
                    file.write(f"{r} {g} {b}\n")