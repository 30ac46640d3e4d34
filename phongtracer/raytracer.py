"""Render a scene onto a film through a camera."""

from __future__ import annotations

import numpy as np


def render(film, camera, scene, num_samples) -> None:
    """Fill every pixel of ``film`` with the mean of ``num_samples`` jittered rays."""
    if num_samples < 1:
        raise ValueError(f"num_samples must be at least 1, got {num_samples}")
    for j in range(film.height):
        for i in range(film.width):
            color = np.zeros(3)
            for _ in range(num_samples):
                x, y = film.pixel_sampler(i, j)
                color = color + scene.trace_ray(camera.generate_ray(x, y))
            film.set_value(i, j, color / num_samples)