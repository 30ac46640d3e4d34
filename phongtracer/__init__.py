"""A small Phong-shading ray tracer that renders spheres and boxes to PPM images."""

__version__ = "0.1.0"