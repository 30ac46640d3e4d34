[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phongtracer"
version = "0.1.0"
description = "A small ray tracer with Phong shading, reflective metal surfaces and area lights, writing PPM images."
requires-python = ">=3.10"
keywords = ["ray tracing", "rendering", "phong", "ppm", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
phongtracer = "phongtracer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["phongtracer"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
