[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raytrace1"
version = "0.1.0"
description = "A small ray tracer that renders planes, spheres, cylinders and cones from a tab-separated scene file to a PPM image"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "3d", "ppm", "xpm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
raytrace1 = "raytrace1.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["raytrace1"]

[tool.pytest.ini_options]
addopts = "-ra"
