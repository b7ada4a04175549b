"""Rendering a scene to pixels and writing them as PPM."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable, Union

from .intersect import Ray
from .scene import Scene
from .shading import cast_ray
from .vector import Vec, rotate_full


def _check_size(scene: Scene) -> None:
    if scene.width <= 0 or scene.height <= 0:
        raise ValueError("image width and height must be positive")


def camera_ray(scene: Scene, x: int, y: int) -> Ray:
    """Return the primary ray through the centre of pixel (``x``, ``y``)."""
    _check_size(scene)
    cam = scene.camera
    angle = math.tan(cam.fov * 0.5 * math.pi / 180)
    aspect = scene.width / scene.height
    xx = (2 * ((x + 0.5) / scene.width) - 1) * angle * aspect
    yy = (1 - 2 * ((y + 0.5) / scene.height)) * angle
    direction = rotate_full(Vec(xx, yy, -1.0).normalized(), cam.rot)
    return Ray(cam.pos, direction)


def render(scene: Scene) -> list[int]:
    """Trace every pixel; return row-major 0xRRGGBB values."""
    _check_size(scene)
    return [
        cast_ray(scene, camera_ray(scene, x, y))
        for y in range(scene.height)
        for x in range(scene.width)
    ]


def to_ppm(pixels: Iterable[int], width: int, height: int) -> bytes:
    """Encode row-major 0xRRGGBB pixels as a binary PPM (P6) image."""
    values = list(pixels)
    if width < 0 or height < 0:
        raise ValueError("width and height must not be negative")
    if len(values) != width * height:
        raise ValueError(
            f"expected {width * height} pixels, got {len(values)}"
        )
    body = bytearray()
    for value in values:
        body += bytes(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))
    return b"P6\n%d %d\n255\n" % (width, height) + bytes(body)


def save_ppm(
    pixels: Iterable[int], width: int, height: int, path: Union[str, Path]
) -> None:
    """Write pixels to ``path`` as a binary PPM image."""
    Path(path).write_bytes(to_ppm(pixels, width, height))