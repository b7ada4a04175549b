"""Three-component vectors, colours and the rotations used by the renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y, -self.z)

    def scale(self, c: float) -> Vec:
        """Return this vector multiplied by the scalar ``c``."""
        return Vec(self.x * c, self.y * c, self.z * c)

    def dot(self, other: Vec) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec) -> Vec:
        """Return the cross product ``self x other``."""
        return Vec(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec:
        """Return a unit vector in the same direction; the zero vector is kept as is."""
        mag = self.magnitude()
        if mag > 0:
            return self.scale(1.0 / mag)
        return self


@dataclass(frozen=True)
class Color:
    """An RGB colour with components nominally in 0..1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def add_scaled(self, other: Color, amount: float) -> Color:
        """Return this colour plus ``other`` weighted by ``amount``."""
        return Color(
            self.r + other.r * amount,
            self.g + other.g * amount,
            self.b + other.b * amount,
        )


def deg2rad(d: float) -> float:
    """Convert whole degrees to radians; fractions of a degree are truncated."""
    return int(d) * math.pi / 180


def rotate_x(pt: Vec, theta: float) -> Vec:
    """Rotate ``pt`` by ``theta`` radians about the X axis."""
    c, s = math.cos(theta), math.sin(theta)
    return Vec(pt.x, c * pt.y - s * pt.z, s * pt.y + c * pt.z)


def rotate_y(pt: Vec, theta: float) -> Vec:
    """Rotate ``pt`` by ``theta`` radians about the Y axis."""
    c, s = math.cos(theta), math.sin(theta)
    return Vec(c * pt.x + s * pt.z, pt.y, -s * pt.x + c * pt.z)


def rotate_z(pt: Vec, theta: float) -> Vec:
    """Rotate ``pt`` by ``theta`` radians about the Z axis."""
    c, s = math.cos(theta), math.sin(theta)
    return Vec(c * pt.x - s * pt.y, s * pt.x + c * pt.y, pt.z)


def rotate_full(ori: Vec, rot: Vec) -> Vec:
    """Rotate ``ori`` about Z, then X, then Y by the angles in ``rot`` (radians)."""
    res = rotate_z(ori, rot.z)
    res = rotate_x(res, rot.x)
    return rotate_y(res, rot.y)