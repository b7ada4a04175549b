"""Ray intersection with planes, spheres, cylinders and cones."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Protocol

from .vector import Vec

FLT_MAX = 3.4028234663852886e38

_PLANE = 0
_SPHERE = 1
_CYLINDER = 2
_CONE = 3


class _Shape(Protocol):
    type: int
    pos: Vec
    rad: float
    rot: Vec


@dataclass(frozen=True)
class Ray:
    """A ray with an origin and a direction."""

    origin: Vec
    direction: Vec

    def at(self, t: float) -> Vec:
        """Return the point at distance parameter ``t`` along the ray."""
        return self.origin + self.direction.scale(t)


@dataclass(frozen=True)
class Hit:
    """Where a ray meets an object: the distance, the point and the surface normal."""

    t: float
    point: Vec
    normal: Vec
    obj: Any


def solve_quadratic(a: float, b: float, c: float, t_max: float) -> Optional[float]:
    """Return the smaller root of ``a t^2 + b t + c`` if it lies in (0, t_max).

    The larger root is never considered, so a ray starting inside a closed
    surface does not hit it.
    """
    disc = b * b - 4 * a * c
    if disc < 0.0 or a == 0.0:
        return None
    root = math.sqrt(disc)
    t0 = min((-b + root) / (2 * a), (-b - root) / (2 * a))
    if 0.0 < t0 < t_max:
        return t0
    return None


def _make_hit(ray: Ray, obj: _Shape, t: float) -> Hit:
    point = ray.at(t)
    return Hit(t, point, surface_normal(point, obj), obj)


def intersect_plane(ray: Ray, obj: _Shape, t_max: float) -> Optional[Hit]:
    """Intersect with a one-sided plane through ``obj.pos`` with axis ``obj.rot``."""
    a = (obj.pos - ray.origin).dot(obj.rot)
    b = ray.direction.dot(obj.rot)
    if b <= 0.0:
        return None
    t0 = a / b
    if 0.0 < t0 < t_max:
        return _make_hit(ray, obj, t0)
    return None


def intersect_sphere(ray: Ray, obj: _Shape, t_max: float) -> Optional[Hit]:
    """Intersect with a sphere of radius ``obj.rad`` centred at ``obj.pos``."""
    dist = ray.origin - obj.pos
    a = ray.direction.dot(ray.direction)
    b = 2 * ray.direction.dot(dist)
    c = dist.dot(dist) - obj.rad * obj.rad
    t = solve_quadratic(a, b, c, t_max)
    return None if t is None else _make_hit(ray, obj, t)


def intersect_cylinder(ray: Ray, obj: _Shape, t_max: float) -> Optional[Hit]:
    """Intersect with an infinite cylinder along ``obj.rot`` through ``obj.pos``."""
    cross1 = (ray.origin - obj.pos).cross(obj.rot)
    cross2 = ray.direction.cross(obj.rot)
    a = cross2.dot(cross2)
    b = 2 * cross2.dot(cross1)
    c = cross1.dot(cross1) - obj.rad * obj.rad * obj.rot.dot(obj.rot)
    t = solve_quadratic(a, b, c, t_max)
    return None if t is None else _make_hit(ray, obj, t)


def intersect_cone(ray: Ray, obj: _Shape, t_max: float) -> Optional[Hit]:
    """Intersect with a double cone with apex ``obj.pos`` and axis ``obj.rot``.

    ``obj.rad`` is the aperture in radians; the ray direction is assumed unit.
    """
    angle = 1 - obj.rad / math.pi
    angle2 = angle * angle
    p0 = ray.origin - obj.pos
    dr = ray.direction.dot(obj.rot)
    pr = p0.dot(obj.rot)
    a = dr * dr - angle2
    b = 2 * (dr * pr - ray.direction.dot(p0) * angle2)
    c = pr * pr - p0.dot(p0) * angle2
    t = solve_quadratic(a, b, c, t_max)
    return None if t is None else _make_hit(ray, obj, t)


def surface_normal(point: Vec, obj: _Shape) -> Vec:
    """Return the surface normal of ``obj`` at ``point``."""
    kind = obj.type
    if kind == _PLANE:
        return -obj.rot
    if kind == _SPHERE:
        return (point - obj.pos).normalized()
    if kind == _CYLINDER:
        return obj.rot.cross(point - obj.pos).cross(obj.rot).normalized()
    if kind == _CONE:
        tmp = point - obj.pos
        axis = obj.rot if obj.rot.dot(tmp) >= 0.0 else -obj.rot
        length2 = tmp.dot(tmp)
        if length2 == 0.0:
            return (-axis).normalized()
        n_hit = tmp.scale(axis.dot(tmp) / length2)
        return (n_hit - axis).normalized()
    return Vec(0.0, 1.0, 0.0)


_INTERSECTORS: dict[int, Callable[[Ray, Any, float], Optional[Hit]]] = {
    _PLANE: intersect_plane,
    _SPHERE: intersect_sphere,
    _CYLINDER: intersect_cylinder,
    _CONE: intersect_cone,
}


def closest_hit(objects: Iterable[_Shape], ray: Ray) -> Optional[Hit]:
    """Return the nearest hit of ``ray`` among ``objects``; unknown types are skipped."""
    best: Optional[Hit] = None
    t_max = FLT_MAX
    for obj in objects:
        intersect = _INTERSECTORS.get(obj.type)
        if intersect is None:
            continue
        hit = intersect(ray, obj, t_max)
        if hit is not None:
            best = hit
            t_max = hit.t
    return best