"""Colour of a camera ray: ambient, diffuse with shadows, and specular light."""

from __future__ import annotations

import math

from .intersect import Hit, Ray, closest_hit
from .scene import Light, ObjectType, Scene
from .vector import Color, Vec

_SHADOW_BIAS = 0.02
_SHININESS = 40


def reflect(i: Vec, n: Vec) -> Vec:
    """Mirror ``i`` about the normal ``n``."""
    return n.scale(2.0 * n.dot(i)) - i


def shadow_factor(scene: Scene, light: Light, hit: Hit) -> float:
    """Return the diffuse factor of ``light`` at ``hit``: 0 when shadowed or facing away."""
    to_light = (light.pos - hit.point).normalized()
    light_ray = Ray(hit.point + hit.normal.scale(_SHADOW_BIAS), to_light)
    blocker = closest_hit(scene.objects, light_ray)
    lit = blocker is None or blocker.obj is hit.obj
    if not lit:
        d1 = (blocker.point - hit.point).magnitude()
        d2 = (light.pos - hit.point).magnitude()
        lit = d1 > d2
    res = hit.normal.dot(to_light) if lit else 0.0
    return max(res, 0.0)


def specular(light: Light, hit: Hit, ray: Ray) -> float:
    """Return the specular highlight of ``light`` at ``hit``; planes have none."""
    if hit.obj.type == ObjectType.PLANE:
        return 0.0
    l_dir = reflect((hit.point - light.pos).normalized(), hit.normal)
    return max(l_dir.dot(ray.direction.normalized()), 0.0) ** _SHININESS


def _channel(value: float) -> int:
    scaled = value * 255.0
    if math.isnan(scaled) or scaled >= 255.0:
        return 255
    return int(scaled) if scaled > 0 else 0


def cast_ray(scene: Scene, ray: Ray) -> int:
    """Trace ``ray`` through ``scene`` and return its colour as 0xRRGGBB."""
    hit = closest_hit(scene.objects, ray)
    if hit is None:
        return 0
    surface = hit.obj.color
    col = Color().add_scaled(surface, scene.ambient)
    for light in scene.lights:
        diffuse = shadow_factor(scene, light, hit) * (1 - scene.ambient)
        col = Color(
            col.r + diffuse * surface.r * light.color.r,
            col.g + diffuse * surface.g * light.color.g,
            col.b + diffuse * surface.b * light.color.b,
        )
        col = col.add_scaled(light.color, specular(light, hit, ray))
    return (_channel(col.r) << 16) | (_channel(col.g) << 8) | _channel(col.b)