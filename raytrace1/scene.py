"""Reading scene descriptions: environment, lights and objects."""

from __future__ import annotations

import io
import re
import string
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Sequence, Union

from .strutil import iter_lines, split
from .vector import Color, Vec, deg2rad, rotate_full

WRONG_CHARACTER = "Wrong character in the scene file."
WRONG_FORMAT = "Wrong format in the scene file."

_ALLOWED = frozenset(string.ascii_letters + string.digits + ",\t- ")
_DIGITS = string.digits
_LETTERS = string.ascii_letters
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class SceneError(ValueError):
    """Raised when a scene description is malformed."""


class ObjectType(IntEnum):
    """The kinds of objects a scene can hold."""

    PLANE = 0
    SPHERE = 1
    CYLINDER = 2
    CONE = 3
    UNKNOWN = 4

    @classmethod
    def from_name(cls, word: str) -> ObjectType:
        """Map a name such as ``Sphere`` or ``sphere`` to its type."""
        return _TYPE_NAMES.get(word, cls.UNKNOWN)


_TYPE_NAMES = {
    "Plane": ObjectType.PLANE,
    "plane": ObjectType.PLANE,
    "Sphere": ObjectType.SPHERE,
    "sphere": ObjectType.SPHERE,
    "Cylinder": ObjectType.CYLINDER,
    "cylinder": ObjectType.CYLINDER,
    "Cone": ObjectType.CONE,
    "cone": ObjectType.CONE,
}


@dataclass(frozen=True)
class Camera:
    """Camera position, rotation in radians and field of view in degrees."""

    pos: Vec = Vec()
    rot: Vec = Vec()
    fov: float = 0.0


@dataclass(frozen=True)
class Light:
    """A point light."""

    pos: Vec
    color: Color


@dataclass(frozen=True)
class SceneObject:
    """A renderable shape.

    ``rot`` is the unit axis (unused for spheres), ``rad`` the radius, or the
    aperture in radians for a cone.
    """

    type: ObjectType
    pos: Vec
    color: Color
    rot: Vec = Vec()
    rad: float = 0.0


@dataclass
class Scene:
    """Everything needed to render an image."""

    width: int = 0
    height: int = 0
    camera: Camera = field(default_factory=Camera)
    ambient: float = 0.0
    lights: list[Light] = field(default_factory=list)
    objects: list[SceneObject] = field(default_factory=list)


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _starts_with(line: str, chars: str) -> bool:
    return bool(line) and line[0] in chars


def _fields(line: str, minimum: int) -> list[str]:
    fields = split(line, "\t")
    if len(fields) < minimum:
        raise SceneError(WRONG_FORMAT)
    return fields


def _check_commas(fields: Sequence[str], expected: int = 2) -> None:
    if any(f.count(",") != expected for f in fields):
        raise SceneError(WRONG_FORMAT)


def _ints(text: str, count: int) -> list[int]:
    words = split(text, ",")
    if len(words) < count:
        raise SceneError(WRONG_FORMAT)
    return [_atoi(word) for word in words[:count]]


def _vec(text: str) -> Vec:
    return Vec(*(float(v) for v in _ints(text, 3)))


def _color(text: str) -> Color:
    return Color(*(v / 100 for v in _ints(text, 3)))


def axis_from_rotation(rot: Vec) -> Vec:
    """Turn rotation angles in degrees into the unit axis they give to (0, -1, 0)."""
    radians = Vec(deg2rad(rot.x), deg2rad(rot.y), deg2rad(rot.z))
    return rotate_full(Vec(0.0, -1.0, 0.0), radians).normalized()


def check_line(line: str, section: int) -> None:
    """Validate one line of a scene file found after ``section`` header lines.

    Raises SceneError on an unexpected character or a malformed record.
    """
    if line and not line.startswith("#"):
        if any(ch not in _ALLOWED for ch in line):
            raise SceneError(WRONG_CHARACTER)
    if section == 1 and _starts_with(line, _DIGITS):
        fields = _fields(line, 7)
        _check_commas(fields[:1], 1)
        _check_commas(fields[1:3])
    elif section == 2 and _starts_with(line, _DIGITS + "-"):
        fields = _fields(line, 2)
        _check_commas(fields[:2])
    elif section == 3 and _starts_with(line, _LETTERS):
        fields = _fields(line, 5)
        _check_commas(fields[1:4])


def _read_env(line: str, scene: Scene) -> tuple[int, int]:
    fields = _fields(line, 7)
    scene.width, scene.height = _ints(fields[0], 2)
    rot = Vec(*(deg2rad(v) for v in _ints(fields[2], 3)))
    scene.camera = Camera(pos=_vec(fields[1]), rot=rot, fov=float(_atoi(fields[3])))
    scene.ambient = _atoi(fields[4]) / 100
    return _atoi(fields[5]), _atoi(fields[6])


def _read_light(line: str) -> Light:
    fields = _fields(line, 2)
    return Light(pos=_vec(fields[0]), color=_color(fields[1]))


def _read_object(line: str) -> SceneObject:
    fields = _fields(line, 5)
    kind = ObjectType.from_name(fields[0])
    pos = _vec(fields[1])
    color = _color(fields[2])
    angles = _vec(fields[3])
    rot = Vec() if kind == ObjectType.SPHERE else axis_from_rotation(angles)
    size = _atoi(fields[4])
    rad = deg2rad(size) if kind == ObjectType.CONE else float(size)
    return SceneObject(type=kind, pos=pos, color=color, rot=rot, rad=rad)


def parse_scene(text: str) -> Scene:
    """Parse the text of a scene file.

    Sections are introduced by lines starting with ``#``: the first holds the
    environment, the second the lights, the third the objects.
    """
    scene = Scene()
    max_lights = max_objects = 0
    section = 0
    for line in iter_lines(io.StringIO(text, newline="\n")):
        check_line(line, section)
        if section == 1 and _starts_with(line, _DIGITS):
            max_lights, max_objects = _read_env(line, scene)
        elif section == 2 and _starts_with(line, _DIGITS + "-"):
            if len(scene.lights) >= max_lights:
                raise SceneError(WRONG_FORMAT)
            scene.lights.append(_read_light(line))
        elif section == 3 and _starts_with(line, _LETTERS):
            if len(scene.objects) >= max_objects:
                raise SceneError(WRONG_FORMAT)
            scene.objects.append(_read_object(line))
        if line.startswith("#"):
            section += 1
    if section == 0:
        raise SceneError(WRONG_FORMAT)
    return scene


def load_scene(path: Union[str, Path]) -> Scene:
    """Read and parse a scene file; OSError propagates if it cannot be opened."""
    with open(path, encoding="utf-8", newline="") as handle:
        return parse_scene(handle.read())