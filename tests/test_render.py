import math

import pytest

from raytrace1.render import camera_ray, render, save_ppm, to_ppm
from raytrace1.scene import Camera, ObjectType, Scene, SceneObject
from raytrace1.vector import Color, Vec


def make_scene(width=5, height=5, objects=None):
    return Scene(
        width=width,
        height=height,
        camera=Camera(pos=Vec(), rot=Vec(), fov=60.0),
        ambient=1.0,
        lights=[],
        objects=list(objects or []),
    )


def red_sphere():
    return SceneObject(ObjectType.SPHERE, Vec(0.0, 0.0, -10.0), Color(1.0, 0.0, 0.0), rad=1.0)


def test_centre_ray_looks_down_negative_z():
    ray = camera_ray(make_scene(3, 3), 1, 1)
    assert ray.origin == Vec()
    assert ray.direction.x == pytest.approx(0.0, abs=1e-12)
    assert ray.direction.y == pytest.approx(0.0, abs=1e-12)
    assert ray.direction.z == pytest.approx(-1.0)


def test_rays_are_unit_and_mirrored():
    scene = make_scene(4, 3)
    left = camera_ray(scene, 0, 1).direction
    right = camera_ray(scene, 3, 1).direction
    assert left.magnitude() == pytest.approx(1.0)
    assert right.magnitude() == pytest.approx(1.0)
    assert left.x == pytest.approx(-right.x)
    assert left.x < 0


def test_top_row_points_up():
    scene = make_scene(3, 3)
    assert camera_ray(scene, 1, 0).direction.y > 0
    assert camera_ray(scene, 1, 2).direction.y < 0


def test_empty_scene_is_black():
    pixels = render(make_scene(3, 2))
    assert pixels == [0] * 6


def test_sphere_visible_in_centre_only():
    pixels = render(make_scene(5, 5, [red_sphere()]))
    assert len(pixels) == 25
    assert pixels[2 * 5 + 2] == 0xFF0000
    assert pixels[0] == 0


@pytest.mark.parametrize("width,height", [(0, 3), (3, 0)])
def test_render_rejects_empty_size(width, height):
    with pytest.raises(ValueError):
        render(make_scene(width, height))


def test_to_ppm_layout():
    data = to_ppm([0xFF0000, 0x0000FF], 2, 1)
    assert data == b"P6\n2 1\n255\n" + bytes([0xFF, 0, 0, 0, 0, 0xFF])


def test_to_ppm_length_mismatch():
    with pytest.raises(ValueError):
        to_ppm([0, 0, 0], 2, 2)


def test_save_ppm_round_trip(tmp_path):
    pixels = [0x123456, 0xABCDEF, 0x000000, 0xFFFFFF]
    path = tmp_path / "out.ppm"
    save_ppm(pixels, 2, 2, path)
    assert path.read_bytes() == to_ppm(pixels, 2, 2)
    assert not math.isnan(len(path.read_bytes()))