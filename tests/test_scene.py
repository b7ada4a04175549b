import math

import pytest

from raytrace1.scene import (
    ObjectType,
    Scene,
    SceneError,
    axis_from_rotation,
    check_line,
    load_scene,
    parse_scene,
)
from raytrace1.vector import Vec, deg2rad

ENV = "800,600\t0,0,0\t0,0,0\t60\t20\t1\t2"

SCENE = "\n".join(
    [
        "# environment",
        ENV,
        "# lights",
        "0,10,0\t100,50,100",
        "# objects",
        "sphere\t0,0,-10\t100,0,0\t0,0,0\t2",
        "Plane\t0,-2,0\t0,100,0\t0,0,0\t0",
        "",
    ]
)


def _scene(env=ENV, lights=("0,10,0\t100,50,100",), objects=()):
    return "\n".join(["# env", env, "# lights", *lights, "# objects", *objects]) + "\n"


def test_environment_is_read():
    scene = parse_scene(SCENE)
    assert (scene.width, scene.height) == (800, 600)
    assert scene.camera.pos == Vec(0.0, 0.0, 0.0)
    assert scene.camera.fov == 60
    assert scene.ambient == pytest.approx(20 / 100)


def test_lights_are_read():
    scene = parse_scene(SCENE)
    assert len(scene.lights) == 1
    light = scene.lights[0]
    assert light.pos == Vec(0.0, 10.0, 0.0)
    assert (light.color.r, light.color.g, light.color.b) == pytest.approx(
        (100 / 100, 50 / 100, 100 / 100)
    )


def test_objects_are_read():
    scene = parse_scene(SCENE)
    assert [o.type for o in scene.objects] == [ObjectType.SPHERE, ObjectType.PLANE]
    sphere, plane = scene.objects
    assert sphere.rot == Vec()
    assert sphere.rad == 2
    assert sphere.pos == Vec(0.0, 0.0, -10.0)
    assert (plane.rot.x, plane.rot.y, plane.rot.z) == pytest.approx(
        (0.0, -1.0, 0.0), abs=1e-9
    )


def test_cone_aperture_in_radians():
    scene = parse_scene(_scene(objects=["cone\t0,0,0\t10,10,10\t0,0,0\t30"]))
    assert scene.objects[0].type == ObjectType.CONE
    assert scene.objects[0].rad == pytest.approx(deg2rad(30))


def test_camera_rotation_in_radians():
    env = "10,10\t1,2,3\t0,90,0\t45\t0\t0\t0"
    scene = parse_scene(_scene(env=env, lights=()))
    assert scene.camera.rot.y == pytest.approx(deg2rad(90))
    assert scene.camera.pos == Vec(1.0, 2.0, 3.0)


def test_unknown_object_type():
    scene = parse_scene(_scene(objects=["torus\t0,0,0\t0,0,0\t0,0,0\t1"]))
    assert scene.objects[0].type == ObjectType.UNKNOWN
    assert ObjectType.UNKNOWN == 4


def test_negative_light_position():
    scene = parse_scene(_scene(lights=["-5,3,2\t10,10,10"]))
    assert scene.lights[0].pos == Vec(-5.0, 3.0, 2.0)


def test_header_lines_may_hold_any_character():
    text = SCENE.replace("# environment", "# environment $%!")
    assert parse_scene(text).width == 800


def test_wrong_character_raises():
    with pytest.raises(SceneError, match="character"):
        parse_scene(_scene(lights=["0,10,0\t100,50,100;"]))


def test_too_many_lights_raises():
    with pytest.raises(SceneError, match="format"):
        parse_scene(_scene(lights=["0,0,0\t1,1,1", "1,1,1\t1,1,1"]))


def test_too_many_objects_raises():
    objects = ["sphere\t0,0,0\t1,1,1\t0,0,0\t1"] * 3
    with pytest.raises(SceneError, match="format"):
        parse_scene(_scene(objects=objects))


def test_missing_headers_raises():
    with pytest.raises(SceneError, match="format"):
        parse_scene(ENV + "\n")


def test_env_with_too_few_fields_raises():
    with pytest.raises(SceneError, match="format"):
        check_line("800,600\t0,0,0", 1)


def test_env_size_needs_one_comma():
    with pytest.raises(SceneError, match="format"):
        check_line("800,600,1\t0,0,0\t0,0,0\t60\t20\t1\t2", 1)


def test_object_with_too_few_fields_raises():
    with pytest.raises(SceneError, match="format"):
        check_line("sphere\t0,0,0\t1,1,1", 3)


def test_light_with_wrong_commas_raises():
    with pytest.raises(SceneError, match="format"):
        check_line("0,0\t1,1,1", 2)


def test_empty_component_raises():
    with pytest.raises(SceneError, match="format"):
        parse_scene(_scene(lights=["1,,2\t1,1,1"]))


def test_zero_rotation_axis_points_down():
    axis = axis_from_rotation(Vec())
    assert (axis.x, axis.y, axis.z) == pytest.approx((0.0, -1.0, 0.0), abs=1e-9)


@pytest.mark.parametrize("rot", [Vec(90, 0, 0), Vec(30, 45, 60), Vec(-10, 200, 5)])
def test_axis_is_unit_length(rot):
    assert axis_from_rotation(rot).magnitude() == pytest.approx(1.0)


def test_load_scene_matches_parse(tmp_path):
    path = tmp_path / "test.scene"
    path.write_text(SCENE, encoding="utf-8")
    loaded = load_scene(path)
    assert isinstance(loaded, Scene)
    assert loaded == parse_scene(SCENE)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_scene(tmp_path / "absent.scene")


def test_axis_rotated_about_x_is_perpendicular_to_y():
    axis = axis_from_rotation(Vec(90, 0, 0))
    assert math.isclose(axis.dot(Vec(0.0, 1.0, 0.0)), 0.0, abs_tol=1e-9)