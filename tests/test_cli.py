from raytrace1.cli import main

GOOD_SCENE = (
    "# env\n"
    "4,3\t0,0,0\t0,0,0\t60\t20\t1\t1\n"
    "# lights\n"
    "0,10,0\t100,100,100\n"
    "# objects\n"
    "sphere\t0,0,-10\t100,0,0\t0,0,0\t2\n"
)


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_too_many_arguments_prints_usage(capsys):
    assert main(["a", "b", "c"]) == 1
    assert "Usage" in capsys.readouterr().out


def test_missing_file_prints_usage(tmp_path, capsys):
    assert main([str(tmp_path / "absent.scene")]) == 1
    assert "Usage" in capsys.readouterr().out


def test_renders_to_given_output(tmp_path):
    scene = tmp_path / "ok.scene"
    scene.write_text(GOOD_SCENE)
    out = tmp_path / "image.ppm"
    assert main([str(scene), str(out)]) == 0
    data = out.read_bytes()
    assert data.startswith(b"P6\n4 3\n255\n")
    assert len(data) == len(b"P6\n4 3\n255\n") + 4 * 3 * 3


def test_default_output_next_to_scene(tmp_path):
    scene = tmp_path / "ok.scene"
    scene.write_text(GOOD_SCENE)
    assert main([str(scene)]) == 0
    assert (tmp_path / "ok.ppm").read_bytes().startswith(b"P6\n")


def test_wrong_character_reports_error(tmp_path, capsys):
    scene = tmp_path / "bad.scene"
    scene.write_text("# env\n4,3\t0,0,0\t0,0,0\t60\t20\t1\t1!\n")
    assert main([str(scene)]) == 1
    assert "Error: Wrong character in the scene file." in capsys.readouterr().out


def test_no_sections_reports_format_error(tmp_path, capsys):
    scene = tmp_path / "empty.scene"
    scene.write_text("nothing here\n")
    assert main([str(scene)]) == 1
    assert "Error: Wrong format in the scene file." in capsys.readouterr().out