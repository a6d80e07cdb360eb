import pytest

from minirt.fields import ParseError
from minirt.parser import (
    SceneFileError,
    check_filename,
    check_limits,
    parse_file,
    parse_line,
    parse_lines,
)
from minirt.scene import Ambient, Camera, Light, Scene

VALID = """A 0.2 255,255,255
C -50,0,20 0,0,1 70
L -40,0,30 0.7 255,255,255

pl 0,0,0 0,1.0,0 255,0,225
sp 0,0,20 20 255,0,0
cy 50.0,0.0,20.6 0,0,1.0 14.2 21.42 10,0,255
"""


def test_check_filename_strips_spaces():
    assert check_filename("  scene.rt  ") == "scene.rt"


def test_check_filename_uses_last_dot():
    assert check_filename("my.scene.rt") == "my.scene.rt"


@pytest.mark.parametrize("name", ["", "    "])
def test_check_filename_empty(name):
    with pytest.raises(SceneFileError, match="empty"):
        check_filename(name)


def test_check_filename_without_extension():
    with pytest.raises(SceneFileError, match="needs an extension"):
        check_filename("scene")


@pytest.mark.parametrize("name", ["scene.rtx", "scene.r", "scene.txt", "scene."])
def test_check_filename_wrong_extension(name):
    with pytest.raises(SceneFileError, match="Extension needs to be"):
        check_filename(name)


def test_parse_line_blank_is_ignored():
    scene = Scene()
    assert parse_line("   \n", scene) is None
    assert scene == Scene()


def test_parse_line_unknown_identifier_is_ignored():
    scene = Scene()
    assert parse_line("# comment here", scene) is None
    assert scene == Scene()


def test_parse_line_collapses_spaces():
    scene = Scene()
    ambient = parse_line("A    0.2   255,128,0\n", scene)
    assert scene.ambient == ambient
    assert scene.ambient.ratio == pytest.approx(0.2)
    assert (scene.ambient.color.r, scene.ambient.color.g) == (255, 128)


def test_parse_line_identifier_must_match_exactly():
    scene = Scene()
    assert parse_line("sph 0,0,0 1 1,1,1", scene) is None
    assert scene.spheres == []


def test_parse_line_error_raises():
    scene = Scene()
    with pytest.raises(ParseError):
        parse_line("sp 0,0,0 -1 255,0,0", scene)
    assert scene.spheres == []


def test_parse_lines_valid_scene():
    scene = parse_lines(VALID.splitlines(keepends=True))
    assert len(scene.spheres) == 1
    assert len(scene.planes) == 1
    assert len(scene.cylinders) == 1
    assert scene.camera.fov == 70
    assert scene.light.brightness == pytest.approx(0.7)
    assert scene.cylinders[0].height == pytest.approx(21.42)


def test_parse_lines_duplicate_camera():
    lines = VALID.splitlines() + ["C 0,0,0 0,0,1 60"]
    with pytest.raises(ParseError, match="Only 1 camera"):
        parse_lines(lines)


def test_parse_lines_missing_light():
    lines = [line for line in VALID.splitlines() if not line.startswith("L")]
    with pytest.raises(SceneFileError, match="one light"):
        parse_lines(lines)


def test_check_limits_order():
    scene = Scene()
    with pytest.raises(SceneFileError, match="ambient"):
        check_limits(scene)
    scene.ambient = Ambient()
    with pytest.raises(SceneFileError, match="camera"):
        check_limits(scene)
    scene.camera = Camera()
    with pytest.raises(SceneFileError, match="light"):
        check_limits(scene)
    scene.light = Light()
    assert check_limits(scene) is None


def test_parse_file_reads_scene(tmp_path):
    path = tmp_path / "scene.rt"
    path.write_text(VALID, encoding="utf-8")
    scene = parse_file(f"  {path}  ")
    assert scene.spheres[0].diameter == pytest.approx(20.0)
    assert scene.planes[0].color.b == 225


def test_parse_file_missing(tmp_path):
    with pytest.raises(SceneFileError, match="does not exist"):
        parse_file(str(tmp_path / "absent.rt"))


def test_parse_file_bad_extension(tmp_path):
    path = tmp_path / "scene.txt"
    path.write_text(VALID, encoding="utf-8")
    with pytest.raises(SceneFileError, match="Extension"):
        parse_file(str(path))