import math

import pytest

from minirt.scene import Camera, Scene
from minirt.vectors import Vec
from minirt.viewport import create_viewport


def _scene(position=Vec(), direction=Vec(0.0, 0.0, -1.0), fov=90):
    return Scene(camera=Camera(position=position, direction=direction, fov=fov))


@pytest.mark.parametrize(
    "direction",
    [Vec(0.0, 0.0, -1.0), Vec(0.0, 0.6, -0.8), Vec(1.0, 0.0, 0.0)],
)
def test_center_ray_follows_camera_direction(direction):
    viewport = create_viewport(_scene(direction=direction), 4, 2)
    center = viewport.ray(2, 1)
    expected = direction.normalized()
    assert tuple(center) == pytest.approx(tuple(expected), abs=1e-9)


def test_basis_is_orthonormal():
    direction = Vec(0.0, 0.6, -0.8)
    viewport = create_viewport(_scene(direction=direction), 8, 6)
    assert tuple(viewport.back) == pytest.approx(tuple(-direction), abs=1e-9)
    assert viewport.right.dot(viewport.back) == pytest.approx(0.0, abs=1e-9)
    assert viewport.up.dot(viewport.back) == pytest.approx(0.0, abs=1e-9)
    assert viewport.up.dot(viewport.right) == pytest.approx(0.0, abs=1e-9)
    assert viewport.right.magnitude() == pytest.approx(1.0)
    assert viewport.up.magnitude() == pytest.approx(1.0)


def test_dimensions_follow_fov_and_aspect():
    viewport = create_viewport(_scene(fov=90), 16, 9)
    assert viewport.height == pytest.approx(2.0)
    assert viewport.width / viewport.height == pytest.approx(16 / 9)


def test_ray_does_not_depend_on_camera_position():
    near = create_viewport(_scene(), 10, 5)
    far = create_viewport(_scene(position=Vec(3.0, -2.0, 7.0)), 10, 5)
    near_ray = near.ray(3, 4)
    far_ray = far.ray(3, 4)
    assert tuple(near_ray) == pytest.approx(tuple(far_ray), abs=1e-9)


def test_rays_are_symmetric_across_the_center():
    viewport = create_viewport(_scene(), 4, 2)
    left = viewport.ray(0, 1)
    right = viewport.ray(4, 1)
    assert left.x == pytest.approx(-right.x)
    assert left.z == pytest.approx(right.z)


def test_neighbouring_pixels_differ_by_pixel_delta():
    viewport = create_viewport(_scene(fov=60), 20, 10)
    step_x = viewport.ray(6, 3) - viewport.ray(5, 3)
    step_y = viewport.ray(5, 4) - viewport.ray(5, 3)
    assert tuple(step_x) == pytest.approx(tuple(viewport.pixel_delta_x), abs=1e-9)
    assert tuple(step_y) == pytest.approx(tuple(viewport.pixel_delta_y), abs=1e-9)
    assert viewport.pixel_delta_x.magnitude() * 20 == pytest.approx(viewport.width)
    assert viewport.pixel_delta_y.magnitude() * 10 == pytest.approx(viewport.height)


def test_image_top_is_up():
    viewport = create_viewport(_scene(), 4, 4)
    assert viewport.ray(2, 0).y > viewport.ray(2, 4).y
    assert math.isclose(viewport.ray(2, 0).y, -viewport.ray(2, 4).y)


def test_vertical_camera_is_rejected():
    with pytest.raises(ValueError):
        create_viewport(_scene(direction=Vec(0.0, 1.0, 0.0)), 4, 4)


def test_missing_camera_is_rejected():
    with pytest.raises(ValueError):
        create_viewport(Scene(), 4, 4)


@pytest.mark.parametrize("res_x, res_y", [(0, 4), (4, 0), (-1, 3)])
def test_bad_resolution_is_rejected(res_x, res_y):
    with pytest.raises(ValueError):
        create_viewport(_scene(), res_x, res_y)