import pytest

from ascii_wireframe.math_utils import Vec3
from ascii_wireframe.transform import rotate, rotate_vertices, rotate_x, rotate_y

SAMPLES = [Vec3(1, 2, 3), Vec3(-1, -1, -1), Vec3(0.5, -4, 2), Vec3(10, 0, -7)]


@pytest.mark.parametrize("v", SAMPLES)
@pytest.mark.parametrize("angle", [13.0, 90.0, 200.5, -45.0])
def test_rotation_is_invertible(v, angle):
    assert tuple(rotate_x(rotate_x(v, angle), -angle)) == pytest.approx(tuple(v), abs=1e-9)
    assert tuple(rotate_y(rotate_y(v, angle), -angle)) == pytest.approx(tuple(v), abs=1e-9)


@pytest.mark.parametrize("v", SAMPLES)
def test_zero_angle_is_identity(v):
    assert rotate_x(v, 0) == v
    assert rotate_y(v, 0) == v


def test_angles_are_degrees():
    assert tuple(rotate_x(Vec3(0, 1, 0), 90)) == pytest.approx((0, 0, 1), abs=1e-12)
    assert tuple(rotate_x(Vec3(0, 1, 0), 180)) == pytest.approx((0, -1, 0), abs=1e-12)
    assert tuple(rotate_y(Vec3(1, 0, 0), 90)) == pytest.approx((0, 0, -1), abs=1e-12)
    assert tuple(rotate_y(Vec3(0, 0, 1), 90)) == pytest.approx((1, 0, 0), abs=1e-12)


def test_rotation_keeps_axis_component():
    v = Vec3(3, 4, 5)
    assert rotate_x(v, 37).x == 3
    assert rotate_y(v, 37).y == 4


def test_rotation_order_is_x_then_y():
    v = Vec3(0, 1, 0)
    x_then_y = rotate(v, 90, 90)
    y_then_x = rotate_x(rotate_y(v, 90), 90)
    assert tuple(x_then_y) == pytest.approx((1, 0, 0), abs=1e-12)
    assert tuple(y_then_x) == pytest.approx((0, 0, 1), abs=1e-12)


def test_rotate_vertices_leaves_base_untouched():
    base = (Vec3(1, 1, 1), Vec3(-1, 0, 2))
    rotated = rotate_vertices(base, 30, 60)
    assert base == (Vec3(1, 1, 1), Vec3(-1, 0, 2))
    assert len(rotated) == 2
    assert rotated[0] != base[0]


def test_full_turn_returns_to_start():
    v = Vec3(1, -2, 0.5)
    assert tuple(rotate(v, 360, 360)) == pytest.approx(tuple(v), abs=1e-9)
