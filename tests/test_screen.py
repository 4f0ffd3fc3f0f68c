import pytest

from ascii_wireframe.errors import DegenerateProjectionError
from ascii_wireframe.screen import in_bounds, to_screen


def test_origin_maps_to_grid_center():
    assert to_screen((0.0, 0.0), 1.0, 80, 40) == (40, 20)


def test_corners_and_y_flip():
    assert to_screen((-1.0, 1.0), 1.0, 80, 40) == (0, 0)
    assert to_screen((1.0, -1.0), 1.0, 80, 40) == (79, 39)


def test_cube_corners_land_inside_80x40():
    near = to_screen((-1 / 6, -1 / 6), 1.0, 80, 40)
    far = to_screen((1 / 3, 1 / 3), 1.0, 80, 40)
    assert near == (33, 23)
    assert far == (53, 13)
    assert in_bounds(near, 80, 40)
    assert in_bounds(far, 80, 40)


def test_scale_multiplies_projected_coordinates():
    assert to_screen((0.5, 0.0), 2.0, 80, 40) == to_screen((1.0, 0.0), 1.0, 80, 40)


def test_out_of_range_points_are_not_clamped():
    pt = to_screen((2.0, 0.0), 1.0, 80, 40)
    assert pt[0] >= 80
    assert not in_bounds(pt, 80, 40)


@pytest.mark.parametrize("pt, ok", [
    ((0, 0), True), ((79, 39), True), ((80, 0), False),
    ((0, 40), False), ((-1, 5), False), ((5, -1), False),
])
def test_in_bounds(pt, ok):
    assert in_bounds(pt, 80, 40) is ok


@pytest.mark.parametrize("projected", [(1e308, 0.0), (0.0, -1e308), (float('inf'), 0.0)])
def test_overflowing_mapping_is_degenerate(projected):
    with pytest.raises(DegenerateProjectionError):
        to_screen(projected, 1.0, 80, 40)
