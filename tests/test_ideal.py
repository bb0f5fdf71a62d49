import math
from itertools import product

import pytest

from pixelhex import Axial, IdealHex, Orientation
from pixelhex.ideal import SQRT3


def test_flat_geometry():
    h = IdealHex.flat(13.0)
    assert h.orientation is Orientation.FLAT
    assert h.width == 26.0
    assert h.height == pytest.approx(SQRT3 * 13.0)
    assert h.inner_radius == pytest.approx(SQRT3 / 2 * 13.0)
    assert h.outer_radius == 13.0
    assert h.horizontal_spacing == pytest.approx(19.5)
    assert h.vertical_spacing == pytest.approx(h.height)


def test_pointy_geometry():
    h = IdealHex.pointy(2.0)
    assert h.width == pytest.approx(SQRT3 * 2.0)
    assert h.height == 4.0
    assert h.vertical_spacing == pytest.approx(3.0)
    assert h.horizontal_spacing == pytest.approx(h.width)


def test_vertices_start_angle_by_orientation():
    flat = IdealHex.flat(1.0).vertices
    pointy = IdealHex.pointy(1.0).vertices
    assert len(flat) == len(pointy) == 6
    assert flat[0] == pytest.approx((1.0, 0.0))
    assert flat[3] == pytest.approx((-1.0, 0.0), abs=1e-12)
    assert pointy[0] == pytest.approx((SQRT3 / 2, 0.5))
    assert pointy[1] == pytest.approx((0.0, 1.0), abs=1e-12)


@pytest.mark.parametrize("hexagon", [IdealHex.flat(5.0), IdealHex.pointy(5.0)])
def test_vertices_lie_on_circumcircle(hexagon):
    for x, y in hexagon.vertices:
        assert math.hypot(x, y) == pytest.approx(hexagon.outer_radius)


@pytest.mark.parametrize("hexagon", [IdealHex.flat(8.0), IdealHex.pointy(8.0)])
def test_matches_spacing_model(hexagon):
    spacing = hexagon.spacing_layout()
    assert spacing.orientation is hexagon.orientation
    for q, r in product(range(-4, 5), repeat=2):
        a = Axial(q, r)
        assert hexagon.pixel_center(a) == pytest.approx(spacing.pixel_center(a))
        assert hexagon.nearest_axial(hexagon.pixel_center(a)) == a


@pytest.mark.parametrize("hexagon", [IdealHex.flat(10.0), IdealHex.pointy(10.0)])
def test_points_inside_inner_circle_belong_to_the_hex(hexagon):
    a = Axial(2, -1)
    xc, yc = hexagon.pixel_center(a)
    reach = hexagon.inner_radius * 0.9
    for step in range(12):
        angle = math.radians(30.0 * step)
        xy = (xc + reach * math.cos(angle), yc + reach * math.sin(angle))
        assert hexagon.nearest_axial(xy) == a


def test_corners_are_translated_vertices():
    h = IdealHex.pointy(4.0)
    xc, yc = h.pixel_center(Axial(1, 2))
    corners = h.corners(Axial(1, 2))
    for (cx, cy), (vx, vy) in zip(corners, h.vertices):
        assert (cx, cy) == pytest.approx((xc + vx, yc + vy))


@pytest.mark.parametrize("size", [0.0, -3.0])
def test_size_must_be_positive(size):
    with pytest.raises(ValueError):
        IdealHex.flat(size)
    with pytest.raises(ValueError):
        IdealHex.pointy(size)
