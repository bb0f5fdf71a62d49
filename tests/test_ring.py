import operator

import pytest

from pixelhex import Axial, HexRing, RingAroundHex


def _axials(pairs):
    return [Axial(q, r) for q, r in pairs]


def test_radius_zero_yields_center_only():
    assert list(HexRing(0)) == [Axial(0, 0)]
    assert list(Axial(3, -7).circle(0)) == [Axial(3, -7)]


def test_radius_two_reference_order():
    assert list(HexRing(2)) == _axials(
        [
            (0, 2), (-1, 2), (-2, 2), (-2, 1), (-2, 0), (-1, -1),
            (0, -2), (1, -2), (2, -2), (2, -1), (2, 0), (1, 1),
        ]
    )


def test_ring_around_offset_center():
    assert list(Axial(1, -1).circle(2)) == _axials(
        [
            (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -2),
            (1, -3), (2, -3), (3, -3), (3, -2), (3, -1), (2, 0),
        ]
    )


def test_neighbours_is_radius_one():
    center = Axial(2, 5)
    assert list(center.neighbours()) == _axials(
        [(2, 6), (1, 6), (1, 5), (2, 4), (3, 4), (3, 5)]
    )


@pytest.mark.parametrize("radius", [1, 2, 3, 5, 8])
def test_ring_cardinality_and_distance(radius):
    center = Axial(-4, 9)
    ring = list(center.circle(radius))
    assert len(ring) == 6 * radius
    assert len(set(ring)) == 6 * radius
    assert all(h.distance_to(center) == radius for h in ring)


def test_iterators_are_single_pass():
    ring = Axial().circle(1)
    assert len(list(ring)) == 6
    assert list(ring) == []
    assert iter(ring) is ring


def test_length_hint_tracks_progress():
    ring = HexRing(3)
    assert operator.length_hint(ring) == 18
    next(ring)
    assert operator.length_hint(ring) == 17
    around = RingAroundHex(Axial(1, 1), 0)
    assert operator.length_hint(around) == 1
    next(around)
    assert operator.length_hint(around) == 0


def test_negative_radius_is_rejected():
    with pytest.raises(ValueError):
        HexRing(-1)
    with pytest.raises(ValueError):
        Axial().circle(-2)
