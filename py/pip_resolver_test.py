# pip_resolver_test.py
# created by:
#   @author: vlv-squid
#   @date: 2025-07-25
#

import pytest

import pip_resolver
from pip_resolver import contains_point, point_in_ring

SQUARE = [[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]]
HOLE = [[2, 2], [8, 2], [8, 8], [2, 8], [2, 2]]


def polygon(*rings):
    return {
        "type": "Feature",
        "properties": {},
        "geometry": {
            "type": "Polygon",
            "coordinates": list(rings)
        }
    }


def test_point_in_ring():
    assert point_in_ring((5, 5), SQUARE)
    assert not point_in_ring((11, 5), SQUARE)


def test_point_on_ring_boundary_counts_as_inside():
    assert point_in_ring((0, 5), SQUARE)
    assert point_in_ring((10, 10), SQUARE)


def test_unclosed_ring_is_closed():
    assert point_in_ring((5, 5), SQUARE[:-1])


@pytest.mark.parametrize("ring", [
    [[0, 1], [2, 1]],
    [[0, 0], [1, 1], [0, 0]],
    [[3, 3]],
])
def test_degenerate_ring_contains_nothing(ring):
    assert not point_in_ring((0, 1), ring)
    assert not point_in_ring((3, 3), ring)


def test_contains_point_excludes_holes():
    square_with_hole = polygon(SQUARE, HOLE)
    assert contains_point((1, 1), square_with_hole)
    assert not contains_point((5, 5), square_with_hole)
    assert not contains_point((20, 20), square_with_hole)


def test_contains_point_tolerates_degenerate_hole():
    poly = polygon(SQUARE, [[5, 5], [5, 5], [5, 5]], [])
    assert contains_point((5, 5), poly)


def test_contains_point_without_outer_ring():
    assert not contains_point((1, 1), polygon())
    assert not contains_point((1, 1), polygon([]))


def test_outside_outer_ring_skips_holes(monkeypatch):
    calls = []

    def fake_point_in_ring(point, ring):
        calls.append(ring)
        return False

    monkeypatch.setattr(pip_resolver, "point_in_ring", fake_point_in_ring)
    assert not contains_point((1, 1), polygon(SQUARE, HOLE, HOLE))
    assert calls == [SQUARE]


def test_first_matching_hole_stops_scan(monkeypatch):
    calls = []

    def fake_point_in_ring(point, ring):
        calls.append(ring)
        return True

    other_hole = [[3, 3], [4, 3], [4, 4], [3, 3]]
    monkeypatch.setattr(pip_resolver, "point_in_ring", fake_point_in_ring)
    assert not contains_point((1, 1), polygon(SQUARE, HOLE, other_hole))
    assert calls == [SQUARE, HOLE]


def test_malformed_vertices_are_ignored():
    ring = [[0, 0], [10, 0], None, [10, 10], ["x", 1], [0, 10], [0, 0]]
    assert point_in_ring((5, 5), ring)
    assert not point_in_ring((15, 5), ring)


def test_non_sequence_ring_contains_nothing():
    assert not point_in_ring((0, 0), 5)
    assert not point_in_ring((0, 0), {"a": 1})
    assert contains_point((1, 1), polygon(SQUARE, 7))
