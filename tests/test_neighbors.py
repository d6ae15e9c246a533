"""K-nearest-neighbour search."""

import math

from scatter_viewer.geometry import Point
from scatter_viewer.neighbors import distances, nearest


def test_ties_keep_dataset_order(line_points):
    found = nearest(line_points[3], line_points, 5)
    assert [p.label for p in found] == ["2", "4", "1", "5", "0"]


def test_excludes_reference_and_sorted(line_points):
    for p in line_points:
        found = nearest(p, line_points, 5)
        assert p not in found
        d = [math.dist((p.x, p.y), (q.x, q.y)) for q in found]
        assert d == sorted(d)


def test_small_dataset_returns_all_others():
    points = [Point(0, 0, "a"), Point(3, 4, "b"), Point(1, 1, "c")]
    found = nearest(points[0], points, 5)
    assert found == [points[2], points[1]]


def test_single_point_has_no_neighbors():
    p = Point(1, 1, "a")
    assert nearest(p, [p]) == []


def test_duplicate_coordinates_are_candidates():
    p = Point(5, 5, "a")
    twin = Point(5, 5, "b")
    other = Point(6, 5, "c")
    assert nearest(p, [p, other, twin], 5) == [twin, other]


def test_zero_k():
    points = [Point(0, 0, "a"), Point(1, 0, "b")]
    assert nearest(points[0], points, 0) == []


def test_distances_are_euclidean():
    d = distances(Point(0, 0, "o"), [Point(3, 4, "a"), Point(-6, 8, "b")])
    assert list(d) == [5.0, 10.0]
