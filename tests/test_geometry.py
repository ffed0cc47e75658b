import math

import numpy as np
import pytest

from tagcloud.model.geometry_primitives import Point, Size, Rectangle
from tagcloud.model.geometry_utils import bounds_array, intersects_any, max_corner_distance


def rect(x: int, y: int, w: int, h: int) -> Rectangle:
    return Rectangle(Point(x, y), Size(w, h))


def test_derived_bounds():
    r = rect(10, 20, 30, 40)
    assert (r.left, r.top, r.right, r.bottom) == (10, 20, 40, 60)
    assert r.to_array().tolist() == [10, 20, 40, 60]


def test_corners_order():
    r = rect(0, 0, 4, 2)
    assert r.corners == (Point(0, 0), Point(4, 0), Point(0, 2), Point(4, 2))


@pytest.mark.parametrize("size, origin", [
    (Size(100, 20), Point(450, 490)),
    (Size(11, 7), Point(495, 497)),
    (Size(0, 0), Point(500, 500)),
])
def test_centered_at_uses_floor_division(size, origin):
    assert Rectangle.centered_at(Point(500, 500), size).origin == origin


def test_size_validity():
    assert Size(0, 0).is_valid
    assert not Size(-1, 5).is_valid
    assert not Size(5, -1).is_valid


@pytest.mark.parametrize("other, expected", [
    (rect(5, 5, 10, 10), True),    # partial overlap
    (rect(2, 2, 2, 2), True),      # contained
    (rect(10, 0, 5, 10), False),   # shares right edge
    (rect(0, 10, 10, 5), False),   # shares bottom edge
    (rect(10, 10, 5, 5), False),   # shares a corner
    (rect(20, 20, 5, 5), False),   # far away
    (rect(5, 5, 0, 3), False),     # zero width inside
    (rect(5, 5, 3, 0), False),     # zero height inside
])
def test_intersects_with_requires_positive_area(other, expected):
    base = rect(0, 0, 10, 10)
    assert base.intersects_with(other) is expected
    assert other.intersects_with(base) is expected


@pytest.mark.parametrize("other", [
    rect(5, 5, 10, 10),
    rect(10, 0, 5, 10),
    rect(10, 10, 5, 5),
    rect(5, 5, 0, 3),
])
def test_intersects_any_agrees_with_pairwise_test(other):
    placed = [rect(0, 0, 10, 10), rect(30, 30, 5, 5)]
    expected = any(other.intersects_with(p) for p in placed)
    assert intersects_any(other, bounds_array(placed)) is expected


def test_intersects_any_with_nothing_placed():
    assert bounds_array([]).shape == (0, 4)
    assert intersects_any(rect(0, 0, 10, 10), bounds_array([])) is False


def test_max_corner_distance():
    center = Point(0, 0)
    assert max_corner_distance([], center) == 0.0
    distance = max_corner_distance([rect(-1, -1, 2, 2), rect(3, 0, 1, 4)], center)
    assert distance == pytest.approx(math.hypot(4, 4))


def test_point_to_array():
    assert np.array_equal(Point(1, 2).to_array(), np.array([1, 2]))


def test_size_is_integral():
    assert Size(3, 0).is_integral
    assert Size(np.int64(3), 4).is_integral
    assert not Size(3.5, 2).is_integral
    assert not Size(2, 2.0).is_integral
    assert not Size(True, 1).is_integral
