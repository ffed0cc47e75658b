import math
from itertools import islice

import pytest

from tagcloud.config import DEFAULT_ANGLE_STEP, DEFAULT_SPIRAL_SCALE
from tagcloud.model.geometry_primitives import Point
from tagcloud.model.spiral import SpiralPointSequence


def test_first_point_is_next_to_center():
    spiral = SpiralPointSequence(Point(500, 500))
    assert spiral.advance() == Point(500, 500)
    assert spiral.steps == 1


def test_same_center_gives_same_points():
    first = SpiralPointSequence(Point(-3, 7))
    second = SpiralPointSequence(Point(-3, 7))
    assert [first.advance() for _ in range(500)] == [second.advance() for _ in range(500)]


def test_iterating_consumes_the_same_cursor():
    reference = SpiralPointSequence(Point(0, 0))
    expected = [reference.advance() for _ in range(20)]

    spiral = SpiralPointSequence(Point(0, 0))
    assert list(islice(spiral, 10)) == expected[:10]
    assert spiral.advance() == expected[10]
    assert next(spiral) == expected[11]
    assert spiral.steps == 12


def test_points_follow_archimedean_radius():
    center = Point(100, 200)
    spiral = SpiralPointSequence(center)
    for step in range(1, 2001):
        point = spiral.advance()
        phi = step * DEFAULT_ANGLE_STEP
        radius = DEFAULT_SPIRAL_SCALE * phi
        assert point.x == center.x + math.floor(radius * math.cos(phi))
        assert point.y == center.y + math.floor(radius * math.sin(phi))


def test_spiral_moves_outwards():
    center = Point(0, 0)
    spiral = SpiralPointSequence(center, angle_step=0.1, scale=1.0)
    distances = [math.hypot(p.x - center.x, p.y - center.y) for p in islice(spiral, 1000)]
    # Floor truncation is at most one unit per axis.
    assert distances[-1] > 90.0
    assert max(distances[:100]) < min(distances[900:])


@pytest.mark.parametrize("angle_step, scale", [(0.0, 1.0), (-0.1, 1.0), (0.1, 0.0), (0.1, -2.0)])
def test_non_growing_spiral_is_rejected(angle_step, scale):
    with pytest.raises(ValueError):
        SpiralPointSequence(Point(0, 0), angle_step=angle_step, scale=scale)
