import math
import sys

import pytest

from planegeom.primitives import (
    Edge,
    Intersection,
    Point,
    Position,
    orientation,
)

EPS = sys.float_info.epsilon
EPS3 = EPS * 1e3


# --- Point -------------------------------------------------------------


def test_default_point():
    p = Point()
    assert p.x == pytest.approx(0.0, rel=EPS3)
    assert p.y == pytest.approx(0.0, rel=EPS3)
    assert p[0] == pytest.approx(0.0, rel=EPS3)
    assert p[1] == pytest.approx(0.0, rel=EPS3)


def test_point_coordinates():
    p = Point(1.0, 2.0)
    assert p.x == pytest.approx(1.0, rel=EPS3)
    assert p.y == pytest.approx(2.0, rel=EPS3)
    assert p[0] == pytest.approx(1.0, rel=EPS3)
    assert p[1] == pytest.approx(2.0, rel=EPS3)


def test_point_index_out_of_range():
    with pytest.raises(IndexError):
        Point(1.0, 2.0)[2]


def test_point_add():
    result = Point(1.0, 2.0) + Point(3.0, 4.0)
    assert result.x == pytest.approx(4.0, rel=EPS3)
    assert result.y == pytest.approx(6.0, rel=EPS3)


def test_point_sub():
    result = Point(1.0, 2.0) - Point(3.0, 5.0)
    assert result.x == pytest.approx(-2.0, rel=EPS3)
    assert result.y == pytest.approx(-3.0, rel=EPS3)


def test_point_dot():
    assert Point(1.0, 2.0) * Point(3.0, 5.0) == pytest.approx(13.0, rel=EPS3)


def test_point_is_equal():
    assert Point.is_equal(Point(1.0, 2.0), Point(1.0, 2.0), EPS3)
    assert not Point.is_equal(Point(1.0, 2.0), Point(1.5, 2.0), EPS3)


def test_point_ordering():
    p1 = Point(1.0, 2.0)
    p2 = Point(2.0, 2.0)
    assert p1 < p2
    assert p2 > p1
    assert not p2 < p1


def test_classify_between():
    p0 = Point(3.0, 3.0)
    p1 = Point(1.0, 1.0)
    p2 = Point(5.0, 5.0)
    assert p0.classify(p1, p2, EPS3) == Position.BETWEEN
    assert p0.classify_edge(Edge(p1, p2), EPS3) == Position.BETWEEN


@pytest.mark.parametrize(
    "point, expected",
    [
        (Point(1.0, 3.0), Position.LEFT),
        (Point(3.0, 1.0), Position.RIGHT),
        (Point(0.0, 0.0), Position.BEHIND),
        (Point(6.0, 6.0), Position.BEYOND),
        (Point(1.0, 1.0), Position.ORIGIN),
        (Point(5.0, 5.0), Position.DESTINATION),
    ],
)
def test_classify_cases(point, expected):
    assert point.classify(Point(1.0, 1.0), Point(5.0, 5.0), EPS3) == expected


def test_polar_angle_and_length():
    p = Point(1.0, 1.0)
    assert p.polar_angle(EPS3) == pytest.approx(45.0, rel=EPS3)
    assert p.length() == pytest.approx(math.sqrt(2.0), rel=EPS3)


@pytest.mark.parametrize(
    "point, angle",
    [
        (Point(0.0, 0.0), -1.0),
        (Point(0.0, 1.0), 90.0),
        (Point(0.0, -1.0), 270.0),
        (Point(-1.0, 1.0), 135.0),
        (Point(-1.0, -1.0), 225.0),
        (Point(1.0, -1.0), 315.0),
    ],
)
def test_polar_angle_quadrants(point, angle):
    assert point.polar_angle(EPS3) == pytest.approx(angle, rel=EPS3)


def test_distance_to_edge():
    p = Point(2.0, 3.0)
    edge = Edge(Point(1.0, 1.0), Point(3.0, 1.0))
    assert p.distance(edge, EPS3) == pytest.approx(-2.0, rel=EPS3)


def test_distance_does_not_modify_edge():
    edge = Edge(Point(1.0, 1.0), Point(3.0, 1.0))
    Point(2.0, 3.0).distance(edge, EPS3)
    assert edge == Edge(Point(1.0, 1.0), Point(3.0, 1.0))


def test_scalar_times_point():
    result = 4.0 * Point(2.0, 3.0)
    assert result.x == pytest.approx(8.0, rel=EPS3)
    assert result.y == pytest.approx(12.0, rel=EPS3)


def test_point_times_scalar():
    result = Point(2.0, 3.0) * 4.0
    assert result.x == pytest.approx(8.0, rel=EPS3)
    assert result.y == pytest.approx(12.0, rel=EPS3)


def test_point_cross():
    assert Point(1.0, 0.0).cross(Point(0.0, 1.0)) == 1.0
    assert Point(0.0, 1.0).cross(Point(1.0, 0.0)) == -1.0


# --- Edge --------------------------------------------------------------


def test_default_edge():
    edge = Edge()
    assert edge.origin.x == pytest.approx(0.0, rel=EPS)
    assert edge.origin.y == pytest.approx(0.0, rel=EPS)
    assert edge.destination.x == pytest.approx(1.0, rel=EPS)
    assert edge.destination.y == pytest.approx(0.0, rel=EPS)


def test_edge_construct():
    edge = Edge(Point(1.0, 2.0), Point(3.0, 4.0))
    assert edge.origin.x == pytest.approx(1.0, rel=EPS)
    assert edge.origin.y == pytest.approx(2.0, rel=EPS)
    assert edge.destination.x == pytest.approx(3.0, rel=EPS)
    assert edge.destination.y == pytest.approx(4.0, rel=EPS)


def test_edge_rotate():
    edge = Edge(Point(1.0, 1.0), Point(3.0, 3.0))
    returned = edge.rotate()
    assert returned is edge
    assert edge.origin.x == pytest.approx(1.0, rel=EPS)
    assert edge.origin.y == pytest.approx(3.0, rel=EPS)
    assert edge.destination.x == pytest.approx(3.0, rel=EPS)
    assert edge.destination.y == pytest.approx(1.0, rel=EPS)


def test_edge_flip():
    edge = Edge(Point(1.0, 2.0), Point(3.0, 4.0))
    returned = edge.flip()
    assert returned is edge
    assert edge.origin.x == pytest.approx(3.0, rel=EPS)
    assert edge.origin.y == pytest.approx(4.0, rel=EPS)
    assert edge.destination.x == pytest.approx(1.0, rel=EPS)
    assert edge.destination.y == pytest.approx(2.0, rel=EPS)


def test_edge_value():
    edge = Edge(Point(1.0, 1.0), Point(3.0, 2.0))
    result = edge.value(0.5)
    assert result.x == pytest.approx(2.0, rel=EPS)
    assert result.y == pytest.approx(1.5, rel=EPS)


def test_edge_intersect_and_cross():
    e1 = Edge(Point(1.0, 1.0), Point(3.0, 2.0))
    e2 = Edge(Point(1.0, 2.0), Point(3.0, 1.0))
    kind, t = e1.intersect(e2, EPS)
    assert kind == Intersection.SKEW
    assert t == pytest.approx(0.5, rel=EPS)
    kind, t = e1.cross(e2, EPS)
    assert kind == Intersection.SKEW_CROSS
    assert t == pytest.approx(0.5, rel=EPS)


def test_edge_parallel():
    e1 = Edge(Point(0.0, 0.0), Point(1.0, 0.0))
    e2 = Edge(Point(0.0, 1.0), Point(1.0, 1.0))
    assert e1.intersect(e2, EPS) == (Intersection.PARALLEL, None)
    assert e1.cross(e2, EPS) == (Intersection.PARALLEL, None)


def test_edge_collinear():
    e1 = Edge(Point(0.0, 0.0), Point(1.0, 0.0))
    e2 = Edge(Point(2.0, 0.0), Point(3.0, 0.0))
    assert e1.intersect(e2, EPS) == (Intersection.COLLINEAR, None)


def test_edge_skew_no_cross():
    e1 = Edge(Point(0.0, 0.0), Point(1.0, 0.0))
    e2 = Edge(Point(2.0, -1.0), Point(2.0, 1.0))
    kind, t = e1.cross(e2, EPS)
    assert kind == Intersection.SKEW_NO_CROSS
    assert t == pytest.approx(2.0, rel=EPS)


def test_edge_is_vertical():
    assert Edge(Point(1.0, 1.0), Point(1.0, 2.0)).is_vertical(EPS)
    assert not Edge(Point(1.0, 1.0), Point(2.0, 2.0)).is_vertical(EPS)


def test_edge_slope():
    slope = Edge(Point(1.0, 1.0), Point(2.0, 2.0)).slope(EPS)
    assert slope == pytest.approx(1.0, rel=EPS)


def test_vertical_edge_slope_is_max_float():
    assert Edge(Point(1.0, 1.0), Point(1.0, 2.0)).slope(EPS) == sys.float_info.max


def test_edge_y():
    edge = Edge(Point(1.0, 1.0), Point(2.0, 2.0))
    assert edge.y(1.5, EPS) == pytest.approx(1.5, rel=EPS)


# --- orientation -------------------------------------------------------


def test_orientation_positive():
    assert orientation(Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0), EPS3) == 1


def test_orientation_negative():
    assert orientation(Point(0.0, 0.0), Point(0.0, 1.0), Point(1.0, 0.0), EPS3) == -1


def test_orientation_collinear():
    assert orientation(Point(0.0, 0.0), Point(1.0, 1.0), Point(2.0, 2.0), EPS3) == 0