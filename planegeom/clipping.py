"""Intersection of convex polygons by successive half-plane clipping."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping

from planegeom.primitives import Point


def is_inside(p: Point, a: Point, b: Point) -> bool:
    """Whether ``p`` lies on or to the left of the directed line (a, b)."""
    return (b - a).cross(p - a) >= 0


def line_intersection(a1: Point, a2: Point, b1: Point, b2: Point) -> Point:
    """Crossing point of the lines through (a1, a2) and (b1, b2).

    Raises ZeroDivisionError when the lines are parallel.
    """
    da = a2 - a1
    db = b2 - b1
    dp = a1 - b1
    t = db.cross(dp) / da.cross(db)
    return Point(a1.x + t * da.x, a1.y + t * da.y)


def is_same_point(a: Point, b: Point, eps: float = 1e-9) -> bool:
    """Whether two points coincide within an absolute tolerance."""
    return abs(a.x - b.x) < eps and abs(a.y - b.y) < eps


def _cyclic_pairs(points: List[Point]):
    return zip(points, points[1:] + points[:1])


def convex_polygon_intersection(
    polygon1: Iterable[Point], polygon2: Iterable[Point]
) -> List[Point]:
    """Clip ``polygon1`` by every edge of the convex ``polygon2``.

    Both polygons are expected in counter-clockwise order. Coinciding
    vertices of the result are reported once.
    """
    output = list(polygon1)
    clip = list(polygon2)

    for a, b in _cyclic_pairs(clip):
        subject = output
        output = []
        for p, q in _cyclic_pairs(subject):
            p_inside = is_inside(p, a, b)
            q_inside = is_inside(q, a, b)
            if p_inside and q_inside:
                output.append(q)
            elif p_inside:
                output.append(line_intersection(p, q, a, b))
            elif q_inside:
                output.append(line_intersection(p, q, a, b))
                output.append(q)

    unique: List[Point] = []
    for p in output:
        if not any(is_same_point(p, q) for q in unique):
            unique.append(p)
    return unique


def _coordinate(point: Mapping[str, Any], key: str) -> float:
    value = point[key]
    if not isinstance(value, (int, float)):
        raise ValueError(f"coordinate {key!r} must be a number, got {value!r}")
    return float(value)


def _parse_polygon(points: Any, name: str) -> List[Point]:
    if not isinstance(points, list):
        raise ValueError(f"{name!r} must be a list of points")
    polygon = []
    for point in points:
        if not isinstance(point, Mapping) or "x" not in point or "y" not in point:
            raise ValueError(f"every point of {name!r} needs 'x' and 'y'")
        polygon.append(Point(_coordinate(point, "x"), _coordinate(point, "y")))
    return polygon


def convex_polygon_intersection_method(payload: Any) -> Dict[str, List[Dict[str, float]]]:
    """Run the intersection on a JSON-like request.

    The request holds ``polygon1`` and ``polygon2``, each a list of at least
    three ``{"x": ..., "y": ...}`` objects. Returns ``{"result": [...]}``.
    Raises ValueError for a malformed request.
    """
    if not isinstance(payload, Mapping) or "polygon1" not in payload or "polygon2" not in payload:
        raise ValueError("request must contain 'polygon1' and 'polygon2'")

    polygon1 = _parse_polygon(payload["polygon1"], "polygon1")
    polygon2 = _parse_polygon(payload["polygon2"], "polygon2")

    if len(polygon1) < 3 or len(polygon2) < 3:
        raise ValueError("each polygon needs at least three vertices")

    try:
        result = convex_polygon_intersection(polygon1, polygon2)
    except ZeroDivisionError as exc:
        raise ValueError("degenerate polygon") from exc

    return {"result": [{"x": p.x, "y": p.y} for p in result]}