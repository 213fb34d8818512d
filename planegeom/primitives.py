"""Points, edges and the basic predicates of plane geometry."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Tuple, Union

Number = Union[int, float]


class Position(Enum):
    """Position of a point relative to a directed segment."""

    LEFT = auto()
    RIGHT = auto()
    BEYOND = auto()
    BEHIND = auto()
    BETWEEN = auto()
    ORIGIN = auto()
    DESTINATION = auto()


class Intersection(Enum):
    """Mutual arrangement of two segments or the lines through them."""

    COLLINEAR = auto()
    PARALLEL = auto()
    SKEW = auto()
    SKEW_CROSS = auto()
    SKEW_NO_CROSS = auto()


class Rotation(Enum):
    """Direction of traversal."""

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True)
class Point:
    """A point (or vector) in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        """Dot product with a point, or scaling by a number."""
        if isinstance(other, Point):
            return self.x * other.x + self.y * other.y
        if isinstance(other, (int, float)):
            return Point(other * self.x, other * self.y)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return Point(other * self.x, other * self.y)
        return NotImplemented

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y)[index]

    def __lt__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x, self.y) < (other.x, other.y)

    def __gt__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x, self.y) > (other.x, other.y)

    @staticmethod
    def is_equal(left: Point, right: Point, precision: float) -> bool:
        """Whether two points coincide within a relative precision."""
        return (
            abs(left.x - right.x) <= precision * max(abs(left.x), abs(right.x))
            and abs(left.y - right.y) <= precision * max(abs(left.y), abs(right.y))
        )

    def cross(self, other: Point) -> float:
        """The z component of the cross product of two vectors."""
        return self.x * other.y - self.y * other.x

    def classify(self, p0: Point, p1: Point, precision: float) -> Position:
        """Position of this point relative to the directed line (p0, p1)."""
        a = p1 - p0
        b = self - p0
        sa = a.x * b.y - b.x * a.y

        if sa > precision:
            return Position.LEFT
        if sa < -precision:
            return Position.RIGHT
        if a.x * b.x < 0 or a.y * b.y < 0:
            return Position.BEHIND
        if a.length() < b.length():
            return Position.BEYOND
        if Point.is_equal(p0, self, precision):
            return Position.ORIGIN
        if Point.is_equal(p1, self, precision):
            return Position.DESTINATION
        return Position.BETWEEN

    def classify_edge(self, edge: Edge, precision: float) -> Position:
        """Position of this point relative to the line through an edge."""
        return self.classify(edge.origin, edge.destination, precision)

    def polar_angle(self, precision: float) -> float:
        """Polar angle in degrees, or -1 for the origin."""
        if abs(self.x) < precision and abs(self.y) < precision:
            return -1.0
        if abs(self.x) < precision:
            return 90.0 if self.y > 0 else 270.0

        theta = math.atan(self.y / self.x) * (360.0 / (2 * math.pi))
        if self.x > 0:
            return theta if self.y > 0 else 360.0 + theta
        return 180.0 + theta

    def length(self) -> float:
        """Distance from the coordinate origin."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def distance(self, edge: Edge, precision: float) -> float:
        """Signed distance from this point to the line through an edge."""
        rotated = Edge(edge.origin, edge.destination)
        rotated.flip().rotate()

        normal = rotated.destination - rotated.origin
        normal = (1.0 / normal.length()) * normal

        normal_edge = Edge(self, self + normal)
        _, t = normal_edge.intersect(edge, precision)
        return 0.0 if t is None else t


@dataclass
class Edge:
    """A directed segment from origin to destination."""

    origin: Point = field(default_factory=lambda: Point(0.0, 0.0))
    destination: Point = field(default_factory=lambda: Point(1.0, 0.0))

    def rotate(self) -> Edge:
        """Rotate the edge 90 degrees clockwise about its midpoint."""
        middle = 0.5 * (self.origin + self.destination)
        direction = self.destination - self.origin
        normal = Point(direction.y, -direction.x)

        self.origin = middle - 0.5 * normal
        self.destination = middle + 0.5 * normal
        return self

    def flip(self) -> Edge:
        """Reverse the direction of the edge."""
        self.origin, self.destination = self.destination, self.origin
        return self

    def value(self, t: float) -> Point:
        """The point origin + t * (destination - origin)."""
        return self.origin + t * (self.destination - self.origin)

    def intersect(
        self, edge: Edge, precision: float
    ) -> Tuple[Intersection, Optional[float]]:
        """Intersect the lines through two edges.

        Returns the kind of intersection and, for skew lines, the parameter
        on this edge's line of the crossing point.
        """
        direction = self.destination - self.origin
        other_direction = edge.destination - edge.origin
        other_normal = Point(other_direction.y, -other_direction.x)

        denominator = other_normal * direction
        if abs(denominator) < precision:
            kind = self.origin.classify_edge(edge, precision)
            if kind in (Position.LEFT, Position.RIGHT):
                return Intersection.PARALLEL, None
            return Intersection.COLLINEAR, None

        numerator = other_normal * (self.origin - edge.origin)
        return Intersection.SKEW, -numerator / denominator

    def cross(
        self, edge: Edge, precision: float
    ) -> Tuple[Intersection, Optional[float]]:
        """Intersect two edges as segments.

        Returns the kind of intersection and the parameter on this edge of
        the crossing point of the lines where it was computed.
        """
        kind, s = edge.intersect(self, precision)
        if kind in (Intersection.COLLINEAR, Intersection.PARALLEL):
            return kind, None
        if s < 0 or s > 1:
            return Intersection.SKEW_NO_CROSS, None

        _, t = self.intersect(edge, precision)
        if t is not None and 0 <= t <= 1:
            return Intersection.SKEW_CROSS, t
        return Intersection.SKEW_NO_CROSS, t

    def is_vertical(self, precision: float) -> bool:
        """Whether the edge is vertical within a relative precision."""
        ox, dx = self.origin.x, self.destination.x
        return abs(ox - dx) <= precision * max(abs(ox), abs(dx))

    def slope(self, precision: float) -> float:
        """Slope of the edge, or the largest float for a vertical edge."""
        ox, dx = self.origin.x, self.destination.x
        if abs(ox - dx) > precision * max(abs(ox), abs(dx)):
            return (self.destination.y - self.origin.y) / (dx - ox)
        return sys.float_info.max

    def y(self, x: float, precision: float) -> float:
        """The y coordinate on the edge's line at the given x."""
        return self.slope(precision) * (x - self.origin.x) + self.origin.y


def orientation(pt0: Point, pt1: Point, pt2: Point, precision: float) -> int:
    """Orientation of vectors (pt1 - pt0, pt2 - pt0): 1, -1 or 0 if collinear."""
    a = pt1 - pt0
    b = pt2 - pt0
    sa = a.x * b.y - b.x * a.y
    if sa > precision:
        return 1
    if sa < -precision:
        return -1
    return 0