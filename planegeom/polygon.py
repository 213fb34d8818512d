"""A polygon with a movable current vertex."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from planegeom.primitives import Edge, Point, Rotation


class Polygon:
    """A polygon whose vertices are stored in clockwise order.

    Vertex positions are list indices into ``vertices``. ``current`` is the
    index of the current vertex; for an empty polygon it is 0.
    """

    def __init__(self, vertices: Optional[Iterable[Point]] = None, current: int = 0):
        self.vertices: List[Point] = list(vertices) if vertices is not None else []
        if not 0 <= current <= len(self.vertices) or (
            self.vertices and current == len(self.vertices)
        ):
            raise IndexError(f"vertex index {current} out of range")
        self.current = current

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self.vertices == other.vertices and self.current == other.current

    def __repr__(self) -> str:
        return f"Polygon(vertices={self.vertices!r}, current={self.current})"

    def copy(self) -> Polygon:
        """An independent polygon with the same vertices and current vertex."""
        return Polygon(self.vertices, self.current)

    def _check_position(self, position: int) -> int:
        size = len(self.vertices)
        if not -size <= position < size:
            raise IndexError(f"vertex index {position} out of range")
        return position % size

    def get_edge(self) -> Edge:
        """The edge from the current vertex to its clockwise neighbour."""
        if not self.vertices:
            raise IndexError("empty polygon has no edges")
        return Edge(self.vertices[self.current], self.vertices[self.clockwise()])

    def clockwise(self) -> Optional[int]:
        """Index of the next vertex clockwise, or None if the polygon is empty."""
        if not self.vertices:
            return None
        if self.current >= len(self.vertices) - 1:
            return 0
        return self.current + 1

    def counter_clockwise(self) -> Optional[int]:
        """Index of the next vertex counter-clockwise, or None if empty."""
        if not self.vertices:
            return None
        if self.current != 0:
            return self.current - 1
        return len(self.vertices) - 1

    def neighbor(self, rotation: Rotation) -> Optional[int]:
        """Index of the neighbouring vertex in the given direction."""
        if rotation is Rotation.CLOCKWISE:
            return self.clockwise()
        if rotation is Rotation.COUNTER_CLOCKWISE:
            return self.counter_clockwise()
        raise ValueError(f"unknown rotation: {rotation!r}")

    def advance(self, rotation: Rotation) -> Optional[int]:
        """Move the current vertex to its neighbour and return its index."""
        index = self.neighbor(rotation)
        self.current = index if index is not None else len(self.vertices)
        return index

    def insert(self, point: Point) -> int:
        """Insert a vertex after the current one and make it current."""
        if self.current != len(self.vertices):
            self.current += 1
        self.vertices.insert(self.current, point)
        return self.current

    def remove(self, position: int) -> None:
        """Remove a vertex; the current vertex becomes the one before it."""
        position = self._check_position(position)
        del self.vertices[position]
        self.current = position
        self.advance(Rotation.COUNTER_CLOCKWISE)

    def split(self, position: int) -> Polygon:
        """Cut the polygon between the current vertex and ``position``.

        The vertices strictly between them, going clockwise, move to the
        returned polygon, which holds the current vertex, those vertices and
        the vertex at ``position``, with the latter as its current vertex.
        In this polygon the vertex at ``position`` becomes the clockwise
        neighbour of the current vertex.
        """
        if not self.vertices:
            raise IndexError("cannot split an empty polygon")
        position = self._check_position(position)
        size = len(self.vertices)
        start = self.current

        if start == position:
            return Polygon([self.vertices[start]], 0)

        removed = []
        index = (start + 1) % size
        while index != position:
            removed.append(index)
            index = (index + 1) % size

        other = [self.vertices[start]]
        other.extend(self.vertices[i] for i in removed)
        other.append(self.vertices[position])

        dropped = set(removed)
        self.vertices = [v for i, v in enumerate(self.vertices) if i not in dropped]
        self.current = start - sum(1 for i in removed if i < start)

        return Polygon(other, len(other) - 1)