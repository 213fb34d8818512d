# planegeom

Plane geometry in pure Python: points and edges with tolerance-aware
predicates, a polygon that keeps a "current" vertex and walks around its
boundary, and intersection of two convex polygons by successive half-plane
clipping. A small HTTP service exposes the intersection as a JSON endpoint.

The package has no runtime dependencies.

## Modules

- `planegeom.primitives` — `Point`, `Edge`, the `Position`, `Intersection`
  and `Rotation` enumerations, and `orientation()`.
- `planegeom.polygon` — `Polygon`, a ring of vertices with a current
  position that can move clockwise or counter-clockwise, insert, remove and
  split.
- `planegeom.clipping` — `convex_polygon_intersection()` and its helpers
  `is_inside()`, `line_intersection()` and `is_same_point()`, plus
  `convex_polygon_intersection_method()`, which works on JSON-shaped data.
- `planegeom.server` — the HTTP service: `handle_intersect()`,
  `create_server()` and `main()`.

## Points and edges

`Point` is an immutable dataclass with `x` and `y` (both default to 0).

```python
from planegeom.primitives import Edge, Intersection, Point, Position, orientation

eps = 1e-9

a = Point(1.0, 2.0)
b = Point(3.0, 5.0)
a + b          # Point(x=4.0, y=7.0)
a - b          # Point(x=-2.0, y=-3.0)
a * b          # dot product: 13.0
4.0 * a        # Point(x=4.0, y=8.0)
a[0], a[1]     # 1.0, 2.0
a.cross(b)     # -1.0
a < b          # lexicographic comparison: True

Point(3.0, 3.0).classify(Point(1.0, 1.0), Point(5.0, 5.0), eps)
# Position.BETWEEN

Point(1.0, 1.0).polar_angle(eps)   # 45.0 degrees; -1.0 for the origin
Point(2.0, 3.0).distance(Edge(Point(1.0, 1.0), Point(3.0, 1.0)), eps)
# signed distance: -2.0

orientation(Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0), eps)  # 1
```

`orientation()` returns `1` for a counter-clockwise turn, `-1` for a
clockwise one and `0` when the points are collinear within the given
precision. `Point.is_equal(left, right, precision)` compares with a
relative precision; `classify_edge()` is `classify()` against an edge.

`Edge` is a mutable directed segment; `Edge()` runs from `(0, 0)` to
`(1, 0)`.

```python
edge = Edge(Point(1.0, 1.0), Point(2.0, 2.0))
edge.slope(eps)        # 1.0 (sys.float_info.max for a vertical edge)
edge.y(1.5, eps)       # 1.5
edge.value(0.5)        # Point(x=1.5, y=1.5)
edge.is_vertical(eps)  # False

edge.flip()            # reverses it in place and returns the edge
edge.rotate()          # turns it 90 degrees clockwise about its midpoint

e1 = Edge(Point(1.0, 1.0), Point(3.0, 2.0))
e2 = Edge(Point(1.0, 2.0), Point(3.0, 1.0))
e1.intersect(e2, eps)  # (Intersection.SKEW, 0.5)
e1.cross(e2, eps)      # (Intersection.SKEW_CROSS, 0.5)
```

`intersect()` works on the lines through the edges and `cross()` on the
segments themselves. Both return a pair of the `Intersection` kind and the
parameter on this edge's line of the crossing point, or `None` where no
parameter was computed (parallel or collinear lines).

## Polygons

A `Polygon` stores its vertices in clockwise order in the list `vertices`
and remembers the index of a current vertex in `current`. Positions are
list indices.

```python
from planegeom.polygon import Polygon
from planegeom.primitives import Point, Rotation

polygon = Polygon([Point(1, 2), Point(3, 4)])
len(polygon)                       # 2
polygon.clockwise()                # 1
polygon.insert(Point(5, 6))        # 1: inserted after the current vertex
polygon.counter_clockwise()        # 0
polygon.advance(Rotation.CLOCKWISE)
polygon.get_edge()                 # edge from the current vertex to the next
```

`clockwise()`, `counter_clockwise()` and `neighbor(rotation)` return the
index of a neighbour, or `None` for an empty polygon. `advance()` moves the
current position there. `remove(position)` deletes a vertex and makes the
one before it current. `split(position)` cuts the polygon between the
current vertex and `position`: the vertices strictly between them (going
clockwise) move to the returned polygon, which also holds both cut vertices
and has the vertex at `position` as its current one. `copy()` gives an
independent polygon. Out-of-range positions raise `IndexError`.

## Convex polygon intersection

```python
from planegeom.clipping import convex_polygon_intersection
from planegeom.primitives import Point

square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
shifted = [Point(1, 1), Point(3, 1), Point(3, 3), Point(1, 3)]

convex_polygon_intersection(square, shifted)
# four points: the unit square from (1, 1) to (2, 2)
```

Both polygons are expected in counter-clockwise order. Each edge of the
second polygon clips the first in turn; points that coincide within `1e-9`
are reported once. Disjoint polygons give an empty list.

`convex_polygon_intersection_method(payload)` takes a mapping with
`polygon1` and `polygon2`, each a list of at least three `{"x": ..., "y": ...}`
objects, and returns `{"result": [{"x": ..., "y": ...}, ...]}`. A malformed
request or a degenerate polygon raises `ValueError`.

## The HTTP service

Start it on the default port 8080, or give a port as the only argument:

```
planegeom-server
planegeom-server 9000
```

It listens on all interfaces and answers:

- `POST /intersect` with a body such as

  ```json
  {
    "polygon1": [{"x": 0, "y": 0}, {"x": 2, "y": 0}, {"x": 2, "y": 2}, {"x": 0, "y": 2}],
    "polygon2": [{"x": 1, "y": 1}, {"x": 3, "y": 1}, {"x": 3, "y": 3}, {"x": 1, "y": 3}]
  }
  ```

  and replies with `{"result": [{"x": ..., "y": ...}, ...]}`. An empty
  intersection is answered with JSON `null`. A body that is not valid JSON
  or holds non-numeric coordinates gets status 400 and `{"error": "..."}`.
- `GET /stop`, which shuts the server down.

Other paths get status 404. A port argument that does not start with a
number makes the command exit with status -1.

From Python, `create_server(host, port)` builds a `ThreadingHTTPServer`
without starting it, and `handle_intersect(body)` processes one request
body and returns the status and the JSON text of the reply.