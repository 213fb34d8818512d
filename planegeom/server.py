"""HTTP server exposing the convex polygon intersection."""

from __future__ import annotations

import json
import re
import sys
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, List, Optional, Sequence, Tuple
from urllib.parse import urlsplit

from planegeom.clipping import convex_polygon_intersection
from planegeom.primitives import Point

DEFAULT_PORT = 8080
_JSON = "application/json"


def _coordinate(point: Any, key: str) -> float:
    if not isinstance(point, dict):
        raise TypeError(f"point must be an object, got {point!r}")
    value = point.get(key)
    if not isinstance(value, (int, float)):
        raise TypeError(f"coordinate {key!r} must be a number, got {value!r}")
    return float(value)


def _polygon(data: Any, name: str) -> List[Point]:
    if not isinstance(data, dict):
        raise TypeError("request body must be a JSON object")
    points = data.get(name)
    if points is None:
        return []
    if not isinstance(points, list):
        raise TypeError(f"{name!r} must be an array")
    return [Point(_coordinate(p, "x"), _coordinate(p, "y")) for p in points]


def handle_intersect(body) -> Tuple[int, str]:
    """Handle a request body for the intersection endpoint.

    Returns the HTTP status and the JSON text of the response. When the
    intersection is empty the response is JSON ``null``.
    """
    try:
        data = json.loads(body)
        polygon1 = _polygon(data, "polygon1")
        polygon2 = _polygon(data, "polygon2")
        result = convex_polygon_intersection(polygon1, polygon2)
    except (ValueError, TypeError, ZeroDivisionError) as exc:
        return 400, json.dumps({"error": str(exc)})

    if not result:
        return 200, json.dumps(None)
    return 200, json.dumps({"result": [{"x": p.x, "y": p.y} for p in result]})


class _Handler(BaseHTTPRequestHandler):
    def _send(self, status: int, text: str = "", content_type: Optional[str] = None) -> None:
        payload = text.encode("utf-8")
        self.send_response(status)
        if content_type:
            self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def do_GET(self) -> None:  # noqa: N802
        if urlsplit(self.path).path == "/stop":
            self._send(200)
            threading.Thread(target=self.server.shutdown, daemon=True).start()
        else:
            self._send(404)

    def do_POST(self) -> None:  # noqa: N802
        if urlsplit(self.path).path != "/intersect":
            self._send(404)
            return
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length)
        status, text = handle_intersect(body)
        self._send(status, text, _JSON)

    def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
        pass


def create_server(host: str = "0.0.0.0", port: int = DEFAULT_PORT) -> ThreadingHTTPServer:
    """Create the server bound to ``host`` and ``port``; GET /stop shuts it down."""
    server = ThreadingHTTPServer((host, port), _Handler)
    server.daemon_threads = True
    return server


def _parse_port(text: str) -> Optional[int]:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Serve on the port given as the first argument (default 8080)."""
    args = list(sys.argv[1:] if argv is None else argv)
    port = DEFAULT_PORT
    if args:
        parsed = _parse_port(args[0])
        if parsed is None:
            return -1
        port = parsed

    print(f"Listening on port {port}...", file=sys.stderr)

    try:
        server = create_server("0.0.0.0", port)
    except OSError as exc:
        print(f"Cannot listen on port {port}: {exc}", file=sys.stderr)
        return 0

    with server:
        server.serve_forever()
    return 0


if __name__ == "__main__":
    sys.exit(main())