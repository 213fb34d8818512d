"""Plane geometry primitives, polygons, convex polygon intersection and an HTTP service."""

__version__ = "0.1.0"

__all__ = ["primitives", "polygon", "clipping", "server"]