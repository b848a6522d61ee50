"""Local planar helpers for hole-scale geometry.

Projects lon/lat to metres on an equirectangular plane anchored at a reference
point. Distortion is negligible over the few hundred metres a golf hole spans.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from .primitives import EARTH_RADIUS_M, Coordinate, validate_coordinate

XY = Tuple[float, float]


def to_local_xy(origin: Coordinate, point: Coordinate) -> XY:
    """Project ``point`` to (east, north) metres relative to ``origin``."""

    cos_ref = math.cos(math.radians(origin.latitude))
    # wrapped to [-180, 180)
    dlon = (point.longitude - origin.longitude + 180.0) % 360.0 - 180.0
    x = EARTH_RADIUS_M * math.radians(dlon) * cos_ref
    y = EARTH_RADIUS_M * math.radians(point.latitude - origin.latitude)
    return x, y


def _project_ring(origin: Coordinate, ring: Sequence[Coordinate]) -> List[XY]:
    """Project every vertex; any out-of-range vertex raises InvalidCoordinate."""

    return [to_local_xy(origin, validate_coordinate(vertex)) for vertex in ring]


def point_in_ring(point: Coordinate, ring: Sequence[Coordinate]) -> bool:
    """Ray-casting test; the ring may or may not repeat its first vertex."""

    if len(ring) < 3:
        return False
    validate_coordinate(point)
    projected = _project_ring(point, ring)
    inside = False
    j = len(projected) - 1
    for i in range(len(projected)):
        xi, yi = projected[i]
        xj, yj = projected[j]
        if (yi > 0) != (yj > 0):
            x_cross = xi + (0 - yi) * (xj - xi) / (yj - yi)
            if x_cross > 0:
                inside = not inside
        j = i
    return inside


def point_in_polygon(point: Coordinate, rings: Sequence[Sequence[Coordinate]]) -> bool:
    """Inside the outer ring and outside every inner ring."""

    if not rings or not point_in_ring(point, rings[0]):
        return False
    return not any(point_in_ring(point, ring) for ring in rings[1:])


def _distance_to_segment(p: XY, a: XY, b: XY) -> float:
    ax, ay = a
    bx, by = b
    px, py = p
    dx = bx - ax
    dy = by - ay
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return math.hypot(px - ax, py - ay)
    t = ((px - ax) * dx + (py - ay) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return math.hypot(px - (ax + t * dx), py - (ay + t * dy))


def distance_to_polyline_m(point: Coordinate, line: Sequence[Coordinate]) -> float:
    """Shortest distance in metres from ``point`` to a polyline."""

    if not line:
        raise ValueError("polyline must contain at least one vertex")
    validate_coordinate(point)
    projected = _project_ring(point, line)
    if len(projected) == 1:
        return math.hypot(*projected[0])
    return min(
        _distance_to_segment((0.0, 0.0), projected[idx], projected[idx + 1])
        for idx in range(len(projected) - 1)
    )


__all__ = [
    "XY",
    "distance_to_polyline_m",
    "point_in_polygon",
    "point_in_ring",
    "to_local_xy",
]
