"""Classify a fix as tee/green/hazard/fairway/rough relative to one hole."""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from course_gps.config import EngineSettings, resolve_settings
from course_gps.errors import InsufficientGeometry
from course_gps.geo import (
    Coordinate,
    distance_to_polyline_m,
    haversine_m,
    point_in_polygon,
    validate_coordinate,
)

from .schemas import HoleGeometry

log = logging.getLogger(__name__)


class PositionClassification(str, Enum):
    TEE = "tee"
    FAIRWAY = "fairway"
    ROUGH = "rough"
    GREEN = "green"
    HAZARD = "hazard"
    UNKNOWN = "unknown"


def fairway_line(hole: HoleGeometry) -> List[Coordinate]:
    """Centerline of the fairway, or the straight tee to pin line without one."""

    if hole.fairway_centerline:
        return list(hole.fairway_centerline)
    return [hole.tee, hole.pin]


def _in_hazard(point: Coordinate, hole: HoleGeometry) -> bool:
    return any(
        hazard.polygon is not None
        and hazard.polygon.is_usable
        and point_in_polygon(point, hazard.polygon.rings)
        for hazard in hole.hazards
    )


def _in_fairway(point: Coordinate, hole: HoleGeometry, half_width_m: float) -> bool:
    polygon = hole.fairway_polygon
    if polygon is not None and polygon.is_usable and point_in_polygon(point, polygon.rings):
        return True
    return distance_to_polyline_m(point, fairway_line(hole)) <= half_width_m


def _in_layout(point: Coordinate, hole: HoleGeometry) -> bool:
    polygon = hole.layout_polygon
    if polygon is None or not polygon.is_usable:
        raise InsufficientGeometry(f"hole {hole.number} has no layout polygon")
    return point_in_polygon(point, polygon.rings)


def classify_position(
    point: Coordinate,
    hole: Optional[HoleGeometry],
    settings: EngineSettings | None = None,
) -> PositionClassification:
    """Label ``point`` on ``hole``.

    Each call is independent: there is no smoothing, so a fix wandering along
    an area edge can alternate between labels from one reading to the next.
    Hazard is only produced for holes that carry hazard polygons.
    """

    validate_coordinate(point)
    if hole is None:
        return PositionClassification.UNKNOWN
    cfg = resolve_settings(settings)

    if haversine_m(point, hole.tee) <= cfg.tee_radius_m:
        return PositionClassification.TEE
    if haversine_m(point, hole.pin) <= cfg.green_radius_m:
        return PositionClassification.GREEN
    if _in_hazard(point, hole):
        return PositionClassification.HAZARD
    if _in_fairway(point, hole, cfg.fairway_half_width_m):
        return PositionClassification.FAIRWAY
    try:
        inside = _in_layout(point, hole)
    except InsufficientGeometry:
        log.debug("hole %s: no layout polygon, position unknown", hole.number)
        return PositionClassification.UNKNOWN
    return PositionClassification.ROUGH if inside else PositionClassification.UNKNOWN


__all__ = ["PositionClassification", "classify_position", "fairway_line"]
