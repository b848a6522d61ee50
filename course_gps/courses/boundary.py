"""On/off course test against the stored course boundary."""

from __future__ import annotations

import logging
from typing import List

from course_gps.config import EngineSettings, resolve_settings
from course_gps.errors import InsufficientGeometry
from course_gps.geo import Coordinate, haversine_m, point_in_polygon, validate_coordinate

from .schemas import CourseGeometry

log = logging.getLogger(__name__)


def boundary_rings(course: CourseGeometry) -> List[List[Coordinate]]:
    if course.boundary is None or not course.boundary.is_usable:
        raise InsufficientGeometry(f"course {course.id} has no usable boundary polygon")
    return course.boundary.rings


def is_within_course_boundary(
    point: Coordinate,
    course: CourseGeometry,
    settings: EngineSettings | None = None,
) -> bool:
    """Polygon test when a boundary exists, else a radius around the course center."""

    validate_coordinate(point)
    try:
        return point_in_polygon(point, boundary_rings(course))
    except InsufficientGeometry:
        radius = resolve_settings(settings).boundary_fallback_radius_m
        log.debug("course %s: boundary fallback radius %.0fm", course.id, radius)
        return haversine_m(point, course.center) <= radius


__all__ = ["boundary_rings", "is_within_course_boundary"]
