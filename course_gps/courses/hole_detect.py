from __future__ import annotations

from typing import Optional, Tuple

from course_gps.config import EngineSettings, resolve_settings
from course_gps.geo import Coordinate, haversine_m, validate_coordinate

from .schemas import CourseGeometry, HoleGeometry


def find_hole(course: CourseGeometry, number: int) -> Optional[HoleGeometry]:
    return next((hole for hole in course.holes if hole.number == number), None)


def nearest_tee(
    point: Coordinate, course: CourseGeometry
) -> Optional[Tuple[HoleGeometry, float]]:
    """Return the hole whose tee is closest to ``point`` and that distance."""

    validate_coordinate(point)
    if not course.holes:
        return None
    distances = [(hole, haversine_m(hole.tee, point)) for hole in course.holes]
    return min(distances, key=lambda item: item[1])


def detect_current_hole(
    point: Coordinate,
    course: CourseGeometry,
    settings: EngineSettings | None = None,
) -> Optional[int]:
    """Guess the hole being played from the nearest tee.

    Returns ``None`` when the course has no holes or the nearest tee is beyond
    the sanity bound, meaning the hole cannot be determined.
    """

    closest = nearest_tee(point, course)
    if closest is None:
        return None
    hole, tee_distance = closest
    if tee_distance > resolve_settings(settings).hole_detect_max_distance_m:
        return None
    return hole.number


def distance_to_tee_m(point: Coordinate, hole: HoleGeometry) -> float:
    return round(haversine_m(point, hole.tee), 2)


def distance_to_pin_m(point: Coordinate, hole: HoleGeometry) -> float:
    return round(haversine_m(point, hole.pin), 2)


__all__ = [
    "detect_current_hole",
    "distance_to_pin_m",
    "distance_to_tee_m",
    "find_hole",
    "nearest_tee",
]
