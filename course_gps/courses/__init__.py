from .boundary import boundary_rings, is_within_course_boundary
from .hole_detect import (
    detect_current_hole,
    distance_to_pin_m,
    distance_to_tee_m,
    find_hole,
    nearest_tee,
)
from .position import PositionClassification, classify_position, fairway_line
from .schemas import CourseGeometry, GeoPolygon, HazardGeometry, HazardType, HoleGeometry

__all__ = [
    "CourseGeometry",
    "GeoPolygon",
    "HazardGeometry",
    "HazardType",
    "HoleGeometry",
    "PositionClassification",
    "boundary_rings",
    "classify_position",
    "detect_current_hole",
    "distance_to_pin_m",
    "distance_to_tee_m",
    "fairway_line",
    "find_hole",
    "is_within_course_boundary",
    "nearest_tee",
]
