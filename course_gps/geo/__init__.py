from .planar import distance_to_polyline_m, point_in_polygon, point_in_ring, to_local_xy
from .primitives import (
    Coordinate,
    DistanceResult,
    TargetDistance,
    bearing,
    bearing_direction,
    distance,
    distances_to_targets,
    format_golf_distance,
    haversine_m,
    validate_coordinate,
)

__all__ = [
    "Coordinate",
    "DistanceResult",
    "TargetDistance",
    "bearing",
    "bearing_direction",
    "distance",
    "distance_to_polyline_m",
    "distances_to_targets",
    "format_golf_distance",
    "haversine_m",
    "point_in_polygon",
    "point_in_ring",
    "to_local_xy",
    "validate_coordinate",
]
