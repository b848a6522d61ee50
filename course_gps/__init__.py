"""Course-aware GPS position engine for on-course golf tracking."""

from .caddie import ClubSuggestion, recommend_club, suggest_club, wind_adjustment
from .config import EngineSettings, get_settings, reset_settings_cache
from .courses import (
    CourseGeometry,
    HoleGeometry,
    PositionClassification,
    classify_position,
    detect_current_hole,
    is_within_course_boundary,
)
from .errors import CourseGpsError, InsufficientGeometry, InvalidCoordinate, RoundNotFound
from .geo import Coordinate, DistanceResult, bearing, distance
from .gps import GpsAssessment, LocationFix, classify
from .shots import RoundPositionState, ShotEvent, detect_shot
from .tracking import LocationUpdate, RoundRegistry, RoundTracker, process_fix

__version__ = "0.1.0"

__all__ = [
    "ClubSuggestion",
    "Coordinate",
    "CourseGeometry",
    "CourseGpsError",
    "DistanceResult",
    "EngineSettings",
    "GpsAssessment",
    "HoleGeometry",
    "InsufficientGeometry",
    "InvalidCoordinate",
    "LocationFix",
    "LocationUpdate",
    "PositionClassification",
    "RoundNotFound",
    "RoundPositionState",
    "RoundRegistry",
    "RoundTracker",
    "ShotEvent",
    "bearing",
    "classify",
    "classify_position",
    "detect_current_hole",
    "detect_shot",
    "distance",
    "get_settings",
    "is_within_course_boundary",
    "process_fix",
    "recommend_club",
    "reset_settings_cache",
    "suggest_club",
    "wind_adjustment",
]
