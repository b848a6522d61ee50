"""Single-fix pipeline: quality gate, course context, shot detection."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from course_gps.config import EngineSettings, resolve_settings
from course_gps.courses import (
    CourseGeometry,
    PositionClassification,
    classify_position,
    detect_current_hole,
    distance_to_pin_m,
    distance_to_tee_m,
    find_hole,
    is_within_course_boundary,
)
from course_gps.geo import Coordinate, validate_coordinate
from course_gps.gps import GpsQuality, LocationFix, classify, is_low_confidence
from course_gps.shots import RoundPositionState, ShotEvent, apply_hole_transition, record_fix

log = logging.getLogger(__name__)

OUTSIDE_BOUNDARY_ADVISORY = "Outside course boundary"


class LocationUpdate(BaseModel):
    """Enriched location record handed to persistence and display layers."""

    coordinate: Coordinate
    timestamp: datetime
    current_hole_detected: Optional[int] = Field(default=None, alias="currentHoleDetected")
    distance_to_tee_m: Optional[float] = Field(default=None, alias="distanceToTeeMeters")
    distance_to_pin_m: Optional[float] = Field(default=None, alias="distanceToPinMeters")
    position_on_hole: PositionClassification = Field(
        default=PositionClassification.UNKNOWN, alias="positionOnHole"
    )
    course_boundary_status: bool = Field(alias="courseBoundaryStatus")
    gps_quality: GpsQuality = Field(alias="gpsQuality")
    low_confidence: bool = Field(default=False, alias="lowConfidence")
    gps_stable: Optional[bool] = Field(default=None, alias="gpsStable")
    hole_changed: bool = Field(default=False, alias="holeChanged")
    shot: Optional[ShotEvent] = None
    advisories: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, populate_by_name=True)


def process_fix(
    fix: LocationFix,
    course: CourseGeometry,
    state: RoundPositionState,
    settings: EngineSettings | None = None,
) -> LocationUpdate:
    """Run one fix through every stage and update ``state``.

    Poor fixes are still located and classified, but when
    ``suppress_low_confidence_side_effects`` is on they neither move the
    round to another hole nor enter the shot window.

    Raises :class:`InvalidCoordinate` for an out-of-range fix; the state is
    left untouched in that case.
    """

    cfg = resolve_settings(settings)
    point = validate_coordinate(fix.coordinate)
    assessment = classify(fix.accuracy_m)
    low_confidence = is_low_confidence(assessment)
    suppress = low_confidence and cfg.suppress_low_confidence_side_effects

    advisories: List[str] = []
    if low_confidence:
        advisories.append(assessment.recommendation)

    within = is_within_course_boundary(point, course, cfg)
    if not within:
        advisories.append(OUTSIDE_BOUNDARY_ADVISORY)

    detected = detect_current_hole(point, course, cfg)
    hole = find_hole(course, detected) if detected is not None else None

    hole_changed = False
    shot: Optional[ShotEvent] = None
    if suppress:
        log.debug(
            "round %s: %s fix (%s m), side effects suppressed",
            state.round_id,
            assessment.quality,
            fix.accuracy_m,
        )
    else:
        hole_changed = apply_hole_transition(state, detected)
        shot = record_fix(state, fix, cfg)

    return LocationUpdate(
        coordinate=point,
        timestamp=fix.timestamp,
        current_hole_detected=detected,
        distance_to_tee_m=distance_to_tee_m(point, hole) if hole is not None else None,
        distance_to_pin_m=distance_to_pin_m(point, hole) if hole is not None else None,
        position_on_hole=classify_position(point, hole, cfg),
        course_boundary_status=within,
        gps_quality=assessment.quality,
        low_confidence=low_confidence,
        hole_changed=hole_changed,
        shot=shot,
        advisories=advisories,
    )


__all__ = ["LocationUpdate", "OUTSIDE_BOUNDARY_ADVISORY", "process_fix"]
