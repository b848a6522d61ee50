"""Infer golf shots from sudden displacement between consecutive fixes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from course_gps.caddie import recommend_club
from course_gps.config import EngineSettings, resolve_settings
from course_gps.geo import distance
from course_gps.gps import LocationFix

from .state import RoundPositionState, ShotEvent

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShotThreshold:
    min_distance_m: float
    min_speed_mps: float


def shot_threshold(
    accuracy_m: Optional[float], settings: EngineSettings | None = None
) -> ShotThreshold:
    """Displacement must clear both a floor and a multiple of the GPS error."""

    cfg = resolve_settings(settings)
    accuracy = accuracy_m if accuracy_m is not None and accuracy_m > 0 else cfg.default_accuracy_m
    return ShotThreshold(
        min_distance_m=max(cfg.shot_min_distance_m, cfg.shot_accuracy_multiplier * accuracy),
        min_speed_mps=cfg.shot_min_speed_mps,
    )


def shot_confidence(distance_m: float, duration_s: float, speed_mps: float) -> float:
    confidence = 0.5
    if distance_m > 100:
        confidence += 0.2
    if distance_m > 200:
        confidence += 0.2
    if speed_mps > 10:
        confidence += 0.1
    if speed_mps > 20:
        confidence += 0.1
    # very short gaps are often a GPS jump rather than a shot
    if duration_s < 2:
        confidence -= 0.2
    return round(max(0.1, min(1.0, confidence)), 2)


def buffer_fix(
    state: RoundPositionState, fix: LocationFix, settings: EngineSettings | None = None
) -> None:
    """Append ``fix`` and evict fixes older than the detection window."""

    window_s = resolve_settings(settings).shot_window_s
    state.window.append(fix)
    while state.window and (fix.timestamp - state.window[0].timestamp).total_seconds() > window_s:
        state.window.popleft()


def detect_shot(
    state: RoundPositionState, settings: EngineSettings | None = None
) -> Optional[ShotEvent]:
    """Check the two newest buffered fixes for a shot.

    Fewer than two fixes, or fixes without a positive time gap, simply mean
    no shot.
    """

    if len(state.window) < 2:
        return None
    previous, current = state.window[-2], state.window[-1]
    duration_s = (current.timestamp - previous.timestamp).total_seconds()
    if duration_s <= 0:
        return None

    moved = distance(previous.coordinate, current.coordinate)
    speed_mps = moved.meters / duration_s
    threshold = shot_threshold(current.accuracy_m, settings)
    if moved.meters < threshold.min_distance_m or speed_mps < threshold.min_speed_mps:
        log.debug(
            "movement %.1fm at %.1fm/s below shot threshold", moved.meters, speed_mps
        )
        return None

    state.shot_sequence.append(current.coordinate)
    state.last_shot_location = current.coordinate
    event = ShotEvent(
        hole_number=state.current_hole,
        shot_distance_yards=moved.yards,
        shot_distance_m=moved.meters,
        sequence_index=len(state.shot_sequence),
        start=previous.coordinate,
        end=current.coordinate,
        duration_s=duration_s,
        speed_mps=round(speed_mps, 2),
        confidence=shot_confidence(moved.meters, duration_s, speed_mps),
        estimated_club=recommend_club(moved.yards),
        detected_at=current.timestamp,
    )
    state.shot_events.append(event)
    log.info(
        "round %s hole %s: shot %d detected, %.0f yds",
        state.round_id,
        state.current_hole,
        event.sequence_index,
        event.shot_distance_yards,
    )
    return event


def record_fix(
    state: RoundPositionState, fix: LocationFix, settings: EngineSettings | None = None
) -> Optional[ShotEvent]:
    buffer_fix(state, fix, settings)
    return detect_shot(state, settings)


def apply_hole_transition(state: RoundPositionState, hole: Optional[int]) -> bool:
    """Move the state to ``hole``; returns True when the hole changed.

    Only the per-hole shot sequence is reset. ``last_shot_location`` survives
    so distance-from-last-shot stays available until the next shot.
    ``None`` (hole unknown) keeps the current hole.
    """

    if hole is None or hole == state.current_hole:
        return False
    previous = state.current_hole
    state.current_hole = hole
    state.shot_sequence.clear()
    log.info("round %s: hole %s -> %s", state.round_id, previous, hole)
    return True


def reset_round(state: RoundPositionState) -> None:
    state.reset()


__all__ = [
    "ShotThreshold",
    "apply_hole_transition",
    "buffer_fix",
    "detect_shot",
    "record_fix",
    "reset_round",
    "shot_confidence",
    "shot_threshold",
]
