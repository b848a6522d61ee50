from .detector import (
    ShotThreshold,
    apply_hole_transition,
    buffer_fix,
    detect_shot,
    record_fix,
    reset_round,
    shot_confidence,
    shot_threshold,
)
from .state import MAX_WINDOW_FIXES, RoundPositionState, ShotEvent

__all__ = [
    "MAX_WINDOW_FIXES",
    "RoundPositionState",
    "ShotEvent",
    "ShotThreshold",
    "apply_hole_transition",
    "buffer_fix",
    "detect_shot",
    "record_fix",
    "reset_round",
    "shot_confidence",
    "shot_threshold",
]
