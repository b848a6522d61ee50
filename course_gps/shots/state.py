from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Deque, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from course_gps.geo import Coordinate
from course_gps.gps import LocationFix

# Hard cap on buffered fixes in case a provider samples far faster than 1 Hz.
MAX_WINDOW_FIXES = 120


class ShotEvent(BaseModel):
    hole_number: Optional[int] = Field(default=None, alias="holeNumber")
    shot_distance_yards: float = Field(alias="shotDistanceYards")
    shot_distance_m: float = Field(alias="shotDistanceMeters")
    sequence_index: int = Field(alias="sequenceIndex")
    start: Coordinate
    end: Coordinate
    duration_s: float = Field(alias="durationSeconds")
    speed_mps: float = Field(alias="speedMps")
    confidence: float
    estimated_club: str = Field(alias="estimatedClub")
    detected_at: datetime = Field(alias="detectedAt")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


@dataclass
class RoundPositionState:
    """Mutable tracking state for one active round.

    Owned by whoever tracks the round; never shared between rounds. Fixes must
    be applied in non-decreasing timestamp order by a single writer.
    """

    round_id: Optional[str] = None
    current_hole: Optional[int] = None
    window: Deque[LocationFix] = field(
        default_factory=lambda: deque(maxlen=MAX_WINDOW_FIXES)
    )
    last_shot_location: Optional[Coordinate] = None
    shot_sequence: List[Coordinate] = field(default_factory=list)
    shot_events: List[ShotEvent] = field(default_factory=list)

    @classmethod
    def new(cls, round_id: Optional[str] = None) -> "RoundPositionState":
        return cls(round_id=round_id)

    @property
    def shots_total(self) -> int:
        return len(self.shot_events)

    def reset(self) -> None:
        """Drop everything (round completed or course changed)."""
        self.current_hole = None
        self.window.clear()
        self.last_shot_location = None
        self.shot_sequence.clear()
        self.shot_events.clear()


__all__ = ["MAX_WINDOW_FIXES", "RoundPositionState", "ShotEvent"]
