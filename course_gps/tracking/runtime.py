"""Per-round trackers and the registry of concurrently tracked rounds."""

from __future__ import annotations

import logging
from functools import lru_cache
from threading import Lock
from typing import Dict, List, Optional

from course_gps.caddie import ClubSuggestion, suggest_club
from course_gps.config import EngineSettings
from course_gps.courses import CourseGeometry
from course_gps.errors import RoundNotFound
from course_gps.geo import Coordinate, DistanceResult, distance
from course_gps.gps import GpsStabilityTracker, LocationFix
from course_gps.shots import RoundPositionState, ShotEvent

from .engine import LocationUpdate, process_fix

log = logging.getLogger(__name__)


class RoundTracker:
    """Serialises fixes for one round around its own :class:`RoundPositionState`."""

    def __init__(
        self,
        round_id: str,
        course: CourseGeometry,
        settings: EngineSettings | None = None,
    ) -> None:
        self._round_id = round_id
        self._course = course
        self._settings = settings
        self._state = RoundPositionState.new(round_id)
        self._stability = GpsStabilityTracker()
        self._last_position: Optional[Coordinate] = None
        self._lock = Lock()

    @property
    def round_id(self) -> str:
        return self._round_id

    @property
    def course(self) -> CourseGeometry:
        return self._course

    @property
    def current_hole(self) -> Optional[int]:
        with self._lock:
            return self._state.current_hole

    @property
    def last_shot_location(self) -> Optional[Coordinate]:
        with self._lock:
            return self._state.last_shot_location

    @property
    def last_position(self) -> Optional[Coordinate]:
        with self._lock:
            return self._last_position

    def shot_sequence(self) -> List[Coordinate]:
        with self._lock:
            return list(self._state.shot_sequence)

    def shot_events(self) -> List[ShotEvent]:
        with self._lock:
            return list(self._state.shot_events)

    def apply(self, fix: LocationFix) -> LocationUpdate:
        with self._lock:
            update = process_fix(fix, self._course, self._state, self._settings)
            self._stability.observe(fix.accuracy_m, fix.timestamp)
            self._last_position = update.coordinate
            return update.model_copy(update={"gps_stable": self._stability.is_stable})

    def distance_from_last_shot(
        self, point: Optional[Coordinate] = None
    ) -> Optional[DistanceResult]:
        with self._lock:
            origin = self._state.last_shot_location
            here = point if point is not None else self._last_position
        if origin is None or here is None:
            return None
        return distance(origin, here)

    def suggest_club(
        self,
        target: Coordinate,
        wind_speed: Optional[float] = None,
        wind_direction: Optional[float] = None,
        *,
        player: Optional[Coordinate] = None,
    ) -> ClubSuggestion:
        """Club from ``player`` (default: the last fix) to ``target``."""

        origin = player if player is not None else self.last_position
        if origin is None:
            raise ValueError(f"round {self._round_id} has no position yet")
        return suggest_club(
            origin, target, wind_speed, wind_direction, settings=self._settings
        )

    def change_course(self, course: CourseGeometry) -> None:
        with self._lock:
            log.info("round %s: course %s -> %s", self._round_id, self._course.id, course.id)
            self._course = course
            self._reset_locked()

    def complete(self) -> None:
        with self._lock:
            self._reset_locked()

    def _reset_locked(self) -> None:
        self._state.reset()
        self._stability.reset()
        self._last_position = None


class RoundRegistry:
    """Active rounds by id; rounds never share state."""

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self._settings = settings
        self._rounds: Dict[str, RoundTracker] = {}
        self._lock = Lock()

    def start_round(self, round_id: str, course: CourseGeometry) -> RoundTracker:
        tracker = RoundTracker(round_id, course, self._settings)
        with self._lock:
            if round_id in self._rounds:
                log.warning("round %s restarted; previous tracking state dropped", round_id)
            self._rounds[round_id] = tracker
        return tracker

    def get(self, round_id: str) -> RoundTracker:
        with self._lock:
            tracker = self._rounds.get(round_id)
        if tracker is None:
            raise RoundNotFound(round_id)
        return tracker

    def apply(self, round_id: str, fix: LocationFix) -> LocationUpdate:
        # registry lock is released before the per-round lock is taken
        return self.get(round_id).apply(fix)

    def change_course(self, round_id: str, course: CourseGeometry) -> None:
        self.get(round_id).change_course(course)

    def end_round(self, round_id: str) -> None:
        with self._lock:
            tracker = self._rounds.pop(round_id, None)
        if tracker is None:
            raise RoundNotFound(round_id)
        tracker.complete()

    def active_rounds(self) -> List[str]:
        with self._lock:
            return sorted(self._rounds)

    def __contains__(self, round_id: object) -> bool:
        with self._lock:
            return round_id in self._rounds

    def __len__(self) -> int:
        with self._lock:
            return len(self._rounds)


@lru_cache(maxsize=1)
def get_round_registry() -> RoundRegistry:
    return RoundRegistry()


__all__ = ["RoundRegistry", "RoundTracker", "get_round_registry"]
