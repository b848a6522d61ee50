"""Rolling accuracy tracker deciding when a GPS signal has settled."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Deque, Optional, Tuple

log = logging.getLogger(__name__)

HISTORY_SIZE = 10
AVERAGE_WINDOW = 5


@dataclass
class GpsStabilityTracker:
    required_accuracy_m: float = 15.0
    required_duration_s: float = 3.0
    immediate_accuracy_m: float = 5.0
    _history: Deque[Tuple[datetime, float]] = field(
        default_factory=lambda: deque(maxlen=HISTORY_SIZE), init=False, repr=False
    )
    _started_at: Optional[datetime] = field(default=None, init=False, repr=False)
    _last_seen: Optional[datetime] = field(default=None, init=False, repr=False)

    def observe(self, accuracy_m: Optional[float], timestamp: datetime) -> None:
        """Record one reading. A missing accuracy restarts monitoring."""

        if accuracy_m is None or accuracy_m <= 0:
            self.reset()
            return
        if self._started_at is None:
            log.debug("gps stability monitoring started at %.1fm", accuracy_m)
            self._started_at = timestamp
        self._history.append((timestamp, accuracy_m))
        self._last_seen = timestamp

    def reset(self) -> None:
        self._history.clear()
        self._started_at = None
        self._last_seen = None

    @property
    def average_accuracy_m(self) -> Optional[float]:
        if not self._history:
            return None
        recent = list(self._history)[-AVERAGE_WINDOW:]
        return sum(acc for _, acc in recent) / len(recent)

    @property
    def duration_s(self) -> float:
        if self._started_at is None or self._last_seen is None:
            return 0.0
        return max(0.0, (self._last_seen - self._started_at).total_seconds())

    @property
    def progress(self) -> float:
        return min(self.duration_s / self.required_duration_s * 100.0, 100.0)

    @property
    def is_stable(self) -> bool:
        average = self.average_accuracy_m
        return (
            average is not None
            and self.duration_s >= self.required_duration_s
            and average <= self.required_accuracy_m
        )

    @property
    def can_render(self) -> bool:
        average = self.average_accuracy_m
        return self.is_stable or (
            average is not None and average <= self.immediate_accuracy_m
        )


__all__ = ["GpsStabilityTracker"]
