"""Distance based club lookup."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True)
class ClubRange:
    name: str
    min_yd: float
    max_yd: float
    avg_yd: float
    trajectory: Literal["low", "mid", "high"]
    spin: Literal["low", "medium", "high"]

    @property
    def span(self) -> float:
        return self.max_yd - self.min_yd

    def gap(self, distance_yards: float) -> float:
        """Yards between ``distance_yards`` and this range (0 when inside)."""
        if distance_yards < self.min_yd:
            return self.min_yd - distance_yards
        if distance_yards > self.max_yd:
            return distance_yards - self.max_yd
        return 0.0


# Longest first. Typical amateur carry windows in yards; avg is the stock
# carry, not always the window centre.
CLUB_TABLE: Tuple[ClubRange, ...] = (
    ClubRange("Driver", 200, 300, 250, "low", "low"),
    ClubRange("3-Wood", 180, 250, 215, "mid", "low"),
    ClubRange("5-Wood", 160, 220, 190, "mid", "medium"),
    ClubRange("3-Iron", 150, 200, 175, "low", "low"),
    ClubRange("4-Iron", 140, 185, 162, "low", "medium"),
    ClubRange("5-Iron", 130, 170, 150, "mid", "medium"),
    ClubRange("6-Iron", 120, 160, 140, "mid", "medium"),
    ClubRange("7-Iron", 110, 150, 130, "mid", "medium"),
    ClubRange("8-Iron", 100, 140, 120, "mid", "high"),
    ClubRange("9-Iron", 90, 130, 110, "high", "high"),
    ClubRange("PW", 80, 120, 100, "high", "high"),
    ClubRange("SW", 60, 100, 80, "high", "high"),
    ClubRange("LW", 40, 80, 60, "high", "high"),
    ClubRange("Putter", 0, 30, 15, "low", "low"),
)

_BY_NAME = {club.name: club for club in CLUB_TABLE}

_CONDITION_FACTORS = {
    "wind": {"headwind": 1.1, "tailwind": 0.9},
    "elevation": {"uphill": 1.1, "downhill": 0.9},
    "pin": {"back": 1.05, "front": 0.95},
    "confidence": {"conservative": 1.05, "aggressive": 0.95},
}


class PlayConditions(BaseModel):
    """Coarse playing conditions applied as multipliers before the lookup."""

    wind: Optional[Literal["headwind", "tailwind", "crosswind", "calm"]] = None
    elevation: Optional[Literal["uphill", "downhill", "level"]] = None
    pin: Optional[Literal["front", "middle", "back"]] = None
    confidence: Optional[Literal["conservative", "aggressive"]] = None

    model_config = ConfigDict(frozen=True)


class ClubOption(BaseModel):
    club: str
    confidence: int
    shot: Literal["full", "easy", "hard"]

    model_config = ConfigDict(frozen=True)


def club_range(name: str) -> ClubRange:
    return _BY_NAME[name]


def club_rank(name: str) -> int:
    """0 for the shortest club, increasing towards the driver."""
    return len(CLUB_TABLE) - 1 - CLUB_TABLE.index(_BY_NAME[name])


def adjusted_distance(
    distance_yards: float, conditions: Optional[PlayConditions] = None
) -> float:
    if conditions is None:
        return distance_yards
    adjusted = distance_yards
    for attr, factors in _CONDITION_FACTORS.items():
        adjusted *= factors.get(getattr(conditions, attr), 1.0)
    return adjusted


def recommend_club(
    distance_yards: float, conditions: Optional[PlayConditions] = None
) -> str:
    """Pick the club whose carry window best fits the distance.

    Among the windows containing the distance, the one whose stock carry
    (``avg_yd``) is closest wins and a tie goes to the longer club. A distance
    outside every window takes the club with the nearest window edge, so
    anything past the driver's maximum is a driver and anything under the
    putter's minimum a putter.
    """

    if not math.isfinite(distance_yards):
        raise ValueError(f"distance must be finite, got {distance_yards!r}")
    target = adjusted_distance(distance_yards, conditions)
    containing = [club for club in CLUB_TABLE if club.gap(target) == 0.0]
    if containing:
        best = min(containing, key=lambda club: (abs(club.avg_yd - target), -club.avg_yd))
    else:
        best = min(CLUB_TABLE, key=lambda club: (club.gap(target), -club.avg_yd))
    return best.name


def club_options(distance_yards: float, limit: int = 3) -> List[ClubOption]:
    """Up to ``limit`` playable clubs, most comfortable first."""

    options: List[ClubOption] = []
    for club in CLUB_TABLE:
        if not (club.min_yd - 15 <= distance_yards <= club.max_yd + 15):
            continue
        from_mid = abs(distance_yards - club.avg_yd)
        confidence = max(50.0, 100.0 - (from_mid / club.span) * 100.0)
        shot: Literal["full", "easy", "hard"] = "full"
        if distance_yards < club.avg_yd - club.span * 0.2:
            shot = "easy"
        elif distance_yards > club.avg_yd + club.span * 0.2:
            shot = "hard"
        options.append(ClubOption(club=club.name, confidence=round(confidence), shot=shot))
    options.sort(key=lambda option: option.confidence, reverse=True)
    return options[:limit]


_APPROACH_BANDS = (
    (5, "Tap-in"),
    (15, "Short putt"),
    (30, "Long putt"),
    (50, "Chip shot"),
    (80, "Pitch shot"),
    (100, "Wedge shot"),
    (150, "Short iron"),
    (180, "Mid iron"),
    (210, "Long iron"),
)


def approach_shot_type(distance_yards: float) -> str:
    for upper, label in _APPROACH_BANDS:
        if distance_yards <= upper:
            return label
    return "Approach shot"


__all__ = [
    "CLUB_TABLE",
    "ClubOption",
    "ClubRange",
    "PlayConditions",
    "adjusted_distance",
    "approach_shot_type",
    "club_options",
    "club_range",
    "club_rank",
    "recommend_club",
]
